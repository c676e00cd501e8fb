from datetime import timedelta

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from authx import AuthX, AuthXConfig, TokenPayload
from core.config import settings
from core.database import get_db
from schemas.auth import LoginIn, RegisterIn, UserOut
from schemas.common import MessageOut
from services.auth_services import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])

_cookie_samesite = settings.JWT_COOKIE_SAMESITE.lower() if settings.JWT_COOKIE_SAMESITE else None
_cookie_domain = settings.JWT_COOKIE_DOMAIN or None

config = AuthXConfig(
    JWT_SECRET_KEY=settings.SECRET_KEY,
    JWT_ALGORITHM=settings.JWT_ALG,
    JWT_ACCESS_TOKEN_EXPIRES=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    JWT_TOKEN_LOCATION=["cookies"],
    JWT_ACCESS_COOKIE_NAME=settings.JWT_ACCESS_COOKIE_NAME,
    JWT_COOKIE_SAMESITE=_cookie_samesite or "lax",
    JWT_COOKIE_SECURE=settings.JWT_COOKIE_SECURE,
    JWT_COOKIE_DOMAIN=_cookie_domain,
    JWT_COOKIE_CSRF_PROTECT=settings.JWT_COOKIE_CSRF_PROTECT,
)

security = AuthX(config=config)


async def current_user_id(payload: TokenPayload = Depends(security.access_token_required)) -> int:
    """The authenticated actor for every protected route."""
    try:
        return int(payload.sub)
    except (TypeError, ValueError) as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid subject in token") from exc


@router.post("/register", response_model=UserOut, status_code=201)
async def register(data: RegisterIn, db: Session = Depends(get_db)):
    svc = AuthService(db)
    user = svc.register(
        email=data.email,
        full_name=data.full_name,
        password=data.password,
        profile_pic=data.profile_pic,
    )
    return UserOut.model_validate(user)


@router.post("/login", response_model=UserOut)
async def login(response: Response, data: LoginIn, db: Session = Depends(get_db)):
    svc = AuthService(db)
    user = svc.login(email=data.email, password=data.password)

    access_token = security.create_access_token(uid=str(user.id))
    security.set_access_cookies(access_token, response)
    return UserOut.model_validate(user)


@router.post("/logout", response_model=MessageOut)
async def logout(response: Response):
    security.unset_cookies(response)
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=UserOut)
async def me(user_id: int = Depends(current_user_id), db: Session = Depends(get_db)):
    user = AuthService(db).get_user(user_id)
    return UserOut.model_validate(user)
