import logging
from typing import Union

from pydantic import SecretStr
from sqlalchemy.orm import Session

from core.errors import Conflict, InvalidCredentials, NotFound
from core.security import hash_password, verify_password
from models.user import User
from repositories.user_repo import UserRepository

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, db: Session):
        self.repo = UserRepository(db)

    def register(self, *, email: str, full_name: str, password: Union[str, SecretStr], profile_pic: str = "") -> User:
        if self.repo.get_by_email(email):
            raise Conflict("Email already registered")
        user = self.repo.create(
            email=email,
            full_name=full_name,
            password_hash=hash_password(password),
            profile_pic=profile_pic,
        )
        logger.info("Registered user %s", user.id)
        return user

    def login(self, *, email: str, password: Union[str, SecretStr]) -> User:
        user = self.repo.get_by_email(email)
        if not user or not verify_password(password, user.password_hash):
            raise InvalidCredentials()
        return user

    def get_user(self, user_id: int) -> User:
        user = self.repo.get_by_id(user_id)
        if user is None:
            raise NotFound("User not found")
        return user
