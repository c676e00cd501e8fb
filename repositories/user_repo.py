from sqlalchemy.orm import Session
from sqlalchemy import select

from core.database import is_storable_id
from models.user import User


class UserRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_email(self, email: str) -> User | None:
        return self.db.execute(select(User).where(User.email == email)).scalar_one_or_none()

    def get_by_id(self, user_id: int) -> User | None:
        if not is_storable_id(user_id):
            return None
        return self.db.get(User, user_id)

    def exists(self, user_id: int) -> bool:
        if not is_storable_id(user_id):
            return False
        stmt = select(User.id).where(User.id == user_id)
        return self.db.execute(stmt).scalar_one_or_none() is not None

    def create(self, *, email: str, full_name: str, password_hash: str, profile_pic: str = "") -> User:
        user = User(email=email, full_name=full_name, password_hash=password_hash, profile_pic=profile_pic)
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user
