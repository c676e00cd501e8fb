from sqlalchemy import Column, DateTime, ForeignKey, Integer, String

from core.database import Base, utcnow
from models.user import User  # noqa: F401  (resolves the users FK)


class VocabularyEntry(Base):
    __tablename__ = "vocabulary"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    word = Column(String(100), nullable=False, index=True)
    translation = Column(String(255), nullable=False, index=True)
    example = Column(String(500), nullable=False, default="", server_default="")
    language = Column(String(50), nullable=False, default="", server_default="")
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
