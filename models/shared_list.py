from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Table, UniqueConstraint
from sqlalchemy.orm import relationship

from core.database import Base, utcnow
from models.user import User


shared_list_collaborators = Table(
    "shared_list_collaborators",
    Base.metadata,
    Column("list_id", Integer, ForeignKey("shared_lists.id", ondelete="CASCADE"), nullable=False, index=True),
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True),
    UniqueConstraint("list_id", "user_id", name="uq_shared_list_collaborators_list_user"),
)


class SharedList(Base):
    __tablename__ = "shared_lists"

    id = Column(Integer, primary_key=True)
    name = Column(String(100), nullable=False)
    description = Column(String(500), nullable=False, default="", server_default="")
    owner_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)

    owner = relationship(User, lazy="joined")
    collaborators = relationship(
        User,
        secondary=shared_list_collaborators,
        collection_class=set,
        lazy="selectin",
    )
    words = relationship(
        "SharedWord",
        back_populates="shared_list",
        order_by="SharedWord.id",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    @property
    def collaborator_ids(self) -> frozenset[int]:
        return frozenset(user.id for user in self.collaborators)


class SharedWord(Base):
    __tablename__ = "shared_list_words"

    id = Column(Integer, primary_key=True)
    list_id = Column(Integer, ForeignKey("shared_lists.id", ondelete="CASCADE"), nullable=False, index=True)
    word = Column(String(100), nullable=False)
    translation = Column(String(255), nullable=False)
    example = Column(String(500), nullable=False, default="", server_default="")
    language = Column(String(50), nullable=False, default="", server_default="")
    contributor_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    shared_list = relationship("SharedList", back_populates="words")
    contributor = relationship(User, lazy="joined")
