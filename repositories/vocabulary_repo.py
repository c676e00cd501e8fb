from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from core.database import is_storable_id
from models.vocabulary import VocabularyEntry
from repositories.pagination import Page, PageRequest, paginate

SORT_COLUMNS = {
    "createdAt": VocabularyEntry.created_at,
    "word": VocabularyEntry.word,
}


class VocabularyRepository:
    def __init__(self, db: Session):
        self.db = db

    def add(
        self,
        *,
        user_id: int,
        word: str,
        translation: str,
        example: str = "",
        language: str = "",
    ) -> VocabularyEntry:
        entity = VocabularyEntry(
            user_id=user_id,
            word=word,
            translation=translation,
            example=example,
            language=language,
        )
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def get(self, *, entry_id: int, user_id: int) -> VocabularyEntry | None:
        if not is_storable_id(entry_id):
            return None
        stmt = select(VocabularyEntry).where(
            VocabularyEntry.id == entry_id,
            VocabularyEntry.user_id == user_id,
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def page(self, *, user_id: int, request: PageRequest) -> Page:
        return paginate(
            self.db,
            VocabularyEntry,
            request=request,
            filters=[VocabularyEntry.user_id == user_id],
            search_columns=[VocabularyEntry.word, VocabularyEntry.translation],
            sort_columns=SORT_COLUMNS,
        )

    def update(self, *, entry_id: int, user_id: int, updates: dict[str, Any]) -> VocabularyEntry | None:
        entity = self.get(entry_id=entry_id, user_id=user_id)
        if entity is None:
            return None
        for field, value in updates.items():
            setattr(entity, field, value)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def delete(self, *, entry_id: int, user_id: int) -> bool:
        entity = self.get(entry_id=entry_id, user_id=user_id)
        if entity is None:
            return False
        self.db.delete(entity)
        self.db.commit()
        return True

    def list_all(self, user_id: int) -> list[VocabularyEntry]:
        stmt = (
            select(VocabularyEntry)
            .where(VocabularyEntry.user_id == user_id)
            .order_by(VocabularyEntry.created_at.desc(), VocabularyEntry.id.desc())
        )
        return list(self.db.execute(stmt).scalars())
