import logging

from sqlalchemy.orm import Session

from core.errors import NotFound
from models.vocabulary import VocabularyEntry
from repositories.pagination import Page, PageRequest
from repositories.vocabulary_repo import VocabularyRepository
from services.text import optional_text, required_text

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Vocabulary item not found"
REQUIRED_MESSAGE = "Word and translation are required"


class VocabularyService:
    UNSET = object()

    def __init__(self, db: Session):
        self.repo = VocabularyRepository(db)

    def list_entries(self, *, user_id: int, request: PageRequest) -> Page:
        return self.repo.page(user_id=user_id, request=request)

    def add(
        self,
        *,
        user_id: int,
        word: str,
        translation: str,
        example: str | None = None,
        language: str | None = None,
    ) -> VocabularyEntry:
        entry = self.repo.add(
            user_id=user_id,
            word=required_text(word, REQUIRED_MESSAGE),
            translation=required_text(translation, REQUIRED_MESSAGE),
            example=optional_text(example),
            language=optional_text(language),
        )
        logger.info("User %s added vocabulary entry %s", user_id, entry.id)
        return entry

    def update(
        self,
        *,
        user_id: int,
        entry_id: int,
        word=UNSET,
        translation=UNSET,
        example=UNSET,
        language=UNSET,
    ) -> VocabularyEntry:
        """Apply only the supplied fields.

        A blank word or translation counts as not supplied. An explicit empty
        string clears example/language; ``None`` leaves them untouched.
        """
        updates = {}
        for field, value in (("word", word), ("translation", translation)):
            if value is self.UNSET or value is None:
                continue
            cleaned = value.strip()
            if cleaned:
                updates[field] = cleaned
        for field, value in (("example", example), ("language", language)):
            if value is self.UNSET or value is None:
                continue
            updates[field] = value.strip()

        entry = self.repo.get(entry_id=entry_id, user_id=user_id)
        if entry is None:
            raise NotFound(NOT_FOUND_MESSAGE)
        if not updates:
            return entry
        return self.repo.update(entry_id=entry_id, user_id=user_id, updates=updates)

    def delete(self, *, user_id: int, entry_id: int) -> None:
        if not self.repo.delete(entry_id=entry_id, user_id=user_id):
            raise NotFound(NOT_FOUND_MESSAGE)
        logger.info("User %s deleted vocabulary entry %s", user_id, entry_id)

    def export_all(self, user_id: int) -> list[VocabularyEntry]:
        return self.repo.list_all(user_id)
