from datetime import datetime

from pydantic import constr

from schemas.common import CamelModel, PaginationOut, Timestamped


class VocabularyCreateIn(CamelModel):
    word: constr(strip_whitespace=True, min_length=1, max_length=100)
    translation: constr(strip_whitespace=True, min_length=1, max_length=255)
    example: constr(strip_whitespace=True, max_length=500) | None = None
    language: constr(strip_whitespace=True, max_length=50) | None = None


class VocabularyUpdateIn(CamelModel):
    """Every field is optional; only the ones present in the body are applied."""

    word: constr(max_length=100) | None = None
    translation: constr(max_length=255) | None = None
    example: constr(max_length=500) | None = None
    language: constr(max_length=50) | None = None


class VocabularyOut(Timestamped):
    id: int
    word: str
    translation: str
    example: str = ""
    language: str = ""
    updated_at: datetime


class VocabularyPageOut(CamelModel):
    vocab: list[VocabularyOut]
    pagination: PaginationOut
