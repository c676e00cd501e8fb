from pydantic import constr

from schemas.common import CamelModel


class WordDetailsIn(CamelModel):
    word: constr(strip_whitespace=True, min_length=1, max_length=100)
    target_language: constr(strip_whitespace=True, max_length=50) | None = None


class WordDetailsOut(CamelModel):
    translation: str
    example: str
    language: str
