from datetime import datetime

from pydantic import Field, constr, field_validator

from schemas.common import CamelModel, Timestamped, UserBrief


class SharedListCreateIn(CamelModel):
    name: constr(strip_whitespace=True, min_length=1, max_length=100)
    description: constr(strip_whitespace=True, max_length=500) | None = None


class CollaboratorIn(CamelModel):
    friend_id: int


class SharedWordCreateIn(CamelModel):
    word: constr(strip_whitespace=True, min_length=1, max_length=100)
    translation: constr(strip_whitespace=True, min_length=1, max_length=255)
    example: constr(strip_whitespace=True, max_length=500) | None = None
    language: constr(strip_whitespace=True, max_length=50) | None = None


class SharedWordOut(Timestamped):
    id: int
    word: str
    translation: str
    example: str = ""
    language: str = ""
    contributor: UserBrief


class SharedListOut(Timestamped):
    id: int
    name: str
    description: str = ""
    owner: UserBrief
    collaborators: list[UserBrief] = Field(default_factory=list)
    words: list[SharedWordOut] = Field(default_factory=list)
    updated_at: datetime

    @field_validator("collaborators", mode="before")
    @classmethod
    def _stable_collaborator_order(cls, value):
        if isinstance(value, (set, frozenset)):
            return sorted(value, key=lambda user: user.id)
        return value
