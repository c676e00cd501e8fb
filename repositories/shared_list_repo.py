from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.database import is_storable_id, utcnow
from models.shared_list import SharedList, SharedWord, shared_list_collaborators


class SharedListRepository:
    """Persistence for shared lists.

    Membership and word changes are single INSERT/DELETE statements on the
    child tables, never a rewrite of the parent row, so concurrent
    collaborators cannot overwrite each other's additions.
    """

    def __init__(self, db: Session):
        self.db = db

    def _touch(self, list_id: int) -> None:
        self.db.execute(
            update(SharedList).where(SharedList.id == list_id).values(updated_at=utcnow())
        )

    def create(self, *, owner_id: int, name: str, description: str = "") -> SharedList:
        entity = SharedList(owner_id=owner_id, name=name, description=description)
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def get(self, list_id: int) -> SharedList | None:
        if not is_storable_id(list_id):
            return None
        return self.db.get(SharedList, list_id)

    def list_owned_by(self, user_id: int) -> list[SharedList]:
        stmt = (
            select(SharedList)
            .where(SharedList.owner_id == user_id)
            .order_by(SharedList.updated_at.desc(), SharedList.id.desc())
        )
        return list(self.db.execute(stmt).unique().scalars())

    def list_shared_with(self, user_id: int) -> list[SharedList]:
        stmt = (
            select(SharedList)
            .join(shared_list_collaborators, shared_list_collaborators.c.list_id == SharedList.id)
            .where(shared_list_collaborators.c.user_id == user_id)
            .order_by(SharedList.updated_at.desc(), SharedList.id.desc())
        )
        return list(self.db.execute(stmt).unique().scalars())

    def add_collaborator(self, *, list_id: int, user_id: int) -> bool:
        """Insert a membership row; False when the user is already a member."""
        try:
            self.db.execute(
                insert(shared_list_collaborators).values(list_id=list_id, user_id=user_id)
            )
            self._touch(list_id)
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            return False
        return True

    def remove_collaborator(self, *, list_id: int, user_id: int) -> bool:
        if not is_storable_id(user_id):
            return False
        result = self.db.execute(
            delete(shared_list_collaborators).where(
                shared_list_collaborators.c.list_id == list_id,
                shared_list_collaborators.c.user_id == user_id,
            )
        )
        removed = result.rowcount > 0
        if removed:
            self._touch(list_id)
        self.db.commit()
        return removed

    def add_word(
        self,
        *,
        list_id: int,
        contributor_id: int,
        word: str,
        translation: str,
        example: str = "",
        language: str = "",
    ) -> SharedWord:
        entity = SharedWord(
            list_id=list_id,
            contributor_id=contributor_id,
            word=word,
            translation=translation,
            example=example,
            language=language,
        )
        self.db.add(entity)
        self.db.flush()
        self._touch(list_id)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def get_word(self, *, list_id: int, word_id: int) -> SharedWord | None:
        if not is_storable_id(word_id):
            return None
        stmt = select(SharedWord).where(
            SharedWord.id == word_id,
            SharedWord.list_id == list_id,
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def remove_word(self, *, list_id: int, word_id: int) -> bool:
        if not is_storable_id(word_id):
            return False
        result = self.db.execute(
            delete(SharedWord).where(
                SharedWord.id == word_id,
                SharedWord.list_id == list_id,
            )
        )
        removed = result.rowcount > 0
        if removed:
            self._touch(list_id)
        self.db.commit()
        return removed

    def delete(self, shared_list: SharedList) -> None:
        self.db.delete(shared_list)
        self.db.commit()
