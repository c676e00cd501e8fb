import logging

from sqlalchemy.orm import Session

from core.errors import AccessDenied, Conflict, NotFound
from models.shared_list import SharedList, SharedWord
from repositories.shared_list_repo import SharedListRepository
from repositories.user_repo import UserRepository
from services.access_policy import can_access_list, can_manage_list, can_remove_word
from services.text import optional_text, required_text

logger = logging.getLogger(__name__)

LIST_NOT_FOUND = "List not found"


class SharedListService:
    def __init__(self, db: Session):
        self.repo = SharedListRepository(db)
        self.user_repo = UserRepository(db)

    def _load(self, list_id: int) -> SharedList:
        shared_list = self.repo.get(list_id)
        if shared_list is None:
            raise NotFound(LIST_NOT_FOUND)
        return shared_list

    def _load_managed(self, list_id: int, actor_id: int) -> SharedList:
        shared_list = self._load(list_id)
        if not can_manage_list(actor_id, shared_list):
            raise AccessDenied("Only the list owner can do that")
        return shared_list

    def create_list(self, *, owner_id: int, name: str, description: str | None = None) -> SharedList:
        shared_list = self.repo.create(
            owner_id=owner_id,
            name=required_text(name, "List name is required"),
            description=optional_text(description),
        )
        logger.info("User %s created shared list %s", owner_id, shared_list.id)
        return shared_list

    def list_owned_by(self, user_id: int) -> list[SharedList]:
        return self.repo.list_owned_by(user_id)

    def list_shared_with(self, user_id: int) -> list[SharedList]:
        return self.repo.list_shared_with(user_id)

    def get_list(self, *, list_id: int, actor_id: int) -> SharedList:
        shared_list = self._load(list_id)
        if not can_access_list(actor_id, shared_list):
            raise AccessDenied()
        return shared_list

    def add_collaborator(self, *, list_id: int, actor_id: int, target_id: int) -> SharedList:
        shared_list = self._load_managed(list_id, actor_id)
        if not self.user_repo.exists(target_id):
            raise NotFound("User not found")
        if target_id == shared_list.owner_id:
            raise Conflict("The owner cannot be added as a collaborator")
        if target_id in shared_list.collaborator_ids:
            raise Conflict("User is already a collaborator")
        if not self.repo.add_collaborator(list_id=list_id, user_id=target_id):
            # lost a race with a concurrent add of the same user
            raise Conflict("User is already a collaborator")
        logger.info("User %s shared list %s with user %s", actor_id, list_id, target_id)
        return self._load(list_id)

    def remove_collaborator(self, *, list_id: int, actor_id: int, target_id: int) -> None:
        self._load_managed(list_id, actor_id)
        if self.repo.remove_collaborator(list_id=list_id, user_id=target_id):
            logger.info("User %s removed user %s from list %s", actor_id, target_id, list_id)

    def add_word(
        self,
        *,
        list_id: int,
        actor_id: int,
        word: str,
        translation: str,
        example: str | None = None,
        language: str | None = None,
    ) -> SharedWord:
        shared_list = self._load(list_id)
        if not can_access_list(actor_id, shared_list):
            raise AccessDenied()
        message = "Word and translation are required"
        entry = self.repo.add_word(
            list_id=list_id,
            contributor_id=actor_id,
            word=required_text(word, message),
            translation=required_text(translation, message),
            example=optional_text(example),
            language=optional_text(language),
        )
        logger.info("User %s added word %s to list %s", actor_id, entry.id, list_id)
        return entry

    def remove_word(self, *, list_id: int, actor_id: int, word_id: int) -> None:
        shared_list = self._load(list_id)
        word = self.repo.get_word(list_id=list_id, word_id=word_id)
        if word is None:
            raise NotFound("Word not found")
        if not can_remove_word(actor_id, shared_list, word):
            raise AccessDenied()
        self.repo.remove_word(list_id=list_id, word_id=word_id)
        logger.info("User %s removed word %s from list %s", actor_id, word_id, list_id)

    def delete_list(self, *, list_id: int, actor_id: int) -> None:
        shared_list = self._load_managed(list_id, actor_id)
        self.repo.delete(shared_list)
        logger.info("User %s deleted shared list %s", actor_id, list_id)
