"""Who may do what to a shared list.

Predicates only look at the snapshot they are given and never raise.
"""

from models.shared_list import SharedList, SharedWord


def can_access_list(actor_id: int, shared_list: SharedList) -> bool:
    return actor_id == shared_list.owner_id or actor_id in shared_list.collaborator_ids


def can_manage_list(actor_id: int, shared_list: SharedList) -> bool:
    return actor_id == shared_list.owner_id


def can_remove_word(actor_id: int, shared_list: SharedList, word: SharedWord) -> bool:
    return actor_id == shared_list.owner_id or actor_id == word.contributor_id
