"""Tests for the shared-list access predicates."""

from types import SimpleNamespace

from services.access_policy import can_access_list, can_manage_list, can_remove_word

OWNER, COLLABORATOR, OUTSIDER = 1, 2, 3


def make_list(collaborators=(COLLABORATOR,)):
    return SimpleNamespace(owner_id=OWNER, collaborator_ids=frozenset(collaborators))


def make_word(contributor_id):
    return SimpleNamespace(contributor_id=contributor_id)


class TestCanAccessList:
    def test_owner_and_collaborator_have_access(self) -> None:
        shared_list = make_list()
        assert can_access_list(OWNER, shared_list)
        assert can_access_list(COLLABORATOR, shared_list)

    def test_outsider_has_no_access(self) -> None:
        assert not can_access_list(OUTSIDER, make_list())

    def test_removed_collaborator_loses_access(self) -> None:
        assert not can_access_list(COLLABORATOR, make_list(collaborators=()))


class TestCanManageList:
    def test_only_owner_manages(self) -> None:
        shared_list = make_list()
        assert can_manage_list(OWNER, shared_list)
        assert not can_manage_list(COLLABORATOR, shared_list)
        assert not can_manage_list(OUTSIDER, shared_list)


class TestCanRemoveWord:
    def test_owner_removes_any_word(self) -> None:
        assert can_remove_word(OWNER, make_list(), make_word(COLLABORATOR))

    def test_contributor_removes_own_word(self) -> None:
        assert can_remove_word(COLLABORATOR, make_list(), make_word(COLLABORATOR))

    def test_other_collaborator_cannot_remove(self) -> None:
        shared_list = make_list(collaborators=(COLLABORATOR, OUTSIDER))
        assert not can_remove_word(OUTSIDER, shared_list, make_word(COLLABORATOR))

    def test_non_member_non_contributor_cannot_remove(self) -> None:
        assert not can_remove_word(OUTSIDER, make_list(), make_word(OWNER))
