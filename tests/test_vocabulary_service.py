import pytest

from core.errors import NotFound, ValidationError
from services.vocabulary_service import VocabularyService


@pytest.fixture
def svc(db):
    return VocabularyService(db)


def test_add_requires_word_and_translation(svc, users):
    with pytest.raises(ValidationError):
        svc.add(user_id=users["alice"], word="  ", translation="cat")
    with pytest.raises(ValidationError):
        svc.add(user_id=users["alice"], word="gato", translation="")


def test_add_defaults_optional_fields(svc, users):
    entry = svc.add(user_id=users["alice"], word=" gato ", translation="cat")
    assert entry.word == "gato"
    assert entry.example == ""
    assert entry.language == ""
    assert entry.created_at is not None


def test_update_keeps_omitted_fields(svc, users):
    entry = svc.add(user_id=users["alice"], word="gato", translation="cat", example="El gato duerme", language="Spanish")
    updated = svc.update(user_id=users["alice"], entry_id=entry.id, translation="kitty")
    assert updated.translation == "kitty"
    assert updated.word == "gato"
    assert updated.example == "El gato duerme"
    assert updated.language == "Spanish"


def test_update_with_empty_example_clears_it(svc, users):
    entry = svc.add(user_id=users["alice"], word="gato", translation="cat", example="El gato duerme")
    updated = svc.update(user_id=users["alice"], entry_id=entry.id, example="")
    assert updated.example == ""
    assert updated.language == ""


def test_update_ignores_blank_word(svc, users):
    entry = svc.add(user_id=users["alice"], word="gato", translation="cat")
    updated = svc.update(user_id=users["alice"], entry_id=entry.id, word="   ", translation=None)
    assert updated.word == "gato"
    assert updated.translation == "cat"


def test_update_of_foreign_entry_is_not_found(svc, users):
    entry = svc.add(user_id=users["alice"], word="gato", translation="cat")
    with pytest.raises(NotFound):
        svc.update(user_id=users["bob"], entry_id=entry.id, word="perro")
    with pytest.raises(NotFound):
        svc.update(user_id=users["alice"], entry_id=entry.id + 100, word="perro")


def test_delete_of_foreign_entry_is_not_found(svc, users):
    entry = svc.add(user_id=users["alice"], word="gato", translation="cat")
    with pytest.raises(NotFound):
        svc.delete(user_id=users["bob"], entry_id=entry.id)
    svc.delete(user_id=users["alice"], entry_id=entry.id)
    with pytest.raises(NotFound):
        svc.delete(user_id=users["alice"], entry_id=entry.id)


def test_export_is_scoped_and_newest_first(svc, users):
    first = svc.add(user_id=users["alice"], word="gato", translation="cat")
    second = svc.add(user_id=users["alice"], word="perro", translation="dog")
    svc.add(user_id=users["bob"], word="hund", translation="dog")

    exported = svc.export_all(users["alice"])
    assert [entry.id for entry in exported] == [second.id, first.id]
    assert svc.export_all(users["carol"]) == []
