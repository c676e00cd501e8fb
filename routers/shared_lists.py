from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.database import get_db
from schemas.common import MessageOut
from schemas.shared_list import (
    CollaboratorIn,
    SharedListCreateIn,
    SharedListOut,
    SharedWordCreateIn,
    SharedWordOut,
)
from services.shared_list_service import SharedListService
from .auth import current_user_id

router = APIRouter(prefix="/shared-lists", tags=["shared-lists"])


@router.post("", response_model=SharedListOut, status_code=201)
async def create_shared_list(
    data: SharedListCreateIn,
    user_id: int = Depends(current_user_id),
    db: Session = Depends(get_db),
):
    shared_list = SharedListService(db).create_list(
        owner_id=user_id,
        name=data.name,
        description=data.description,
    )
    return SharedListOut.model_validate(shared_list)


@router.get("/my-lists", response_model=list[SharedListOut])
async def get_my_lists(
    user_id: int = Depends(current_user_id),
    db: Session = Depends(get_db),
):
    lists = SharedListService(db).list_owned_by(user_id)
    return [SharedListOut.model_validate(item) for item in lists]


@router.get("/shared-with-me", response_model=list[SharedListOut])
async def get_shared_with_me(
    user_id: int = Depends(current_user_id),
    db: Session = Depends(get_db),
):
    lists = SharedListService(db).list_shared_with(user_id)
    return [SharedListOut.model_validate(item) for item in lists]


@router.get("/{list_id}", response_model=SharedListOut)
async def get_shared_list(
    list_id: int,
    user_id: int = Depends(current_user_id),
    db: Session = Depends(get_db),
):
    shared_list = SharedListService(db).get_list(list_id=list_id, actor_id=user_id)
    return SharedListOut.model_validate(shared_list)


@router.post("/{list_id}/collaborator", response_model=SharedListOut)
async def add_collaborator(
    list_id: int,
    data: CollaboratorIn,
    user_id: int = Depends(current_user_id),
    db: Session = Depends(get_db),
):
    shared_list = SharedListService(db).add_collaborator(
        list_id=list_id,
        actor_id=user_id,
        target_id=data.friend_id,
    )
    return SharedListOut.model_validate(shared_list)


@router.delete("/{list_id}/collaborator/{friend_id}", response_model=MessageOut)
async def remove_collaborator(
    list_id: int,
    friend_id: int,
    user_id: int = Depends(current_user_id),
    db: Session = Depends(get_db),
):
    SharedListService(db).remove_collaborator(list_id=list_id, actor_id=user_id, target_id=friend_id)
    return {"message": "Collaborator removed successfully"}


@router.post("/{list_id}/word", response_model=SharedWordOut, status_code=201)
async def add_word(
    list_id: int,
    data: SharedWordCreateIn,
    user_id: int = Depends(current_user_id),
    db: Session = Depends(get_db),
):
    word = SharedListService(db).add_word(
        list_id=list_id,
        actor_id=user_id,
        word=data.word,
        translation=data.translation,
        example=data.example,
        language=data.language,
    )
    return SharedWordOut.model_validate(word)


@router.delete("/{list_id}/word/{word_id}", response_model=MessageOut)
async def remove_word(
    list_id: int,
    word_id: int,
    user_id: int = Depends(current_user_id),
    db: Session = Depends(get_db),
):
    SharedListService(db).remove_word(list_id=list_id, actor_id=user_id, word_id=word_id)
    return {"message": "Word removed successfully"}


@router.delete("/{list_id}", response_model=MessageOut)
async def delete_shared_list(
    list_id: int,
    user_id: int = Depends(current_user_id),
    db: Session = Depends(get_db),
):
    SharedListService(db).delete_list(list_id=list_id, actor_id=user_id)
    return {"message": "List deleted successfully"}
