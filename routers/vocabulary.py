from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from core.config import settings
from core.database import get_db
from repositories.pagination import PageRequest
from schemas.common import MessageOut, PaginationOut
from schemas.vocabulary import VocabularyCreateIn, VocabularyOut, VocabularyPageOut, VocabularyUpdateIn
from services.vocabulary_service import VocabularyService
from .auth import current_user_id

router = APIRouter(prefix="/vocabulary", tags=["vocabulary"])


@router.get("", response_model=VocabularyPageOut)
async def list_vocabulary(
    page: int = Query(1),
    limit: int = Query(settings.VOCAB_PAGE_SIZE),
    search: str | None = Query(None),
    sort: str = Query("createdAt"),
    order: str = Query("desc"),
    user_id: int = Depends(current_user_id),
    db: Session = Depends(get_db),
):
    request = PageRequest(page=page, limit=limit, search=search, sort=sort, order=order)
    result = VocabularyService(db).list_entries(user_id=user_id, request=request)
    return VocabularyPageOut(
        vocab=[VocabularyOut.model_validate(entry) for entry in result.items],
        pagination=PaginationOut(
            total_items=result.total_items,
            total_pages=result.total_pages,
            current_page=result.current_page,
        ),
    )


@router.get("/export", response_model=list[VocabularyOut])
async def export_vocabulary(
    user_id: int = Depends(current_user_id),
    db: Session = Depends(get_db),
):
    entries = VocabularyService(db).export_all(user_id)
    return [VocabularyOut.model_validate(entry) for entry in entries]


@router.post("", response_model=VocabularyOut, status_code=201)
async def add_vocabulary(
    data: VocabularyCreateIn,
    user_id: int = Depends(current_user_id),
    db: Session = Depends(get_db),
):
    entry = VocabularyService(db).add(
        user_id=user_id,
        word=data.word,
        translation=data.translation,
        example=data.example,
        language=data.language,
    )
    return VocabularyOut.model_validate(entry)


@router.put("/{entry_id}", response_model=VocabularyOut)
async def update_vocabulary(
    entry_id: int,
    data: VocabularyUpdateIn,
    user_id: int = Depends(current_user_id),
    db: Session = Depends(get_db),
):
    entry = VocabularyService(db).update(
        user_id=user_id,
        entry_id=entry_id,
        **data.model_dump(exclude_unset=True),
    )
    return VocabularyOut.model_validate(entry)


@router.delete("/{entry_id}", response_model=MessageOut)
async def delete_vocabulary(
    entry_id: int,
    user_id: int = Depends(current_user_id),
    db: Session = Depends(get_db),
):
    VocabularyService(db).delete(user_id=user_id, entry_id=entry_id)
    return {"message": "Vocabulary item deleted successfully"}
