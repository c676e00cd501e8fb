from fastapi import APIRouter, Depends

from schemas.ai import WordDetailsIn, WordDetailsOut
from services.word_details_service import WordDetailsService
from .auth import current_user_id

router = APIRouter(prefix="/ai", tags=["ai"])


def get_word_details_service() -> WordDetailsService:
    return WordDetailsService()


@router.post("/word-details", response_model=WordDetailsOut, dependencies=[Depends(current_user_id)])
async def word_details(
    data: WordDetailsIn,
    svc: WordDetailsService = Depends(get_word_details_service),
):
    details = await svc.generate(word=data.word, target_language=data.target_language)
    return WordDetailsOut(**details)
