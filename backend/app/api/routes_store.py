from fastapi import APIRouter, Depends

from backend.app.api.schemas import StoreStatsResponse
from backend.app.dependencies import get_store

router = APIRouter()


@router.get("/stats", response_model=StoreStatsResponse)
def store_stats(store=Depends(get_store)):
    return StoreStatsResponse(
        people=store.person_count(),
        dogs=store.dog_count(),
        likes=store.total_likes(),
        sealed=store.sealed,
        metadata=store.metadata,
    )
