from typing import Dict, Any
from pydantic import BaseModel


class StoreStatsResponse(BaseModel):
    people: int
    dogs: int
    likes: int
    sealed: bool
    metadata: Dict[str, Any]
