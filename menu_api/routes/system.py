"""routes/system.py – /health"""
from datetime import datetime

from fastapi import APIRouter

from ..core.errors import StoreError
from ..deps import get_store
from ..models import HealthResponse

router = APIRouter(tags=["System"])


@router.get("/health", response_model=HealthResponse)
async def health():
    try:
        database = "ok" if await get_store().ping() else "error"
    except StoreError:
        database = "error"
    return HealthResponse(status="ok", time=datetime.now().isoformat(), database=database)
