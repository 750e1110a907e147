"""routes/pages.py – GET / (menu page), GET /manage (management page)"""
from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"

router = APIRouter(tags=["Pages"], include_in_schema=False)


@router.get("/")
async def home_page():
    return FileResponse(STATIC_DIR / "index.html", media_type="text/html")


@router.get("/manage")
async def manage_page():
    return FileResponse(STATIC_DIR / "manage.html", media_type="text/html")
