# charity_events/routes/pages.py
from fastapi import APIRouter
from fastapi.responses import FileResponse

from charity_events.config import config

router = APIRouter(include_in_schema=False)


@router.get("/")
async def home_page():
    return FileResponse(config.STATIC_DIR / "index.html")


@router.get("/search")
async def search_page():
    return FileResponse(config.STATIC_DIR / "search.html")


@router.get("/event/{event_id}")
async def event_page(event_id: str):
    return FileResponse(config.STATIC_DIR / "detail.html")


@router.get("/admin")
async def admin_page():
    return FileResponse(config.STATIC_DIR / "admin.html")
