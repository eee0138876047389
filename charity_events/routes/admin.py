# charity_events/routes/admin.py
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from charity_events.database import get_db
from charity_events.schemas.event import EventRead, EventWrite, Statistics
from charity_events.services import events as event_service

router = APIRouter(
    tags=["Admin"],
    prefix="/admin",
    responses={404: {"description": "Event not found"}},
)


@router.get("/statistics", response_model=Statistics)
async def read_statistics(db: AsyncSession = Depends(get_db)):
    return await event_service.get_statistics(db)


@router.get("/events", response_model=List[EventRead])
async def read_admin_events(db: AsyncSession = Depends(get_db)):
    """Every event regardless of status, latest date first."""
    return await event_service.list_admin_events(db)


@router.post("/events")
async def create_event(event: EventWrite, db: AsyncSession = Depends(get_db)):
    event_id = await event_service.create_event(db, event)
    return {"message": "Event created", "id": event_id}


@router.put("/events/{event_id}")
async def update_event(event_id: str, event: EventWrite, db: AsyncSession = Depends(get_db)):
    await event_service.update_event(db, event_id, event)
    return {"message": "Event updated"}


@router.delete("/events/{event_id}")
async def delete_event(event_id: str, db: AsyncSession = Depends(get_db)):
    await event_service.delete_event(db, event_id)
    return {"message": "Event deleted"}
