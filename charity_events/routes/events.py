# charity_events/routes/events.py
from typing import List, Optional
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from charity_events.database import get_db
from charity_events.schemas.event import EventRead
from charity_events.schemas.registration import RegistrationCreate, RegistrationResult
from charity_events.services import events as event_service
from charity_events.services.registrations import register_participant

router = APIRouter(
    tags=["Events"],
)


@router.get("/events", response_model=List[EventRead])
async def read_events(db: AsyncSession = Depends(get_db)):
    """Upcoming and ongoing events, soonest first."""
    return await event_service.list_active_events(db)


@router.get("/events/upcoming", response_model=List[EventRead])
async def read_upcoming_events(db: AsyncSession = Depends(get_db)):
    return await event_service.list_upcoming_events(db)


@router.get("/events/search", response_model=List[EventRead])
async def search_events(
    date: Optional[str] = None,
    location: Optional[str] = None,
    category: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
):
    return await event_service.search_events(db, event_date=date, location=location, category=category)


@router.get("/events/{event_id}", response_model=EventRead)
async def read_event(event_id: str, db: AsyncSession = Depends(get_db)):
    return await event_service.get_event(db, event_id)


@router.post("/events/{event_id}/register", response_model=RegistrationResult)
async def register_for_event(
    event_id: str, registration: RegistrationCreate, db: AsyncSession = Depends(get_db)
):
    registration_id = await register_participant(db, event_id, registration)
    return RegistrationResult(registrationId=registration_id)


@router.get("/categories", response_model=List[str])
async def read_categories(db: AsyncSession = Depends(get_db)):
    return await event_service.list_categories(db)
