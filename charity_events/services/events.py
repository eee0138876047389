# -*- coding: utf-8 -*-
"""
Read-only event queries and the admin create/update/delete operations.
"""
import logging
from datetime import date, datetime
from typing import List, Optional

from sqlalchemy import select, delete, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from charity_events.config import config
from charity_events.exceptions import MissingFieldsError, NotFoundError, StoreError
from charity_events.models.event import Event, EventStatus
from charity_events.models.registration import Registration
from charity_events.schemas.event import EventWrite

REQUIRED_EVENT_FIELDS = ("name", "category", "date", "location")


async def _all(db: AsyncSession, query, what: str) -> list:
    try:
        result = await db.execute(query)
    except SQLAlchemyError as e:
        logging.error(f"Failed to query {what}: {e}")
        raise StoreError("Internal server error")
    return list(result.scalars().all())


# ---------------- Queries ----------------


async def list_active_events(db: AsyncSession) -> List[Event]:
    query = (
        select(Event)
        .where(Event.status.in_([EventStatus.UPCOMING.value, EventStatus.ONGOING.value]))
        .order_by(Event.date.asc())
    )
    return await _all(db, query, "events")


async def list_upcoming_events(db: AsyncSession, limit: Optional[int] = None) -> List[Event]:
    query = (
        select(Event)
        .where(Event.date >= date.today(), Event.status == EventStatus.UPCOMING.value)
        .order_by(Event.date.asc())
        .limit(limit or config.UPCOMING_LIMIT)
    )
    return await _all(db, query, "upcoming events")


def parse_event_id(value) -> int:
    """An id that cannot name a row is reported like any unknown id."""
    if isinstance(value, int):
        return value
    value = (value or "").strip()
    if not value.isascii() or not value.isdigit() or len(value) > 18:
        raise NotFoundError("Event not found")
    return int(value)


async def search_events(
    db: AsyncSession,
    event_date: Optional[str] = None,
    location: Optional[str] = None,
    category: Optional[str] = None,
) -> List[Event]:
    """Filters are combined with AND; empty ones are ignored.

    A date that does not parse as YYYY-MM-DD matches no event.
    """
    query = select(Event)
    if event_date:
        try:
            parsed_date = datetime.strptime(event_date, "%Y-%m-%d").date()
        except ValueError:
            return []
        query = query.where(Event.date == parsed_date)
    if location:
        query = query.where(Event.location.contains(location, autoescape=True))
    if category:
        query = query.where(Event.category == category)
    return await _all(db, query.order_by(Event.date.asc()), "events (search)")


async def get_event(db: AsyncSession, event_id) -> Event:
    event_id = parse_event_id(event_id)
    try:
        event = await db.get(Event, event_id)
    except SQLAlchemyError as e:
        logging.error(f"Failed to load event {event_id}: {e}")
        raise StoreError("Internal server error")
    if event is None:
        raise NotFoundError("Event not found")
    return event


async def list_categories(db: AsyncSession) -> List[str]:
    query = (
        select(Event.category)
        .where(Event.category.is_not(None))
        .distinct()
        .order_by(Event.category)
    )
    return await _all(db, query, "categories")


async def list_admin_events(db: AsyncSession) -> List[Event]:
    return await _all(db, select(Event).order_by(Event.date.desc()), "events (admin)")


async def get_statistics(db: AsyncSession) -> dict:
    """All four aggregates or nothing; no partial results."""
    today = date.today()
    try:
        total_events = await db.scalar(select(func.count(Event.id)))
        upcoming_events = await db.scalar(
            select(func.count(Event.id)).where(
                Event.date >= today, Event.status == EventStatus.UPCOMING.value
            )
        )
        total_participants = await db.scalar(
            select(func.coalesce(func.sum(Event.current_participants), 0))
        )
        completed_events = await db.scalar(
            select(func.count(Event.id)).where(Event.status == EventStatus.COMPLETED.value)
        )
    except SQLAlchemyError as e:
        logging.error(f"Failed to compute statistics: {e}")
        raise StoreError("Internal server error")

    return {
        "totalEvents": total_events or 0,
        "upcomingEvents": upcoming_events or 0,
        "totalParticipants": int(total_participants or 0),
        "completedEvents": completed_events or 0,
    }


# ---------------- Admin mutations ----------------


def _event_values(payload: EventWrite) -> dict:
    missing = [f for f in REQUIRED_EVENT_FIELDS if getattr(payload, f) is None]
    if missing:
        raise MissingFieldsError(missing)

    return {
        "name": payload.name.strip(),
        "category": payload.category.strip(),
        "date": payload.date,
        "time": payload.time,
        "location": payload.location.strip(),
        "organizer": payload.organizer,
        # 0 means "no limit"
        "max_participants": payload.max_participants or None,
        "registration_fee": payload.registration_fee or 0.0,
        "contact_info": payload.contact_info,
        "status": (payload.status or EventStatus.UPCOMING).value,
        "description": payload.description,
        "image_url": payload.image_url,
    }


async def create_event(db: AsyncSession, payload: EventWrite) -> int:
    values = _event_values(payload)
    db_event = Event(**values, current_participants=0)
    try:
        db.add(db_event)
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logging.error(f"Failed to create event: {e}")
        raise StoreError("Failed to create event")

    logging.info(f"Event {db_event.id} created: {db_event.name}")
    return db_event.id


async def update_event(db: AsyncSession, event_id, payload: EventWrite) -> None:
    """Replaces every mutable field. current_participants is left alone."""
    values = _event_values(payload)
    event_id = parse_event_id(event_id)
    try:
        db_event = await db.get(Event, event_id)
        if db_event is None:
            raise NotFoundError("Event not found")
        for key, value in values.items():
            setattr(db_event, key, value)
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logging.error(f"Failed to update event {event_id}: {e}")
        raise StoreError("Failed to update event")

    logging.info(f"Event {event_id} updated")


async def delete_event(db: AsyncSession, event_id) -> None:
    """Deletes the event and its registrations in one transaction."""
    event_id = parse_event_id(event_id)
    try:
        async with db.begin():
            removed = await db.execute(
                delete(Registration).where(Registration.event_id == event_id)
            )
            result = await db.execute(delete(Event).where(Event.id == event_id))
            if result.rowcount == 0:
                # rolls back the registration delete above as well
                raise NotFoundError("Event not found")
    except SQLAlchemyError as e:
        logging.error(f"Failed to delete event {event_id}: {e}")
        raise StoreError("Failed to delete event")

    logging.info(f"Event {event_id} deleted with {removed.rowcount} registration(s)")
