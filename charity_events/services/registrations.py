# -*- coding: utf-8 -*-
"""
Event registration workflow.

A registration is accepted only if, in this order: name and phone are given,
the event exists, the event still has room, and the phone number is not
already registered for that event. The new row and the participant counter
increment are committed together or not at all.
"""
import logging

from sqlalchemy import select, update, or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from charity_events.exceptions import ConflictError, NotFoundError, StoreError, ValidationError
from charity_events.models.event import Event
from charity_events.models.registration import Registration
from charity_events.schemas.registration import RegistrationCreate
from charity_events.services.events import parse_event_id

EVENT_FULL = "Event is full"
ALREADY_REGISTERED = "You are already registered for this event"


async def register_participant(db: AsyncSession, event_id, payload: RegistrationCreate) -> int:
    """Registers a participant and returns the new registration id."""
    name = (payload.name or "").strip()
    phone = (payload.phone or "").strip()
    if not name or not phone:
        raise ValidationError("Name and phone are required")
    event_id = parse_event_id(event_id)

    try:
        async with db.begin():
            # Row lock on backends that support it (ignored by SQLite)
            event = (
                await db.execute(select(Event).where(Event.id == event_id).with_for_update())
            ).scalars().first()
            if event is None:
                raise NotFoundError("Event not found")

            if event.is_full:
                raise ConflictError(EVENT_FULL)

            existing = (
                await db.execute(
                    select(Registration.id).where(
                        Registration.event_id == event_id,
                        Registration.participant_phone == phone,
                    )
                )
            ).scalars().first()
            if existing is not None:
                raise ConflictError(ALREADY_REGISTERED)

            # The WHERE clause re-checks capacity at write time, so two
            # concurrent requests cannot both take the last seat.
            claimed = await db.execute(
                update(Event)
                .where(Event.id == event_id)
                .where(
                    or_(
                        Event.max_participants.is_(None),
                        Event.max_participants == 0,
                        Event.current_participants < Event.max_participants,
                    )
                )
                .values(current_participants=Event.current_participants + 1)
                .execution_options(synchronize_session=False)
            )
            if claimed.rowcount == 0:
                raise ConflictError(EVENT_FULL)

            registration = Registration(
                event_id=event_id,
                participant_name=name,
                participant_phone=phone,
                participant_email=payload.email,
                participant_age=payload.age,
                volunteer_experience=payload.volunteer_experience,
                motivation=payload.motivation,
                allow_contact=payload.allow_contact,
            )
            db.add(registration)
            await db.flush()
    except ConflictError as e:
        logging.warning(f"Registration rejected for event {event_id}: {e.message}")
        raise
    except IntegrityError as e:
        # uq_registration_event_phone: a concurrent request with the same phone won
        logging.warning(f"Duplicate registration for event {event_id}: {e.orig}")
        raise ConflictError(ALREADY_REGISTERED)
    except SQLAlchemyError as e:
        logging.error(f"Registration failed for event {event_id}: {e}")
        raise StoreError("Registration failed")

    logging.info(f"Registration {registration.id} created for event {event_id}")
    return registration.id
