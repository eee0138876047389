import asyncio
from datetime import date, timedelta

from sqlalchemy import select, func

from charity_events.database import SessionLocal, engine, init_db
from charity_events.models.event import Event, EventStatus

SAMPLE_EVENTS = [
    dict(name="Riverside Park Clean-up", category="environment", location="Riverside Park",
         days_ahead=7, time="09:00", organizer="Green City Volunteers", max_participants=40,
         description="Help us collect litter along the river banks. Gloves and bags provided."),
    dict(name="Weekend Reading Club for Kids", category="education", location="Central Library",
         days_ahead=10, time="14:00", organizer="Open Books Foundation", max_participants=15,
         description="Read stories with children aged 6-10."),
    dict(name="Charity Fun Run", category="sports", location="Harbour Park",
         days_ahead=21, time="08:30", organizer="Run for Hope", max_participants=200,
         registration_fee=10.0, description="5km run, all proceeds go to the children's hospital."),
    dict(name="Food Bank Sorting Day", category="community", location="North Food Bank",
         days_ahead=3, time="10:00", organizer="North Food Bank", max_participants=None,
         description="Sort and pack donations for local families."),
    dict(name="Elderly Home Music Afternoon", category="community", location="Sunset Care Home",
         days_ahead=-14, time="15:00", organizer="Harmony Volunteers", max_participants=10,
         status=EventStatus.COMPLETED, description="An afternoon of music and conversation."),
]


async def seed_events():
    await init_db()
    try:
        await _insert_samples()
    finally:
        await engine.dispose()


async def _insert_samples():
    async with SessionLocal() as db:
        try:
            count = await db.scalar(select(func.count(Event.id)))
            if count:
                print(f"Events table already has {count} event(s), nothing to do.")
                return

            today = date.today()
            for sample in SAMPLE_EVENTS:
                sample = dict(sample)
                days_ahead = sample.pop("days_ahead")
                status = sample.pop("status", EventStatus.UPCOMING)
                db.add(Event(date=today + timedelta(days=days_ahead), status=status.value,
                             current_participants=0, **sample))
            await db.commit()
            print(f"Created {len(SAMPLE_EVENTS)} sample events.")
        except Exception as e:
            print(f"Failed to seed events: {e}")
            await db.rollback()


if __name__ == "__main__":
    asyncio.run(seed_events())
