# charity_events/schemas/event.py
import datetime as dt
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from charity_events.models.event import EventStatus


class EventWrite(BaseModel):
    """Admin create/update payload.

    Everything is optional at the schema level so that missing required fields
    come back as a 400 from the service, like any other validation error.
    """
    name: Optional[str] = Field(None, max_length=200)
    category: Optional[str] = Field(None, max_length=100)
    date: Optional[dt.date] = None
    time: Optional[str] = Field(None, max_length=50)
    location: Optional[str] = Field(None, max_length=255)
    organizer: Optional[str] = Field(None, max_length=200)
    max_participants: Optional[int] = Field(None, ge=0)
    registration_fee: Optional[float] = Field(None, ge=0)
    contact_info: Optional[str] = Field(None, max_length=200)
    status: Optional[EventStatus] = None
    description: Optional[str] = None
    image_url: Optional[str] = Field(None, max_length=255)

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        # HTML forms send "" for untouched inputs
        if isinstance(v, str) and not v.strip():
            return None
        return v


class EventRead(BaseModel):
    id: int
    name: str
    category: str
    description: Optional[str] = None
    organizer: Optional[str] = None
    contact_info: Optional[str] = None
    image_url: Optional[str] = None
    location: str
    date: dt.date
    time: Optional[str] = None
    max_participants: Optional[int] = None
    current_participants: int = 0
    registration_fee: float = 0.0
    status: EventStatus
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None

    class Config:
        from_attributes = True


class Statistics(BaseModel):
    totalEvents: int
    upcomingEvents: int
    totalParticipants: int
    completedEvents: int
