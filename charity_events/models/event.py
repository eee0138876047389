# -*- coding: utf-8 -*-
"""
SQLAlchemy model for a charity event.
"""
import enum
from datetime import datetime
from sqlalchemy import Column, Integer, String, Float, Date, DateTime, Text
from charity_events.database import Base


class EventStatus(str, enum.Enum):
    """Set by an administrator; never derived from the event date."""
    UPCOMING = "upcoming"
    ONGOING = "ongoing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Event(Base):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False)
    category = Column(String(100), nullable=False, index=True)  # free-text label
    description = Column(Text, nullable=True)
    organizer = Column(String(200), nullable=True)
    contact_info = Column(String(200), nullable=True)
    image_url = Column(String(255), nullable=True)
    location = Column(String(255), nullable=False)

    date = Column(Date, nullable=False, index=True)
    time = Column(String(50), nullable=True)

    # NULL (or 0) = unlimited
    max_participants = Column(Integer, nullable=True)
    current_participants = Column(Integer, nullable=False, default=0)
    registration_fee = Column(Float, nullable=False, default=0.0)

    status = Column(String(20), nullable=False, default=EventStatus.UPCOMING.value, index=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    @property
    def is_full(self):
        return bool(self.max_participants) and self.current_participants >= self.max_participants
