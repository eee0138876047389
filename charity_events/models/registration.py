# -*- coding: utf-8 -*-
"""
SQLAlchemy model for a participant's registration to an event.
"""
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Boolean, Text, UniqueConstraint
from charity_events.database import Base


class Registration(Base):
    __tablename__ = "event_registrations"
    __table_args__ = (
        # One registration per phone number per event
        UniqueConstraint("event_id", "participant_phone", name="uq_registration_event_phone"),
    )

    id = Column(Integer, primary_key=True, index=True)
    event_id = Column(Integer, ForeignKey("events.id"), nullable=False, index=True)

    participant_name = Column(String(100), nullable=False)
    participant_phone = Column(String(30), nullable=False)
    participant_email = Column(String(100), nullable=True)
    participant_age = Column(Integer, nullable=True)
    volunteer_experience = Column(Text, nullable=True)
    motivation = Column(Text, nullable=True)
    allow_contact = Column(Boolean, nullable=False, default=False)

    registration_date = Column(DateTime, default=datetime.utcnow)
