import os
import tempfile
from datetime import date, timedelta
from pathlib import Path

# Must be set before the application modules read their configuration
_TMP_DIR = Path(tempfile.mkdtemp(prefix="charity_events_tests_"))
DB_PATH = _TMP_DIR / "test.db"
UPLOAD_DIR = _TMP_DIR / "img"
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{DB_PATH}"
os.environ["UPLOAD_DIR"] = str(UPLOAD_DIR)

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, text

from charity_events.database import Base
from charity_events.models import event, registration  # noqa: F401
from main import app


@pytest.fixture(scope="session")
def sync_engine():
    """Plain sqlite engine on the same file, for inspecting rows from tests."""
    eng = create_engine(f"sqlite:///{DB_PATH}")
    yield eng
    eng.dispose()


@pytest.fixture
def client(sync_engine):
    with TestClient(app) as c:
        yield c
    Base.metadata.drop_all(sync_engine)


@pytest.fixture
def anyio_backend():
    return "asyncio"


def event_payload(**overrides):
    payload = {
        "name": "Park Clean-up",
        "category": "environment",
        "date": (date.today() + timedelta(days=7)).isoformat(),
        "time": "09:00",
        "location": "Riverside Park",
        "organizer": "Green City Volunteers",
        "max_participants": 20,
        "registration_fee": 0,
        "contact_info": "hello@greencity.org",
        "status": "upcoming",
        "description": "Bring gloves.",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def make_event(client):
    def _make(**overrides):
        response = client.post("/api/admin/events", json=event_payload(**overrides))
        assert response.status_code == 200, response.text
        return response.json()["id"]
    return _make


def count_registrations(sync_engine, event_id):
    with sync_engine.connect() as conn:
        return conn.execute(
            text("SELECT COUNT(*) FROM event_registrations WHERE event_id = :id"), {"id": event_id}
        ).scalar()


def participants(sync_engine, event_id):
    with sync_engine.connect() as conn:
        return conn.execute(
            text("SELECT current_participants FROM events WHERE id = :id"), {"id": event_id}
        ).scalar()
