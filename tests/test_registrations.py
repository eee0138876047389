import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from conftest import count_registrations, participants


def register(client, event_id, **payload):
    return client.post(f"/api/events/{event_id}/register", json=payload)


def test_register_returns_id_and_increments_counter(client, make_event, sync_engine):
    event_id = make_event(max_participants=5)

    response = register(client, event_id, name="Ana", phone="111", email="ana@example.com",
                        age=30, experience="Food bank", motivation="Help out", allowContact=True)

    assert response.status_code == 200
    body = response.json()
    assert isinstance(body["registrationId"], int)
    assert participants(sync_engine, event_id) == 1
    assert client.get(f"/api/events/{event_id}").json()["current_participants"] == 1

    with sync_engine.connect() as conn:
        row = conn.exec_driver_sql(
            "SELECT participant_name, participant_phone, participant_age, volunteer_experience, allow_contact "
            "FROM event_registrations WHERE id = ?", (body["registrationId"],)
        ).one()
    assert tuple(row) == ("Ana", "111", 30, "Food bank", 1)


def test_snake_case_field_names_are_accepted(client, make_event, sync_engine):
    event_id = make_event()
    response = register(client, event_id, name="Ana", phone="111",
                        volunteer_experience="Lots", allow_contact=True)
    assert response.status_code == 200
    with sync_engine.connect() as conn:
        row = conn.exec_driver_sql(
            "SELECT volunteer_experience, allow_contact FROM event_registrations"
        ).one()
    assert tuple(row) == ("Lots", 1)


def test_blank_optional_fields_from_form_are_stored_as_null(client, make_event, sync_engine):
    event_id = make_event()
    response = register(client, event_id, name="Ana", phone="111", email="", age="",
                        experience="", motivation="", allowContact=False)
    assert response.status_code == 200
    with sync_engine.connect() as conn:
        row = conn.exec_driver_sql(
            "SELECT participant_email, participant_age, motivation FROM event_registrations"
        ).one()
    assert tuple(row) == (None, None, None)


@pytest.mark.parametrize("payload", [
    {"name": "", "phone": "111"},
    {"name": "Ana", "phone": ""},
    {"name": "   ", "phone": "111"},
    {"phone": "111"},
    {"name": "Ana"},
    {},
])
def test_missing_name_or_phone_is_rejected_before_any_write(client, make_event, sync_engine, payload):
    event_id = make_event()

    response = client.post(f"/api/events/{event_id}/register", json=payload)

    assert response.status_code == 400
    assert "required" in response.json()["error"]
    assert count_registrations(sync_engine, event_id) == 0
    assert participants(sync_engine, event_id) == 0


def test_missing_fields_checked_before_event_lookup(client):
    response = register(client, 9999, name="", phone="")
    assert response.status_code == 400


def test_unknown_event_is_not_found(client, sync_engine):
    response = register(client, 9999, name="Ana", phone="111")

    assert response.status_code == 404
    assert response.json() == {"error": "Event not found"}
    assert count_registrations(sync_engine, 9999) == 0


def test_full_event_rejects_second_participant(client, make_event, sync_engine):
    event_id = make_event(max_participants=1)

    first = register(client, event_id, name="A", phone="111")
    second = register(client, event_id, name="B", phone="222")

    assert first.status_code == 200
    assert second.status_code == 400
    assert second.json()["error"] == "Event is full"
    assert participants(sync_engine, event_id) == 1
    assert count_registrations(sync_engine, event_id) == 1


def test_same_phone_twice_is_a_duplicate(client, make_event, sync_engine):
    event_id = make_event()

    first = register(client, event_id, name="A", phone="111")
    second = register(client, event_id, name="A again", phone="111")

    assert first.status_code == 200
    assert second.status_code == 400
    assert "already registered" in second.json()["error"]
    assert count_registrations(sync_engine, event_id) == 1
    assert participants(sync_engine, event_id) == 1


def test_same_phone_may_register_for_different_events(client, make_event):
    first_event = make_event(name="First")
    second_event = make_event(name="Second")

    assert register(client, first_event, name="A", phone="111").status_code == 200
    assert register(client, second_event, name="A", phone="111").status_code == 200


def test_event_without_capacity_is_unlimited(client, make_event, sync_engine):
    event_id = make_event(max_participants=None)

    for i in range(5):
        assert register(client, event_id, name=f"P{i}", phone=f"{i}").status_code == 200
    assert participants(sync_engine, event_id) == 5


def test_store_failure_rolls_back_counter_and_hides_details(client, make_event, sync_engine, monkeypatch):
    event_id = make_event(max_participants=3)

    async def broken_flush(self, objects=None):
        raise OperationalError("INSERT INTO event_registrations", {}, Exception("disk I/O error"))

    monkeypatch.setattr(AsyncSession, "flush", broken_flush)
    response = register(client, event_id, name="A", phone="111")

    assert response.status_code == 500
    assert response.json() == {"error": "Registration failed"}
    assert "disk" not in response.text
    assert participants(sync_engine, event_id) == 0
    assert count_registrations(sync_engine, event_id) == 0


def test_invalid_json_body_is_a_bad_request(client, make_event):
    event_id = make_event()
    response = client.post(f"/api/events/{event_id}/register", content=b"{not json",
                           headers={"Content-Type": "application/json"})
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request data"}


def test_register_on_non_numeric_id_is_not_found(client, make_event, sync_engine):
    event_id = make_event()

    response = register(client, "abc", name="Ana", phone="111")

    assert response.status_code == 404
    assert response.json() == {"error": "Event not found"}
    assert count_registrations(sync_engine, event_id) == 0


def test_register_on_non_numeric_id_still_checks_fields_first(client):
    response = register(client, "abc", name="", phone="")
    assert response.status_code == 400
