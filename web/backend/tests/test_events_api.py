"""Tests for event and cleanup endpoints."""

from datetime import date, timedelta


def test_create_and_list_events(api):
    day = (date.today() + timedelta(days=3)).isoformat()
    response = api.post(
        "/api/bands/band-1/events",
        json={"title": "Gig", "date": day, "start_time": "20:00", "event_type": "gig"},
    )
    assert response.status_code == 201

    events = api.get("/api/bands/band-1/events").json()
    assert [(e["title"], e["date"]) for e in events] == [("Gig", day)]


def test_unknown_event_type(api):
    response = api.post(
        "/api/bands/band-1/events",
        json={"title": "Party", "date": "2030-01-01", "start_time": "20:00", "event_type": "party"},
    )
    assert response.status_code == 422


def test_cleanup(api, fake_client):
    old = (date.today() - timedelta(days=5)).isoformat()
    fake_client.tables["events"] = [
        {"id": "e1", "band_id": "band-1", "title": "Old", "date": old, "start_time": "19:00"},
        {"id": "e2", "band_id": "band-1", "title": "Now", "date": date.today().isoformat(),
         "start_time": "19:00"},
    ]

    response = api.post("/api/events/cleanup")

    assert response.json() == {"deleted_count": 1, "success": True}
    assert [e["id"] for e in fake_client.rows("events")] == ["e2"]


def test_cleanup_failure_is_reported(api, fake_client):
    fake_client.fail_when = lambda table, op, payload: "denied"

    response = api.post("/api/events/cleanup")

    assert response.status_code == 200
    assert response.json() == {"deleted_count": None, "success": False}
