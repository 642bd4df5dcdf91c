# tests/test_tracker_api.py

import base64
from datetime import date

import pytest

from getfit.services import tracker_store


def test_offset_defaults_to_zero(client):
    resp = client.get("/api/schedule/offset")
    assert resp.status_code == 200
    data = resp.json()
    assert data["offset"] == 0
    assert data["today"] == "2026-10-19"
    assert data["workout"]["name"] == "Chest + Shoulders"


def test_update_offset_shifts_schedule(client):
    resp = client.put("/api/schedule/offset", json={"offset": 3})
    assert resp.status_code == 200
    assert resp.json()["workout"]["is_rest"] is True

    today = client.get("/api/schedule/today").json()
    assert today["offset"] == 3
    assert today["workout"]["name"] == "Rest + Stretching"

    tomorrow = client.get("/api/schedule/2026-10-20").json()
    assert tomorrow["workout"]["name"] == "Back + Core"


def test_offset_out_of_range_rejected(client):
    resp = client.put("/api/schedule/offset", json={"offset": 7})
    assert resp.status_code == 422
    assert client.get("/api/schedule/offset").json()["offset"] == 0


def test_invalid_stored_offset_falls_back_to_zero(client, db_session):
    from getfit.models.tracker_setting import TrackerSetting

    db_session.add(TrackerSetting(key=tracker_store.OFFSET_KEY, value="banana"))
    db_session.commit()
    assert client.get("/api/schedule/offset").json()["offset"] == 0


def test_templates_listed(client):
    resp = client.get("/api/schedule/templates")
    assert resp.status_code == 200
    assert len(resp.json()) == 7


def test_toggle_completion(client):
    resp = client.post("/api/tracker/completions/2026-10-18/toggle")
    assert resp.json() == {"date": "2026-10-18", "completed": True}
    assert client.get("/api/tracker/completions").json()["completed"] == {"2026-10-18": True}

    resp = client.post("/api/tracker/completions/2026-10-18/toggle")
    assert resp.json()["completed"] is False
    assert client.get("/api/tracker/completions").json()["completed"] == {}


def test_status_done_syncs_completion(client):
    resp = client.put("/api/tracker/status/2026-10-17", json={"status": "done"})
    assert resp.status_code == 200
    assert resp.json()["completed"] is True

    resp = client.put("/api/tracker/status/2026-10-17", json={"status": "missed"})
    assert resp.json() == {"date": "2026-10-17", "status": "missed", "completed": False}

    resp = client.put("/api/tracker/status/2026-10-17", json={"status": None})
    assert resp.json()["status"] is None
    assert client.get("/api/tracker/statuses").json()["statuses"] == {}


def test_unknown_status_rejected(client):
    resp = client.put("/api/tracker/status/2026-10-17", json={"status": "skipped"})
    assert resp.status_code == 422


def test_weight_last_write_wins(client):
    client.put("/api/tracker/weights/2026-10-18", json={"weight": 80.5, "unit": "kg"})
    resp = client.put("/api/tracker/weights/2026-10-18", json={"weight": 178, "unit": "lbs"})
    assert resp.status_code == 200

    weights = client.get("/api/tracker/weights").json()
    assert weights == [{"date": "2026-10-18", "weight": 178.0, "unit": "lbs"}]


def test_weight_validation(client):
    resp = client.put("/api/tracker/weights/2026-10-18", json={"weight": 0})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Please enter a valid number"

    resp = client.put("/api/tracker/weights/2026-10-20", json={"weight": 70})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Cannot log weight for future dates"

    # today is allowed
    assert client.put("/api/tracker/weights/2026-10-19", json={"weight": 70}).status_code == 200


def test_weight_not_a_number(client, db_session):
    resp = client.put(
        "/api/tracker/weights/2026-10-18",
        content='{"weight": NaN}',
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Please enter a valid number"

    with pytest.raises(ValueError):
        tracker_store.set_weight(db_session, date(2026, 10, 18), float("inf"), "kg", date(2026, 10, 19))
    assert client.get("/api/tracker/weights").json() == []


def test_weight_for_day(client):
    assert client.get("/api/tracker/weights/2026-10-18").status_code == 404
    client.put("/api/tracker/weights/2026-10-18", json={"weight": 72.4})
    resp = client.get("/api/tracker/weights/2026-10-18")
    assert resp.status_code == 200
    assert resp.json() == {"date": "2026-10-18", "weight": 72.4, "unit": "kg"}


def test_daily_note(client):
    resp = client.put("/api/tracker/notes/2026-10-19", json={"note": "  legs sore  ", "mood": "sore"})
    assert resp.status_code == 200
    assert resp.json() == {"date": "2026-10-19", "note": "legs sore", "mood": "sore"}

    resp = client.put("/api/tracker/notes/2026-10-19", json={"note": "better", "mood": "good"})
    assert client.get("/api/tracker/notes/2026-10-19").json()["note"] == "better"
    assert len(client.get("/api/tracker/notes").json()) == 1


def test_empty_note_rejected(client):
    resp = client.put("/api/tracker/notes/2026-10-19", json={"note": "   "})
    assert resp.status_code == 400
    assert client.get("/api/tracker/notes/2026-10-19").status_code == 404


def _data_url(size):
    return "data:image/png;base64," + base64.b64encode(b"x" * size).decode()


def test_photos_newest_first_and_delete(client):
    first = client.post("/api/tracker/photos", json={"dataUrl": _data_url(10), "date": "2026-10-01"})
    assert first.status_code == 201
    second = client.post("/api/tracker/photos", json={"dataUrl": _data_url(20), "note": "week 3"})
    assert second.status_code == 201
    assert second.json()["date"] == "2026-10-19"
    assert second.json()["dataUrl"].startswith("data:image/png")

    photos = client.get("/api/tracker/photos").json()
    assert [p["id"] for p in photos] == [second.json()["id"], first.json()["id"]]

    resp = client.delete(f"/api/tracker/photos/{first.json()['id']}")
    assert resp.status_code == 200
    assert len(client.get("/api/tracker/photos").json()) == 1
    assert client.delete(f"/api/tracker/photos/{first.json()['id']}").status_code == 404


def test_photo_too_large(client):
    resp = client.post("/api/tracker/photos", json={"dataUrl": _data_url(5 * 1024 * 1024 + 3)})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Please upload an image under 5MB"


def test_data_url_size():
    assert tracker_store.data_url_size(_data_url(5)) == 5
    assert tracker_store.data_url_size(_data_url(6)) == 6
    assert tracker_store.data_url_size(_data_url(7)) == 7


def test_calendar_month(client):
    client.put("/api/tracker/status/2026-10-05", json={"status": "done"})
    resp = client.get("/api/calendar/2026/10")
    assert resp.status_code == 200
    data = resp.json()
    assert data["month_name"] == "October"
    assert len(data["days"]) == 42

    first = data["days"][0]
    assert first["date"] == "2026-09-27"
    assert first["in_month"] is False
    assert first["day_name"] == "Sun"

    by_date = {d["date"]: d for d in data["days"]}
    assert by_date["2026-10-19"]["is_today"] is True
    assert by_date["2026-10-19"]["workout"]["name"] == "Chest + Shoulders"
    assert by_date["2026-10-05"]["completed"] is True
    assert by_date["2026-10-05"]["status"] == "done"


def test_calendar_invalid_month(client):
    assert client.get("/api/calendar/2026/13").status_code == 400


def test_progress_summary(client):
    client.put("/api/tracker/status/2026-10-19", json={"status": "done"})
    client.put("/api/tracker/status/2026-10-18", json={"status": "done"})
    client.put("/api/tracker/status/2026-10-15", json={"status": "rest"})
    # outside the 30-day window
    client.put("/api/tracker/status/2026-09-01", json={"status": "done"})
    client.put("/api/tracker/weights/2026-10-10", json={"weight": 81})
    client.put("/api/tracker/weights/2026-08-10", json={"weight": 85})

    resp = client.get("/api/progress")
    assert resp.status_code == 200
    data = resp.json()

    assert data["consistency"] == {"done_count": 2, "scheduled_count": 26, "percentage": 8}

    frequency = {m["name"]: m["count"] for m in data["muscle_frequency"]}
    assert frequency == {"Cardio": 1, "Core": 1, "Chest": 1, "Shoulders": 1}
    assert all(m["percentage"] == 100 for m in data["muscle_frequency"])

    assert data["weights"] == [{"date": "2026-10-10", "weight": 81.0, "unit": "kg"}]


def test_progress_empty(client):
    data = client.get("/api/progress").json()
    assert data["consistency"]["percentage"] == 0
    assert data["muscle_frequency"] == []


def test_progress_legs_day_counts_legs_only(client):
    # offset 2 puts Legs on today
    client.put("/api/schedule/offset", json={"offset": 2})
    client.put("/api/tracker/status/2026-10-19", json={"status": "done"})

    data = client.get("/api/progress").json()
    assert data["muscle_frequency"] == [{"name": "Legs", "count": 1, "percentage": 100.0}]
