from datetime import datetime


def test_health_reports_ok(client):
    r = client.get("/health")
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "ok"
    assert data["message"] == "Service is healthy"
    assert data["environment"] == "test"
    datetime.fromisoformat(data["timestamp"].replace("Z", "+00:00"))


def test_health_does_not_touch_notes(client, tmp_path):
    client.get("/health")
    assert not (tmp_path / "notes.json").exists()


def test_health_timestamp_is_utc_milliseconds(client):
    ts = client.get("/health").json()["timestamp"]
    assert ts.endswith("Z")
    assert len(ts.split(".")[1]) == len("000Z")


def test_health_works_without_notes_service(client):
    del client.app.state.notes_service
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"
