"""Integration tests for the activity API endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

FUTURE_DATE = "2999-01-15"
PAST_DATE = "2000-01-15"


def _payload(**overrides) -> dict:
    payload = {
        "type": "workshop",
        "title": "Intro to X",
        "date": FUTURE_DATE,
        "time": "10:00",
        "presenter": "Ana",
    }
    payload.update(overrides)
    return payload


def _create(client: TestClient, **overrides) -> dict:
    response = client.post("/api/activities", json=_payload(**overrides))
    assert response.status_code == 201, response.text
    return response.json()


def test_activity_crud_flow(client: TestClient) -> None:
    """Exercise the create, read, update and delete lifecycle."""

    created = _create(client, id="a1", description="  Basics  ")
    assert created["id"] == "a1"
    assert created["description"] == "Basics"
    assert created["presenter"] == "Ana"
    assert created["completed"] is False
    assert created["completedDate"] is None
    assert "createdAt" in created
    assert "mentor" not in created

    response = client.get("/api/activities/a1")
    assert response.status_code == 200
    assert response.json() == created

    response = client.put(
        "/api/activities/a1",
        json={"title": "Advanced X", "capacity": 30, "completed": True},
    )
    assert response.status_code == 200
    updated = response.json()
    assert updated["title"] == "Advanced X"
    assert updated["capacity"] == 30
    assert updated["completed"] is False
    assert updated["createdAt"] == created["createdAt"]

    response = client.delete("/api/activities/a1")
    assert response.status_code == 200
    assert response.json() == {"message": "Activity deleted successfully"}

    assert client.get("/api/activities/a1").status_code == 404
    assert client.delete("/api/activities/a1").status_code == 404


def test_create_generates_an_id_when_missing(client: TestClient) -> None:
    created = _create(client)

    assert created["id"]
    assert client.get(f"/api/activities/{created['id']}").status_code == 200


def test_create_rejects_invalid_payloads(client: TestClient) -> None:
    missing_title = _payload()
    del missing_title["title"]

    assert client.post("/api/activities", json=missing_title).status_code == 400
    assert client.post("/api/activities", json=_payload(title="   ")).status_code == 400
    assert client.post("/api/activities", json=_payload(type="party")).status_code == 400
    assert client.post("/api/activities", json=_payload(date="15/01/2999")).status_code == 400
    assert client.post("/api/activities", json=_payload(time="25:00")).status_code == 400
    assert client.post("/api/activities", json=_payload(capacity=-1)).status_code == 400

    response = client.post("/api/activities", json=_payload(title=""))
    assert response.json()["detail"] == "Title is required"


def test_create_rejects_duplicate_ids(client: TestClient) -> None:
    _create(client, id="dup")

    response = client.post("/api/activities", json=_payload(id="dup"))

    assert response.status_code == 400
    assert response.json()["detail"] == "Activity with this ID already exists"


def test_status_transitions(client: TestClient) -> None:
    _create(client, id="done")
    _create(client, id="dropped")

    response = client.post("/api/activities/done/complete")
    assert response.status_code == 200
    assert response.json()["completed"] is True
    assert response.json()["completedDate"]

    assert client.post("/api/activities/done/complete").status_code == 400
    assert client.post("/api/activities/done/cancel").status_code == 400

    response = client.post("/api/activities/dropped/cancel")
    assert response.status_code == 200
    assert response.json()["cancelled"] is True
    assert client.post("/api/activities/dropped/complete").status_code == 400

    assert client.post("/api/activities/missing/complete").status_code == 404
    assert client.post("/api/activities/missing/cancel").status_code == 404


def test_update_rules(client: TestClient) -> None:
    _create(client, id="a1")
    client.post("/api/activities/a1/complete")

    response = client.put("/api/activities/a1", json={"date": "2999-02-01"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Cannot change date of completed activity"

    response = client.put("/api/activities/a1", json={"title": "Still editable"})
    assert response.status_code == 200
    assert response.json()["title"] == "Still editable"

    assert client.put("/api/activities/missing", json={"title": "x"}).status_code == 404
    assert client.put("/api/activities/a1", json={"time": "7pm"}).status_code == 400


def test_list_filters(client: TestClient) -> None:
    _create(client, id="w1", capacity=10, location="Main Hall")
    _create(
        client,
        id="m1",
        type="mentoring",
        title="Career chat",
        date=PAST_DATE,
        mentor="Carla Gómez",
        capacity=2,
    )
    _create(client, id="n1", type="networking", title="Mixer", date="2999-03-01")
    client.post("/api/activities/n1/cancel")

    def ids(**params) -> list[str]:
        response = client.get("/api/activities", params=params)
        assert response.status_code == 200
        return [item["id"] for item in response.json()]

    assert ids() == ["m1", "w1", "n1"]
    assert ids(type="mentoring") == ["m1"]
    assert ids(status="upcoming") == ["w1"]
    assert ids(status="cancelled") == ["n1"]
    assert ids(status="past-due") == ["m1"]
    assert ids(mentor="carla") == ["m1"]
    assert ids(location="main") == ["w1"]
    assert ids(capacity=5) == ["w1"]
    assert ids(startDate="2999-01-01", endDate="2999-01-31") == ["w1"]


def test_upcoming_recent_and_mentors(client: TestClient) -> None:
    _create(client, id="later", date="2999-05-01")
    _create(client, id="sooner", date="2999-04-01")
    _create(client, id="old", date=PAST_DATE)
    _create(client, id="m1", type="mentoring", time="08:00", mentor="Carla")
    _create(client, id="m2", type="mentoring", time="09:00", mentor="Carla")
    _create(client, id="m3", type="mentoring", time="11:00", mentor="")

    response = client.get("/api/activities/upcoming", params={"limit": 2})
    assert [item["id"] for item in response.json()] == ["m1", "m2"]

    client.post("/api/activities/sooner/complete")
    client.post("/api/activities/later/complete")
    response = client.get("/api/activities/recent", params={"limit": 5})
    assert [item["id"] for item in response.json()] == ["later", "sooner"]

    response = client.get("/api/mentors")
    assert response.status_code == 200
    assert response.json() == ["Carla"]


def test_statistics(client: TestClient) -> None:
    _create(client, id="a1", date="2999-01-10")
    _create(client, id="a2", type="mentoring", date="2999-02-10")
    client.post("/api/activities/a1/complete")

    response = client.get("/api/statistics")
    assert response.status_code == 200
    assert response.json() == {
        "total": 2,
        "byType": {"workshop": 1, "mentoring": 1, "networking": 0},
        "byStatus": {"upcoming": 1, "completed": 1, "cancelled": 0},
        "completionRate": 50.0,
    }

    response = client.get(
        "/api/statistics", params={"startDate": "2999-01-01", "endDate": "2999-01-31"}
    )
    assert response.json()["total"] == 1
    assert response.json()["completionRate"] == 100.0


def test_sync_upserts_by_id(client: TestClient) -> None:
    stale = _create(client, id="s1", title="Old title")

    pushed = [
        {**stale, "title": "New title", "location": "Lab"},
        _payload(id="n1", title="Brand new"),
    ]
    response = client.post("/api/activities/sync", json=pushed)

    assert response.status_code == 200
    by_id = {item["id"]: item for item in response.json()}
    assert set(by_id) == {"s1", "n1"}
    assert by_id["s1"]["title"] == "New title"
    assert by_id["s1"]["location"] == "Lab"
    assert by_id["n1"]["title"] == "Brand new"


def test_sync_keeps_identity_fields_and_completion_dates(client: TestClient) -> None:
    _create(client, id="x", createdAt="2020-01-01T00:00:00+00:00")

    pushed = [
        _payload(
            id="x",
            type="mentoring",
            title="Renamed",
            mentor="Carla",
            createdAt="2030-01-01T00:00:00+00:00",
        ),
        _payload(id="y", completed=True, completedDate=None),
        _payload(id="z", completedDate="2030-01-01T00:00:00+00:00"),
    ]
    response = client.post("/api/activities/sync", json=pushed)

    assert response.status_code == 200
    by_id = {item["id"]: item for item in response.json()}
    assert by_id["x"]["type"] == "workshop"
    assert by_id["x"]["createdAt"] == "2020-01-01T00:00:00+00:00"
    assert by_id["x"]["title"] == "Renamed"
    assert by_id["x"]["presenter"] == "Ana"
    assert "mentor" not in by_id["x"]
    assert by_id["y"]["completed"] is True
    assert by_id["y"]["completedDate"]
    assert by_id["z"]["completed"] is False
    assert by_id["z"]["completedDate"] is None


def test_sync_rejects_malformed_bodies(client: TestClient) -> None:
    response = client.post("/api/activities/sync", json={"id": "x"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Expected an array of activities"

    response = client.post(
        "/api/activities/sync",
        json=[_payload(id="ok"), _payload(id="bad", time="noon")],
    )
    assert response.status_code == 400
    assert client.get("/api/activities/ok").status_code == 404


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "OK"
    assert body["timestamp"]
    assert body["uptime"] >= 0
