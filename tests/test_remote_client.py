"""Tests for the REST sync client against the in-process application."""

from __future__ import annotations

import httpx
import pytest

from activity_tracker.client import ActivityCollection, RemoteSyncClient
from activity_tracker.domain.entities import Activity
from activity_tracker.domain.errors import TransportError

FUTURE_DATE = "2999-01-15"


def _activity(activity_id: str, **overrides) -> Activity:
    values = {
        "id": activity_id,
        "type": "workshop",
        "title": "Intro to X",
        "date": FUTURE_DATE,
        "time": "10:00",
    }
    values.update(overrides)
    return Activity(**values)


def _unreachable_client(collection: ActivityCollection) -> RemoteSyncClient:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    http_client = httpx.Client(
        base_url="http://backend.test", transport=httpx.MockTransport(handler)
    )
    return RemoteSyncClient(collection, http_client)


def test_fetch_replaces_the_collection(
    remote: RemoteSyncClient, collection: ActivityCollection
) -> None:
    remote.http_client.post("/api/activities", json=_activity("s1").to_dict())
    collection.add(_activity("local-only"))

    fetched = remote.fetch_activities()

    assert [item.id for item in fetched] == ["s1"]
    assert [item.id for item in collection] == ["s1"]


def test_fetch_passes_filters(remote: RemoteSyncClient) -> None:
    remote.add_activity(_activity("w1").to_dict())
    remote.add_activity(_activity("m1", type="mentoring", mentor="Carla").to_dict())

    assert [item.id for item in remote.fetch_activities(type="mentoring")] == ["m1"]
    assert [item.id for item in remote.get_activities_by_type("workshop")] == ["w1"]
    with pytest.raises(TypeError):
        remote.fetch_activities(colour="red")


def test_item_operations_mirror_server_results(
    remote: RemoteSyncClient, collection: ActivityCollection
) -> None:
    created = remote.add_activity(
        {"type": "workshop", "title": "Intro", "date": FUTURE_DATE, "time": "10:00"}
    )
    assert collection.find_by_id(created.id) is not None

    updated = remote.update_activity(created.id, {"title": "Renamed", "capacity": 8})
    assert updated.title == "Renamed"
    assert collection.find_by_id(created.id).title == "Renamed"
    assert collection.find_by_id(created.id).capacity == 8

    completed = remote.complete_activity(created.id)
    local = collection.find_by_id(created.id)
    assert local.completed is True
    assert local.completed_date == completed.completed_date

    assert remote.delete_activity(created.id) == "Activity deleted successfully"
    assert created.id not in collection


def test_cancel_mirrors_the_server(
    remote: RemoteSyncClient, collection: ActivityCollection
) -> None:
    created = remote.add_activity(_activity("c1").to_dict())

    remote.cancel_activity(created.id)

    assert collection.find_by_id("c1").cancelled is True


def test_server_errors_raise_and_leave_collection_unchanged(
    remote: RemoteSyncClient, collection: ActivityCollection
) -> None:
    remote.add_activity(_activity("a1").to_dict())
    remote.complete_activity("a1")
    before = collection.snapshot()

    with pytest.raises(TransportError) as excinfo:
        remote.cancel_activity("a1")
    assert excinfo.value.status_code == 400
    assert excinfo.value.reason == "Cannot cancel a completed activity"

    with pytest.raises(TransportError) as excinfo:
        remote.delete_activity("missing")
    assert excinfo.value.status_code == 404

    assert collection.snapshot() == before


def test_sync_pushes_local_versions(
    remote: RemoteSyncClient, collection: ActivityCollection
) -> None:
    stale = _activity("s1", title="Stale")
    remote.http_client.post("/api/activities", json=stale.to_dict())

    modified = stale.copy()
    modified.title = "Fresh"
    collection.add(modified)
    collection.add(_activity("n1", title="New locally"))

    result = {item.id: item for item in remote.sync_activities()}

    assert set(result) == {"s1", "n1"}
    assert result["s1"].title == "Fresh"
    assert result["n1"].title == "New locally"


def test_read_only_queries(remote: RemoteSyncClient) -> None:
    remote.add_activity(_activity("w1").to_dict())
    remote.add_activity(_activity("m1", type="mentoring", mentor="Carla").to_dict())
    remote.complete_activity("w1")

    assert remote.get_activity("m1").mentor == "Carla"
    assert remote.get_mentors() == ["Carla"]
    assert [item.id for item in remote.get_upcoming_activities()] == ["m1"]
    assert [item.id for item in remote.get_recent_activities()] == ["w1"]

    dashboard = remote.get_dashboard_data()
    assert dashboard["stats"]["total"] == 2
    assert dashboard["stats"]["completionRate"] == 50.0
    assert remote.health()["status"] == "OK"


def test_unreachable_server_raises_transport_error() -> None:
    collection = ActivityCollection([_activity("a1")])
    remote = _unreachable_client(collection)

    with pytest.raises(TransportError):
        remote.fetch_activities()
    with pytest.raises(TransportError):
        remote.delete_activity("a1")

    assert [item.id for item in collection] == ["a1"]
    remote.close()


def test_error_reason_comes_from_the_body() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"detail": "Database unavailable"})

    http_client = httpx.Client(
        base_url="http://backend.test", transport=httpx.MockTransport(handler)
    )
    remote = RemoteSyncClient(ActivityCollection(), http_client)

    with pytest.raises(TransportError) as excinfo:
        remote.get_statistics()

    assert excinfo.value.status_code == 500
    assert excinfo.value.reason == "Database unavailable"
    assert str(excinfo.value) == "HTTP 500: Database unavailable"
