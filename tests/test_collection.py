"""Tests for the in-memory activity collection."""

from __future__ import annotations

import pytest

from activity_tracker.client import ActivityCollection, Observable
from activity_tracker.domain.entities import Activity
from activity_tracker.domain.errors import InvalidTransitionError


def _activity(activity_id: str = "a1", **overrides) -> Activity:
    values = {
        "id": activity_id,
        "type": "workshop",
        "title": "Intro to X",
        "date": "2025-06-01",
        "time": "10:00",
    }
    values.update(overrides)
    return Activity(**values)


class _Counter:
    def __init__(self) -> None:
        self.calls = 0

    def __call__(self) -> None:
        self.calls += 1


def test_add_notifies_once_and_ignores_duplicates(collection: ActivityCollection) -> None:
    counter = _Counter()
    collection.subscribe(counter)

    assert collection.add(_activity()) is True
    assert collection.add(_activity(title="Other")) is False

    assert counter.calls == 1
    assert len(collection) == 1
    assert collection.find_by_id("a1").title == "Intro to X"


def test_unknown_ids_are_silent_no_ops(collection: ActivityCollection) -> None:
    counter = _Counter()
    collection.subscribe(counter)

    assert collection.update("missing", {"title": "x"}) is None
    assert collection.delete("missing") is None
    assert collection.complete("missing") is None
    assert collection.cancel("missing") is None
    assert counter.calls == 0


def test_to_array_is_sorted_by_date_and_time(collection: ActivityCollection) -> None:
    collection.add(_activity("late", date="2025-07-01"))
    collection.add(_activity("early-evening", date="2025-06-01", time="18:00"))
    collection.add(_activity("early-morning", date="2025-06-01", time="08:00"))

    assert [item.id for item in collection.to_array()] == [
        "early-morning",
        "early-evening",
        "late",
    ]


def test_update_and_delete(collection: ActivityCollection) -> None:
    collection.add(_activity())
    collection.update("a1", {"title": "Renamed", "location": "Room 1"})

    assert collection.find_by_id("a1").title == "Renamed"
    assert collection.find_by_id("a1").location == "Room 1"

    removed = collection.delete("a1")
    assert removed is not None and removed.id == "a1"
    assert "a1" not in collection


def test_stats_scenario(collection: ActivityCollection) -> None:
    collection.add(_activity())

    stats = collection.get_stats()
    assert stats.by_type["workshop"] == 1
    assert stats.by_status["upcoming"] == 1
    assert stats.completion_rate == 0

    collection.complete("a1")
    stats = collection.get_stats()
    assert stats.by_status["completed"] == 1
    assert stats.completion_rate == 100

    with pytest.raises(InvalidTransitionError):
        collection.cancel("a1")
    assert collection.get_stats() == stats


def test_repeating_a_transition_is_a_no_op(collection: ActivityCollection) -> None:
    collection.add(_activity())
    collection.complete("a1", completed_date="2025-06-01T12:00:00+00:00")
    counter = _Counter()
    collection.subscribe(counter)

    collection.complete("a1")

    assert counter.calls == 0
    assert collection.find_by_id("a1").completed_date == "2025-06-01T12:00:00+00:00"


def test_replace_list_stores_copies(collection: ActivityCollection) -> None:
    source = [_activity("a1"), _activity("a2")]
    collection.replace_list(source)
    source[0].title = "Mutated"

    assert [item.id for item in collection.to_array()] == ["a1", "a2"]
    assert collection.find_by_id("a1").title == "Intro to X"


def test_snapshot_is_not_affected_by_later_changes(collection: ActivityCollection) -> None:
    collection.add(_activity())
    snapshot = collection.snapshot()

    collection.update("a1", {"title": "Renamed"})

    assert snapshot[0].title == "Intro to X"


def test_clear_empties_and_notifies(collection: ActivityCollection) -> None:
    collection.add(_activity())
    counter = _Counter()
    collection.subscribe(counter)

    collection.clear()

    assert len(collection) == 0
    assert counter.calls == 1


def test_failing_observer_does_not_block_the_others() -> None:
    observable = Observable()
    counter = _Counter()

    def broken() -> None:
        raise RuntimeError("boom")

    observable.subscribe(broken)
    observable.subscribe(counter)
    observable.notify()

    assert counter.calls == 1


def test_unsubscribe_stops_notifications(collection: ActivityCollection) -> None:
    counter = _Counter()
    subscription = collection.subscribe(counter)
    subscription.unsubscribe()
    subscription.unsubscribe()

    collection.add(_activity())

    assert counter.calls == 0
