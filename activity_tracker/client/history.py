"""Bounded undo log built from collection snapshots."""

from __future__ import annotations

import logging
from collections import deque

from .collection import ActivityCollection, Snapshot
from .observable import Subscription

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 50


class SnapshotHistory:
    """Record a snapshot of the collection after every change.

    The newest snapshot always mirrors the live collection. :meth:`undo`
    discards it and hands back the one recorded before, stepping back one
    change per call. There is no redo.
    """

    def __init__(self, limit: int = DEFAULT_HISTORY_LIMIT) -> None:
        if limit < 2:
            raise ValueError("History limit must allow at least two snapshots")
        self.limit = limit
        self._snapshots: deque[Snapshot] = deque(maxlen=limit)
        self._collection: ActivityCollection | None = None
        self._subscription: Subscription | None = None

    def attach(self, collection: ActivityCollection) -> None:
        """Start recording ``collection``; its current state is the baseline."""

        self.detach()
        self._collection = collection
        self.push(collection.snapshot())
        self._subscription = collection.subscribe(self._record)

    def detach(self) -> None:
        if self._subscription is not None:
            self._subscription.unsubscribe()
        self._subscription = None
        self._collection = None

    def push(self, snapshot: Snapshot) -> None:
        self._snapshots.append(snapshot)

    def undo(self) -> Snapshot | None:
        """Return the state before the latest change, or ``None``."""

        if len(self._snapshots) < 2:
            return None
        self._snapshots.pop()
        previous = self._snapshots.pop()
        logger.debug("Undo restored a snapshot with %d activities", len(previous))
        return previous

    def __len__(self) -> int:
        return len(self._snapshots)

    @property
    def latest(self) -> Snapshot | None:
        return self._snapshots[-1] if self._snapshots else None

    def _record(self) -> None:
        if self._collection is not None:
            self.push(self._collection.snapshot())


__all__ = ["DEFAULT_HISTORY_LIMIT", "SnapshotHistory"]
