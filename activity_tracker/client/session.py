"""Wiring of the client-side components for one user session."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from activity_tracker.config import Settings, get_settings

from .api_client import RemoteSyncClient
from .cache import LocalCache
from .collection import ActivityCollection
from .commands import (
    ActivityForm,
    Command,
    CommandDispatcher,
    CommandResult,
    StatusReporter,
)
from .history import SnapshotHistory
from .storage import JsonFileStore, KeyValueStore

logger = logging.getLogger(__name__)


@dataclass
class ClientSession:
    """Everything a client needs, built around one :class:`ActivityCollection`."""

    collection: ActivityCollection
    history: SnapshotHistory
    cache: LocalCache
    remote: RemoteSyncClient
    dispatcher: CommandDispatcher

    @classmethod
    def create(
        cls,
        *,
        store: KeyValueStore | None = None,
        http_client: httpx.Client | None = None,
        reporter: StatusReporter | None = None,
        settings: Settings | None = None,
    ) -> "ClientSession":
        """Build a session, restoring the cached activities first.

        The history starts recording after the cache is loaded, so the
        restored state is the oldest point undo can return to.
        """

        settings = settings or get_settings()
        collection = ActivityCollection()

        cache = LocalCache(collection, store or JsonFileStore(settings.cache_path))
        cache.load()
        cache.attach()

        history = SnapshotHistory(limit=settings.history_limit)
        history.attach(collection)

        if http_client is None:
            remote = RemoteSyncClient.from_settings(collection, settings)
        else:
            remote = RemoteSyncClient(collection, http_client)

        dispatcher = CommandDispatcher(collection, remote, history, reporter=reporter)
        logger.debug("Client session started with %d cached activities", len(collection))
        return cls(
            collection=collection,
            history=history,
            cache=cache,
            remote=remote,
            dispatcher=dispatcher,
        )

    def execute(self, command: Command, form: ActivityForm | None = None) -> CommandResult:
        return self.dispatcher.execute(command, form)

    def close(self) -> None:
        self.history.detach()
        self.cache.detach()
        self.remote.close()


__all__ = ["ClientSession"]
