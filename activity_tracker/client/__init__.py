"""Client-side activity list with offline cache, undo and server sync."""

from .api_client import RemoteSyncClient
from .cache import STORAGE_KEY, LocalCache
from .collection import ActivityCollection, Snapshot
from .commands import (
    ActivityForm,
    Command,
    CommandDispatcher,
    CommandResult,
    Commands,
)
from .history import DEFAULT_HISTORY_LIMIT, SnapshotHistory
from .observable import Observable, Subscription
from .session import ClientSession
from .storage import JsonFileStore, KeyValueStore, MemoryStore

__all__ = [
    "ActivityCollection",
    "ActivityForm",
    "ClientSession",
    "Command",
    "CommandDispatcher",
    "CommandResult",
    "Commands",
    "DEFAULT_HISTORY_LIMIT",
    "JsonFileStore",
    "KeyValueStore",
    "LocalCache",
    "MemoryStore",
    "Observable",
    "RemoteSyncClient",
    "STORAGE_KEY",
    "Snapshot",
    "SnapshotHistory",
    "Subscription",
]
