"""Translate user intents into sync-client and history calls."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from activity_tracker.domain.entities import (
    DEFAULT_NETWORKING_FORMAT,
    TYPE_SPECIFIC_FIELDS,
    Activity,
)
from activity_tracker.domain.errors import ActivityError, ActivityValidationError

from .api_client import RemoteSyncClient
from .collection import ActivityCollection
from .history import SnapshotHistory

logger = logging.getLogger(__name__)

StatusReporter = Callable[[str, bool], None]


class Commands(str, Enum):
    ADD = "add"
    UPDATE = "update"
    DELETE = "delete"
    COMPLETE = "complete"
    CANCEL = "cancel"
    UNDO = "undo"


@dataclass(frozen=True)
class Command:
    name: str
    args: Sequence[Any] = ()


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a dispatched command.

    ``error`` keeps the reason reported by the server or the domain layer so
    callers can show more than a generic failure message.
    """

    ok: bool
    message: str
    error: str | None = None
    activity: Activity | None = None


@dataclass
class ActivityForm:
    """Values entered by the user for an activity."""

    type: str
    title: str = ""
    date: str = ""
    time: str = ""
    description: str = ""
    location: str = ""
    capacity: int | str | None = None
    presenter: str = ""
    materials: str = ""
    mentor: str = ""
    mentee: str = ""
    focus: str = ""
    format: str = DEFAULT_NETWORKING_FORMAT
    partners: str = ""

    def is_complete(self) -> bool:
        return bool(self.title.strip() and self.date and self.time)

    def parsed_capacity(self) -> int | None:
        if self.capacity is None or self.capacity == "":
            return None
        try:
            capacity = int(self.capacity)
        except (TypeError, ValueError) as exc:
            raise ActivityValidationError("Capacity must be a non-negative number") from exc
        if capacity < 0:
            raise ActivityValidationError("Capacity must be a non-negative number")
        return capacity

    def to_changes(self) -> dict[str, Any]:
        """Return the editable values, trimmed, with this type's extra fields."""

        changes: dict[str, Any] = {
            "title": self.title.strip(),
            "date": self.date,
            "time": self.time,
            "description": self.description.strip(),
            "location": self.location.strip(),
            "capacity": self.parsed_capacity(),
        }
        for name in TYPE_SPECIFIC_FIELDS.get(self.type, ()):
            value = getattr(self, name)
            changes[name] = value if name == "format" else value.strip()
        return changes


def _log_status(message: str, is_error: bool) -> None:
    if is_error:
        logger.warning(message)
    else:
        logger.info(message)


class CommandDispatcher:
    """Run one :class:`Command` against the collection.

    Network-backed commands wait for the server before the collection changes
    and never raise for runtime failures: the outcome is reported through the
    status reporter and returned as a :class:`CommandResult`.
    """

    def __init__(
        self,
        collection: ActivityCollection,
        remote: RemoteSyncClient,
        history: SnapshotHistory,
        *,
        reporter: StatusReporter | None = None,
    ) -> None:
        self.collection = collection
        self.remote = remote
        self.history = history
        self.reporter = reporter or _log_status
        self._handlers: dict[Commands, Callable[..., CommandResult]] = {
            Commands.ADD: self._add,
            Commands.UPDATE: self._update,
            Commands.DELETE: self._delete,
            Commands.COMPLETE: self._complete,
            Commands.CANCEL: self._cancel,
            Commands.UNDO: self._undo,
        }

    def execute(self, command: Command, form: ActivityForm | None = None) -> CommandResult:
        try:
            name = Commands(command.name)
        except ValueError:
            raise ValueError(f"Unknown command: {command.name!r}") from None

        result = self._handlers[name](command.args, form)
        self.reporter(result.message, not result.ok)
        return result

    def _add(self, args: Sequence[Any], form: ActivityForm | None) -> CommandResult:
        if form is None or not form.is_complete():
            return CommandResult(False, "Title, date and time are required")
        try:
            payload = {"type": form.type, **form.to_changes()}
            activity = self.remote.add_activity(payload)
        except ActivityError as exc:
            return self._failure("Failed to create activity", exc)
        return CommandResult(True, "Activity created successfully", activity=activity)

    def _update(self, args: Sequence[Any], form: ActivityForm | None) -> CommandResult:
        activity_id = self._target(args)
        if self.collection.find_by_id(activity_id) is None:
            return CommandResult(False, "Activity not found", error="Activity not found")
        if form is None or not form.is_complete():
            return CommandResult(False, "Title, date and time are required")
        try:
            activity = self.remote.update_activity(activity_id, form.to_changes())
        except ActivityError as exc:
            return self._failure("Failed to update activity", exc)
        return CommandResult(True, "Activity updated successfully", activity=activity)

    def _delete(self, args: Sequence[Any], form: ActivityForm | None) -> CommandResult:
        try:
            self.remote.delete_activity(self._target(args))
        except ActivityError as exc:
            return self._failure("Failed to delete activity", exc)
        return CommandResult(True, "Activity deleted successfully")

    def _complete(self, args: Sequence[Any], form: ActivityForm | None) -> CommandResult:
        try:
            activity = self.remote.complete_activity(self._target(args))
        except ActivityError as exc:
            return self._failure("Failed to complete activity", exc)
        return CommandResult(True, "Activity completed", activity=activity)

    def _cancel(self, args: Sequence[Any], form: ActivityForm | None) -> CommandResult:
        try:
            activity = self.remote.cancel_activity(self._target(args))
        except ActivityError as exc:
            return self._failure("Failed to cancel activity", exc)
        return CommandResult(True, "Activity cancelled", activity=activity)

    def _undo(self, args: Sequence[Any], form: ActivityForm | None) -> CommandResult:
        previous = self.history.undo()
        if previous is None:
            return CommandResult(False, "Nothing to undo")
        self.collection.replace_list(previous)
        return CommandResult(True, "Last change undone")

    @staticmethod
    def _target(args: Sequence[Any]) -> str:
        if not args:
            raise ValueError("This command needs the target activity id")
        return str(args[0])

    @staticmethod
    def _failure(message: str, exc: ActivityError) -> CommandResult:
        reason = getattr(exc, "reason", None) or str(exc)
        logger.error("%s: %s", message, reason)
        return CommandResult(False, message, error=reason)


__all__ = [
    "ActivityForm",
    "Command",
    "CommandDispatcher",
    "CommandResult",
    "Commands",
    "StatusReporter",
]
