"""HTTP client that keeps an :class:`ActivityCollection` in step with the API."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from activity_tracker.config import Settings, get_settings
from activity_tracker.domain.entities import Activity
from activity_tracker.domain.errors import TransportError

from .collection import ActivityCollection

logger = logging.getLogger(__name__)

API_PREFIX = "/api"

_FILTER_PARAMS = {
    "type": "type",
    "status": "status",
    "start_date": "startDate",
    "end_date": "endDate",
    "mentor": "mentor",
    "location": "location",
    "capacity": "capacity",
}


def _extract_error_reason(response: httpx.Response) -> str:
    """Return the most helpful description available for an error response."""

    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, Mapping):
        detail = body.get("detail", body.get("error"))
        if isinstance(detail, str) and detail:
            return detail
        if isinstance(detail, list):
            messages = [
                str(item.get("msg", item)) if isinstance(item, Mapping) else str(item)
                for item in detail
            ]
            if messages:
                return "; ".join(messages)

    text = response.text.strip()
    return text or response.reason_phrase or "Request failed"


def _filter_params(filters: Mapping[str, Any]) -> dict[str, Any]:
    params: dict[str, Any] = {}
    for name, value in filters.items():
        if name not in _FILTER_PARAMS:
            raise TypeError(f"Unknown activity filter: {name}")
        if value not in (None, ""):
            params[_FILTER_PARAMS[name]] = value
    return params


class RemoteSyncClient:
    """Typed wrapper over the activities REST API.

    Mutating calls only touch the collection after the server accepted the
    change; any network or HTTP failure raises :class:`TransportError` and
    leaves the collection as it was.
    """

    def __init__(
        self,
        collection: ActivityCollection,
        http_client: httpx.Client,
        *,
        api_prefix: str = API_PREFIX,
    ) -> None:
        self.collection = collection
        self.http_client = http_client
        self.api_prefix = api_prefix.rstrip("/")

    @classmethod
    def from_settings(
        cls, collection: ActivityCollection, settings: Settings | None = None
    ) -> "RemoteSyncClient":
        settings = settings or get_settings()
        http_client = httpx.Client(
            base_url=settings.api_base_url,
            timeout=settings.request_timeout_seconds,
        )
        return cls(collection, http_client)

    def close(self) -> None:
        self.http_client.close()

    # Collection reconciliation

    def fetch_activities(self, **filters: Any) -> list[Activity]:
        """Replace the collection with the activities held by the server."""

        records = self._request("GET", "/activities", params=_filter_params(filters))
        activities = [Activity.from_dict(record) for record in records]
        self.collection.replace_list(activities)
        logger.info("Fetched %d activities from the server", len(activities))
        return activities

    def sync_activities(self) -> list[Activity]:
        """Push every local activity; return the server set after the upsert."""

        payload = [activity.to_dict() for activity in self.collection.to_array()]
        records = self._request("POST", "/activities/sync", json=payload)
        logger.info(
            "Synced %d local activities; server now holds %d", len(payload), len(records)
        )
        return [Activity.from_dict(record) for record in records]

    # Per-item operations

    def add_activity(self, data: Mapping[str, Any]) -> Activity:
        record = self._request("POST", "/activities", json=dict(data))
        activity = Activity.from_dict(record)
        self.collection.add(activity)
        return activity

    def update_activity(self, activity_id: str, changes: Mapping[str, Any]) -> Activity:
        current = self.collection.find_by_id(activity_id)
        body = {**current.to_dict(), **changes} if current else dict(changes)
        body["id"] = activity_id
        record = self._request("PUT", f"/activities/{activity_id}", json=body)
        updated = Activity.from_dict(record)
        self.collection.update(
            activity_id,
            {name: getattr(updated, name) for name in updated.updatable_fields},
        )
        return updated

    def delete_activity(self, activity_id: str) -> str:
        response = self._request("DELETE", f"/activities/{activity_id}")
        self.collection.delete(activity_id)
        return str(response.get("message", "")) if isinstance(response, Mapping) else ""

    def complete_activity(self, activity_id: str) -> Activity:
        record = self._request("POST", f"/activities/{activity_id}/complete")
        completed = Activity.from_dict(record)
        self.collection.complete(activity_id, completed_date=completed.completed_date)
        return completed

    def cancel_activity(self, activity_id: str) -> Activity:
        record = self._request("POST", f"/activities/{activity_id}/cancel")
        cancelled = Activity.from_dict(record)
        self.collection.cancel(activity_id)
        return cancelled

    # Read-only queries

    def get_activity(self, activity_id: str) -> Activity:
        return Activity.from_dict(self._request("GET", f"/activities/{activity_id}"))

    def get_activities_by_type(self, activity_type: str, **filters: Any) -> list[Activity]:
        params = _filter_params({**filters, "type": activity_type})
        records = self._request("GET", "/activities", params=params)
        return [Activity.from_dict(record) for record in records]

    def get_upcoming_activities(self, limit: int = 10) -> list[Activity]:
        records = self._request("GET", "/activities/upcoming", params={"limit": limit})
        return [Activity.from_dict(record) for record in records]

    def get_recent_activities(self, limit: int = 10) -> list[Activity]:
        records = self._request("GET", "/activities/recent", params={"limit": limit})
        return [Activity.from_dict(record) for record in records]

    def get_statistics(
        self, start_date: str | None = None, end_date: str | None = None
    ) -> dict[str, Any]:
        params = {
            key: value
            for key, value in (("startDate", start_date), ("endDate", end_date))
            if value
        }
        return self._request("GET", "/statistics", params=params)

    def get_mentors(self) -> list[str]:
        return list(self._request("GET", "/mentors"))

    def get_dashboard_data(self) -> dict[str, Any]:
        return {
            "upcoming": self.get_upcoming_activities(5),
            "recent": self.get_recent_activities(5),
            "stats": self.get_statistics(),
        }

    def health(self) -> dict[str, Any]:
        return self._request("GET", "/health", prefixed=False)

    def _request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: Mapping[str, Any] | None = None,
        prefixed: bool = True,
    ) -> Any:
        url = f"{self.api_prefix}{path}" if prefixed else path
        try:
            response = self.http_client.request(method, url, json=json, params=params)
        except httpx.TimeoutException as exc:
            logger.error("%s %s timed out", method, url)
            raise TransportError("Request timed out") from exc
        except httpx.HTTPError as exc:
            logger.error("%s %s failed: %s", method, url, exc)
            raise TransportError(f"Could not reach the server: {exc}") from exc

        if response.is_error:
            reason = _extract_error_reason(response)
            logger.error(
                "%s %s returned status %s: %s", method, url, response.status_code, reason
            )
            raise TransportError(reason, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as exc:
            raise TransportError(
                "Server returned an invalid JSON body", status_code=response.status_code
            ) from exc


__all__ = ["API_PREFIX", "RemoteSyncClient"]
