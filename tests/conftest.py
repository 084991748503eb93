"""Shared fixtures for the test-suite."""

from __future__ import annotations

import os
import tempfile
from collections.abc import Iterator
from pathlib import Path

import pytest

_TEST_DIR = Path(tempfile.mkdtemp(prefix="activity-tracker-tests-"))
os.environ["DATABASE_URL"] = f"sqlite:///{_TEST_DIR / 'test.db'}"
os.environ["CACHE_PATH"] = str(_TEST_DIR / "cache.json")
os.environ["APP_TIMEZONE"] = "UTC"

from fastapi.testclient import TestClient  # noqa: E402

from activity_tracker.client import ActivityCollection, RemoteSyncClient  # noqa: E402
from activity_tracker.config import reset_settings_cache  # noqa: E402

reset_settings_cache()


@pytest.fixture()
def client() -> Iterator[TestClient]:
    """Return a test client bound to an application with empty tables."""

    from activity_tracker.infrastructure import database
    from activity_tracker.infrastructure import models  # noqa: F401

    database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)
    database.Base.metadata.create_all(bind=database.engine)

    from main import create_app

    app = create_app()
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def collection() -> ActivityCollection:
    return ActivityCollection()


@pytest.fixture()
def remote(client: TestClient, collection: ActivityCollection) -> RemoteSyncClient:
    """Sync client talking to the in-process application."""

    return RemoteSyncClient(collection, client)
