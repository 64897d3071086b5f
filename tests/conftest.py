"""
Shared pytest fixtures for the Tasklist test suite.

Module-level defaults; individual test classes may override
with their own class-level fixtures (pytest priority: class > conftest).
"""
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from tasklist.api.app import create_app
from tasklist.api.deps import get_store
from tasklist.config.settings import Settings, StoreSettings, DatabaseSettings
from tasklist.storage import Database
from tasklist.tasks import TaskStore, InMemoryTaskStore


@pytest.fixture
def db(tmp_path):
    """Fresh database for each test."""
    database = Database(tmp_path / "test.sqlite3")
    yield database
    database.close()


@pytest.fixture
def mock_store():
    """Task store double; tests program its return values."""
    return MagicMock(spec=TaskStore)


@pytest.fixture
def app(mock_store):
    """Create test app with the store dependency replaced by the mock."""
    application = create_app()
    application.dependency_overrides[get_store] = lambda: mock_store
    return application


@pytest.fixture
def client(app):
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def memory_store():
    return InMemoryTaskStore()


@pytest.fixture
def live_client(memory_store):
    """Client wired to a real in-memory store."""
    application = create_app()
    application.dependency_overrides[get_store] = lambda: memory_store
    return TestClient(application)


@pytest.fixture
def sqlite_client(tmp_path):
    """Client for an app whose settings select the sqlite backend."""
    application = create_app(Settings(
        store=StoreSettings(backend="sqlite"),
        database=DatabaseSettings(path=tmp_path / "api.sqlite3"),
    ))
    with TestClient(application) as test_client:
        yield test_client
