"""
Notes API Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, created fresh for each test):
    ├── fake_clock:   Controllable clock for deterministic timestamps
    ├── store:        Seeded InMemoryNoteStore driven by fake_clock
    ├── empty_store:  InMemoryNoteStore with no seed data
    ├── service:      NotesService over `store`
    ├── app:          FastAPI app serving `service`
    └── test_client:  HTTPX AsyncClient bound to `app`
"""

import os
from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests
os.environ["ENVIRONMENT"] = "test"

from notes_api.main import create_app  # noqa: E402
from notes_api.services.note_service import NotesService  # noqa: E402
from notes_api.store.memory import InMemoryNoteStore  # noqa: E402


class FakeClock:
    """Callable clock that only moves when a test advances it."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float = 1.0) -> datetime:
        self.now = self.now + timedelta(seconds=seconds)
        return self.now


@pytest.fixture
def fake_clock():
    return FakeClock(datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def store(fake_clock):
    """Seeded store (ids "1" and "2") whose timestamps come from fake_clock."""
    return InMemoryNoteStore(seed=True, clock=fake_clock)


@pytest.fixture
def empty_store(fake_clock):
    return InMemoryNoteStore(seed=False, clock=fake_clock)


@pytest.fixture
def service(store):
    return NotesService(store)


@pytest.fixture
def app(service):
    """A fresh application per test, so no state leaks between tests."""
    return create_app(service=service)


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient configured to talk to the FastAPI app without a server.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
