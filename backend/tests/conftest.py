"""
Notes App Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, created fresh for each test):
    ├── clock:        Deterministic clock, one second per call
    ├── store:        Empty NoteStore driven by `clock`
    ├── app:          FastAPI app built by create_app() around `store`
    └── test_client:  HTTPX AsyncClient talking to `app` in-process
"""

import os
from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient


# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["SEED_WELCOME_NOTE"] = "false"
os.environ.pop("STATIC_DIR", None)


class FakeClock:
    """Returns strictly increasing UTC datetimes, one second apart."""

    def __init__(self, start: datetime = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)):
        self.current = start

    def __call__(self) -> datetime:
        now = self.current
        self.current = now + timedelta(seconds=1)
        return now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    from app.store import NoteStore
    return NoteStore(clock=clock)


@pytest.fixture
def app(store):
    from app.main import create_app
    return create_app(store=store)


@pytest_asyncio.fixture
async def test_client(app):
    """
    Async HTTP client routed straight into the ASGI app.

    The FastAPI lifespan is not run, so no welcome note is seeded.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
