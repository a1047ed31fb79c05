"""Test configuration and shared fixtures for SpyNet service tests.

The FastAPI app is exercised in-process through ``httpx.ASGITransport``;
lifespan does not run there, so each fixture wires fresh services onto
``app.state`` itself.
"""

import json
from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from spynet_service.config import SpynetSettings
from spynet_service.services.connection_hub import ConnectionHub
from spynet_service.services.session_store import SessionStore


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _make_settings(**overrides) -> SpynetSettings:
    defaults = {
        "host": "127.0.0.1",
        "port": 8675,
        "session_ttl": 3600000,
        "sweep_interval": 60000,
        "history_limit": 1000,
    }
    defaults.update(overrides)
    return SpynetSettings(**defaults)


class FakeChannel:
    """Stands in for a Starlette WebSocket; records every write and close."""

    def __init__(self, fail_with: Exception | None = None, close_error: Exception | None = None,
                 on_close=None):
        self.sent: list[str] = []
        self.closed = False
        self.close_code = None
        self._fail_with = fail_with
        self._close_error = close_error
        self._on_close = on_close

    async def send_text(self, data: str) -> None:
        if self._fail_with is not None:
            raise self._fail_with
        self.sent.append(data)

    async def close(self, code: int = 1000) -> None:
        if self._on_close is not None:
            await self._on_close()
        self.closed = True
        self.close_code = code
        if self._close_error is not None:
            raise self._close_error

    @property
    def messages(self) -> list[dict]:
        return [json.loads(s) for s in self.sent]


class FakeClock:
    """Deterministic clock for the session store."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2026, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now += timedelta(**kwargs)
        return self.now


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def settings():
    return _make_settings()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def hub():
    return ConnectionHub()


@pytest.fixture
def store(hub, clock):
    return SessionStore(hub, ttl_ms=60000, sweep_interval_ms=1000, clock=clock)


@pytest.fixture
def channel():
    return FakeChannel()


@pytest_asyncio.fixture
async def app_with_services():
    """FastAPI app with freshly built services on ``app.state``."""
    from spynet_service.main import app, init_services

    init_services(app, _make_settings())
    yield app
    await app.state.session_store.destroy()


@pytest_asyncio.fixture
async def client(app_with_services):
    """AsyncClient hitting the app in-process."""
    transport = ASGITransport(app=app_with_services)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest_asyncio.fixture
async def app_no_services():
    """FastAPI app with services missing from ``app.state`` (503 paths)."""
    from spynet_service.main import app

    app.state.settings = _make_settings()
    app.state.session_store = None
    app.state.connection_hub = None
    app.state.mock_service = None
    app.state.tool_service = None
    yield app


@pytest_asyncio.fixture
async def client_no_services(app_no_services):
    transport = ASGITransport(app=app_no_services)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
