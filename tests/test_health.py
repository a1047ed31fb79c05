"""Tests for the /api/health endpoint."""

import pytest


pytestmark = pytest.mark.asyncio


async def test_health(client):
    resp = await client.get("/api/health")
    assert resp.status_code == 200

    data = resp.json()
    assert data["status"] == "ok"
    assert data["version"] == "0.1.0"
    assert data["sessions"] == 0
    assert data["connections"] == 0
    assert data["session_ttl_ms"] == 3600000
    assert data["sweep_interval_ms"] == 60000


async def test_health_counts_sessions(client):
    await client.get("/session/a/x")
    await client.get("/session/b/x")
    data = (await client.get("/api/health")).json()
    assert data["sessions"] == 2


async def test_health_without_services(client_no_services):
    resp = await client_no_services.get("/api/health")
    assert resp.status_code == 200
    assert resp.json()["sessions"] == 0
