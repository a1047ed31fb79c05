"""Tests for /_mock/tools, the HTTP transport for controller tools."""

import pytest


pytestmark = pytest.mark.asyncio


async def test_list_tools(client):
    resp = await client.get("/_mock/tools")
    assert resp.status_code == 200
    data = resp.json()
    assert data["count"] == 8
    names = [t["name"] for t in data["tools"]]
    assert "configure_endpoint" in names
    assert "send_websocket_action" in names
    assert all("inputSchema" in t for t in data["tools"])


async def test_call_configure_endpoint(client):
    resp = await client.post("/_mock/tools/configure_endpoint", json={
        "sessionId": "s1",
        "method": "GET",
        "path": "/api/test",
        "responses": [{"status": 503}, {"status": 200, "body": {"ok": True}}],
    })
    assert resp.status_code == 200
    assert resp.json() == {"success": True}

    assert (await client.get("/session/s1/api/test")).status_code == 503
    assert (await client.get("/session/s1/api/test")).json() == {"ok": True}


async def test_call_list_sessions_without_body(client):
    await client.get("/session/s1/api/ping")
    resp = await client.post("/_mock/tools/list_sessions")
    assert resp.status_code == 200
    data = resp.json()
    assert data["success"] is True
    assert [s["id"] for s in data["data"]] == ["s1"]


async def test_call_reports_validation_errors(client):
    resp = await client.post("/_mock/tools/delete_session", json={})
    assert resp.status_code == 200
    assert resp.json() == {"success": False, "error": "Missing required fields: sessionId"}


async def test_call_send_without_connection(client):
    resp = await client.post("/_mock/tools/send_websocket_action", json={
        "sessionId": "s1", "action": "logout",
    })
    assert resp.json() == {"success": False, "error": "No active connection for session"}


async def test_call_unknown_tool(client):
    resp = await client.post("/_mock/tools/launch_rockets", json={})
    assert resp.status_code == 404
    assert resp.json() == {"success": False, "error": "Unknown tool: launch_rockets"}


async def test_tools_service_unavailable(client_no_services):
    resp = await client_no_services.post("/_mock/tools/list_sessions", json={})
    assert resp.status_code == 503
