from fastapi import HTTPException
from starlette.requests import HTTPConnection

from ..services import ConnectionHub, MockService, SessionStore, ToolService


def get_session_store(conn: HTTPConnection) -> SessionStore:
    store = getattr(conn.app.state, "session_store", None)
    if store is None:
        raise HTTPException(status_code=503, detail="Session store not available")
    return store


def get_connection_hub(conn: HTTPConnection) -> ConnectionHub:
    hub = getattr(conn.app.state, "connection_hub", None)
    if hub is None:
        raise HTTPException(status_code=503, detail="Connection hub not available")
    return hub


def get_mock_service(conn: HTTPConnection) -> MockService:
    svc = getattr(conn.app.state, "mock_service", None)
    if svc is None:
        raise HTTPException(status_code=503, detail="Mock service not available")
    return svc


def get_tool_service(conn: HTTPConnection) -> ToolService:
    svc = getattr(conn.app.state, "tool_service", None)
    if svc is None:
        raise HTTPException(status_code=503, detail="Tool service not available")
    return svc
