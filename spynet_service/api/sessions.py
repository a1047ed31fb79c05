from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, Response

from ..services.session_store import MAX_REQUEST_QUERY
from .dependencies import get_session_store

router = APIRouter(prefix="/_mock/sessions")


@router.get("")
async def list_sessions(request: Request):
    store = get_session_store(request)
    return [s.model_dump(mode="json", by_alias=True) for s in store.list()]


@router.delete("/{session_id}")
async def delete_session(request: Request, session_id: str):
    store = get_session_store(request)
    if not await store.delete(session_id):
        return JSONResponse(status_code=404, content={"error": "Session not found"})
    return Response(status_code=204)


@router.get("/{session_id}/requests")
async def get_request_history(request: Request, session_id: str, limit: int = 100):
    store = get_session_store(request)
    session = store.get_or_create(session_id)
    limit = max(1, min(limit, MAX_REQUEST_QUERY))
    return [r.model_dump(mode="json", by_alias=True) for r in session.recent_requests(limit)]
