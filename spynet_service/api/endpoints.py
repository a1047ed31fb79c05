import logging
from typing import Optional

from fastapi import APIRouter, Request
from fastapi.responses import Response

from ..models.endpoints import ConfigureEndpointRequest
from .dependencies import get_session_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/_mock/sessions/{session_id}/endpoints")


@router.post("", status_code=201)
async def configure_endpoint(request: Request, session_id: str, body: ConfigureEndpointRequest):
    store = get_session_store(request)
    session = store.get_or_create(session_id)
    store.touch(session_id)
    session.endpoints.configure(body.method, body.path, body.responses)
    logger.info("Session %s: configured %s %s (%d response(s))",
                session_id, body.method.upper(), body.path, len(body.responses))
    return {"success": True}


@router.get("")
async def list_endpoints(request: Request, session_id: str):
    store = get_session_store(request)
    session = store.get_or_create(session_id)
    return [e.model_dump(mode="json", by_alias=True) for e in session.endpoints.list()]


@router.delete("")
async def clear_endpoints(request: Request, session_id: str,
                          method: Optional[str] = None, path: Optional[str] = None):
    store = get_session_store(request)
    session = store.get_or_create(session_id)
    if method and path:
        session.endpoints.clear(method, path)
    else:
        session.endpoints.clear_all()
    return Response(status_code=204)
