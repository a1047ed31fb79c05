import logging

from fastapi import APIRouter, Request, WebSocket, WebSocketDisconnect
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.websockets import WebSocketState

from ..models.messages import ActionMessage, SendActionRequest, SendDataRequest, socket_message_adapter
from .dependencies import get_connection_hub, get_session_store

logger = logging.getLogger(__name__)

router = APIRouter()

NO_CONNECTION = {"error": "No active connection"}


@router.post("/_mock/sessions/{session_id}/socket/action")
async def send_action(request: Request, session_id: str, body: SendActionRequest):
    hub = get_connection_hub(request)
    if not await hub.send_action(session_id, body.action, body.params):
        return JSONResponse(status_code=404, content=NO_CONNECTION)
    logger.info("Session %s: sent action %r", session_id, body.action)
    return {"success": True}


@router.post("/_mock/sessions/{session_id}/socket/message")
async def send_message(request: Request, session_id: str, body: SendDataRequest):
    hub = get_connection_hub(request)
    if not await hub.send_data(session_id, body.data):
        return JSONResponse(status_code=404, content=NO_CONNECTION)
    logger.info("Session %s: sent data message", session_id)
    return {"success": True}


@router.websocket("/session/{session_id}/socket")
async def session_socket(websocket: WebSocket, session_id: str):
    store = get_session_store(websocket)
    hub = get_connection_hub(websocket)

    await websocket.accept()
    store.get_or_create(session_id)
    store.touch(session_id)

    previous = hub.register(session_id, websocket)
    if previous is not None:
        try:
            await previous.close(code=1000)
        except Exception as e:
            logger.warning("Closing replaced connection for session %s failed: %s", session_id, e)
    logger.info("Session %s: client connected", session_id)

    try:
        while websocket.application_state == WebSocketState.CONNECTED:
            text = await websocket.receive_text()
            store.touch(session_id)
            try:
                message = socket_message_adapter.validate_json(text)
            except ValidationError as e:
                logger.warning("Session %s: ignoring malformed frame: %s", session_id, e.errors()[0]["msg"])
                continue
            if isinstance(message, ActionMessage):
                logger.info("Session %s: client action %r", session_id, message.action)
            else:
                logger.debug("Session %s: client data frame", session_id)
    except WebSocketDisconnect:
        pass
    finally:
        # A replaced socket closing late must not evict its successor
        if hub.unregister(session_id, websocket):
            logger.info("Session %s: client disconnected", session_id)
