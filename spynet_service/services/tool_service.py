"""Controller-facing tool handlers.

These wrap the same core operations as the control-plane HTTP routes, but
return ``{"success": bool, ...}`` result dicts instead of status codes so an
agent framework can expose them as tools directly.
"""

import logging
from typing import Any, Awaitable, Callable

from pydantic import BaseModel, ValidationError

from ..models.tools import (
    ClearEndpointsArgs,
    ConfigureEndpointArgs,
    ListSessionsArgs,
    RequestHistoryArgs,
    SendActionArgs,
    SendDataArgs,
    SessionArgs,
)
from .connection_hub import ConnectionHub
from .session_store import SessionStore

logger = logging.getLogger(__name__)

TOOL_SPECS: list[tuple[str, str, type[BaseModel]]] = [
    ("configure_endpoint", "Configure a mock API endpoint with sequential responses", ConfigureEndpointArgs),
    ("list_sessions", "List all active sessions with metadata", ListSessionsArgs),
    ("delete_session", "Delete a session and clean up resources", SessionArgs),
    ("list_endpoints", "List configured endpoints for a session", SessionArgs),
    ("clear_endpoints", "Clear configured endpoints (all or specific)", ClearEndpointsArgs),
    ("get_request_history", "Get request history for a session", RequestHistoryArgs),
    ("send_websocket_action", "Send an action message to connected WebSocket client", SendActionArgs),
    ("send_websocket_data", "Send a data message to connected WebSocket client", SendDataArgs),
]


def _validation_error_message(e: ValidationError) -> str:
    missing = [
        str(err["loc"][0]) for err in e.errors()
        if err["type"] == "missing" and err["loc"]
    ]
    if missing:
        return f"Missing required fields: {', '.join(missing)}"
    err = e.errors()[0]
    loc = ".".join(str(part) for part in err["loc"])
    return f"Invalid arguments: {loc}: {err['msg']}" if loc else f"Invalid arguments: {err['msg']}"


def tool_definitions() -> list[dict]:
    """Tool name, description and JSON input schema for every handler."""
    return [
        {
            "name": name,
            "description": description,
            "inputSchema": args_model.model_json_schema(by_alias=True),
        }
        for name, description, args_model in TOOL_SPECS
    ]


class ToolService:
    def __init__(self, store: SessionStore, hub: ConnectionHub):
        self.store = store
        self.hub = hub
        self._handlers: dict[str, Callable[[Any], Awaitable[dict]]] = {
            "configure_endpoint": self.configure_endpoint,
            "list_sessions": self.list_sessions,
            "delete_session": self.delete_session,
            "list_endpoints": self.list_endpoints,
            "clear_endpoints": self.clear_endpoints,
            "get_request_history": self.get_request_history,
            "send_websocket_action": self.send_websocket_action,
            "send_websocket_data": self.send_websocket_data,
        }
        self._args_models = {name: model for name, _, model in TOOL_SPECS}

    def has_tool(self, name: str) -> bool:
        return name in self._handlers

    async def call(self, name: str, args: dict | None = None) -> dict:
        """Validate ``args`` for tool ``name`` and run it."""
        if not self.has_tool(name):
            return {"success": False, "error": f"Unknown tool: {name}"}
        try:
            parsed = self._args_models[name].model_validate(args or {})
        except ValidationError as e:
            return {"success": False, "error": _validation_error_message(e)}
        logger.debug("Tool call %s", name)
        return await self._handlers[name](parsed)

    async def configure_endpoint(self, args: ConfigureEndpointArgs) -> dict:
        session = self.store.get_or_create(args.session_id)
        self.store.touch(args.session_id)
        session.endpoints.configure(args.method, args.path, args.responses)
        return {"success": True}

    async def list_sessions(self, args: ListSessionsArgs | None = None) -> dict:
        sessions = self.store.list()
        return {
            "success": True,
            "data": [s.model_dump(mode="json", by_alias=True) for s in sessions],
        }

    async def delete_session(self, args: SessionArgs) -> dict:
        if not await self.store.delete(args.session_id):
            return {"success": False, "error": f"Session not found: {args.session_id}"}
        return {"success": True}

    async def list_endpoints(self, args: SessionArgs) -> dict:
        session = self.store.get_or_create(args.session_id)
        endpoints = session.endpoints.list()
        return {
            "success": True,
            "data": [e.model_dump(mode="json", by_alias=True) for e in endpoints],
        }

    async def clear_endpoints(self, args: ClearEndpointsArgs) -> dict:
        session = self.store.get_or_create(args.session_id)
        if args.method and args.path:
            session.endpoints.clear(args.method, args.path)
        else:
            session.endpoints.clear_all()
        return {"success": True}

    async def get_request_history(self, args: RequestHistoryArgs) -> dict:
        session = self.store.get_or_create(args.session_id)
        records = session.recent_requests(args.limit)
        return {
            "success": True,
            "data": [r.model_dump(mode="json", by_alias=True) for r in records],
        }

    async def send_websocket_action(self, args: SendActionArgs) -> dict:
        try:
            sent = await self.hub.send_action(args.session_id, args.action, args.params)
        except Exception as e:
            logger.warning("Sending action to session %s failed: %s", args.session_id, e)
            return {"success": False, "error": f"Failed to send action: {e}"}
        if not sent:
            return {"success": False, "error": "No active connection for session"}
        return {"success": True}

    async def send_websocket_data(self, args: SendDataArgs) -> dict:
        try:
            sent = await self.hub.send_data(args.session_id, args.data)
        except Exception as e:
            logger.warning("Sending data to session %s failed: %s", args.session_id, e)
            return {"success": False, "error": f"Failed to send data: {e}"}
        if not sent:
            return {"success": False, "error": "No active connection for session"}
        return {"success": True}
