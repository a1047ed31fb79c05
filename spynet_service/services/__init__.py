from .connection_hub import ConnectionHub
from .endpoint_registry import EndpointRegistry, make_key
from .mock_service import MockResult, MockService
from .session_store import Session, SessionStore
from .tool_service import ToolService, tool_definitions

__all__ = [
    "ConnectionHub",
    "EndpointRegistry",
    "make_key",
    "MockResult",
    "MockService",
    "Session",
    "SessionStore",
    "ToolService",
    "tool_definitions",
]
