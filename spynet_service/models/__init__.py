from .endpoints import ResponseSpec, EndpointConfig, ConfigureEndpointRequest
from .sessions import SessionMetadata, RequestRecord
from .messages import (
    ActionMessage,
    DataMessage,
    SocketMessage,
    SendActionRequest,
    SendDataRequest,
    socket_message_adapter,
)

__all__ = [
    "ResponseSpec",
    "EndpointConfig",
    "ConfigureEndpointRequest",
    "SessionMetadata",
    "RequestRecord",
    "ActionMessage",
    "DataMessage",
    "SocketMessage",
    "SendActionRequest",
    "SendDataRequest",
    "socket_message_adapter",
]
