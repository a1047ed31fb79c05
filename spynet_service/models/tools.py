from pydantic import BaseModel, Field, field_validator
from typing import Any, Optional

from .endpoints import ResponseSpec, check_endpoint_path


class _ToolArgs(BaseModel):
    model_config = {"populate_by_name": True}

    session_id: str = Field(alias="sessionId", min_length=1, description="Session identifier")


class ConfigureEndpointArgs(_ToolArgs):
    method: str = Field(min_length=1, description="HTTP method (GET, POST, etc.)")
    path: str = Field(min_length=1, description="Endpoint path (e.g., /api/users)")
    responses: list[ResponseSpec] = Field(
        min_length=1, description="Array of responses for sequential behavior"
    )

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: str) -> str:
        return check_endpoint_path(v)


class ListSessionsArgs(BaseModel):
    pass


class SessionArgs(_ToolArgs):
    pass


class ClearEndpointsArgs(_ToolArgs):
    method: Optional[str] = Field(default=None, description="Optional: HTTP method to clear")
    path: Optional[str] = Field(default=None, description="Optional: endpoint path to clear")


class RequestHistoryArgs(_ToolArgs):
    limit: int = Field(
        default=100, ge=1, description="Maximum number of requests to return (default: 100)"
    )


class SendActionArgs(_ToolArgs):
    action: str = Field(min_length=1, description="Action name (e.g., logout, navigate)")
    params: Optional[Any] = Field(default=None, description="Optional action parameters")


class SendDataArgs(_ToolArgs):
    data: Any = Field(description="Data payload to send")
