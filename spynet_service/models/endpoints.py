from pydantic import BaseModel, Field, field_validator
from typing import Any, Optional


class ResponseSpec(BaseModel):
    status: int = Field(ge=100, le=599)
    headers: Optional[dict[str, str]] = None
    body: Any = None


class EndpointConfig(BaseModel):
    model_config = {"populate_by_name": True}

    method: str
    path: str
    responses: list[ResponseSpec]
    call_count: int = Field(default=0, alias="callCount")


def check_endpoint_path(v: str) -> str:
    if not v.startswith("/"):
        raise ValueError(f"Path must start with '/': {v!r}")
    return v


class ConfigureEndpointRequest(BaseModel):
    method: str = Field(min_length=1)
    path: str = Field(min_length=1)
    responses: list[ResponseSpec] = Field(min_length=1)

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: str) -> str:
        return check_endpoint_path(v)
