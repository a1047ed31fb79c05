from datetime import datetime

from pydantic import BaseModel, Field


class SessionMetadata(BaseModel):
    model_config = {"populate_by_name": True}

    id: str
    created_at: datetime = Field(alias="createdAt")
    last_activity_at: datetime = Field(alias="lastActivityAt")
    connected: bool = False


class RequestRecord(BaseModel):
    model_config = {"populate_by_name": True, "frozen": True}

    method: str
    path: str
    status: int
    timestamp: datetime
    configured: bool
    response_time_ms: float = Field(alias="responseTime")
