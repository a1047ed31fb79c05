from pydantic import BaseModel, Field, TypeAdapter
from typing import Annotated, Any, Literal, Optional, Union


class ActionMessage(BaseModel):
    type: Literal["action"] = "action"
    action: str
    params: Any = None


class DataMessage(BaseModel):
    type: Literal["data"] = "data"
    data: Any = None


SocketMessage = Annotated[Union[ActionMessage, DataMessage], Field(discriminator="type")]

socket_message_adapter = TypeAdapter(SocketMessage)


class SendActionRequest(BaseModel):
    action: str = Field(min_length=1)
    params: Optional[Any] = None


class SendDataRequest(BaseModel):
    data: Any
