"""
Chat Models - Request, context and message structures for the relay endpoint.
"""

from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


class Role(str, Enum):
    """Speaker of a transcript entry."""
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class ChatMessage(BaseModel):
    """One transcript entry. Frozen once created."""
    model_config = ConfigDict(frozen=True, use_enum_values=True)

    role: Role
    content: str


class UserContext(BaseModel):
    """Ambient caller context, folded into the context message."""
    user_location: Optional[Any] = None
    user_weather: Optional[Any] = None


class RelayRequest(BaseModel):
    """
    Body of a relay call.

    sessionId must be a JSON integer and userMessage a JSON string; no coercion
    is applied to either. Location and weather are passed through untyped.
    """
    model_config = ConfigDict(populate_by_name=True)

    session_id: StrictInt = Field(alias="sessionId")
    user_message: StrictStr = Field(alias="userMessage")
    user_location: Optional[Any] = Field(default=None, alias="userLocation")
    user_weather: Optional[Any] = Field(default=None, alias="userWeather")

    def user_context(self) -> UserContext:
        return UserContext(user_location=self.user_location, user_weather=self.user_weather)
