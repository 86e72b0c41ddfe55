"""Chat history schemas for the parking search assistant."""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from parkpulse.schemas.search_schema import ParkingResults


class ChatRole(str, Enum):
    USER = "user"
    MODEL = "model"
    SYSTEM = "system"


class ChatMessage(BaseModel):
    """A single message in the assistant conversation."""

    role: ChatRole
    content: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    results: Optional[ParkingResults] = None
