"""Chat DTOs."""

from datetime import datetime
from typing import Literal
from pydantic import BaseModel

from promptcraft.domain.entities.message import Message


class MessageDTO(BaseModel):
    """DTO for message data returned to the presentation layer."""

    id: str
    conversation_id: str
    user_id: str
    role: Literal["user", "assistant"]
    content: str
    created_at: datetime

    @classmethod
    def from_entity(cls, message: Message) -> "MessageDTO":
        return cls(
            id=message.id.value,
            conversation_id=message.conversation_id.value,
            user_id=message.user_id.value,
            role=message.role,
            content=message.content,
            created_at=message.created_at,
        )
