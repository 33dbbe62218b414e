"""Conversation DTOs."""

from pydantic import BaseModel
from datetime import datetime

from promptcraft.domain.entities.conversation import Conversation


class ConversationDTO(BaseModel):
    id: str
    user_id: str
    title: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, conversation: Conversation) -> "ConversationDTO":
        return cls(
            id=conversation.id.value,
            user_id=conversation.user_id.value,
            title=conversation.title,
            created_at=conversation.created_at,
            updated_at=conversation.updated_at,
        )
