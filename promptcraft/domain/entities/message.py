"""
Message Entity - One immutable turn in a conversation.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import uuid4

from promptcraft.domain.value_objects.conversation_id import ConversationId
from promptcraft.domain.value_objects.message_id import MessageId
from promptcraft.domain.value_objects.user_id import UserId

ROLES = ("user", "assistant")


@dataclass(frozen=True)
class Message:
    id: MessageId
    conversation_id: ConversationId
    user_id: UserId
    role: str
    content: str
    created_at: datetime

    def __post_init__(self):
        if self.role not in ROLES:
            raise ValueError(f"Invalid role: {self.role}")

    @property
    def sort_key(self) -> tuple[datetime, str]:
        """Creation time, then id, so equal timestamps still order deterministically."""
        return (self.created_at, self.id.value)

    @classmethod
    def create(
        cls,
        conversation_id: ConversationId,
        user_id: UserId,
        role: str,
        content: str,
    ) -> Message:
        """Factory method to create a new Message with a generated ID and timestamp."""
        return cls(
            id=MessageId(str(uuid4())),
            conversation_id=conversation_id,
            user_id=user_id,
            role=role,
            content=content,
            created_at=datetime.now(timezone.utc),
        )
