"""
Conversation Entity - A titled thread of messages and generated versions.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import uuid4

from promptcraft.domain.value_objects.conversation_id import ConversationId
from promptcraft.domain.value_objects.user_id import UserId


@dataclass
class Conversation:
    id: ConversationId
    user_id: UserId
    title: str
    created_at: datetime
    updated_at: datetime  # last activity, list sort key

    @classmethod
    def create(cls, user_id: UserId, title: str) -> Conversation:
        """Factory for a new conversation; last activity starts at creation time."""
        title = title.strip()
        if not title:
            raise ValueError("Title cannot be empty")

        now = datetime.now(timezone.utc)
        return cls(
            id=ConversationId(str(uuid4())),
            user_id=user_id,
            title=title,
            created_at=now,
            updated_at=now,
        )

    def touch(self, at: datetime) -> bool:
        """Move last activity forward to `at`. Returns False if it was already later."""
        if at <= self.updated_at:
            return False
        self.updated_at = at
        return True
