"""
Message Repository Port - Interface for message persistence.
Implementation: promptcraft/infrastructure/persistence/prisma_message_repository.py

Messages are immutable: there is no update or delete.
"""

from abc import ABC, abstractmethod

from promptcraft.domain.entities.message import Message
from promptcraft.domain.value_objects.conversation_id import ConversationId


class MessageRepository(ABC):
    @abstractmethod
    async def get_by_conversation(
        self, conversation_id: ConversationId
    ) -> list[Message]:
        """All messages of a conversation, oldest first."""
        ...

    @abstractmethod
    async def add(self, message: Message) -> Message:
        """Insert a message and return the stored row."""
        ...
