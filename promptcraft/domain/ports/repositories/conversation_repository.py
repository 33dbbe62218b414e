"""
Conversation Repository Port - Interface for conversation persistence.
Implementation: promptcraft/infrastructure/persistence/prisma_conversation_repository.py
"""

from abc import ABC, abstractmethod
from promptcraft.domain.entities.conversation import Conversation
from promptcraft.domain.value_objects.user_id import UserId


class ConversationRepository(ABC):
    @abstractmethod
    async def get_by_user(self, user_id: UserId) -> list[Conversation]:
        """All conversations owned by the user, last activity first."""
        ...

    @abstractmethod
    async def save(self, conversation: Conversation) -> Conversation: ...
