"""
Message Feed Port - server-pushed INSERT notifications for one conversation.
Implementation: promptcraft/infrastructure/realtime/redis_message_feed.py

subscribe() delivers every message inserted into the given conversation
to `handler` until the returned Subscription is closed.
"""

from abc import ABC, abstractmethod
from typing import Callable

from promptcraft.domain.entities.message import Message
from promptcraft.domain.value_objects.conversation_id import ConversationId

MessageHandler = Callable[[Message], None]


class Subscription(ABC):
    @abstractmethod
    async def close(self) -> None:
        """Stop delivery. Safe to call more than once."""
        ...


class MessageFeed(ABC):
    @abstractmethod
    async def subscribe(
        self, conversation_id: ConversationId, handler: MessageHandler
    ) -> Subscription: ...

    @abstractmethod
    async def publish(self, message: Message) -> None:
        """Announce an inserted message to the conversation's subscribers."""
        ...
