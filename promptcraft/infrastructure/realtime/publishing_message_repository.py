"""
Message repository decorator that announces inserts on the change feed.

Decorator pattern: wraps a real MessageRepository (Prisma) and publishes
each stored row after the insert succeeds. Publishing is best effort;
the durable row is the source of truth and a later load() picks it up.
"""

import logging

from promptcraft.domain.entities.message import Message
from promptcraft.domain.ports.message_feed import MessageFeed
from promptcraft.domain.ports.repositories.message_repository import MessageRepository
from promptcraft.domain.value_objects.conversation_id import ConversationId

logger = logging.getLogger(__name__)


class PublishingMessageRepository(MessageRepository):
    def __init__(self, repo: MessageRepository, feed: MessageFeed):
        self._repo = repo
        self._feed = feed

    async def get_by_conversation(
        self, conversation_id: ConversationId
    ) -> list[Message]:
        return await self._repo.get_by_conversation(conversation_id)

    async def add(self, message: Message) -> Message:
        stored = await self._repo.add(message)

        try:
            await self._feed.publish(stored)
        except Exception as e:
            logger.warning(f"[Feed] Publish of message {stored.id} failed: {e}")

        return stored
