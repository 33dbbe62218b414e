"""
Prisma Message Repository Implementation.

Prisma Message Model (prisma/schema.prisma):
    model Message {
        id              String   @id @default(uuid())
        conversation_id String
        user_id         String
        role            String
        content         String
        created_at      DateTime @default(now())
    }

Messages are insert-only. add() also moves the owning conversation's
updated_at forward so the conversation list keeps last-activity order
for every client, not only the one that wrote the message.
"""

import logging
from prisma import Prisma
from prisma.models import Message as PrismaMessage
from promptcraft.domain.entities.message import Message
from promptcraft.domain.ports.repositories.message_repository import MessageRepository
from promptcraft.domain.value_objects.conversation_id import ConversationId
from promptcraft.domain.value_objects.message_id import MessageId
from promptcraft.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


class PrismaMessageRepository(MessageRepository):
    """
    Prisma implementation of MessageRepository.

    Handles persistence of Message entities to PostgreSQL via Prisma.
    """

    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        """
        Initialize repository with Prisma client.

        Args:
            prisma: Connected Prisma client (injected by DI container)
        """
        self._prisma = prisma

    def _to_entity(self, record: PrismaMessage) -> Message:
        return Message(
            id=MessageId(record.id),
            conversation_id=ConversationId(record.conversation_id),
            user_id=UserId(record.user_id),
            role=record.role,
            content=record.content,
            created_at=record.created_at,
        )

    async def get_by_conversation(
        self, conversation_id: ConversationId
    ) -> list[Message]:
        """
        Get all messages for a conversation, oldest first.

        id breaks created_at ties so the order matches Message.sort_key.
        """
        records = await self._prisma.message.find_many(
            where={"conversation_id": conversation_id.value},
            order=[{"created_at": "asc"}, {"id": "asc"}],
        )
        return [self._to_entity(record) for record in records]

    async def add(self, message: Message) -> Message:
        """
        Insert a message and return the stored row.

        Args:
            message: Message entity to persist
        """
        record = await self._prisma.message.create(
            data={
                "id": message.id.value,
                "conversation_id": message.conversation_id.value,
                "user_id": message.user_id.value,
                "role": message.role,
                "content": message.content,
                "created_at": message.created_at,
            }
        )
        touched = await self._prisma.conversation.update_many(
            where={
                "id": message.conversation_id.value,
                "updated_at": {"lt": record.created_at},
            },
            data={"updated_at": record.created_at},
        )
        logger.debug(
            f"[Prisma] Stored message {record.id} "
            f"(conversation rows touched: {touched})"
        )
        return self._to_entity(record)
