"""
Prisma Conversation Repository Implementation.

Mapping:
- Prisma model fields: id, user_id, title, created_at, updated_at
- Domain entity: Conversation with value objects (ConversationId, UserId)
- Convert str -> ConversationId, str -> UserId when reading
- Convert ConversationId.value, UserId.value -> str when writing
"""

from prisma import Prisma
from prisma.models import Conversation as PrismaConversation
from promptcraft.domain.entities.conversation import Conversation
from promptcraft.domain.ports.repositories import ConversationRepository
from promptcraft.domain.value_objects.conversation_id import ConversationId
from promptcraft.domain.value_objects.user_id import UserId


class PrismaConversationRepository(ConversationRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaConversation) -> Conversation:
        """Map Prisma record to domain entity."""
        return Conversation(
            id=ConversationId(record.id),
            user_id=UserId(record.user_id),
            title=record.title,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )

    async def get_by_user(self, user_id: UserId) -> list[Conversation]:
        """Get conversations for user, ordered by updated_at desc."""
        records = await self._prisma.conversation.find_many(
            where={"user_id": user_id.value},
            order={"updated_at": "desc"},
        )
        return [self._to_entity(record) for record in records]

    async def save(self, conversation: Conversation) -> Conversation:
        """Save (create or update) conversation and return the stored row."""
        record = await self._prisma.conversation.upsert(
            where={"id": conversation.id.value},
            data={
                "create": {
                    "id": conversation.id.value,
                    "user_id": conversation.user_id.value,
                    "title": conversation.title,
                    "created_at": conversation.created_at,
                    "updated_at": conversation.updated_at,
                },
                "update": {
                    "title": conversation.title,
                    "updated_at": conversation.updated_at,
                },
            },
        )
        return self._to_entity(record)
