"""
Persistence Layer - Database implementations.

Contains Prisma repository implementations for domain ports.
Importing this package requires a generated Prisma client (`prisma generate`).
"""

from promptcraft.infrastructure.persistence.prisma_conversation_repository import (
    PrismaConversationRepository,
)
from promptcraft.infrastructure.persistence.prisma_message_repository import (
    PrismaMessageRepository,
)
from promptcraft.infrastructure.persistence.prisma_project_version_repository import (
    PrismaProjectVersionRepository,
)

__all__ = [
    "PrismaConversationRepository",
    "PrismaMessageRepository",
    "PrismaProjectVersionRepository",
]
