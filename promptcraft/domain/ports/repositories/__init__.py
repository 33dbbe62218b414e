"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the core needs
- Does NOT specify implementation (Prisma, in-memory, etc.)
"""

from promptcraft.domain.ports.repositories.conversation_repository import (
    ConversationRepository,
)
from promptcraft.domain.ports.repositories.message_repository import MessageRepository
from promptcraft.domain.ports.repositories.project_version_repository import (
    ProjectVersionRepository,
)

__all__ = [
    "ConversationRepository",
    "MessageRepository",
    "ProjectVersionRepository",
]
