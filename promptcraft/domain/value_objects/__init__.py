"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Is compared by value
- Is immutable (frozen dataclass)
- Validates itself on creation
"""

from promptcraft.domain.value_objects.user_id import UserId
from promptcraft.domain.value_objects.conversation_id import ConversationId
from promptcraft.domain.value_objects.message_id import MessageId
from promptcraft.domain.value_objects.version_id import VersionId

__all__ = [
    "UserId",
    "ConversationId",
    "MessageId",
    "VersionId",
]
