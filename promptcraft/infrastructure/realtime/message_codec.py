"""
JSON wire format of a Message on the change feed.

    {"id", "conversation_id", "user_id", "role", "content", "created_at"}

created_at is ISO 8601. Decoding validates ids and role through the
domain types, so a malformed payload raises ValueError/KeyError/TypeError.
"""

import json
from datetime import datetime

from promptcraft.domain.entities.message import Message
from promptcraft.domain.value_objects.conversation_id import ConversationId
from promptcraft.domain.value_objects.message_id import MessageId
from promptcraft.domain.value_objects.user_id import UserId


def serialize_message(message: Message) -> str:
    return json.dumps(
        {
            "id": message.id.value,
            "conversation_id": message.conversation_id.value,
            "user_id": message.user_id.value,
            "role": message.role,
            "content": message.content,
            "created_at": message.created_at.isoformat(),
        }
    )


def deserialize_message(payload: str) -> Message:
    d = json.loads(payload)
    return Message(
        id=MessageId(d["id"]),
        conversation_id=ConversationId(d["conversation_id"]),
        user_id=UserId(d["user_id"]),
        role=d["role"],
        content=d["content"],
        created_at=datetime.fromisoformat(d["created_at"]),
    )
