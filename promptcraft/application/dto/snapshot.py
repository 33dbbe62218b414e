"""Read-only view of a ChatSession for the presentation layer."""

from typing import Optional
from pydantic import BaseModel, ConfigDict

from promptcraft.application.dto.chat import MessageDTO
from promptcraft.application.dto.conversation import ConversationDTO
from promptcraft.application.dto.project import ProjectVersionDTO


class ChatSnapshotDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    user_id: Optional[str] = None
    conversations: list[ConversationDTO]
    active_conversation_id: Optional[str] = None
    sync_state: str
    messages: list[MessageDTO]
    versions: list[ProjectVersionDTO]
    generating: bool = False
