"""
DTOs - Data Transfer Objects

DTOs for handing data to the presentation layer and to remote backends:
- conversation.py → ConversationDTO
- chat.py → MessageDTO
- project.py → GeneratedFileDTO, ProjectVersionDTO, GenerationRequestDTO
- snapshot.py → ChatSnapshotDTO

Note: These are different from domain entities.
DTOs are plain serializable copies, entities are for business logic.
"""

from promptcraft.application.dto.conversation import ConversationDTO
from promptcraft.application.dto.chat import MessageDTO
from promptcraft.application.dto.project import (
    GeneratedFileDTO,
    GenerationRequestDTO,
    ProjectVersionDTO,
)
from promptcraft.application.dto.snapshot import ChatSnapshotDTO

__all__ = [
    "ConversationDTO",
    "MessageDTO",
    "GeneratedFileDTO",
    "GenerationRequestDTO",
    "ProjectVersionDTO",
    "ChatSnapshotDTO",
]
