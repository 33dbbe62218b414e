"""
ENTITIES - Business objects

- Conversation, Message, ProjectVersion have identity
- GeneratedProject / GeneratedFile are the transient output of one generation call
"""

from promptcraft.domain.entities.conversation import Conversation
from promptcraft.domain.entities.message import Message
from promptcraft.domain.entities.generated_project import GeneratedFile, GeneratedProject
from promptcraft.domain.entities.project_version import ProjectVersion

__all__ = [
    "Conversation",
    "Message",
    "GeneratedFile",
    "GeneratedProject",
    "ProjectVersion",
]
