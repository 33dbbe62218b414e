"""
ProjectVersion Repository Port - Interface for generated project versions.
Implementation: promptcraft/infrastructure/persistence/prisma_project_version_repository.py

Append/update only; versions are never deleted.
"""

from abc import ABC, abstractmethod
from typing import Optional

from promptcraft.domain.entities.generated_project import GeneratedProject
from promptcraft.domain.entities.project_version import ProjectVersion
from promptcraft.domain.value_objects.conversation_id import ConversationId
from promptcraft.domain.value_objects.version_id import VersionId


class ProjectVersionRepository(ABC):
    @abstractmethod
    async def get_by_conversation(
        self, conversation_id: ConversationId
    ) -> list[ProjectVersion]:
        """All versions of a conversation, newest first."""
        ...

    @abstractmethod
    async def add(self, version: ProjectVersion) -> ProjectVersion: ...

    @abstractmethod
    async def update(
        self,
        version_id: VersionId,
        conversation_id: ConversationId,
        project: GeneratedProject,
    ) -> Optional[ProjectVersion]:
        """
        Replace summary and files of the row matching BOTH ids.

        Returns None (and writes nothing) when no such row exists.
        """
        ...
