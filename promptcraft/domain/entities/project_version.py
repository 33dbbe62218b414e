"""
ProjectVersion Entity - A persisted, independently addressable GeneratedProject.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from uuid import uuid4

from promptcraft.domain.entities.generated_project import GeneratedFile, GeneratedProject
from promptcraft.domain.value_objects.conversation_id import ConversationId
from promptcraft.domain.value_objects.version_id import VersionId


@dataclass(frozen=True)
class ProjectVersion:
    id: VersionId
    conversation_id: ConversationId
    summary: str
    files: tuple[GeneratedFile, ...]
    created_at: datetime

    @classmethod
    def create(
        cls, conversation_id: ConversationId, project: GeneratedProject
    ) -> ProjectVersion:
        return cls(
            id=VersionId(str(uuid4())),
            conversation_id=conversation_id,
            summary=project.summary,
            files=tuple(project.files),
            created_at=datetime.now(timezone.utc),
        )

    def with_project(self, project: GeneratedProject) -> ProjectVersion:
        """Same identity and creation time, new summary and files."""
        return replace(self, summary=project.summary, files=tuple(project.files))

    def as_project(self) -> GeneratedProject:
        return GeneratedProject(summary=self.summary, files=self.files)
