"""Generated project DTOs."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from promptcraft.domain.entities.generated_project import GeneratedFile
from promptcraft.domain.entities.project_version import ProjectVersion


class GenerationRequestDTO(BaseModel):
    """Request body sent to a hosted generation endpoint."""

    prompt: str = Field(min_length=1)


class GeneratedFileDTO(BaseModel):
    name: str
    language: Optional[str] = None
    content: str

    @classmethod
    def from_entity(cls, file: GeneratedFile) -> "GeneratedFileDTO":
        return cls(name=file.name, language=file.language, content=file.content)


class ProjectVersionDTO(BaseModel):
    id: str
    conversation_id: str
    summary: str
    files: list[GeneratedFileDTO]
    created_at: datetime

    @classmethod
    def from_entity(cls, version: ProjectVersion) -> "ProjectVersionDTO":
        return cls(
            id=version.id.value,
            conversation_id=version.conversation_id.value,
            summary=version.summary,
            files=[GeneratedFileDTO.from_entity(f) for f in version.files],
            created_at=version.created_at,
        )
