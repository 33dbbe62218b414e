"""
Prisma ProjectVersion Repository Implementation.

`files` is stored as a JSON column holding a list of
{"name", "content", "language"?} objects, the same shape the generation
backend produces.
"""

from typing import Any, Optional
from prisma import Json, Prisma
from prisma.models import ProjectVersion as PrismaProjectVersion
from promptcraft.domain.entities.generated_project import GeneratedFile, GeneratedProject
from promptcraft.domain.entities.project_version import ProjectVersion
from promptcraft.domain.ports.repositories import ProjectVersionRepository
from promptcraft.domain.value_objects.conversation_id import ConversationId
from promptcraft.domain.value_objects.version_id import VersionId


def _files_to_json(files) -> Json:
    return Json([f.to_dict() for f in files])


def _files_from_json(raw: Any) -> tuple[GeneratedFile, ...]:
    if not isinstance(raw, list):
        return ()
    return tuple(GeneratedFile.from_dict(item) for item in raw if isinstance(item, dict))


class PrismaProjectVersionRepository(ProjectVersionRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaProjectVersion) -> ProjectVersion:
        return ProjectVersion(
            id=VersionId(record.id),
            conversation_id=ConversationId(record.conversation_id),
            summary=record.summary,
            files=_files_from_json(record.files),
            created_at=record.created_at,
        )

    async def get_by_conversation(
        self, conversation_id: ConversationId
    ) -> list[ProjectVersion]:
        """Versions of a conversation, newest first."""
        records = await self._prisma.projectversion.find_many(
            where={"conversation_id": conversation_id.value},
            order={"created_at": "desc"},
        )
        return [self._to_entity(record) for record in records]

    async def add(self, version: ProjectVersion) -> ProjectVersion:
        record = await self._prisma.projectversion.create(
            data={
                "id": version.id.value,
                "conversation_id": version.conversation_id.value,
                "summary": version.summary,
                "files": _files_to_json(version.files),
                "created_at": version.created_at,
            }
        )
        return self._to_entity(record)

    async def update(
        self,
        version_id: VersionId,
        conversation_id: ConversationId,
        project: GeneratedProject,
    ) -> Optional[ProjectVersion]:
        """
        Replace summary and files, scoped to BOTH ids.

        update_many is used because find_unique/update only accept the
        primary key; a version id paired with another conversation's id
        must match zero rows.
        """
        count = await self._prisma.projectversion.update_many(
            where={"id": version_id.value, "conversation_id": conversation_id.value},
            data={
                "summary": project.summary,
                "files": _files_to_json(project.files),
            },
        )
        if count == 0:
            return None

        record = await self._prisma.projectversion.find_unique(
            where={"id": version_id.value}
        )
        return self._to_entity(record) if record else None
