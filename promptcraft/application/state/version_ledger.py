"""
Version Ledger - generated project versions, per conversation.

Versions are only ever inserted or updated, never deleted, so every
generation and every re-save stays on record. Which version is "current"
is left to the caller; the ledger keeps no active pointer.
"""

import logging
from typing import Optional

from promptcraft.application.common.store_call import store_call
from promptcraft.domain.entities.generated_project import GeneratedProject
from promptcraft.domain.entities.project_version import ProjectVersion
from promptcraft.domain.exceptions import EntityNotFoundError, error_from
from promptcraft.domain.ports.repositories import ProjectVersionRepository
from promptcraft.domain.result import Err
from promptcraft.domain.value_objects.conversation_id import ConversationId
from promptcraft.domain.value_objects.version_id import VersionId

logger = logging.getLogger(__name__)


class VersionLedger:
    def __init__(self, version_repository: ProjectVersionRepository):
        self._repo = version_repository
        self._versions: dict[ConversationId, list[ProjectVersion]] = {}

    def open(self, conversation_id: ConversationId) -> None:
        """Start an empty version list for a freshly created conversation."""
        self._versions.setdefault(conversation_id, [])

    def versions(self, conversation_id: ConversationId) -> tuple[ProjectVersion, ...]:
        """In-memory versions, newest first."""
        return tuple(self._versions.get(conversation_id, ()))

    def get(
        self, conversation_id: ConversationId, version_id: VersionId
    ) -> Optional[ProjectVersion]:
        return next(
            (v for v in self._versions.get(conversation_id, ()) if v.id == version_id),
            None,
        )

    async def list_versions(
        self, conversation_id: ConversationId
    ) -> tuple[ProjectVersion, ...]:
        """
        Reload all versions of a conversation, newest first.

        A failed reload is logged and the versions already held are returned
        unchanged.
        """
        result = await store_call(
            f"list versions of {conversation_id}",
            self._repo.get_by_conversation(conversation_id),
            read=True,
        )
        if isinstance(result, Err):
            return self.versions(conversation_id)

        self._versions[conversation_id] = sorted(
            result.value, key=lambda v: v.created_at, reverse=True
        )
        return self.versions(conversation_id)

    async def save_version(
        self, conversation_id: ConversationId, project: GeneratedProject
    ) -> ProjectVersion:
        """
        Persist a project as a new version and prepend it.

        Raises:
            PersistenceError: the insert failed
        """
        version = ProjectVersion.create(conversation_id, project)
        result = await store_call(
            f"save version for {conversation_id}", self._repo.add(version)
        )
        if isinstance(result, Err):
            raise error_from(result)

        saved = result.value
        self._versions[conversation_id] = [
            saved,
            *self._versions.get(conversation_id, []),
        ]
        logger.info(
            f"[Ledger] Saved version {saved.id} ({len(saved.files)} files) "
            f"for conversation {conversation_id}"
        )
        return saved

    async def update_version(
        self,
        version_id: VersionId,
        conversation_id: ConversationId,
        project: GeneratedProject,
    ) -> ProjectVersion:
        """
        Replace summary and files of an existing version.

        The stored row must belong to `conversation_id`; a version id from
        another conversation is treated as missing and nothing is written.

        Raises:
            EntityNotFoundError: no version with both ids
            PersistenceError: the update failed
        """
        result = await store_call(
            f"update version {version_id}",
            self._repo.update(version_id, conversation_id, project),
        )
        if isinstance(result, Err):
            raise error_from(result)
        if result.value is None:
            raise EntityNotFoundError(
                f"Version {version_id.value} not found in conversation "
                f"{conversation_id.value}"
            )

        updated = result.value
        entries = self._versions.get(conversation_id)
        if entries is not None:
            self._versions[conversation_id] = [
                updated if v.id == version_id else v for v in entries
            ]
        return updated
