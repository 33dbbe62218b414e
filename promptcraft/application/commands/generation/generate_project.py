"""
Generate Project Command - prompt → backend → validation → new version.

The handler only orchestrates generation and persistence. Recording the
prompt and the summary as messages is the caller's job (ChatSession does
it), which keeps this handler testable without a message store.

Concurrent executions for one conversation are not serialized here.
"""

import logging
import time
from dataclasses import dataclass
from typing import Optional

from promptcraft.application.common.interfaces import Command, CommandHandler
from promptcraft.application.state.version_ledger import VersionLedger
from promptcraft.domain.entities.project_version import ProjectVersion
from promptcraft.domain.exceptions import (
    GenerationBackendError,
    InvalidGenerationOutputError,
    NoActiveConversationError,
)
from promptcraft.domain.ports.generation_backend import GenerationBackend
from promptcraft.domain.services.project_parser import parse_generated_project
from promptcraft.domain.value_objects.conversation_id import ConversationId
from promptcraft.observability.metrics import (
    GenerationOutcome,
    MetricsErrorType,
    increment_error,
    increment_generation,
    observe_generation_latency,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerateProjectCommand(Command[ProjectVersion]):
    conversation_id: Optional[ConversationId]  # None when nothing is selected
    prompt: str


class GenerateProjectHandler(CommandHandler[ProjectVersion]):
    def __init__(self, backend: GenerationBackend, ledger: VersionLedger):
        self._backend = backend
        self._ledger = ledger

    async def execute(self, command: GenerateProjectCommand) -> ProjectVersion:
        """
        Raises:
            NoActiveConversationError: command has no conversation
            GenerationBackendError: backend/transport failure, passed through unchanged
            InvalidGenerationOutputError: output is not a JSON object
            PersistenceError: the version could not be saved
        """
        if command.conversation_id is None:
            raise NoActiveConversationError()

        started = time.perf_counter()
        try:
            raw = await self._backend.generate(command.prompt)
        except GenerationBackendError as e:
            increment_generation(GenerationOutcome.BACKEND_ERROR)
            increment_error(MetricsErrorType.BACKEND_FAILED)
            logger.warning(
                f"[Generate] Backend failed for {command.conversation_id} "
                f"(status={e.status_code}): {e.message}"
            )
            raise

        try:
            project = parse_generated_project(raw)
        except InvalidGenerationOutputError as e:
            increment_generation(GenerationOutcome.REJECTED)
            increment_error(MetricsErrorType.INVALID_OUTPUT)
            logger.warning(f"[Generate] Rejected output: {e.message}")
            raise

        try:
            version = await self._ledger.save_version(command.conversation_id, project)
        except Exception:
            increment_generation(GenerationOutcome.PERSIST_FAILED)
            raise

        increment_generation(GenerationOutcome.ACCEPTED)
        observe_generation_latency(time.perf_counter() - started)
        logger.info(
            f"[Generate] Version {version.id} with {len(version.files)} files "
            f"for conversation {command.conversation_id}"
        )
        return version
