"""
ChatSession - everything one signed-in user sees, in one explicit container.

Built once per user session (see setup/ioc/container.py) instead of living
in module-level globals. The presentation layer calls the async operations
below and renders snapshot().

submit_prompt() is the full prompt round trip:

    1. append the prompt as a user message
    2. generate a project version
    3. append the summary as an assistant message, but only if the same
       conversation is still selected; otherwise the version is kept in
       the ledger and the outcome is returned with delivered=False
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union
from uuid import uuid4

from promptcraft.application.commands.generation import (
    GenerateProjectCommand,
    GenerateProjectHandler,
)
from promptcraft.application.dto import (
    ChatSnapshotDTO,
    ConversationDTO,
    MessageDTO,
    ProjectVersionDTO,
)
from promptcraft.application.state import (
    ConversationRegistry,
    MessageSynchronizer,
    VersionLedger,
)
from promptcraft.config.logging_config import correlation_id_var
from promptcraft.domain.entities.conversation import Conversation
from promptcraft.domain.entities.generated_project import GeneratedProject
from promptcraft.domain.entities.message import Message
from promptcraft.domain.entities.project_version import ProjectVersion
from promptcraft.domain.exceptions import (
    DomainValidationError,
    GenerationInProgressError,
    NoActiveConversationError,
)
from promptcraft.domain.ports.identity_provider import IdentityProvider
from promptcraft.domain.services.preview_composer import compose_preview
from promptcraft.domain.value_objects.conversation_id import ConversationId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PromptOutcome:
    version: ProjectVersion
    user_message: Message
    assistant_message: Optional[Message] = None
    delivered: bool = True  # False when the conversation was left mid-generation


class ChatSession:
    def __init__(
        self,
        identity: IdentityProvider,
        registry: ConversationRegistry,
        synchronizer: MessageSynchronizer,
        ledger: VersionLedger,
        generate_handler: GenerateProjectHandler,
    ):
        self._identity = identity
        self._registry = registry
        self._synchronizer = synchronizer
        self._ledger = ledger
        self._generate = generate_handler
        self._in_flight: set[ConversationId] = set()

    @property
    def registry(self) -> ConversationRegistry:
        return self._registry

    @property
    def synchronizer(self) -> MessageSynchronizer:
        return self._synchronizer

    @property
    def ledger(self) -> VersionLedger:
        return self._ledger

    def _require_active(self) -> Conversation:
        active = self._registry.active
        if active is None:
            raise NoActiveConversationError()
        return active

    async def refresh(self) -> tuple[Conversation, ...]:
        return await self._registry.list_conversations()

    async def start_conversation(self, title: str) -> Conversation:
        """Create a conversation and select it."""
        conversation = await self._registry.create(title)
        await self._registry.select(conversation)
        return conversation

    async def select(self, conversation: Optional[Conversation]) -> None:
        await self._registry.select(conversation)
        if conversation is not None:
            await self._ledger.list_versions(conversation.id)

    async def send_message(self, content: str, role: str = "user") -> Message:
        return await self._synchronizer.append(content, role)

    async def refresh_versions(self) -> tuple[ProjectVersion, ...]:
        return await self._ledger.list_versions(self._require_active().id)

    async def generate(self, prompt: str) -> ProjectVersion:
        """Run the generation pipeline against the active conversation."""
        active = self._registry.active
        return await self._generate.execute(
            GenerateProjectCommand(
                conversation_id=active.id if active else None, prompt=prompt
            )
        )

    async def submit_prompt(self, prompt: str) -> PromptOutcome:
        """
        Record a prompt, generate from it, and announce the result.

        Raises:
            NoActiveConversationError: nothing is selected
            DomainValidationError: blank prompt
            GenerationInProgressError: this conversation already has a prompt running
            plus anything append() or generate() raise
        """
        conversation_id = self._require_active().id
        prompt = prompt.strip()
        if not prompt:
            raise DomainValidationError("Prompt cannot be empty")
        if conversation_id in self._in_flight:
            raise GenerationInProgressError(
                f"Conversation {conversation_id.value} already has a generation running"
            )

        self._in_flight.add(conversation_id)
        correlation_token = correlation_id_var.set(str(uuid4()))
        try:
            user_message = await self._synchronizer.append(prompt, "user")
            version = await self._generate.execute(
                GenerateProjectCommand(conversation_id=conversation_id, prompt=prompt)
            )

            if self._synchronizer.conversation_id != conversation_id:
                logger.info(
                    f"[Session] Conversation {conversation_id} left during generation; "
                    f"version {version.id} kept without announcing it"
                )
                return PromptOutcome(
                    version=version, user_message=user_message, delivered=False
                )

            assistant_message = None
            if version.summary:
                assistant_message = await self._synchronizer.append(
                    version.summary, "assistant"
                )
            return PromptOutcome(
                version=version,
                user_message=user_message,
                assistant_message=assistant_message,
            )
        finally:
            self._in_flight.discard(conversation_id)
            correlation_id_var.reset(correlation_token)

    def preview(self, version: Union[ProjectVersion, GeneratedProject]) -> Optional[str]:
        """Preview document for an explicitly chosen version, or None without an HTML file."""
        project = version.as_project() if isinstance(version, ProjectVersion) else version
        return compose_preview(project)

    def snapshot(self) -> ChatSnapshotDTO:
        user_id = self._identity.current_user_id()
        active = self._registry.active
        return ChatSnapshotDTO(
            user_id=user_id.value if user_id else None,
            conversations=[
                ConversationDTO.from_entity(c) for c in self._registry.conversations
            ],
            active_conversation_id=active.id.value if active else None,
            sync_state=self._synchronizer.state.value,
            messages=[MessageDTO.from_entity(m) for m in self._synchronizer.messages],
            versions=[
                ProjectVersionDTO.from_entity(v)
                for v in (self._ledger.versions(active.id) if active else ())
            ],
            generating=active is not None and active.id in self._in_flight,
        )

    async def close(self) -> None:
        """Tear down the change-feed subscription."""
        await self._synchronizer.close()
