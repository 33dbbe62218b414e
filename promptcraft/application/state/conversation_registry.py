"""
Conversation Registry - the user's conversations and the selected one.

The list is kept sorted by last activity (updated_at), newest first.
Selecting a conversation hands it to the MessageSynchronizer, which clears
the message list, subscribes to the change feed and reloads.
"""

import logging
from datetime import datetime
from typing import Optional

from promptcraft.application.common.store_call import store_call
from promptcraft.application.state.message_synchronizer import MessageSynchronizer
from promptcraft.application.state.version_ledger import VersionLedger
from promptcraft.domain.entities.conversation import Conversation
from promptcraft.domain.exceptions import (
    DomainValidationError,
    UnauthenticatedError,
    error_from,
)
from promptcraft.domain.ports.identity_provider import IdentityProvider
from promptcraft.domain.ports.repositories import ConversationRepository
from promptcraft.domain.result import Err
from promptcraft.domain.value_objects.conversation_id import ConversationId
from promptcraft.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


def _by_last_activity(conversations: list[Conversation]) -> list[Conversation]:
    # sorted() is stable, so equal timestamps keep their current relative order
    return sorted(conversations, key=lambda c: c.updated_at, reverse=True)


class ConversationRegistry:
    def __init__(
        self,
        conversation_repository: ConversationRepository,
        identity: IdentityProvider,
        synchronizer: MessageSynchronizer,
        ledger: Optional[VersionLedger] = None,
    ):
        self._repo = conversation_repository
        self._identity = identity
        self._synchronizer = synchronizer
        self._ledger = ledger
        self._conversations: list[Conversation] = []
        self._active: Optional[Conversation] = None

        synchronizer.add_activity_listener(self.touch)

    @property
    def conversations(self) -> tuple[Conversation, ...]:
        return tuple(self._conversations)

    @property
    def active(self) -> Optional[Conversation]:
        return self._active

    def get(self, conversation_id: ConversationId) -> Optional[Conversation]:
        return next((c for c in self._conversations if c.id == conversation_id), None)

    def _require_user(self) -> UserId:
        user_id = self._identity.current_user_id()
        if user_id is None:
            raise UnauthenticatedError()
        return user_id

    async def list_conversations(self) -> tuple[Conversation, ...]:
        """
        Reload the current user's conversations, last activity first.

        Raises:
            UnauthenticatedError: nobody is signed in

        A store failure is logged and the list already held is returned.
        """
        user_id = self._require_user()
        result = await store_call(
            "list conversations", self._repo.get_by_user(user_id), read=True
        )
        if isinstance(result, Err):
            return self.conversations

        self._conversations = _by_last_activity(result.value)
        if self._active is not None:
            # keep the selection pointing at the refreshed object
            self._active = self.get(self._active.id) or self._active
        logger.debug(f"[Registry] Loaded {len(self._conversations)} conversations")
        return self.conversations

    async def create(self, title: str) -> Conversation:
        """
        Create a conversation and put it at the head of the list.

        Raises:
            DomainValidationError: empty title
            UnauthenticatedError: nobody is signed in
            PersistenceError: the insert failed
        """
        if not title or not title.strip():
            raise DomainValidationError("Conversation title cannot be empty")
        user_id = self._require_user()

        conversation = Conversation.create(user_id=user_id, title=title)
        result = await store_call("create conversation", self._repo.save(conversation))
        if isinstance(result, Err):
            raise error_from(result)

        created = result.value
        self._conversations = _by_last_activity([created, *self._conversations])
        if self._ledger is not None:
            self._ledger.open(created.id)
        logger.info(f"[Registry] Created conversation {created.id} '{created.title}'")
        return created

    async def select(self, conversation: Optional[Conversation]) -> None:
        """
        Make `conversation` the active one, or clear the selection with None.

        The previous conversation's subscription is torn down before anything
        else happens, so none of its late events reach the new message list.
        """
        self._active = conversation
        if conversation is None:
            await self._synchronizer.deactivate()
            return

        logger.debug(f"[Registry] Selected conversation {conversation.id}")
        await self._synchronizer.activate(conversation.id)

    def touch(self, conversation_id: ConversationId, at: datetime) -> None:
        """Record activity on a conversation and re-sort; the touched one wins ties."""
        conversation = self.get(conversation_id)
        if conversation is None:
            return

        conversation.touch(at)
        others = [c for c in self._conversations if c.id != conversation_id]
        self._conversations = _by_last_activity([conversation, *others])
