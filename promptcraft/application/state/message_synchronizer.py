"""
Message Synchronizer - the message list of the active conversation.

State machine:

    IDLE --activate--> LOADING --load done--> SYNCED --deactivate--> IDLE
                                                 ^  |
                                                 +--+ change-feed deliveries

Messages arrive by two paths: the direct response of append(), and the
change feed, which may deliver that very row first. Both go through
merge_messages(), keyed on message id, so the list never holds a message
twice whatever the arrival order.

Every push handler is bound to the SubscriptionToken that was current when
it subscribed. deactivate()/activate() replace the token before awaiting
anything, so a late event from a previous conversation compares unequal and
is dropped instead of landing in the new conversation's list.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from functools import partial
from typing import Callable, Optional

from promptcraft.application.common.store_call import store_call
from promptcraft.domain.entities.message import ROLES, Message
from promptcraft.domain.exceptions import (
    DomainValidationError,
    NoActiveConversationError,
    UnauthenticatedError,
    error_from,
)
from promptcraft.domain.ports.identity_provider import IdentityProvider
from promptcraft.domain.ports.message_feed import MessageFeed, Subscription
from promptcraft.domain.ports.repositories import MessageRepository
from promptcraft.domain.result import Err
from promptcraft.domain.services.message_merge import merge_messages
from promptcraft.domain.value_objects.conversation_id import ConversationId
from promptcraft.observability.metrics import (
    FeedResult,
    increment_feed_event,
)

logger = logging.getLogger(__name__)

ActivityListener = Callable[[ConversationId, datetime], None]


class SyncState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SYNCED = "synced"


@dataclass(frozen=True)
class SubscriptionToken:
    conversation_id: ConversationId
    epoch: int


class MessageSynchronizer:
    def __init__(
        self,
        message_repository: MessageRepository,
        feed: MessageFeed,
        identity: IdentityProvider,
    ):
        self._repo = message_repository
        self._feed = feed
        self._identity = identity

        self._messages: list[Message] = []
        self._state = SyncState.IDLE
        self._token: Optional[SubscriptionToken] = None
        self._epoch = 0
        self._subscription: Optional[Subscription] = None
        self._activity_listeners: list[ActivityListener] = []

    @property
    def state(self) -> SyncState:
        return self._state

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    @property
    def conversation_id(self) -> Optional[ConversationId]:
        return self._token.conversation_id if self._token else None

    @property
    def token(self) -> Optional[SubscriptionToken]:
        return self._token

    def add_activity_listener(self, listener: ActivityListener) -> None:
        """Called with (conversation_id, created_at) whenever a message is appended or pushed."""
        self._activity_listeners.append(listener)

    def _notify_activity(self, conversation_id: ConversationId, at: datetime) -> None:
        for listener in self._activity_listeners:
            listener(conversation_id, at)

    def _detach(self) -> Optional[Subscription]:
        """Invalidate the current token and clear state. No awaits: runs atomically."""
        self._epoch += 1
        self._token = None
        self._messages = []
        self._state = SyncState.IDLE
        subscription, self._subscription = self._subscription, None
        return subscription

    async def _release(self, subscription: Subscription) -> None:
        """Close a subscription; a failing close is logged, never raised."""
        try:
            await subscription.close()
        except Exception as e:
            logger.warning(f"[Sync] Closing change-feed subscription failed: {e}")

    async def activate(self, conversation_id: ConversationId) -> None:
        """Tear down the previous subscription, subscribe to `conversation_id` and load it."""
        previous = self._detach()
        token = SubscriptionToken(conversation_id=conversation_id, epoch=self._epoch)
        self._token = token
        self._state = SyncState.LOADING

        if previous is not None:
            await self._release(previous)

        try:
            subscription = await self._feed.subscribe(
                conversation_id, partial(self._on_push, token)
            )
        except Exception as e:
            # Same policy as a failed read: keep going with what the store returns
            logger.warning(
                f"[Sync] Live updates unavailable for {conversation_id}: {e}"
            )
            subscription = None

        if self._token != token:
            # Superseded by another activate()/deactivate() while subscribing
            if subscription is not None:
                await self._release(subscription)
            return

        self._subscription = subscription
        await self.load(conversation_id)

    async def deactivate(self) -> None:
        """Drop the active conversation and close its subscription."""
        previous = self._detach()
        if previous is not None:
            await self._release(previous)

    async def close(self) -> None:
        await self.deactivate()

    async def load(self, conversation_id: ConversationId) -> tuple[Message, ...]:
        """
        Fetch all messages of the active conversation, oldest first.

        Anything the change feed delivered in the meantime is merged in, not
        overwritten. A store failure is logged and the current list is kept.
        """
        token = self._token
        if token is None or token.conversation_id != conversation_id:
            logger.debug(f"[Sync] Ignoring load of inactive conversation {conversation_id}")
            return self.messages

        self._state = SyncState.LOADING
        result = await store_call(
            f"load messages of {conversation_id}",
            self._repo.get_by_conversation(conversation_id),
            read=True,
        )
        if self._token != token:
            logger.debug(f"[Sync] Discarding stale load of {conversation_id}")
            return self.messages

        if not isinstance(result, Err):
            self._messages, _ = merge_messages(result.value, self._messages)
            logger.debug(
                f"[Sync] Loaded {len(self._messages)} messages for {conversation_id}"
            )
        self._state = SyncState.SYNCED
        return self.messages

    async def append(self, content: str, role: str = "user") -> Message:
        """
        Persist a message in the active conversation and merge it locally.

        Raises:
            NoActiveConversationError: nothing is selected
            UnauthenticatedError: nobody is signed in
            DomainValidationError: unknown role
            PersistenceError: the insert failed
        """
        token = self._token
        if token is None:
            raise NoActiveConversationError()
        user_id = self._identity.current_user_id()
        if user_id is None:
            raise UnauthenticatedError()
        if role not in ROLES:
            raise DomainValidationError(f"Invalid role: {role}")

        message = Message.create(
            conversation_id=token.conversation_id,
            user_id=user_id,
            role=role,
            content=content,
        )
        result = await store_call(
            f"append message to {token.conversation_id}", self._repo.add(message)
        )
        if isinstance(result, Err):
            raise error_from(result)

        stored = result.value
        if self._token == token:
            self._merge(stored)
        else:
            logger.info(
                f"[Sync] Conversation {token.conversation_id} was deselected "
                f"before message {stored.id} was stored; not merged"
            )
        self._notify_activity(token.conversation_id, stored.created_at)
        return stored

    def _merge(self, message: Message) -> bool:
        merged, added = merge_messages(self._messages, [message])
        if not added:
            return False
        self._messages = merged
        return True

    def _on_push(self, token: SubscriptionToken, message: Message) -> None:
        """Change-feed handler; `token` is bound at subscribe time."""
        if token != self._token or message.conversation_id != token.conversation_id:
            increment_feed_event(FeedResult.STALE)
            logger.debug(
                f"[Sync] Dropped event {message.id} for {message.conversation_id} "
                f"(subscription no longer active)"
            )
            return

        if not self._merge(message):
            increment_feed_event(FeedResult.DUPLICATE)
            return

        increment_feed_event(FeedResult.APPLIED)
        self._notify_activity(token.conversation_id, message.created_at)
