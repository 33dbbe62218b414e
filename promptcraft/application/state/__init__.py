"""
Stateful stores for one signed-in user.

Each store owns an in-memory view backed by the durable store:
- ConversationRegistry: conversations + the selected one
- MessageSynchronizer:  messages of the selected conversation (local writes + change feed)
- VersionLedger:        generated project versions per conversation
"""

from promptcraft.application.state.version_ledger import VersionLedger
from promptcraft.application.state.message_synchronizer import (
    MessageSynchronizer,
    SubscriptionToken,
    SyncState,
)
from promptcraft.application.state.conversation_registry import ConversationRegistry

__all__ = [
    "VersionLedger",
    "MessageSynchronizer",
    "SubscriptionToken",
    "SyncState",
    "ConversationRegistry",
]
