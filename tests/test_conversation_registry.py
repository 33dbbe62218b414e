"""
Tests for ConversationRegistry: listing, creation, selection and
last-activity ordering.
"""

from datetime import timedelta

import pytest

from promptcraft.domain.entities.conversation import Conversation
from promptcraft.domain.exceptions import (
    DomainValidationError,
    PersistenceError,
    UnauthenticatedError,
)
from promptcraft.application.state import SyncState
from tests.fakes import make_message, new_conversation_id, new_user_id


class TestListConversations:
    async def test_requires_signed_in_user(self, registry, identity):
        identity.sign_out()
        with pytest.raises(UnauthenticatedError):
            await registry.list_conversations()

    async def test_returns_own_conversations_by_last_activity(
        self, registry, conversation_repo, user_id
    ):
        older = Conversation.create(user_id, "older")
        newer = Conversation.create(user_id, "newer")
        newer.touch(older.updated_at + timedelta(seconds=1))
        someone_else = Conversation.create(new_user_id(), "not mine")
        for c in (older, newer, someone_else):
            await conversation_repo.save(c)

        listed = await registry.list_conversations()

        assert [c.title for c in listed] == ["newer", "older"]

    async def test_store_failure_keeps_current_list(
        self, registry, conversation_repo
    ):
        await registry.create("kept")
        conversation_repo.fail_reads = True

        listed = await registry.list_conversations()

        assert [c.title for c in listed] == ["kept"]


class TestCreateConversation:
    async def test_new_conversation_goes_to_head(self, registry):
        await registry.create("first")
        second = await registry.create("second")

        assert registry.conversations[0] == second
        assert second.title == "second"

    async def test_title_is_trimmed(self, registry):
        created = await registry.create("  Landing page  ")
        assert created.title == "Landing page"

    @pytest.mark.parametrize("title", ["", "   "])
    async def test_empty_title_rejected_without_writing(
        self, registry, conversation_repo, title
    ):
        with pytest.raises(DomainValidationError):
            await registry.create(title)
        assert conversation_repo.rows == {}

    async def test_requires_signed_in_user(self, registry, identity):
        identity.sign_out()
        with pytest.raises(UnauthenticatedError):
            await registry.create("title")

    async def test_store_failure_raises_and_leaves_list(
        self, registry, conversation_repo
    ):
        conversation_repo.fail_writes = True

        with pytest.raises(PersistenceError):
            await registry.create("lost")
        assert registry.conversations == ()

    async def test_opens_an_empty_version_list(self, registry, ledger):
        created = await registry.create("with versions")
        assert ledger.versions(created.id) == ()


class TestSelect:
    async def test_select_activates_synchronizer(self, registry, synchronizer, feed):
        conversation = await registry.create("chat")

        await registry.select(conversation)

        assert registry.active == conversation
        assert synchronizer.conversation_id == conversation.id
        assert synchronizer.state is SyncState.SYNCED
        assert len(feed.open_subscriptions) == 1

    async def test_select_none_clears_everything(self, registry, synchronizer, feed):
        conversation = await registry.create("chat")
        await registry.select(conversation)
        await synchronizer.append("hello")

        await registry.select(None)

        assert registry.active is None
        assert synchronizer.conversation_id is None
        assert synchronizer.messages == ()
        assert synchronizer.state is SyncState.IDLE
        assert feed.open_subscriptions == []


class TestLastActivityOrdering:
    async def test_message_moves_older_conversation_to_head(
        self, registry, synchronizer
    ):
        """Create C1, C2; add a message to C1 → list reads [C1, C2]."""
        c1 = await registry.create("C1")
        c2 = await registry.create("C2")
        assert [c.id for c in registry.conversations] == [c2.id, c1.id]

        await registry.select(c1)
        await synchronizer.append("bump")

        assert [c.id for c in registry.conversations] == [c1.id, c2.id]

    async def test_pushed_message_counts_as_activity(self, registry, feed, clock):
        c1 = await registry.create("C1")
        c2 = await registry.create("C2")
        await registry.select(c1)

        feed.deliver(make_message(c1.id, "from another tab", created_at=clock()))

        assert registry.conversations[0].id == c1.id
        assert registry.conversations[1].id == c2.id

    def test_touch_of_unknown_conversation_is_ignored(self, registry, clock):
        registry.touch(new_conversation_id(), clock())
        assert registry.conversations == ()
