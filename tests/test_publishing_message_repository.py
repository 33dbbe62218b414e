"""
Tests for the repository decorator that publishes inserts on the feed.
"""

from unittest.mock import AsyncMock

import pytest

from promptcraft.domain.entities.message import Message
from promptcraft.infrastructure.realtime import PublishingMessageRepository
from tests.fakes import new_conversation_id, new_user_id


def _message(conversation_id):
    return Message.create(conversation_id, new_user_id(), "user", "hello")


class TestPublishingMessageRepository:
    async def test_publishes_stored_row_after_insert(self, message_repo):
        feed = AsyncMock()
        repo = PublishingMessageRepository(message_repo, feed)

        stored = await repo.add(_message(new_conversation_id()))

        feed.publish.assert_awaited_once_with(stored)
        assert message_repo.rows == [stored]

    async def test_publish_failure_does_not_fail_insert(self, message_repo):
        feed = AsyncMock()
        feed.publish.side_effect = ConnectionError("redis down")
        repo = PublishingMessageRepository(message_repo, feed)

        stored = await repo.add(_message(new_conversation_id()))

        assert message_repo.rows == [stored]

    async def test_failed_insert_publishes_nothing(self, message_repo):
        feed = AsyncMock()
        message_repo.fail_writes = True
        repo = PublishingMessageRepository(message_repo, feed)

        with pytest.raises(ConnectionError):
            await repo.add(_message(new_conversation_id()))
        feed.publish.assert_not_awaited()

    async def test_reads_are_delegated(self, message_repo):
        cid = new_conversation_id()
        repo = PublishingMessageRepository(message_repo, AsyncMock())
        stored = await repo.add(_message(cid))

        assert await repo.get_by_conversation(cid) == [stored]
