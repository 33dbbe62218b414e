"""
Tests for the Redis change feed with a mocked redis.asyncio client.
"""

import asyncio
import json
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from promptcraft.infrastructure.realtime import RedisMessageFeed
from promptcraft.infrastructure.realtime.message_codec import (
    deserialize_message,
    serialize_message,
)
from tests.fakes import make_message, new_conversation_id, settle


class FakePubSub:
    """Stands in for redis.asyncio PubSub; events are fed through a queue."""

    def __init__(self):
        self.events: asyncio.Queue = asyncio.Queue()
        self.subscribe = AsyncMock()
        self.unsubscribe = AsyncMock()
        self.aclose = AsyncMock()

    async def listen(self):
        while True:
            yield await self.events.get()

    def push(self, data):
        self.events.put_nowait({"type": "message", "data": data})


@pytest.fixture()
def pubsub():
    return FakePubSub()


@pytest.fixture()
def redis(pubsub):
    client = MagicMock()
    client.pubsub.return_value = pubsub
    client.publish = AsyncMock(return_value=1)
    return client


class TestMessageCodec:
    def test_payload_fields(self):
        message = make_message(
            new_conversation_id(),
            "hi",
            created_at=datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc),
        )

        payload = json.loads(serialize_message(message))

        assert payload["id"] == message.id.value
        assert payload["conversation_id"] == message.conversation_id.value
        assert payload["role"] == "user"
        assert payload["created_at"] == "2024-05-01T09:30:00+00:00"
        assert deserialize_message(serialize_message(message)) == message

    @pytest.mark.parametrize(
        "payload",
        ["not json", "[]", '{"id": "x"}', '{"id": "not-a-uuid", "conversation_id": "", '
         '"user_id": "", "role": "user", "content": "", "created_at": ""}'],
    )
    def test_malformed_payload_raises(self, payload):
        with pytest.raises((ValueError, KeyError, TypeError)):
            deserialize_message(payload)


class TestRedisMessageFeed:
    def test_channel_per_conversation(self, redis):
        cid = new_conversation_id()
        assert RedisMessageFeed(redis, "conv").channel(cid) == f"conv:{cid.value}:messages"

    async def test_publish_sends_serialized_message(self, redis):
        message = make_message(new_conversation_id())

        await RedisMessageFeed(redis, "conv").publish(message)

        channel, data = redis.publish.call_args.args
        assert channel == f"conv:{message.conversation_id.value}:messages"
        assert deserialize_message(data) == message

    async def test_subscription_delivers_decoded_messages(self, redis, pubsub):
        cid = new_conversation_id()
        received = []
        feed = RedisMessageFeed(redis, "conv")

        subscription = await feed.subscribe(cid, received.append)
        message = make_message(cid, "live")
        pubsub.push(serialize_message(message))
        await settle()

        assert received == [message]
        pubsub.subscribe.assert_awaited_once_with(f"conv:{cid.value}:messages")
        await subscription.close()

    async def test_bad_and_foreign_events_are_skipped(self, redis, pubsub):
        cid = new_conversation_id()
        received = []
        subscription = await RedisMessageFeed(redis, "conv").subscribe(cid, received.append)

        pubsub.push("garbage")
        pubsub.push(serialize_message(make_message(new_conversation_id(), "foreign")))
        pubsub.events.put_nowait({"type": "subscribe", "data": 1})
        ours = make_message(cid, "ours")
        pubsub.push(serialize_message(ours))
        await settle(10)

        assert received == [ours]
        await subscription.close()

    async def test_failing_handler_does_not_stop_listener(self, redis, pubsub):
        cid = new_conversation_id()
        calls = []

        def handler(message):
            calls.append(message)
            if len(calls) == 1:
                raise RuntimeError("boom")

        subscription = await RedisMessageFeed(redis, "conv").subscribe(cid, handler)
        pubsub.push(serialize_message(make_message(cid, "one")))
        pubsub.push(serialize_message(make_message(cid, "two")))
        await settle(10)

        assert [m.content for m in calls] == ["one", "two"]
        await subscription.close()

    async def test_close_is_idempotent(self, redis, pubsub):
        cid = new_conversation_id()
        subscription = await RedisMessageFeed(redis, "conv").subscribe(cid, lambda m: None)

        await subscription.close()
        await subscription.close()

        assert subscription.closed is True
        pubsub.unsubscribe.assert_awaited_once_with(f"conv:{cid.value}:messages")
        pubsub.aclose.assert_awaited_once()

    async def test_close_after_listener_died_releases_connection(self, redis, pubsub):
        cid = new_conversation_id()

        async def dropped_connection():
            raise ConnectionError("redis went away")
            yield  # pragma: no cover

        pubsub.listen = dropped_connection
        subscription = await RedisMessageFeed(redis, "conv").subscribe(cid, lambda m: None)
        await settle()

        await subscription.close()

        assert subscription.closed is True
        pubsub.unsubscribe.assert_awaited_once_with(f"conv:{cid.value}:messages")
        pubsub.aclose.assert_awaited_once()

    async def test_close_releases_connection_when_unsubscribe_fails(self, redis, pubsub):
        pubsub.unsubscribe.side_effect = ConnectionError("redis went away")
        subscription = await RedisMessageFeed(redis, "conv").subscribe(
            new_conversation_id(), lambda m: None
        )

        await subscription.close()

        pubsub.aclose.assert_awaited_once()

    async def test_failed_subscribe_releases_connection(self, redis, pubsub):
        pubsub.subscribe.side_effect = ConnectionError("redis down")

        with pytest.raises(ConnectionError):
            await RedisMessageFeed(redis, "conv").subscribe(new_conversation_id(), print)

        pubsub.aclose.assert_awaited_once()
