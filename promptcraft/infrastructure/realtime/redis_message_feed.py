"""
Redis pub/sub implementation of the MessageFeed port.

Channel per conversation:  {prefix}:{conversation_id}:messages

Each subscription owns one PubSub connection and one listener task. The
listener decodes payloads, drops anything for another conversation and
calls the handler. Undecodable payloads are counted and skipped; they
never stop the listener. A lost connection does stop it; close() still
releases the PubSub afterwards.
"""

import asyncio
import logging
from typing import Optional

from redis.asyncio import Redis
from redis.asyncio.client import PubSub

from promptcraft.config.settings import Config
from promptcraft.domain.entities.message import Message
from promptcraft.domain.ports.message_feed import (
    MessageFeed,
    MessageHandler,
    Subscription,
)
from promptcraft.domain.value_objects.conversation_id import ConversationId
from promptcraft.infrastructure.realtime.message_codec import (
    deserialize_message,
    serialize_message,
)
from promptcraft.observability.metrics import MetricsErrorType, increment_error

logger = logging.getLogger(__name__)


class RedisSubscription(Subscription):
    def __init__(self, pubsub: PubSub, task: asyncio.Task, channel: str):
        self._pubsub = pubsub
        self._task = task
        self._channel = channel
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True

        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        except Exception as e:
            # Listener already died; the PubSub still has to be released
            logger.warning(f"[Feed] Listener on {self._channel} had failed: {e}")
        finally:
            try:
                await self._pubsub.unsubscribe(self._channel)
            except Exception as e:
                logger.warning(f"[Feed] Unsubscribe from {self._channel} failed: {e}")
            finally:
                await self._pubsub.aclose()
        logger.debug(f"[Feed] Unsubscribed from {self._channel}")


class RedisMessageFeed(MessageFeed):
    def __init__(self, redis: Redis, channel_prefix: Optional[str] = None):
        self._redis = redis
        self._prefix = channel_prefix or Config.FEED_CHANNEL_PREFIX

    def channel(self, conversation_id: ConversationId) -> str:
        return f"{self._prefix}:{conversation_id.value}:messages"

    async def subscribe(
        self, conversation_id: ConversationId, handler: MessageHandler
    ) -> RedisSubscription:
        channel = self.channel(conversation_id)
        pubsub = self._redis.pubsub()
        try:
            await pubsub.subscribe(channel)
        except Exception:
            await pubsub.aclose()
            raise

        task = asyncio.create_task(
            self._listen(pubsub, conversation_id, handler),
            name=f"feed-{channel}",
        )
        logger.debug(f"[Feed] Subscribed to {channel}")
        return RedisSubscription(pubsub, task, channel)

    async def publish(self, message: Message) -> None:
        channel = self.channel(message.conversation_id)
        receivers = await self._redis.publish(channel, serialize_message(message))
        logger.debug(f"[Feed] Published {message.id} to {channel} ({receivers} receivers)")

    async def _listen(
        self,
        pubsub: PubSub,
        conversation_id: ConversationId,
        handler: MessageHandler,
    ) -> None:
        try:
            async for event in pubsub.listen():
                if event.get("type") != "message":
                    continue
                self._dispatch(event.get("data"), conversation_id, handler)
        except Exception as e:
            increment_error(MetricsErrorType.FEED_LISTENER_FAILED)
            logger.error(f"[Feed] Listener for {conversation_id} stopped: {e}")
            raise

    def _dispatch(
        self, payload, conversation_id: ConversationId, handler: MessageHandler
    ) -> None:
        try:
            message = deserialize_message(payload)
        except (ValueError, KeyError, TypeError) as e:
            increment_error(MetricsErrorType.FEED_DECODE_FAILED)
            logger.warning(f"[Feed] Undecodable event on {conversation_id}: {e}")
            return

        if message.conversation_id != conversation_id:
            return

        try:
            handler(message)
        except Exception as e:
            logger.error(f"[Feed] Handler failed for message {message.id}: {e}")
