"""
Realtime Layer - Redis change feed.

Contains the async Redis client, the pub/sub MessageFeed and the
repository decorator that publishes every inserted message.
"""

from promptcraft.infrastructure.realtime.redis_client import (
    close_redis_client,
    create_redis_client,
)
from promptcraft.infrastructure.realtime.redis_message_feed import (
    RedisMessageFeed,
    RedisSubscription,
)
from promptcraft.infrastructure.realtime.publishing_message_repository import (
    PublishingMessageRepository,
)

__all__ = [
    "create_redis_client",
    "close_redis_client",
    "RedisMessageFeed",
    "RedisSubscription",
    "PublishingMessageRepository",
]
