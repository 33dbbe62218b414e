"""
Async Redis Client Factory.

Creates the Redis client used by the change feed.
Uses redis.asyncio so pub/sub listeners run on the application's event loop.
"""

import logging
from typing import Optional

import redis.asyncio as redis
from redis.asyncio import Redis
from promptcraft.config.settings import Config

logger = logging.getLogger(__name__)


async def create_redis_client(url: Optional[str] = None) -> Redis:
    """
    Create async Redis client with connection pool.

    Args:
        url: Redis URL, defaults to Config.REDIS_URL

    Raises:
        redis.ConnectionError: If Redis is not reachable

    Note:
        - decode_responses=True so pub/sub payloads arrive as str
        - no socket_timeout: a pub/sub listener blocks until the next event
    """
    url = url or Config.REDIS_URL
    client = redis.from_url(
        url,
        encoding="utf-8",
        decode_responses=True,
        socket_connect_timeout=5.0,
    )

    await client.ping()
    logger.info(f"[Redis] Connected to {url}")

    return client


async def close_redis_client(client: Redis) -> None:
    """Close Redis client connection. Called on application shutdown."""
    if client:
        await client.aclose()
        logger.info("[Redis] Connection closed")
