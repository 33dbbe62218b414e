"""
Store boundary - turns a repository call into a tagged Result.

Every durable-store call made by the application layer goes through
store_call(), so callers decide per operation what a failure means:

- read paths (refresh a list): log and keep what is already shown
- write paths (create, append, save): raise error_from(err)
"""

import logging
from typing import Awaitable, TypeVar

from promptcraft.domain.result import Err, ErrorKind, Ok, Result
from promptcraft.observability.metrics import MetricsErrorType, increment_error

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def store_call(
    operation: str, call: Awaitable[T], *, read: bool = False
) -> Result[T]:
    """
    Await a repository call and wrap the outcome.

    Args:
        operation: Human readable name used in logs and Err.detail
        call: The repository coroutine
        read: True for read-path calls (only affects the error metric label)

    Returns:
        Ok(value) or Err(kind, detail). Domain exceptions keep their own kind,
        anything else raised by the store becomes ErrorKind.PERSISTENCE.
    """
    try:
        return Ok(await call)
    except Exception as e:
        kind = getattr(e, "kind", None)
        if not isinstance(kind, ErrorKind):
            kind = ErrorKind.PERSISTENCE
        increment_error(
            MetricsErrorType.STORE_READ_FAILED
            if read
            else MetricsErrorType.STORE_WRITE_FAILED
        )
        logger.warning(f"[Store] {operation} failed: {type(e).__name__}: {e}")
        return Err(kind=kind, detail=f"{operation} failed: {e}")
