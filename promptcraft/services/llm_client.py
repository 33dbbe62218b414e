"""
Centralized LLM client wrapper (async).

Uses AsyncOpenAI against any OpenAI-compatible endpoint (DeepSeek by
default) so generation never blocks the event loop.

Usage:
    from promptcraft.services.llm_client import chat_completion, create_openai_client

    client = create_openai_client()
    response = await chat_completion(
        client=client,
        messages=[{"role": "user", "content": "Hello"}],
        model="deepseek-v3",
    )
    print(response.choices[0].message.content)
"""

import asyncio
import logging
import time
from enum import Enum
from typing import Any, Callable, Optional

from httpx import Timeout
from langsmith import traceable
from openai import (
    AsyncOpenAI,
    APIConnectionError,
    APITimeoutError,
    InternalServerError,
    RateLimitError,
)

from promptcraft.config.settings import Config
from promptcraft.observability.metrics import (
    observe_llm_tokens,
    increment_circuit_transition,
    increment_error,
    MetricsErrorType,
)

logger = logging.getLogger(__name__)

_TRANSPORT_ERRORS = (APIConnectionError, APITimeoutError, InternalServerError, RateLimitError)


def default_timeout() -> Timeout:
    return Timeout(Config.LLM_TIMEOUT, connect=Config.LLM_CONNECT_TIMEOUT)


class CircuitOpenError(Exception):
    """Generation provider is marked down; fail fast instead of waiting on it."""

    def __init__(self, message: str, retry_after: float = 0.0):
        super().__init__(message)
        self.retry_after = retry_after


class BreakerState(str, Enum):
    CLOSED = "closed"
    OPEN = "open"
    HALF_OPEN = "half_open"


class GenerationCircuitBreaker:
    """
    Guards the provider behind chat_completion().

    `threshold` consecutive transport-level failures open the circuit. After
    `cooldown` seconds a single trial call is let through: success closes the
    circuit, any failure reopens it for another cooldown. Provider-side
    rejections (bad request, auth) say nothing about availability and are
    not counted.
    """

    def __init__(
        self,
        threshold: int = 5,
        cooldown: float = 30,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._threshold = threshold
        self._cooldown = cooldown
        self._clock = clock
        self._consecutive_failures = 0
        self._opened_at = 0.0
        self._state = BreakerState.CLOSED
        self._lock = asyncio.Lock()

    @property
    def state(self) -> BreakerState:
        return self._state

    @property
    def retry_after(self) -> float:
        """Seconds until a trial call is allowed; 0 unless OPEN."""
        if self._state is not BreakerState.OPEN:
            return 0.0
        return max(0.0, self._opened_at + self._cooldown - self._clock())

    def _transition(self, state: BreakerState, reason: str) -> None:
        logger.warning(f"[LLM] Circuit {self._state.value} -> {state.value}: {reason}")
        self._state = state
        if state is BreakerState.OPEN:
            self._opened_at = self._clock()
        increment_circuit_transition(state.value)

    async def before_call(self) -> None:
        """Raise CircuitOpenError unless a call may go out now."""
        async with self._lock:
            if self._state is BreakerState.CLOSED:
                return
            if self._state is BreakerState.HALF_OPEN:
                raise CircuitOpenError("Generation provider trial call in progress")
            remaining = self.retry_after
            if remaining > 0:
                raise CircuitOpenError(
                    f"Generation provider unavailable, retry in {remaining:.0f}s",
                    retry_after=remaining,
                )
            self._transition(BreakerState.HALF_OPEN, "cooldown elapsed")

    async def on_success(self) -> None:
        async with self._lock:
            self._consecutive_failures = 0
            if self._state is not BreakerState.CLOSED:
                self._transition(BreakerState.CLOSED, "trial call succeeded")

    async def on_failure(self, error: Exception) -> None:
        async with self._lock:
            if self._state is BreakerState.HALF_OPEN:
                self._transition(
                    BreakerState.OPEN, f"trial call failed ({type(error).__name__})"
                )
                return
            if not isinstance(error, _TRANSPORT_ERRORS):
                return
            self._consecutive_failures += 1
            if (
                self._state is BreakerState.CLOSED
                and self._consecutive_failures >= self._threshold
            ):
                self._transition(
                    BreakerState.OPEN,
                    f"{self._consecutive_failures} consecutive failures",
                )


_breaker: Optional[GenerationCircuitBreaker] = None


def _get_breaker() -> GenerationCircuitBreaker:
    global _breaker
    if _breaker is None:
        _breaker = GenerationCircuitBreaker(
            Config.LLM_CB_FAILURE_THRESHOLD, Config.LLM_CB_RECOVERY_TIMEOUT
        )
    return _breaker


def reset_circuit_breaker() -> None:
    """Forget breaker state; the next call builds a fresh one from Config."""
    global _breaker
    _breaker = None


def create_openai_client(
    api_key: Optional[str] = None, base_url: Optional[str] = None
) -> AsyncOpenAI:
    """AsyncOpenAI client for the configured OpenAI-compatible provider."""
    return AsyncOpenAI(
        api_key=api_key or Config.OPENAI_KEY,
        base_url=base_url or Config.OPENAI_BASE_URL,
        max_retries=Config.LLM_MAX_RETRIES,
        timeout=default_timeout(),
    )


@traceable(run_type="llm", name="chat_completion")
async def chat_completion(
    client,
    messages: list[dict],
    model: str,
    temperature: float = 0.2,
    max_tokens: int = 4000,
    timeout: Optional[Timeout] = None,
) -> Any:
    """Basic chat completion.

    Args:
        client: AsyncOpenAI client instance
        messages: List of message dicts [{"role": "user", "content": "..."}]
        model: Model name (e.g., "deepseek-v3")
        temperature: Sampling temperature
        max_tokens: Max tokens to generate
        timeout: Request timeout (default: Config.LLM_TIMEOUT)

    Returns:
        OpenAI ChatCompletion response

    Raises:
        CircuitOpenError: provider marked down
        openai.OpenAIError: whatever the client raised
    """
    breaker = _get_breaker()
    try:
        await breaker.before_call()
        response = await client.chat.completions.create(
            model=model,
            messages=messages,
            temperature=temperature,
            max_tokens=max_tokens,
            timeout=timeout or default_timeout(),
        )

        if response.usage:
            observe_llm_tokens("input", model, response.usage.prompt_tokens)
            observe_llm_tokens("output", model, response.usage.completion_tokens)

        await breaker.on_success()
        return response
    except Exception as e:
        if not isinstance(e, CircuitOpenError):
            await breaker.on_failure(e)
        increment_error(MetricsErrorType.LLM_FAILED)
        raise
