"""Observability package for promptcraft."""

from promptcraft.observability.metrics import (
    increment_generation,
    observe_generation_latency,
    observe_llm_tokens,
    increment_feed_event,
    increment_error,
    get_metrics_content,
    MetricsErrorType,
    GenerationOutcome,
    FeedResult,
)

__all__ = [
    "increment_generation",
    "observe_generation_latency",
    "observe_llm_tokens",
    "increment_feed_event",
    "increment_error",
    "get_metrics_content",
    "MetricsErrorType",
    "GenerationOutcome",
    "FeedResult",
]
