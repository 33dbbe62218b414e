"""
Prometheus Metrics for promptcraft.

DEPENDENCY:
    pip install prometheus-client

METRIC TYPES:
    - Counter: Value only goes up (e.g., generations by outcome)
    - Histogram: Distribution (e.g., generation latency, token usage)
"""

from prometheus_client import (
    Histogram,
    Counter,
    generate_latest,
    CONTENT_TYPE_LATEST,
)


# =============================================================================
# METRICS DEFINITIONS
# =============================================================================
GENERATION_TOTAL = Counter(
    "promptcraft_generation_total",
    "Total number of project generations by outcome",
    ["outcome"],
)

GENERATION_LATENCY = Histogram(
    "promptcraft_generation_latency_seconds",
    "Latency of generate() from backend call to persisted version",
    buckets=[1, 2, 5, 10, 20, 30, 60, 90, 120, 240],
)

LLM_TOKENS_TOTAL = Histogram(
    "promptcraft_llm_tokens_total",
    "Total number of LLM tokens used",
    ["type", "model"],
    buckets=[100, 500, 1000, 2000, 4000, 8000, 16000],
)

FEED_EVENTS_TOTAL = Counter(
    "promptcraft_feed_events_total",
    "Change-feed deliveries by what the synchronizer did with them",
    ["result"],
)

LLM_CIRCUIT_TRANSITIONS_TOTAL = Counter(
    "promptcraft_llm_circuit_transitions_total",
    "Generation provider circuit breaker state changes by target state",
    ["to_state"],
)

ERRORS_TOTAL = Counter(
    "promptcraft_errors_total",
    "Total number of errors by type",
    ["error_type"],
)


# =============================================================================
# LABEL CONSTANTS (avoid hardcoding strings throughout codebase)
# =============================================================================
class MetricsErrorType:
    """Error type labels for promptcraft_errors_total metric."""

    LLM_FAILED = "llm_failed"
    BACKEND_FAILED = "backend_failed"
    INVALID_OUTPUT = "invalid_output"
    STORE_READ_FAILED = "store_read_failed"
    STORE_WRITE_FAILED = "store_write_failed"
    FEED_DECODE_FAILED = "feed_decode_failed"
    FEED_LISTENER_FAILED = "feed_listener_failed"


class GenerationOutcome:
    ACCEPTED = "accepted"
    BACKEND_ERROR = "backend_error"
    REJECTED = "rejected"
    PERSIST_FAILED = "persist_failed"


class FeedResult:
    APPLIED = "applied"
    DUPLICATE = "duplicate"
    STALE = "stale"


# =============================================================================
# RECORDING FUNCTIONS
# =============================================================================
def increment_generation(outcome: str):
    """Call once per generate() call. Integration point: application/commands/generation"""
    GENERATION_TOTAL.labels(outcome=outcome).inc()


def observe_generation_latency(duration: float):
    GENERATION_LATENCY.observe(duration)


def observe_llm_tokens(type: str, model: str, token_count: int):
    """Call to record LLM token usage. Integration point: services/llm_client.py"""
    LLM_TOKENS_TOTAL.labels(type=type, model=model).observe(token_count)


def increment_feed_event(result: str):
    """Integration point: application/state/message_synchronizer.py push handler"""
    FEED_EVENTS_TOTAL.labels(result=result).inc()


def increment_circuit_transition(to_state: str):
    """Integration point: services/llm_client.py GenerationCircuitBreaker"""
    LLM_CIRCUIT_TRANSITIONS_TOTAL.labels(to_state=to_state).inc()


def increment_error(error_type: str):
    """
    Call to record an error occurrence.

    Integration points:
        - services/llm_client.py: llm_failed
        - application/common/store_call.py: store_read_failed / store_write_failed
        - infrastructure/realtime/redis_message_feed.py: feed_decode_failed / feed_listener_failed
    """
    ERRORS_TOTAL.labels(error_type=error_type).inc()


# =============================================================================
# HELPER FOR a /metrics ENDPOINT in the presentation layer
# =============================================================================
def get_metrics_content():
    """
    Generate Prometheus metrics output.

    Returns:
        Tuple of (content_bytes, content_type_string)
    """
    return generate_latest(), CONTENT_TYPE_LATEST


# =============================================================================
# EXPORTS
# =============================================================================
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
