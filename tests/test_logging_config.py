"""
Tests for the correlation-id logging filter.
"""

import logging

from promptcraft.config.logging_config import (
    NO_CORRELATION_ID,
    CorrelationIdFilter,
    SafeFormatter,
    correlation_id_var,
)


def _record():
    return logging.LogRecord("promptcraft.test", logging.INFO, __file__, 1, "msg", None, None)


class TestCorrelationId:
    def test_filter_copies_context_value(self):
        token = correlation_id_var.set("abc-123")
        try:
            record = _record()
            CorrelationIdFilter().filter(record)
        finally:
            correlation_id_var.reset(token)

        assert record.correlation_id == "abc-123"

    def test_default_when_unset(self):
        record = _record()
        CorrelationIdFilter().filter(record)
        assert record.correlation_id == NO_CORRELATION_ID

    def test_formatter_tolerates_missing_attribute(self):
        """Records from handlers without the filter still format."""
        formatted = SafeFormatter("[%(correlation_id)s] %(message)s").format(_record())
        assert formatted == f"[{NO_CORRELATION_ID}] msg"
