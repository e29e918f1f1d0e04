"""Unit tests for infrastructure.logging.context module.

Tests cover:
- bind_submission_context() context manager
- get_correlation_id()
- clear_logging_context()
"""

import uuid

import pytest
import structlog

from infrastructure.logging.context import (
    bind_submission_context,
    clear_logging_context,
    get_correlation_id,
)


@pytest.mark.unit
class TestBindSubmissionContext:
    """Test suite for bind_submission_context context manager."""

    def test_auto_generates_correlation_id(self):
        """Correlation ID is auto-generated if not provided."""
        with bind_submission_context() as correlation_id:
            assert get_correlation_id() == correlation_id
            uuid.UUID(correlation_id)

    def test_uses_provided_correlation_id(self):
        """Provided correlation ID is used instead of generating one."""
        with bind_submission_context(correlation_id="batch-1"):
            assert get_correlation_id() == "batch-1"

    def test_binds_event_and_record_count(self):
        """Event id and record count are bound."""
        with bind_submission_context(event_id="EV12345", record_count=3):
            ctx = structlog.contextvars.get_contextvars()
            assert ctx["event_id"] == "EV12345"
            assert ctx["record_count"] == 3

    def test_skips_unset_values(self):
        """Unset optional values are not bound."""
        with bind_submission_context():
            ctx = structlog.contextvars.get_contextvars()
            assert "event_id" not in ctx
            assert "record_count" not in ctx

    def test_binds_extra_context(self):
        """Extra keyword arguments are bound."""
        with bind_submission_context(retry=True):
            assert structlog.contextvars.get_contextvars()["retry"] is True

    def test_context_cleared_on_exit(self):
        """Bound keys are removed after the block."""
        with bind_submission_context(event_id="EV12345"):
            pass

        assert get_correlation_id() is None
        assert "event_id" not in structlog.contextvars.get_contextvars()

    def test_context_cleared_on_exception(self):
        """Bound keys are removed even when the block raises."""
        with pytest.raises(RuntimeError):
            with bind_submission_context(event_id="EV12345"):
                raise RuntimeError("boom")

        assert get_correlation_id() is None


@pytest.mark.unit
class TestClearLoggingContext:
    """Test suite for clear_logging_context."""

    def test_clears_everything(self):
        """All bound keys are removed."""
        structlog.contextvars.bind_contextvars(correlation_id="abc", other="x")

        clear_logging_context()

        assert structlog.contextvars.get_contextvars() == {}
