"""Unit tests for locale_middleware.logging.context module.

Tests cover:
- bind_request_context() context manager
- get_correlation_id()
- Context isolation and cleanup
"""

import uuid

import pytest
import structlog

from locale_middleware.logging.context import bind_request_context, get_correlation_id


@pytest.mark.unit
class TestBindRequestContext:
    """Test suite for bind_request_context context manager."""

    def test_auto_generates_correlation_id(self):
        """Correlation ID is auto-generated if not provided."""
        with bind_request_context(language="en-US"):
            correlation_id = get_correlation_id()
            assert correlation_id is not None
            # Should be a valid UUID
            uuid.UUID(correlation_id)

    def test_uses_provided_correlation_id(self):
        """Provided correlation ID is used instead of generating one."""
        with bind_request_context(correlation_id="req-123"):
            assert get_correlation_id() == "req-123"

    def test_binds_request_path_and_method(self):
        """Request path and method are bound to context."""
        with bind_request_context(request_path="/messages/greeting", request_method="GET"):
            ctx = structlog.contextvars.get_contextvars()
            assert ctx.get("request_path") == "/messages/greeting"
            assert ctx.get("request_method") == "GET"

    def test_omits_unset_fields(self):
        """Path and method are not bound when not given."""
        with bind_request_context():
            ctx = structlog.contextvars.get_contextvars()
            assert "request_path" not in ctx
            assert "request_method" not in ctx

    def test_binds_extra_context(self):
        """Extra keyword arguments are bound to context."""
        with bind_request_context(language="zh-CN"):
            ctx = structlog.contextvars.get_contextvars()
            assert ctx.get("language") == "zh-CN"

    def test_clears_context_on_exit(self):
        """Context is unbound after the block."""
        with bind_request_context(correlation_id="req-1", language="zh-CN"):
            pass

        ctx = structlog.contextvars.get_contextvars()
        assert "correlation_id" not in ctx
        assert "language" not in ctx

    def test_clears_context_on_exception(self):
        """Context is unbound even if the block raises."""
        with pytest.raises(ValueError):
            with bind_request_context(correlation_id="req-2"):
                raise ValueError("boom")

        assert get_correlation_id() is None


@pytest.mark.unit
class TestGetCorrelationId:
    """Test suite for get_correlation_id."""

    def test_returns_none_outside_context(self):
        assert get_correlation_id() is None
