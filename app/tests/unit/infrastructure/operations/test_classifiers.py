"""Unit tests for error classifiers.

Tests cover:
- httpx transport failures (connection errors, timeouts)
- HTTP status classification through httpx.HTTPStatusError
- API error bodies (rate limiting, explicit non-retryable flags)
- Unknown failure shapes
"""

import httpx
import pytest

from infrastructure.operations import (
    ErrorCategory,
    ErrorCode,
    RetryableError,
    classify,
    classify_api_error,
)


def _status_error(status_code, json_body=None):
    request = httpx.Request("POST", "https://api.test/landmark/passes")
    response = httpx.Response(status_code, json=json_body, request=request)
    return httpx.HTTPStatusError("error", request=request, response=response)


class TestClassifyTransportFailures:
    """Tests for failures where no response was received."""

    def test_connect_error_is_retryable_network(self):
        """Test httpx.ConnectError as retryable NETWORK failure."""
        error = classify(httpx.ConnectError("connection refused"))

        assert error.category == ErrorCategory.NETWORK
        assert error.code == ErrorCode.CONNECTION_ERROR
        assert error.retryable is True

    def test_timeout_is_retryable_network_timeout(self):
        """Test httpx timeouts map to the timeout code."""
        error = classify(httpx.ReadTimeout("read timed out"))

        assert error.category == ErrorCategory.NETWORK
        assert error.code == ErrorCode.TIMEOUT
        assert error.retryable is True

    def test_builtin_connection_error_is_network(self):
        """Test builtin ConnectionError is treated like a transport failure."""
        error = classify(ConnectionResetError("reset by peer"))

        assert error.category == ErrorCategory.NETWORK
        assert error.retryable is True

    def test_builtin_timeout_error_is_network_timeout(self):
        """Test builtin TimeoutError maps to the timeout code."""
        error = classify(TimeoutError())

        assert error.code == ErrorCode.TIMEOUT
        assert error.retryable is True

    def test_cause_is_preserved(self):
        """Test the raw failure is kept on the classified error."""
        raw = httpx.ConnectError("refused")

        assert classify(raw).cause is raw


class TestClassifyHttpStatus:
    """Tests for classification of error responses."""

    @pytest.mark.parametrize("status_code", [500, 502, 503, 504])
    def test_server_errors_are_retryable(self, status_code):
        """Test 5xx responses as retryable SERVER failures."""
        error = classify(_status_error(status_code))

        assert error.category == ErrorCategory.SERVER
        assert error.code == ErrorCode.SERVER_ERROR
        assert error.retryable is True
        assert error.status_code == status_code

    def test_server_error_marked_non_retryable(self):
        """Test a 5xx body with retryable false is not retried."""
        error = classify(
            _status_error(500, {"error": {"code": "server_error", "retryable": False}})
        )

        assert error.category == ErrorCategory.SERVER
        assert error.retryable is False

    def test_401_is_invalid_api_key(self):
        """Test 401 as non-retryable AUTH failure."""
        error = classify(_status_error(401))

        assert error.category == ErrorCategory.AUTH
        assert error.code == ErrorCode.INVALID_API_KEY
        assert error.retryable is False

    def test_403_is_missing_api_key(self):
        """Test 403 as non-retryable AUTH failure."""
        error = classify(_status_error(403))

        assert error.category == ErrorCategory.AUTH
        assert error.code == ErrorCode.MISSING_API_KEY
        assert error.retryable is False

    @pytest.mark.parametrize("status_code", [400, 422])
    def test_validation_errors_are_permanent(self, status_code):
        """Test 400/422 as non-retryable VALIDATION failures with their field."""
        body = {
            "success": False,
            "error": {
                "code": "invalid_input",
                "message": "Bad event",
                "field": "eventId",
            },
        }

        error = classify(_status_error(status_code, body))

        assert error.category == ErrorCategory.VALIDATION
        assert error.code == ErrorCode.INVALID_INPUT
        assert error.field == "eventId"
        assert error.message == "Bad event"
        assert error.retryable is False

    def test_429_is_retryable(self):
        """Test 429 as retryable SERVER rate limiting."""
        error = classify(_status_error(429))

        assert error.category == ErrorCategory.SERVER
        assert error.code == ErrorCode.RATE_LIMIT_EXCEEDED
        assert error.retryable is True

    def test_unmapped_status_is_unknown(self):
        """Test an unmapped status as non-retryable UNKNOWN failure."""
        error = classify(_status_error(404))

        assert error.category == ErrorCategory.UNKNOWN
        assert error.retryable is False

    def test_non_json_body_falls_back_to_default_message(self):
        """Test an HTML error page still classifies by status."""
        request = httpx.Request("GET", "https://api.test/x")
        response = httpx.Response(502, text="<html>Bad gateway</html>", request=request)

        error = classify(httpx.HTTPStatusError("bad", request=request, response=response))

        assert error.category == ErrorCategory.SERVER
        assert "ParkHub service" in error.message


class TestClassifyApiError:
    """Tests for classify_api_error() on API error bodies."""

    def test_rate_limit_overrides_non_retryable_flag(self):
        """Rate limiting stays retryable even when the body says otherwise.

        Deliberate exception to the retryable flag: a rate limit is always
        transient, so the flag on the body is ignored.
        """
        body = {"error": {"code": "rate_limit_exceeded", "retryable": False}}

        error = classify_api_error(200, body)

        assert error.code == ErrorCode.RATE_LIMIT_EXCEEDED
        assert error.retryable is True

    def test_rate_limit_status_overrides_top_level_flag(self):
        """Test 429 stays retryable with a top-level retryable false."""
        error = classify_api_error(429, {"retryable": False})

        assert error.retryable is True

    def test_unknown_body_code_parses_to_unknown(self):
        """Test unrecognized codes fall back to unknown_error."""
        error = classify_api_error(418, {"error": {"code": "teapot"}})

        assert error.code == ErrorCode.UNKNOWN_ERROR
        assert error.category == ErrorCategory.UNKNOWN

    def test_missing_body_uses_catalog_message(self):
        """Test the default message is used without a body."""
        error = classify_api_error(401)

        assert error.message.startswith("The API key provided is invalid")


class TestClassifyOtherFailures:
    """Tests for unrecognized failure shapes."""

    def test_retryable_error_is_returned_unchanged(self):
        """Test an already classified error passes through."""
        original = RetryableError(
            "boom", category=ErrorCategory.SERVER, retryable=True, attempt=2
        )

        assert classify(original) is original

    def test_unknown_exception_is_not_retried(self):
        """Test arbitrary exceptions as non-retryable UNKNOWN failures."""
        error = classify(KeyError("missing"))

        assert error.category == ErrorCategory.UNKNOWN
        assert error.code == ErrorCode.UNKNOWN_ERROR
        assert error.retryable is False

    def test_unknown_exception_keeps_its_message(self):
        """Test the raw message is kept for unknown failures."""
        error = classify(ValueError("unexpected payload"))

        assert error.message == "unexpected payload"
