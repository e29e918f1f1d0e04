"""Shared fixtures for retry executor tests."""

import pytest

from infrastructure.operations import ErrorCategory, ErrorCode, RetryableError
from infrastructure.resilience.retry import RetryConfig


@pytest.fixture
def retry_config_factory():
    """Factory for creating RetryConfig instances."""

    def _factory(
        max_retries: int = 3,
        base_delay_ms: int = 300,
        max_delay_ms: int = 3000,
    ) -> RetryConfig:
        return RetryConfig(
            max_retries=max_retries,
            base_delay_ms=base_delay_ms,
            max_delay_ms=max_delay_ms,
        )

    return _factory


@pytest.fixture
def failing_operation():
    """Factory for coroutine functions that raise a fixed error a number of times.

    The returned operation exposes `calls` with the number of invocations.
    """

    def _factory(error: Exception, failures: int = -1, result="ok"):
        async def _operation():
            _operation.calls += 1
            if failures < 0 or _operation.calls <= failures:
                raise error
            return result

        _operation.calls = 0
        return _operation

    return _factory


@pytest.fixture
def server_error():
    return RetryableError(
        "server down",
        category=ErrorCategory.SERVER,
        code=ErrorCode.SERVER_ERROR,
        retryable=True,
        status_code=503,
    )


@pytest.fixture
def auth_error():
    return RetryableError(
        "bad key",
        category=ErrorCategory.AUTH,
        code=ErrorCode.INVALID_API_KEY,
        retryable=False,
        status_code=401,
    )
