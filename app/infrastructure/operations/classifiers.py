"""Error classifier for ParkHub API failures.

Converts raw failures (httpx exceptions, builtin connection errors, API
error bodies) into RetryableError values. Centralizes the retry decision so
the executor never inspects transport-specific exceptions.

Key Functions:
- classify(): any raised failure -> RetryableError
- classify_api_error(): HTTP status + JSON error body -> RetryableError

Usage:
    from infrastructure.operations.classifiers import classify

    try:
        response = await client.post(url, json=payload)
        response.raise_for_status()
    except Exception as exc:
        raise classify(exc) from exc
"""

from typing import Any, Dict, Optional

import httpx

from infrastructure.operations.categories import ErrorCategory, ErrorCode
from infrastructure.operations.errors import RetryableError
from infrastructure.operations.messages import get_error_message


def _extract_error_body(body: Any) -> Dict[str, Any]:
    """Return the `error` object of an API body, or {} when absent."""
    if not isinstance(body, dict):
        return {}
    error = body.get("error")
    if isinstance(error, dict):
        return error
    return {}


def _response_body(response: Optional[httpx.Response]) -> Any:
    if response is None or not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None


def classify_api_error(
    status_code: Optional[int],
    body: Any = None,
    cause: Optional[BaseException] = None,
) -> RetryableError:
    """Classify an API error response into a RetryableError.

    Status Code Mapping:
    - 429 or body code rate_limit_exceeded: SERVER, always retryable
    - 401: AUTH (invalid_api_key), never retryable
    - 403: AUTH (missing_api_key), never retryable
    - 400/422: VALIDATION, never retryable, field taken from body
    - 5xx: SERVER, retryable unless the body says "retryable": false
    - Other: UNKNOWN, never retryable

    Args:
        status_code: HTTP status of the response, if any
        body: Decoded JSON body of the response
        cause: Raw exception the response was observed through

    Returns:
        RetryableError describing the failure
    """
    error_body = _extract_error_body(body)
    raw_code = error_body.get("code")
    body_code = ErrorCode.parse(raw_code) if raw_code else None
    body_message = error_body.get("message")
    field = error_body.get("field")

    # Rate limiting wins over any retryable flag on the body
    if status_code == 429 or body_code == ErrorCode.RATE_LIMIT_EXCEEDED:
        return RetryableError(
            body_message
            or get_error_message(ErrorCategory.SERVER, ErrorCode.RATE_LIMIT_EXCEEDED),
            category=ErrorCategory.SERVER,
            code=ErrorCode.RATE_LIMIT_EXCEEDED,
            retryable=True,
            status_code=status_code,
            cause=cause,
        )

    if status_code in (401, 403):
        code = ErrorCode.INVALID_API_KEY if status_code == 401 else ErrorCode.MISSING_API_KEY
        return RetryableError(
            body_message or get_error_message(ErrorCategory.AUTH, code),
            category=ErrorCategory.AUTH,
            code=code,
            retryable=False,
            status_code=status_code,
            cause=cause,
        )

    if status_code in (400, 422):
        code = body_code or ErrorCode.INVALID_INPUT
        return RetryableError(
            body_message or get_error_message(ErrorCategory.VALIDATION, code, field),
            category=ErrorCategory.VALIDATION,
            code=code,
            retryable=False,
            status_code=status_code,
            field=field,
            cause=cause,
        )

    if status_code is not None and 500 <= status_code < 600:
        explicitly_permanent = error_body.get("retryable") is False or (
            isinstance(body, dict) and body.get("retryable") is False
        )
        return RetryableError(
            body_message
            or get_error_message(ErrorCategory.SERVER, ErrorCode.SERVER_ERROR),
            category=ErrorCategory.SERVER,
            code=body_code or ErrorCode.SERVER_ERROR,
            retryable=not explicitly_permanent,
            status_code=status_code,
            cause=cause,
        )

    code = body_code or ErrorCode.UNKNOWN_ERROR
    return RetryableError(
        body_message or get_error_message(ErrorCategory.UNKNOWN, code, field),
        category=ErrorCategory.UNKNOWN,
        code=code,
        retryable=False,
        status_code=status_code,
        field=field,
        cause=cause,
    )


def classify(exc: BaseException) -> RetryableError:
    """Classify any raised failure into a RetryableError.

    Mapping:
    - RetryableError: returned unchanged
    - httpx.TimeoutException / TimeoutError: NETWORK (timeout), retryable
    - httpx.TransportError / ConnectionError: NETWORK (connection_error), retryable
    - httpx.HTTPStatusError: classified by status and JSON error body
    - Anything else: UNKNOWN, not retryable

    Args:
        exc: Exception raised by an operation

    Returns:
        RetryableError with category, code and retryable flag set

    Example:
        error = classify(httpx.ConnectError("refused"))
        assert error.category == ErrorCategory.NETWORK
        assert error.retryable
    """
    if isinstance(exc, RetryableError):
        return exc

    # Timeouts are transport errors too, check them first
    if isinstance(exc, (httpx.TimeoutException, TimeoutError)):
        return RetryableError(
            get_error_message(ErrorCategory.NETWORK, ErrorCode.TIMEOUT),
            category=ErrorCategory.NETWORK,
            code=ErrorCode.TIMEOUT,
            retryable=True,
            cause=exc,
        )

    if isinstance(exc, (httpx.TransportError, ConnectionError)):
        return RetryableError(
            get_error_message(ErrorCategory.NETWORK, ErrorCode.CONNECTION_ERROR),
            category=ErrorCategory.NETWORK,
            code=ErrorCode.CONNECTION_ERROR,
            retryable=True,
            cause=exc,
        )

    if isinstance(exc, httpx.HTTPStatusError):
        response = exc.response
        return classify_api_error(response.status_code, _response_body(response), cause=exc)

    # Unknown shapes are never retried, so bugs do not look like outages
    return RetryableError(
        str(exc) or get_error_message(ErrorCategory.UNKNOWN, ErrorCode.UNKNOWN_ERROR),
        category=ErrorCategory.UNKNOWN,
        code=ErrorCode.UNKNOWN_ERROR,
        retryable=False,
        cause=exc,
    )
