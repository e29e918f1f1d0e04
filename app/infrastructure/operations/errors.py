"""Typed error carried through the retry machinery."""

from typing import Optional

from infrastructure.operations.categories import ErrorCategory, ErrorCode


class RetryableError(Exception):
    """A classified failure.

    Instances are treated as immutable values. The retry executor never
    mutates an error; it replaces it with a copy from `with_attempt()` so a
    reference held elsewhere (a UI notification, a log entry) never changes
    underneath its holder.

    Attributes:
        message: Human-friendly message
        category: ErrorCategory of the failure
        code: ErrorCode of the failure
        retryable: Whether the failure may succeed on a later attempt
        attempt: Number of failed attempts observed so far (0 = unclassified)
        status_code: HTTP status when a response was received
        field: Request field the failure refers to, if any
        cause: The raw failure this error was classified from
    """

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        retryable: bool = False,
        attempt: int = 0,
        status_code: Optional[int] = None,
        field: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.category = category
        self.code = code
        self.retryable = retryable
        self.attempt = attempt
        self.status_code = status_code
        self.field = field
        self.cause = cause

    def with_attempt(self, attempt: int) -> "RetryableError":
        """Return a copy of this error with a different attempt count."""
        return RetryableError(
            self.message,
            category=self.category,
            code=self.code,
            retryable=self.retryable,
            attempt=attempt,
            status_code=self.status_code,
            field=self.field,
            cause=self.cause,
        )

    def to_dict(self) -> dict:
        """Serialize for logs and notifications."""
        return {
            "message": self.message,
            "category": self.category.value,
            "code": self.code.value,
            "retryable": self.retryable,
            "attempt": self.attempt,
            "status_code": self.status_code,
            "field": self.field,
        }

    def __repr__(self) -> str:
        return (
            f"RetryableError(category={self.category.value!r}, code={self.code.value!r}, "
            f"retryable={self.retryable}, attempt={self.attempt}, message={self.message!r})"
        )
