"""Error categories and codes.

Categories drive the retry decision; codes identify the specific failure
for messages and field-level annotations.
"""

from enum import Enum


class ErrorCategory(Enum):
    """High-level classification of a failure.

    Attributes:
        NETWORK: No response received (connection failure, timeout)
        SERVER: Server-side failure or rate limiting
        AUTH: Missing or invalid credential
        VALIDATION: Request rejected because of its content
        UNKNOWN: Unrecognized failure shape
    """

    NETWORK = "network"
    SERVER = "server"
    AUTH = "auth"
    VALIDATION = "validation"
    UNKNOWN = "unknown"


class ErrorCode(Enum):
    """Specific error codes reported locally or by the ParkHub API."""

    CONNECTION_ERROR = "connection_error"
    TIMEOUT = "timeout"
    INVALID_API_KEY = "invalid_api_key"
    MISSING_API_KEY = "missing_api_key"
    INVALID_INPUT = "invalid_input"
    DUPLICATE_BARCODE = "duplicate_barcode"
    EVENT_NOT_FOUND = "event_not_found"
    SERVER_ERROR = "server_error"
    RATE_LIMIT_EXCEEDED = "rate_limit_exceeded"
    UNKNOWN_ERROR = "unknown_error"

    @classmethod
    def parse(cls, value) -> "ErrorCode":
        """Map a raw code string to an ErrorCode, UNKNOWN_ERROR if unrecognized."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            return cls.UNKNOWN_ERROR
