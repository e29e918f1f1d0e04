"""Error taxonomy and classification.

This module contains the typed error used across the application, the
category and code enums, the error classifier and the user-facing message
catalog.
"""

from infrastructure.operations.categories import ErrorCategory, ErrorCode
from infrastructure.operations.classifiers import classify, classify_api_error
from infrastructure.operations.errors import RetryableError
from infrastructure.operations.messages import get_error_message

__all__ = [
    "ErrorCategory",
    "ErrorCode",
    "RetryableError",
    "classify",
    "classify_api_error",
    "get_error_message",
]
