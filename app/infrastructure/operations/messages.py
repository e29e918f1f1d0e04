"""User-facing error messages.

Lookup order: field-specific message, then category/code default, then the
generic unknown message.
"""

from typing import Dict, Optional

from infrastructure.operations.categories import ErrorCategory, ErrorCode

UNKNOWN_MESSAGE = (
    "An unexpected error occurred. Please try again or contact support if the "
    "problem persists."
)

DEFAULT_ERROR_MESSAGES: Dict[ErrorCategory, Dict[ErrorCode, str]] = {
    ErrorCategory.NETWORK: {
        ErrorCode.CONNECTION_ERROR: (
            "Unable to connect to the ParkHub service. Please check your internet "
            "connection and try again."
        ),
        ErrorCode.TIMEOUT: (
            "The request to ParkHub timed out. Please try again. If the problem "
            "persists, the service may be experiencing high load."
        ),
        ErrorCode.UNKNOWN_ERROR: (
            "A network error occurred while communicating with ParkHub. Please try "
            "again later."
        ),
    },
    ErrorCategory.AUTH: {
        ErrorCode.INVALID_API_KEY: (
            "The API key provided is invalid or has expired. Please update your API key."
        ),
        ErrorCode.MISSING_API_KEY: (
            "No API key found. Please enter your ParkHub API key to continue."
        ),
        ErrorCode.UNKNOWN_ERROR: (
            "An authentication error occurred. Please check your credentials and "
            "try again."
        ),
    },
    ErrorCategory.VALIDATION: {
        ErrorCode.INVALID_INPUT: (
            "The provided information contains errors. Please review and correct "
            "the highlighted fields."
        ),
        ErrorCode.DUPLICATE_BARCODE: "A pass with this barcode already exists in the system.",
        ErrorCode.EVENT_NOT_FOUND: (
            "The specified event could not be found. Please verify the event ID and "
            "try again."
        ),
        ErrorCode.UNKNOWN_ERROR: (
            "A validation error occurred. Please review your input and try again."
        ),
    },
    ErrorCategory.SERVER: {
        ErrorCode.SERVER_ERROR: (
            "The ParkHub service encountered an error. Please try again later."
        ),
        ErrorCode.RATE_LIMIT_EXCEEDED: (
            "You have made too many requests. Please wait a moment before trying again."
        ),
        ErrorCode.UNKNOWN_ERROR: (
            "An unexpected server error occurred. Please try again later or contact "
            "support if the problem persists."
        ),
    },
    ErrorCategory.UNKNOWN: {
        ErrorCode.UNKNOWN_ERROR: UNKNOWN_MESSAGE,
    },
}

FIELD_ERROR_MESSAGES: Dict[str, Dict[ErrorCode, str]] = {
    "eventId": {
        ErrorCode.INVALID_INPUT: "Event ID must be in the format EV##### (where # is a digit).",
        ErrorCode.EVENT_NOT_FOUND: "No event found with this ID. Please check and try again.",
    },
    "accountId": {
        ErrorCode.INVALID_INPUT: "Account ID is required and must be in the correct format.",
    },
    "barcode": {
        ErrorCode.INVALID_INPUT: "Barcode must follow the format BC###### (where # is a digit).",
        ErrorCode.DUPLICATE_BARCODE: "This barcode already exists. Please use a unique barcode.",
    },
    "customerName": {
        ErrorCode.INVALID_INPUT: (
            "Customer name is required and must contain only letters, spaces, and hyphens."
        ),
    },
    "spotType": {
        ErrorCode.INVALID_INPUT: "Spot type must be one of: Regular, VIP, Premium.",
    },
    "lotId": {
        ErrorCode.INVALID_INPUT: "Lot ID is required and must be in the correct format.",
    },
}


def get_error_message(
    category: ErrorCategory, code: ErrorCode, field: Optional[str] = None
) -> str:
    """Resolve the user-facing message for an error.

    Args:
        category: Category of the error
        code: Specific error code
        field: Optional field name for field-specific messages

    Returns:
        The most specific message available
    """
    if field and code in FIELD_ERROR_MESSAGES.get(field, {}):
        return FIELD_ERROR_MESSAGES[field][code]

    by_code = DEFAULT_ERROR_MESSAGES.get(category, {})
    if code in by_code:
        return by_code[code]

    return UNKNOWN_MESSAGE
