"""Declarative validation rules for pass fields.

One FieldRule per field name. Rules are frozen and shared; nothing mutates
them at runtime.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Optional, Pattern

from infrastructure.operations import ErrorCode
from infrastructure.operations.messages import FIELD_ERROR_MESSAGES


class SpotType(str, Enum):
    """Parking spot categories accepted by ParkHub."""

    REGULAR = "Regular"
    VIP = "VIP"
    PREMIUM = "Premium"


DEFAULT_SPOT_TYPE = SpotType.REGULAR
VALID_SPOT_TYPES: FrozenSet[str] = frozenset(s.value for s in SpotType)

EVENT_ID_PATTERN = re.compile(r"^EV\d{5}$")
ACCOUNT_ID_PATTERN = re.compile(r"^[A-Za-z0-9]{3,12}$")
BARCODE_PATTERN = re.compile(r"^BC\d{6}$")
CUSTOMER_NAME_PATTERN = re.compile(r"^[A-Za-z\s\-']+$")
LOT_ID_PATTERN = re.compile(r"^[A-Za-z0-9\-]{3,10}$")


@dataclass(frozen=True)
class FieldRule:
    """Validation rule for one named field.

    A rule either has a pattern (with optional length bounds) or a fixed set
    of valid values; value-set fields skip length and pattern checks.

    Attributes:
        label: Human-readable field name used in bound messages
        required: Whether an empty value is an error
        min_length: Minimum length, checked before the pattern
        max_length: Maximum length, checked before the pattern
        pattern: Compiled regex the whole value must match
        valid_values: Fixed set of accepted values
        message: Message for a missing, malformed or invalid value
        duplicate_message: Message for a value already in use
    """

    label: str
    message: str
    required: bool = True
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    pattern: Optional[Pattern[str]] = None
    valid_values: Optional[FrozenSet[str]] = None
    duplicate_message: Optional[str] = None

    @property
    def min_length_message(self) -> str:
        return f"{self.label} must be at least {self.min_length} characters"

    @property
    def max_length_message(self) -> str:
        return f"{self.label} cannot exceed {self.max_length} characters"


def _invalid_input(field_name: str) -> str:
    return FIELD_ERROR_MESSAGES[field_name][ErrorCode.INVALID_INPUT]


EVENT_ID_RULE = FieldRule(
    label="Event ID",
    message=_invalid_input("eventId"),
    min_length=7,
    max_length=7,
    pattern=EVENT_ID_PATTERN,
)

VALIDATION_RULES: Dict[str, FieldRule] = {
    "eventId": EVENT_ID_RULE,
    "accountId": FieldRule(
        label="Account ID",
        message=_invalid_input("accountId"),
        min_length=3,
        max_length=12,
        pattern=ACCOUNT_ID_PATTERN,
    ),
    "barcode": FieldRule(
        label="Barcode",
        message=_invalid_input("barcode"),
        min_length=8,
        max_length=8,
        pattern=BARCODE_PATTERN,
        duplicate_message=FIELD_ERROR_MESSAGES["barcode"][ErrorCode.DUPLICATE_BARCODE],
    ),
    "customerName": FieldRule(
        label="Customer name",
        message=_invalid_input("customerName"),
        min_length=2,
        max_length=50,
        pattern=CUSTOMER_NAME_PATTERN,
    ),
    "spotType": FieldRule(
        label="Spot type",
        message=_invalid_input("spotType"),
        valid_values=VALID_SPOT_TYPES,
    ),
    "lotId": FieldRule(
        label="Lot ID",
        message=_invalid_input("lotId"),
        min_length=3,
        max_length=10,
        pattern=LOT_ID_PATTERN,
    ),
}

# Fields a user edits per record; the event id is shared by the batch
RECORD_FIELDS = ("accountId", "barcode", "customerName", "spotType", "lotId")
