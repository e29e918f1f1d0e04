"""Field and record validation for pass entries.

Provides validation for:
- Single fields against their FieldRule (required, length, pattern, value set)
- Whole records, aggregating every field error at once
- Barcode uniqueness against barcodes already in use

All functions are pure: the same inputs always give the same result, and
failures are returned, never raised.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, Mapping, Optional

from modules.passes.domain.rules import (
    BARCODE_PATTERN,
    EVENT_ID_PATTERN,
    VALID_SPOT_TYPES,
    VALIDATION_RULES,
    FieldRule,
)


@dataclass(frozen=True)
class FieldValidation:
    valid: bool
    error: Optional[str] = None


@dataclass(frozen=True)
class RecordValidation:
    valid: bool
    errors: Dict[str, str] = field(default_factory=dict)


VALID = FieldValidation(valid=True)


def _is_blank(value: Optional[str]) -> bool:
    return not value or not value.strip()


def validate_field(
    field_name: str, value: Optional[str], rule: Optional[FieldRule] = None
) -> FieldValidation:
    """Validate one field value.

    Checks run in order and stop at the first failure: required, length
    bounds, then the value set or the pattern.

    Args:
        field_name: API field name (e.g. "barcode")
        value: Raw field value
        rule: Rule overriding the one registered for field_name

    Returns:
        FieldValidation with the first error found, if any

    Examples:
        >>> validate_field("eventId", "EV12345")
        FieldValidation(valid=True, error=None)

        >>> validate_field("eventId", "EV123").error
        'Event ID must be at least 7 characters'
    """
    rule = rule or VALIDATION_RULES.get(field_name)
    if rule is None:
        return FieldValidation(valid=False, error=f"Unknown field: {field_name}")

    if _is_blank(value):
        if rule.required:
            return FieldValidation(valid=False, error=rule.message)
        return VALID

    if rule.min_length is not None and len(value) < rule.min_length:
        return FieldValidation(valid=False, error=rule.min_length_message)

    if rule.max_length is not None and len(value) > rule.max_length:
        return FieldValidation(valid=False, error=rule.max_length_message)

    if rule.valid_values is not None:
        if value not in rule.valid_values:
            return FieldValidation(valid=False, error=rule.message)
        return VALID

    if rule.pattern is not None and not rule.pattern.fullmatch(value):
        return FieldValidation(valid=False, error=rule.message)

    return VALID


def validate_record(
    record: Mapping[str, Optional[str]],
    existing_barcodes: Optional[Iterable[str]] = None,
) -> RecordValidation:
    """Validate every field of a record.

    Every field is checked independently so all problems surface at once.
    A barcode that passes its rule but is in `existing_barcodes` (exact,
    case-sensitive match) gets the duplicate message. A record without any
    field is invalid.

    Args:
        record: Field values keyed by API field name
        existing_barcodes: Barcodes already in use

    Returns:
        RecordValidation with errors keyed by field name
    """
    if not record:
        return RecordValidation(valid=False)

    errors: Dict[str, str] = {}
    for field_name, value in record.items():
        if field_name == "barcode":
            result = validate_barcode(value, existing_barcodes)
        else:
            result = validate_field(field_name, value)
        if not result.valid:
            errors[field_name] = result.error

    return RecordValidation(valid=not errors, errors=errors)


def validate_event_id(event_id: Optional[str]) -> FieldValidation:
    """Validate the event id shared by a batch."""
    return validate_field("eventId", event_id)


def validate_barcode(
    barcode: Optional[str], existing_barcodes: Optional[Iterable[str]] = None
) -> FieldValidation:
    """Validate a barcode's format, then its uniqueness."""
    result = validate_field("barcode", barcode)
    if not result.valid:
        return result

    if existing_barcodes is not None and barcode in set(existing_barcodes):
        return FieldValidation(
            valid=False, error=VALIDATION_RULES["barcode"].duplicate_message
        )

    return result


def is_valid_event_id(value: Optional[str]) -> bool:
    return bool(value) and EVENT_ID_PATTERN.fullmatch(value) is not None


def is_valid_barcode(value: Optional[str]) -> bool:
    return bool(value) and BARCODE_PATTERN.fullmatch(value) is not None


def is_valid_spot_type(value: Optional[str]) -> bool:
    return bool(value) and value in VALID_SPOT_TYPES
