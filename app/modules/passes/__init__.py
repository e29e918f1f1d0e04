"""Batch pass creation module.

Features:
- Declarative field rules and pure field/record validation
- A batch store owning the records of one event, validated on blur or submit
- A submission coordinator that sends the batch through the retry executor
  and merges per-item success and failure back into the records
- Resubmission of failed records only
"""

from modules.passes.coordinator import BatchSubmissionCoordinator, PassTransport
from modules.passes.domain import (
    BatchResult,
    FailedItem,
    FieldRule,
    FieldState,
    PassRecord,
    RecordStatus,
    SpotType,
    SubmissionInProgressError,
    SuccessfulItem,
    ValidationFailed,
    VALIDATION_RULES,
)
from modules.passes.store import BatchStore
from modules.passes.validation import (
    FieldValidation,
    RecordValidation,
    is_valid_barcode,
    is_valid_event_id,
    is_valid_spot_type,
    validate_barcode,
    validate_event_id,
    validate_field,
    validate_record,
)

__all__ = [
    "BatchResult",
    "BatchStore",
    "BatchSubmissionCoordinator",
    "FailedItem",
    "FieldRule",
    "FieldState",
    "FieldValidation",
    "PassRecord",
    "PassTransport",
    "RecordStatus",
    "RecordValidation",
    "SpotType",
    "SubmissionInProgressError",
    "SuccessfulItem",
    "VALIDATION_RULES",
    "ValidationFailed",
    "is_valid_barcode",
    "is_valid_event_id",
    "is_valid_spot_type",
    "validate_barcode",
    "validate_event_id",
    "validate_field",
    "validate_record",
]
