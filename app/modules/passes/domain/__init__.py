"""Domain layer - rules, models and errors."""

from modules.passes.domain.errors import SubmissionInProgressError, ValidationFailed
from modules.passes.domain.models import (
    BatchResult,
    BatchState,
    FailedItem,
    FieldState,
    PassRecord,
    RecordStatus,
    SuccessfulItem,
)
from modules.passes.domain.rules import (
    DEFAULT_SPOT_TYPE,
    RECORD_FIELDS,
    VALIDATION_RULES,
    FieldRule,
    SpotType,
)

__all__ = [
    "BatchResult",
    "BatchState",
    "DEFAULT_SPOT_TYPE",
    "FailedItem",
    "FieldRule",
    "FieldState",
    "PassRecord",
    "RECORD_FIELDS",
    "RecordStatus",
    "SpotType",
    "SubmissionInProgressError",
    "SuccessfulItem",
    "VALIDATION_RULES",
    "ValidationFailed",
]
