"""Domain models for batch pass creation.

Lightweight dataclasses owned by the BatchStore. PassRecord holds the
per-field UI state; PassPayload (infrastructure.clients.parkhub) is the wire
form built from it at submission time.

Key distinctions:
  - FieldState / PassRecord / BatchState: mutable, owned by the store
  - SuccessfulItem / FailedItem / BatchResult: frozen, one per submission
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Set, Tuple
from uuid import uuid4

from infrastructure.clients.parkhub import PassPayload
from infrastructure.operations import ErrorCode, RetryableError
from modules.passes.domain.rules import DEFAULT_SPOT_TYPE, RECORD_FIELDS


class RecordStatus(str, Enum):
    PENDING = "pending"
    CREATED = "created"
    FAILED = "failed"


@dataclass
class FieldState:
    """Value and validation state of one field.

    `touched` turns true on blur or submit; `error` is None exactly when the
    value satisfied its rule at the last validation.
    """

    value: str = ""
    touched: bool = False
    error: Optional[str] = None


def _default_fields() -> Dict[str, FieldState]:
    fields = {name: FieldState() for name in RECORD_FIELDS}
    fields["spotType"].value = DEFAULT_SPOT_TYPE.value
    return fields


@dataclass
class PassRecord:
    """One pass entry in a batch.

    Attributes:
        event_id: Shared event id, kept in sync by the store
        id: Client-generated token, stable for the record's lifetime
        fields: Per-field state keyed by API field name
        status: pending until submitted, then created or failed
        server_id: Pass id assigned by ParkHub once created
        submit_error: Server-reported error of the last submission
        is_dirty: Whether any field was edited since the record was added
    """

    event_id: str = ""
    id: str = field(default_factory=lambda: str(uuid4()))
    fields: Dict[str, FieldState] = field(default_factory=_default_fields)
    status: RecordStatus = RecordStatus.PENDING
    server_id: Optional[str] = None
    submit_error: Optional[str] = None
    is_dirty: bool = False

    @property
    def data(self) -> Dict[str, str]:
        values = {"eventId": self.event_id}
        values.update(self.values())
        return values

    def values(self) -> Dict[str, str]:
        """Current field values, without the event id."""
        return {name: state.value for name, state in self.fields.items()}

    @property
    def barcode(self) -> str:
        return self.fields["barcode"].value

    @property
    def is_created(self) -> bool:
        return self.status == RecordStatus.CREATED

    @property
    def errors(self) -> Dict[str, str]:
        return {name: s.error for name, s in self.fields.items() if s.error}

    def to_payload(self) -> PassPayload:
        return PassPayload(
            event_id=self.event_id,
            account_id=self.fields["accountId"].value,
            barcode=self.fields["barcode"].value,
            customer_name=self.fields["customerName"].value,
            spot_type=self.fields["spotType"].value,
            lot_id=self.fields["lotId"].value,
        )


@dataclass(frozen=True)
class SuccessfulItem:
    record_id: str
    barcode: str
    server_id: str


@dataclass(frozen=True)
class FailedItem:
    record_id: str
    barcode: str
    message: str
    code: ErrorCode = ErrorCode.UNKNOWN_ERROR
    field: Optional[str] = None


@dataclass(frozen=True)
class BatchResult:
    """Per-record outcome of one or more submissions.

    Never mutated; resubmitting failed records yields a new result which is
    combined with the previous one through merge().
    """

    successful: Tuple[SuccessfulItem, ...] = ()
    failed: Tuple[FailedItem, ...] = ()

    @property
    def total_success(self) -> int:
        return len(self.successful)

    @property
    def total_failed(self) -> int:
        return len(self.failed)

    @property
    def is_complete_success(self) -> bool:
        return not self.failed

    @property
    def failed_record_ids(self) -> Tuple[str, ...]:
        return tuple(item.record_id for item in self.failed)

    def merge(self, retry: "BatchResult") -> "BatchResult":
        """Combine this result with the result of resubmitting a subset.

        Items of `retry` replace the entries for the same records here.
        """
        retried = {item.record_id for item in retry.successful}
        retried.update(item.record_id for item in retry.failed)
        return BatchResult(
            successful=tuple(i for i in self.successful if i.record_id not in retried)
            + retry.successful,
            failed=tuple(i for i in self.failed if i.record_id not in retried)
            + retry.failed,
        )


@dataclass
class BatchState:
    """Aggregate state of the batch being edited.

    `is_valid` is true iff the event id is valid, at least one record awaits
    submission, every such record is valid and no two share a barcode.
    """

    event_id: str = ""
    records: List[PassRecord] = field(default_factory=list)
    is_valid: bool = False
    is_submitting: bool = False
    submission_error: Optional[RetryableError] = None
    submit_count: int = 0
    existing_barcodes: Set[str] = field(default_factory=set)
