"""Batch store: the single owner of pass records and batch state.

All mutation of PassRecord and BatchState goes through the operations here.
Edits are applied in the order they are issued and are never rejected while
a submission is in flight; the submission merge only annotates status and
errors, so in-flight edits stay visible afterwards.
"""

from typing import Dict, Iterable, List, Optional, Set, Tuple

from infrastructure.logging import get_module_logger
from infrastructure.operations import RetryableError
from modules.passes.domain.models import (
    BatchResult,
    BatchState,
    PassRecord,
    RecordStatus,
)
from modules.passes.domain.rules import RECORD_FIELDS
from modules.passes.validation import (
    FieldValidation,
    validate_barcode,
    validate_event_id,
    validate_field,
    validate_record,
)

logger = get_module_logger()

EMPTY_BATCH_MESSAGE = "Please add at least one pass to create."


class BatchStore:
    """Ordered collection of pass records for one event.

    Args:
        event_id: Initial shared event id
        existing_barcodes: Barcodes already committed for the event
    """

    def __init__(self, event_id: str = "", existing_barcodes: Iterable[str] = ()):
        self._state = BatchState(event_id=event_id, existing_barcodes=set(existing_barcodes))
        self._log = logger.bind(component="batch_store")

    @property
    def state(self) -> BatchState:
        return self._state

    @property
    def event_id(self) -> str:
        return self._state.event_id

    @property
    def records(self) -> Tuple[PassRecord, ...]:
        return tuple(self._state.records)

    @property
    def is_valid(self) -> bool:
        return self._state.is_valid

    @property
    def is_submitting(self) -> bool:
        return self._state.is_submitting

    @property
    def submission_error(self) -> Optional[RetryableError]:
        return self._state.submission_error

    @property
    def existing_barcodes(self) -> Set[str]:
        return set(self._state.existing_barcodes)

    def get_record(self, record_id: str) -> Optional[PassRecord]:
        for record in self._state.records:
            if record.id == record_id:
                return record
        return None

    def pending_records(self) -> List[PassRecord]:
        """Records not yet created on the server, in batch order."""
        return [r for r in self._state.records if not r.is_created]

    def failed_records(self) -> List[PassRecord]:
        return [r for r in self._state.records if r.status == RecordStatus.FAILED]

    # Editing

    def add_record(self) -> PassRecord:
        """Append an empty record carrying the current event id."""
        record = PassRecord(event_id=self._state.event_id)
        self._state.records.append(record)
        self._log.debug("record_added", record_id=record.id, count=len(self._state.records))
        self._refresh_validity()
        return record

    def remove_record(self, record_id: str) -> bool:
        """Remove a record by id. Unknown ids are ignored.

        Returns:
            True if a record was removed
        """
        before = len(self._state.records)
        self._state.records = [r for r in self._state.records if r.id != record_id]
        removed = len(self._state.records) != before
        if removed:
            self._log.debug("record_removed", record_id=record_id)
            self._refresh_validity()
        return removed

    def set_field(self, index: int, field_name: str, value: str) -> None:
        """Update one field value without validating it.

        Raises:
            KeyError: If field_name is not a record field
        """
        if field_name not in RECORD_FIELDS:
            raise KeyError(f"Unknown field: {field_name}")

        record = self._record_at(index)
        if record is None:
            return
        if record.is_created:
            self._log.warning(
                "edit_ignored_record_created", record_id=record.id, field=field_name
            )
            return

        record.fields[field_name].value = value
        record.is_dirty = True
        self._refresh_validity()

    def blur_field(self, index: int, field_name: str) -> Optional[FieldValidation]:
        """Mark a field touched and validate it.

        The barcode is also checked against committed barcodes and the
        barcodes of the other records in the batch.

        Returns:
            The validation result, or None for an out-of-range index
        """
        if field_name not in RECORD_FIELDS:
            raise KeyError(f"Unknown field: {field_name}")

        record = self._record_at(index)
        if record is None:
            return None

        state = record.fields[field_name]
        state.touched = True
        if field_name == "barcode":
            result = validate_barcode(state.value, self._barcodes_in_use(record.id))
        else:
            result = validate_field(field_name, state.value)
        state.error = result.error
        self._refresh_validity()
        return result

    def set_event_id(self, event_id: str) -> None:
        """Set the shared event id on the batch and on every uncreated record.

        Committed barcodes belong to the previous event, so a change of event
        clears them; call load_existing_barcodes on the coordinator to fetch
        the new event's set. Created records keep the event they were
        created under.
        """
        if event_id != self._state.event_id:
            self._state.existing_barcodes = set()
        self._state.event_id = event_id
        for record in self._state.records:
            if not record.is_created:
                record.event_id = event_id
        self._log.debug("event_id_set", event_id=event_id)
        self._refresh_validity()

    def set_existing_barcodes(self, barcodes: Iterable[str]) -> None:
        self._state.existing_barcodes = set(barcodes)
        self._refresh_validity()

    def reset(self) -> None:
        """Drop every record and submission outcome, keeping the event id."""
        self._state = BatchState(
            event_id=self._state.event_id,
            existing_barcodes=self._state.existing_barcodes,
        )
        self._log.info("batch_reset", event_id=self._state.event_id)

    def dismiss_error(self) -> None:
        self._state.submission_error = None

    # Validation

    def validate(
        self, records: Iterable[PassRecord]
    ) -> Tuple[Dict[str, Dict[str, str]], Dict[str, str]]:
        """Validate records for submission and mark all their fields touched.

        Returns:
            (errors by record id then field, batch-level errors)
        """
        records = list(records)
        batch_errors: Dict[str, str] = {}

        event_result = validate_event_id(self._state.event_id)
        if not event_result.valid:
            batch_errors["eventId"] = event_result.error
        if not records:
            batch_errors["records"] = EMPTY_BATCH_MESSAGE

        errors: Dict[str, Dict[str, str]] = {}
        for record in records:
            result = validate_record(record.values(), self._barcodes_in_use(record.id))
            for name, state in record.fields.items():
                state.touched = True
                state.error = result.errors.get(name)
            if not result.valid:
                errors[record.id] = result.errors

        self._refresh_validity()
        return errors, batch_errors

    def _barcodes_in_use(self, record_id: str) -> Set[str]:
        """Committed barcodes plus those of the other uncreated records."""
        in_use = set(self._state.existing_barcodes)
        for record in self._state.records:
            if record.id != record_id and not record.is_created and record.barcode:
                in_use.add(record.barcode)
        return in_use

    def _refresh_validity(self) -> None:
        pending = self.pending_records()
        valid = bool(pending) and validate_event_id(self._state.event_id).valid
        if valid:
            valid = all(
                validate_record(r.values(), self._barcodes_in_use(r.id)).valid for r in pending
            )
        self._state.is_valid = valid

    def _record_at(self, index: int) -> Optional[PassRecord]:
        if 0 <= index < len(self._state.records):
            return self._state.records[index]
        self._log.warning("record_index_out_of_range", index=index)
        return None

    # Submission lifecycle, driven by the coordinator

    def begin_submission(self) -> None:
        self._state.is_submitting = True
        self._state.submission_error = None
        self._state.submit_count += 1

    def end_submission(self) -> None:
        self._state.is_submitting = False

    def fail_submission(self, error: RetryableError) -> None:
        """Keep a terminal failure as a dismissible notification."""
        self._state.submission_error = error

    def apply_result(self, result: BatchResult) -> None:
        """Merge a batch result into the records it refers to.

        Created records are locked and their barcodes become committed.
        Failed records keep their values and show the server error on the
        reported field, or on the barcode when no record field is named.
        Records removed while the request was in flight are skipped.
        """
        for item in result.successful:
            self._state.existing_barcodes.add(item.barcode)
            record = self.get_record(item.record_id)
            if record is None:
                continue
            record.status = RecordStatus.CREATED
            record.server_id = item.server_id
            record.submit_error = None
            for state in record.fields.values():
                state.error = None

        for item in result.failed:
            record = self.get_record(item.record_id)
            if record is None:
                continue
            field_name = item.field if item.field in RECORD_FIELDS else "barcode"
            record.status = RecordStatus.FAILED
            record.submit_error = item.message
            record.fields[field_name].touched = True
            record.fields[field_name].error = item.message

        self._log.info(
            "batch_merge_complete",
            successful=result.total_success,
            failed=result.total_failed,
        )
        self._refresh_validity()
