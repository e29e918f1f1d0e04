"""Batch submission coordinator.

Validates the batch, sends it to the pass transport through the retry
executor and merges the per-item response back into the BatchStore.

Usage:
    async with ParkHubClient() as client:
        coordinator = BatchSubmissionCoordinator(BatchStore("EV12345"), client)
        await coordinator.load_existing_barcodes()
        record = coordinator.store.add_record()
        ...
        result = await coordinator.submit()
        if result.failed:
            result = await coordinator.retry_failed()
"""

from typing import Iterable, List, Optional, Protocol, Sequence, Set, Tuple, Union

from infrastructure.clients.parkhub import BatchCreateData, PassPayload
from infrastructure.logging import bind_submission_context, get_module_logger
from infrastructure.operations import ErrorCategory, ErrorCode, RetryableError, get_error_message
from infrastructure.resilience.retry import OnRetry, RetryConfig, Sleep, execute_with_retry
from modules.passes.domain.errors import SubmissionInProgressError, ValidationFailed
from modules.passes.domain.models import (
    BatchResult,
    FailedItem,
    PassRecord,
    RecordStatus,
    SuccessfulItem,
)
from modules.passes.store import BatchStore

logger = get_module_logger()

MISSING_RESULT_MESSAGE = "No result was returned for this pass. Please try again."


class PassTransport(Protocol):
    """Remote operations the coordinator depends on."""

    async def create_passes(self, payloads: Sequence[PassPayload]) -> BatchCreateData: ...

    async def existing_barcodes(self, event_id: str) -> Set[str]: ...


class BatchSubmissionCoordinator:
    """Drives submission of a BatchStore's records.

    Args:
        store: The batch being edited
        transport: Pass transport, usually a ParkHubClient
        retry_config: Retry limits (defaults to application settings)
        on_retry: Observer called before each backoff wait
        sleep: Awaitable sleep used between attempts
    """

    def __init__(
        self,
        store: BatchStore,
        transport: PassTransport,
        retry_config: Optional[RetryConfig] = None,
        on_retry: Optional[OnRetry] = None,
        sleep: Optional[Sleep] = None,
    ) -> None:
        if retry_config is None:
            from infrastructure.configuration import settings

            retry_config = RetryConfig.from_settings(settings.retry)

        self.store = store
        self._transport = transport
        self._retry_config = retry_config
        self._on_retry = on_retry
        self._sleep = sleep
        self._last_result: Optional[BatchResult] = None
        self._log = logger.bind(component="batch_coordinator")

    @property
    def last_result(self) -> Optional[BatchResult]:
        return self._last_result

    async def submit(self) -> BatchResult:
        """Submit every record not yet created.

        Returns:
            The merged BatchResult; partial failure is a normal result

        Raises:
            SubmissionInProgressError: If a submission is already in flight
            ValidationFailed: If local validation fails (nothing is sent)
            RetryableError: The terminal failure after retries
        """
        result = await self._submit(self.store.pending_records())
        self._last_result = result
        return result

    async def retry_failed(
        self, failed: Optional[Iterable[Union[str, FailedItem]]] = None
    ) -> BatchResult:
        """Resubmit only previously failed records.

        Args:
            failed: Record ids or FailedItems to resubmit (defaults to every
                record whose last submission failed). Ids of records that
                are not in the failed state are skipped.

        Returns:
            The previous result merged with the outcome of this resubmission
        """
        if failed is None:
            records = self.store.failed_records()
        else:
            records = []
            for item in failed:
                record_id = item.record_id if isinstance(item, FailedItem) else item
                record = self.store.get_record(record_id)
                if record is not None and record.status == RecordStatus.FAILED:
                    records.append(record)

        result = await self._submit(records)
        if self._last_result is not None:
            result = self._last_result.merge(result)
        self._last_result = result
        return result

    async def load_existing_barcodes(self) -> Set[str]:
        """Fetch the barcodes already committed for the current event."""
        event_id = self.store.event_id
        barcodes = await execute_with_retry(
            lambda: self._transport.existing_barcodes(event_id),
            config=self._retry_config,
            on_retry=self._on_retry,
            sleep=self._sleep,
        )
        self.store.set_existing_barcodes(barcodes)
        self._log.info("existing_barcodes_loaded", event_id=event_id, count=len(barcodes))
        return set(barcodes)

    def reset(self) -> None:
        self.store.reset()
        self._last_result = None

    def summary(self) -> dict:
        """Totals of the latest merged result."""
        result = self._last_result or BatchResult()
        return {
            "total_success": result.total_success,
            "total_failed": result.total_failed,
            "successful": [item.barcode for item in result.successful],
            "failed": [
                {"barcode": item.barcode, "message": item.message} for item in result.failed
            ],
        }

    async def _submit(self, records: List[PassRecord]) -> BatchResult:
        if self.store.is_submitting:
            raise SubmissionInProgressError("A submission is already in progress")

        errors, batch_errors = self.store.validate(records)
        if errors or batch_errors:
            self._log.info(
                "batch_validation_failed",
                invalid_records=len(errors),
                batch_errors=list(batch_errors),
            )
            raise ValidationFailed(errors, batch_errors)

        # Payloads are fixed here; edits made while in flight are not sent
        snapshot = [(record.id, record.to_payload()) for record in records]
        payloads = [payload for _, payload in snapshot]

        with bind_submission_context(event_id=self.store.event_id, record_count=len(snapshot)):
            self._log.info("batch_submit_started")
            self.store.begin_submission()
            try:
                data = await execute_with_retry(
                    lambda: self._transport.create_passes(payloads),
                    config=self._retry_config,
                    on_retry=self._on_retry,
                    sleep=self._sleep,
                )
                result = self._build_result(snapshot, data)
                self.store.apply_result(result)
            except RetryableError as error:
                self.store.fail_submission(error)
                self._log.warning(
                    "batch_submit_failed",
                    category=error.category.value,
                    code=error.code.value,
                    attempts=error.attempt,
                )
                raise
            finally:
                self.store.end_submission()

            self._log.info(
                "batch_submit_completed",
                successful=result.total_success,
                failed=result.total_failed,
            )
        return result

    def _build_result(
        self, snapshot: List[Tuple[str, PassPayload]], data: BatchCreateData
    ) -> BatchResult:
        """Match response items to records by submitted barcode."""
        by_barcode = {payload.barcode: record_id for record_id, payload in snapshot}
        successful = []
        failed = []

        for item in data.successful:
            record_id = by_barcode.pop(item.barcode, None)
            if record_id is None:
                self._log.warning("response_item_unmatched", barcode=item.barcode)
                continue
            successful.append(
                SuccessfulItem(record_id=record_id, barcode=item.barcode, server_id=item.pass_id)
            )

        for item in data.failed:
            record_id = by_barcode.pop(item.barcode, None)
            if record_id is None:
                self._log.warning("response_item_unmatched", barcode=item.barcode)
                continue
            code = ErrorCode.parse(item.error.code)
            failed.append(
                FailedItem(
                    record_id=record_id,
                    barcode=item.barcode,
                    message=item.error.message
                    or get_error_message(ErrorCategory.VALIDATION, code, item.error.field),
                    code=code,
                    field=item.error.field,
                )
            )

        for barcode, record_id in by_barcode.items():
            failed.append(
                FailedItem(record_id=record_id, barcode=barcode, message=MISSING_RESULT_MESSAGE)
            )

        return BatchResult(successful=tuple(successful), failed=tuple(failed))
