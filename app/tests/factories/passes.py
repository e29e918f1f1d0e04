"""Factory functions for pass creation test data."""

from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from infrastructure.clients.parkhub import BatchCreateData
from modules.passes import BatchStore


def make_pass_values(**overrides: str) -> Dict[str, str]:
    """Create record field values that pass validation.

    Args:
        **overrides: Field values to replace, keyed by API field name

    Returns:
        Dictionary of the five record fields
    """
    values = {
        "accountId": "ACC123",
        "barcode": "BC100001",
        "customerName": "Jane Doe",
        "spotType": "Regular",
        "lotId": "LOT-A1",
    }
    values.update(overrides)
    return values


def make_store(
    event_id: str = "EV12345",
    records: Iterable[Dict[str, str]] = (),
    existing_barcodes: Iterable[str] = (),
) -> BatchStore:
    """Create a BatchStore filled with records.

    Args:
        event_id: Shared event id
        records: Field values per record, applied with set_field
        existing_barcodes: Barcodes already committed for the event

    Returns:
        BatchStore with one record per entry of `records`
    """
    store = BatchStore(event_id=event_id, existing_barcodes=existing_barcodes)
    for values in records:
        store.add_record()
        index = len(store.records) - 1
        for name, value in values.items():
            store.set_field(index, name, value)
    return store


def make_batch_response(
    successful: Sequence[str] = (),
    failed: Sequence[Tuple[str, str]] = (),
    failed_code: str = "duplicate_barcode",
    failed_field: Optional[str] = "barcode",
) -> Dict[str, Any]:
    """Create a batch-create API body.

    Args:
        successful: Barcodes created by the server
        failed: (barcode, message) pairs rejected by the server
        failed_code: Error code reported for every failed item
        failed_field: Field reported for every failed item

    Returns:
        Dictionary shaped like the ParkHub response
    """
    success_items: List[Dict[str, Any]] = [
        {"barcode": barcode, "passId": f"pass-{barcode}", "customerName": "Jane Doe"}
        for barcode in successful
    ]
    failed_items: List[Dict[str, Any]] = [
        {
            "barcode": barcode,
            "customerName": "Jane Doe",
            "error": {"code": failed_code, "message": message, "field": failed_field},
        }
        for barcode, message in failed
    ]
    return {
        "success": True,
        "data": {
            "successful": success_items,
            "failed": failed_items,
            "totalSuccess": len(success_items),
            "totalFailed": len(failed_items),
        },
    }


def make_batch_create_data(**kwargs: Any) -> BatchCreateData:
    """Create a parsed BatchCreateData; accepts make_batch_response arguments."""
    return BatchCreateData.model_validate(make_batch_response(**kwargs)["data"])
