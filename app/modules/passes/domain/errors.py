"""Errors for the passes module."""

from typing import Dict, Optional


class ValidationFailed(Exception):
    """Raised when a batch fails local validation; no request was sent.

    Attributes:
        errors: Field errors keyed by record id, then field name
        batch_errors: Errors not tied to a record (event id, empty batch)
    """

    def __init__(
        self,
        errors: Dict[str, Dict[str, str]],
        batch_errors: Optional[Dict[str, str]] = None,
        message: str = (
            "The provided information contains errors. Please review and correct "
            "the highlighted fields."
        ),
    ):
        super().__init__(message)
        self.message = message
        self.errors = errors
        self.batch_errors = batch_errors or {}


class SubmissionInProgressError(Exception):
    """Raised when a submission starts while another is in flight."""
