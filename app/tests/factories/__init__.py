"""Test data factories for deterministic test data generation."""

from tests.factories.passes import (
    make_batch_create_data,
    make_batch_response,
    make_pass_values,
    make_store,
)

__all__ = [
    "make_batch_create_data",
    "make_batch_response",
    "make_pass_values",
    "make_store",
]
