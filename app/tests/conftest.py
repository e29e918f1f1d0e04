import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `infrastructure.operations`) works during pytest collection.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest
import structlog

from tests.factories.passes import make_pass_values


@pytest.fixture(autouse=True)
def _clear_structlog_context():
    """Keep bound logging context from leaking between tests."""
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def valid_pass_values():
    """Field values of a record that passes every rule."""
    return make_pass_values()


@pytest.fixture
def recorded_sleep():
    """Awaitable sleep that records requested waits instead of sleeping."""
    calls = []

    async def _sleep(seconds):
        calls.append(seconds)

    _sleep.calls = calls
    return _sleep
