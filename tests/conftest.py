import pytest

from everemitter import EventEmitter


@pytest.fixture
def emitter() -> EventEmitter:
    """Provides a fresh EventEmitter (errors propagate) for each test."""
    return EventEmitter()


@pytest.fixture
def calls() -> list:
    """Shared call log for listeners."""
    return []
