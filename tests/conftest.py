"""Shared fixtures for the Target Sweeper test suite."""

from __future__ import annotations

import logging

import pytest

from tests.helpers import RecordingObserver


@pytest.fixture(name="recorder")
def fixture_recorder() -> RecordingObserver:
    """Return a fresh recording observer."""
    return RecordingObserver()


@pytest.fixture(name="restore_logging")
def fixture_restore_logging():
    """Put the root logger's handlers and level back after a test reconfigures it."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
