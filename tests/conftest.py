"""Shared fixtures for the engine tests."""

import pytest

from connect4_engine.debug import debug


@pytest.fixture(autouse=True)
def restore_debug_settings():
    """Put the shared debug manager back the way each test found it."""
    level = debug.level
    yield
    debug.configure(level=level, enabled=True, components=[], log_file="")
