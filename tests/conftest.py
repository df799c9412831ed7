"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os

import pytest
from bblgc.storage.reporter import RecordingReporter

from tests.fakes import STATE_DIR, FakeFileIO


@pytest.fixture
def file_io() -> FakeFileIO:
    """Empty in-memory filesystem."""
    return FakeFileIO()


@pytest.fixture
def reporter() -> RecordingReporter:
    """Reporter that keeps messages for assertions."""
    return RecordingReporter()


@pytest.fixture
def state_dir(file_io: FakeFileIO) -> str:
    """In-memory state directory containing a bbl-state.json."""
    file_io.add_file(os.path.join(STATE_DIR, "bbl-state.json"))
    return STATE_DIR
