"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console


@pytest.fixture
def store_dir(tmp_path: Path) -> Path:
    """A directory for backing files, created lazily by the store itself."""
    return tmp_path / "pigeon_core" / "test_data" / "storage" / "store"


@pytest.fixture
def existing_file(tmp_path: Path) -> Path:
    """A backing file that already holds some bytes."""
    path = tmp_path / "existing.bin"
    path.write_bytes(b"i exist")
    return path


@pytest.fixture
def output() -> StringIO:
    return StringIO()


@pytest.fixture
def test_console(output: StringIO) -> Console:
    """Console writing plain text to a buffer."""
    return Console(file=output, width=300, color_system=None)


@pytest.fixture(autouse=True)
def reset_pigeon_logger():
    """Undo setup_logging between tests."""
    log = logging.getLogger("pigeon")
    handlers = list(log.handlers)
    level = log.level
    yield
    for handler in list(log.handlers):
        if handler not in handlers:
            log.removeHandler(handler)
    log.setLevel(level)
