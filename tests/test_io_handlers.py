"""Tests for logging handlers."""

import logging

from pigeon.io.handlers import DisplayHandler, StoreHandler
from pigeon.store import Store


def _record(msg: str, tag: str, path: str | None = None) -> logging.LogRecord:
    record = logging.LogRecord(name="test", level=logging.INFO, pathname="", lineno=0, msg=msg, args=(), exc_info=None)
    record.tag = tag
    if path is not None:
        record.path = path
    return record


class MockJournal:
    """Mock journal for testing."""

    def __init__(self, path: str = "journal.log") -> None:
        self.path = path
        self.data = bytearray()

    def append(self, data: bytes) -> None:
        self.data.extend(data)


def test_store_handler_appends_bytes():
    journal = MockJournal()
    handler = StoreHandler(journal)
    handler.emit(_record("a.bin (5 bytes)", "store-save", path="a.bin"))
    assert journal.data == b"<store-save>a.bin (5 bytes)</store-save>\n"


def test_store_handler_skips_own_path():
    journal = MockJournal(path="journal.log")
    handler = StoreHandler(journal)
    assert handler.handle(_record("journal.log (9 bytes)", "store-save", path="journal.log")) is False
    assert journal.data == b""


def test_store_handler_appends_to_real_store():
    journal = Store.from_path("journal.log")
    handler = StoreHandler(journal)
    handler.emit(_record("a.bin (0 bytes)", "store-open", path="a.bin"))
    handler.emit(_record("a.bin (2 bytes)", "store-save", path="a.bin"))
    assert journal.buffer.splitlines() == [
        b"<store-open>a.bin (0 bytes)</store-open>",
        b"<store-save>a.bin (2 bytes)</store-save>",
    ]


def test_display_handler_prints_formatted(test_console, output):
    handler = DisplayHandler(test_console)
    handler.emit(_record("a.bin (5 bytes)", "store-save"))
    assert output.getvalue() == "save a.bin (5 bytes)\n"


def test_store_handler_follows_rebound_journal():
    journal = MockJournal(path="old.log")
    handler = StoreHandler(journal)
    journal.path = "new.log"
    handler.handle(_record("old.log (1 bytes)", "store-save", path="old.log"))
    handler.handle(_record("new.log (1 bytes)", "store-save", path="new.log"))
    assert journal.data == b"<store-save>old.log (1 bytes)</store-save>\n"
