"""Logging handlers for store events."""

import logging
from typing import Protocol

from rich.console import Console

from pigeon.io.filters import OwnPathFilter
from pigeon.io.formatters import BytesFormatter, RichFormatter


class Journal(Protocol):
    """Anything with a path that bytes can be appended to."""

    path: str

    def append(self, _data: bytes) -> None: ...


class StoreHandler(logging.Handler):
    """Appends bytes to a journal store. Does not save it."""

    def __init__(self, store: Journal) -> None:
        super().__init__()
        self.store = store
        self.setFormatter(BytesFormatter())
        # Saving the journal itself must not grow the journal
        self.addFilter(OwnPathFilter(store))

    def emit(self, record: logging.LogRecord) -> None:
        self.store.append(self.format(record))


class DisplayHandler(logging.Handler):
    """Routes store events to the terminal."""

    def __init__(self, console: Console) -> None:
        super().__init__()
        self.console = console
        self.setFormatter(RichFormatter())

    def emit(self, record: logging.LogRecord) -> None:
        self.console.print(self.format(record))
