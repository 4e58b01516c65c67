"""Logger setup and wiring."""

from __future__ import annotations

import logging

from rich.console import Console

from pigeon.io.filters import TagFilter
from pigeon.io.handlers import DisplayHandler, Journal, StoreHandler
from pigeon.io.tags import JOURNAL_TAGS, TAGS
from pigeon.ui.console import get_console


def setup_logging(console: Console | None = None, journal: Journal | None = None) -> logging.Logger:
    """Configure the pigeon logger with a display handler and an optional journal."""
    log = logging.getLogger("pigeon")
    log.setLevel(logging.INFO)

    # Calling twice replaces the handlers rather than doubling output
    for handler in list(log.handlers):
        if isinstance(handler, DisplayHandler | StoreHandler):
            log.removeHandler(handler)

    display = DisplayHandler(console or get_console())
    display.addFilter(TagFilter(TAGS))
    log.addHandler(display)

    if journal is not None:
        store_handler = StoreHandler(journal)
        store_handler.addFilter(TagFilter(JOURNAL_TAGS))
        log.addHandler(store_handler)

    return log
