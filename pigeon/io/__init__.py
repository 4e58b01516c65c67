"""Tag-routed logging for store events."""

from pigeon.io.filters import OwnPathFilter, TagFilter
from pigeon.io.formatters import BytesFormatter, RichFormatter
from pigeon.io.handlers import DisplayHandler, Journal, StoreHandler
from pigeon.io.setup import setup_logging
from pigeon.io.tags import JOURNAL_TAGS, TAGS

__all__ = [
    "TAGS",
    "JOURNAL_TAGS",
    "TagFilter",
    "OwnPathFilter",
    "RichFormatter",
    "BytesFormatter",
    "Journal",
    "DisplayHandler",
    "StoreHandler",
    "setup_logging",
]
