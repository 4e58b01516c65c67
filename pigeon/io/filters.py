"""Logging filters for store event routing."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pigeon.io.handlers import Journal


class TagFilter(logging.Filter):
    """Pass only records whose `tag` attribute is one of `tags`.

    Records logged without a tag never pass.
    """

    def __init__(self, tags: Iterable[str]) -> None:
        super().__init__()
        self.tags = frozenset(tags)

    def filter(self, record: logging.LogRecord) -> bool:
        return getattr(record, "tag", None) in self.tags


class OwnPathFilter(logging.Filter):
    """Drop events about the journal's own backing file.

    The journal's path is read at filter time, so re-binding the journal
    to another path is picked up.
    """

    def __init__(self, journal: Journal) -> None:
        super().__init__()
        self.journal = journal

    def filter(self, record: logging.LogRecord) -> bool:
        return getattr(record, "path", None) != self.journal.path
