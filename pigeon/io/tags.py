"""Tag constants for store event routing."""

from typing import Literal

Tag = Literal[
    "store-open",
    "store-save",
    "store-error",
]

TAGS: set[str] = {
    "store-open",
    "store-save",
    "store-error",
}

# Events worth keeping in a journal; errors only go to the display
JOURNAL_TAGS: set[str] = {"store-open", "store-save"}
