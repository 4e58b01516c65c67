"""
Pigeon - a persistent byte-buffer store.

A Store is bound to a file path. `open` loads the file into memory (creating it
and its directories if absent), `save` writes the in-memory buffer back.
"""

import logging

from pigeon.store import EmptyPathError, Store, ensure_dir, normalize_path

# Silent until the application configures logging (see pigeon.io.setup_logging)
logging.getLogger("pigeon").addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = ["Store", "EmptyPathError", "normalize_path", "ensure_dir"]
