"""Store: a byte buffer bound to a file on disk."""

from __future__ import annotations

import logging
import os
import re
import stat
import tempfile
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

log = logging.getLogger("pigeon.store")

_SEPARATORS = re.compile(r"[\\/]+")


class EmptyPathError(ValueError):
    """Raised when a store without a path is asked to touch the filesystem."""

    def __init__(self, message: str = "empty path for store"):
        super().__init__(message)


def normalize_path(path: str, sep: str = os.sep) -> str:
    """Collapse every run of slashes or backslashes into a single `sep`."""
    return _SEPARATORS.sub(lambda _: sep, path)


def ensure_dir(path: str) -> None:
    """Create the parent directory chain of `path` if it is missing.

    Errors from directory creation propagate to the caller.
    """
    target = Path(normalize_path(path))
    if not target.exists():
        target.parent.mkdir(parents=True, exist_ok=True)


def _file_mode(target: Path) -> int:
    """Mode for the replacement file: the target's own, or what a fresh file would get."""
    try:
        return stat.S_IMODE(target.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def _write_atomic(target: Path, data: bytes) -> None:
    """Write to a sibling temp file, then rename it over `target`."""
    mode = _file_mode(target)
    tmp: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            dir=target.parent, prefix=f".{target.name}.", suffix=".tmp", delete=False
        ) as f:
            tmp = Path(f.name)
            f.write(data)
        os.chmod(tmp, mode)
        os.replace(tmp, target)
        tmp = None
    finally:
        # Still set only if the rename never happened
        if tmp is not None:
            tmp.unlink(missing_ok=True)


class Store(BaseModel):
    """A path and the bytes loaded from it.

    `open` reads the backing file into `buffer` (creating it if absent),
    `save` writes `buffer` back. The buffer is the source of truth between
    the two; nothing refreshes it from disk behind the caller's back.
    """

    model_config = ConfigDict(validate_assignment=True)

    path: str = ""
    buffer: bytes = b""
    # Write through a temp file + rename instead of overwriting in place.
    atomic: bool = False

    @field_validator("path", mode="before")
    @classmethod
    def _normalize(cls, value: Any) -> Any:
        if isinstance(value, os.PathLike):
            value = os.fspath(value)
        if isinstance(value, str):
            return normalize_path(value)
        return value

    @classmethod
    def new(cls) -> Store:
        """An unbound store: no path, no content."""
        return cls()

    @classmethod
    def from_path(cls, path: str | os.PathLike[str], atomic: bool = False) -> Store:
        """A store bound to `path`. Does not touch the filesystem."""
        return cls(path=path, atomic=atomic)

    def open(self) -> None:
        """Load the backing file into the buffer, creating it if needed."""
        if not self.path:
            raise EmptyPathError()
        try:
            ensure_dir(self.path)
            with Path(self.path).open("a+b") as f:
                f.seek(0)
                self.buffer = f.read()
        except OSError as e:
            self._log_error("open", e)
            raise
        log.info("%s (%d bytes)", self.path, len(self.buffer), extra={"tag": "store-open", "path": self.path})

    def save(self) -> None:
        """Overwrite the backing file with the buffer."""
        if not self.path:
            raise EmptyPathError()
        target = Path(self.path)
        try:
            ensure_dir(self.path)
            if self.atomic:
                _write_atomic(target, self.buffer)
            else:
                target.write_bytes(self.buffer)
        except OSError as e:
            self._log_error("save", e)
            raise
        log.info("%s (%d bytes)", self.path, len(self.buffer), extra={"tag": "store-save", "path": self.path})

    def append(self, content: bytes | str) -> None:
        """Add to the buffer. Does not save."""
        if isinstance(content, str):
            content = content.encode()
        self.buffer += content

    def load(self, start: int = 0, end: int | None = None) -> bytes:
        """Read a slice of the buffer."""
        return self.buffer[start:end]

    def clear(self) -> None:
        self.buffer = b""

    def _log_error(self, op: str, error: OSError) -> None:
        log.warning("%s %s: %s", op, self.path, error, extra={"tag": "store-error", "path": self.path})
