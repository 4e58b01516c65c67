"""Terminal output."""

from pigeon.ui.console import console, get_console

__all__ = ["console", "get_console"]
