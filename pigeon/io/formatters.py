"""Logging formatters for different output targets."""

import logging
from xml.sax.saxutils import escape

from rich.markup import escape as escape_markup

_LINE_BREAKS = {"\n": "&#10;", "\r": "&#13;"}


class RichFormatter(logging.Formatter):
    """Formats store events with Rich markup based on tag."""

    def format(self, record: logging.LogRecord) -> str:
        content = escape_markup(record.getMessage())

        match getattr(record, "tag", None):
            case "store-open":
                return f"[bold cyan]open[/] {content}"
            case "store-save":
                return f"[bold green]save[/] {content}"
            case "store-error":
                return f"[bold red]error[/] {content}"
            case _:
                return content


class BytesFormatter(logging.Formatter):
    """Formats log messages as UTF-8 encoded XML bytes, one record per line.

    The message is XML-escaped, line breaks included, so a path holding
    `<`, `&` or a newline cannot split or close a record early.
    """

    def format(self, record: logging.LogRecord) -> bytes:
        content = escape(record.getMessage(), _LINE_BREAKS)
        return f"<{record.tag}>{content}</{record.tag}>\n".encode()
