"""Rich console singleton."""

from rich.console import Console

# Global console instance; store events go to stderr so stdout stays clean
console = Console(stderr=True)


def get_console() -> Console:
    """Get the global console instance."""
    return console
