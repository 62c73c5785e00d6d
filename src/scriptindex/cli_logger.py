"""CLI diagnostics for consistent messaging.

A CliLogger is constructed once per run and handed to the components that
report problems. Output goes to stderr, one line per message.
"""

from typing import Any

from rich.console import Console
from rich.markup import escape


def _format_fields(fields: dict[str, Any]) -> str:
    """Render structured fields as ``key=value`` pairs."""
    return " ".join(f"{key}={escape(str(value))}" for key, value in fields.items())


class CliLogger:
    """Structured, single-line diagnostics on a Rich console."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize with the console to write to (stderr by default)."""
        self.console = console or Console(stderr=True, highlight=False)

    def error(self, message: str, **fields: Any) -> None:
        """Print an error message with red X, followed by its fields."""
        line = f"[red]✗[/red] {message}"
        if fields:
            line += f" {_format_fields(fields)}"
        self.console.print(line, soft_wrap=True)
