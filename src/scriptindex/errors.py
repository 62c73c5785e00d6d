"""Error types and formatting utilities for scriptindex.

Per-file errors (NoMetadataError, ReadError) are absorbed by the tree
walker. Everything else aborts the run and is turned into an exit code at
the CLI boundary.
"""

from pathlib import Path

import yaml
from pydantic import ValidationError

from scriptindex import exit_codes
from scriptindex.cli_logger import CliLogger


class ScriptIndexError(Exception):
    """Base class for all scriptindex errors."""


class NoMetadataError(ScriptIndexError):
    """Raised when a file has no metadata block, or a block with no items."""

    def __init__(self) -> None:
        """Initialize with the fixed failure reason."""
        super().__init__("no metadata found")


class ReadError(ScriptIndexError):
    """Raised when a script file cannot be read."""

    def __init__(self, path: Path | str, reason: str) -> None:
        """Initialize with the unreadable path and the underlying reason."""
        self.path = str(path)
        self.reason = reason
        super().__init__(f"read file error: {reason}")


class WalkError(ScriptIndexError):
    """Raised when the directory traversal itself cannot proceed."""


class OutputError(ScriptIndexError):
    """Raised when the index file cannot be opened, serialized, or written."""


class DirectoryChangeError(ScriptIndexError):
    """Raised when the requested working directory cannot be entered."""

    def __init__(
        self,
        path: Path,
        errors: list[str] | None = None,
        error_code: int = exit_codes.DIRECTORY_ERROR,
    ) -> None:
        """Initialize with the directory, the issues found, and the exit code to use."""
        self.path = path
        self.errors = errors or []
        self.error_code = error_code
        message = f"Cannot change working directory to {path}"
        if self.errors:
            message += ": " + "; ".join(self.errors)
        super().__init__(message)


class ConfigError(ScriptIndexError):
    """Raised when scriptindex.yaml is unreadable or invalid."""


def format_validation_errors(error: ValidationError) -> str:
    """Format Pydantic ValidationError into clean, user-friendly message.

    Removes Pydantic-specific URLs and technical jargon, producing a message
    suitable for CLI output.

    Args:
        error: The Pydantic ValidationError to format.

    Returns:
        A clean, human-readable error message.
    """
    messages = []

    for err in error.errors():
        loc = ".".join(str(part) for part in err["loc"])
        error_type = err["type"]

        if error_type == "missing":
            messages.append(f"'{loc}': field is required")
        elif error_type == "extra_forbidden":
            messages.append(f"'{loc}': unknown field")
        elif error_type == "string_type":
            messages.append(f"'{loc}': expected string")
        elif error_type == "model_type":
            messages.append("expected a mapping of settings")
        else:
            messages.append(f"'{loc}': {err['msg'].lower()}")

    return "; ".join(messages)


def handle_cli_error(error: Exception, logger: CliLogger) -> int:
    """Handle an unhandled exception at the CLI boundary.

    Formats the error into a clean user-friendly message and returns
    an appropriate exit code, so no raw traceback reaches the user.

    Args:
        error: The exception to handle.
        logger: Where to report the failure.

    Returns:
        An exit code from exit_codes.
    """
    if isinstance(error, ValidationError):
        logger.error("invalid configuration", error=format_validation_errors(error))
        return exit_codes.CONFIG_INVALID

    if isinstance(error, OSError):
        if error.filename:
            logger.error(error.strerror or "I/O error", path=error.filename)
        else:
            logger.error("I/O error", error=str(error))
        return exit_codes.GENERAL_ERROR

    if isinstance(error, yaml.YAMLError):
        logger.error("invalid YAML", error=str(error))
        return exit_codes.CONFIG_INVALID

    logger.error("unexpected error", error=str(error))
    return exit_codes.GENERAL_ERROR
