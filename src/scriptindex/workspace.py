"""Working directory resolution and validation.

The CLI optionally changes into a directory before indexing; all other
paths (scripts root, output file, config file) are relative to it.
"""

import os
from pathlib import Path

from scriptindex import exit_codes
from scriptindex.errors import DirectoryChangeError
from scriptindex.validation import ValidationResult


def resolve_work_dir(directory: Path | None) -> Path:
    """Return the directory to run in; None means the current directory."""
    if directory is None:
        return Path.cwd()
    return directory.expanduser()


def validate_work_dir(path: Path) -> ValidationResult:
    """Check that path can be used as the working directory.

    Returns:
        ValidationResult with is_valid=True if valid, otherwise is_valid=False
        with a list of specific error messages and DIRECTORY_ERROR as its
        error_code.
    """
    errors: list[str] = []

    if not path.exists():
        errors.append(f"Path does not exist: {path}")
    elif not path.is_dir():
        errors.append(f"Path is not a directory: {path}")

    if errors:
        return ValidationResult(is_valid=False, errors=errors, error_code=exit_codes.DIRECTORY_ERROR)
    return ValidationResult(is_valid=True)


def change_work_dir(path: Path) -> None:
    """Validate path and make it the process working directory.

    Raises:
        DirectoryChangeError: If path is missing, not a directory, or cannot
            be entered.
    """
    validation = validate_work_dir(path)
    if not validation.is_valid:
        raise DirectoryChangeError(path, validation.errors, validation.error_code or exit_codes.DIRECTORY_ERROR)

    try:
        os.chdir(path)
    except OSError as e:
        raise DirectoryChangeError(path, [e.strerror or str(e)]) from e
