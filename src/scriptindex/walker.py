"""Script tree traversal.

Walks the scripts root depth-first in lexical order, extracting one
record per script. A file that cannot be read or carries no metadata is
reported and skipped; a directory that cannot be listed aborts the walk.
"""

import os
from collections.abc import Iterator
from pathlib import Path

from scriptindex.cli_logger import CliLogger
from scriptindex.errors import NoMetadataError, ReadError, WalkError
from scriptindex.extractor import parse_meta
from scriptindex.meta_schema import ScriptMeta
from scriptindex.normalizer import DOWNLOAD_URL_PREFIX, display_path

SCRIPT_EXTENSION = ".js"


def file_extension(name: str) -> str:
    """Return the suffix of name from its last dot, or "" if it has none."""
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


def _iter_files(directory: str) -> Iterator[str]:
    """Yield file paths below directory, depth-first, in lexical order."""
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except OSError as e:
        msg = f"cannot read directory '{directory}': {e.strerror or e}"
        raise WalkError(msg) from e

    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            yield from _iter_files(entry.path)
        elif entry.is_file() or entry.is_symlink():
            yield entry.path


def process_file(path: str, download_prefix: str = DOWNLOAD_URL_PREFIX) -> ScriptMeta:
    """Read one script and extract its record.

    Raises:
        ReadError: If the file cannot be read.
        NoMetadataError: If the file has no usable metadata block.
    """
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise ReadError(path, e.strerror or str(e)) from e

    return parse_meta(path, data.decode("utf-8", errors="replace"), download_prefix)


def walk_scripts(
    root: str | Path,
    logger: CliLogger,
    extension: str = SCRIPT_EXTENSION,
    download_prefix: str = DOWNLOAD_URL_PREFIX,
) -> list[ScriptMeta]:
    """Collect the metadata records of every script below root.

    Args:
        root: Directory to walk.
        logger: Receives one diagnostic per skipped file.
        extension: Exact (case-sensitive) suffix a script file must have.
        download_prefix: Base URL for the computed download URLs.

    Returns:
        Records in traversal order, one per successfully processed file.

    Raises:
        WalkError: If root is missing, is not a directory, or any directory
            below it cannot be listed.
    """
    root_path = os.path.normpath(root)
    if not os.path.exists(root_path):
        msg = f"root directory '{root_path}' does not exist"
        raise WalkError(msg)
    if not os.path.isdir(root_path):
        msg = f"root '{root_path}' is not a directory"
        raise WalkError(msg)

    metas: list[ScriptMeta] = []
    for path in _iter_files(root_path):
        if file_extension(os.path.basename(path)) != extension:
            continue

        try:
            meta = process_file(path, download_prefix)
        except (NoMetadataError, ReadError) as e:
            logger.error("failed to handle script file", path=display_path(path), error=str(e))
            continue

        metas.append(meta)

    return metas
