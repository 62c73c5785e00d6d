"""Record normalization: list defaults and the computed download URL."""

import os
from typing import Any
from urllib.parse import quote

from scriptindex.meta_schema import LIST_FIELDS, ScriptMeta

DOWNLOAD_URL_PREFIX = "https://raw.githubusercontent.com/sealdice/javascript/main/"

# Characters a URL path segment may carry unescaped besides the unreserved set
_SEGMENT_SAFE = "$&+:=@"


def escape_path_segment(segment: str) -> str:
    """Percent-escape one path segment for use inside a URL path.

    ``/``, ``;``, ``,`` and ``?`` are escaped so segment boundaries survive.
    The segment is escaped as its file system bytes, so names that are not
    valid UTF-8 keep their original bytes.
    """
    return quote(os.fsencode(segment), safe=_SEGMENT_SAFE)


def display_path(path: str) -> str:
    """Return path as valid text, replacing undecodable file name bytes."""
    return os.fsencode(path).decode("utf-8", errors="replace")


def join_url(prefix: str, segments: list[str]) -> str:
    """Join escaped segments onto prefix with exactly one ``/`` between parts."""
    parts = [segment for segment in segments if segment not in ("", ".")]
    if not parts:
        return prefix
    return prefix.rstrip("/") + "/" + "/".join(parts)


def build_download_url(path: str, prefix: str = DOWNLOAD_URL_PREFIX) -> str:
    """Build the raw download URL of a script from its relative path.

    Args:
        path: File path as walked, using the platform separator.
        prefix: Base URL of the raw script repository.

    Returns:
        The download URL.
    """
    segments = [escape_path_segment(segment) for segment in path.split(os.sep)]
    return join_url(prefix, segments)


def normalize(fields: dict[str, Any], path: str, prefix: str = DOWNLOAD_URL_PREFIX) -> ScriptMeta:
    """Turn extracted fields into a finished ScriptMeta record."""
    values = dict(fields)
    for key in LIST_FIELDS:
        values.setdefault(key, [])
    values["path"] = display_path(path)
    values["download_url"] = build_download_url(path, prefix)
    return ScriptMeta(**values)
