"""Userscript metadata extraction.

A script carries its metadata in a comment block::

    // ==UserScript==
    // @name        Example
    // @version     1.0
    // ==/UserScript==

Extraction runs in two passes: locate the block, then collect its
``@key value`` lines.
"""

import re
from collections.abc import Callable
from datetime import datetime
from typing import Any

from dateutil import parser as dateutil_parser

from scriptindex.errors import NoMetadataError
from scriptindex.meta_schema import ScriptMeta
from scriptindex.normalizer import DOWNLOAD_URL_PREFIX, normalize

META_BLOCK_PATTERN = re.compile(
    r"//[ \t]*==UserScript==[ \t]*\r?\n(.*)//[ \t]*==/UserScript==",
    re.DOTALL,
)
META_ITEM_PATTERN = re.compile(r"//[ \t]*@(\S+)[ \t]+([^\r\n]+)")

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

# @key -> ScriptMeta field, for keys that hold a single value
SINGLE_VALUE_KEYS = {
    "name": "name",
    "homepageURL": "home_page",
    "license": "license",
    "author": "author",
    "version": "version",
    "description": "description",
    "etag": "etag",
}

# @key -> ScriptMeta field, for keys that may repeat
MULTI_VALUE_KEYS = {
    "updateURL": "update_urls",
    "depents": "depents",
}

TIMESTAMP_KEY = "timestamp"

_EPOCH_PATTERN = re.compile(r"[+-]?[0-9]+")


def extract_items(content: str) -> list[tuple[str, str]]:
    """Return every ``(key, value)`` pair of the metadata block, in order.

    Args:
        content: Full text of a script file.

    Returns:
        The pairs in order of appearance, duplicates included.

    Raises:
        NoMetadataError: If there is no block, or the block has no items.
    """
    block = META_BLOCK_PATTERN.search(content)
    if block is None:
        raise NoMetadataError()

    items = META_ITEM_PATTERN.findall(block.group(1))
    if not items:
        raise NoMetadataError()
    return items


def _parse_epoch(value: str) -> datetime | None:
    """Parse a base-10 integer as seconds since the epoch, in local time."""
    if not _EPOCH_PATTERN.fullmatch(value):
        return None
    try:
        return datetime.fromtimestamp(int(value))
    except (OverflowError, OSError, ValueError):
        return None


def _parse_free_form(value: str) -> datetime | None:
    """Leniently parse a date/time string; naive results are local time."""
    try:
        parsed = dateutil_parser.parse(value)
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone().replace(tzinfo=None)
    except (ValueError, OverflowError):
        return None
    return parsed


TIMESTAMP_PARSERS: tuple[Callable[[str], datetime | None], ...] = (
    _parse_epoch,
    _parse_free_form,
)


def parse_timestamp(value: str) -> str | None:
    """Format a @timestamp value as local ``YYYY-MM-DD HH:MM:SS``.

    The parsers are tried in order and the first result wins, so a value
    that is a plain integer is never handed to the free-form parser.

    Returns:
        The formatted time, or None if no parser accepts the value.
    """
    value = value.strip()
    for parse in TIMESTAMP_PARSERS:
        parsed = parse(value)
        if parsed is not None:
            return parsed.strftime(TIME_FORMAT)
    return None


def map_items(items: list[tuple[str, str]]) -> dict[str, Any]:
    """Map raw ``@key value`` pairs onto ScriptMeta fields.

    Unknown keys are ignored. A repeated single-value key keeps its last
    value; repeated multi-value keys accumulate in order.
    """
    fields: dict[str, Any] = {field: [] for field in MULTI_VALUE_KEYS.values()}

    for key, value in items:
        if key in SINGLE_VALUE_KEYS:
            fields[SINGLE_VALUE_KEYS[key]] = value
        elif key in MULTI_VALUE_KEYS:
            fields[MULTI_VALUE_KEYS[key]].append(value)
        elif key == TIMESTAMP_KEY:
            update_time = parse_timestamp(value)
            if update_time is not None:
                fields["update_time"] = update_time

    return fields


def parse_meta(path: str, content: str, download_prefix: str = DOWNLOAD_URL_PREFIX) -> ScriptMeta:
    """Extract the metadata record of one script.

    Args:
        path: File path as walked, stored on the record and used for the
            download URL.
        content: Full text of the file.
        download_prefix: Base URL for the computed download URL.

    Returns:
        The finished record.

    Raises:
        NoMetadataError: If the file has no usable metadata block.
    """
    fields = map_items(extract_items(content))
    return normalize(fields, path, download_prefix)
