"""JSON index output."""

import json
from collections.abc import Sequence
from pathlib import Path

from scriptindex.errors import OutputError
from scriptindex.meta_schema import ScriptMeta


def write_index(metas: Sequence[ScriptMeta], output_path: str | Path) -> None:
    """Write all records to output_path as one pretty-printed JSON array.

    The file is created or truncated, written in one shot, and always
    closed, even when serialization fails.

    Args:
        metas: Records in the order they should appear.
        output_path: Destination file.

    Raises:
        OutputError: If the file cannot be opened, serialized, or written.
    """
    records = [meta.to_record() for meta in metas]
    try:
        with open(output_path, "w", encoding="utf-8") as out:
            json.dump(records, out, indent=2, ensure_ascii=False)
            out.write("\n")
    except OSError as e:
        msg = f"cannot write '{output_path}': {e.strerror or e}"
        raise OutputError(msg) from e
    except (TypeError, ValueError) as e:
        msg = f"cannot serialize index: {e}"
        raise OutputError(msg) from e
