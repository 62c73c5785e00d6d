"""Indexing run: walk the scripts tree, then write the index."""

from dataclasses import dataclass
from pathlib import Path

from scriptindex.cli_logger import CliLogger
from scriptindex.config import IndexConfig
from scriptindex.walker import walk_scripts
from scriptindex.writer import write_index


@dataclass
class IndexResult:
    """Outcome of a successful indexing run."""

    count: int
    output_path: Path


def build_index(config: IndexConfig, logger: CliLogger) -> IndexResult:
    """Index config.root into config.output.

    Raises:
        WalkError: If the scripts tree cannot be traversed.
        OutputError: If the index cannot be written.
    """
    metas = walk_scripts(
        config.root,
        logger,
        extension=config.extension,
        download_prefix=config.download_prefix,
    )
    write_index(metas, config.output)
    return IndexResult(count=len(metas), output_path=Path(config.output))
