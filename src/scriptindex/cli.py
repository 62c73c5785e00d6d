"""scriptindex CLI entry point."""

import sys
from pathlib import Path
from typing import Annotated

import typer

from scriptindex import exit_codes
from scriptindex.cli_logger import CliLogger
from scriptindex.config import load_config
from scriptindex.errors import (
    ConfigError,
    DirectoryChangeError,
    OutputError,
    WalkError,
    handle_cli_error,
)
from scriptindex.indexer import build_index
from scriptindex.workspace import change_work_dir, resolve_work_dir

app = typer.Typer(
    name="scriptindex",
    help="Index the ==UserScript== metadata of ./scripts into ./scripts.json.",
    add_completion=False,
)


@app.command()
def index(
    directory: Annotated[
        Path | None,
        typer.Argument(
            help="Directory to change into before indexing. Defaults to the current directory.",
        ),
    ] = None,
) -> None:
    """Scan ./scripts for script metadata and write ./scripts.json.

    Files without a usable metadata block are reported on stderr and left
    out of the index; they do not change the exit code.
    """
    logger = CliLogger()

    work_dir = resolve_work_dir(directory)
    if directory is not None:
        try:
            change_work_dir(work_dir)
        except DirectoryChangeError as e:
            logger.error("failed to change working directory", error=str(e))
            raise typer.Exit(e.error_code) from e

    try:
        config = load_config(Path.cwd())
    except ConfigError as e:
        logger.error("failed to load config", error=str(e))
        raise typer.Exit(exit_codes.CONFIG_INVALID) from e

    try:
        build_index(config, logger)
    except WalkError as e:
        logger.error("failed to walk script files", error=str(e))
        raise typer.Exit(exit_codes.WALK_ERROR) from e
    except OutputError as e:
        logger.error("failed to output", error=str(e))
        raise typer.Exit(exit_codes.OUTPUT_ERROR) from e


def main_cli() -> None:
    """CLI entry point with top-level exception handling.

    Wraps the Typer app to catch any unhandled exceptions and format them
    as clean error messages instead of raw tracebacks.
    """
    try:
        app()
    except Exception as e:
        sys.exit(handle_cli_error(e, CliLogger()))


if __name__ == "__main__":
    main_cli()
