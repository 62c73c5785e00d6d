"""Shared test fixtures for scriptindex tests."""

import io
from collections.abc import Callable
from pathlib import Path

import pytest
from rich.console import Console
from typer.testing import CliRunner

from scriptindex.cli_logger import CliLogger


def userscript(*items: tuple[str, str], body: str = "console.log('hi');\n") -> str:
    """Build script source with a ==UserScript== header holding items."""
    lines = ["// ==UserScript=="]
    lines.extend(f"// @{key} {value}" for key, value in items)
    lines.append("// ==/UserScript==")
    return "\n".join(lines) + "\n" + body


class CapturedLogger(CliLogger):
    """CliLogger writing to an in-memory buffer."""

    def __init__(self) -> None:
        """Initialize with a plain, wide, non-terminal console."""
        self.buffer = io.StringIO()
        super().__init__(Console(file=self.buffer, width=200, highlight=False, color_system=None))

    @property
    def output(self) -> str:
        """Everything logged so far."""
        return self.buffer.getvalue()

    @property
    def lines(self) -> list[str]:
        """Logged lines, without trailing empty entries."""
        return [line for line in self.output.splitlines() if line]


@pytest.fixture
def logger() -> CapturedLogger:
    """Provide a logger whose output can be inspected."""
    return CapturedLogger()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Typer CLI test runner."""
    return CliRunner()


# Type alias for the script factory function
ScriptFactory = Callable[..., Path]


@pytest.fixture
def work_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a working directory with an empty scripts/ tree and enter it.

    The process working directory is restored after the test.
    """
    (tmp_path / "scripts").mkdir()
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SCRIPTINDEX_DOWNLOAD_PREFIX", raising=False)
    return tmp_path


@pytest.fixture
def write_script(work_dir: Path) -> ScriptFactory:
    """Factory fixture that writes a file below work_dir/scripts.

    Usage:
        write_script("a.js", userscript(("name", "Foo")))
        write_script("sub dir/b.js", "no header here")
    """

    def _write(relative: str, content: str | bytes) -> Path:
        path = work_dir / "scripts" / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content)
        return path

    return _write
