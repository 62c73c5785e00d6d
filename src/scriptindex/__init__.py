"""scriptindex - build a JSON index of userscript metadata headers."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("scriptindex")
except PackageNotFoundError:
    __version__ = "0.0.0"
