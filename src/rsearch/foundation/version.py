"""
Installed version of rsearch, looked up once from package metadata.

Source checkouts that were never installed report ``0.0.0+unknown``.
"""

from __future__ import annotations

from importlib import metadata as importlib_metadata
from typing import TYPE_CHECKING

_DIST_NAME = "rsearch"
_UNKNOWN_VERSION = "0.0.0+unknown"
_cached_version: str | None = None

if TYPE_CHECKING:
    __version__: str


def get_version() -> str:
    """Return the distribution version string, e.g. ``"0.1.0"``."""
    global _cached_version
    if _cached_version is None:
        try:
            _cached_version = importlib_metadata.version(_DIST_NAME)
        except importlib_metadata.PackageNotFoundError:  # pragma: no cover
            _cached_version = _UNKNOWN_VERSION
    return _cached_version


def __getattr__(name: str):
    # ``rsearch.foundation.version.__version__`` resolves on first access.
    if name == "__version__":
        return get_version()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["__version__", "get_version"]
