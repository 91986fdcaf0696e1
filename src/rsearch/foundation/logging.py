"""Console output for the ``rsearch`` logger, for scripts and the CLI."""

from __future__ import annotations

import logging


def configure_rsearch_logging(*, level: int = logging.INFO) -> None:
    """
    Send ``rsearch`` log records (progress lines, stop messages) to stderr.

    Nothing in the library calls this; the ``rsearch`` CLI does, and scripts
    may. It is a no-op when the application already set up logging, i.e. when
    the root logger or the ``rsearch`` logger carries a handler. Records are
    printed bare (``%(message)s``) and do not propagate to the root logger.
    """
    root = logging.getLogger()
    pkg_logger = logging.getLogger("rsearch")
    if root.handlers or pkg_logger.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(level)
    pkg_logger.propagate = False


__all__ = ["configure_rsearch_logging"]
