"""Logging setup shared by the library modules and the CLI."""

from __future__ import annotations

import logging
import sys

from aidocs.config import AIDOCS_LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Third-party loggers that are only interesting with --verbose.
_LIBRARY_LOGGERS = ("chromadb", "httpx", "httpcore")


def get_logger(name: str) -> logging.Logger:
    """Return a module logger under the package hierarchy."""
    return logging.getLogger(name)


def configure_logging(level: str | int | None = None, *, verbose: bool = False) -> None:
    """Install a single stream handler on the root logger.

    Args:
        level: Log level name or number. Defaults to ``AIDOCS_LOG_LEVEL``.
        verbose: If True, log at DEBUG and let library loggers through.
    """
    resolved = logging.DEBUG if verbose else (level or AIDOCS_LOG_LEVEL)
    logging.basicConfig(
        level=resolved,
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )
    library_level = logging.DEBUG if verbose else logging.WARNING
    for name in _LIBRARY_LOGGERS:
        logging.getLogger(name).setLevel(library_level)
