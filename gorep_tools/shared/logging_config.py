"""Logging setup for the command line tools."""

from __future__ import annotations

import logging
import sys
from typing import Final

ROOT_LOGGER: Final[str] = "gorep_tools"
LOG_FORMAT: Final[str] = "%(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the package root logger."""
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def configure_logging(verbose: bool = False, stream=None) -> logging.Logger:
    """Install a single stream handler on the package root logger.

    Calling it again replaces the handler instead of adding another one.
    """
    root = logging.getLogger(ROOT_LOGGER)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return root
