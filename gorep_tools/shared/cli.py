"""Argument and output helpers shared by the generator entry points."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .errors import GorepError
from .logging_config import get_logger

logger = get_logger(__name__)


def add_common_args(parser: argparse.ArgumentParser) -> None:
    """Add the options every generator accepts."""
    parser.add_argument(
        "--package",
        dest="package_name",
        default=None,
        help="Go package name for the generated file",
    )
    parser.add_argument(
        "--template",
        type=Path,
        default=None,
        help="Jinja2 template replacing the bundled one",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output file (default: stdout)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML configuration file (default: ./gorep.yaml if present)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )


def read_text_file(path: Path, what: str) -> str:
    """Read a UTF-8 file, reporting failures as GorepError."""
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise GorepError(f"Failed to read {what}: {e}", str(path)) from e


def read_template_override(path: Path | None) -> str | None:
    if path is None:
        return None
    return read_text_file(path, "template")


def write_output(source: str, output: Path | None) -> None:
    """Write generated source to a file, or to stdout without one."""
    if output is None:
        sys.stdout.write(source)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(source, encoding="utf-8")
    logger.info("Wrote %s", output)


def fail(error: Exception) -> SystemExit:
    """Log an error and build the SystemExit the entry points raise."""
    logger.debug("Generation failed", exc_info=error)
    return SystemExit(f"Error: {error}")
