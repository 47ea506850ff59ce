#!/usr/bin/env python3
"""
Code generator wrapper for gorep-tools.

Forwards to the gorep_tools module so the generators can be run from a
checkout without installing the package.

Usage:
    python gorep.py <command> [options]

Commands:
    dto         Generate a DTO struct from a database table
    model       Generate a domain model from a DTO source file
    repository  Generate a repository stub from a model source file
    all         Generate DTO, model and repository files for a table

Examples:
    python gorep.py dto users --package dto --database-url sqlite:///app.db
    python gorep.py all users --package store --output-dir gen/
"""

import os
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent


def main() -> int:
    """Forward all arguments to the gorep_tools module."""
    # Relative paths in the arguments stay relative to the caller's cwd
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(
        filter(None, [str(ROOT), env.get("PYTHONPATH")])
    )
    return subprocess.call(
        [sys.executable, "-m", "gorep_tools"] + sys.argv[1:],
        env=env,
    )


if __name__ == "__main__":
    sys.exit(main())
