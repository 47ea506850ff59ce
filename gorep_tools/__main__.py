#!/usr/bin/env python3
"""
Go data access code generator.

Usage:
    python -m gorep_tools <command> [options]

Commands:
    dto         Generate a DTO struct from a database table
    model       Generate a domain model from a DTO source file
    repository  Generate a repository stub from a model source file
    all         Generate DTO, model and repository files for a table

Examples:
    python -m gorep_tools dto users --package dto --database-url sqlite:///app.db
    python -m gorep_tools model users_dto.go --package model -o users.go
    python -m gorep_tools repository users.go --package repository
    python -m gorep_tools all public.users --package store --output-dir gen/
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError

from .shared import GorepError, split_table_name
from .shared.cli import fail, read_template_override, write_output
from .shared.config import STAGES, load_optional_config
from .shared.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def _exit_code(error: SystemExit) -> int:
    if isinstance(error.code, int):
        return error.code
    if error.code:
        print(error.code, file=sys.stderr)
        return 1
    return 0


def cmd_dto(args: list[str]) -> int:
    """Generate a DTO."""
    from .dto_codegen import main as dto_main
    try:
        dto_main(args)
        return 0
    except SystemExit as e:
        return _exit_code(e)


def cmd_model(args: list[str]) -> int:
    """Generate a model."""
    from .model_codegen import main as model_main
    try:
        model_main(args)
        return 0
    except SystemExit as e:
        return _exit_code(e)


def cmd_repository(args: list[str]) -> int:
    """Generate a repository stub."""
    from .repository_codegen import main as repository_main
    try:
        repository_main(args)
        return 0
    except SystemExit as e:
        return _exit_code(e)


def _run_all(parsed: argparse.Namespace) -> list[Path]:
    from .pipeline import generate_sources

    config = load_optional_config(parsed.config).merged(
        database_url=parsed.database_url,
        dialect=parsed.dialect,
    )
    database_url = config.resolved_database_url()
    if not database_url:
        raise GorepError(
            "no database URL given (use --database-url, the config file "
            "or GOREP_DATABASE_URL)"
        )

    templates = {}
    for stage in STAGES:
        text = read_template_override(config.template_for(stage))
        if text is not None:
            templates[stage] = text

    package_name = parsed.package_name or config.package_for("dto", "")
    engine = create_engine(database_url)
    try:
        sources = generate_sources(
            engine,
            parsed.table,
            package_name,
            model_package=parsed.model_package or config.package_for("model"),
            repository_package=parsed.repository_package or config.package_for("repository"),
            dialect=config.dialect,
            templates=templates,
        )
    finally:
        engine.dispose()

    _, table = split_table_name(parsed.table, "")
    outputs = [
        (parsed.output_dir / f"{table}_dto.go", sources.dto),
        (parsed.output_dir / f"{table}.go", sources.model),
        (parsed.output_dir / f"{table}_repository.go", sources.repository),
    ]
    for path, source in outputs:
        write_output(source, path)
    return [path for path, _ in outputs]


def cmd_all(args: list[str]) -> int:
    """Generate all three files for one table."""
    parser = argparse.ArgumentParser(
        prog="gorep_tools all",
        description="Generate DTO, model and repository files for a table",
    )
    parser.add_argument("table", help="Table name, optionally schema-qualified")
    parser.add_argument("--package", dest="package_name", default=None,
                        help="Go package name (used by every stage unless overridden)")
    parser.add_argument("--model-package", default=None, help="Package for the model file")
    parser.add_argument("--repository-package", default=None,
                        help="Package for the repository file")
    parser.add_argument("--database-url", default=None, help="SQLAlchemy database URL")
    parser.add_argument("--dialect", default=None, help="Type mapping profile")
    parser.add_argument("--output-dir", type=Path, required=True,
                        help="Directory receiving the generated files")
    parser.add_argument("--config", type=Path, default=None, help="YAML configuration file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    try:
        parsed = parser.parse_args(args)
    except SystemExit as e:
        return _exit_code(e)
    configure_logging(parsed.verbose)
    logger.debug("Generating all sources for %s", parsed.table)

    try:
        written = _run_all(parsed)
    except (GorepError, SQLAlchemyError, OSError) as e:
        return _exit_code(fail(e))

    for path in written:
        print(f"  Generated {path}")
    return 0


COMMANDS = {
    "dto": (cmd_dto, "Generate a DTO struct from a database table"),
    "model": (cmd_model, "Generate a domain model from a DTO source file"),
    "repository": (cmd_repository, "Generate a repository stub from a model source file"),
    "all": (cmd_all, "Generate DTO, model and repository files for a table"),
}


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if not argv or argv[0] in ("-h", "--help"):
        print(__doc__)
        print("Available commands:")
        for name, (_, desc) in COMMANDS.items():
            print(f"  {name:12} {desc}")
        print("\nUse '<command> --help' for command-specific options.")
        return 0

    command = argv[0]
    args = argv[1:]

    if command not in COMMANDS:
        print(f"Unknown command: {command}")
        print(f"Available commands: {', '.join(COMMANDS.keys())}")
        return 1

    handler, _ = COMMANDS[command]
    return handler(args)


if __name__ == "__main__":
    sys.exit(main())
