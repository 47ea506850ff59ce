"""DTO Code Generator - Generates a Go DTO struct from a database table."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Final

from sqlalchemy import create_engine
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError

from ..shared import (
    DialectProfile,
    EntityDescriptor,
    GorepError,
    SchemaReader,
    TemplateRenderer,
    load_template,
    resolve_imports,
    sanitize_identifier,
    sort_fields,
    split_table_name,
)
from ..shared.cli import add_common_args, fail, read_template_override, write_output
from ..shared.config import load_optional_config
from ..shared.errors import PreconditionError
from ..shared.logging_config import configure_logging, get_logger
from ..shared.rendering import check_names

logger = get_logger(__name__)

TEMPLATE_NAME: Final[str] = "dto.go.j2"


def _check_field_names(fields) -> None:
    seen: dict[str, str] = {}
    for item in fields:
        identifier = sanitize_identifier(item.name)
        if identifier in seen:
            raise GorepError(
                f"columns '{seen[identifier]}' and '{item.name}' both map to "
                f"field '{identifier}'"
            )
        seen[identifier] = item.name


class DtoGenerator:
    """Generates the DTO for one table per ``generate`` call.

    The only state kept between calls is the template text.
    """

    __slots__ = ("_reader", "_renderer", "_template")

    def __init__(
        self,
        bind: Engine | Connection,
        dialect: str | DialectProfile | None = None,
        template: str | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self._reader = SchemaReader(bind, dialect)
        self._renderer = renderer or TemplateRenderer()
        self._template = template if template is not None else load_template(TEMPLATE_NAME)

    @property
    def template(self) -> str:
        return self._template

    def set_template(self, template: str) -> None:
        """Replace the template used by later ``generate`` calls."""
        self._template = template

    def describe(self, package_name: str, table_name: str) -> EntityDescriptor:
        """Read the table and build the entity the template renders.

        Raises:
            PreconditionError: If the package or table name is empty.
            TableNotFoundError: If the table has no columns.
            GorepError: If two columns map to the same Go field name.
        """
        check_names(package_name, table_name, "table name")
        _, entity_name = split_table_name(table_name, self._reader.dialect.default_schema)
        if not entity_name:
            raise PreconditionError("table name")

        fields = sort_fields(self._reader.fetch_fields(table_name), key=sanitize_identifier)
        _check_field_names(fields)
        return EntityDescriptor(
            package_name=package_name,
            entity_name=entity_name,
            fields=fields,
            imports=tuple(resolve_imports(fields)),
        )

    def render(self, entity: EntityDescriptor) -> str:
        return self._renderer.render(self._template, entity, name=TEMPLATE_NAME)

    def generate(self, package_name: str, table_name: str) -> str:
        """Return the DTO source for ``table_name``."""
        entity = self.describe(package_name, table_name)
        logger.debug("Generating DTO for %s", table_name)
        return self.render(entity)


def generate(
    database_url: str,
    package_name: str,
    table_name: str,
    dialect: str | None = None,
    template: str | None = None,
) -> str:
    """Connect to ``database_url`` and generate one DTO."""
    engine = create_engine(database_url)
    try:
        return DtoGenerator(engine, dialect, template).generate(package_name, table_name)
    finally:
        engine.dispose()


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Generate a Go DTO struct from a database table",
    )
    parser.add_argument(
        "table",
        help="Table name, optionally schema-qualified (schema.table)",
    )
    parser.add_argument(
        "--database-url",
        default=None,
        help="SQLAlchemy database URL (default: config file or GOREP_DATABASE_URL)",
    )
    parser.add_argument(
        "--dialect",
        default=None,
        help="Type mapping profile (default: taken from the database URL)",
    )
    add_common_args(parser)

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = load_optional_config(args.config).merged(
            database_url=args.database_url,
            dialect=args.dialect,
        )
        database_url = config.resolved_database_url()
        if not database_url:
            raise GorepError(
                "no database URL given (use --database-url, the config file "
                "or GOREP_DATABASE_URL)"
            )

        template_path: Path | None = args.template or config.template_for("dto")
        source = generate(
            database_url,
            args.package_name or config.package_for("dto", ""),
            args.table,
            dialect=config.dialect,
            template=read_template_override(template_path),
        )
        write_output(source, args.output)
    except (GorepError, SQLAlchemyError, OSError) as e:
        raise fail(e) from e


if __name__ == "__main__":
    main()
