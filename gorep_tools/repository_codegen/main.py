"""Repository Code Generator - Generates a Go repository stub from a model.

The stub only holds the database handle and a constructor; query methods
are left to the user.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Final

from ..shared import (
    EntityDescriptor,
    FieldDescriptor,
    GorepError,
    PreconditionError,
    TemplateRenderer,
    extract_structure,
    load_template,
    sort_fields,
    strip_dto_marker,
)
from ..shared.cli import add_common_args, fail, read_template_override, read_text_file, write_output
from ..shared.config import load_optional_config
from ..shared.logging_config import configure_logging, get_logger

logger = get_logger(__name__)

TEMPLATE_NAME: Final[str] = "repository.go.j2"
REPOSITORY_IMPORTS: Final[tuple[str, ...]] = ("database/sql",)


class RepositoryGenerator:
    """Generates a repository stub from model source or a model entity."""

    __slots__ = ("_renderer", "_template")

    def __init__(
        self,
        template: str | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self._renderer = renderer or TemplateRenderer()
        self._template = template if template is not None else load_template(TEMPLATE_NAME)

    @property
    def template(self) -> str:
        return self._template

    def set_template(self, template: str) -> None:
        self._template = template

    def _build(
        self,
        package_name: str,
        entity_name: str,
        fields: tuple[FieldDescriptor, ...],
    ) -> EntityDescriptor:
        owned = sort_fields(
            FieldDescriptor(item.name, item.resolved_type, entity_name) for item in fields
        )
        return EntityDescriptor(
            package_name=package_name,
            entity_name=entity_name,
            fields=owned,
            imports=REPOSITORY_IMPORTS,
        )

    def describe(self, package_name: str, model_source: str) -> EntityDescriptor:
        """Build the repository entity from model source text.

        Raises:
            PreconditionError: If the package name or source is empty.
            SourceParseError: If the source is not valid Go.
            NoStructureError: If the source declares no type.
            NoFieldsError: If the type has no exported fields.
        """
        if not package_name:
            raise PreconditionError("package name")
        if not model_source:
            raise PreconditionError("model file contents")

        structure = extract_structure(model_source)
        logger.debug("Building repository for %s", structure.entity_name)
        return self._build(package_name, structure.entity_name, structure.fields)

    def describe_entity(
        self,
        package_name: str,
        model_entity: EntityDescriptor,
    ) -> EntityDescriptor:
        if not package_name:
            raise PreconditionError("package name")
        entity_name = strip_dto_marker(model_entity.entity_name)
        return self._build(package_name, entity_name, model_entity.fields)

    def render(self, entity: EntityDescriptor) -> str:
        return self._renderer.render(self._template, entity, name=TEMPLATE_NAME)

    def generate(self, package_name: str, model_source: str) -> str:
        """Return repository stub source for the model in ``model_source``."""
        return self.render(self.describe(package_name, model_source))

    def generate_from_entity(self, package_name: str, model_entity: EntityDescriptor) -> str:
        return self.render(self.describe_entity(package_name, model_entity))


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Generate a Go repository stub from a model source file",
    )
    parser.add_argument(
        "model_file",
        type=Path,
        help="Go file declaring the model struct",
    )
    add_common_args(parser)

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        model_source = read_text_file(args.model_file, "model file")
        config = load_optional_config(args.config)
        template_path = args.template or config.template_for("repository")
        generator = RepositoryGenerator(read_template_override(template_path))
        source = generator.generate(
            args.package_name or config.package_for("repository", ""),
            model_source,
        )
        write_output(source, args.output)
    except (GorepError, OSError) as e:
        raise fail(e) from e


if __name__ == "__main__":
    main()
