"""Model Code Generator - Generates a Go domain model from a DTO struct."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Final, Iterable

from ..shared import (
    EntityDescriptor,
    FieldDescriptor,
    GorepError,
    NoFieldsError,
    PreconditionError,
    TemplateRenderer,
    extract_structure,
    load_template,
    resolve_imports,
    sanitize_identifier,
    sort_fields,
    strip_dto_marker,
)
from ..shared.cli import add_common_args, fail, read_template_override, read_text_file, write_output
from ..shared.config import load_optional_config
from ..shared.logging_config import configure_logging, get_logger

logger = get_logger(__name__)

TEMPLATE_NAME: Final[str] = "model.go.j2"


def build_model_entity(
    package_name: str,
    entity_name: str,
    fields: Iterable[FieldDescriptor],
) -> EntityDescriptor:
    """Sort fields, re-own them to ``entity_name`` and resolve imports."""
    owned = sort_fields(
        FieldDescriptor(item.name, item.resolved_type, entity_name) for item in fields
    )
    return EntityDescriptor(
        package_name=package_name,
        entity_name=entity_name,
        fields=owned,
        imports=tuple(resolve_imports(owned)),
    )


class ModelGenerator:
    """Generates a model struct from DTO source or from a DTO entity."""

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

    def describe(self, package_name: str, dto_source: str) -> EntityDescriptor:
        """Build the model entity from DTO source text.

        Raises:
            PreconditionError: If the package name or source is empty.
            SourceParseError: If the source is not valid Go.
            NoStructureError: If the source declares no type.
            NoFieldsError: If the type has no exported fields.
        """
        if not package_name:
            raise PreconditionError("package name")
        if not dto_source:
            raise PreconditionError("dto file contents")

        structure = extract_structure(dto_source)
        logger.debug(
            "Extracted %s with %d field(s)", structure.struct_name, len(structure.fields)
        )
        return build_model_entity(package_name, structure.entity_name, structure.fields)

    def describe_entity(
        self,
        package_name: str,
        dto_entity: EntityDescriptor,
    ) -> EntityDescriptor:
        """Build the model entity straight from a DTO entity.

        Gives the same result as rendering the DTO with the bundled
        template and passing the text to ``describe``.
        """
        if not package_name:
            raise PreconditionError("package name")

        entity_name = strip_dto_marker(sanitize_identifier(dto_entity.entity_name))
        fields = [
            FieldDescriptor(sanitize_identifier(item.name), item.resolved_type)
            for item in dto_entity.fields
        ]
        if not fields:
            raise NoFieldsError(entity_name)
        return build_model_entity(package_name, entity_name, fields)

    def render(self, entity: EntityDescriptor) -> str:
        return self._renderer.render(self._template, entity, name=TEMPLATE_NAME)

    def generate(self, package_name: str, dto_source: str) -> str:
        """Return model source for the DTO declared in ``dto_source``."""
        return self.render(self.describe(package_name, dto_source))

    def generate_from_entity(self, package_name: str, dto_entity: EntityDescriptor) -> str:
        return self.render(self.describe_entity(package_name, dto_entity))


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Generate a Go domain model from a DTO source file",
    )
    parser.add_argument(
        "dto_file",
        type=Path,
        help="Go file declaring the DTO struct",
    )
    add_common_args(parser)

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        dto_source = read_text_file(args.dto_file, "DTO file")
        config = load_optional_config(args.config)
        template_path = args.template or config.template_for("model")
        generator = ModelGenerator(read_template_override(template_path))
        source = generator.generate(
            args.package_name or config.package_for("model", ""),
            dto_source,
        )
        write_output(source, args.output)
    except (GorepError, OSError) as e:
        raise fail(e) from e


if __name__ == "__main__":
    main()
