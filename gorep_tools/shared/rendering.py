"""Template rendering shared by the DTO, model and repository stages."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Final

import jinja2
from jinja2 import Environment, StrictUndefined

from .descriptors import EntityDescriptor
from .errors import PreconditionError, TemplateFieldError, TemplateSyntaxError
from .logging_config import get_logger
from .naming import lowercase_first, sanitize_identifier, snake_to_camel

logger = get_logger(__name__)

TEMPLATE_DIR: Final[Path] = Path(__file__).parent.parent / "templates"

_UNDEFINED_PATTERNS: Final[tuple[re.Pattern[str], ...]] = (
    re.compile(r"has no attribute '([^']+)'"),
    re.compile(r"'([^']+)' is undefined"),
)


def load_template(name: str, template_dir: Path = TEMPLATE_DIR) -> str:
    """Read a bundled template, e.g. ``load_template("dto.go.j2")``."""
    return (template_dir / name).read_text(encoding="utf-8")


def _undefined_field_name(message: str) -> str | None:
    for pattern in _UNDEFINED_PATTERNS:
        match = pattern.search(message)
        if match:
            return match.group(1)
    return None


def build_context(entity: EntityDescriptor) -> dict[str, Any]:
    """Expose an entity under the names the templates use."""
    return {
        "PackageName": entity.package_name,
        "TableName": entity.entity_name,
        "StructName": entity.entity_name,
        "Fields": list(entity.fields),
        "Imports": list(entity.imports),
    }


def check_names(package_name: str, entity_name: str, entity_label: str) -> None:
    """Fail fast on empty names before any database or template work."""
    if not package_name:
        raise PreconditionError("package name")
    if not entity_name:
        raise PreconditionError(entity_label)


class TemplateRenderer:
    """Binds an entity to a Jinja2 template and returns Go source."""

    __slots__ = ("_env", "_compiled")

    def __init__(self) -> None:
        self._env = Environment(
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
            autoescape=False,
            auto_reload=False,
        )
        helpers = {
            "Uppercase": snake_to_camel,
            "Lowercase": lowercase_first,
            "Identifier": sanitize_identifier,
        }
        self._env.filters.update(helpers)
        self._env.globals.update(helpers)
        self._compiled: dict[tuple[str, str], jinja2.Template] = {}

    def compile(self, template_text: str, name: str = "template") -> jinja2.Template:
        """Parse template text, reusing an earlier parse of the same text.

        Raises:
            TemplateSyntaxError: If the text is not a valid template.
        """
        key = (name, template_text)
        template = self._compiled.get(key)
        if template is None:
            try:
                template = self._env.from_string(template_text)
            except jinja2.TemplateSyntaxError as e:
                raise TemplateSyntaxError(e.message or str(e), e.lineno, name) from e
            template.name = name
            self._compiled[key] = template
        return template

    def render(
        self,
        template_text: str,
        entity: EntityDescriptor,
        name: str = "template",
    ) -> str:
        """Render an entity through template text.

        Raises:
            PreconditionError: If the package or entity name is empty.
            TemplateSyntaxError: If the template cannot be parsed.
            TemplateFieldError: If the template references missing data or
                fails while rendering.
        """
        check_names(entity.package_name, entity.entity_name, "entity name")

        template = self.compile(template_text, name)
        try:
            rendered = template.render(**build_context(entity))
        except jinja2.UndefinedError as e:
            raise TemplateFieldError(
                e.message or str(e),
                _undefined_field_name(e.message or ""),
                name,
            ) from e
        except (jinja2.TemplateError, TypeError, ValueError) as e:
            raise TemplateFieldError(str(e), None, name) from e

        logger.debug(
            "Rendered template '%s' for %s (%d fields)",
            name,
            entity.entity_name,
            len(entity.fields),
        )
        return rendered
