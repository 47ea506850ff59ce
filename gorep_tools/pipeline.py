"""In-process DTO -> model -> repository generation for one table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from sqlalchemy.engine import Connection, Engine

from .dto_codegen import DtoGenerator
from .model_codegen import ModelGenerator
from .repository_codegen import RepositoryGenerator
from .shared import DialectProfile, EntityDescriptor
from .shared.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class GeneratedSources:
    """The three Go sources generated for one table."""

    dto: str
    model: str
    repository: str
    entity: EntityDescriptor


def generate_sources(
    bind: Engine | Connection,
    table_name: str,
    package_name: str,
    model_package: str | None = None,
    repository_package: str | None = None,
    dialect: str | DialectProfile | None = None,
    templates: Mapping[str, str] | None = None,
) -> GeneratedSources:
    """Generate DTO, model and repository sources for ``table_name``.

    Entities are passed between the stages directly, so the DTO text is
    never re-parsed. Packages for the later stages default to
    ``package_name``. ``templates`` maps a stage name to template text.
    """
    templates = templates or {}
    dto_generator = DtoGenerator(bind, dialect, templates.get("dto"))
    model_generator = ModelGenerator(templates.get("model"))
    repository_generator = RepositoryGenerator(templates.get("repository"))

    dto_entity = dto_generator.describe(package_name, table_name)
    model_entity = model_generator.describe_entity(model_package or package_name, dto_entity)
    repository_entity = repository_generator.describe_entity(
        repository_package or package_name, model_entity
    )

    logger.debug("Generating sources for %s", model_entity.entity_name)
    return GeneratedSources(
        dto=dto_generator.render(dto_entity),
        model=model_generator.render(model_entity),
        repository=repository_generator.render(repository_entity),
        entity=model_entity,
    )
