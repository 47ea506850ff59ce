"""Descriptors passed between the generation stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable


@dataclass(frozen=True, slots=True)
class ColumnDescriptor:
    """A column as reported by the database metadata catalog."""

    name: str
    raw_type: str
    nullable: bool


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """A field of a generated struct with its resolved Go type."""

    name: str
    resolved_type: str
    owning_entity_name: str = ""


@dataclass(frozen=True, slots=True)
class EntityDescriptor:
    """Everything a template needs to render one struct."""

    package_name: str
    entity_name: str
    fields: tuple[FieldDescriptor, ...] = field(default_factory=tuple)
    imports: tuple[str, ...] = field(default_factory=tuple)

    def field_names(self) -> list[str]:
        return [item.name for item in self.fields]


@dataclass(frozen=True, slots=True)
class SourceStructure:
    """Struct name and exported fields recovered from Go source."""

    struct_name: str
    entity_name: str
    fields: tuple[FieldDescriptor, ...]


def sort_fields(
    fields: Iterable[FieldDescriptor],
    key: Callable[[str], str] | None = None,
) -> tuple[FieldDescriptor, ...]:
    """Order fields by name so rendering does not depend on column order.

    ``key`` maps a field name to the name that is sorted on, e.g. the Go
    identifier a template will print for it.
    """
    if key is None:
        return tuple(sorted(fields, key=lambda item: item.name))
    return tuple(sorted(fields, key=lambda item: key(item.name)))
