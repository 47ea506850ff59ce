"""Go import resolution for generated structs."""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, Iterable, Mapping

from .descriptors import FieldDescriptor

# Go types that need an import, keyed by the exact type expression
GO_TYPE_IMPORTS: Final[Mapping[str, str]] = MappingProxyType({
    "time.Time": "time",
    "*time.Time": "time",
    "sql.NullBool": "database/sql",
    "sql.NullByte": "database/sql",
    "sql.NullFloat64": "database/sql",
    "sql.NullInt16": "database/sql",
    "sql.NullInt32": "database/sql",
    "sql.NullInt64": "database/sql",
    "sql.NullString": "database/sql",
    "sql.NullTime": "database/sql",
})


def resolve_imports(
    fields: Iterable[FieldDescriptor],
    table: Mapping[str, str] = GO_TYPE_IMPORTS,
) -> list[str]:
    """Return the packages the field types need.

    Packages appear in the order their first field appears, each once, so
    the same fields always give the same list.
    """
    # dict preserves insertion order
    seen: dict[str, None] = {}
    for item in fields:
        package = table.get(item.resolved_type)
        if package is not None:
            seen.setdefault(package, None)
    return list(seen)
