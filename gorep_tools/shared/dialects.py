"""Dialect profiles mapping database column types to Go types."""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final, Mapping

from .errors import DialectError

FALLBACK_GO_TYPE: Final[str] = "[]byte"

# Go types with a database/sql wrapper that can hold NULL
NULLABLE_WRAPPERS: Final[Mapping[str, str]] = MappingProxyType({
    "bool": "sql.NullBool",
    "float64": "sql.NullFloat64",
    "int16": "sql.NullInt16",
    "int64": "sql.NullInt64",
    "string": "sql.NullString",
    "time.Time": "sql.NullTime",
})

_TYPE_SUFFIX = re.compile(r"\s*\(.*\)\s*$")

POSTGRES_COLUMNS_QUERY: Final[str] = """
SELECT column_name, data_type, is_nullable = 'YES' AS nullable
FROM information_schema.columns
WHERE table_schema = :schema AND table_name = :table
ORDER BY ordinal_position
"""

SQLITE_COLUMNS_QUERY: Final[str] = """
SELECT name, type, "notnull" = 0 AS nullable
FROM pragma_table_info(:table, :schema)
ORDER BY cid
"""

POSTGRES_TYPES: Final[dict[str, str]] = {
    "bigint": "int64",
    "bigserial": "int64",
    "bool": "bool",
    "boolean": "bool",
    "bytea": "[]byte",
    "char": "string",
    "character": "string",
    "character varying": "string",
    "citext": "string",
    "date": "time.Time",
    "decimal": "float64",
    "double precision": "float64",
    "float": "float64",
    "float4": "float64",
    "float8": "float64",
    "int": "int64",
    "int2": "int16",
    "int4": "int64",
    "int8": "int64",
    "integer": "int64",
    "json": "string",
    "jsonb": "string",
    "numeric": "float64",
    "real": "float64",
    "serial": "int64",
    "smallint": "int16",
    "smallserial": "int16",
    "text": "string",
    "timestamp": "time.Time",
    "timestamp with time zone": "time.Time",
    "timestamp without time zone": "time.Time",
    "timestamptz": "time.Time",
    "uuid": "string",
    "varchar": "string",
}

SQLITE_TYPES: Final[dict[str, str]] = {
    "bigint": "int64",
    "blob": "[]byte",
    "boolean": "bool",
    "character": "string",
    "clob": "string",
    "date": "time.Time",
    "datetime": "time.Time",
    "decimal": "float64",
    "double": "float64",
    "double precision": "float64",
    "float": "float64",
    "int": "int64",
    "int2": "int16",
    "int8": "int64",
    "integer": "int64",
    "mediumint": "int64",
    "native character": "string",
    "nchar": "string",
    "numeric": "float64",
    "nvarchar": "string",
    "real": "float64",
    "smallint": "int16",
    "text": "string",
    "timestamp": "time.Time",
    "tinyint": "int64",
    "unsigned big int": "uint64",
    "varchar": "string",
    "varying character": "string",
}


def normalize_type_name(raw_type: str) -> str:
    """Lower-case a raw type name and drop a ``(size)`` suffix.

    Examples:
        >>> normalize_type_name("VARCHAR(255)")
        'varchar'
        >>> normalize_type_name(" Double Precision ")
        'double precision'
    """
    return _TYPE_SUFFIX.sub("", raw_type.strip().lower())


@dataclass(frozen=True, slots=True)
class DialectProfile:
    """Per-backend settings: type table, default schema and metadata query."""

    name: str
    types: Mapping[str, str]
    default_schema: str
    columns_query: str
    fallback_type: str = FALLBACK_GO_TYPE

    def map_type(self, raw_type: str, nullable: bool) -> str:
        """Resolve a raw database type name to a Go type.

        Unknown names resolve to ``fallback_type``. Nullable columns use the
        type's wrapper from ``NULLABLE_WRAPPERS`` when one exists.
        """
        go_type = self.types.get(normalize_type_name(raw_type), self.fallback_type)
        if nullable:
            return NULLABLE_WRAPPERS.get(go_type, go_type)
        return go_type


POSTGRESQL: Final[DialectProfile] = DialectProfile(
    name="postgresql",
    types=MappingProxyType(POSTGRES_TYPES),
    default_schema="public",
    columns_query=POSTGRES_COLUMNS_QUERY,
)

SQLITE: Final[DialectProfile] = DialectProfile(
    name="sqlite",
    types=MappingProxyType(SQLITE_TYPES),
    default_schema="main",
    columns_query=SQLITE_COLUMNS_QUERY,
)

_DIALECTS: dict[str, DialectProfile] = {
    POSTGRESQL.name: POSTGRESQL,
    SQLITE.name: SQLITE,
}

_ALIASES: Final[dict[str, str]] = {
    "postgres": "postgresql",
    "pg": "postgresql",
    "sqlite3": "sqlite",
}


def register_dialect(profile: DialectProfile, replace: bool = False) -> None:
    """Register a dialect profile under its name."""
    if profile.name in _DIALECTS and not replace:
        raise DialectError("already registered", profile.name)
    _DIALECTS[profile.name] = profile


def get_dialect(name: str | DialectProfile) -> DialectProfile:
    """Look up a dialect profile by name or alias."""
    if isinstance(name, DialectProfile):
        return name

    key = name.lower()
    key = _ALIASES.get(key, key)
    try:
        return _DIALECTS[key]
    except KeyError:
        available = ", ".join(sorted(_DIALECTS))
        raise DialectError(f"unknown dialect (available: {available})", name) from None


def list_dialects() -> list[str]:
    return sorted(_DIALECTS)


def map_type(
    raw_type: str,
    nullable: bool,
    dialect: str | DialectProfile = POSTGRESQL,
) -> str:
    """Map a raw database type name to a Go type using a dialect profile."""
    return get_dialect(dialect).map_type(raw_type, nullable)
