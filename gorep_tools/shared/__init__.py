"""Shared utilities for the Go code generators."""

from .descriptors import (
    ColumnDescriptor,
    EntityDescriptor,
    FieldDescriptor,
    SourceStructure,
    sort_fields,
)
from .dialects import (
    FALLBACK_GO_TYPE,
    NULLABLE_WRAPPERS,
    POSTGRESQL,
    SQLITE,
    DialectProfile,
    get_dialect,
    list_dialects,
    map_type,
    register_dialect,
)
from .errors import (
    ConfigError,
    DialectError,
    GorepError,
    NoFieldsError,
    NoStructureError,
    PreconditionError,
    SourceParseError,
    TableNotFoundError,
    TemplateFieldError,
    TemplateSyntaxError,
)
from .go_source import GoFile, StructField, TypeSpec, extract_structure, parse_go_source
from .imports import GO_TYPE_IMPORTS, resolve_imports
from .naming import (
    is_exported,
    lowercase_first,
    sanitize_identifier,
    snake_to_camel,
    split_table_name,
    strip_dto_marker,
    uppercase_first,
)
from .rendering import TEMPLATE_DIR, TemplateRenderer, load_template
from .schema_reader import SchemaReader

__all__ = [
    # Descriptors
    "ColumnDescriptor",
    "EntityDescriptor",
    "FieldDescriptor",
    "SourceStructure",
    "sort_fields",
    # Type mapping
    "FALLBACK_GO_TYPE",
    "NULLABLE_WRAPPERS",
    "POSTGRESQL",
    "SQLITE",
    "DialectProfile",
    "get_dialect",
    "list_dialects",
    "map_type",
    "register_dialect",
    # Errors
    "ConfigError",
    "DialectError",
    "GorepError",
    "NoFieldsError",
    "NoStructureError",
    "PreconditionError",
    "SourceParseError",
    "TableNotFoundError",
    "TemplateFieldError",
    "TemplateSyntaxError",
    # Go source
    "GoFile",
    "StructField",
    "TypeSpec",
    "extract_structure",
    "parse_go_source",
    # Imports
    "GO_TYPE_IMPORTS",
    "resolve_imports",
    # Naming utilities
    "is_exported",
    "lowercase_first",
    "sanitize_identifier",
    "snake_to_camel",
    "split_table_name",
    "strip_dto_marker",
    "uppercase_first",
    # Rendering
    "TEMPLATE_DIR",
    "TemplateRenderer",
    "load_template",
    # Database
    "SchemaReader",
]
