"""Custom exceptions for the generators."""

from __future__ import annotations


class GorepError(Exception):
    """Base exception for generation errors."""

    def __init__(self, message: str, source: str | None = None) -> None:
        self.source = source
        full_message = f"{message}" if not source else f"[{source}] {message}"
        super().__init__(full_message)


class PreconditionError(GorepError, ValueError):
    """Raised when a required input is empty."""

    def __init__(self, field: str, source: str | None = None) -> None:
        self.field = field
        super().__init__(f"{field} must not be empty", source)


class DialectError(GorepError):
    """Raised for dialect-specific issues."""

    def __init__(
        self,
        message: str,
        dialect: str,
        source: str | None = None,
    ) -> None:
        self.dialect = dialect
        super().__init__(f"Dialect '{dialect}': {message}", source)


class TableNotFoundError(GorepError):
    """Raised when the metadata query returns no columns.

    A missing table and a table without columns look the same in the
    metadata catalog, so both are reported with this error.
    """

    def __init__(self, schema: str, table: str, source: str | None = None) -> None:
        self.schema = schema
        self.table = table
        super().__init__(
            f"table '{schema}.{table}' not found or has no columns", source
        )


class TemplateSyntaxError(GorepError):
    """Raised when a template cannot be parsed."""

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        template_name: str | None = None,
    ) -> None:
        self.lineno = lineno
        self.template_name = template_name
        location = f"line {lineno}: " if lineno is not None else ""
        super().__init__(f"template syntax error: {location}{message}", template_name)


class TemplateFieldError(GorepError):
    """Raised when a template references data that does not exist."""

    def __init__(
        self,
        message: str,
        field_name: str | None = None,
        template_name: str | None = None,
    ) -> None:
        self.field_name = field_name
        self.template_name = template_name
        if field_name:
            message = f"Field '{field_name}': {message}"
        super().__init__(f"template render error: {message}", template_name)


class SourceParseError(GorepError):
    """Raised when Go source text is not valid syntax."""

    def __init__(
        self,
        message: str,
        line: int,
        column: int,
        source: str | None = None,
    ) -> None:
        self.line = line
        self.column = column
        super().__init__(f"source parsing error: {line}:{column}: {message}", source)


class NoStructureError(GorepError):
    """Raised when parsed source declares no type."""

    def __init__(self, source: str | None = None) -> None:
        super().__init__("no structure was found in source contents", source)


class NoFieldsError(GorepError):
    """Raised when the declared structure has no exported fields."""

    def __init__(self, struct_name: str, source: str | None = None) -> None:
        self.struct_name = struct_name
        super().__init__(f"no fields found in structure '{struct_name}'", source)


class ConfigError(GorepError):
    """Raised when the configuration file is invalid."""
