"""Column metadata loading from a live database."""

from __future__ import annotations

from typing import Iterator

from sqlalchemy import text
from sqlalchemy.engine import Connection, Engine

from .descriptors import ColumnDescriptor, FieldDescriptor
from .dialects import DialectProfile, get_dialect
from .errors import PreconditionError, TableNotFoundError
from .logging_config import get_logger
from .naming import split_table_name

logger = get_logger(__name__)


class SchemaReader:
    """Reads a table's columns through the dialect's metadata query.

    ``bind`` is an SQLAlchemy ``Engine`` (a connection is opened per call)
    or an open ``Connection``, which is used as is.
    """

    __slots__ = ("_bind", "_dialect")

    def __init__(
        self,
        bind: Engine | Connection,
        dialect: str | DialectProfile | None = None,
    ) -> None:
        self._bind = bind
        if dialect is None:
            dialect = bind.dialect.name
        self._dialect = get_dialect(dialect)

    @property
    def dialect(self) -> DialectProfile:
        return self._dialect

    def _execute(self, schema: str, table: str) -> list:
        query = text(self._dialect.columns_query)
        params = {"schema": schema, "table": table}
        logger.debug("Querying %s columns of %s.%s", self._dialect.name, schema, table)

        if isinstance(self._bind, Engine):
            with self._bind.connect() as conn:
                return list(conn.execute(query, params).all())
        return list(self._bind.execute(query, params).all())

    def iter_columns(self, table_name: str) -> Iterator[ColumnDescriptor]:
        """Yield one ColumnDescriptor per metadata row, in catalog order.

        Raises:
            PreconditionError: If the table name is empty.
            TableNotFoundError: If the query returns no rows.
        """
        if not table_name:
            raise PreconditionError("table name")

        schema, table = split_table_name(table_name, self._dialect.default_schema)
        rows = self._execute(schema, table)
        if not rows:
            raise TableNotFoundError(schema, table)

        for name, raw_type, nullable in rows:
            yield ColumnDescriptor(
                name=str(name),
                raw_type=str(raw_type or ""),
                nullable=bool(nullable),
            )

    def fetch_columns(self, table_name: str) -> list[ColumnDescriptor]:
        return list(self.iter_columns(table_name))

    def fetch_fields(self, table_name: str) -> list[FieldDescriptor]:
        """Return the table's columns with Go types, in catalog order."""
        _, entity_name = split_table_name(table_name, self._dialect.default_schema)
        fields = [
            FieldDescriptor(
                name=column.name,
                resolved_type=self._dialect.map_type(column.raw_type, column.nullable),
                owning_entity_name=entity_name,
            )
            for column in self.iter_columns(table_name)
        ]
        logger.debug("Found %d column(s) in %s", len(fields), table_name)
        return fields
