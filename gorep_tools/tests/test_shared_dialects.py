import pytest

from gorep_tools.shared.dialects import (
    FALLBACK_GO_TYPE,
    NULLABLE_WRAPPERS,
    POSTGRESQL,
    SQLITE,
    DialectProfile,
    get_dialect,
    list_dialects,
    map_type,
    normalize_type_name,
    register_dialect,
)
from gorep_tools.shared.errors import DialectError


class TestNormalizeTypeName:
    def test_lowercases(self):
        assert normalize_type_name("BIGINT") == "bigint"

    def test_strips_size_suffix(self):
        assert normalize_type_name("VARCHAR(255)") == "varchar"
        assert normalize_type_name("numeric(10, 2)") == "numeric"

    def test_strips_whitespace(self):
        assert normalize_type_name("  text ") == "text"


class TestPostgresMapping:
    @pytest.mark.parametrize(
        "raw_type, expected",
        [
            ("bigint", "int64"),
            ("integer", "int64"),
            ("int4", "int64"),
            ("int8", "int64"),
            ("smallint", "int16"),
            ("int2", "int16"),
            ("boolean", "bool"),
            ("text", "string"),
            ("character varying", "string"),
            ("uuid", "string"),
            ("double precision", "float64"),
            ("numeric", "float64"),
            ("timestamp with time zone", "time.Time"),
            ("date", "time.Time"),
            ("bytea", "[]byte"),
        ],
    )
    def test_not_null(self, raw_type, expected):
        assert map_type(raw_type, False) == expected

    @pytest.mark.parametrize(
        "raw_type, expected",
        [
            ("bigint", "sql.NullInt64"),
            ("smallint", "sql.NullInt16"),
            ("boolean", "sql.NullBool"),
            ("text", "sql.NullString"),
            ("real", "sql.NullFloat64"),
            ("timestamp", "sql.NullTime"),
        ],
    )
    def test_nullable(self, raw_type, expected):
        assert map_type(raw_type, True) == expected

    def test_nullable_without_wrapper_keeps_type(self):
        assert map_type("bytea", True) == "[]byte"

    def test_unknown_type_falls_back(self):
        assert map_type("tsvector", False) == FALLBACK_GO_TYPE
        assert map_type("tsvector", True) == FALLBACK_GO_TYPE

    def test_empty_type_falls_back(self):
        assert map_type("", False) == FALLBACK_GO_TYPE

    def test_case_insensitive(self):
        assert map_type("BIGINT", False) == "int64"


class TestSqliteMapping:
    def test_common_types(self):
        assert SQLITE.map_type("INTEGER", False) == "int64"
        assert SQLITE.map_type("VARCHAR(64)", False) == "string"
        assert SQLITE.map_type("BLOB", False) == "[]byte"
        assert SQLITE.map_type("DATETIME", True) == "sql.NullTime"

    def test_unsigned_has_no_wrapper(self):
        assert SQLITE.map_type("UNSIGNED BIG INT", True) == "uint64"

    def test_unknown_falls_back(self):
        assert SQLITE.map_type("JSONB", False) == FALLBACK_GO_TYPE


class TestNullableWrappers:
    def test_wrapped_types(self):
        assert set(NULLABLE_WRAPPERS) == {
            "bool", "float64", "int16", "int64", "string", "time.Time",
        }

    def test_read_only(self):
        with pytest.raises(TypeError):
            NULLABLE_WRAPPERS["int32"] = "sql.NullInt32"


class TestDialectRegistry:
    def test_get_by_name(self):
        assert get_dialect("postgresql") is POSTGRESQL
        assert get_dialect("sqlite") is SQLITE

    def test_get_by_alias(self):
        assert get_dialect("postgres") is POSTGRESQL
        assert get_dialect("PG") is POSTGRESQL
        assert get_dialect("sqlite3") is SQLITE

    def test_profile_passes_through(self):
        assert get_dialect(SQLITE) is SQLITE

    def test_unknown_dialect(self):
        with pytest.raises(DialectError) as exc_info:
            get_dialect("oracle")
        assert exc_info.value.dialect == "oracle"
        assert "postgresql" in str(exc_info.value)

    def test_list_dialects(self):
        assert {"postgresql", "sqlite"} <= set(list_dialects())

    def test_register_duplicate_rejected(self):
        with pytest.raises(DialectError):
            register_dialect(POSTGRESQL)

    def test_register_custom_profile(self):
        profile = DialectProfile(
            name="test_custom",
            types={"money": "float64"},
            default_schema="dbo",
            columns_query="SELECT 1",
        )
        register_dialect(profile, replace=True)
        assert get_dialect("test_custom") is profile
        assert map_type("money", True, "test_custom") == "sql.NullFloat64"
        assert map_type("text", False, "test_custom") == FALLBACK_GO_TYPE

    def test_default_schemas(self):
        assert POSTGRESQL.default_schema == "public"
        assert SQLITE.default_schema == "main"
