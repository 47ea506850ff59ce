import pytest

from gorep_tools.shared.errors import (
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


class TestGorepError:
    def test_init_no_source(self):
        error = GorepError("test message")
        assert str(error) == "test message"
        assert error.source is None

    def test_init_with_source(self):
        error = GorepError("test message", "users_dto.go")
        assert str(error) == "[users_dto.go] test message"
        assert error.source == "users_dto.go"


class TestPreconditionError:
    def test_message(self):
        error = PreconditionError("package name")
        assert str(error) == "package name must not be empty"
        assert error.field == "package name"

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            raise PreconditionError("table name")

    def test_is_gorep_error(self):
        assert isinstance(PreconditionError("table name"), GorepError)


class TestDialectError:
    def test_init(self):
        error = DialectError("unknown dialect", "oracle")
        assert str(error) == "Dialect 'oracle': unknown dialect"
        assert error.dialect == "oracle"
        assert error.source is None


class TestTableNotFoundError:
    def test_init(self):
        error = TableNotFoundError("public", "missing")
        assert str(error) == "table 'public.missing' not found or has no columns"
        assert error.schema == "public"
        assert error.table == "missing"


class TestTemplateErrors:
    def test_syntax_error_with_line(self):
        error = TemplateSyntaxError("unexpected end of template", 3, "dto.go.j2")
        assert str(error) == "[dto.go.j2] template syntax error: line 3: unexpected end of template"
        assert error.lineno == 3
        assert error.template_name == "dto.go.j2"

    def test_syntax_error_without_line(self):
        error = TemplateSyntaxError("bad")
        assert str(error) == "template syntax error: bad"

    def test_field_error_with_field(self):
        error = TemplateFieldError("undefined", "Missing")
        assert str(error) == "template render error: Field 'Missing': undefined"
        assert error.field_name == "Missing"

    def test_field_error_without_field(self):
        error = TemplateFieldError("undefined")
        assert str(error) == "template render error: undefined"
        assert error.field_name is None


class TestSourceErrors:
    def test_source_parse_error(self):
        error = SourceParseError("expected ';', found 'x'", 4, 12)
        assert str(error) == "source parsing error: 4:12: expected ';', found 'x'"
        assert (error.line, error.column) == (4, 12)

    def test_no_structure_error(self):
        assert str(NoStructureError()) == "no structure was found in source contents"

    def test_no_fields_error(self):
        error = NoFieldsError("UserDTO")
        assert str(error) == "no fields found in structure 'UserDTO'"
        assert error.struct_name == "UserDTO"


class TestConfigError:
    def test_init_with_source(self):
        error = ConfigError("Invalid YAML", "gorep.yaml")
        assert str(error) == "[gorep.yaml] Invalid YAML"
        assert isinstance(error, GorepError)
