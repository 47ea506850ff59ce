import pytest

from gorep_tools import GeneratedSources, generate_sources
from gorep_tools.dto_codegen import DtoGenerator
from gorep_tools.model_codegen import ModelGenerator
from gorep_tools.repository_codegen import RepositoryGenerator
from gorep_tools.shared.errors import PreconditionError, TableNotFoundError


class TestGenerateSources:
    def test_all_stages(self, engine):
        sources = generate_sources(engine, "user_accounts", "store")
        assert isinstance(sources, GeneratedSources)
        assert "type UserAccountsDTO struct {" in sources.dto
        assert "type UserAccounts struct {" in sources.model
        assert "type UserAccountsRepository struct {" in sources.repository
        assert sources.entity.entity_name == "UserAccounts"
        assert sources.entity.field_names() == ["EmailAddress", "IsActive", "UserId"]

    def test_same_as_text_round_trip(self, engine):
        sources = generate_sources(engine, "events", "dto", model_package="model",
                                   repository_package="repository")

        dto = DtoGenerator(engine).generate("dto", "events")
        model = ModelGenerator().generate("model", dto)
        repository = RepositoryGenerator().generate("repository", model)
        assert (sources.dto, sources.model, sources.repository) == (dto, model, repository)

    def test_packages_default_to_first(self, engine):
        sources = generate_sources(engine, "test", "store")
        for text in (sources.dto, sources.model, sources.repository):
            assert text.startswith("package store\n")

    def test_separate_packages(self, engine):
        sources = generate_sources(engine, "test", "dto", "model", "repository")
        assert sources.dto.startswith("package dto\n")
        assert sources.model.startswith("package model\n")
        assert sources.repository.startswith("package repository\n")

    def test_template_overrides(self, engine):
        sources = generate_sources(
            engine,
            "test",
            "store",
            templates={"model": "{{ StructName }}", "repository": "{{ StructName }}Repository"},
        )
        assert sources.model == "Test"
        assert sources.repository == "TestRepository"
        assert "type TestDTO struct {" in sources.dto

    def test_missing_table(self, engine):
        with pytest.raises(TableNotFoundError):
            generate_sources(engine, "missing", "store")

    def test_empty_package(self, engine):
        with pytest.raises(PreconditionError):
            generate_sources(engine, "test", "")

    def test_two_column_table_entity(self, engine):
        entity = generate_sources(engine, "test", "package_name").entity
        assert entity.entity_name == "Test"
        assert [(f.name, f.resolved_type) for f in entity.fields] == [
            ("Id", "int64"),
            ("Value", "string"),
        ]
        assert entity.imports == ()
