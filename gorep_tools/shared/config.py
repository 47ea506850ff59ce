"""Configuration file loading."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Final

import yaml

from .errors import ConfigError

DEFAULT_CONFIG_NAME: Final[str] = "gorep.yaml"
DATABASE_URL_ENV: Final[str] = "GOREP_DATABASE_URL"
STAGES: Final[tuple[str, ...]] = ("dto", "model", "repository")

_TOP_LEVEL_KEYS: Final[frozenset[str]] = frozenset(
    {"database_url", "dialect", "packages", "templates"}
)


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Settings shared by the command line entry points."""

    database_url: str | None = None
    dialect: str | None = None
    packages: dict[str, str] = field(default_factory=dict)
    templates: dict[str, Path] = field(default_factory=dict)

    def package_for(self, stage: str, default: str | None = None) -> str | None:
        return self.packages.get(stage, default)

    def template_for(self, stage: str) -> Path | None:
        return self.templates.get(stage)

    def resolved_database_url(self) -> str | None:
        return self.database_url or os.environ.get(DATABASE_URL_ENV)

    def merged(self, **overrides: Any) -> GeneratorConfig:
        """Return a copy with every non-None override applied."""
        values = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **values)


def _stage_mapping(data: Any, key: str, config_path: Path) -> dict[str, str]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"'{key}' must be a mapping", str(config_path))

    unknown = sorted(set(data) - set(STAGES))
    if unknown:
        raise ConfigError(
            f"unknown stage(s) in '{key}': {', '.join(unknown)}", str(config_path)
        )
    return {str(stage): str(value) for stage, value in data.items()}


def load_config(config_path: Path) -> GeneratorConfig:
    """Load settings from a YAML file.

    Template paths are resolved relative to the file.

    Raises:
        ConfigError: If the file cannot be read or has an invalid layout.
    """
    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Failed to read config file: {e}", str(config_path)) from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML: {e}", str(config_path)) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("Config root must be a mapping", str(config_path))

    unknown = sorted(set(data) - _TOP_LEVEL_KEYS)
    if unknown:
        raise ConfigError(f"unknown key(s): {', '.join(unknown)}", str(config_path))

    base_dir = config_path.resolve().parent
    templates = {
        stage: (base_dir / path).resolve()
        for stage, path in _stage_mapping(data.get("templates"), "templates", config_path).items()
    }

    return GeneratorConfig(
        database_url=data.get("database_url"),
        dialect=data.get("dialect"),
        packages=_stage_mapping(data.get("packages"), "packages", config_path),
        templates=templates,
    )


def find_config(start: Path | None = None) -> Path | None:
    """Return ``gorep.yaml`` from ``start`` (default: cwd) if it exists."""
    candidate = (start or Path.cwd()) / DEFAULT_CONFIG_NAME
    return candidate if candidate.is_file() else None


def load_optional_config(config_path: Path | None) -> GeneratorConfig:
    """Load an explicit config file, the default one, or empty settings."""
    if config_path is not None:
        return load_config(config_path)
    found = find_config()
    if found is not None:
        return load_config(found)
    return GeneratorConfig()
