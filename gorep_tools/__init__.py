"""Generators for Go DTO, model and repository code from database tables."""

from .pipeline import GeneratedSources, generate_sources

__version__ = "0.1.0"

__all__ = [
    "GeneratedSources",
    "generate_sources",
]
