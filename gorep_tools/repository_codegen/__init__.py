"""Repository Code Generator - Generates a Go repository stub from a model."""

from .main import (
    REPOSITORY_IMPORTS,
    RepositoryGenerator,
    TEMPLATE_NAME,
    main,
)

__all__ = [
    "REPOSITORY_IMPORTS",
    "RepositoryGenerator",
    "TEMPLATE_NAME",
    "main",
]
