"""DTO Code Generator - Generates a Go DTO struct from a database table."""

from .main import (
    DtoGenerator,
    TEMPLATE_NAME,
    generate,
    main,
)

__all__ = [
    "DtoGenerator",
    "TEMPLATE_NAME",
    "generate",
    "main",
]
