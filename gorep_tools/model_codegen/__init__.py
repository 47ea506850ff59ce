"""Model Code Generator - Generates a Go domain model from a DTO struct."""

from .main import (
    ModelGenerator,
    TEMPLATE_NAME,
    build_model_entity,
    main,
)

__all__ = [
    "ModelGenerator",
    "TEMPLATE_NAME",
    "build_model_entity",
    "main",
]
