"""Category definitions and alias tables."""

from .categories import (
    DEFAULT_REGISTRY,
    DISPLAY_CATEGORIES,
    CategoryDefinition,
    CategoryRegistry,
    load_registry,
)

__all__ = [
    "CategoryDefinition",
    "CategoryRegistry",
    "DEFAULT_REGISTRY",
    "DISPLAY_CATEGORIES",
    "load_registry",
]
