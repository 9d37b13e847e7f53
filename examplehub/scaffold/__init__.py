"""Example scaffolding: template copies and catalog-driven batches."""

from .catalog import BUILTIN_CATALOG, CatalogError, load_catalog
from .creator import BatchOutcome, ExampleCreator, InvalidCategoryError

__all__ = [
    "BUILTIN_CATALOG",
    "BatchOutcome",
    "CatalogError",
    "ExampleCreator",
    "InvalidCategoryError",
    "load_catalog",
]
