"""Loading example definitions from YAML catalogs."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

import yaml

from ..models import ExampleDefinition

BUILTIN_CATALOG = Path(__file__).resolve().parent.parent / "catalog" / "catalog.yml"


class CatalogError(RuntimeError):
    """Raised when a catalog file is malformed or references missing sources."""


def load_catalog(path: Path | None = None) -> List[ExampleDefinition]:
    """Parse ``path`` (the built-in catalog by default) into example definitions.

    Entries carry ``name``, ``category`` and ``description`` plus an optional
    ``contract_name``. Sources are given inline via ``contract``/``test`` or as
    ``contract_file``/``test_file`` paths relative to the catalog file.
    """
    catalog_path = (path or BUILTIN_CATALOG).expanduser().resolve()
    if not catalog_path.is_file():
        raise FileNotFoundError(f"Catalog not found: {catalog_path}")

    try:
        data = yaml.safe_load(catalog_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise CatalogError(f"Failed to parse {catalog_path.name}: {exc}") from exc

    entries = data.get("examples") if isinstance(data, dict) else data
    if not isinstance(entries, list):
        raise CatalogError(f"{catalog_path.name} must define a list of examples")

    definitions: List[ExampleDefinition] = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise CatalogError(f"Catalog entry #{index + 1} must be a mapping")
        definitions.append(_definition_from_entry(entry, catalog_path.parent, index))
    return definitions


def _definition_from_entry(entry: Dict[str, Any], base: Path, index: int) -> ExampleDefinition:
    name = entry.get("name")
    category = entry.get("category")
    if not isinstance(name, str) or not isinstance(category, str):
        raise CatalogError(f"Catalog entry #{index + 1} needs a name and a category")
    contract_name = entry.get("contract_name")
    return ExampleDefinition(
        name=name,
        category=category,
        description=str(entry.get("description") or ""),
        contract_name=str(contract_name) if contract_name else None,
        contract=_source(entry, "contract", base),
        test=_source(entry, "test", base),
    )


def _source(entry: Dict[str, Any], key: str, base: Path) -> str:
    inline = entry.get(key)
    if isinstance(inline, str):
        return inline
    relative = entry.get(f"{key}_file")
    if not relative:
        return ""
    source_path = base / str(relative)
    if not source_path.is_file():
        raise CatalogError(f"{key} source not found: {source_path}")
    return source_path.read_text(encoding="utf-8")


__all__ = ["BUILTIN_CATALOG", "CatalogError", "load_catalog"]
