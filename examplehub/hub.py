"""Example tree discovery and metadata helpers."""

from __future__ import annotations

import json
import re
from datetime import UTC, datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from .constants import CONTRACTS_DIR, DEFAULT_CATEGORY, METADATA_FILENAME
from .models import ExampleMetadata

_SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")

_IGNORED_ENTRIES = {
    ".git",
    ".DS_Store",
    "node_modules",
    "__pycache__",
}


def list_example_dirs(examples_dir: Path, *, require_metadata: bool = False) -> List[str]:
    """Return sorted example directory names under ``examples_dir``."""
    if not examples_dir.is_dir():
        return []
    names: List[str] = []
    for entry in examples_dir.iterdir():
        if entry.name in _IGNORED_ENTRIES or entry.name.startswith("."):
            continue
        if not entry.is_dir():
            continue
        if require_metadata and not (entry / METADATA_FILENAME).is_file():
            continue
        names.append(entry.name)
    return sorted(names)


def is_valid_slug(name: str) -> bool:
    return bool(_SLUG_PATTERN.match(name))


def format_name(slug: str) -> str:
    """Turn ``simple-counter`` into ``Simple Counter``."""
    return " ".join(word[:1].upper() + word[1:] for word in slug.split("-"))


def contract_name_for(slug: str) -> str:
    """Turn ``simple-counter`` into ``SimpleCounter``."""
    return "".join(word[:1].upper() + word[1:] for word in slug.split("-"))


def utc_timestamp() -> str:
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def read_metadata(example_dir: Path) -> Optional[ExampleMetadata]:
    """Load example.json, returning ``None`` when it is absent."""
    path = example_dir / METADATA_FILENAME
    if not path.is_file():
        return None
    payload = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        payload = {}
    return ExampleMetadata(
        name=str(payload.get("name") or example_dir.name),
        category=str(payload.get("category") or DEFAULT_CATEGORY),
        description=str(payload.get("description") or ""),
        created_at=str(payload.get("createdAt") or ""),
    )


def write_metadata(example_dir: Path, metadata: ExampleMetadata) -> Path:
    payload: Dict[str, Any] = {
        "name": metadata.name,
        "category": metadata.category,
        "description": metadata.description,
        "createdAt": metadata.created_at,
    }
    path = example_dir / METADATA_FILENAME
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    return path


def find_contract(example_dir: Path) -> Optional[Path]:
    """Return the first Solidity file in the example's contracts folder."""
    contracts_dir = example_dir / CONTRACTS_DIR
    if not contracts_dir.is_dir():
        return None
    candidates = sorted(path for path in contracts_dir.iterdir() if path.suffix == ".sol")
    return candidates[0] if candidates else None


__all__ = [
    "contract_name_for",
    "find_contract",
    "format_name",
    "is_valid_slug",
    "list_example_dirs",
    "read_metadata",
    "utc_timestamp",
    "write_metadata",
]
