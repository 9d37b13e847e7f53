"""Project statistics across the example tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List

from .constants import CATEGORIES, CONTRACTS_DIR, TESTS_DIR, TEST_HELPERS
from .hub import list_example_dirs, read_metadata


@dataclass
class HubStats:
    examples: int = 0
    contracts: int = 0
    tests: int = 0
    lines: int = 0
    by_category: Dict[str, List[str]] = field(default_factory=dict)


def collect_stats(examples_dir: Path) -> HubStats:
    """Count examples, contracts, test files and their lines of code."""
    stats = HubStats(by_category={category: [] for category in CATEGORIES})
    for name in list_example_dirs(examples_dir):
        example_dir = examples_dir / name
        stats.examples += 1

        for contract in _files(example_dir / CONTRACTS_DIR, ".sol"):
            stats.contracts += 1
            stats.lines += _count_lines(contract)
        for test in _files(example_dir / TESTS_DIR, ".ts"):
            if test.name in TEST_HELPERS:
                continue
            stats.tests += 1
            stats.lines += _count_lines(test)

        metadata = read_metadata(example_dir)
        if metadata is not None and metadata.category in stats.by_category:
            stats.by_category[metadata.category].append(name)
    return stats


def _files(directory: Path, suffix: str) -> List[Path]:
    if not directory.is_dir():
        return []
    return sorted(path for path in directory.iterdir() if path.is_file() and path.suffix == suffix)


def _count_lines(path: Path) -> int:
    return len(path.read_text(encoding="utf-8").split("\n"))


__all__ = ["HubStats", "collect_stats"]
