"""Result bookkeeping shared by maintenance passes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class MaintenanceReport:
    """Files a maintenance pass changed, left alone, skipped or failed on."""

    name: str
    dry_run: bool = False
    changed: List[str] = field(default_factory=list)
    unchanged: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    def summary(self) -> str:
        prefix = "[DRY RUN] " if self.dry_run else ""
        return (
            f"{prefix}{self.name}: {len(self.changed)} changed, {len(self.unchanged)} unchanged, "
            f"{len(self.skipped)} skipped, {len(self.errors)} errors"
        )


__all__ = ["MaintenanceReport"]
