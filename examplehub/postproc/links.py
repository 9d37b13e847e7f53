"""Relative link checks for generated documentation."""

from __future__ import annotations

import re
from pathlib import Path
from typing import List


class LinkValidator:
    """Reports relative markdown links whose targets do not exist on disk."""

    _LINK_PATTERN = re.compile(r"\[([^\]]+)\]\(([^)]*)\)")

    def validate(self, markdown: str, *, base: Path) -> List[str]:
        """Return issues for links in ``markdown`` resolved against ``base``."""
        issues: List[str] = []
        in_code = False
        for line in markdown.splitlines():
            if line.lstrip().startswith("```"):
                in_code = not in_code
                continue
            if in_code:
                continue
            for match in self._LINK_PATTERN.finditer(line):
                target = match.group(2).strip()
                if not target:
                    issues.append("Empty link target detected")
                    continue
                if target.startswith(("http://", "https://", "mailto:", "#")):
                    continue
                cleaned = target.split("#", 1)[0].split("?", 1)[0]
                if not cleaned:
                    continue
                if not (base / cleaned).exists():
                    issues.append(f"Link target not found: {target}")
        return issues


__all__ = ["LinkValidator"]
