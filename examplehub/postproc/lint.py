"""Whitespace normalisation for generated markdown pages."""

from __future__ import annotations

from typing import Iterator, List


class MarkdownLinter:
    """Normalises line endings, blank runs and heading spacing outside code fences.

    Lines inside a fenced block are kept as-is apart from trailing whitespace,
    so contract sources embedded in example pages survive untouched.
    """

    def lint(self, markdown: str) -> str:
        output: List[str] = []
        for line, in_fence in _scan(markdown):
            if in_fence:
                output.append(line)
            elif not line:
                # Blank runs collapse to one line and never open the page.
                if output and output[-1]:
                    output.append("")
            else:
                if line.startswith("#") and output and output[-1]:
                    output.append("")
                output.append(line)

        while output and not output[-1]:
            output.pop()
        return "\n".join(output) + "\n"


def _scan(markdown: str) -> Iterator[tuple[str, bool]]:
    """Yield right-stripped lines flagged with whether they belong to a code fence."""
    fence = ""
    for raw in markdown.replace("\r\n", "\n").replace("\r", "\n").split("\n"):
        line = raw.rstrip()
        marker = _fence_marker(line)
        if marker and not fence:
            fence = marker
            yield line, True
        elif fence:
            if line.strip() == fence:
                fence = ""
            yield line, True
        else:
            yield line, False


def _fence_marker(line: str) -> str:
    text = line.lstrip()
    if not text.startswith("```"):
        return ""
    return "`" * (len(text) - len(text.lstrip("`")))


__all__ = ["MarkdownLinter"]
