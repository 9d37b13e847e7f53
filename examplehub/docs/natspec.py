"""NatSpec comment extraction for Solidity sources."""

from __future__ import annotations

import re
from typing import Dict, List, Optional

from ..constants import DEFAULT_CATEGORY, DEFAULT_DIFFICULTY
from ..models import ContractDoc, FunctionDoc

_BLOCK_PATTERN = re.compile(r"/\*\*(?P<body>.*?)\*/\s*(?P<decl>[^\n]*)", re.DOTALL)
_LINE_DOC_PATTERN = re.compile(r"^\s*///\s?(?P<text>.*)$")
_TAG_PATTERN = re.compile(r"^@(?P<tag>[\w:-]+)\s*(?P<text>.*)$")
_CONTRACT_DECL = re.compile(r"^(?:abstract\s+)?contract\s+\w+")
_SUPPORT_DECL = re.compile(r"^(?:library|interface)\s+\w+")
_FUNCTION_DECL = re.compile(r"^function\s+(?P<name>\w+)")

TRACKED_TAGS: tuple[str, ...] = ("title", "notice", "dev", "custom:category", "custom:difficulty")


def parse_contract_doc(source: str) -> ContractDoc:
    """Extract contract-level and function-level NatSpec tags from ``source``.

    Tags are read from ``/** ... */`` blocks and runs of ``///`` lines. The
    contract block is the one preceding the first ``contract`` declaration.
    Interface and library blocks are used only when no contract is documented,
    and the first block in the file is the last resort. Absent
    category and difficulty tags fall back to defaults and are reported in
    ``missing_tags``.
    """
    blocks = _collect_blocks(source)
    contract_tags: Optional[Dict[str, List[str]]] = None
    support_tags: Optional[Dict[str, List[str]]] = None
    functions: List[FunctionDoc] = []

    for tags, decl in blocks:
        if contract_tags is None and _CONTRACT_DECL.match(decl):
            contract_tags = tags
            continue
        if _SUPPORT_DECL.match(decl):
            if support_tags is None:
                support_tags = tags
            continue
        match = _FUNCTION_DECL.match(decl)
        if match:
            functions.append(_function_doc(match.group("name"), tags))

    if contract_tags is None:
        contract_tags = support_tags if support_tags is not None else (blocks[0][0] if blocks else {})

    doc = ContractDoc(
        title=_first(contract_tags, "title"),
        author=_first(contract_tags, "author"),
        notice=" ".join(value for value in contract_tags.get("notice", []) if value).strip(),
        dev="\n".join(contract_tags.get("dev", [])).strip(),
        category=_first(contract_tags, "custom:category"),
        difficulty=_first(contract_tags, "custom:difficulty"),
        functions=functions,
    )
    doc.missing_tags = [tag for tag in TRACKED_TAGS if not contract_tags.get(tag)]
    if not doc.category:
        doc.category = DEFAULT_CATEGORY
    if not doc.difficulty:
        doc.difficulty = DEFAULT_DIFFICULTY
    return doc


def extract_concepts(dev: str) -> List[str]:
    """Return the ``- `` bullet lines found in a ``@dev`` description."""
    return [line.strip() for line in dev.splitlines() if re.match(r"^\s*- .+", line)]


def _collect_blocks(source: str) -> List[tuple[Dict[str, List[str]], str]]:
    found: List[tuple[int, Dict[str, List[str]], str]] = []
    for match in _BLOCK_PATTERN.finditer(source):
        lines = [re.sub(r"^\s*\*\s?", "", line) for line in match.group("body").splitlines()]
        found.append((match.start(), _parse_tags(lines), match.group("decl").strip()))

    lines = source.splitlines()
    offset = 0
    pending: List[str] = []
    pending_start = 0
    for line in lines:
        doc_line = _LINE_DOC_PATTERN.match(line)
        if doc_line:
            if not pending:
                pending_start = offset
            pending.append(doc_line.group("text"))
        elif pending:
            found.append((pending_start, _parse_tags(pending), line.strip()))
            pending = []
        offset += len(line) + 1

    found.sort(key=lambda item: item[0])
    return [(tags, decl) for _, tags, decl in found]


def _parse_tags(lines: List[str]) -> Dict[str, List[str]]:
    tags: Dict[str, List[str]] = {}
    current: Optional[str] = None
    for raw in lines:
        line = raw.strip()
        match = _TAG_PATTERN.match(line)
        if match:
            current = match.group("tag")
            tags.setdefault(current, []).append(match.group("text").strip())
            continue
        if current is None:
            # untagged leading text is an implicit notice
            if line:
                tags.setdefault("notice", []).append(line)
            continue
        if current in {"dev", "notice"}:
            tags[current].append(line)
        elif line:
            tags[current][-1] = f"{tags[current][-1]} {line}".strip()
    for values in tags.values():
        while values and not values[-1]:
            values.pop()
    return tags


def _function_doc(name: str, tags: Dict[str, List[str]]) -> FunctionDoc:
    params: List[tuple[str, str]] = []
    for entry in tags.get("param", []):
        param_name, _, description = entry.partition(" ")
        params.append((param_name, description.strip()))
    return FunctionDoc(
        name=name,
        notice=" ".join(value for value in tags.get("notice", []) if value).strip(),
        dev="\n".join(tags.get("dev", [])).strip(),
        params=params,
        returns=" ".join(tags.get("return", [])).strip(),
    )


def _first(tags: Dict[str, List[str]], tag: str) -> str:
    values = tags.get(tag)
    return values[0].strip() if values else ""


__all__ = ["TRACKED_TAGS", "extract_concepts", "parse_contract_doc"]
