"""Documentation generation for the example hub."""

from .benchmarks import BenchmarkWriter
from .generator import CategoryGroup, DocsGenerator, DocsOutcome, ExampleEntry
from .natspec import extract_concepts, parse_contract_doc

__all__ = [
    "BenchmarkWriter",
    "CategoryGroup",
    "DocsGenerator",
    "DocsOutcome",
    "ExampleEntry",
    "extract_concepts",
    "parse_contract_doc",
]
