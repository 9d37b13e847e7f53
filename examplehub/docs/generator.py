"""GitBook documentation generation from example metadata and NatSpec."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List

from ..config import HubConfig
from ..constants import CATEGORIES, CATEGORY_TITLES, README_FILENAME
from ..hub import find_contract, format_name, list_example_dirs, read_metadata
from ..logging import get_logger
from ..models import ContractDoc, ExampleMetadata
from ..postproc.links import LinkValidator
from ..rendering import TemplateRenderer
from .natspec import extract_concepts, parse_contract_doc

SUMMARY_FILENAME = "SUMMARY.md"

# Standalone reference pages linked from SUMMARY.md when present in the docs root.
REFERENCE_PAGES: tuple[tuple[str, str], ...] = (("Gas Benchmarks", "GAS_BENCHMARKS.md"),)


@dataclass
class ExampleEntry:
    """An example prepared for rendering."""

    slug: str
    title: str
    category: str
    description: str
    contract_name: str
    contract_source: str
    doc: ContractDoc


@dataclass
class CategoryGroup:
    category: str
    title: str
    examples: List[ExampleEntry] = field(default_factory=list)


@dataclass
class DocsOutcome:
    """Files produced by a generation run and the warnings raised while reading examples."""

    written: List[Path] = field(default_factory=list)
    unchanged: List[Path] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


class DocsGenerator:
    """Renders the docs index, GitBook summary, category pages and example pages."""

    def __init__(
        self,
        config: HubConfig,
        *,
        renderer: TemplateRenderer | None = None,
        link_validator: LinkValidator | None = None,
    ) -> None:
        self.config = config
        self.renderer = renderer or TemplateRenderer(config.docs.templates_dir)
        self.link_validator = link_validator or LinkValidator()
        self.logger = get_logger("docs")

    def collect(self, outcome: DocsOutcome | None = None) -> List[CategoryGroup]:
        """Read every example with metadata and group it in display order."""
        outcome = outcome or DocsOutcome()
        examples_dir = self.config.examples_dir
        grouped: Dict[str, List[ExampleEntry]] = {category: [] for category in CATEGORIES}

        for slug in list_example_dirs(examples_dir, require_metadata=True):
            metadata = read_metadata(examples_dir / slug)
            if metadata is None:
                continue
            if metadata.category not in grouped:
                self._warn(outcome, f"{slug}: unknown category '{metadata.category}', skipping")
                continue
            grouped[metadata.category].append(self._load_entry(examples_dir / slug, metadata, outcome))

        return [
            CategoryGroup(category=category, title=CATEGORY_TITLES[category], examples=entries)
            for category, entries in grouped.items()
            if entries
        ]

    def generate(self) -> DocsOutcome:
        outcome = DocsOutcome()
        docs_dir = self.config.docs_dir
        groups = self.collect(outcome)
        if not groups:
            self.logger.info("No examples found.")
            return outcome

        self.logger.info("Generating documentation into %s", docs_dir)
        extra_pages = [
            {"title": title, "path": path}
            for title, path in REFERENCE_PAGES
            if (docs_dir / path).is_file()
        ]

        self._write(
            docs_dir / README_FILENAME,
            self.renderer.render(
                "docs/README.md.j2",
                title=self.config.docs.title,
                repository_url=self.config.docs.repository_url,
                groups=groups,
            ),
            outcome,
        )
        self._write(
            docs_dir / SUMMARY_FILENAME,
            self.renderer.render("docs/SUMMARY.md.j2", groups=groups, extra_pages=extra_pages),
            outcome,
        )

        for group in groups:
            category_dir = docs_dir / "examples" / group.category
            self._write(
                category_dir / README_FILENAME,
                self.renderer.render("docs/category.md.j2", group=group),
                outcome,
            )
            for entry in group.examples:
                related = [other for other in group.examples if other.slug != entry.slug]
                self._write(
                    category_dir / f"{entry.slug}.md",
                    self.renderer.render(
                        "docs/example.md.j2",
                        example=entry,
                        doc=entry.doc,
                        contract_name=entry.contract_name,
                        contract_source=entry.contract_source,
                        concepts=extract_concepts(entry.doc.dev),
                        related_examples=related,
                        category_title=group.title,
                    ),
                    outcome,
                )

        self._check_links(outcome)
        self.logger.info(
            "Documentation generated: %d written, %d unchanged",
            len(outcome.written),
            len(outcome.unchanged),
        )
        return outcome

    def _load_entry(self, example_dir: Path, metadata: ExampleMetadata, outcome: DocsOutcome) -> ExampleEntry:
        slug = example_dir.name
        contract_path = find_contract(example_dir)
        source = ""
        contract_name = slug
        if contract_path is None:
            self._warn(outcome, f"{slug}: no Solidity contract found")
        else:
            contract_name = contract_path.stem
            source = contract_path.read_text(encoding="utf-8")

        doc = parse_contract_doc(source)
        if "custom:difficulty" in doc.missing_tags:
            self._warn(outcome, f"{slug}: no @custom:difficulty tag, defaulting to {doc.difficulty}")
        if "custom:category" not in doc.missing_tags and doc.category != metadata.category:
            self._warn(
                outcome,
                f"{slug}: @custom:category '{doc.category}' differs from example.json '{metadata.category}'",
            )

        return ExampleEntry(
            slug=slug,
            title=format_name(slug),
            category=metadata.category,
            description=metadata.description,
            contract_name=contract_name,
            contract_source=source.rstrip(),
            doc=doc,
        )

    def _write(self, path: Path, content: str, outcome: DocsOutcome) -> None:
        if path.is_file() and path.read_text(encoding="utf-8") == content:
            outcome.unchanged.append(path)
            return
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        self.logger.debug("Generated %s", path)
        outcome.written.append(path)

    def _check_links(self, outcome: DocsOutcome) -> None:
        for path in [*outcome.written, *outcome.unchanged]:
            for issue in self.link_validator.validate(path.read_text(encoding="utf-8"), base=path.parent):
                self._warn(outcome, f"{path.name}: {issue}")

    def _warn(self, outcome: DocsOutcome, message: str) -> None:
        self.logger.warning(message)
        outcome.warnings.append(message)


__all__ = ["CategoryGroup", "DocsGenerator", "DocsOutcome", "ExampleEntry"]
