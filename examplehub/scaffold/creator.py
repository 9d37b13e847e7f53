"""Scaffolds example directories from the base template."""

from __future__ import annotations

import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List

from ..config import HubConfig
from ..constants import CATEGORIES, CONTRACTS_DIR, README_FILENAME, TESTS_DIR, TEST_HELPERS
from ..hub import contract_name_for, format_name, is_valid_slug, utc_timestamp, write_metadata
from ..logging import get_logger
from ..models import ExampleDefinition, ExampleMetadata
from ..rendering import TemplateRenderer

# Build output from a template that was used locally is never copied.
_TEMPLATE_IGNORES = shutil.ignore_patterns("node_modules", "artifacts", "cache", "types", "coverage")


class InvalidCategoryError(ValueError):
    """Raised when an example category is outside the supported set."""


@dataclass
class BatchOutcome:
    """Result of scaffolding a batch of definitions."""

    created: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)


class ExampleCreator:
    """Copies the base template and writes example-specific sources and metadata."""

    def __init__(self, config: HubConfig, *, renderer: TemplateRenderer | None = None) -> None:
        self.config = config
        self.renderer = renderer or TemplateRenderer(config.docs.templates_dir)
        self.logger = get_logger("scaffold")

    def create(self, definition: ExampleDefinition) -> Path:
        """Scaffold ``definition`` under the examples directory and return its path."""
        _check_definition(definition)

        template_dir = self.config.base_template_dir
        if not template_dir.is_dir():
            raise FileNotFoundError(
                f"Base template not found at {template_dir}. Please set up base-template first."
            )

        example_dir = self.config.examples_dir / definition.name
        if example_dir.exists():
            raise FileExistsError(f'Example "{definition.name}" already exists.')

        self.logger.info("Copying base template into %s", example_dir)
        self.config.examples_dir.mkdir(parents=True, exist_ok=True)
        shutil.copytree(template_dir, example_dir, ignore=_TEMPLATE_IGNORES)

        contract_name = definition.contract_name or contract_name_for(definition.name)
        contract_file = None
        test_file = None
        if definition.contract:
            contract_file = f"{contract_name}.sol"
            self._replace_sources(
                example_dir / CONTRACTS_DIR,
                contract_file,
                definition.contract,
                removable=lambda path: path.suffix == ".sol",
            )
        if definition.test:
            test_file = f"{contract_name}.ts"
            self._replace_sources(
                example_dir / TESTS_DIR,
                test_file,
                definition.test,
                removable=lambda path: path.suffix == ".ts" and path.name not in TEST_HELPERS,
            )

        write_metadata(
            example_dir,
            ExampleMetadata(
                name=definition.name,
                category=definition.category,
                description=definition.description,
                created_at=utc_timestamp(),
            ),
        )
        readme = self.renderer.render(
            "scaffold/README.md.j2",
            title=format_name(definition.name),
            category=definition.category,
            description=definition.description,
            contract_file=contract_file,
            test_file=test_file,
        )
        (example_dir / README_FILENAME).write_text(readme, encoding="utf-8")

        self.logger.info('Example "%s" created at %s', definition.name, example_dir)
        return example_dir

    def create_all(self, definitions: Iterable[ExampleDefinition]) -> BatchOutcome:
        """Scaffold each definition, skipping any example that already exists."""
        outcome = BatchOutcome()
        for definition in definitions:
            if (self.config.examples_dir / definition.name).exists():
                self.logger.info("Skipping %s (already exists)", definition.name)
                outcome.skipped.append(definition.name)
                continue
            self.create(definition)
            outcome.created.append(definition.name)
        return outcome

    def _replace_sources(self, directory: Path, filename: str, content: str, *, removable) -> None:
        directory.mkdir(parents=True, exist_ok=True)
        for path in sorted(directory.iterdir()):
            if path.is_file() and removable(path):
                self.logger.debug("Removing placeholder %s", path.name)
                path.unlink()
        (directory / filename).write_text(content, encoding="utf-8")


def _check_definition(definition: ExampleDefinition) -> None:
    if definition.category not in CATEGORIES:
        raise InvalidCategoryError(f"Invalid category. Choose from: {', '.join(CATEGORIES)}")
    if not is_valid_slug(definition.name):
        raise ValueError(
            f'Invalid example name "{definition.name}". Use lowercase words separated by hyphens.'
        )


__all__ = ["BatchOutcome", "ExampleCreator", "InvalidCategoryError"]
