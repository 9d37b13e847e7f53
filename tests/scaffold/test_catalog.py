"""Tests for examplehub.scaffold.catalog."""

from __future__ import annotations

import pytest

from examplehub.constants import CATEGORIES
from examplehub.docs import parse_contract_doc
from examplehub.hub import is_valid_slug
from examplehub.scaffold import CatalogError, ExampleCreator, load_catalog
from tests._fixtures.hub_builder import HubBuilder


def test_builtin_catalog_loads_sources() -> None:
    definitions = load_catalog()

    names = [definition.name for definition in definitions]
    assert names[:2] == ["arithmetic-operations", "equality-comparison"]
    assert len(names) == len(set(names)) == 23
    arithmetic = definitions[0]
    assert arithmetic.category == "basic"
    assert arithmetic.contract_name == "ArithmeticOperations"
    assert "contract ArithmeticOperations" in arithmetic.contract
    assert 'describe("ArithmeticOperations"' in arithmetic.test


def test_builtin_catalog_covers_every_category() -> None:
    definitions = load_catalog()

    assert {definition.category for definition in definitions} == set(CATEGORIES)
    for definition in definitions:
        assert is_valid_slug(definition.name)
        assert f"contract {definition.contract_name}" in definition.contract
        assert f'describe("{definition.contract_name}"' in definition.test
        doc = parse_contract_doc(definition.contract)
        assert doc.category == definition.category
        assert "custom:difficulty" not in doc.missing_tags


def test_catalog_accepts_inline_sources(tmp_path) -> None:
    catalog = tmp_path / "catalog.yml"
    catalog.write_text(
        """
examples:
  - name: simple-counter
    category: basic
    description: Counter
    contract: |
      contract SimpleCounter {}
""",
        encoding="utf-8",
    )

    [definition] = load_catalog(catalog)

    assert definition.name == "simple-counter"
    assert definition.contract_name is None
    assert definition.contract == "contract SimpleCounter {}\n"
    assert definition.test == ""


def test_catalog_reports_missing_source_files(tmp_path) -> None:
    catalog = tmp_path / "catalog.yml"
    catalog.write_text(
        "examples:\n  - name: demo\n    category: basic\n    contract_file: missing.sol\n",
        encoding="utf-8",
    )

    with pytest.raises(CatalogError, match="contract source not found"):
        load_catalog(catalog)


def test_catalog_requires_name_and_category(tmp_path) -> None:
    catalog = tmp_path / "catalog.yml"
    catalog.write_text("examples:\n  - description: nameless\n", encoding="utf-8")

    with pytest.raises(CatalogError, match="needs a name and a category"):
        load_catalog(catalog)


def test_builtin_catalog_scaffolds_into_hub(hub: HubBuilder) -> None:
    definitions = load_catalog()
    outcome = ExampleCreator(hub.config()).create_all(definitions)

    assert outcome.created == [definition.name for definition in definitions]
    assert hub.path("examples/arithmetic-operations/contracts/ArithmeticOperations.sol").is_file()
    assert hub.path("examples/equality-comparison/test/EqualityComparison.ts").is_file()
    assert hub.path("examples/blind-auction/contracts/BlindAuction.sol").is_file()
