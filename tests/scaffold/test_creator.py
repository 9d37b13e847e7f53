"""Tests for examplehub.scaffold.creator."""

from __future__ import annotations

import json

import pytest

from examplehub.models import ExampleDefinition
from examplehub.scaffold import ExampleCreator, InvalidCategoryError
from tests._fixtures.hub_builder import HubBuilder

COUNTER_CONTRACT = """\
// SPDX-License-Identifier: MIT
pragma solidity ^0.8.24;

contract SimpleCounter {
}
"""


def test_create_writes_all_artifacts(hub: HubBuilder) -> None:
    creator = ExampleCreator(hub.config())
    definition = ExampleDefinition(
        name="simple-counter",
        category="basic",
        description="An encrypted counter",
        contract=COUNTER_CONTRACT,
        test='describe("SimpleCounter", function () {});\n',
    )

    example_dir = creator.create(definition)

    assert example_dir == hub.path("examples/simple-counter")
    assert sorted(p.name for p in (example_dir / "contracts").iterdir()) == ["SimpleCounter.sol"]
    assert (example_dir / "contracts" / "SimpleCounter.sol").read_text(encoding="utf-8") == COUNTER_CONTRACT
    assert sorted(p.name for p in (example_dir / "test").iterdir()) == [
        "SimpleCounter.ts",
        "instance.ts",
        "signers.ts",
    ]
    assert (example_dir / "package.json").is_file()
    assert (example_dir / "hardhat.config.ts").is_file()

    metadata = json.loads((example_dir / "example.json").read_text(encoding="utf-8"))
    assert metadata["name"] == "simple-counter"
    assert metadata["category"] == "basic"
    assert metadata["description"] == "An encrypted counter"
    assert metadata["createdAt"].endswith("Z")

    readme = (example_dir / "README.md").read_text(encoding="utf-8")
    assert readme.startswith("# Simple Counter\n")
    assert "> Category: basic" in readme
    assert "An encrypted counter" in readme
    assert "See `contracts/SimpleCounter.sol`" in readme


def test_create_without_sources_keeps_template_placeholders(hub: HubBuilder) -> None:
    example_dir = ExampleCreator(hub.config()).create(
        ExampleDefinition(name="demo", category="basic", description="x")
    )

    assert (example_dir / "contracts" / "MyContract.sol").is_file()
    assert (example_dir / "test" / "MyContract.ts").is_file()
    readme = (example_dir / "README.md").read_text(encoding="utf-8")
    assert "Add your contract to `contracts/`." in readme


def test_create_uses_default_description(hub: HubBuilder) -> None:
    example_dir = ExampleCreator(hub.config()).create(
        ExampleDefinition(name="blind-auction", category="advanced")
    )

    readme = (example_dir / "README.md").read_text(encoding="utf-8")
    assert "A FHEVM example demonstrating blind auction." in readme


def test_create_refuses_existing_example_without_modifying_it(hub: HubBuilder) -> None:
    creator = ExampleCreator(hub.config())
    example_dir = creator.create(ExampleDefinition(name="demo", category="basic", description="first"))
    before = (example_dir / "example.json").read_text(encoding="utf-8")

    with pytest.raises(FileExistsError, match='Example "demo" already exists'):
        creator.create(ExampleDefinition(name="demo", category="advanced", description="second"))

    assert (example_dir / "example.json").read_text(encoding="utf-8") == before


def test_create_rejects_unknown_category(hub: HubBuilder) -> None:
    creator = ExampleCreator(hub.config())

    with pytest.raises(InvalidCategoryError, match="Choose from: basic, encryption"):
        creator.create(ExampleDefinition(name="demo", category="games"))

    assert not hub.path("examples/demo").exists()


def test_create_rejects_non_slug_names(hub: HubBuilder) -> None:
    with pytest.raises(ValueError, match="Invalid example name"):
        ExampleCreator(hub.config()).create(ExampleDefinition(name="My Example", category="basic"))


def test_create_requires_base_template(tmp_path) -> None:
    bare = HubBuilder(tmp_path)

    with pytest.raises(FileNotFoundError, match="Base template not found"):
        ExampleCreator(bare.config()).create(ExampleDefinition(name="demo", category="basic"))


def test_create_skips_template_build_output(hub: HubBuilder) -> None:
    hub.write({"base-template/node_modules/pkg/index.js": "module.exports = {};\n"})

    example_dir = ExampleCreator(hub.config()).create(ExampleDefinition(name="demo", category="basic"))

    assert not (example_dir / "node_modules").exists()


def test_create_all_skips_existing_examples(hub: HubBuilder) -> None:
    creator = ExampleCreator(hub.config())
    creator.create(ExampleDefinition(name="first", category="basic"))

    outcome = creator.create_all(
        [
            ExampleDefinition(name="first", category="basic"),
            ExampleDefinition(name="second", category="encryption", contract=COUNTER_CONTRACT),
        ]
    )

    assert outcome.created == ["second"]
    assert outcome.skipped == ["first"]
    assert hub.path("examples/second/contracts/Second.sol").is_file()
