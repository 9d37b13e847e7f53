"""Tests for example tree helpers."""

from __future__ import annotations

from pathlib import Path

from examplehub.hub import (
    contract_name_for,
    find_contract,
    format_name,
    is_valid_slug,
    list_example_dirs,
    read_metadata,
)
from tests._fixtures.hub_builder import HubBuilder


def test_name_formatting() -> None:
    assert format_name("anti-pattern-missing-allow") == "Anti Pattern Missing Allow"
    assert contract_name_for("erc7984-confidential-token") == "Erc7984ConfidentialToken"


def test_slug_validation() -> None:
    assert is_valid_slug("simple-counter")
    assert is_valid_slug("erc7984-to-erc20-wrapper")
    assert not is_valid_slug("Simple-Counter")
    assert not is_valid_slug("double--dash")
    assert not is_valid_slug("../escape")


def test_list_example_dirs_is_sorted_and_filters(hub: HubBuilder) -> None:
    hub.add_example("zeta")
    hub.add_example("alpha")
    hub.write({"examples/notes.txt": "not an example\n", "examples/scratch/file.txt": "x\n"})

    assert list_example_dirs(hub.path("examples")) == ["alpha", "scratch", "zeta"]
    assert list_example_dirs(hub.path("examples"), require_metadata=True) == ["alpha", "zeta"]


def test_list_example_dirs_missing_root(tmp_path: Path) -> None:
    assert list_example_dirs(tmp_path / "absent") == []


def test_read_metadata_defaults_category(hub: HubBuilder) -> None:
    hub.write({"examples/demo/example.json": '{"name": "demo", "description": "d"}'})

    metadata = read_metadata(hub.path("examples/demo"))

    assert metadata is not None
    assert metadata.category == "basic"
    assert metadata.created_at == ""
    assert read_metadata(hub.path("examples")) is None


def test_find_contract_picks_first_solidity_file(hub: HubBuilder) -> None:
    hub.write(
        {
            "examples/demo/contracts/B.sol": "contract B {}\n",
            "examples/demo/contracts/A.sol": "contract A {}\n",
            "examples/demo/contracts/notes.md": "x\n",
        }
    )

    assert find_contract(hub.path("examples/demo")) == hub.path("examples/demo/contracts/A.sol")
    assert find_contract(hub.path("examples/missing")) is None
