"""Helper utilities for constructing temporary example hubs in tests."""

from __future__ import annotations

import json
import textwrap
from pathlib import Path
from typing import Mapping

from examplehub.config import HubConfig, load_config

PLACEHOLDER_CONTRACT = """\
// SPDX-License-Identifier: MIT
pragma solidity ^0.8.24;

import "fhevm/lib/TFHE.sol";

/**
 * @title MyContract
 * @notice Placeholder contract shipped with the base template
 */
contract MyContract {
}
"""

BASE_PACKAGE = {
    "name": "fhevm-example",
    "version": "0.1.0",
    "scripts": {"compile": "cross-env TS_NODE_TRANSPILE_ONLY=true hardhat compile", "test": "hardhat test"},
    "dependencies": {"fhevm": "^0.5.4"},
    "devDependencies": {"cross-env": "^7.0.3", "hardhat": "^2.22.0"},
}


class HubBuilder:
    """Writes a base template and examples into a throwaway hub root."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "hub"
        self.root.mkdir()

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries relative to the hub root."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content).lstrip("\n")
            path.write_text(normalised, encoding="utf-8")

    def with_base_template(self) -> "HubBuilder":
        self.write(
            {
                "base-template/contracts/MyContract.sol": PLACEHOLDER_CONTRACT,
                "base-template/test/MyContract.ts": 'describe("MyContract", function () {});\n',
                "base-template/test/instance.ts": "export async function createInstance() {}\n",
                "base-template/test/signers.ts": "export async function getSigners() {}\n",
                "base-template/hardhat.config.ts": "export default {};\n",
                "base-template/package.json": json.dumps(BASE_PACKAGE, indent=2),
            }
        )
        return self

    def add_example(
        self,
        name: str,
        *,
        category: str = "basic",
        description: str = "",
        contract: str | None = PLACEHOLDER_CONTRACT,
        contract_name: str = "MyContract",
        package: Mapping[str, object] | None = None,
    ) -> Path:
        """Write a complete example directory without going through the scaffolder."""
        files = {
            f"examples/{name}/README.md": f"# {name}\n",
            f"examples/{name}/test/{contract_name}.ts": "describe('x', () => {});\n",
            f"examples/{name}/package.json": json.dumps(package or BASE_PACKAGE, indent=2),
            f"examples/{name}/example.json": json.dumps(
                {
                    "name": name,
                    "category": category,
                    "description": description,
                    "createdAt": "2024-01-01T00:00:00.000Z",
                },
                indent=2,
            ),
        }
        if contract is not None:
            files[f"examples/{name}/contracts/{contract_name}.sol"] = contract
        self.write(files)
        return self.root / "examples" / name

    def config(self) -> HubConfig:
        return load_config(self.root)

    def path(self, relative: str = "") -> Path:
        return self.root / relative if relative else self.root


__all__ = ["BASE_PACKAGE", "HubBuilder", "PLACEHOLDER_CONTRACT"]
