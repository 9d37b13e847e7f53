"""Edits to example package.json manifests."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Sequence

from ..config import HubConfig
from ..constants import PACKAGE_MANIFEST
from ..hub import list_example_dirs
from ..logging import get_logger
from .report import MaintenanceReport

ManifestEdit = Callable[[Dict[str, Any]], bool]

_DEPENDENCY_SECTIONS = ("dependencies", "devDependencies")

LEGACY_FHEVM_VERSION = "^0.5.4"

CROSS_ENV_SCRIPTS: Dict[str, str] = {
    "compile": "hardhat compile",
    "coverage": (
        'hardhat coverage --solcoverjs ./.solcover.js --temp artifacts --testfiles "test/**/*.ts"'
        " && npm run typechain"
    ),
    "typechain": "hardhat typechain",
}


def pin_dependencies(packages: Sequence[str], version: str) -> ManifestEdit:
    """Pin each tracked package that is already declared to ``version``."""

    def edit(manifest: Dict[str, Any]) -> bool:
        changed = False
        for section in _DEPENDENCY_SECTIONS:
            deps = manifest.get(section)
            if not isinstance(deps, dict):
                continue
            for package in packages:
                if package in deps and deps[package] != version:
                    deps[package] = version
                    changed = True
        return changed

    return edit


def use_legacy_fhevm(manifest: Dict[str, Any]) -> bool:
    """Swap the ``@fhevm/solidity`` dependency for ``fhevm`` at the legacy pin."""
    deps = manifest.get("dependencies")
    if not isinstance(deps, dict) or "@fhevm/solidity" not in deps:
        return False
    del deps["@fhevm/solidity"]
    deps["fhevm"] = LEGACY_FHEVM_VERSION
    return True


def drop_cross_env(manifest: Dict[str, Any]) -> bool:
    """Remove the cross-env dev dependency and the scripts that wrapped it."""
    changed = False
    dev_deps = manifest.get("devDependencies")
    if isinstance(dev_deps, dict) and "cross-env" in dev_deps:
        del dev_deps["cross-env"]
        changed = True
    scripts = manifest.get("scripts")
    if isinstance(scripts, dict):
        for script, command in CROSS_ENV_SCRIPTS.items():
            if script in scripts and scripts[script] != command:
                scripts[script] = command
                changed = True
    return changed


@dataclass(frozen=True)
class ManifestPass:
    name: str
    description: str
    edit: ManifestEdit


def dependency_pass(config: HubConfig, version: str | None = None) -> ManifestPass:
    target = version or config.dependencies.version
    return ManifestPass(
        name="update-dependencies",
        description=f"Pin {', '.join(config.dependencies.packages)} to {target}",
        edit=pin_dependencies(config.dependencies.packages, target),
    )


PACKAGE_DEPS = ManifestPass(
    name="package-deps",
    description=f"Replace @fhevm/solidity with fhevm {LEGACY_FHEVM_VERSION}",
    edit=use_legacy_fhevm,
)

CROSS_ENV = ManifestPass(
    name="cross-env",
    description="Remove cross-env and rewrite compile/coverage/typechain scripts",
    edit=drop_cross_env,
)


class ManifestUpdater:
    """Runs a manifest pass over every example's package.json."""

    def __init__(self, config: HubConfig) -> None:
        self.config = config
        self.logger = get_logger("maintenance.manifests")

    def describe_base_template(self) -> str | None:
        manifest_path = self.config.base_template_dir / PACKAGE_MANIFEST
        if not manifest_path.is_file():
            return None
        manifest = _read_manifest(manifest_path)
        found = []
        for package in self.config.dependencies.packages:
            for section in _DEPENDENCY_SECTIONS:
                deps = manifest.get(section)
                if isinstance(deps, dict) and package in deps:
                    found.append(f"{package}@{deps[package]}")
        return ", ".join(found) or "Not found"

    def run(self, manifest_pass: ManifestPass, *, dry_run: bool = False) -> MaintenanceReport:
        report = MaintenanceReport(name=manifest_pass.name, dry_run=dry_run)
        self.logger.info("%s", manifest_pass.description)
        for name in list_example_dirs(self.config.examples_dir):
            manifest_path = self.config.examples_dir / name / PACKAGE_MANIFEST
            if not manifest_path.is_file():
                self.logger.info("  [SKIP] %s - No package.json found", name)
                report.skipped.append(name)
                continue
            try:
                manifest = _read_manifest(manifest_path)
            except ValueError as exc:
                self.logger.warning("  [ERROR] %s - %s", name, exc)
                report.errors.append(f"{name}: {exc}")
                continue
            if not manifest_pass.edit(manifest):
                report.unchanged.append(name)
                continue
            if not dry_run:
                _write_manifest(manifest_path, manifest)
            self.logger.info("  [OK] %s", name)
            report.changed.append(name)
        return report


def _read_manifest(path: Path) -> Dict[str, Any]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path.name} must contain a JSON object")
    return data


def _write_manifest(path: Path, manifest: Dict[str, Any]) -> None:
    path.write_text(json.dumps(manifest, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")


__all__ = [
    "CROSS_ENV",
    "ManifestPass",
    "ManifestUpdater",
    "PACKAGE_DEPS",
    "dependency_pass",
    "drop_cross_env",
    "pin_dependencies",
    "use_legacy_fhevm",
]
