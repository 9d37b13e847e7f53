"""Find/replace passes over example Solidity sources."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Sequence

from ..config import HubConfig
from ..constants import CONTRACTS_DIR
from ..hub import list_example_dirs
from ..logging import get_logger
from .report import MaintenanceReport

Transform = Callable[[str], str]


@dataclass(frozen=True)
class RegexRule:
    pattern: re.Pattern[str]
    replacement: str

    def __call__(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


def _rule(pattern: str, replacement: str) -> RegexRule:
    return RegexRule(re.compile(pattern), replacement)


def _add_gateway_import(text: str) -> str:
    if "GatewayCaller" not in text or "gateway/lib/Gateway.sol" in text:
        return text
    return text.replace(
        'import "fhevm/gateway/GatewayCaller.sol";',
        'import "fhevm/gateway/GatewayCaller.sol";\nimport "fhevm/gateway/lib/Gateway.sol";',
    )


@dataclass(frozen=True)
class SourceRewrite:
    """A named, ordered set of text transforms applied to every contract."""

    name: str
    description: str
    transforms: Sequence[Transform]
    include_base_template: bool = False

    def apply(self, text: str) -> str:
        for transform in self.transforms:
            text = transform(text)
        return text


IMPORT_PATHS = SourceRewrite(
    name="imports",
    description='Rewrite "fhevm/..." imports to "@fhevm/solidity/..."',
    transforms=(
        _rule(r'import "fhevm/', 'import "@fhevm/solidity/'),
        _rule(r"import 'fhevm/", "import '@fhevm/solidity/"),
    ),
    include_base_template=True,
)

ALLOW_THIS = SourceRewrite(
    name="allow-this",
    description="Rewrite TFHE.allowThis(x) to TFHE.allow(x, address(this))",
    # Arguments may contain calls nested one level deep, e.g. allowThis(TFHE.add(a, b)).
    transforms=(
        _rule(r"TFHE\.allowThis\(((?:[^()]|\([^()]*\))+)\)", r"TFHE.allow(\1, address(this))"),
    ),
)

LEGACY_CONFIG = SourceRewrite(
    name="legacy-config",
    description="Drop Sepolia config base contracts for the fhevm v0.5 API",
    transforms=(
        _rule(r'import "fhevm/config/ZamaFHEVMConfig\.sol";\n?', ""),
        _rule(r'import "fhevm/config/ZamaGatewayConfig\.sol";\n?', ""),
        _add_gateway_import,
        _rule(r"is\s+SepoliaZamaFHEVMConfig,\s*SepoliaZamaGatewayConfig,\s*GatewayCaller", "is GatewayCaller"),
        _rule(r"is\s+SepoliaZamaFHEVMConfig,\s*GatewayCaller", "is GatewayCaller"),
        _rule(r"is\s+SepoliaZamaFHEVMConfig,\s*SepoliaZamaGatewayConfig\s*\{", "{"),
        _rule(r"is\s+SepoliaZamaFHEVMConfig\s*\{", "{"),
        _rule(r",\s*SepoliaZamaFHEVMConfig", ""),
        _rule(r"SepoliaZamaFHEVMConfig,\s*", ""),
        _rule(r",\s*SepoliaZamaGatewayConfig", ""),
        _rule(r"SepoliaZamaGatewayConfig,\s*", ""),
    ),
)

SOURCE_REWRITES: Dict[str, SourceRewrite] = {
    rewrite.name: rewrite for rewrite in (IMPORT_PATHS, ALLOW_THIS, LEGACY_CONFIG)
}


class SourceRewriter:
    """Applies a rewrite to each contract file, writing only files that change."""

    def __init__(self, config: HubConfig) -> None:
        self.config = config
        self.logger = get_logger("maintenance.sources")

    def contract_files(self, *, include_base_template: bool = False) -> List[Path]:
        files: List[Path] = []
        for name in list_example_dirs(self.config.examples_dir):
            files.extend(_solidity_files(self.config.examples_dir / name / CONTRACTS_DIR))
        if include_base_template:
            files.extend(_solidity_files(self.config.base_template_dir / CONTRACTS_DIR))
        return files

    def run(self, rewrite: SourceRewrite, *, dry_run: bool = False) -> MaintenanceReport:
        report = MaintenanceReport(name=rewrite.name, dry_run=dry_run)
        self.logger.info("%s", rewrite.description)
        for path in self.contract_files(include_base_template=rewrite.include_base_template):
            original = path.read_text(encoding="utf-8")
            updated = rewrite.apply(original)
            label = self._label(path)
            if updated == original:
                report.unchanged.append(label)
                continue
            if not dry_run:
                path.write_text(updated, encoding="utf-8")
            self.logger.info("  [OK] %s", label)
            report.changed.append(label)
        return report

    def _label(self, path: Path) -> str:
        try:
            return path.relative_to(self.config.root).as_posix()
        except ValueError:
            return str(path)


def _solidity_files(directory: Path) -> Iterable[Path]:
    if not directory.is_dir():
        return []
    return sorted(path for path in directory.iterdir() if path.is_file() and path.suffix == ".sol")


__all__ = ["ALLOW_THIS", "IMPORT_PATHS", "LEGACY_CONFIG", "SOURCE_REWRITES", "SourceRewrite", "SourceRewriter"]
