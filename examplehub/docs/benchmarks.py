"""Reference gas costs for FHEVM operations."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List

from ..logging import get_logger
from ..rendering import TemplateRenderer

BENCHMARKS_FILENAME = "GAS_BENCHMARKS.md"


@dataclass(frozen=True)
class GasBenchmark:
    group: str
    operation: str
    gas_estimate: str
    description: str


BENCHMARKS: tuple[GasBenchmark, ...] = (
    GasBenchmark("Arithmetic", "TFHE.add(euint64, euint64)", "~94,000", "Add two encrypted 64-bit values"),
    GasBenchmark("Arithmetic", "TFHE.sub(euint64, euint64)", "~94,000", "Subtract two encrypted 64-bit values"),
    GasBenchmark("Arithmetic", "TFHE.mul(euint64, euint64)", "~150,000", "Multiply two encrypted 64-bit values"),
    GasBenchmark("Arithmetic", "TFHE.div(euint64, euint64)", "~350,000", "Divide two encrypted 64-bit values"),
    GasBenchmark("Arithmetic", "TFHE.rem(euint64, euint64)", "~350,000", "Remainder of two encrypted 64-bit values"),
    GasBenchmark("Comparison", "TFHE.eq(euint64, euint64)", "~51,000", "Check equality of two encrypted values"),
    GasBenchmark("Comparison", "TFHE.ne(euint64, euint64)", "~51,000", "Check inequality of two encrypted values"),
    GasBenchmark("Comparison", "TFHE.gt(euint64, euint64)", "~51,000", "Greater than comparison"),
    GasBenchmark("Comparison", "TFHE.lt(euint64, euint64)", "~51,000", "Less than comparison"),
    GasBenchmark("Comparison", "TFHE.ge(euint64, euint64)", "~51,000", "Greater or equal comparison"),
    GasBenchmark("Comparison", "TFHE.le(euint64, euint64)", "~51,000", "Less or equal comparison"),
    GasBenchmark("Bitwise", "TFHE.and(euint64, euint64)", "~34,000", "Bitwise AND"),
    GasBenchmark("Bitwise", "TFHE.or(euint64, euint64)", "~34,000", "Bitwise OR"),
    GasBenchmark("Bitwise", "TFHE.xor(euint64, euint64)", "~34,000", "Bitwise XOR"),
    GasBenchmark("Bitwise", "TFHE.not(euint64)", "~33,000", "Bitwise NOT"),
    GasBenchmark("Bitwise", "TFHE.shl(euint64, euint8)", "~116,000", "Shift left"),
    GasBenchmark("Bitwise", "TFHE.shr(euint64, euint8)", "~116,000", "Shift right"),
    GasBenchmark("Conditional", "TFHE.select(ebool, euint64, euint64)", "~45,000", "Conditional select"),
    GasBenchmark("Conditional", "TFHE.min(euint64, euint64)", "~129,000", "Encrypted minimum"),
    GasBenchmark("Conditional", "TFHE.max(euint64, euint64)", "~129,000", "Encrypted maximum"),
    GasBenchmark("Type Conversion", "TFHE.asEuint64(einput, proof)", "~150,000", "Convert encrypted input to euint64"),
    GasBenchmark("Type Conversion", "TFHE.asEuint64(uint64)", "~75,000", "Convert plaintext to euint64"),
    GasBenchmark("Type Conversion", "TFHE.asEbool(bool)", "~75,000", "Convert plaintext to ebool"),
    GasBenchmark("Permissions", "TFHE.allowThis(euint64)", "~25,000", "Allow contract to access handle"),
    GasBenchmark("Permissions", "TFHE.allow(euint64, address)", "~25,000", "Allow address to access handle"),
    GasBenchmark("Permissions", "TFHE.allowTransient(euint64, address)", "~2,500", "Temporary permission (current tx only)"),
    GasBenchmark("Utility", "TFHE.isInitialized(euint64)", "~200", "Check if handle is initialized"),
    GasBenchmark("Utility", "Gateway.requestDecryption(...)", "~100,000+", "Request async decryption"),
)

TYPE_MULTIPLIERS: tuple[tuple[str, str], ...] = (
    ("euint8", "0.6x"),
    ("euint16", "0.7x"),
    ("euint32", "0.85x"),
    ("euint64", "1.0x (baseline)"),
    ("euint128", "1.3x"),
    ("euint256", "1.8x"),
)

OPTIMIZATION_TIPS: tuple[str, ...] = (
    "**Use smaller types when possible** - euint8 uses ~60% of euint64 gas",
    "**Batch operations** - Reduce permission overhead by grouping operations",
    "**Use TFHE.allowTransient** - 10x cheaper than permanent permissions",
    "**Minimize decryption requests** - Gateway calls are expensive",
    "**Avoid division** - Use multiplication when mathematically equivalent",
    "**Cache encrypted constants** - Store frequently used values",
)


def grouped_benchmarks() -> Dict[str, List[GasBenchmark]]:
    groups: Dict[str, List[GasBenchmark]] = {}
    for benchmark in BENCHMARKS:
        groups.setdefault(benchmark.group, []).append(benchmark)
    return groups


class BenchmarkWriter:
    """Renders the gas benchmark tables to the console and to markdown."""

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.logger = get_logger("docs.benchmarks")

    def format_console(self) -> str:
        lines = ["FHEVM Gas Benchmarks", "", "OPERATION GAS ESTIMATES (euint64 baseline)", ""]
        for group, benchmarks in grouped_benchmarks().items():
            lines.append(f"[{group}]")
            for benchmark in benchmarks:
                lines.append(f"  {benchmark.operation:<45}{benchmark.gas_estimate}")
            lines.append("")
        lines.append("TYPE SIZE COMPARISON")
        lines.append("")
        for type_name, multiplier in TYPE_MULTIPLIERS:
            lines.append(f"  {type_name:<15}{multiplier}")
        return "\n".join(lines)

    def render_markdown(self) -> str:
        return self.renderer.render(
            "docs/GAS_BENCHMARKS.md.j2",
            groups=grouped_benchmarks(),
            multipliers=TYPE_MULTIPLIERS,
            tips=OPTIMIZATION_TIPS,
        )

    def write(self, docs_dir: Path) -> Path:
        docs_dir.mkdir(parents=True, exist_ok=True)
        path = docs_dir / BENCHMARKS_FILENAME
        path.write_text(self.render_markdown(), encoding="utf-8")
        self.logger.info("Generated %s", path)
        return path


__all__ = ["BENCHMARKS", "BenchmarkWriter", "GasBenchmark", "TYPE_MULTIPLIERS", "grouped_benchmarks"]
