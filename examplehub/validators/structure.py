"""Structural validation of scaffolded example directories."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Sequence

from ..constants import CONTRACTS_DIR, METADATA_FILENAME, PACKAGE_MANIFEST, README_FILENAME, TESTS_DIR
from ..hub import list_example_dirs
from ..logging import get_logger
from ..models import CheckResult, ValidationResult
from .toolchain import NpmToolchain


def _has_contract(example_dir: Path) -> bool:
    contracts = example_dir / CONTRACTS_DIR
    return contracts.is_dir() and any(path.suffix == ".sol" for path in contracts.iterdir())


@dataclass(frozen=True)
class StructuralCheck:
    """A fixed-path existence condition every example must satisfy."""

    name: str
    artifact: str
    predicate: Callable[[Path], bool]


STRUCTURAL_CHECKS: tuple[StructuralCheck, ...] = (
    StructuralCheck("package_json", PACKAGE_MANIFEST, lambda d: (d / PACKAGE_MANIFEST).is_file()),
    StructuralCheck("contracts", f"{CONTRACTS_DIR}/*.sol", _has_contract),
    StructuralCheck("tests", f"{TESTS_DIR}/", lambda d: (d / TESTS_DIR).is_dir()),
    StructuralCheck("readme", README_FILENAME, lambda d: (d / README_FILENAME).is_file()),
    StructuralCheck("metadata", METADATA_FILENAME, lambda d: (d / METADATA_FILENAME).is_file()),
)


@dataclass
class ValidationReport:
    """Per-example results plus aggregate counts."""

    results: List[ValidationResult]

    @property
    def passed(self) -> int:
        return sum(1 for result in self.results if result.passed)

    @property
    def failed(self) -> int:
        return len(self.results) - self.passed


class ExampleValidator:
    """Checks every example for its expected artifacts without halting on findings."""

    def __init__(
        self,
        checks: Sequence[StructuralCheck] = STRUCTURAL_CHECKS,
        *,
        toolchain: NpmToolchain | None = None,
    ) -> None:
        self.checks = tuple(checks)
        self.toolchain = toolchain or NpmToolchain()
        self.logger = get_logger("validators")

    def validate_all(
        self, examples_dir: Path, *, skip_compile: bool = False, skip_tests: bool = False
    ) -> ValidationReport:
        results: List[ValidationResult] = []
        for name in list_example_dirs(examples_dir):
            self.logger.debug("Validating %s", name)
            results.append(
                self.validate(examples_dir / name, skip_compile=skip_compile, skip_tests=skip_tests)
            )
        return ValidationReport(results=results)

    def validate(
        self, example_dir: Path, *, skip_compile: bool = False, skip_tests: bool = False
    ) -> ValidationResult:
        result = ValidationResult(example=example_dir.name)
        for check in self.checks:
            passed = check.predicate(example_dir)
            result.checks.append(CheckResult(name=check.name, artifact=check.artifact, passed=passed))
            if not passed:
                result.errors.append(f"Missing {check.artifact}")

        result.toolchain["compile"] = self._run_step(example_dir, "compile", skip_compile, result)
        # Tests cannot pass against contracts that failed to compile.
        tests_skipped = skip_tests or result.toolchain["compile"] is False
        result.toolchain["test"] = self._run_step(example_dir, "test", tests_skipped, result)
        return result

    def _run_step(self, example_dir: Path, script: str, skip: bool, result: ValidationResult) -> bool | None:
        if skip or not self.toolchain.is_ready(example_dir):
            return None
        try:
            succeeded = self.toolchain.run_script(example_dir, script)
        except OSError as exc:
            result.errors.append(f"npm run {script} could not start: {exc}")
            return False
        if not succeeded:
            result.errors.append(f"npm run {script} failed")
        return succeeded


def format_result(result: ValidationResult) -> str:
    """Render the one-line summary for an example."""
    total = len(result.checks)
    line = f"{result.passed_count}/{total} checks passed"
    if result.missing:
        line += " — Missing " + ", ".join(result.missing)
    return line


def format_toolchain(result: ValidationResult) -> str:
    labels = {True: "passed", False: "failed", None: "skipped"}
    return ", ".join(f"{step} {labels[outcome]}" for step, outcome in result.toolchain.items())


__all__ = [
    "ExampleValidator",
    "STRUCTURAL_CHECKS",
    "StructuralCheck",
    "ValidationReport",
    "format_result",
    "format_toolchain",
]
