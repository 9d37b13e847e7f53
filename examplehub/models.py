"""Core data models shared across examplehub components."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class ExampleMetadata:
    """Contents of an example's example.json sidecar."""

    name: str
    category: str
    description: str
    created_at: str


@dataclass
class ExampleDefinition:
    """Everything needed to scaffold one example directory."""

    name: str
    category: str
    description: str = ""
    contract_name: Optional[str] = None
    contract: str = ""
    test: str = ""


@dataclass
class FunctionDoc:
    """NatSpec documentation attached to a single contract function."""

    name: str
    notice: str = ""
    dev: str = ""
    params: List[tuple[str, str]] = field(default_factory=list)
    returns: str = ""


@dataclass
class ContractDoc:
    """Contract-level NatSpec tags extracted from a Solidity source file."""

    title: str = ""
    author: str = ""
    notice: str = ""
    dev: str = ""
    category: str = ""
    difficulty: str = ""
    functions: List[FunctionDoc] = field(default_factory=list)
    missing_tags: List[str] = field(default_factory=list)


@dataclass
class CheckResult:
    """Outcome of one structural check against an example directory."""

    name: str
    artifact: str
    passed: bool


@dataclass
class ValidationResult:
    """Aggregated structural and toolchain findings for an example."""

    example: str
    checks: List[CheckResult] = field(default_factory=list)
    toolchain: Dict[str, Optional[bool]] = field(default_factory=dict)
    errors: List[str] = field(default_factory=list)

    @property
    def passed_count(self) -> int:
        return sum(1 for check in self.checks if check.passed)

    @property
    def passed(self) -> bool:
        return all(check.passed for check in self.checks) and not any(
            outcome is False for outcome in self.toolchain.values()
        )

    @property
    def missing(self) -> List[str]:
        return [check.artifact for check in self.checks if not check.passed]
