"""Validation package for scaffolded examples."""

from .structure import (
    STRUCTURAL_CHECKS,
    ExampleValidator,
    StructuralCheck,
    ValidationReport,
    format_result,
    format_toolchain,
)
from .toolchain import NpmToolchain

__all__ = [
    "STRUCTURAL_CHECKS",
    "ExampleValidator",
    "NpmToolchain",
    "StructuralCheck",
    "ValidationReport",
    "format_result",
    "format_toolchain",
]
