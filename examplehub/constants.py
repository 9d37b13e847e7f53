"""Shared constants for example categories and hub layout."""

from __future__ import annotations

CATEGORIES: tuple[str, ...] = (
    "basic",
    "encryption",
    "decryption",
    "access-control",
    "anti-patterns",
    "advanced",
)

CATEGORY_TITLES: dict[str, str] = {
    "basic": "Basic Examples",
    "encryption": "Encryption",
    "decryption": "Decryption",
    "access-control": "Access Control",
    "anti-patterns": "Anti-Patterns",
    "advanced": "Advanced Examples",
}

DEFAULT_CATEGORY = "basic"
DEFAULT_DIFFICULTY = "beginner"

METADATA_FILENAME = "example.json"
README_FILENAME = "README.md"
PACKAGE_MANIFEST = "package.json"
CONTRACTS_DIR = "contracts"
TESTS_DIR = "test"

# Shared test helpers copied from the base template and kept when a test is replaced.
TEST_HELPERS: frozenset[str] = frozenset({"instance.ts", "signers.ts"})

FHEVM_PACKAGES: tuple[str, ...] = ("fhevm", "@fhevm/solidity")


__all__ = [
    "CATEGORIES",
    "CATEGORY_TITLES",
    "CONTRACTS_DIR",
    "DEFAULT_CATEGORY",
    "DEFAULT_DIFFICULTY",
    "FHEVM_PACKAGES",
    "METADATA_FILENAME",
    "PACKAGE_MANIFEST",
    "README_FILENAME",
    "TESTS_DIR",
    "TEST_HELPERS",
]
