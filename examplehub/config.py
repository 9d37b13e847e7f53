"""Configuration loading for examplehub (.examplehub.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .constants import FHEVM_PACKAGES

CONFIG_FILENAME = ".examplehub.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class PathsConfig:
    """Hub directory layout, relative to the hub root."""

    examples: str = "examples"
    base_template: str = "base-template"
    docs: str = "docs"


@dataclass
class DocsConfig:
    """Settings for the documentation generator."""

    title: str = "FHEVM Example Hub"
    repository_url: Optional[str] = None
    templates_dir: Optional[Path] = None


@dataclass
class DependencyConfig:
    """Dependencies pinned by update-dependencies."""

    packages: List[str] = field(default_factory=lambda: list(FHEVM_PACKAGES))
    version: str = "latest"


@dataclass
class HubConfig:
    """Represents the settings defined in .examplehub.yml."""

    root: Path
    paths: PathsConfig = field(default_factory=PathsConfig)
    docs: DocsConfig = field(default_factory=DocsConfig)
    dependencies: DependencyConfig = field(default_factory=DependencyConfig)

    @property
    def examples_dir(self) -> Path:
        return self.root / self.paths.examples

    @property
    def base_template_dir(self) -> Path:
        return self.root / self.paths.base_template

    @property
    def docs_dir(self) -> Path:
        return self.root / self.paths.docs


def load_config(config_path: Path) -> HubConfig:
    """Load configuration for the hub at ``config_path``, falling back to defaults.

    ``config_path`` is the hub root or its config file. A root that does not
    exist raises ``FileNotFoundError``.
    """
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return HubConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    paths = PathsConfig()
    paths_data = _as_dict(data.get("paths"))
    if paths_data:
        paths.examples = _as_str(paths_data.get("examples")) or paths.examples
        paths.base_template = _as_str(paths_data.get("base_template")) or paths.base_template
        paths.docs = _as_str(paths_data.get("docs")) or paths.docs

    docs = DocsConfig()
    docs_data = _as_dict(data.get("docs"))
    if docs_data:
        docs.title = _as_str(docs_data.get("title")) or docs.title
        docs.repository_url = _as_str(docs_data.get("repository_url"))
        templates_dir = _as_str(docs_data.get("templates_dir"))
        docs.templates_dir = root / templates_dir if templates_dir else None

    dependencies = DependencyConfig()
    deps_data = _as_dict(data.get("dependencies"))
    if deps_data:
        packages = _as_str_list(deps_data.get("packages"))
        if packages:
            dependencies.packages = packages
        dependencies.version = _as_str(deps_data.get("version")) or dependencies.version

    return HubConfig(root=root, paths=paths, docs=docs, dependencies=dependencies)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name == CONFIG_FILENAME and config_path.parent.is_dir():
        return config_path.resolve()
    if config_path.is_file():
        return (config_path.parent / CONFIG_FILENAME).resolve()
    # Never fall back to the parent of a path that does not exist.
    raise FileNotFoundError(f"Hub root not found: {config_path}")


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []
