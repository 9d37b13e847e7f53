"""Jinja environment shared by the scaffolder and the docs generator."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader

from .postproc.lint import MarkdownLinter

_DEFAULT_TEMPLATES = Path(__file__).with_name("templates")


class TemplateRenderer:
    """Renders markdown templates, preferring overrides from ``templates_dir``."""

    def __init__(self, templates_dir: Path | None = None, *, linter: MarkdownLinter | None = None) -> None:
        self.templates_dir = templates_dir
        self._env = self._create_env(templates_dir)
        self._linter = linter or MarkdownLinter()

    def render(self, template_name: str, **context: Any) -> str:
        template = self._env.get_template(template_name)
        return self._linter.lint(template.render(**context))

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        directories = []
        if templates_dir:
            directories.append(str(templates_dir))
        directories.append(str(_DEFAULT_TEMPLATES))
        # keep order, drop duplicates
        ordered = list(dict.fromkeys(directories))
        loader = FileSystemLoader(ordered)
        return Environment(
            loader=loader,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )


__all__ = ["TemplateRenderer"]
