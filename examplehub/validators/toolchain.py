"""Runs an example's npm scripts for optional compile and test checks."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import Callable, Sequence

from ..logging import get_logger

Runner = Callable[[Sequence[str], Path], bool]


class NpmToolchain:
    """Invokes ``npm run <script>`` inside an example directory."""

    def __init__(self, runner: Runner | None = None) -> None:
        self._runner = runner or self._default_runner
        self.logger = get_logger("validators.toolchain")

    def is_ready(self, example_dir: Path) -> bool:
        """Return ``True`` when the example's node dependencies are installed."""
        return (example_dir / "node_modules").is_dir()

    def run_script(self, example_dir: Path, script: str) -> bool:
        self.logger.debug("Running npm run %s in %s", script, example_dir)
        return self._runner(["npm", "run", script], example_dir)

    def _default_runner(self, args: Sequence[str], cwd: Path) -> bool:
        executable = shutil.which(args[0])
        if executable is None:
            raise FileNotFoundError(f"{args[0]} not found on PATH")
        completed = subprocess.run(
            [executable, *args[1:]],
            cwd=str(cwd),
            check=False,
            text=True,
            capture_output=True,
        )
        if completed.returncode != 0:
            self.logger.debug("%s failed:\n%s", " ".join(args), completed.stdout + completed.stderr)
        return completed.returncode == 0


__all__ = ["NpmToolchain", "Runner"]
