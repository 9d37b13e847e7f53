"""Logger setup shared by the examplehub commands.

Reports are printed to stdout by the CLI; progress and warnings go through the
``examplehub`` logger to stderr so the two never interleave in redirected output.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

ROOT_LOGGER = "examplehub"
CONSOLE_FORMAT = "[examplehub] %(levelname)s %(message)s"
VERBOSE_FORMAT = "[examplehub] %(levelname)s %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(component: str | None = None) -> logging.Logger:
    """Return the logger for ``component`` (e.g. ``"docs"``) below ``examplehub``."""
    if not component:
        return logging.getLogger(ROOT_LOGGER)
    return logging.getLogger(f"{ROOT_LOGGER}.{component}")


def configure_logging(*, verbose: bool = False, log_file: Path | None = None) -> logging.Logger:
    """Attach console (and optionally file) handlers to the ``examplehub`` logger.

    Verbose mode lowers the level to DEBUG and prefixes each console line with
    the component logger name. Calling this again replaces earlier handlers.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter(VERBOSE_FORMAT if verbose else CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)
        # The file always captures debug detail, so the logger itself must pass it through.
        logger.setLevel(logging.DEBUG)
        console.setLevel(level)

    return logger


__all__ = ["configure_logging", "get_logger"]
