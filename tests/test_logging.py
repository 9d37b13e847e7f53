from __future__ import annotations

import logging
from pathlib import Path

from examplehub.logging import configure_logging, get_logger


def test_get_logger_nests_components_under_examplehub() -> None:
    assert get_logger().name == "examplehub"
    assert get_logger("docs").name == "examplehub.docs"


def test_configure_logging_replaces_handlers() -> None:
    configure_logging()
    logger = configure_logging(verbose=True)

    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    assert logger.propagate is False


def test_log_file_captures_debug_while_console_stays_at_info(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "examplehub.log"
    logger = configure_logging(log_file=log_file)

    get_logger("scaffold").debug("copying template")
    for handler in logger.handlers:
        handler.flush()

    assert logger.handlers[0].level == logging.INFO
    assert "examplehub.scaffold: copying template" in log_file.read_text(encoding="utf-8")
    configure_logging()
