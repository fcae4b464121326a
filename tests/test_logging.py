from __future__ import annotations

import logging
from pathlib import Path

from rich.logging import RichHandler

from find_vue.logging import LogConfig
from find_vue.logging import configure_logging


def test_configure_logging_defaults() -> None:
    logger = configure_logging()
    assert logger.name == "find_vue"
    assert logger.level == logging.INFO
    (handler,) = logger.handlers
    assert isinstance(handler, RichHandler)


def test_configure_logging_is_repeatable() -> None:
    configure_logging()
    logger = configure_logging(LogConfig(log_level=logging.DEBUG))
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG


def test_configure_logging_with_file(tmp_path: Path) -> None:
    log_file = tmp_path / "find_vue.log"
    logger = configure_logging(LogConfig(log_level=logging.WARNING, log_file=log_file))
    try:
        assert logger.level == logging.DEBUG
        logging.getLogger("find_vue.walker").debug("scanned %d files", 3)
        for h in logger.handlers:
            h.flush()
        assert "scanned 3 files" in log_file.read_text(encoding="utf-8")
    finally:
        for h in logger.handlers:
            h.close()
        logger.handlers.clear()
