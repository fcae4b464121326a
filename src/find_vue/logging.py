from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler


@dataclass
class LogConfig:
    log_level: int = logging.INFO
    log_file: Path | str | None = None
    file_level: int = logging.DEBUG
    file_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(config: LogConfig | None = None) -> logging.Logger:
    if config is None:
        config = LogConfig()

    logger = logging.getLogger("find_vue")
    level = config.log_level
    if config.log_file is not None:
        level = min(level, config.file_level)
    logger.setLevel(level)

    # Clear any existing handlers
    logger.handlers.clear()

    # Console handler; stdout is reserved for the report
    ch = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=False,
    )
    ch.setLevel(config.log_level)
    ch.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(ch)

    # File handler
    if config.log_file is not None:
        fh = logging.FileHandler(config.log_file)
        fh.setLevel(config.file_level)
        fh.setFormatter(logging.Formatter(config.file_format))
        logger.addHandler(fh)

    return logger
