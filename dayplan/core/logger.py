from __future__ import annotations

"""Настройка loguru: консоль и, при необходимости, файл журнала."""

import sys
from pathlib import Path

from loguru import logger


LOG_FORMAT = "{time:HH:mm:ss} | {level: <7} | {name} - {message}"


def setup_logger(level: str = "INFO", log_file: str | None = None) -> None:
    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=level)
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(path, format=LOG_FORMAT, level=level, rotation="1 MB", retention=3)
