from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s | %(message)s"


def resolve_log_level(level: str | None = None) -> int:
    """Map a level name (or ``APP_LOG_LEVEL``) to a logging constant, INFO if unknown."""
    name = (level or os.getenv("APP_LOG_LEVEL", "INFO")).upper()
    value = getattr(logging, name, None)
    return value if isinstance(value, int) else logging.INFO


def setup_logging(log_file: Path | None = None, level: str | None = None) -> None:
    """Configure the root logger for the CLI; later calls only add a missing log file."""
    log_level = resolve_log_level(level)
    root_logger = logging.getLogger()
    if root_logger.handlers:
        if log_file and not _has_file_handler(root_logger, log_file):
            root_logger.addHandler(_build_file_handler(log_file, log_level))
        return

    # stdout is reserved for plan output.
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(_build_file_handler(log_file, log_level))

    logging.basicConfig(level=log_level, format=LOG_FORMAT, handlers=handlers)


def _has_file_handler(logger: logging.Logger, log_file: Path) -> bool:
    target = os.path.abspath(log_file)
    return any(
        isinstance(handler, logging.FileHandler) and handler.baseFilename == target
        for handler in logger.handlers
    )


def _build_file_handler(log_file: Path, level: int) -> logging.FileHandler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return handler
