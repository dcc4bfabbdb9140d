"""Centralized logging configuration for appinfo-vdf.

Provides the package logger with console output and optional file logging.
Library modules log through child loggers (``appinfo_vdf.<module>``) and
never print.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

__all__ = ["logger", "setup_logging"]

logger = logging.getLogger("appinfo_vdf")


def setup_logging(
    level: int = logging.INFO,
    log_file: Path | None = None,
) -> None:
    """Configure the package logger.

    Args:
        level: The logging level for console output (default: INFO).
        log_file: Optional path to a log file. If provided, logs will
            also be written to this file at DEBUG level.
    """
    logger.setLevel(min(level, logging.DEBUG) if log_file is not None else level)

    if logger.handlers:
        return

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    # Results go to stdout, so diagnostics go to stderr.
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
