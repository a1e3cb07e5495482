"""Logging setup for AdaptIQ (loguru)."""

from __future__ import annotations

import sys
from typing import Optional

from loguru import logger

from .config import config


def configure_logging(level: Optional[str] = None, sink=sys.stderr) -> int:
    """
    Replace loguru's default handler with one using the configured level.

    Args:
        level: Log level name (default: config.logging.log_level)
        sink: Where to write records (default: stderr)

    Returns:
        The loguru handler id, usable with logger.remove()
    """
    logger.remove()
    return logger.add(
        sink,
        level=(level or config.logging.log_level).upper(),
        format=config.logging.log_format,
    )
