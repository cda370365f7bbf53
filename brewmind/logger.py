"""
module: logger.py
description: loguru sink setup for the relay
"""
import sys
from loguru import logger

DEFAULT_LEVEL = "INFO"


def configure_logging(level: str = DEFAULT_LEVEL) -> str:
    """Replace loguru's default sink with a single stderr sink at `level`.

    Unknown level names fall back to INFO. Returns the level in effect.
    """
    try:
        logger.level(level)
    except ValueError:
        level = DEFAULT_LEVEL
    logger.remove()
    logger.add(sys.stderr, level=level, enqueue=False, backtrace=False)
    return level
