"""Centralized logger configuration.

Usage:
    from taskboard.utils.logger import get_logger
    logger = get_logger(__name__)

This avoids sprinkling basicConfig calls throughout the codebase.
"""
import logging
import os

DEFAULT_LEVEL = os.getenv("TASKBOARD_LOG_LEVEL", "INFO").upper()


def setup_logging(level: str = DEFAULT_LEVEL, verbose: bool = False) -> None:
    if verbose:
        level = "DEBUG"
    level_value = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=level_value,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    # basicConfig is a no-op once handlers exist
    logging.getLogger().setLevel(level_value)


def get_logger(name: str) -> logging.Logger:
    if not logging.getLogger().handlers:
        setup_logging()
    return logging.getLogger(name)
