"""
Schema context logger.

Provides logging interface for the schema context with automatic [schema] prefix.
All schema modules should import from this module, not from utils.logger directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[schema]"


# Wrapper functions with automatic [schema] prefix


def _log_info(message: str) -> None:
    """Log info message with [schema] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [schema] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [schema] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
