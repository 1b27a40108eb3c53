"""
Switching context logger.

Provides logging interface for the switching context with automatic [switch] prefix.
All switching modules should import from this module, not from utils.logger directly.
"""

from collections import Counter
from pathlib import Path
from typing import List

from loguru import logger

from vitae.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[switch]"


def setup_switch_logger(log_dir: Path, target_layout: str = None) -> Path:
    """
    Setup logger for the switching context.

    Args:
        log_dir: Directory for this switching session
        target_layout: Target layout archetype, recorded in the provenance header

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="switch",
        log_dir=log_dir,
        extra_provenance={"Target layout": target_layout} if target_layout else None,
    )


# Wrapper functions with automatic [switch] prefix


def _log_warning(message: str) -> None:
    """Log warning message with [switch] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [switch] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level switching-specific logging helpers


def log_switch_result(target_layout: str, sections: List[str], carried: int, total: int) -> None:
    """Log which sections were placed and how many unclassified texts were carried over."""
    _log_debug(
        f"Switched to {target_layout}: {total} elements, "
        f"sections [{', '.join(sections)}], {carried} carried over"
    )


def log_formatting_result(changes, preview: bool = False) -> None:
    """Log counts from one formatting pass."""
    verb = "Would change" if preview else "Changed"
    _log_debug(
        f"{verb} {changes.elements} elements: {changes.colors} colors, {changes.fonts} fonts, "
        f"{changes.sizes} sizes, {changes.line_heights} line heights"
    )


def log_reorder_result(order: List[str], moved: Counter) -> None:
    """Log section moves per column."""
    if not moved:
        _log_debug(f"Reorder to [{', '.join(order)}]: nothing moved")
        return
    detail = ", ".join(f"{kind}={count}" for kind, count in moved.items())
    _log_debug(f"Reorder to [{', '.join(order)}]: moved {sum(moved.values())} groups ({detail})")
