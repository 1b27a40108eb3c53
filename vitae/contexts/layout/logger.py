"""
Layout context logger.

Provides logging interface for the layout context with automatic [layout] prefix.
All layout modules should import from this module, not from utils.logger directly.
"""

from collections import Counter
from pathlib import Path
from typing import List

from loguru import logger

from vitae.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[layout]"


def setup_layout_logger(log_dir: Path, layout_type: str = None) -> Path:
    """
    Setup logger for the layout context.

    Args:
        log_dir: Directory for this rendering session
        layout_type: Layout archetype being rendered, recorded in the provenance header

    Returns:
        Path to log file

    Example:
        from vitae.contexts.layout.logger import setup_layout_logger

        log_file = setup_layout_logger(log_dir, layout_type="sidebar-left")
    """
    return _setup_logger(
        context_name="layout",
        log_dir=log_dir,
        extra_provenance={"Layout": layout_type} if layout_type else None,
    )


# Wrapper functions with automatic [layout] prefix


def _log_warning(message: str) -> None:
    """Log warning message with [layout] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [layout] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level layout-specific logging helpers


def log_render_result(layout_type: str, elements: List) -> None:
    """Log element counts for one forward render."""
    kinds = Counter(element.kind for element in elements)
    bottom = max((element.top for element in elements), default=0)
    _log_debug(
        f"Rendered {layout_type}: {len(elements)} elements "
        f"({kinds.get('text', 0)} text, {kinds.get('rect', 0)} rect, {kinds.get('circle', 0)} circle), "
        f"lowest top {bottom:.0f}px"
    )
