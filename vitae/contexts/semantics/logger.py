"""
Semantics context logger.

Provides logging interface for the semantics context with automatic [semantic] prefix.
All semantics modules should import from this module, not from utils.logger directly.
"""

from collections import Counter
from pathlib import Path

from loguru import logger

from vitae.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[semantic]"


def setup_semantic_logger(log_dir: Path) -> Path:
    """
    Setup logger for the semantics context.

    Args:
        log_dir: Directory for this extraction/inference session

    Returns:
        Path to log file
    """
    return _setup_logger(context_name="semantic", log_dir=log_dir)


# Wrapper functions with automatic [semantic] prefix


def _log_warning(message: str) -> None:
    """Log warning message with [semantic] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [semantic] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level semantics-specific logging helpers


def log_inference_result(tagged: Counter, total: int) -> None:
    """Log how many elements each inference pass tagged."""
    if not tagged:
        _log_debug(f"Inference: nothing to tag among {total} text elements")
        return
    summary = ", ".join(f"{tag}={count}" for tag, count in tagged.most_common())
    _log_debug(f"Inference tagged {sum(tagged.values())}/{total} text elements ({summary})")


def log_extraction_result(record) -> None:
    """Log section counts for one reverse extraction."""
    _log_debug(
        "Extracted record: "
        f"name={record.personal_info.full_name!r}, "
        f"experience={len(record.experience)}, education={len(record.education)}, "
        f"skills={len(record.skills)}, languages={len(record.languages)}, "
        f"certifications={len(record.certifications)}, projects={len(record.projects)}, "
        f"interests={len(record.interests)}"
    )
