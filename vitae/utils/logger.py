"""
Session logging for the vitae command-line tools.

Every CLI command (render, extract, switch, restyle, ...) opens one session
directory under VITAE_LOGS_PATH and gives each context its own log file in it:

    outs/logs/render_20251114_123456/layout.log
    outs/logs/switch_20251114_124501/switch.log

Files get everything from DEBUG up; the console only shows INFO and above, at
VITAE_CONSOLE_LEVEL when that is set. Context modules wrap ``setup_logger`` in
contexts/{context}/logger.py and add their own message prefix.
"""

import os
import sys
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv
from loguru import logger

from vitae.utils.timestamp import now

load_dotenv()

DEFAULT_LOGS_PATH = "outs/logs"
DEFAULT_CONSOLE_LEVEL = "INFO"

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"

# Console colors; warnings stand out from the per-element debug chatter in files
LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[Dict[str, object]] = None,
    level_colors: Optional[Dict[str, str]] = None,
) -> Path:
    """
    Route loguru output for one context of a CLI session.

    Replaces any handlers installed earlier in the process, so the last
    context set up owns the console. The session header names the context and
    the command line that started it.

    Args:
        context_name: "layout", "semantic" or "switch"; names the log file
        log_dir: Session directory, usually from ``session_log_dir``
        extra_provenance: Session facts for the header (e.g., {"Layout": "sidebar-left"})
        level_colors: Console color overrides per level name

    Returns:
        Path to the context's log file

    Example:
        log_file = setup_logger("layout", session_log_dir("render"), {"Layout": "minimal"})
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    for level_name, color in {**LEVEL_COLORS, **(level_colors or {})}.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(
        sys.stdout,
        format=CONSOLE_FORMAT,
        level=os.getenv("VITAE_CONSOLE_LEVEL", DEFAULT_CONSOLE_LEVEL).upper(),
        colorize=True,
    )

    log_provenance({"Context": context_name, "Session": log_dir.name, **(extra_provenance or {})})
    return log_file


def log_provenance(extra_context: Optional[Dict[str, object]] = None) -> None:
    """Write the session header: command line, working directory, Python and any extra facts."""
    logger.info("=" * 80)
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]}")
    for key, value in (extra_context or {}).items():
        logger.info(f"{key}: {value}")
    logger.info("=" * 80)


def session_log_dir(command_name: str, base_dir: Optional[Path] = None) -> Path:
    """
    Timestamped directory for one CLI command run (not created yet).

    Args:
        command_name: CLI command, e.g. "render" or "restyle"
        base_dir: Logs root; defaults to VITAE_LOGS_PATH, then outs/logs

    Returns:
        Path like outs/logs/render_20251114_123456
    """
    if base_dir is None:
        base_dir = Path(os.getenv("VITAE_LOGS_PATH", DEFAULT_LOGS_PATH))
    return base_dir / f"{command_name}_{now()}"
