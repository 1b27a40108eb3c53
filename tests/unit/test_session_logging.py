"""Unit tests for CLI session log directories and context log files."""

import pytest
from loguru import logger

from vitae.contexts.layout.logger import setup_layout_logger
from vitae.utils.logger import session_log_dir, setup_logger


@pytest.fixture(autouse=True)
def reset_handlers():
    yield
    logger.remove()


@pytest.mark.unit
def test_session_dir_under_logs_path(monkeypatch, tmp_path):
    """Test that the session directory sits under VITAE_LOGS_PATH and is named after the command."""
    monkeypatch.setenv("VITAE_LOGS_PATH", str(tmp_path))

    log_dir = session_log_dir("render")

    assert log_dir.parent == tmp_path
    assert log_dir.name.startswith("render_")
    assert not log_dir.exists()


@pytest.mark.unit
def test_session_dir_explicit_base(tmp_path):
    """Test that an explicit base directory wins over the environment."""
    assert session_log_dir("switch", base_dir=tmp_path).parent == tmp_path


@pytest.mark.unit
def test_context_log_file_has_session_header(tmp_path):
    """Test that a context log file starts with the session header and keeps debug messages."""
    log_dir = tmp_path / "render_20250101_000000"

    log_file = setup_logger("layout", log_dir, {"Layout": "sidebar-left"})
    logger.debug("placed 42 elements")
    logger.remove()

    content = log_file.read_text(encoding="utf-8")
    assert log_file == log_dir / "layout.log"
    assert "Context: layout" in content
    assert "Session: render_20250101_000000" in content
    assert "Layout: sidebar-left" in content
    assert "placed 42 elements" in content


@pytest.mark.unit
def test_layout_logger_records_layout_type(tmp_path):
    """Test the layout context wrapper."""
    log_file = setup_layout_logger(tmp_path, layout_type="minimal")
    logger.remove()

    assert log_file.name == "layout.log"
    assert "Layout: minimal" in log_file.read_text(encoding="utf-8")
