"""Unit tests for the text metrics estimator."""

import pytest

from vitae.contexts.schema.elements import RectElement, TextElement
from vitae.contexts.schema.text_metrics import (
    estimate_element_height,
    estimate_height,
    estimate_lines,
    estimate_text_width,
    single_line_height,
)


@pytest.mark.unit
def test_single_line_height():
    """Test one line: font size * line height plus block padding."""
    assert estimate_height("Hello", 10, 1.4) == pytest.approx(16.0)
    assert single_line_height(10, 1.4) == pytest.approx(16.0)


@pytest.mark.unit
def test_empty_text_is_one_line_without_padding():
    """Test that empty and whitespace-only text report exactly one line height."""
    assert estimate_height("", 10, 1.2) == pytest.approx(12.0)
    assert estimate_height("   ", 10, 1.2) == pytest.approx(12.0)


@pytest.mark.unit
def test_explicit_newlines_count_without_width():
    """Test that without a wrap width only explicit newlines add lines."""
    assert estimate_lines("one\ntwo\nthree", 10) == 3
    assert estimate_lines("x" * 500, 10) == 1


@pytest.mark.unit
def test_wrapping_uses_average_char_width():
    """Test wrapping: 100px at 10px regular fits floor(100 / 5.8) = 17 chars per line."""
    assert estimate_lines("x" * 17, 10, max_width=100) == 1
    assert estimate_lines("x" * 18, 10, max_width=100) == 2
    assert estimate_lines("x" * 35, 10, max_width=100) == 3


@pytest.mark.unit
def test_bold_text_wraps_sooner():
    """Test that bold glyphs (0.65em) fit fewer characters than regular ones (0.58em)."""
    text = "x" * 16
    assert estimate_lines(text, 10, max_width=100, bold=False) == 1
    assert estimate_lines(text, 10, max_width=100, bold=True) == 2


@pytest.mark.unit
def test_each_explicit_line_wraps_separately():
    """Test that wrapped line counts add up per explicit line."""
    text = "x" * 18 + "\n" + "short"
    assert estimate_lines(text, 10, max_width=100) == 3


@pytest.mark.unit
def test_estimate_text_width_uses_longest_line():
    """Test width estimate of multi-line text."""
    assert estimate_text_width("ab\nabcd", 10) == pytest.approx(4 * 5.8)
    assert estimate_text_width("abcd", 10, bold=True) == pytest.approx(4 * 6.5)


@pytest.mark.unit
def test_estimate_element_height_per_kind():
    """Test element height for text (own wrap width) and rects."""
    text = TextElement(text="x" * 18, font_size=10, line_height=1.0, width=100)
    assert estimate_element_height(text) == pytest.approx(2 * 10 + 2)

    rect = RectElement(height=42)
    assert estimate_element_height(rect) == 42


@pytest.mark.unit
@pytest.mark.parametrize("font_size", [0, -4])
def test_non_positive_font_size_does_not_wrap(font_size):
    """Test that a zero or negative font size falls back to counting newlines."""
    assert estimate_lines("one\ntwo", font_size, max_width=100) == 2
    assert estimate_height("x" * 80, font_size, 1.2, max_width=100) == pytest.approx(font_size * 1.2 + 2)
