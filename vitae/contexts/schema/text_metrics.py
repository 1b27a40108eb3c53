"""
Approximate text metrics.

Layout runs without a font engine, so text height is estimated from an average
glyph width per font size. Estimates are deliberately generous: overestimating
leaves a little extra whitespace, underestimating makes elements overlap.

Examples:
    >>> estimate_height("Hello", font_size=10, line_height=1.4)
    16.0
    >>> estimate_lines("one\\ntwo", font_size=10)
    2
"""

import math
from typing import Optional

# Average glyph width as a fraction of the font size
REGULAR_CHAR_WIDTH = 0.58
BOLD_CHAR_WIDTH = 0.65

# Added once per text block for ascender/descender overhang
BLOCK_PADDING = 2


def average_char_width(font_size: float, bold: bool = False) -> float:
    return font_size * (BOLD_CHAR_WIDTH if bold else REGULAR_CHAR_WIDTH)


def estimate_lines(
    text: str,
    font_size: float,
    max_width: Optional[float] = None,
    bold: bool = False,
) -> int:
    """
    Estimate the number of rendered lines for a text block.

    Each explicit line wraps to ``ceil(len / chars_per_line)`` lines (minimum 1);
    without a max width (or with a non-positive font size) only explicit
    newlines count.

    Args:
        text: Text content, possibly with newlines
        font_size: Font size in pixels
        max_width: Wrap width in pixels, or None for no wrapping
        bold: Whether the text is bold (wider glyphs)

    Returns:
        Number of lines (at least 1)
    """
    lines = (text or "").split("\n")
    char_width = average_char_width(font_size or 0, bold)
    if not max_width or max_width <= 0 or char_width <= 0:
        return max(1, len(lines))

    chars_per_line = max(1, math.floor(max_width / char_width))
    return sum(max(1, math.ceil(len(line) / chars_per_line)) for line in lines)


def estimate_height(
    text: str,
    font_size: float,
    line_height: float,
    max_width: Optional[float] = None,
    bold: bool = False,
) -> float:
    """
    Estimate the rendered height of a text block in pixels.

    Args:
        text: Text content, possibly with newlines
        font_size: Font size in pixels
        line_height: Line height multiplier
        max_width: Wrap width in pixels, or None for no wrapping
        bold: Whether the text is bold

    Returns:
        ``lines * font_size * line_height + 2``; empty or whitespace-only text
        returns exactly one line height (``font_size * line_height``)
    """
    if not text or not text.strip():
        return font_size * line_height
    lines = estimate_lines(text, font_size, max_width, bold)
    return lines * font_size * line_height + BLOCK_PADDING


def single_line_height(font_size: float, line_height: float) -> float:
    """Height of one non-empty line, as estimate_height would report it."""
    return font_size * line_height + BLOCK_PADDING


def estimate_text_width(text: str, font_size: float, bold: bool = False) -> float:
    """Estimated width of the longest explicit line of a text."""
    longest = max((len(line) for line in (text or "").split("\n")), default=0)
    return longest * average_char_width(font_size, bold)


def estimate_element_height(element) -> float:
    """
    Estimated height of any visual element.

    Text elements use the text estimator with their own wrap width, weight and
    line height; rectangles report their height and circles their diameter.
    """
    kind = getattr(element, "kind", None)
    if kind == "text":
        return estimate_height(
            element.text,
            element.font_size,
            element.line_height,
            element.width,
            element.is_bold,
        )
    if kind == "rect":
        return element.height
    if kind == "circle":
        return 2 * element.radius
    return 0.0
