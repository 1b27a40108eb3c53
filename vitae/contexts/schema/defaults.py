"""
Default values for resume styles.

Used to fill keys missing from persisted or hand-written style dicts, so a
partial style such as ``{"layoutType": "minimal"}`` still renders.
"""

from typing import Any, Dict

DEFAULT_LAYOUT_TYPE = "single-column"

DEFAULT_LOCALE = "en"

DEFAULT_SIDEBAR_WIDTH = 180

DEFAULT_COLORS = {
    "primary": "#1a1a2e",
    "secondary": "#64748b",
    "text": "#334155",
    "textLight": "#475569",
    "accent": "#1a1a2e",
    "background": "#ffffff",
    "headerText": "#ffffff",
}

DEFAULT_FONTS = {
    "heading": "Arial, sans-serif",
    "body": "Arial, sans-serif",
}

DEFAULT_FONT_SIZES = {
    "name": 28,
    "title": 14,
    "sectionHeader": 11,
    "jobTitle": 12,
    "body": 10,
    "small": 9,
}

DEFAULT_LAYOUT = {
    "headerHeight": 100,
    "sectionSpacing": 22,
    "lineHeight": 1.4,
    "itemSpacing": 12,
}


def get_default_style_dict() -> Dict[str, Any]:
    """
    Get a complete default style in persisted (camelCase) form.

    Returns:
        Dictionary with layoutType, locale, colors, fonts, fontSizes and layout
    """
    return {
        "layoutType": DEFAULT_LAYOUT_TYPE,
        "locale": DEFAULT_LOCALE,
        "colors": DEFAULT_COLORS.copy(),
        "fonts": DEFAULT_FONTS.copy(),
        "fontSizes": DEFAULT_FONT_SIZES.copy(),
        "layout": DEFAULT_LAYOUT.copy(),
    }
