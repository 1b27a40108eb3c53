"""
Style model for resume layouts.

A ResumeStyle combines a layout archetype with a color scheme, font combo,
font size scale and spacing config. Page geometry is fixed to A4 at 72 dpi.

Persisted styles use camelCase keys (``textLight``, ``sectionHeader``,
``headerHeight``); the dataclasses use snake_case attributes.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from vitae.contexts.schema.defaults import (
    DEFAULT_COLORS,
    DEFAULT_FONT_SIZES,
    DEFAULT_FONTS,
    DEFAULT_LAYOUT,
    DEFAULT_LAYOUT_TYPE,
    DEFAULT_LOCALE,
    DEFAULT_SIDEBAR_WIDTH,
)
from vitae.contexts.schema.dynamic_layout import DynamicLayout

# =============================================================================
# PAGE GEOMETRY
# =============================================================================

A4_WIDTH = 595
A4_HEIGHT = 842
MARGIN = 40
CONTENT_WIDTH = A4_WIDTH - 2 * MARGIN

LAYOUT_TYPES = (
    "single-column",
    "sidebar-left",
    "sidebar-right",
    "header-two-column",
    "minimal",
    "modern-split",
)
DYNAMIC_LAYOUT_TYPE = "dynamic"
SIDEBAR_LAYOUT_TYPES = ("sidebar-left", "sidebar-right")


@dataclass
class ColorScheme:
    """Named color roles used by the renderers and the formatting applier."""

    primary: str = DEFAULT_COLORS["primary"]
    secondary: str = DEFAULT_COLORS["secondary"]
    text: str = DEFAULT_COLORS["text"]
    text_light: str = DEFAULT_COLORS["textLight"]
    accent: str = DEFAULT_COLORS["accent"]
    background: str = DEFAULT_COLORS["background"]
    header_text: str = DEFAULT_COLORS["headerText"]
    sidebar_text: Optional[str] = None

    @property
    def on_sidebar(self) -> str:
        """Secondary text color on a dark sidebar or header band."""
        return self.sidebar_text or self.header_text

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ColorScheme":
        merged = {**DEFAULT_COLORS, **(data or {})}
        return cls(
            primary=merged["primary"],
            secondary=merged["secondary"],
            text=merged["text"],
            text_light=merged["textLight"],
            accent=merged["accent"],
            background=merged["background"],
            header_text=merged["headerText"],
            sidebar_text=merged.get("sidebarText"),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "primary": self.primary,
            "secondary": self.secondary,
            "text": self.text,
            "textLight": self.text_light,
            "accent": self.accent,
            "background": self.background,
            "headerText": self.header_text,
        }
        if self.sidebar_text:
            data["sidebarText"] = self.sidebar_text
        return data


@dataclass
class FontConfig:
    """Heading and body font families."""

    heading: str = DEFAULT_FONTS["heading"]
    body: str = DEFAULT_FONTS["body"]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FontConfig":
        merged = {**DEFAULT_FONTS, **(data or {})}
        return cls(heading=merged["heading"], body=merged["body"])

    def to_dict(self) -> Dict[str, Any]:
        return {"heading": self.heading, "body": self.body}


@dataclass
class FontSizes:
    """Font size scale in pixels."""

    name: float = DEFAULT_FONT_SIZES["name"]
    title: float = DEFAULT_FONT_SIZES["title"]
    section_header: float = DEFAULT_FONT_SIZES["sectionHeader"]
    job_title: float = DEFAULT_FONT_SIZES["jobTitle"]
    body: float = DEFAULT_FONT_SIZES["body"]
    small: float = DEFAULT_FONT_SIZES["small"]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FontSizes":
        merged = {**DEFAULT_FONT_SIZES, **(data or {})}
        return cls(
            name=merged["name"],
            title=merged["title"],
            section_header=merged["sectionHeader"],
            job_title=merged["jobTitle"],
            body=merged["body"],
            small=merged["small"],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "title": self.title,
            "sectionHeader": self.section_header,
            "jobTitle": self.job_title,
            "body": self.body,
            "small": self.small,
        }


@dataclass
class LayoutConfig:
    """Vertical rhythm and sidebar width."""

    header_height: float = DEFAULT_LAYOUT["headerHeight"]
    section_spacing: float = DEFAULT_LAYOUT["sectionSpacing"]
    line_height: float = DEFAULT_LAYOUT["lineHeight"]
    item_spacing: float = DEFAULT_LAYOUT["itemSpacing"]
    sidebar_width: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LayoutConfig":
        merged = {**DEFAULT_LAYOUT, **(data or {})}
        return cls(
            header_height=merged["headerHeight"],
            section_spacing=merged["sectionSpacing"],
            line_height=merged["lineHeight"],
            item_spacing=merged["itemSpacing"],
            sidebar_width=merged.get("sidebarWidth"),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "headerHeight": self.header_height,
            "sectionSpacing": self.section_spacing,
            "lineHeight": self.line_height,
            "itemSpacing": self.item_spacing,
        }
        if self.sidebar_width is not None:
            data["sidebarWidth"] = self.sidebar_width
        return data


@dataclass
class ResumeStyle:
    """
    Complete style for one rendered resume.

    Attributes:
        layout_type: One of LAYOUT_TYPES, or "dynamic"
        colors: Color roles
        fonts: Heading/body font families
        font_sizes: Font size scale
        layout: Spacing config
        dynamic_layout: Section placements for the "dynamic" layout type
        locale: Language of rendered section headers ("en", "uk", "de")
    """

    layout_type: str = DEFAULT_LAYOUT_TYPE
    colors: ColorScheme = field(default_factory=ColorScheme)
    fonts: FontConfig = field(default_factory=FontConfig)
    font_sizes: FontSizes = field(default_factory=FontSizes)
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    dynamic_layout: Optional[DynamicLayout] = None
    locale: str = DEFAULT_LOCALE

    @property
    def sidebar_width(self) -> float:
        """Sidebar width in pixels, with the default for styles that don't set one."""
        return self.layout.sidebar_width or DEFAULT_SIDEBAR_WIDTH

    @property
    def has_sidebar(self) -> bool:
        return self.layout_type in SIDEBAR_LAYOUT_TYPES

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResumeStyle":
        """
        Build a style from its persisted form, filling missing keys with defaults.

        Args:
            data: Style dict with camelCase keys (layoutType, colors, fonts, ...)

        Returns:
            ResumeStyle instance
        """
        data = data or {}
        dynamic = data.get("dynamicLayout")
        return cls(
            layout_type=data.get("layoutType") or DEFAULT_LAYOUT_TYPE,
            colors=ColorScheme.from_dict(data.get("colors")),
            fonts=FontConfig.from_dict(data.get("fonts")),
            font_sizes=FontSizes.from_dict(data.get("fontSizes")),
            layout=LayoutConfig.from_dict(data.get("layout")),
            dynamic_layout=DynamicLayout.from_dict(dynamic) if dynamic else None,
            locale=data.get("locale") or DEFAULT_LOCALE,
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "layoutType": self.layout_type,
            "locale": self.locale,
            "colors": self.colors.to_dict(),
            "fonts": self.fonts.to_dict(),
            "fontSizes": self.font_sizes.to_dict(),
            "layout": self.layout.to_dict(),
        }
        if self.dynamic_layout is not None:
            data["dynamicLayout"] = self.dynamic_layout.to_dict()
        return data
