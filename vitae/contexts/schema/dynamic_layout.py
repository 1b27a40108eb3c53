"""
Dynamic layout description.

A DynamicLayout places section types into named positions (header slots, two
columns, full width) instead of using one of the fixed archetypes. It is
usually produced by an external layout generator and interpreted by
``vitae.contexts.layout.dynamic``.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

SECTION_TYPES = (
    "photo",
    "name",
    "title",
    "contact",
    "details",
    "summary",
    "profile",
    "experience",
    "education",
    "skills",
    "languages",
    "certifications",
    "projects",
    "interests",
    "divider",
)

# Order matters: sections are laid out position by position
SECTION_POSITIONS = (
    "header-left",
    "header-center",
    "header-right",
    "left-column",
    "right-column",
    "full-width",
)


@dataclass
class SectionStyle:
    uppercase: bool = True
    decorative_bullets: bool = False
    compact: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SectionStyle":
        data = data or {}
        return cls(
            uppercase=data.get("uppercase", True),
            decorative_bullets=data.get("decorativeBullets", False),
            compact=data.get("compact", False),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "uppercase": self.uppercase,
            "decorativeBullets": self.decorative_bullets,
            "compact": self.compact,
        }


@dataclass
class SectionPlacement:
    """One section type placed at a position, ordered within that position."""

    type: str
    position: str
    order: int = 0
    style: SectionStyle = field(default_factory=SectionStyle)

    @property
    def sort_key(self):
        position = (
            SECTION_POSITIONS.index(self.position)
            if self.position in SECTION_POSITIONS
            else len(SECTION_POSITIONS)
        )
        return (position, self.order)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SectionPlacement":
        return cls(
            type=data.get("type", ""),
            position=data.get("position", "full-width"),
            order=data.get("order", 0),
            style=SectionStyle.from_dict(data.get("style")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "position": self.position,
            "order": self.order,
            "style": self.style.to_dict(),
        }


@dataclass
class ColumnConfig:
    """
    Two-column split; widths are percentages of the content width.

    A disabled column sends its sections to full width.
    """

    has_left_column: bool = True
    has_right_column: bool = True
    left_width: float = 30
    right_width: float = 70
    gap: float = 20

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ColumnConfig":
        data = data or {}
        return cls(
            has_left_column=data.get("hasLeftColumn", True),
            has_right_column=data.get("hasRightColumn", True),
            left_width=data.get("leftWidth") or 30,
            right_width=data.get("rightWidth") or 70,
            gap=data.get("gap") or 20,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hasLeftColumn": self.has_left_column,
            "hasRightColumn": self.has_right_column,
            "leftWidth": self.left_width,
            "rightWidth": self.right_width,
            "gap": self.gap,
        }


@dataclass
class HeaderConfig:
    has_header: bool = True
    height: float = 100
    has_photo: bool = False
    photo_position: str = "left"
    photo_size: float = 80
    has_divider: bool = False
    divider_color: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HeaderConfig":
        data = data or {}
        return cls(
            has_header=data.get("hasHeader", True),
            height=data.get("height") or 100,
            has_photo=data.get("hasPhoto", False),
            photo_position=data.get("photoPosition", "left"),
            photo_size=data.get("photoSize") or 80,
            has_divider=data.get("hasDivider", False),
            divider_color=data.get("dividerColor"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hasHeader": self.has_header,
            "height": self.height,
            "hasPhoto": self.has_photo,
            "photoPosition": self.photo_position,
            "photoSize": self.photo_size,
            "hasDivider": self.has_divider,
            "dividerColor": self.divider_color,
        }


@dataclass
class SidebarConfig:
    """Colored sidebar; only drawn when the background color is not white."""

    position: str = "left"
    width: float = 200
    background_color: Optional[str] = None
    text_color: Optional[str] = None

    @property
    def is_colored(self) -> bool:
        return bool(self.background_color) and self.background_color.lower() != "#ffffff"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SidebarConfig":
        return cls(
            position=data.get("position", "left"),
            width=data.get("width") or 200,
            background_color=data.get("backgroundColor"),
            text_color=data.get("textColor"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "position": self.position,
            "width": self.width,
            "backgroundColor": self.background_color,
            "textColor": self.text_color,
        }


@dataclass
class DynamicLayout:
    sections: List[SectionPlacement] = field(default_factory=list)
    columns: ColumnConfig = field(default_factory=ColumnConfig)
    header: HeaderConfig = field(default_factory=HeaderConfig)
    sidebar: Optional[SidebarConfig] = None

    def sorted_sections(self) -> List[SectionPlacement]:
        """Sections ordered by position, then by order within the position."""
        return sorted(self.sections, key=lambda s: s.sort_key)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DynamicLayout":
        sidebar = data.get("sidebar")
        return cls(
            sections=[SectionPlacement.from_dict(s) for s in data.get("sections", [])],
            columns=ColumnConfig.from_dict(data.get("columns")),
            header=HeaderConfig.from_dict(data.get("header")),
            sidebar=SidebarConfig.from_dict(sidebar) if sidebar else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "sections": [s.to_dict() for s in self.sections],
            "columns": self.columns.to_dict(),
            "header": self.header.to_dict(),
        }
        if self.sidebar is not None:
            data["sidebar"] = self.sidebar.to_dict()
        return data


def default_dynamic_layout() -> DynamicLayout:
    """
    Layout used when a "dynamic" style arrives without placements.

    Name and title on the left of a header band, contact on the right, a
    narrow left column for skills/languages/education and the rest on the right.
    """
    placements = [
        ("name", "header-left", 1),
        ("title", "header-left", 2),
        ("contact", "header-right", 1),
        ("skills", "left-column", 1),
        ("languages", "left-column", 2),
        ("education", "left-column", 3),
        ("interests", "left-column", 4),
        ("summary", "right-column", 1),
        ("experience", "right-column", 2),
        ("projects", "right-column", 3),
        ("certifications", "right-column", 4),
    ]
    return DynamicLayout(
        sections=[SectionPlacement(type=t, position=p, order=o) for t, p, o in placements],
        columns=ColumnConfig(has_left_column=True, has_right_column=True, left_width=32, right_width=68),
        header=HeaderConfig(has_header=True, height=100),
    )
