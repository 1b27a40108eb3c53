"""
Zone-based page description.

A ZoneLayout splits the page into rectangular zones given in percent of the A4
page (header band, sidebar, main area, photo corner...). Each zone lists the
sections it holds, top to bottom, and may carry its own background and text
color. Layout generators produce this shape as

    {"layout": {"type": "sidebar-left", "zones": [...]}, "styling": {...}}

The styling part maps onto a ResumeStyle and is not modelled here.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# Backgrounds that leave the page showing through
PLAIN_BACKGROUNDS = ("", "transparent", "#ffffff", "#fff", "white")


@dataclass
class LayoutZone:
    """
    One rectangular page region.

    Attributes:
        id: Zone name ("header", "sidebar", "main", "photo-area", ...)
        x, y, width, height: Geometry in percent of the page
        background_color: Fill drawn behind the zone, when not plain
        text_color: Color of every text in the zone; style colors when empty
        sections: Section names rendered in the zone, in order
    """

    id: str
    x: float = 0
    y: float = 0
    width: float = 100
    height: float = 100
    background_color: Optional[str] = None
    text_color: Optional[str] = None
    sections: List[str] = field(default_factory=list)

    @property
    def has_background(self) -> bool:
        return (self.background_color or "").strip().lower() not in PLAIN_BACKGROUNDS

    @property
    def is_sidebar(self) -> bool:
        """Sidebar zones stretch their background down the whole document."""
        return "sidebar" in self.id.lower()

    @property
    def is_header(self) -> bool:
        return "header" in self.id.lower()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LayoutZone":
        return cls(
            id=str(data.get("id") or "main"),
            x=data.get("x") or 0,
            y=data.get("y") or 0,
            width=data.get("width") if data.get("width") is not None else 100,
            height=data.get("height") if data.get("height") is not None else 100,
            background_color=data.get("backgroundColor"),
            text_color=data.get("textColor") or None,
            sections=[str(s) for s in data.get("sections") or []],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "backgroundColor": self.background_color,
            "textColor": self.text_color,
            "sections": list(self.sections),
        }


@dataclass
class ZoneLayout:
    """Zones of one page design; ``layout_type`` names the design for logs."""

    layout_type: str = "single-column"
    zones: List[LayoutZone] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ZoneLayout":
        """
        Build from either the generator envelope or the bare layout part.

        Example:
            >>> ZoneLayout.from_dict({"layout": {"type": "header-only", "zones": []}}).layout_type
            'header-only'
        """
        layout = data["layout"] if isinstance(data.get("layout"), dict) else data
        return cls(
            layout_type=layout.get("type") or "single-column",
            zones=[LayoutZone.from_dict(z) for z in layout.get("zones") or []],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.layout_type, "zones": [z.to_dict() for z in self.zones]}
