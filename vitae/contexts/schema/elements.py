"""
Visual elements placed on the resume canvas.

Three element kinds share a common base: positioned text, rectangles and
circles. Every element may carry a semantic tag (what the content means) and a
semantic group (which repeated entry it belongs to, e.g. ``experience_0``).

Persisted form follows the canvas editor's object shape: camelCase keys and a
``type`` of "textbox" (wrapped text), "i-text" (single run), "rect" or "circle".
Persisted keys this module doesn't model are carried through in ``extra``.
"""

import math
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

from vitae.contexts.schema.exceptions import ElementFormatError

TEXT_TYPES = ("textbox", "i-text", "itext", "text")
RECT_TYPES = ("rect",)
CIRCLE_TYPES = ("circle",)


def new_element_id() -> str:
    return uuid.uuid4().hex


def _is_bold_weight(weight: Any) -> bool:
    if isinstance(weight, (int, float)):
        return weight >= 600
    weight = str(weight or "").strip().lower()
    if weight.isdigit():
        return int(weight) >= 600
    return weight in ("bold", "bolder")


@dataclass
class TextElement:
    """
    Positioned text.

    ``width`` is the wrap width: text with a width persists as a "textbox" and
    wraps, text without one persists as "i-text" and only breaks on newlines.
    """

    text: str = ""
    left: float = 0.0
    top: float = 0.0
    font_size: float = 12
    font_weight: Union[str, int] = "normal"
    font_family: str = "Arial, sans-serif"
    font_style: str = "normal"
    fill: str = "#000000"
    line_height: float = 1.16
    width: Optional[float] = None
    char_spacing: float = 0
    text_align: str = "left"
    semantic_type: Optional[str] = None
    semantic_group: Optional[str] = None
    id: str = field(default_factory=new_element_id)
    selectable: bool = True
    extra: Dict[str, Any] = field(default_factory=dict)
    kind: str = field(default="text", init=False)

    @property
    def is_bold(self) -> bool:
        return _is_bold_weight(self.font_weight)

    @property
    def object_type(self) -> str:
        return "textbox" if self.width else "i-text"

    def to_dict(self) -> Dict[str, Any]:
        data = {
            **self.extra,
            "id": self.id,
            "type": self.object_type,
            "text": self.text,
            "left": self.left,
            "top": self.top,
            "fontSize": self.font_size,
            "fontWeight": self.font_weight,
            "fontFamily": self.font_family,
            "fontStyle": self.font_style,
            "fill": self.fill,
            "lineHeight": self.line_height,
            "charSpacing": self.char_spacing,
            "textAlign": self.text_align,
            "selectable": self.selectable,
        }
        if self.width:
            data["width"] = self.width
        _put_semantics(data, self)
        return data


@dataclass
class RectElement:
    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0
    fill: str = "#000000"
    stroke: Optional[str] = None
    semantic_type: Optional[str] = None
    semantic_group: Optional[str] = None
    id: str = field(default_factory=new_element_id)
    selectable: bool = True
    extra: Dict[str, Any] = field(default_factory=dict)
    kind: str = field(default="rect", init=False)

    def to_dict(self) -> Dict[str, Any]:
        data = {
            **self.extra,
            "id": self.id,
            "type": "rect",
            "left": self.left,
            "top": self.top,
            "width": self.width,
            "height": self.height,
            "fill": self.fill,
            "selectable": self.selectable,
        }
        if self.stroke:
            data["stroke"] = self.stroke
        _put_semantics(data, self)
        return data


@dataclass
class CircleElement:
    left: float = 0.0
    top: float = 0.0
    radius: float = 0.0
    fill: str = "#000000"
    opacity: float = 1.0
    semantic_type: Optional[str] = None
    semantic_group: Optional[str] = None
    id: str = field(default_factory=new_element_id)
    selectable: bool = True
    extra: Dict[str, Any] = field(default_factory=dict)
    kind: str = field(default="circle", init=False)

    def to_dict(self) -> Dict[str, Any]:
        data = {
            **self.extra,
            "id": self.id,
            "type": "circle",
            "left": self.left,
            "top": self.top,
            "radius": self.radius,
            "fill": self.fill,
            "opacity": self.opacity,
            "selectable": self.selectable,
        }
        _put_semantics(data, self)
        return data


VisualElement = Union[TextElement, RectElement, CircleElement]


def _put_semantics(data: Dict[str, Any], element) -> None:
    if element.semantic_type:
        data["semanticType"] = element.semantic_type
    if element.semantic_group:
        data["semanticGroup"] = element.semantic_group


_TEXT_KEYS = {
    "text": "text",
    "left": "left",
    "top": "top",
    "fontSize": "font_size",
    "fontWeight": "font_weight",
    "fontFamily": "font_family",
    "fontStyle": "font_style",
    "fill": "fill",
    "lineHeight": "line_height",
    "width": "width",
    "charSpacing": "char_spacing",
    "textAlign": "text_align",
}
_RECT_KEYS = {
    "left": "left",
    "top": "top",
    "width": "width",
    "height": "height",
    "fill": "fill",
    "stroke": "stroke",
}
_CIRCLE_KEYS = {
    "left": "left",
    "top": "top",
    "radius": "radius",
    "fill": "fill",
    "opacity": "opacity",
}
_COMMON_KEYS = ("id", "type", "semanticType", "semanticGroup", "selectable")
_NUMERIC_ATTRS = frozenset(
    ("left", "top", "font_size", "line_height", "width", "char_spacing", "height", "radius", "opacity")
)


def _number(value: Any) -> Optional[float]:
    """Persisted numbers may arrive as strings; unusable values read as missing."""
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _build(cls, data: Dict[str, Any], keys: Dict[str, str]):
    kwargs = {}
    for key, attr in keys.items():
        value = data.get(key)
        if value is not None and attr in _NUMERIC_ATTRS:
            value = _number(value)
        if value is not None:
            kwargs[attr] = value
    kwargs["semantic_type"] = data.get("semanticType")
    kwargs["semantic_group"] = data.get("semanticGroup")
    kwargs["selectable"] = data.get("selectable", True)
    if data.get("id"):
        kwargs["id"] = str(data["id"])
    kwargs["extra"] = {
        k: v for k, v in data.items() if k not in keys and k not in _COMMON_KEYS
    }
    return cls(**kwargs)


def element_from_dict(data: Dict[str, Any]) -> VisualElement:
    """
    Build an element from a persisted canvas object.

    Accepts the editor's type aliases ("Textbox", "IText", "text", "Rect", ...).
    An "i-text" object never wraps, even when the editor stored a measured width.

    Args:
        data: Persisted object dict

    Returns:
        TextElement, RectElement or CircleElement

    Raises:
        ElementFormatError: If the object is not a dict or its type is not supported
    """
    if not isinstance(data, dict):
        raise ElementFormatError(f"Canvas object must be a mapping, got {type(data).__name__}")

    object_type = str(data.get("type", "")).replace("_", "-").lower()

    if object_type in TEXT_TYPES:
        element = _build(TextElement, data, _TEXT_KEYS)
        if object_type != "textbox":
            if element.width is not None:
                element.extra["width"] = element.width
            element.width = None
        element.text = str(element.text)
        return element
    if object_type in RECT_TYPES:
        return _build(RectElement, data, _RECT_KEYS)
    if object_type in CIRCLE_TYPES:
        return _build(CircleElement, data, _CIRCLE_KEYS)

    raise ElementFormatError(
        "Unsupported canvas object type", object_type=data.get("type"), payload=data
    )


def text_element(
    text: str,
    left: float,
    top: float,
    font_size: float,
    *,
    fill: str,
    font_family: str,
    bold: bool = False,
    italic: bool = False,
    width: Optional[float] = None,
    line_height: float = 1.2,
    char_spacing: float = 0,
    text_align: str = "left",
    semantic_type: Optional[str] = None,
    semantic_group: Optional[str] = None,
) -> TextElement:
    """Convenience constructor used by the layout engines."""
    return TextElement(
        text=text,
        left=left,
        top=top,
        font_size=font_size,
        font_weight="bold" if bold else "normal",
        font_family=font_family,
        font_style="italic" if italic else "normal",
        fill=fill,
        line_height=line_height,
        width=width,
        char_spacing=char_spacing,
        text_align=text_align,
        semantic_type=semantic_type,
        semantic_group=semantic_group,
    )


def clone_element(element: VisualElement, **changes) -> VisualElement:
    """Copy an element (fresh ``extra`` dict, same id) with attribute changes applied."""
    data = {k: v for k, v in vars(element).items() if k != "kind"}
    data["extra"] = dict(element.extra)
    data.update(changes)
    return type(element)(**data)
