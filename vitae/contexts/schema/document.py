"""
Page and document containers for persisted canvases.

A page is ``{version, objects, background}``; a document is ``{pages: [...]}``.
Layout engines produce one tall element list; ``paginate`` cuts it into A4
pages and ``flatten`` stacks pages back into one list.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from vitae.contexts.schema.elements import (
    RectElement,
    VisualElement,
    clone_element,
    element_from_dict,
)
from vitae.contexts.schema.exceptions import ElementFormatError
from vitae.contexts.schema.logger import _log_debug, _log_warning
from vitae.contexts.schema.style import A4_HEIGHT

CANVAS_VERSION = "6.0.0"


@dataclass
class Page:
    objects: List[VisualElement] = field(default_factory=list)
    background: str = "#ffffff"
    version: str = CANVAS_VERSION

    def to_dict(self) -> Dict[str, Any]:
        return {
            "version": self.version,
            "objects": [element.to_dict() for element in self.objects],
            "background": self.background,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Page":
        """
        Load a page, skipping objects that cannot be understood.

        Args:
            data: Persisted page dict

        Returns:
            Page with every supported object converted to an element
        """
        data = data or {}
        objects = []
        for index, raw in enumerate(data.get("objects") or []):
            try:
                objects.append(element_from_dict(raw))
            except ElementFormatError as e:
                _log_warning(f"Skipping canvas object {index}: {e.message} ({e.object_type!r})")
        return cls(
            objects=objects,
            background=data.get("background") or "#ffffff",
            version=data.get("version") or CANVAS_VERSION,
        )


@dataclass
class Document:
    pages: List[Page] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"pages": [page.to_dict() for page in self.pages]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Document":
        """Load a document; a bare page dict (with ``objects``) is read as one page."""
        data = data or {}
        if "pages" not in data and "objects" in data:
            return cls(pages=[Page.from_dict(data)])
        return cls(pages=[Page.from_dict(page) for page in data.get("pages") or []])


def paginate(elements: List[VisualElement], background: str = "#ffffff") -> Document:
    """
    Split a tall element list into A4 pages.

    Each element goes to the page its top edge falls on and is shifted to
    page-local coordinates. Rectangles taller than the remainder of their page
    (sidebar and column backgrounds) are cut into one piece per page.

    Args:
        elements: Elements in canvas coordinates
        background: Page background color

    Returns:
        Document with at least one page
    """
    pages: Dict[int, List[VisualElement]] = {}

    for element in elements:
        page_index = max(0, int(element.top // A4_HEIGHT))
        local_top = element.top - page_index * A4_HEIGHT

        if isinstance(element, RectElement) and local_top + element.height > A4_HEIGHT:
            remaining = element.height
            index = page_index
            top = local_top
            while remaining > 0:
                piece = min(remaining, A4_HEIGHT - top)
                pages.setdefault(index, []).append(
                    clone_element(element, top=top, height=piece, id=f"{element.id}-p{index}")
                    if index != page_index
                    else clone_element(element, top=top, height=piece)
                )
                remaining -= piece
                index += 1
                top = 0
            continue

        pages.setdefault(page_index, []).append(clone_element(element, top=local_top))

    page_count = max(pages) + 1 if pages else 1
    _log_debug(f"Paginated {len(elements)} elements into {page_count} page(s)")
    return Document(
        pages=[Page(objects=pages.get(i, []), background=background) for i in range(page_count)]
    )


def flatten(document: Document) -> List[VisualElement]:
    """Stack a document's pages into one element list in canvas coordinates."""
    elements = []
    for index, page in enumerate(document.pages):
        offset = index * A4_HEIGHT
        elements.extend(clone_element(element, top=element.top + offset) for element in page.objects)
    return elements
