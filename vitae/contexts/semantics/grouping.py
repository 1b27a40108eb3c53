"""
Section grouping over canvas elements.

Detects section headers and folds elements, in column-aware reading order, into
immutable SectionGroup records. Reverse extraction, tag inference context and
section reordering all share this fold.

Column awareness: the distinct ``left`` values of detected headers (clustered
within ANCHOR_TOLERANCE) are the column anchors. Every element belongs to the
anchor with the largest x not exceeding ``element.left + ANCHOR_TOLERANCE``, so
right-aligned dates inside a column stay with that column while a sidebar and
a main column are read one after the other instead of interleaved.
"""

from dataclasses import dataclass
from functools import reduce
from typing import Iterable, List, Optional, Sequence, Tuple

from vitae.contexts.schema.elements import TextElement, VisualElement
from vitae.contexts.schema.text_metrics import estimate_element_height
from vitae.contexts.semantics.patterns import MAX_HEADER_LENGTH, match_section_header
from vitae.contexts.vocabulary.semantic_types import SECTION_HEADER_TYPES, is_section_header_type

ANCHOR_TOLERANCE = 12

# Headers are smaller than names and titles
HEADER_MAX_FONT_SIZE = 20

# Letter spacing (1/1000 em) that marks an uppercase line as a styled header
HEADER_MIN_CHAR_SPACING = 20

# Rects at most this tall are dividers that travel with their section
DIVIDER_MAX_HEIGHT = 6

HEADER_GROUP = "header"
UNKNOWN_KIND = "unknown"

_KIND_BY_HEADER_TAG = {tag: category for category, tag in SECTION_HEADER_TYPES.items()}


@dataclass(frozen=True)
class SectionGroup:
    """
    One detected section in one column.

    Attributes:
        kind: Section kind ("experience", "skills", ...), "header" for the
            content above the first header of a column, or "unknown"
        header: Header element, None for the leading "header" group
        elements: Elements after the header, in reading order
        column: Column anchor x
    """

    kind: str
    header: Optional[TextElement]
    elements: Tuple[VisualElement, ...]
    column: float = 0.0

    @property
    def members(self) -> Tuple[VisualElement, ...]:
        """Header followed by the section elements."""
        return ((self.header,) if self.header is not None else ()) + self.elements

    @property
    def texts(self) -> Tuple[TextElement, ...]:
        return tuple(e for e in self.elements if e.kind == "text")

    @property
    def top(self) -> float:
        return min((e.top for e in self.members), default=0.0)

    @property
    def bottom(self) -> float:
        return max((e.top + estimate_element_height(e) for e in self.members), default=0.0)


def section_kind_for_tag(semantic_type: Optional[str]) -> Optional[str]:
    """
    Section kind named by a header tag.

    Examples:
        >>> section_kind_for_tag("experience_section")
        'experience'
        >>> section_kind_for_tag("section_header")
        >>> section_kind_for_tag("experience_title")
    """
    return _KIND_BY_HEADER_TAG.get(semantic_type or "")


def detect_section_header(element: VisualElement) -> Optional[str]:
    """
    Decide whether an element is a section header.

    A header is a short single-line text (font under 20) that is tagged as a
    section header, matches a header pattern, or is uppercase with wide letter
    spacing. Elements carrying a content tag are never headers.

    Returns:
        Section kind, "unknown" for an unrecognized header, or None
    """
    if getattr(element, "kind", None) != "text":
        return None
    text = (element.text or "").strip()
    if not text or "\n" in text or len(text) > MAX_HEADER_LENGTH:
        return None

    tag = element.semantic_type
    if is_section_header_type(tag):
        return section_kind_for_tag(tag) or match_section_header(text) or UNKNOWN_KIND
    if tag and tag != "custom_text":
        return None

    if element.font_size >= HEADER_MAX_FONT_SIZE:
        return None
    kind = match_section_header(text)
    if kind:
        return kind
    if text.isupper() and (element.char_spacing or 0) > HEADER_MIN_CHAR_SPACING:
        return UNKNOWN_KIND
    return None


def column_anchors(elements: Iterable[VisualElement]) -> List[float]:
    """
    Column anchors from the lefts of detected headers.

    Lefts within ANCHOR_TOLERANCE of the previous anchor join it. Without any
    header the leftmost text edge is the single anchor.
    """
    elements = list(elements)
    lefts = sorted(e.left for e in elements if detect_section_header(e))
    anchors: List[float] = []
    for left in lefts:
        if anchors and left - anchors[-1] <= ANCHOR_TOLERANCE:
            continue
        anchors.append(left)
    if not anchors:
        anchors = [min((e.left for e in elements), default=0.0)]
    return anchors


def assign_column(left: float, anchors: Sequence[float]) -> float:
    """Anchor owning an element at ``left``; elements left of every anchor go to the first."""
    candidates = [a for a in anchors if a <= left + ANCHOR_TOLERANCE]
    return max(candidates) if candidates else anchors[0]


def _is_grouped_shape(element: VisualElement) -> bool:
    return (
        element.kind == "rect"
        and element.height <= DIVIDER_MAX_HEIGHT
        and element.semantic_type != "background"
    )


def _columns(
    elements: Sequence[VisualElement], include_shapes: bool
) -> List[Tuple[float, List[VisualElement]]]:
    texts = [e for e in elements if e.kind == "text" and (e.text or "").strip()]
    members = texts + ([e for e in elements if _is_grouped_shape(e)] if include_shapes else [])
    anchors = column_anchors(texts)

    by_column = {anchor: [] for anchor in anchors}
    for element in members:
        by_column[assign_column(element.left, anchors)].append(element)

    # sorted() is stable, so equal (top, left) keep their input order
    return [
        (anchor, sorted(by_column[anchor], key=lambda e: (e.top, e.left)))
        for anchor in anchors
    ]


def reading_order(elements: Sequence[VisualElement]) -> List[TextElement]:
    """Non-empty text elements column by column, top-to-bottom within a column."""
    return [e for _, column in _columns(elements, include_shapes=False) for e in column]


def _fold_step(groups: List[list], element: VisualElement) -> List[list]:
    kind = detect_section_header(element)
    if kind:
        groups.append([kind, element, []])
    else:
        groups[-1][2].append(element)
    return groups


def fold_column(elements: Sequence[VisualElement], column: float = 0.0) -> List[SectionGroup]:
    """
    Fold one column's sorted elements into section groups.

    The fold starts with an open "header" group; each header closes the
    current group and opens one labeled by its kind.
    """
    folded = reduce(_fold_step, elements, [[HEADER_GROUP, None, []]])
    return [SectionGroup(kind, header, tuple(members), column) for kind, header, members in folded]


def group_sections(
    elements: Sequence[VisualElement], include_shapes: bool = False
) -> List[SectionGroup]:
    """
    Group elements into sections, column by column.

    Args:
        elements: Canvas elements (any order)
        include_shapes: Also place thin divider rects into the group they sit in

    Returns:
        Groups per column in column order; each column starts with its
        (possibly empty) "header" group
    """
    groups: List[SectionGroup] = []
    for anchor, column in _columns(elements, include_shapes):
        groups.extend(fold_column(column, anchor))
    return groups
