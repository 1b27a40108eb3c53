"""
In-place formatting of existing canvas elements.

``apply_style_delta`` recolors and refonts elements by their formatting role
without moving anything. ``reorder_sections`` moves whole section groups
vertically to follow a new section order.
"""

import statistics
from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from vitae.contexts.schema.elements import RectElement, VisualElement
from vitae.contexts.schema.style import ColorScheme, FontConfig, FontSizes, ResumeStyle
from vitae.contexts.semantics.extraction import coerce_elements, coerce_with_sources
from vitae.contexts.semantics.grouping import HEADER_GROUP, SectionGroup, group_sections
from vitae.contexts.switching.logger import log_formatting_result, log_reorder_result
from vitae.contexts.vocabulary.semantic_types import get_semantic_category, is_section_header_type

# =============================================================================
# FORMATTING ROLES
# =============================================================================

TITLE_TAGS = (
    "title",
    "experience_title",
    "education_degree",
    "certification_name",
    "project_name",
    "award_name",
    "publication_title",
    "volunteer_role",
    "reference_name",
    "course_name",
    "membership_organization",
    "patent_title",
    "military_branch",
    "skill_category",
)

SUBTITLE_TAGS = (
    "experience_company",
    "experience_location",
    "education_institution",
    "education_field",
    "education_location",
    "certification_issuer",
    "project_role",
    "award_issuer",
    "publication_journal",
    "publication_authors",
    "volunteer_organization",
    "volunteer_location",
    "reference_title",
    "reference_company",
    "course_provider",
    "membership_role",
    "military_rank",
)

DATE_SUFFIXES = ("_date", "_dates", "_expiry")

HEADING_ROLES = ("heading", "title")

# Role -> color attribute on a light background
ROLE_COLORS = {
    "heading": "primary",
    "title": "primary",
    "subtitle": "secondary",
    "dates": "text_light",
    "body": "text",
    "contact": "accent",
}

MOVE_THRESHOLD = 5
DEFAULT_SECTION_SPACING = 20

SECTION_ALIASES = {"profile": "summary", "details": "contact"}


def formatting_role(semantic_type: Optional[str]) -> Optional[str]:
    """
    Formatting role of a tag.

    Returns:
        "heading", "title", "subtitle", "dates", "contact", "body", or None for
        untagged, custom, layout and photo elements

    Examples:
        >>> formatting_role("experience_section")
        'heading'
        >>> formatting_role("experience_dates")
        'dates'
        >>> formatting_role("custom_text")
    """
    if not semantic_type:
        return None
    if semantic_type in ("name", "first_name", "last_name") or is_section_header_type(semantic_type):
        return "heading"
    if semantic_type in TITLE_TAGS:
        return "title"
    if semantic_type in SUBTITLE_TAGS:
        return "subtitle"
    if semantic_type.endswith(DATE_SUFFIXES):
        return "dates"

    category = get_semantic_category(semantic_type)
    if category == "contact":
        return "contact"
    if category in ("layout", "custom") or semantic_type == "photo":
        return None
    return "body"


def _font_size(semantic_type: str, role: str, sizes: FontSizes) -> float:
    if semantic_type in ("name", "first_name", "last_name"):
        return sizes.name
    if semantic_type == "title":
        return sizes.title
    if role == "heading":
        return sizes.section_header
    if role == "title":
        return sizes.job_title
    if role in ("dates", "contact"):
        return sizes.small
    return sizes.body


# =============================================================================
# STYLE DELTA
# =============================================================================


@dataclass
class StyleDelta:
    """
    Formatting to apply; None parts are left alone.

    Attributes:
        colors: Color roles
        fonts: Heading/body font families
        font_sizes: Font size scale
        line_height: Line height for body textboxes
    """

    colors: Optional[ColorScheme] = None
    fonts: Optional[FontConfig] = None
    font_sizes: Optional[FontSizes] = None
    line_height: Optional[float] = None

    @classmethod
    def from_style(cls, style: ResumeStyle) -> "StyleDelta":
        return cls(style.colors, style.fonts, style.font_sizes, style.layout.line_height)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StyleDelta":
        """
        Build a delta from camelCase keys (colors, fonts, fontSizes, lineHeight).

        A present part is completed with defaults, as when loading a style.
        """
        data = data or {}
        line_height = data.get("lineHeight")
        if line_height is None:
            line_height = (data.get("layout") or {}).get("lineHeight")
        return cls(
            colors=ColorScheme.from_dict(data["colors"]) if data.get("colors") else None,
            fonts=FontConfig.from_dict(data["fonts"]) if data.get("fonts") else None,
            font_sizes=FontSizes.from_dict(data["fontSizes"]) if data.get("fontSizes") else None,
            line_height=line_height,
        )


@dataclass
class FormattingChanges:
    """Counts of attribute changes from one formatting pass."""

    colors: int = 0
    fonts: int = 0
    sizes: int = 0
    line_heights: int = 0
    elements: int = 0

    @property
    def total(self) -> int:
        return self.colors + self.fonts + self.sizes + self.line_heights


def _background_rects(elements: Sequence[VisualElement]) -> List[RectElement]:
    return [e for e in elements if e.kind == "rect" and e.semantic_type == "background"]


def _on_background(element: VisualElement, backgrounds: Sequence[RectElement]) -> bool:
    return any(
        rect.left <= element.left < rect.left + rect.width and rect.top <= element.top < rect.top + rect.height
        for rect in backgrounds
    )


def _role_fill(role: str, colors: ColorScheme, on_dark: bool) -> str:
    if on_dark:
        return colors.header_text if role in HEADING_ROLES else colors.on_sidebar
    return getattr(colors, ROLE_COLORS[role])


def _plan(
    elements: Sequence[VisualElement],
    delta: StyleDelta,
    apply_colors: bool,
    apply_fonts: bool,
    apply_spacing: bool,
) -> List[Tuple[VisualElement, Dict[str, Any]]]:
    """Attribute changes per element; only attributes that actually differ are listed."""
    backgrounds = _background_rects(elements)
    plan = []
    for element in elements:
        if element.kind != "text":
            continue
        role = formatting_role(element.semantic_type)
        if role is None:
            continue

        wanted: Dict[str, Any] = {}
        if apply_colors and delta.colors is not None:
            wanted["fill"] = _role_fill(role, delta.colors, _on_background(element, backgrounds))
        if apply_fonts and delta.fonts is not None:
            wanted["font_family"] = delta.fonts.heading if role in HEADING_ROLES else delta.fonts.body
        if apply_fonts and delta.font_sizes is not None:
            wanted["font_size"] = _font_size(element.semantic_type, role, delta.font_sizes)
        if apply_spacing and delta.line_height is not None and role == "body" and element.width:
            wanted["line_height"] = delta.line_height

        changes = {attr: value for attr, value in wanted.items() if getattr(element, attr) != value}
        if changes:
            plan.append((element, changes))
    return plan


def _count(plan: List[Tuple[VisualElement, Dict[str, Any]]]) -> FormattingChanges:
    counts = Counter(attr for _, changes in plan for attr in changes)
    return FormattingChanges(
        colors=counts["fill"],
        fonts=counts["font_family"],
        sizes=counts["font_size"],
        line_heights=counts["line_height"],
        elements=len(plan),
    )


# Persisted keys of the attributes formatting changes
PERSISTED_KEYS = {"fill": "fill", "font_family": "fontFamily", "font_size": "fontSize", "line_height": "lineHeight"}


def _as_delta(delta: Any) -> StyleDelta:
    if isinstance(delta, StyleDelta):
        return delta
    if isinstance(delta, ResumeStyle):
        return StyleDelta.from_style(delta)
    return StyleDelta.from_dict(delta)


def apply_style_delta(
    elements: Sequence[Any],
    delta: Any,
    apply_colors: bool = True,
    apply_fonts: bool = True,
    apply_spacing: bool = True,
) -> FormattingChanges:
    """
    Restyle tagged text elements in place by formatting role.

    Positions are never touched. Text over a header band or sidebar gets the
    on-dark colors.

    Args:
        elements: Canvas elements or their persisted dicts, mutated in place
        delta: StyleDelta, ResumeStyle, or a camelCase dict
        apply_colors: Update fills
        apply_fonts: Update font families and sizes
        apply_spacing: Update line heights of body textboxes

    Returns:
        FormattingChanges with per-attribute counts
    """
    pairs = coerce_with_sources(elements)
    sources = {id(element): source for element, source in pairs if source is not None}
    plan = _plan([element for element, _ in pairs], _as_delta(delta), apply_colors, apply_fonts, apply_spacing)
    for element, changes in plan:
        source = sources.get(id(element))
        for attr, value in changes.items():
            setattr(element, attr, value)
            if source is not None:
                source[PERSISTED_KEYS[attr]] = value
    changes = _count(plan)
    log_formatting_result(changes)
    return changes


def preview_style_delta(
    elements: Sequence[Any],
    delta: Any,
    apply_colors: bool = True,
    apply_fonts: bool = True,
    apply_spacing: bool = True,
) -> FormattingChanges:
    """Count what ``apply_style_delta`` would change, without changing anything."""
    changes = _count(_plan(coerce_elements(elements), _as_delta(delta), apply_colors, apply_fonts, apply_spacing))
    log_formatting_result(changes, preview=True)
    return changes


# =============================================================================
# SECTION REORDERING
# =============================================================================


def _section_key(name: str) -> str:
    name = name.strip().lower()
    if name.endswith("_section"):
        name = name[: -len("_section")]
    return SECTION_ALIASES.get(name, name)


def _median_gap(bounds: Sequence[Tuple[float, float]]) -> float:
    gaps = [below[0] - above[1] for above, below in zip(bounds, bounds[1:]) if below[0] - above[1] > 0]
    return statistics.median(gaps) if gaps else DEFAULT_SECTION_SPACING


def _reorder_column(
    groups: Sequence[SectionGroup], order: Sequence[str], section_spacing: Optional[float], moved: Counter
) -> None:
    movable = [g for g in groups if g.kind != HEADER_GROUP and g.members]
    if not movable:
        return
    bounds = [(g.top, g.bottom) for g in movable]
    spacing = _median_gap(bounds) if section_spacing is None else section_spacing

    def rank(index: int) -> Tuple[int, int]:
        kind = movable[index].kind
        return (order.index(kind) if kind in order else len(order), index)

    cursor = bounds[0][0]
    for index in sorted(range(len(movable)), key=rank):
        top, bottom = bounds[index]
        shift = cursor - top
        if abs(shift) >= MOVE_THRESHOLD:
            for element in movable[index].members:
                element.top += shift
            moved[movable[index].kind] += 1
        cursor += bottom - top + spacing


def reorder_sections(
    elements: Sequence[Any], new_order: Sequence[str], section_spacing: Optional[float] = None
) -> int:
    """
    Move section groups vertically to follow a new order, column by column.

    Each column's leading header group stays put; its sections are restacked
    from the top of the first one. Sections missing from ``new_order`` follow
    in their current order. Divider rects move with their section.

    Args:
        elements: Canvas elements or their persisted dicts, mutated in place
        new_order: Section names ("experience", "skills_section", "profile", ...)
        section_spacing: Gap between sections; defaults to the median existing gap

    Returns:
        Number of section groups moved

    Example:
        >>> reorder_sections(elements, ["skills", "experience"])
        2
    """
    order = [_section_key(name) for name in new_order]
    moved: Counter = Counter()
    pairs = coerce_with_sources(elements)
    groups = group_sections([element for element, _ in pairs], include_shapes=True)

    by_column: Dict[float, List[SectionGroup]] = {}
    for group in groups:
        by_column.setdefault(group.column, []).append(group)
    for column_groups in by_column.values():
        _reorder_column(column_groups, order, section_spacing, moved)

    if moved:
        for element, source in pairs:
            if source is not None:
                source["top"] = element.top

    log_reorder_result(order, moved)
    return sum(moved.values())
