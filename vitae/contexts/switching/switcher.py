"""
Template switching.

Re-flows the tagged content of an edited canvas into another layout archetype.
Texts are never rewritten: every tagged text element reappears with the same
text and id, positioned and styled by the target's template zones. Section
headers keep their existing wording; missing ones get the localized default.

Untagged text is dropped (run tag inference first to keep it). Custom and
layout texts are carried to the end of the main column, user shapes tagged
custom_shape are kept verbatim, and the previous template's decorative shapes
are dropped.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Union

from vitae.contexts.layout.renderer import render
from vitae.contexts.layout.section_emitter import (
    HEADER_GAP,
    HEADING_LINE_HEIGHT,
    Column,
    SectionEmitter,
    finalize_sidebar_height,
)
from vitae.contexts.schema.elements import TextElement, VisualElement, clone_element
from vitae.contexts.schema.sample_data import get_sample_record
from vitae.contexts.schema.style import MARGIN, ResumeStyle
from vitae.contexts.schema.template_registry import TemplateRegistry
from vitae.contexts.schema.text_metrics import estimate_text_width
from vitae.contexts.semantics.extraction import coerce_elements
from vitae.contexts.semantics.grouping import reading_order
from vitae.contexts.switching.logger import _log_debug, _log_warning, log_switch_result
from vitae.contexts.switching.zones import (
    AUTO,
    DEFAULT_SECTION_ORDER,
    SIDEBAR_SECTIONS,
    ElementZone,
    StyleDict,
    TemplateZones,
    generate_zones,
    resolve_element_style,
)
from vitae.contexts.vocabulary.labels import get_section_header
from vitae.contexts.vocabulary.semantic_types import (
    SECTION_HEADER_TYPES,
    get_semantic_category,
    is_section_header_type,
)

HEADER_PADDING = 12
BODY_GAP = 20
PHOTO_GAP = 15
CONTACT_GAP = 6

# Categories whose texts are carried over instead of routed to a section
CARRIED_CATEGORIES = ("custom", "layout")

# Sections placed before the generic section loop
LEADING_SECTIONS = ("personal", "contact", "summary")

# Tags always laid out as wrapped paragraphs
PARAGRAPH_SUFFIXES = ("_description", "_list", "summary", "objective")

NAME_TAGS = ("name", "first_name", "last_name")


@dataclass
class _Content:
    """Tagged source texts sorted by category, in reading order."""

    headers: Dict[str, TextElement] = field(default_factory=dict)
    items: Dict[str, List[TextElement]] = field(default_factory=lambda: defaultdict(list))
    carried: List[TextElement] = field(default_factory=list)

    def has(self, category: str) -> bool:
        return category in self.headers or bool(self.items.get(category))


def _sort_content(texts: Sequence[TextElement]) -> _Content:
    content = _Content()
    for element in texts:
        tag = element.semantic_type
        category = get_semantic_category(tag)
        if category in CARRIED_CATEGORIES:
            content.carried.append(element)
        elif is_section_header_type(tag):
            if category in content.headers:
                content.carried.append(element)
            else:
                content.headers[category] = element
        else:
            content.items[category].append(element)
    return content


# =============================================================================
# PLACEMENT HELPERS
# =============================================================================


def _overlaps(column: Column, left: float, width: float) -> bool:
    return column.x < left + width and left < column.right


def _needs_wrap(element: TextElement, size: float, bold: bool, column: Column, align: str) -> bool:
    tag = element.semantic_type or ""
    text = element.text or ""
    if tag.endswith(PARAGRAPH_SUFFIXES) or "\n" in text or align != "left":
        return True
    return estimate_text_width(text, size, bold) > column.width


def _place(
    em: SectionEmitter,
    column: Column,
    element: TextElement,
    style_dict: StyleDict,
    *,
    fill: Optional[str] = None,
    align: Optional[str] = None,
) -> TextElement:
    """Emit a source text at the column cursor with the resolved style, keeping its id and group."""
    size = style_dict.get("font_size") or element.font_size
    bold = style_dict.get("font_weight", "normal") == "bold"
    italic = style_dict.get("font_style") == "italic"
    align = align or style_dict.get("text_align", "left")
    tag = element.semantic_type or ""

    if fill is None:
        if column.on_dark:
            fill = em.style.colors.header_text if bold else em.style.colors.on_sidebar
        else:
            fill = style_dict.get("fill", em.style.colors.text)

    line_height = style_dict.get("line_height")
    if line_height is None:
        line_height = em.style.layout.line_height if tag.endswith(PARAGRAPH_SUFFIXES) else HEADING_LINE_HEIGHT

    placed, _ = em.add_text(
        column,
        element.text,
        size,
        fill=fill,
        tag=element.semantic_type,
        group=element.semantic_group,
        bold=bold,
        italic=italic,
        wrap=_needs_wrap(element, size, bold, column, align),
        align=align,
        char_spacing=style_dict.get("char_spacing", 0),
        line_height=line_height,
        heading_font=bold,
    )
    placed.id = element.id
    return placed


def _zone_style(zone: ElementZone) -> StyleDict:
    return {
        "font_size": zone.font_size,
        "font_weight": zone.font_weight,
        "text_align": zone.text_align,
        "char_spacing": zone.char_spacing,
    }


def _header(
    em: SectionEmitter,
    column: Column,
    text: str,
    header_style: StyleDict,
    tag: str,
    source: Optional[TextElement] = None,
) -> TextElement:
    """Emit a section header; a reused source header keeps its id."""
    align = header_style.get("text_align", "left")
    element, _ = em.add_text(
        column,
        text,
        header_style["font_size"],
        fill=em.heading_fill(column) if column.on_dark else header_style["fill"],
        tag=tag,
        bold=True,
        wrap=align != "left",
        align=align,
        char_spacing=header_style.get("char_spacing", 0),
        heading_font=True,
    )
    column.y += HEADER_GAP
    if source is not None:
        element.id = source.id
    return element


def _section_items(
    em: SectionEmitter, column: Column, items: Sequence[TextElement], zones: TemplateZones
) -> None:
    """Emit section content; a change of semantic group starts a new entry."""
    previous: Optional[str] = None
    for i, element in enumerate(items):
        if i and element.semantic_group != previous:
            em.end_item(column)
        _place(em, column, element, resolve_element_style(element.semantic_type, zones, em.style))
        previous = element.semantic_group


# =============================================================================
# BLOCKS
# =============================================================================


def _place_photo(em: SectionEmitter, zones: TemplateZones, source: Sequence[VisualElement]) -> Optional[VisualElement]:
    photo = next((e for e in source if e.kind != "text" and e.semantic_type == "photo"), None)
    if photo is None:
        return None
    zone = zones.personal.photo
    if zone is None:
        _log_debug(f"{zones.layout_type} has no photo zone, dropping photo {photo.id}")
        return None
    if photo.kind == "circle":
        placed = clone_element(photo, left=zone.x, top=zone.y, radius=zone.width / 2)
    else:
        placed = clone_element(photo, left=zone.x, top=zone.y, width=zone.width, height=zone.width)
    em.elements.append(placed)
    return placed


def _below_photo(column: Column, photo: Optional[VisualElement]) -> None:
    if photo is None:
        return
    size = photo.width if photo.kind == "rect" else photo.radius * 2
    if _overlaps(column, photo.left, size) and column.y < photo.top + size:
        column.y = photo.top + size + PHOTO_GAP


def _personal_block(
    em: SectionEmitter, zones: TemplateZones, content: _Content, photo: Optional[VisualElement]
) -> Column:
    zone = zones.personal
    column = Column(zone.name.x, zone.name.width, zone.name.y, on_dark=zone.on_dark, name="personal")
    _below_photo(column, photo)

    for element in content.items.get("personal", []):
        tag = element.semantic_type
        element_zone = zone.title if tag == "title" else zone.name if tag in NAME_TAGS else None
        if element_zone is None:
            _place(em, column, element, resolve_element_style(tag, zones, em.style))
            continue
        column.y += element_zone.margin_top
        _place(em, column, element, _zone_style(element_zone), fill=element_zone.fill)
    return column


def _contact_block(
    em: SectionEmitter, zones: TemplateZones, content: _Content, personal: Column, photo: Optional[VisualElement]
) -> Column:
    zone = zones.contact
    y = personal.y + CONTACT_GAP if zone.y == AUTO else zone.y
    column = Column(zone.x, zone.width, y, on_dark=zone.on_dark, name="contact")
    _below_photo(column, photo)

    header = content.headers.get("contact")
    items = content.items.get("contact", [])
    size = zone.item_style.get("font_size", em.style.font_sizes.small)
    fill = zone.item_style.get("fill", em.body_fill(column))
    align = zone.item_style.get("text_align", "left")

    if zone.layout == "horizontal":
        sources = ([header] if header is not None else []) + list(items)
        placed = em.inline_items(
            column,
            [(e.semantic_type, e.text) for e in sources],
            size,
            fill=fill,
            align=align,
            gap=zone.spacing,
            bold_tags=("contact_section",),
        )
        for new, old in zip(placed, sources):
            new.id = old.id
            new.semantic_group = old.semantic_group
        return column

    if header is not None:
        _header(em, column, header.text, zones.sections.header_style, "contact_section", header)
    for element in items:
        _place(em, column, element, zone.item_style, fill=fill, align=align)
        column.y += zone.spacing
    return column


# =============================================================================
# SWITCHING
# =============================================================================


def switch_template(
    elements: Sequence[Any], target_style: Union[ResumeStyle, Dict[str, Any]]
) -> List[VisualElement]:
    """
    Re-flow tagged canvas content into the target style's archetype.

    Args:
        elements: Current canvas elements (or their persisted dicts); not modified
        target_style: Target ResumeStyle, or its persisted dict form

    Returns:
        New element list. Without any tagged text the target archetype's
        sample content is rendered instead of an empty page.

    Example:
        >>> before = render(get_sample_record("en"), create_style("single-column", "navyProfessional"))
        >>> after = switch_template(before, create_style("sidebar-left", "tealModern"))
    """
    style = ResumeStyle.from_dict(target_style) if isinstance(target_style, dict) else target_style
    source = coerce_elements(elements)
    texts = [e for e in reading_order(source) if e.semantic_type]

    if not texts:
        _log_warning(f"No tagged elements to switch, rendering {style.layout_type} sample content")
        return render(get_sample_record(style.locale), style)

    zones = generate_zones(style)
    content = _sort_content(texts)
    em = SectionEmitter(style)
    spacing = style.layout.section_spacing

    band = sidebar = None
    if zones.header_area is not None:
        area = zones.header_area
        band = em.add_rect(area.x, area.y, area.width, area.height, area.background_color, tag="background")
    if zones.sidebar_area is not None:
        area = zones.sidebar_area
        sidebar = em.add_rect(area.x, area.y, area.width, area.height, area.background_color, tag="background")

    photo = _place_photo(em, zones, source)
    personal = _personal_block(em, zones, content, photo)
    contact = _contact_block(em, zones, content, personal, photo)
    identity = (personal, contact)

    def in_sidebar(column: Column) -> bool:
        return zones.sidebar_area is not None and zones.sidebar_area.contains_x(column.x)

    main_area = zones.main_content_area
    if band is not None:
        in_band = [c for c in identity if c.on_dark and not in_sidebar(c)]
        band.height = max(band.height, max([c.y for c in in_band], default=0) + HEADER_PADDING)
        start = band.height + BODY_GAP
    else:
        start = main_area.y
        for column in identity:
            if not column.on_dark and not in_sidebar(column) and _overlaps(column, main_area.x, main_area.width):
                start = max(start, column.y + spacing)

    side = None
    if zones.sidebar_area is not None:
        area = zones.sidebar_area
        side = Column(area.x + 20, area.width - 40, MARGIN, on_dark=True, name="sidebar")
        for column in identity:
            if in_sidebar(column):
                side.y = max(side.y, column.y + spacing)

    # Summary
    summary_zone = zones.summary
    summary_y = start if summary_zone.y == AUTO else max(summary_zone.y, start)
    summary = Column(summary_zone.x, summary_zone.width, summary_y, name="summary")
    if content.has("summary"):
        header = content.headers.get("summary")
        _header(
            em,
            summary,
            header.text if header is not None else get_section_header("summary", style.locale),
            summary_zone.header_style or zones.sections.header_style,
            "summary_section",
            header,
        )
        for element in content.items.get("summary", []):
            tag_style = summary_zone.style if element.semantic_type == "summary" else None
            _place(em, summary, element, tag_style or resolve_element_style(element.semantic_type, zones, style))
        em.end_section(summary)

    def body_column(x: float, width: float, name: str) -> Column:
        column = Column(x, width, start, name=name)
        if summary.y > summary_y and _overlaps(column, summary.x, summary.width):
            column.y = summary.y
        return column

    sections = zones.sections
    main = body_column(sections.x, sections.width, "main")
    asides: Dict[float, Column] = {}

    def route(section: str) -> Column:
        if side is not None and section in SIDEBAR_SECTIONS:
            return side
        override = zones.category_styles.get(section, {})
        if "x" not in override:
            return main
        x = override["x"]
        if side is not None and zones.sidebar_area.contains_x(x):
            return side
        if x not in asides:
            asides[x] = body_column(x, override.get("width", sections.width), "aside")
        return asides[x]

    placed_sections: List[str] = []
    for section in DEFAULT_SECTION_ORDER:
        if section in LEADING_SECTIONS or not content.has(section):
            continue
        column = route(section)
        header = content.headers.get(section)
        _header(
            em,
            column,
            header.text if header is not None else get_section_header(section, style.locale),
            sections.header_style,
            SECTION_HEADER_TYPES.get(section, "section_header"),
            header,
        )
        _section_items(em, column, content.items.get(section, []), zones)
        em.end_section(column)
        placed_sections.append(f"{section}->{column.name}")

    # Unclassified texts keep their own styling
    for element in content.carried:
        placed, _ = em.add_text(
            main,
            element.text,
            element.font_size,
            fill=element.fill,
            tag=element.semantic_type,
            group=element.semantic_group,
            bold=element.is_bold,
            italic=element.font_style == "italic",
            wrap=_needs_wrap(element, element.font_size, element.is_bold, main, element.text_align),
            align=element.text_align,
            char_spacing=element.char_spacing,
            line_height=element.line_height,
        )
        placed.id = element.id
        em.end_item(main, compact=True)

    for shape in source:
        if shape.kind != "text" and shape.semantic_type == "custom_shape":
            em.elements.append(clone_element(shape))

    if sidebar is not None:
        finalize_sidebar_height(sidebar, [side, main, summary, personal, contact, *asides.values()])

    log_switch_result(style.layout_type, placed_sections, len(content.carried), len(em.elements))
    return list(em.elements)


def switch_to_template(
    elements: Sequence[Any], template_id: str, registry: Optional[TemplateRegistry] = None
) -> List[VisualElement]:
    """
    Switch to a named template from the catalog.

    Raises:
        TemplateNotFoundError: If the template id is not in the catalog
    """
    registry = registry or TemplateRegistry()
    template = registry.get_template(template_id)
    return switch_template(elements, template.style)
