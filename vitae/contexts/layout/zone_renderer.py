"""
Zone-based rendering.

Renders a record into the rectangular zones of a ZoneLayout. Zone geometry is
given in percent of the A4 page and converted to pixels; each zone gets a
Column inset by ZONE_PADDING on every side and its sections are emitted
through the shared SectionEmitter.

Zones are independent: each has its own cursor and content may grow past the
zone's nominal height. Sidebar zones with a background are stretched to whole
pages once everything is placed.
"""

from typing import Any, Dict, List, Tuple, Union

from vitae.contexts.layout.logger import _log_debug, _log_warning, log_render_result
from vitae.contexts.layout.section_emitter import Column, SectionEmitter, finalize_sidebar_height
from vitae.contexts.schema.elements import RectElement, VisualElement
from vitae.contexts.schema.record import ResumeRecord
from vitae.contexts.schema.style import A4_HEIGHT, A4_WIDTH, ResumeStyle
from vitae.contexts.schema.zone_layout import LayoutZone, ZoneLayout

ZONE_PADDING = 20
MAX_PHOTO_SIZE = 80

# Sections the emitter knows, plus the identity pieces handled here
ZONE_SECTIONS = (
    "photo",
    "name",
    "title",
    "divider",
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
)


def pct_to_x(pct: float) -> int:
    return round(pct / 100 * A4_WIDTH)


def pct_to_y(pct: float, page_height: float = A4_HEIGHT) -> int:
    return round(pct / 100 * page_height)


def zone_box(zone: LayoutZone) -> Tuple[int, int, int, int]:
    """Zone rectangle in pixels as (x, y, width, height)."""
    return pct_to_x(zone.x), pct_to_y(zone.y), pct_to_x(zone.width), pct_to_y(zone.height)


def zone_column(zone: LayoutZone) -> Column:
    x, y, width, _ = zone_box(zone)
    return Column(
        x + ZONE_PADDING,
        max(width - 2 * ZONE_PADDING, 1),
        y + ZONE_PADDING,
        on_dark=zone.has_background,
        name=zone.id,
        text_color=zone.text_color,
    )


def _emit_zone_section(
    em: SectionEmitter, column: Column, zone: LayoutZone, section: str, record: ResumeRecord
) -> None:
    style = em.style
    personal = record.personal_info

    if section == "photo":
        size = min(MAX_PHOTO_SIZE, column.width * 0.6)
        em.add_photo(column.x + (column.width - size) / 2, column.y, size)
        column.y += size + ZONE_PADDING
    elif section == "name":
        if personal.full_name.strip():
            em.add_text(
                column,
                personal.full_name.strip(),
                style.font_sizes.name,
                fill=column.text_color or (style.colors.header_text if column.on_dark else style.colors.primary),
                tag="name",
                bold=True,
                heading_font=True,
            )
            column.y += 4
    elif section == "title":
        if personal.title.strip():
            em.add_text(column, personal.title.strip(), style.font_sizes.title, fill=em.muted_fill(column), tag="title")
            column.y += 8
    elif section == "divider":
        em.add_rect(column.x, column.y + 4, column.width, 1, em.muted_fill(column), tag="divider")
        column.y += 12
    elif section in ("contact", "details"):
        if zone.is_header:
            em.inline_contact(column, personal, fill=em.muted_fill(column))
            column.y += 8
        else:
            em.contact(column, personal, label_key=None)
            column.y += 10
    else:
        em.emit(column, section, record, compact=column.width < 200)


def render_zones(
    record: Union[ResumeRecord, Dict[str, Any]],
    zone_layout: Union[ZoneLayout, Dict[str, Any]],
    style: Union[ResumeStyle, Dict[str, Any]],
) -> List[VisualElement]:
    """
    Render a record into the zones of a ZoneLayout.

    Backgrounds go first so text always sits on top. Zones are filled in list
    order; unknown section names are skipped with a warning.

    Args:
        record: ResumeRecord, or its persisted dict form
        zone_layout: ZoneLayout, or the generator output holding one
        style: ResumeStyle (or its dict form) supplying colors, fonts, sizes and spacing

    Returns:
        Elements in canvas coordinates

    Example:
        >>> layout = ZoneLayout.from_dict(generator_output)
        >>> elements = render_zones(get_sample_record("en"), layout, style)
    """
    if isinstance(record, dict):
        record = ResumeRecord.from_dict(record)
    if isinstance(zone_layout, dict):
        zone_layout = ZoneLayout.from_dict(zone_layout)
    if isinstance(style, dict):
        style = ResumeStyle.from_dict(style)

    em = SectionEmitter(style)
    sidebars: List[RectElement] = []

    for zone in zone_layout.zones:
        if zone.has_background:
            rect = em.add_rect(*zone_box(zone), zone.background_color, tag="background")
            if zone.is_sidebar:
                sidebars.append(rect)

    columns: List[Column] = []
    for zone in zone_layout.zones:
        column = zone_column(zone)
        _log_debug(f"Zone '{zone.id}' at ({column.x:.0f}, {column.y:.0f}) width {column.width:.0f}: {zone.sections}")
        for section in zone.sections:
            if section not in ZONE_SECTIONS:
                _log_warning(f"Zone '{zone.id}': unknown section '{section}' skipped")
                continue
            _emit_zone_section(em, column, zone, section, record)
        columns.append(column)

    # stretch only when content runs past the first page
    if columns and max(column.y for column in columns) + 40 > A4_HEIGHT:
        for rect in sidebars:
            rect.top = 0
            finalize_sidebar_height(rect, columns)

    log_render_result(f"zones/{zone_layout.layout_type}", em.elements)
    return em.elements
