"""
Dynamic layout interpreter.

Places sections according to a DynamicLayout (section type, position, order)
instead of a fixed archetype. Positions resolve to columns with their own
cursors; the section content itself goes through the same SectionEmitter the
archetypes use.

Cursor rules:
- header-* positions start at y=25 inside a header band, or at MARGIN without one
- left/right columns start 20px below the header band (or below the header
  content when it overflows the band)
- full-width sections start below both columns
"""

from dataclasses import replace
from typing import Dict, List, Optional

from vitae.contexts.layout.section_emitter import (
    Column,
    HeaderDecoration,
    SectionEmitter,
    finalize_sidebar_height,
)
from vitae.contexts.schema.dynamic_layout import DynamicLayout, SectionPlacement, default_dynamic_layout
from vitae.contexts.schema.elements import RectElement, VisualElement
from vitae.contexts.schema.record import ResumeRecord
from vitae.contexts.schema.style import A4_HEIGHT, A4_WIDTH, CONTENT_WIDTH, MARGIN, ResumeStyle

HEADER_POSITIONS = ("header-left", "header-center", "header-right")
HEADER_RIGHT_WIDTH = 150

# Sections that render identity/contact content rather than a titled section
IDENTITY_SECTIONS = ("photo", "name", "title", "divider")


class _DynamicGeometry:
    """Column geometry and backgrounds derived from one DynamicLayout."""

    def __init__(self, layout: DynamicLayout, style: ResumeStyle, em: SectionEmitter):
        columns = layout.columns
        gap = columns.gap
        self.sidebar_rect: Optional[RectElement] = None
        self.header_height = layout.header.height if layout.header.has_header else 0

        sidebar = layout.sidebar if layout.sidebar and layout.sidebar.is_colored else None
        left_dark = right_dark = False

        if sidebar and sidebar.position == "left":
            left_x, left_width = 20, sidebar.width - 40
            right_x = sidebar.width + gap
            right_width = A4_WIDTH - right_x - MARGIN
            main_x, main_width = right_x, right_width
            self.sidebar_rect = em.add_rect(0, 0, sidebar.width, A4_HEIGHT, sidebar.background_color, tag="background")
            left_dark = True
        elif sidebar:
            sidebar_x = A4_WIDTH - sidebar.width
            left_x, left_width = MARGIN, sidebar_x - gap - MARGIN
            right_x, right_width = sidebar_x + 20, sidebar.width - 40
            main_x, main_width = left_x, left_width
            self.sidebar_rect = em.add_rect(
                sidebar_x, 0, sidebar.width, A4_HEIGHT, sidebar.background_color, tag="background"
            )
            right_dark = True
        else:
            total = CONTENT_WIDTH - gap
            left_x = MARGIN
            left_width = int(total * (columns.left_width / 100))
            right_x = left_x + left_width + gap
            right_width = total - left_width
            main_x, main_width = MARGIN, CONTENT_WIDTH

        band = self.header_height > 0 and sidebar is None
        if band:
            self.band = em.add_rect(0, 0, A4_WIDTH, self.header_height, style.colors.primary, tag="background")
        else:
            self.band = None

        header_y = 25 if self.header_height else MARGIN
        self.columns: Dict[str, Column] = {
            "header-left": Column(main_x, main_width - HEADER_RIGHT_WIDTH - 20, header_y, band, "header-left"),
            "header-center": Column(main_x, main_width, header_y, band, "header-center"),
            "header-right": Column(
                main_x + main_width - HEADER_RIGHT_WIDTH, HEADER_RIGHT_WIDTH, header_y, band, "header-right"
            ),
            "left-column": Column(
                left_x, left_width, 0, left_dark, "left-column", sidebar.text_color if left_dark else None
            ),
            "right-column": Column(
                right_x, right_width, 0, right_dark, "right-column", sidebar.text_color if right_dark else None
            ),
            "full-width": Column(main_x, main_width, 0, False, "full-width"),
        }
        # a side without its column flows into full width unless a sidebar sits there
        self.enabled = {
            "left-column": columns.has_left_column or left_dark,
            "right-column": columns.has_right_column or right_dark,
        }
        self._body_started = False
        self.body_top = 0.0

    def resolve_position(self, position: str) -> str:
        if position not in self.columns or not self.enabled.get(position, True):
            return "full-width"
        return position

    def column_for(self, position: str) -> Column:
        column = self.columns.get(position) or self.columns["full-width"]
        if position in HEADER_POSITIONS:
            return column
        if not self._body_started:
            self._start_body()
        if column.name == "full-width":
            column.y = max(column.y, self.columns["left-column"].y, self.columns["right-column"].y)
        return column

    def header_bottom(self) -> float:
        return max(self.columns[p].y for p in HEADER_POSITIONS)

    def _start_body(self) -> None:
        self._body_started = True
        header_bottom = self.header_bottom()
        if self.band is not None:
            self.band.height = max(self.band.height, header_bottom + 12)
            top = self.band.height + 20
        else:
            top = max(self.header_height + 20, header_bottom + 20)
        self.body_top = top
        for position in ("left-column", "right-column", "full-width"):
            self.columns[position].y = top

    def body_columns(self) -> List[Column]:
        return [self.columns[p] for p in ("left-column", "right-column", "full-width")]


def _decoration(placement: SectionPlacement) -> HeaderDecoration:
    return HeaderDecoration(
        uppercase=placement.style.uppercase,
        decorative_bullets=placement.style.decorative_bullets,
    )


def _emit_identity(
    em: SectionEmitter,
    column: Column,
    placement: SectionPlacement,
    record: ResumeRecord,
    layout: DynamicLayout,
) -> None:
    style = em.style
    centered = placement.position == "header-center"
    align = "center" if centered else ("right" if placement.position == "header-right" else "left")

    if placement.type == "photo":
        size = layout.header.photo_size
        if centered:
            x = column.x + (column.width - size) / 2
        elif placement.position == "header-right":
            x = column.right - size
        else:
            x = column.x
        em.add_photo(x, column.y, size)
        column.y += size + 10
    elif placement.type == "name" and record.personal_info.full_name.strip():
        em.add_text(
            column,
            record.personal_info.full_name.strip(),
            style.font_sizes.name,
            fill=column.text_color or (style.colors.header_text if column.on_dark else style.colors.primary),
            tag="name",
            bold=True,
            heading_font=True,
            align=align,
        )
        column.y += 2
    elif placement.type == "title" and record.personal_info.title.strip():
        em.add_text(
            column,
            record.personal_info.title.strip(),
            style.font_sizes.title,
            fill=em.body_fill(column) if column.on_dark else style.colors.accent,
            tag="title",
            align=align,
        )
        column.y += 4
    elif placement.type == "divider":
        em.add_rect(column.x, column.y + 4, column.width, 1, style.colors.secondary, tag="divider")
        column.y += 10


def _placements(layout: DynamicLayout, geometry: _DynamicGeometry) -> List[SectionPlacement]:
    """
    Placements in emission order, after column routing.

    A header photo requested through ``header.has_photo`` without an explicit
    photo placement leads its header slot.
    """
    placements = [replace(p, position=geometry.resolve_position(p.position)) for p in layout.sections]

    header = layout.header
    if header.has_photo and not any(p.type == "photo" for p in placements):
        side = header.photo_position if header.photo_position in ("left", "center", "right") else "left"
        position = f"header-{side}"
        first = min((p.order for p in placements if p.position == position), default=0)
        placements.append(SectionPlacement(type="photo", position=position, order=first - 1))

    return sorted(placements, key=lambda p: p.sort_key)


def render_dynamic(record: ResumeRecord, style: ResumeStyle) -> List[VisualElement]:
    """
    Render a record with the style's DynamicLayout (or the default one).

    Args:
        record: Resume record
        style: Style with layout_type "dynamic"

    Returns:
        Elements in canvas coordinates
    """
    layout = style.dynamic_layout or default_dynamic_layout()
    em = SectionEmitter(style)
    geometry = _DynamicGeometry(layout, style, em)
    divider_drawn = not layout.header.has_divider

    for placement in _placements(layout, geometry):
        column = geometry.column_for(placement.position)
        if not divider_drawn and placement.position not in HEADER_POSITIONS:
            em.add_rect(
                0,
                geometry.body_top - 12,
                A4_WIDTH,
                2,
                layout.header.divider_color or style.colors.accent,
                tag="divider",
            )
            divider_drawn = True

        options = {"decoration": _decoration(placement), "compact": placement.style.compact}

        if placement.type in IDENTITY_SECTIONS:
            _emit_identity(em, column, placement, record, layout)
        elif placement.type in ("contact", "details"):
            if placement.position in HEADER_POSITIONS or placement.position == "full-width":
                if placement.position == "header-right":
                    em.contact(column, record.personal_info, label_key=None, align="right")
                else:
                    fill = em.body_fill(column) if column.on_dark else style.colors.text_light
                    align = "center" if placement.position == "header-center" else "left"
                    em.inline_contact(column, record.personal_info, fill=fill, align=align)
                    column.y += 4
            else:
                em.emit(column, placement.type, record, **options)
        else:
            em.emit(column, placement.type, record, **options)

    if geometry.sidebar_rect is not None:
        finalize_sidebar_height(geometry.sidebar_rect, geometry.body_columns())
    return em.elements
