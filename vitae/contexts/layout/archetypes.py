"""
The six fixed layout archetypes.

Each archetype draws its own header block and backgrounds, then hands sections
to the shared SectionEmitter column by column. The section -> column tables
below are the only difference in section placement between archetypes.
"""

from typing import List

from vitae.contexts.layout.section_emitter import (
    Column,
    HeaderDecoration,
    SectionEmitter,
    finalize_sidebar_height,
)
from vitae.contexts.schema.elements import VisualElement
from vitae.contexts.schema.record import ResumeRecord
from vitae.contexts.schema.style import A4_HEIGHT, A4_WIDTH, CONTENT_WIDTH, MARGIN, ResumeStyle

# =============================================================================
# SECTION -> COLUMN TABLES
# =============================================================================

SINGLE_COLUMN_SECTIONS = (
    "summary",
    "experience",
    "education",
    "skills",
    "languages",
    "certifications",
    "projects",
    "interests",
)

SIDEBAR_LEFT_SIDE = ("skills", "languages", "interests")
SIDEBAR_LEFT_MAIN = ("profile", "experience", "education", "projects", "certifications")

SIDEBAR_RIGHT_SIDE = ("skills", "languages", "certifications", "interests")
SIDEBAR_RIGHT_MAIN = ("summary", "experience", "education", "projects")

TWO_COLUMN_LEFT = ("education", "skills", "languages", "interests")
TWO_COLUMN_RIGHT = ("experience", "projects", "certifications")

SPLIT_FIRST = ("summary", "experience", "projects")
SPLIT_SECOND = ("education", "skills", "languages", "certifications", "interests")

TWO_COLUMN_LEFT_WIDTH = 160
TWO_COLUMN_GAP = 25
SPLIT_GAP = 30
PHOTO_SIZE = 70


def _name(em: SectionEmitter, column: Column, record: ResumeRecord, **kwargs) -> None:
    name = record.personal_info.full_name.strip()
    if not name:
        return
    options = {
        "fill": em.style.colors.header_text if column.on_dark else em.style.colors.primary,
        "bold": True,
        "heading_font": True,
        "tag": "name",
    }
    options.update(kwargs)
    size = options.pop("font_size", em.style.font_sizes.name)
    em.add_text(column, name, size, **options)


def _title(em: SectionEmitter, column: Column, record: ResumeRecord, **kwargs) -> None:
    title = record.personal_info.title.strip()
    if not title:
        return
    column.y += 2
    options = {"fill": em.body_fill(column), "tag": "title"}
    options.update(kwargs)
    size = options.pop("font_size", em.style.font_sizes.title)
    em.add_text(column, title, size, **options)


def render_single_column(record: ResumeRecord, style: ResumeStyle) -> List[VisualElement]:
    """Full-width header band with name, title and inline contact; one body column."""
    em = SectionEmitter(style)
    band = em.add_rect(0, 0, A4_WIDTH, style.layout.header_height, style.colors.primary, tag="background")

    head_width = CONTENT_WIDTH
    if record.personal_info.photo:
        em.add_photo(A4_WIDTH - MARGIN - PHOTO_SIZE, 15, PHOTO_SIZE)
        head_width -= PHOTO_SIZE + 15

    head = Column(MARGIN, head_width, 20, on_dark=True, name="header")
    _name(em, head, record, wrap=False)
    _title(em, head, record)
    head.y += 6
    em.inline_contact(head, record.personal_info, fill=em.style.colors.on_sidebar)

    band.height = max(style.layout.header_height, head.y + 12)

    main = Column(MARGIN, CONTENT_WIDTH, band.height + 20)
    em.emit_all(main, SINGLE_COLUMN_SECTIONS, record)
    return em.elements


def render_sidebar_left(record: ResumeRecord, style: ResumeStyle) -> List[VisualElement]:
    """Colored full-height sidebar on the left holding identity, contact and short lists."""
    em = SectionEmitter(style)
    sidebar_width = style.sidebar_width
    sidebar = em.add_rect(0, 0, sidebar_width, A4_HEIGHT, style.colors.primary, tag="background")

    side = Column(20, sidebar_width - 40, 30, on_dark=True, name="sidebar")
    if record.personal_info.photo:
        em.add_photo(sidebar_width / 2 - 40, side.y, 80)
        side.y += 95
    _name(em, side, record, font_size=style.font_sizes.name - 4)
    _title(em, side, record, font_size=style.font_sizes.title - 2)
    side.y += style.layout.section_spacing

    em.contact(side, record.personal_info, label_key="contact")
    em.emit_all(side, SIDEBAR_LEFT_SIDE, record)

    main_x = sidebar_width + 20
    main = Column(main_x, A4_WIDTH - main_x - MARGIN, MARGIN)
    em.emit_all(main, SIDEBAR_LEFT_MAIN, record)

    finalize_sidebar_height(sidebar, [side, main])
    return em.elements


def render_sidebar_right(record: ResumeRecord, style: ResumeStyle) -> List[VisualElement]:
    """Mirror of sidebar-left: identity and main sections left, sidebar on the right."""
    em = SectionEmitter(style)
    sidebar_width = style.sidebar_width
    sidebar_x = A4_WIDTH - sidebar_width
    sidebar = em.add_rect(sidebar_x, 0, sidebar_width, A4_HEIGHT, style.colors.primary, tag="background")

    main = Column(MARGIN, sidebar_x - MARGIN - 20, MARGIN)
    _name(em, main, record, fill=style.colors.text)
    _title(em, main, record, fill=style.colors.accent)
    main.y += style.layout.section_spacing
    em.emit_all(main, SIDEBAR_RIGHT_MAIN, record)

    side = Column(sidebar_x + 20, sidebar_width - 40, MARGIN, on_dark=True, name="sidebar")
    if record.personal_info.photo:
        em.add_photo(sidebar_x + sidebar_width / 2 - 40, side.y, 80)
        side.y += 95
    em.contact(side, record.personal_info, label_key="contact")
    em.emit_all(side, SIDEBAR_RIGHT_SIDE, record)

    finalize_sidebar_height(sidebar, [side, main])
    return em.elements


def render_header_two_column(record: ResumeRecord, style: ResumeStyle) -> List[VisualElement]:
    """Centered header band, full-width summary, then a narrow left and wide right column."""
    em = SectionEmitter(style)
    band = em.add_rect(0, 0, A4_WIDTH, style.layout.header_height, style.colors.primary, tag="background")

    head = Column(MARGIN, CONTENT_WIDTH, 25, on_dark=True, name="header")
    _name(em, head, record, align="center")
    _title(em, head, record, align="center")
    head.y += 6
    em.inline_contact(head, record.personal_info, fill=style.colors.on_sidebar, align="center")
    band.height = max(style.layout.header_height, head.y + 12)

    full = Column(MARGIN, CONTENT_WIDTH, band.height + 20)
    em.emit(full, "summary", record)

    left = Column(MARGIN, TWO_COLUMN_LEFT_WIDTH, full.y, name="left")
    right_x = MARGIN + TWO_COLUMN_LEFT_WIDTH + TWO_COLUMN_GAP
    right = Column(right_x, A4_WIDTH - MARGIN - right_x, full.y, name="right")
    em.emit_all(left, TWO_COLUMN_LEFT, record)
    em.emit_all(right, TWO_COLUMN_RIGHT, record)
    return em.elements


def render_minimal(record: ResumeRecord, style: ResumeStyle) -> List[VisualElement]:
    """Centered identity block, decorative circle and widely letter-spaced headers."""
    em = SectionEmitter(style, HeaderDecoration(char_spacing=200))
    em.add_circle(-60, -60, 120, style.colors.primary, opacity=0.35, tag="background")

    head = Column(MARGIN, CONTENT_WIDTH, 50, name="header")
    _name(em, head, record, font_size=style.font_sizes.name + 10, fill=style.colors.text, align="center")
    _title(em, head, record, fill=style.colors.accent, align="center")
    head.y += 8
    em.inline_contact(head, record.personal_info, fill=style.colors.text_light, align="center")
    head.y += 10
    em.add_rect(A4_WIDTH / 2 - 40, head.y, 80, 1, style.colors.accent, tag="divider")

    main = Column(MARGIN, CONTENT_WIDTH, head.y + 25)
    em.emit_all(main, SINGLE_COLUMN_SECTIONS, record)
    return em.elements


def render_modern_split(record: ResumeRecord, style: ResumeStyle) -> List[VisualElement]:
    """Tall header band with vertical contact on the right, accent rule, two equal columns."""
    em = SectionEmitter(style)
    band_height = style.layout.header_height + 30
    band = em.add_rect(0, 0, A4_WIDTH, band_height, style.colors.primary, tag="background")

    contact_width = 180
    head = Column(MARGIN, CONTENT_WIDTH - contact_width - 20, 25, on_dark=True, name="header")
    _name(em, head, record, char_spacing=100)
    _title(em, head, record)

    contact = Column(A4_WIDTH - MARGIN - contact_width, contact_width, 25, on_dark=True, name="contact")
    em.contact(contact, record.personal_info, label_key=None, align="right")

    band.height = max(band_height, head.y + 15, contact.y + 15)
    em.add_rect(0, band.height, A4_WIDTH, 4, style.colors.accent, tag="divider")

    column_width = (CONTENT_WIDTH - SPLIT_GAP) / 2
    top = band.height + 25
    first = Column(MARGIN, column_width, top, name="first")
    second = Column(MARGIN + column_width + SPLIT_GAP, column_width, top, name="second")
    em.emit_all(first, SPLIT_FIRST, record)
    em.emit_all(second, SPLIT_SECOND, record)
    return em.elements


ARCHETYPE_RENDERERS = {
    "single-column": render_single_column,
    "sidebar-left": render_sidebar_left,
    "sidebar-right": render_sidebar_right,
    "header-two-column": render_header_two_column,
    "minimal": render_minimal,
    "modern-split": render_modern_split,
}
