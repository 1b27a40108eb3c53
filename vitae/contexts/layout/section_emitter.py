"""
Shared section emission for all layout archetypes.

Every archetype (and the dynamic interpreter) places resume sections through one
SectionEmitter. Archetypes only decide header geometry, which sections go into
which Column, and how section headers are decorated; the per-section element
sequence, tags, groups and vertical advance live here.

Each Column owns a monotonic cursor: every emitted text element advances the
cursor by at least its estimated height, so elements in one column never overlap.
"""

import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

from vitae.contexts.schema.elements import (
    CircleElement,
    RectElement,
    TextElement,
    VisualElement,
    text_element,
)
from vitae.contexts.schema.record import (
    CertificationEntry,
    EducationEntry,
    ExperienceEntry,
    LanguageEntry,
    PersonalInfo,
    ProjectEntry,
    ResumeRecord,
)
from vitae.contexts.schema.style import A4_HEIGHT, ResumeStyle
from vitae.contexts.schema.text_metrics import estimate_height, estimate_text_width
from vitae.contexts.vocabulary.labels import get_present_label, get_section_header

# Line height for single-run headings (names, titles, section headers)
HEADING_LINE_HEIGHT = 1.2

# Dates sit on the subtitle row when the column is at least this wide
SIDE_DATES_MIN_WIDTH = 260
DATES_WIDTH = 120

HEADER_GAP = 6
DIVIDER_GAP = 8
INLINE_CONTACT_GAP = 16

INLINE_SEPARATOR = "  •  "


@dataclass
class Column:
    """
    Vertical flow region with its own cursor.

    Attributes:
        x: Left edge
        width: Usable width
        y: Cursor (top of the next element)
        on_dark: Text sits on a filled sidebar or header band
        name: Label used in logs
        text_color: Overrides every text fill in the column (colored sidebars and zones)
    """

    x: float
    width: float
    y: float
    on_dark: bool = False
    name: str = "main"
    text_color: Optional[str] = None

    @property
    def right(self) -> float:
        return self.x + self.width


@dataclass(frozen=True)
class HeaderDecoration:
    """How section headers look in one archetype or dynamic section."""

    char_spacing: float = 0
    uppercase: bool = True
    decorative_bullets: bool = False
    divider: bool = False
    align: str = "left"


def format_date_range(start: str, end: str, current: bool, locale: str = "en") -> str:
    """Join start and end dates with an en dash; open ranges end in "Present"."""
    start = (start or "").strip()
    end = get_present_label(locale) if current else (end or "").strip()
    if start and end:
        return f"{start} – {end}"
    return start or end


def join_with_location(primary: str, location: str) -> str:
    primary = (primary or "").strip()
    location = (location or "").strip()
    if primary and location:
        return f"{primary} | {location}"
    return primary or location


class SectionEmitter:
    """
    Emits tagged elements for resume sections into columns.

    Args:
        style: Style providing colors, fonts, sizes and spacing
        decoration: Default section header decoration
    """

    def __init__(self, style: ResumeStyle, decoration: HeaderDecoration = HeaderDecoration()):
        self.style = style
        self.decoration = decoration
        self.elements: List[VisualElement] = []

    # ------------------------------------------------------------------
    # Colors
    # ------------------------------------------------------------------

    def heading_fill(self, column: Column) -> str:
        if column.text_color:
            return column.text_color
        return self.style.colors.header_text if column.on_dark else self.style.colors.accent

    def title_fill(self, column: Column) -> str:
        if column.text_color:
            return column.text_color
        return self.style.colors.header_text if column.on_dark else self.style.colors.text

    def body_fill(self, column: Column) -> str:
        if column.text_color:
            return column.text_color
        return self.style.colors.on_sidebar if column.on_dark else self.style.colors.text

    def muted_fill(self, column: Column) -> str:
        if column.text_color:
            return column.text_color
        return self.style.colors.on_sidebar if column.on_dark else self.style.colors.text_light

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------

    def add_text(
        self,
        column: Column,
        text: str,
        font_size: float,
        *,
        fill: str,
        tag: Optional[str] = None,
        group: Optional[str] = None,
        bold: bool = False,
        italic: bool = False,
        wrap: bool = True,
        x: Optional[float] = None,
        width: Optional[float] = None,
        align: str = "left",
        char_spacing: float = 0,
        line_height: float = HEADING_LINE_HEIGHT,
        heading_font: bool = False,
        advance: bool = True,
    ) -> Tuple[TextElement, float]:
        """
        Place a text element at the column cursor.

        Args:
            column: Column whose cursor gives the top edge
            text: Text content
            font_size: Font size in pixels
            fill: Text color
            tag: Semantic tag
            group: Semantic group (``<section>_<index>``)
            bold: Bold weight
            italic: Italic style
            wrap: Persist as a wrapping textbox (True) or single-run text (False)
            x: Left edge override (defaults to column.x)
            width: Wrap width override (defaults to column.width)
            align: Text alignment
            char_spacing: Letter spacing in 1/1000 em
            line_height: Line height multiplier
            heading_font: Use the heading font family instead of the body font
            advance: Move the column cursor below the element

        Returns:
            (element, estimated height)
        """
        wrap_width = (width or column.width) if wrap else None
        element = text_element(
            text,
            column.x if x is None else x,
            column.y,
            font_size,
            fill=fill,
            font_family=self.style.fonts.heading if heading_font else self.style.fonts.body,
            bold=bold,
            italic=italic,
            width=wrap_width,
            line_height=line_height,
            char_spacing=char_spacing,
            text_align=align,
            semantic_type=tag,
            semantic_group=group,
        )
        height = estimate_height(text, font_size, line_height, wrap_width, bold)
        self.elements.append(element)
        if advance:
            column.y += height
        return element, height

    def add_rect(
        self,
        left: float,
        top: float,
        width: float,
        height: float,
        fill: str,
        tag: Optional[str] = None,
        selectable: bool = True,
    ) -> RectElement:
        rect = RectElement(
            left=left,
            top=top,
            width=width,
            height=height,
            fill=fill,
            semantic_type=tag,
            selectable=selectable,
        )
        self.elements.append(rect)
        return rect

    def add_circle(
        self, left: float, top: float, radius: float, fill: str, opacity: float = 1.0, tag: Optional[str] = None
    ) -> CircleElement:
        circle = CircleElement(
            left=left, top=top, radius=radius, fill=fill, opacity=opacity, semantic_type=tag
        )
        self.elements.append(circle)
        return circle

    def add_photo(self, left: float, top: float, size: float) -> RectElement:
        """Square photo placeholder; the editor swaps in the real image."""
        return self.add_rect(left, top, size, size, self.style.colors.secondary, tag="photo")

    def body_text(self, column: Column, text: str, tag: str, group: Optional[str] = None, muted: bool = False):
        """Wrapped body-size paragraph using the style's line height."""
        return self.add_text(
            column,
            text,
            self.style.font_sizes.body,
            fill=self.muted_fill(column) if muted else self.body_fill(column),
            tag=tag,
            group=group,
            line_height=self.style.layout.line_height,
        )

    # ------------------------------------------------------------------
    # Headers
    # ------------------------------------------------------------------

    def section_header(
        self,
        column: Column,
        label_key: str,
        tag: str,
        decoration: Optional[HeaderDecoration] = None,
    ) -> TextElement:
        """Emit a localized section header and advance past it."""
        decoration = decoration or self.decoration
        text = get_section_header(label_key, self.style.locale)
        if not decoration.uppercase:
            text = text.title()
        if decoration.decorative_bullets:
            text = f"◦ {text} ◦"

        centered = decoration.align == "center"
        element, _ = self.add_text(
            column,
            text,
            self.style.font_sizes.section_header,
            fill=self.heading_fill(column),
            tag=tag,
            bold=True,
            wrap=centered,
            align=decoration.align,
            char_spacing=decoration.char_spacing,
            heading_font=True,
        )
        column.y += HEADER_GAP

        if decoration.divider:
            self.add_rect(column.x, column.y - 3, column.width, 1, self.heading_fill(column), tag="divider")
            column.y += DIVIDER_GAP - 3

        return element

    def end_section(self, column: Column, compact: bool = False) -> None:
        spacing = self.style.layout.section_spacing
        column.y += spacing / 2 if compact else spacing

    def end_item(self, column: Column, compact: bool = False) -> None:
        spacing = self.style.layout.item_spacing
        column.y += spacing / 2 if compact else spacing

    # ------------------------------------------------------------------
    # Entry rows
    # ------------------------------------------------------------------

    def _subtitle_with_dates(
        self,
        column: Column,
        subtitle: str,
        subtitle_tag: str,
        dates: str,
        dates_tag: str,
        group: str,
    ) -> None:
        """Subtitle on the left with dates right-aligned on the same row, or stacked when narrow."""
        sizes = self.style.font_sizes
        if subtitle and dates and column.width >= SIDE_DATES_MIN_WIDTH:
            _, dates_height = self.add_text(
                column,
                dates,
                sizes.small,
                fill=self.muted_fill(column),
                tag=dates_tag,
                group=group,
                x=column.right - DATES_WIDTH,
                width=DATES_WIDTH,
                align="right",
                advance=False,
            )
            _, subtitle_height = self.add_text(
                column,
                subtitle,
                sizes.body,
                fill=self.muted_fill(column),
                tag=subtitle_tag,
                group=group,
                width=column.width - DATES_WIDTH - 10,
                advance=False,
            )
            column.y += max(dates_height, subtitle_height)
            return

        if subtitle:
            self.add_text(
                column, subtitle, sizes.body, fill=self.muted_fill(column), tag=subtitle_tag, group=group
            )
        if dates:
            self.add_text(
                column, dates, sizes.small, fill=self.muted_fill(column), tag=dates_tag, group=group
            )

    def _entry_title(self, column: Column, text: str, tag: str, group: str, size: Optional[float] = None):
        self.add_text(
            column,
            text,
            size or self.style.font_sizes.job_title,
            fill=self.title_fill(column),
            tag=tag,
            group=group,
            bold=True,
            heading_font=True,
        )

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------

    def summary(self, column: Column, summary: str, label_key: str = "summary", **options) -> None:
        if not summary.strip():
            return
        self.section_header(column, label_key, "summary_section", options.get("decoration"))
        self.body_text(column, summary.strip(), "summary")
        self.end_section(column, options.get("compact", False))

    def experience(self, column: Column, entries: List[ExperienceEntry], **options) -> None:
        if not entries:
            return
        compact = options.get("compact", False)
        self.section_header(column, "experience", "experience_section", options.get("decoration"))

        for i, entry in enumerate(entries):
            group = f"experience_{i}"
            if entry.title.strip():
                self._entry_title(column, entry.title.strip(), "experience_title", group)
            self._subtitle_with_dates(
                column,
                join_with_location(entry.company, entry.location),
                "experience_company",
                format_date_range(entry.start_date, entry.end_date, entry.current, self.style.locale),
                "experience_dates",
                group,
            )
            bullets = [line.strip() for line in entry.description if line.strip()]
            if bullets:
                column.y += 2
                self.body_text(
                    column, "\n".join(f"• {line}" for line in bullets), "experience_description", group
                )
            self.end_item(column, compact)

        self.end_section(column, compact)

    def education(self, column: Column, entries: List[EducationEntry], **options) -> None:
        if not entries:
            return
        compact = options.get("compact", False)
        self.section_header(column, "education", "education_section", options.get("decoration"))

        for i, entry in enumerate(entries):
            group = f"education_{i}"
            if entry.degree.strip():
                self._entry_title(column, entry.degree.strip(), "education_degree", group)
            self._subtitle_with_dates(
                column,
                join_with_location(entry.institution, entry.location),
                "education_institution",
                format_date_range(entry.start_date, entry.end_date, False, self.style.locale),
                "education_dates",
                group,
            )
            if entry.gpa.strip():
                self.body_text(column, f"GPA: {entry.gpa.strip()}", "education_gpa", group, muted=True)
            if entry.description.strip():
                self.body_text(column, entry.description.strip(), "education_description", group)
            self.end_item(column, compact)

        self.end_section(column, compact)

    def skills(self, column: Column, skills: List[str], **options) -> None:
        items = [s.strip() for s in skills if s.strip()]
        if not items:
            return
        self.section_header(column, "skills", "skills_section", options.get("decoration"))
        separator = "\n" if self._vertical(column) else INLINE_SEPARATOR
        self.body_text(column, separator.join(items), "skill_list")
        self.end_section(column, options.get("compact", False))

    def languages(self, column: Column, entries: List[LanguageEntry], **options) -> None:
        entries = [e for e in entries if e.language.strip()]
        if not entries:
            return
        self.section_header(column, "languages", "languages_section", options.get("decoration"))
        for i, entry in enumerate(entries):
            text = entry.language.strip()
            if entry.level.strip():
                text = f"{text} - {entry.level.strip()}"
            self.add_text(
                column,
                text,
                self.style.font_sizes.body,
                fill=self.body_fill(column),
                tag="language_entry",
                group=f"languages_{i}",
                wrap=False,
            )
            column.y += 2
        self.end_section(column, options.get("compact", False))

    def certifications(self, column: Column, entries: List[CertificationEntry], **options) -> None:
        entries = [e for e in entries if e.name.strip() or e.issuer.strip()]
        if not entries:
            return
        compact = options.get("compact", False)
        self.section_header(column, "certifications", "certifications_section", options.get("decoration"))
        for i, entry in enumerate(entries):
            group = f"certifications_{i}"
            if entry.name.strip():
                self._entry_title(
                    column, entry.name.strip(), "certification_name", group, self.style.font_sizes.body
                )
            meta = " | ".join(part.strip() for part in (entry.issuer, entry.date) if part.strip())
            if meta:
                tag = "certification_issuer" if entry.issuer.strip() else "certification_date"
                self.add_text(
                    column, meta, self.style.font_sizes.small, fill=self.muted_fill(column), tag=tag, group=group
                )
            self.end_item(column, True)
        self.end_section(column, compact)

    def projects(self, column: Column, entries: List[ProjectEntry], **options) -> None:
        entries = [e for e in entries if e.name.strip() or e.description.strip()]
        if not entries:
            return
        compact = options.get("compact", False)
        self.section_header(column, "projects", "projects_section", options.get("decoration"))
        for i, entry in enumerate(entries):
            group = f"projects_{i}"
            if entry.name.strip():
                self._entry_title(column, entry.name.strip(), "project_name", group)
            if entry.description.strip():
                self.body_text(column, entry.description.strip(), "project_description", group)
            technologies = [t.strip() for t in entry.technologies if t.strip()]
            if technologies:
                self.body_text(
                    column, f"Technologies: {', '.join(technologies)}", "project_technologies", group, muted=True
                )
            if entry.url.strip():
                self.add_text(
                    column,
                    entry.url.strip(),
                    self.style.font_sizes.small,
                    fill=self.style.colors.accent if not column.on_dark else self.muted_fill(column),
                    tag="project_url",
                    group=group,
                )
            self.end_item(column, compact)
        self.end_section(column, compact)

    def interests(self, column: Column, interests: List[str], **options) -> None:
        items = [s.strip() for s in interests if s.strip()]
        if not items:
            return
        self.section_header(column, "interests", "interests_section", options.get("decoration"))
        separator = "\n" if self._vertical(column) else INLINE_SEPARATOR
        self.body_text(column, separator.join(items), "interests_list")
        self.end_section(column, options.get("compact", False))

    def contact(
        self,
        column: Column,
        personal: PersonalInfo,
        label_key: Optional[str] = "contact",
        align: str = "left",
        **options,
    ) -> None:
        """One contact item per line; ``label_key=None`` omits the header."""
        items = personal.contact_items()
        if not items:
            return
        if label_key:
            self.section_header(column, label_key, "contact_section", options.get("decoration"))
        for tag, text in items:
            self.add_text(
                column,
                text.strip(),
                self.style.font_sizes.small,
                fill=self.body_fill(column),
                tag=tag,
                align=align,
            )
            column.y += 3
        if label_key:
            self.end_section(column, options.get("compact", False))

    def inline_contact(
        self,
        column: Column,
        personal: PersonalInfo,
        fill: str,
        align: str = "left",
    ) -> None:
        """
        Contact items side by side, wrapping into rows that fit the column.

        Each item is its own element so edits and template switches keep them
        apart; there is no joined line and no separator element.
        """
        self.inline_items(column, personal.contact_items(), self.style.font_sizes.small, fill=fill, align=align)

    def inline_items(
        self,
        column: Column,
        items: List[Tuple[str, str]],
        font_size: float,
        *,
        fill: str,
        align: str = "left",
        gap: float = INLINE_CONTACT_GAP,
        bold_tags: Tuple[str, ...] = (),
    ) -> List[TextElement]:
        """
        Lay out (tag, text) items in rows, wrapping when a row would overflow the column.

        Returns:
            Emitted elements in item order
        """
        rows: List[List[Tuple[str, str, float]]] = [[]]
        row_width = 0.0
        for tag, text in items:
            text = text.strip()
            width = math.ceil(estimate_text_width(text, font_size, tag in bold_tags))
            needed = width if not rows[-1] else row_width + gap + width
            if rows[-1] and needed > column.width:
                rows.append([])
                needed = width
            rows[-1].append((tag, text, width))
            row_width = needed

        emitted: List[TextElement] = []
        for row in rows:
            if not row:
                continue
            total = sum(w for _, _, w in row) + gap * (len(row) - 1)
            if align == "center":
                x = column.x + (column.width - total) / 2
            elif align == "right":
                x = column.right - total
            else:
                x = column.x
            row_height = 0.0
            for tag, text, width in row:
                element, height = self.add_text(
                    column, text, font_size, fill=fill, tag=tag, bold=tag in bold_tags, wrap=False, x=x, advance=False
                )
                emitted.append(element)
                row_height = max(row_height, height)
                x += width + gap
            column.y += row_height + 2
        return emitted

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _vertical(self, column: Column) -> bool:
        return column.on_dark or column.width < 200

    def emit(self, column: Column, section: str, record: ResumeRecord, **options) -> None:
        """
        Emit one section by name into a column.

        Args:
            column: Target column
            section: Section name ("summary", "profile", "experience", "education",
                "skills", "languages", "certifications", "projects", "interests",
                "contact", "details")
            record: Resume record supplying the content
            **options: decoration (HeaderDecoration), compact (bool)
        """
        if section in ("summary", "profile"):
            self.summary(column, record.summary, label_key=section, **options)
        elif section in ("contact", "details"):
            self.contact(column, record.personal_info, label_key=section, **options)
        elif section == "experience":
            self.experience(column, record.experience, **options)
        elif section == "education":
            self.education(column, record.education, **options)
        elif section == "skills":
            self.skills(column, record.skills, **options)
        elif section == "languages":
            self.languages(column, record.languages, **options)
        elif section == "certifications":
            self.certifications(column, record.certifications, **options)
        elif section == "projects":
            self.projects(column, record.projects, **options)
        elif section == "interests":
            self.interests(column, record.interests, **options)

    def emit_all(self, column: Column, sections, record: ResumeRecord, **options) -> None:
        for section in sections:
            self.emit(column, section, record, **options)


def finalize_sidebar_height(sidebar: RectElement, columns: List[Column]) -> None:
    """
    Stretch a full-height sidebar background to cover every column.

    Height becomes ``max(column.y + 40, page height)`` rounded up to a whole
    number of pages.
    """
    bottom = max([column.y + 40 for column in columns] + [A4_HEIGHT])
    sidebar.height = math.ceil(bottom / A4_HEIGHT) * A4_HEIGHT
