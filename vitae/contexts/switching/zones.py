"""
Template zones.

Describes, per layout archetype, where each kind of tagged content goes when
existing canvas content is moved into that archetype: background areas, the
personal block, the contact block, the summary, the generic section flow and
per-category overrides (a category with an ``x`` override flows in an aside
column).

Element styles resolve in three layers, later layers winning:
category base style < tag override < zone category override.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Union

from vitae.contexts.schema.style import A4_HEIGHT, A4_WIDTH, CONTENT_WIDTH, MARGIN, ResumeStyle
from vitae.contexts.vocabulary.semantic_types import (
    SECTION_HEADER_TYPES,
    SEMANTIC_CATEGORIES,
    get_semantic_category,
)

AUTO = "auto"

StyleDict = Dict[str, Any]

# =============================================================================
# SECTION ORDER
# =============================================================================

DEFAULT_SECTION_ORDER = (
    "personal",
    "contact",
    "summary",
    "experience",
    "education",
    "skills",
    "projects",
    "certifications",
    "languages",
    "awards",
    "publications",
    "volunteer",
    "courses",
    "memberships",
    "interests",
    "references",
    "patents",
    "military",
)

# Categories that go into the sidebar when the target archetype has one
SIDEBAR_SECTIONS = ("contact", "skills", "languages", "interests", "certifications")

MAIN_SECTIONS = (
    "summary",
    "experience",
    "education",
    "projects",
    "awards",
    "publications",
    "volunteer",
    "courses",
    "memberships",
    "references",
    "patents",
    "military",
)

# =============================================================================
# ZONE TYPES
# =============================================================================


@dataclass
class Area:
    """Filled page area (header band or sidebar)."""

    x: float
    y: float
    width: float
    height: float
    background_color: str

    def contains_x(self, x: float) -> bool:
        return self.x <= x < self.x + self.width


@dataclass
class ElementZone:
    """Position and style of one personal element (name, title, photo)."""

    x: float
    y: Union[float, str]
    width: float
    font_size: float = 0
    fill: str = "#000000"
    font_weight: str = "normal"
    text_align: str = "left"
    margin_top: float = 0
    char_spacing: float = 0


@dataclass
class PersonalZone:
    name: ElementZone
    title: ElementZone
    photo: Optional[ElementZone] = None
    on_dark: bool = False


@dataclass
class ContactZone:
    """
    Attributes:
        layout: "horizontal" (one row of items, wrapping) or "vertical" (one per line)
        y: Fixed top, or "auto" to continue below the personal block
        item_style: Style applied to each contact item
        spacing: Gap between items (horizontal) or extra gap between lines (vertical)
    """

    x: float
    y: Union[float, str]
    width: float
    layout: str
    item_style: StyleDict
    spacing: float
    separator: Optional[str] = None
    on_dark: bool = False


@dataclass
class SummaryZone:
    x: float
    y: Union[float, str]
    width: float
    style: StyleDict
    header_style: Optional[StyleDict] = None


@dataclass
class SectionsZone:
    x: float
    start_y: Union[float, str]
    width: float
    spacing: float
    header_style: StyleDict
    item_spacing: float


@dataclass
class TemplateZones:
    """All zones of one archetype, for one style."""

    layout_type: str
    main_content_area: Area
    personal: PersonalZone
    contact: ContactZone
    summary: SummaryZone
    sections: SectionsZone
    header_area: Optional[Area] = None
    sidebar_area: Optional[Area] = None
    category_styles: Dict[str, StyleDict] = field(default_factory=dict)

    @property
    def has_sidebar(self) -> bool:
        return self.sidebar_area is not None


def _header_style(style: ResumeStyle, **overrides) -> StyleDict:
    base = {
        "font_size": style.font_sizes.section_header,
        "font_weight": "bold",
        "fill": style.colors.accent,
        "margin_bottom": 8,
    }
    base.update(overrides)
    return base


def _body_style(style: ResumeStyle, **overrides) -> StyleDict:
    base = {
        "font_size": style.font_sizes.body,
        "fill": style.colors.text,
        "line_height": style.layout.line_height,
    }
    base.update(overrides)
    return base


def _sections(style: ResumeStyle, x: float, width: float, **header_overrides) -> SectionsZone:
    return SectionsZone(
        x=x,
        start_y=AUTO,
        width=width,
        spacing=style.layout.section_spacing,
        header_style=_header_style(style, **header_overrides),
        item_spacing=style.layout.item_spacing,
    )


# =============================================================================
# ZONE GENERATORS
# =============================================================================


def single_column_zones(style: ResumeStyle) -> TemplateZones:
    colors, sizes, layout = style.colors, style.font_sizes, style.layout
    photo_size = 70
    name_width = CONTENT_WIDTH - photo_size - 15
    return TemplateZones(
        layout_type="single-column",
        header_area=Area(0, 0, A4_WIDTH, layout.header_height, colors.primary),
        main_content_area=Area(MARGIN, layout.header_height + 20, CONTENT_WIDTH, 0, colors.background),
        personal=PersonalZone(
            name=ElementZone(MARGIN, 20, name_width, sizes.name, colors.header_text, "bold"),
            title=ElementZone(MARGIN, AUTO, name_width, sizes.title, colors.on_sidebar, margin_top=2),
            photo=ElementZone(A4_WIDTH - MARGIN - photo_size, 15, photo_size),
            on_dark=True,
        ),
        contact=ContactZone(
            x=MARGIN,
            y=AUTO,
            width=name_width,
            layout="horizontal",
            item_style={"font_size": sizes.small, "fill": colors.on_sidebar},
            spacing=16,
            separator=" | ",
            on_dark=True,
        ),
        summary=SummaryZone(MARGIN, AUTO, CONTENT_WIDTH, _body_style(style)),
        sections=_sections(style, MARGIN, CONTENT_WIDTH),
    )


def sidebar_left_zones(style: ResumeStyle) -> TemplateZones:
    colors, sizes, layout = style.colors, style.font_sizes, style.layout
    sidebar_width = style.sidebar_width
    main_x = sidebar_width + 20
    main_width = A4_WIDTH - main_x - MARGIN
    side = {"x": 20, "width": sidebar_width - 40, "fill": colors.on_sidebar}
    return TemplateZones(
        layout_type="sidebar-left",
        sidebar_area=Area(0, 0, sidebar_width, A4_HEIGHT, colors.primary),
        main_content_area=Area(main_x, MARGIN, main_width, 0, colors.background),
        personal=PersonalZone(
            name=ElementZone(20, 30, sidebar_width - 40, sizes.name - 4, colors.header_text, "bold"),
            title=ElementZone(20, AUTO, sidebar_width - 40, sizes.title - 2, colors.on_sidebar, margin_top=2),
            photo=ElementZone(sidebar_width / 2 - 40, 30, 80),
            on_dark=True,
        ),
        contact=ContactZone(
            x=20,
            y=AUTO,
            width=sidebar_width - 40,
            layout="vertical",
            item_style={"font_size": sizes.small, "fill": colors.on_sidebar},
            spacing=3,
            on_dark=True,
        ),
        summary=SummaryZone(main_x, MARGIN, main_width, _body_style(style), _header_style(style)),
        sections=_sections(style, main_x, main_width),
        category_styles={"skills": dict(side), "languages": dict(side), "interests": dict(side)},
    )


def sidebar_right_zones(style: ResumeStyle) -> TemplateZones:
    colors, sizes, layout = style.colors, style.font_sizes, style.layout
    sidebar_width = style.sidebar_width
    sidebar_x = A4_WIDTH - sidebar_width
    main_width = sidebar_x - MARGIN - 20
    side = {"x": sidebar_x + 20, "width": sidebar_width - 40, "fill": colors.on_sidebar}
    return TemplateZones(
        layout_type="sidebar-right",
        sidebar_area=Area(sidebar_x, 0, sidebar_width, A4_HEIGHT, colors.primary),
        main_content_area=Area(MARGIN, MARGIN, main_width, 0, colors.background),
        personal=PersonalZone(
            name=ElementZone(MARGIN, MARGIN, main_width, sizes.name, colors.text, "bold"),
            title=ElementZone(MARGIN, AUTO, main_width, sizes.title, colors.accent, margin_top=2),
            photo=ElementZone(sidebar_x + sidebar_width / 2 - 40, MARGIN, 80),
        ),
        contact=ContactZone(
            x=sidebar_x + 20,
            y=MARGIN,
            width=sidebar_width - 40,
            layout="vertical",
            item_style={"font_size": sizes.small, "fill": colors.on_sidebar},
            spacing=3,
            on_dark=True,
        ),
        summary=SummaryZone(MARGIN, AUTO, main_width, _body_style(style), _header_style(style)),
        sections=_sections(style, MARGIN, main_width),
        category_styles={
            "skills": dict(side),
            "languages": dict(side),
            "certifications": dict(side),
            "interests": dict(side),
        },
    )


def header_two_column_zones(style: ResumeStyle) -> TemplateZones:
    colors, sizes, layout = style.colors, style.font_sizes, style.layout
    left_width = 160
    right_x = MARGIN + left_width + 25
    right_width = A4_WIDTH - MARGIN - right_x
    aside = {"x": MARGIN, "width": left_width}
    return TemplateZones(
        layout_type="header-two-column",
        header_area=Area(0, 0, A4_WIDTH, layout.header_height, colors.primary),
        main_content_area=Area(right_x, layout.header_height + 20, right_width, 0, colors.background),
        personal=PersonalZone(
            name=ElementZone(MARGIN, 25, CONTENT_WIDTH, sizes.name, colors.header_text, "bold", "center"),
            title=ElementZone(MARGIN, AUTO, CONTENT_WIDTH, sizes.title, colors.on_sidebar, text_align="center", margin_top=2),
            on_dark=True,
        ),
        contact=ContactZone(
            x=MARGIN,
            y=AUTO,
            width=CONTENT_WIDTH,
            layout="horizontal",
            item_style={"font_size": sizes.small, "fill": colors.on_sidebar, "text_align": "center"},
            spacing=16,
            separator=" | ",
            on_dark=True,
        ),
        summary=SummaryZone(MARGIN, AUTO, CONTENT_WIDTH, _body_style(style), _header_style(style)),
        sections=_sections(style, right_x, right_width),
        category_styles={
            "education": dict(aside),
            "skills": dict(aside),
            "languages": dict(aside),
            "interests": dict(aside),
        },
    )


def minimal_zones(style: ResumeStyle) -> TemplateZones:
    colors, sizes = style.colors, style.font_sizes
    return TemplateZones(
        layout_type="minimal",
        main_content_area=Area(MARGIN, MARGIN, CONTENT_WIDTH, 0, colors.background),
        personal=PersonalZone(
            name=ElementZone(MARGIN, 50, CONTENT_WIDTH, sizes.name + 10, colors.text, "bold", "center"),
            title=ElementZone(MARGIN, AUTO, CONTENT_WIDTH, sizes.title, colors.accent, text_align="center", margin_top=2),
        ),
        contact=ContactZone(
            x=MARGIN,
            y=AUTO,
            width=CONTENT_WIDTH,
            layout="horizontal",
            item_style={"font_size": sizes.small, "fill": colors.text_light, "text_align": "center"},
            spacing=16,
            separator=" • ",
        ),
        summary=SummaryZone(MARGIN, AUTO, CONTENT_WIDTH, _body_style(style), _header_style(style, char_spacing=200)),
        sections=_sections(style, MARGIN, CONTENT_WIDTH, char_spacing=200),
    )


def modern_split_zones(style: ResumeStyle) -> TemplateZones:
    colors, sizes, layout = style.colors, style.font_sizes, style.layout
    header_height = layout.header_height + 30
    column_width = (CONTENT_WIDTH - 30) / 2
    second_x = MARGIN + column_width + 30
    contact_width = 180
    aside = {"x": second_x, "width": column_width}
    return TemplateZones(
        layout_type="modern-split",
        header_area=Area(0, 0, A4_WIDTH, header_height, colors.primary),
        main_content_area=Area(MARGIN, header_height + 25, column_width, 0, colors.background),
        personal=PersonalZone(
            name=ElementZone(
                MARGIN, 25, CONTENT_WIDTH - contact_width - 20, sizes.name, colors.header_text, "bold", char_spacing=100
            ),
            title=ElementZone(
                MARGIN, AUTO, CONTENT_WIDTH - contact_width - 20, sizes.title, colors.on_sidebar, margin_top=2
            ),
            on_dark=True,
        ),
        contact=ContactZone(
            x=A4_WIDTH - MARGIN - contact_width,
            y=25,
            width=contact_width,
            layout="vertical",
            item_style={"font_size": sizes.small, "fill": colors.on_sidebar, "text_align": "right"},
            spacing=3,
            on_dark=True,
        ),
        summary=SummaryZone(MARGIN, AUTO, column_width, _body_style(style), _header_style(style)),
        sections=_sections(style, MARGIN, column_width),
        category_styles={
            "education": dict(aside),
            "skills": dict(aside),
            "languages": dict(aside),
            "certifications": dict(aside),
            "interests": dict(aside),
        },
    )


ZONE_GENERATORS: Dict[str, Callable[[ResumeStyle], TemplateZones]] = {
    "single-column": single_column_zones,
    "sidebar-left": sidebar_left_zones,
    "sidebar-right": sidebar_right_zones,
    "header-two-column": header_two_column_zones,
    "minimal": minimal_zones,
    "modern-split": modern_split_zones,
}


def generate_zones(style: ResumeStyle) -> TemplateZones:
    """
    Zones for the style's archetype.

    Dynamic and unknown layout types use the single-column zones.
    """
    generator = ZONE_GENERATORS.get(style.layout_type, single_column_zones)
    return generator(style)


# =============================================================================
# ELEMENT STYLE RESOLUTION
# =============================================================================


def _category_base_styles(style: ResumeStyle) -> Dict[str, StyleDict]:
    colors, sizes = style.colors, style.font_sizes
    body = {"font_size": sizes.body, "fill": colors.text}
    bases = {category: dict(body) for category in SEMANTIC_CATEGORIES}
    bases["personal"] = {"font_size": sizes.name, "font_weight": "bold", "fill": colors.text}
    bases["contact"] = {"font_size": sizes.small, "fill": colors.text_light}
    bases["layout"] = {"font_size": sizes.body, "fill": colors.secondary}
    return bases


def _tag_overrides(style: ResumeStyle) -> Dict[str, StyleDict]:
    colors, sizes = style.colors, style.font_sizes
    header = {"font_size": sizes.section_header, "font_weight": "bold", "fill": colors.accent}
    overrides = {tag: dict(header) for tag in SECTION_HEADER_TYPES.values()}
    overrides["section_header"] = dict(header)
    overrides.update(
        {
            "name": {"font_size": sizes.name, "font_weight": "bold"},
            "title": {"font_size": sizes.title, "font_weight": "normal", "fill": colors.accent},
            "photo": {"font_size": 0},
            "experience_title": {"font_size": sizes.job_title, "font_weight": "bold"},
            "experience_company": {"font_size": sizes.body, "fill": colors.text_light},
            "experience_dates": {"font_size": sizes.small, "fill": colors.text_light},
            "education_degree": {"font_size": sizes.job_title, "font_weight": "bold"},
            "education_institution": {"font_size": sizes.body, "fill": colors.text_light},
            "education_dates": {"font_size": sizes.small, "fill": colors.text_light},
            "education_gpa": {"fill": colors.text_light},
            "certification_name": {"font_weight": "bold"},
            "certification_issuer": {"font_size": sizes.small, "fill": colors.text_light},
            "certification_date": {"font_size": sizes.small, "fill": colors.text_light},
            "project_name": {"font_size": sizes.job_title, "font_weight": "bold"},
            "project_technologies": {"fill": colors.text_light},
            "project_url": {"font_size": sizes.small, "fill": colors.accent},
            "skill_category": {"font_weight": "bold"},
            "award_name": {"font_weight": "bold"},
            "publication_title": {"font_weight": "bold"},
            "volunteer_role": {"font_weight": "bold"},
            "course_name": {"font_weight": "bold"},
            "objective": {"font_style": "italic"},
            "headline": {"font_size": sizes.title},
        }
    )
    return overrides


def get_default_element_style(semantic_type: str, style: ResumeStyle) -> StyleDict:
    """Category base style with the tag's own override applied."""
    category = get_semantic_category(semantic_type)
    resolved = dict(_category_base_styles(style).get(category, {}))
    resolved.update(_tag_overrides(style).get(semantic_type, {}))
    return resolved


def resolve_element_style(semantic_type: str, zones: TemplateZones, style: ResumeStyle) -> StyleDict:
    """
    Full style for a tag in a target archetype.

    Args:
        semantic_type: Element tag
        zones: Target zones
        style: Target style

    Returns:
        Style dict (font_size, fill, font_weight, ...; x/width when the zone
        overrides the tag's category)
    """
    resolved = get_default_element_style(semantic_type, style)
    resolved.update(zones.category_styles.get(get_semantic_category(semantic_type), {}))
    return resolved
