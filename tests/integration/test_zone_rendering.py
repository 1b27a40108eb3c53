"""
Integration tests for zone-based rendering.
Tests: zone layout + record → backgrounds, zone placement, colors, sidebar growth, extraction.
"""

import pytest

from vitae.contexts.layout import render_zones
from vitae.contexts.layout.zone_renderer import ZONE_PADDING, pct_to_x
from vitae.contexts.schema import (
    A4_HEIGHT,
    ExperienceEntry,
    PersonalInfo,
    ResumeRecord,
    ZoneLayout,
    create_style,
    estimate_element_height,
    get_sample_record,
)
from vitae.contexts.semantics import extract_record

SIDEBAR_ZONES = {
    "layout": {
        "type": "sidebar-left",
        "zones": [
            {
                "id": "sidebar",
                "x": 0,
                "y": 0,
                "width": 35,
                "height": 100,
                "backgroundColor": "#dfe6e9",
                "textColor": "#1b1b1b",
                "sections": ["photo", "name", "title", "contact", "skills", "languages"],
            },
            {
                "id": "main",
                "x": 35,
                "y": 0,
                "width": 65,
                "height": 100,
                "backgroundColor": "#ffffff",
                "textColor": "",
                "sections": ["summary", "experience", "education", "projects", "certifications"],
            },
        ],
    }
}

HEADER_ZONES = {
    "type": "header-only",
    "zones": [
        {
            "id": "header",
            "x": 0,
            "y": 0,
            "width": 100,
            "height": 18,
            "backgroundColor": "#1e3a5f",
            "textColor": "#ffffff",
            "sections": ["name", "title", "contact"],
        },
        {
            "id": "main",
            "x": 0,
            "y": 18,
            "width": 100,
            "height": 82,
            "backgroundColor": "transparent",
            "sections": ["summary", "experience", "skills", "interests"],
        },
    ],
}


@pytest.fixture
def style():
    return create_style("single-column", "navyProfessional")


def _long_record():
    entries = [
        ExperienceEntry(
            title=f"Engineer {i}",
            company=f"Company {i}",
            start_date="2010",
            description=[f"Delivered project {i}-{j} on time" for j in range(4)],
        )
        for i in range(12)
    ]
    return ResumeRecord(personal_info=PersonalInfo(full_name="Long Record"), experience=entries, skills=["Python"])


def _first(elements, semantic_type):
    return next(e for e in elements if e.semantic_type == semantic_type)


@pytest.mark.integration
def test_backgrounds_only_for_colored_zones(style):
    """Test that white and transparent zones get no background rect."""
    elements = render_zones(get_sample_record("en"), ZoneLayout.from_dict(SIDEBAR_ZONES), style)

    backgrounds = [e for e in elements if e.kind == "rect" and e.semantic_type == "background"]
    assert [(b.left, b.width, b.fill) for b in backgrounds] == [(0, pct_to_x(35), "#dfe6e9")]
    # backgrounds sit beneath every text
    assert elements.index(backgrounds[0]) == 0


@pytest.mark.integration
def test_sections_land_in_their_zones(style):
    """Test that each section starts inside its zone's padded column."""
    elements = render_zones(get_sample_record("en"), ZoneLayout.from_dict(SIDEBAR_ZONES), style)
    main_x = pct_to_x(35) + ZONE_PADDING

    assert _first(elements, "name").left == ZONE_PADDING
    assert _first(elements, "skill_list").left == ZONE_PADDING
    assert _first(elements, "experience_title").left == main_x
    assert _first(elements, "summary_section").top == ZONE_PADDING


@pytest.mark.integration
def test_zone_text_color_applies_to_all_zone_text(style):
    """Test the zone text color on identity, headers and body text, and style colors elsewhere."""
    elements = render_zones(get_sample_record("en"), ZoneLayout.from_dict(SIDEBAR_ZONES), style)

    for semantic_type in ("name", "title", "email", "skills_section", "skill_list", "language_entry"):
        assert _first(elements, semantic_type).fill == "#1b1b1b", semantic_type
    assert _first(elements, "experience_title").fill == style.colors.text
    assert _first(elements, "summary_section").fill == style.colors.accent


@pytest.mark.integration
def test_header_zone_lays_contact_inline(style):
    """Test that contact items in a header zone share a row."""
    elements = render_zones(get_sample_record("en"), HEADER_ZONES, style)

    email, phone = _first(elements, "email"), _first(elements, "phone")
    assert email.top == phone.top
    assert phone.left > email.left
    assert email.fill == "#ffffff"


@pytest.mark.integration
def test_short_content_keeps_zone_height(style):
    """Test that a sidebar keeps its nominal height when everything fits on one page."""
    record = ResumeRecord(personal_info=PersonalInfo(full_name="Jane Doe"), skills=["Go", "SQL"])

    elements = render_zones(record, SIDEBAR_ZONES, style)

    sidebar = _first(elements, "background")
    assert (sidebar.top, sidebar.height) == (0, A4_HEIGHT)


@pytest.mark.integration
def test_sidebar_zone_grows_with_content(style):
    """Test that a sidebar zone stretches to whole pages covering the longest zone."""
    elements = render_zones(_long_record(), SIDEBAR_ZONES, style)

    sidebar = _first(elements, "background")
    bottom = max(e.top + estimate_element_height(e) for e in elements if e.kind == "text")
    assert bottom > A4_HEIGHT
    assert sidebar.height % A4_HEIGHT == 0
    assert sidebar.height >= bottom


@pytest.mark.integration
def test_unknown_sections_are_skipped(style):
    """Test that an unknown section name renders nothing and doesn't stop the zone."""
    layout = {"zones": [{"id": "main", "sections": ["hobbies", "name", "skills"]}]}

    elements = render_zones(get_sample_record("en"), layout, style)

    assert _first(elements, "name").top == ZONE_PADDING
    assert any(e.semantic_type == "skill_list" for e in elements)


@pytest.mark.integration
@pytest.mark.parametrize("zones", [SIDEBAR_ZONES, HEADER_ZONES], ids=["sidebar", "header"])
def test_zone_render_round_trips(style, zones):
    """Test that zone-rendered canvases extract back to the record's content."""
    record = extract_record(render_zones(get_sample_record("en"), zones, style))

    assert record.personal_info.full_name == "John Smith"
    assert record.personal_info.email == "john.smith@email.com"
    assert [e.title for e in record.experience] == ["Senior Software Engineer", "Software Engineer"]
    assert len(record.skills) == 10
