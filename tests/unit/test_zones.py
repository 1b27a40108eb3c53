"""Unit tests for template zones and element style resolution."""

import pytest

from vitae.contexts.schema import A4_WIDTH, CONTENT_WIDTH, MARGIN, ResumeStyle, create_style
from vitae.contexts.switching import (
    DEFAULT_SECTION_ORDER,
    MAIN_SECTIONS,
    SIDEBAR_SECTIONS,
    generate_zones,
    get_default_element_style,
    resolve_element_style,
)
from vitae.contexts.switching.zones import AUTO, ZONE_GENERATORS


@pytest.fixture
def style():
    return create_style("single-column", "tealModern", "modern", "standard", "standard")


def _style_for(layout_type):
    return create_style(layout_type, "tealModern", "modern", "standard", "sidebar")


@pytest.mark.unit
@pytest.mark.parametrize("layout_type", sorted(ZONE_GENERATORS))
def test_zones_for_every_archetype(layout_type):
    """Test that each archetype's zones stay on the page."""
    zones = generate_zones(_style_for(layout_type))

    assert zones.layout_type == layout_type
    assert 0 <= zones.sections.x < A4_WIDTH
    assert zones.sections.x + zones.sections.width <= A4_WIDTH
    assert zones.sections.start_y == AUTO


@pytest.mark.unit
def test_unknown_layout_falls_back_to_single_column():
    """Test dynamic and unknown layout types use single-column zones."""
    assert generate_zones(ResumeStyle(layout_type="dynamic")).layout_type == "single-column"
    assert generate_zones(ResumeStyle(layout_type="nope")).layout_type == "single-column"


@pytest.mark.unit
def test_single_column_geometry(style):
    """Test the header band and full-width section flow."""
    zones = generate_zones(style)

    assert zones.header_area.height == style.layout.header_height
    assert zones.sections.x == MARGIN
    assert zones.sections.width == CONTENT_WIDTH
    assert zones.contact.layout == "horizontal"
    assert zones.personal.on_dark
    assert not zones.has_sidebar


@pytest.mark.unit
def test_sidebar_left_geometry():
    """Test the sidebar band and main column placement."""
    style = _style_for("sidebar-left")
    zones = generate_zones(style)

    assert zones.has_sidebar
    assert zones.sidebar_area.x == 0
    assert zones.sidebar_area.width == 180
    assert zones.sections.x == 200
    assert zones.sections.width == A4_WIDTH - 200 - MARGIN
    assert zones.contact.layout == "vertical"
    assert zones.sidebar_area.contains_x(20)
    assert not zones.sidebar_area.contains_x(200)


@pytest.mark.unit
def test_sidebar_right_geometry():
    """Test that the right sidebar hugs the right page edge."""
    zones = generate_zones(_style_for("sidebar-right"))

    assert zones.sidebar_area.x + zones.sidebar_area.width == A4_WIDTH
    assert zones.sections.x == MARGIN
    assert zones.category_styles["skills"]["x"] == zones.sidebar_area.x + 20


@pytest.mark.unit
def test_minimal_headers_are_letter_spaced():
    """Test the minimal archetype's spaced section headers."""
    zones = generate_zones(_style_for("minimal"))

    assert zones.sections.header_style["char_spacing"] == 200
    assert zones.header_area is None
    assert zones.sidebar_area is None


@pytest.mark.unit
def test_section_routing_tables():
    """Test that sidebar and main section lists are disjoint and ordered."""
    assert not set(SIDEBAR_SECTIONS) & set(MAIN_SECTIONS)
    assert DEFAULT_SECTION_ORDER[:4] == ("personal", "contact", "summary", "experience")
    assert set(SIDEBAR_SECTIONS) | set(MAIN_SECTIONS) <= set(DEFAULT_SECTION_ORDER)


@pytest.mark.unit
def test_default_element_style_layers(style):
    """Test category base plus tag override."""
    title = get_default_element_style("experience_title", style)
    assert title["font_size"] == style.font_sizes.job_title
    assert title["font_weight"] == "bold"
    assert title["fill"] == style.colors.text

    header = get_default_element_style("skills_section", style)
    assert header["font_size"] == style.font_sizes.section_header
    assert header["fill"] == style.colors.accent

    email = get_default_element_style("email", style)
    assert email == {"font_size": style.font_sizes.small, "fill": style.colors.text_light}


@pytest.mark.unit
def test_unknown_tag_gets_custom_body_style(style):
    """Test that untagged content falls back to the body style."""
    resolved = get_default_element_style("made_up", style)

    assert resolved == {"font_size": style.font_sizes.body, "fill": style.colors.text}


@pytest.mark.unit
def test_zone_category_override_wins():
    """Test that sidebar category overrides replace position and color."""
    style = _style_for("sidebar-left")
    zones = generate_zones(style)

    skill = resolve_element_style("skill_list", zones, style)
    assert skill["x"] == 20
    assert skill["width"] == 140
    assert skill["fill"] == style.colors.on_sidebar

    experience = resolve_element_style("experience_title", zones, style)
    assert "x" not in experience


@pytest.mark.unit
def test_header_two_column_aside():
    """Test the left aside column in the two-column archetype."""
    style = _style_for("header-two-column")
    zones = generate_zones(style)

    education = resolve_element_style("education_degree", zones, style)
    assert education["x"] == MARGIN
    assert education["width"] == 160
    assert zones.sections.x == MARGIN + 160 + 25
