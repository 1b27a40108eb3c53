"""Unit tests for section header detection and column-aware grouping."""

import pytest

from vitae.contexts.schema import RectElement, TextElement
from vitae.contexts.semantics import (
    assign_column,
    column_anchors,
    detect_section_header,
    group_sections,
    reading_order,
    section_kind_for_tag,
)


def _text(text, left=40, top=0, **kwargs):
    kwargs.setdefault("font_size", 10)
    return TextElement(text=text, left=left, top=top, **kwargs)


@pytest.mark.unit
def test_detect_header_by_pattern():
    """Test that a known header text is detected by its pattern."""
    assert detect_section_header(_text("WORK EXPERIENCE")) == "experience"


@pytest.mark.unit
def test_detect_header_by_tag():
    """Test that header tags win over the text."""
    assert detect_section_header(_text("Anything", semantic_type="skills_section")) == "skills"
    assert detect_section_header(_text("Odd", semantic_type="section_header")) == "unknown"


@pytest.mark.unit
def test_content_tag_blocks_header_detection():
    """Test that an element tagged as content is never a header, even with header text."""
    assert detect_section_header(_text("Skills", semantic_type="skill_list")) is None


@pytest.mark.unit
def test_large_text_is_not_a_header():
    """Test that name-sized text is never a header."""
    assert detect_section_header(_text("EXPERIENCE", font_size=28)) is None


@pytest.mark.unit
def test_spaced_uppercase_is_unknown_header():
    """Test that uppercase text with wide letter spacing is an unrecognized header."""
    assert detect_section_header(_text("MY STORY", char_spacing=100)) == "unknown"
    assert detect_section_header(_text("MY STORY")) is None


@pytest.mark.unit
def test_non_text_is_not_a_header():
    """Test rects are never headers."""
    assert detect_section_header(RectElement(height=2)) is None


@pytest.mark.unit
def test_section_kind_for_tag():
    """Test header tag to section kind lookup."""
    assert section_kind_for_tag("education_section") == "education"
    assert section_kind_for_tag("section_header") is None
    assert section_kind_for_tag(None) is None


@pytest.mark.unit
def test_column_anchors_cluster_close_lefts():
    """Test that header lefts within tolerance form one anchor."""
    elements = [
        _text("SKILLS", left=20),
        _text("LANGUAGES", left=25),
        _text("EXPERIENCE", left=200),
    ]

    assert column_anchors(elements) == [20, 200]


@pytest.mark.unit
def test_column_anchors_without_headers():
    """Test the leftmost edge is the single anchor when no header exists."""
    assert column_anchors([_text("a", left=70), _text("b", left=55)]) == [55]


@pytest.mark.unit
def test_assign_column():
    """Test that right-aligned dates stay inside their column."""
    anchors = [20, 200]

    assert assign_column(450, anchors) == 200
    assert assign_column(20, anchors) == 20
    assert assign_column(195, anchors) == 200
    assert assign_column(5, anchors) == 20


@pytest.mark.unit
def test_group_sections_single_column():
    """Test folding one column into header and section groups."""
    elements = [
        _text("John Smith", top=20, font_size=28),
        _text("EXPERIENCE", top=100),
        _text("Engineer", top=120),
        _text("SKILLS", top=200),
        _text("Python, Go", top=220),
    ]

    groups = group_sections(elements)

    assert [g.kind for g in groups] == ["header", "experience", "skills"]
    assert groups[0].header is None
    assert [e.text for e in groups[1].elements] == ["Engineer"]
    assert groups[1].members[0].text == "EXPERIENCE"
    assert groups[2].top == 200


@pytest.mark.unit
def test_group_sections_reads_columns_separately():
    """Test that a sidebar and a main column are not interleaved."""
    elements = [
        _text("SKILLS", left=20, top=100),
        _text("EXPERIENCE", left=200, top=100),
        _text("Python", left=20, top=120),
        _text("Engineer", left=200, top=120),
        _text("2020 - 2022", left=480, top=120),
    ]

    groups = group_sections(elements)

    by_kind = {g.kind: g for g in groups}
    assert [e.text for e in by_kind["skills"].elements] == ["Python"]
    assert [e.text for e in by_kind["experience"].elements] == ["Engineer", "2020 - 2022"]
    assert by_kind["experience"].column == 200


@pytest.mark.unit
def test_group_sections_places_dividers_when_asked():
    """Test that thin rects join their section only with include_shapes."""
    elements = [
        _text("EXPERIENCE", top=100),
        RectElement(left=40, top=115, width=500, height=1),
        _text("Engineer", top=120),
    ]

    plain = group_sections(elements)
    with_shapes = group_sections(elements, include_shapes=True)

    assert all(e.kind == "text" for g in plain for e in g.elements)
    experience = [g for g in with_shapes if g.kind == "experience"][0]
    assert [e.kind for e in experience.elements] == ["rect", "text"]


@pytest.mark.unit
def test_reading_order_skips_empty_text():
    """Test reading order drops blank texts and sorts by top within a column."""
    elements = [_text("second", top=50), _text("   ", top=10), _text("first", top=20)]

    assert [e.text for e in reading_order(elements)] == ["first", "second"]
