"""
Integration tests for section reordering on rendered canvases.
Tests: rendered sample → reordered sections → order, idempotence, fixed header.
"""

import pytest

from vitae.contexts.layout import render
from vitae.contexts.schema import create_style, element_from_dict, get_sample_record
from vitae.contexts.semantics import extract_record
from vitae.contexts.switching import reorder_sections


@pytest.fixture
def canvas():
    style = create_style("single-column", "navyProfessional", "professional", "standard", "standard")
    return render(get_sample_record("en"), style)


def _top(elements, semantic_type):
    return next(e.top for e in elements if e.semantic_type == semantic_type)


@pytest.mark.integration
def test_reorder_applies_new_order(canvas):
    """Test that the requested sections lead in the requested order."""
    moved = reorder_sections(canvas, ["skills", "experience"])

    assert moved > 0
    assert _top(canvas, "skills_section") < _top(canvas, "experience_section")
    assert _top(canvas, "experience_section") < _top(canvas, "summary_section")
    assert _top(canvas, "skill_list") > _top(canvas, "skills_section")


@pytest.mark.integration
def test_reorder_moves_whole_groups(canvas):
    """Test that entries keep their offsets from their section header."""
    offset = _top(canvas, "experience_title") - _top(canvas, "experience_section")

    reorder_sections(canvas, ["languages", "skills", "education", "experience"])

    assert _top(canvas, "experience_title") - _top(canvas, "experience_section") == pytest.approx(offset)


@pytest.mark.integration
def test_reorder_is_idempotent(canvas):
    """Test that applying the same order twice moves nothing the second time."""
    reorder_sections(canvas, ["skills", "experience"])
    tops = [e.top for e in canvas]

    assert reorder_sections(canvas, ["skills", "experience"]) == 0
    assert [e.top for e in canvas] == tops


@pytest.mark.integration
def test_reorder_keeps_header_fixed(canvas):
    """Test that the identity block above the first section stays put."""
    before = {e.id: e.top for e in canvas if e.semantic_type in ("name", "title", "email", "background")}

    reorder_sections(canvas, ["education", "skills"])

    assert {e.id: e.top for e in canvas if e.id in before} == before


@pytest.mark.integration
def test_reorder_keeps_content_extractable(canvas):
    """Test that a reordered canvas still extracts the full record."""
    reorder_sections(canvas, ["languages", "skills"])

    record = extract_record(canvas)
    assert len(record.experience) == 2
    assert len(record.skills) == 10
    assert len(record.languages) == 2


@pytest.mark.integration
def test_reorder_with_zero_font_size_textbox(canvas):
    """Test that a wrapped text with a zero font size doesn't break height estimates."""
    canvas.append(
        element_from_dict(
            {"type": "textbox", "text": "x" * 200, "fontSize": 0, "width": 120, "top": 700, "semanticType": "custom_text"}
        )
    )

    assert reorder_sections(canvas, ["skills", "experience"]) > 0
    assert _top(canvas, "skills_section") < _top(canvas, "experience_section")


@pytest.mark.integration
def test_reorder_persisted_dicts_with_string_numbers(canvas):
    """Test reordering a canvas loaded from string-valued numeric fields."""
    loaded = [
        element_from_dict({k: (str(v) if k in ("top", "left", "fontSize") else v) for k, v in e.to_dict().items()})
        for e in canvas
    ]

    assert reorder_sections(loaded, ["skills", "experience"]) > 0
    assert _top(loaded, "skills_section") < _top(loaded, "experience_section")
