"""
Integration tests for template switching.
Tests: rendered canvas → switched archetype → content, ids and groups preserved.
"""

import pytest

from vitae.contexts.layout import render
from vitae.contexts.schema import (
    LAYOUT_TYPES,
    CertificationEntry,
    CircleElement,
    ProjectEntry,
    TemplateNotFoundError,
    TemplateRegistry,
    TextElement,
    create_style,
    get_sample_record,
)
from vitae.contexts.semantics import extract_record
from vitae.contexts.switching import switch_template, switch_to_template


def _style(layout_type, palette="navyProfessional"):
    layout_preset = "sidebar" if layout_type.startswith("sidebar") else "standard"
    return create_style(layout_type, palette, "professional", "standard", layout_preset)


SOURCE_LAYOUTS = list(LAYOUT_TYPES) + ["dynamic"]


@pytest.fixture(params=SOURCE_LAYOUTS)
def canvas(request):
    return render(get_sample_record("en"), _style(request.param))


def _texts(elements):
    return sorted(e.text.strip() for e in elements if e.kind == "text" and e.semantic_type)


@pytest.mark.integration
@pytest.mark.parametrize("layout_type", LAYOUT_TYPES)
def test_switch_preserves_texts(canvas, layout_type):
    """Test that every tagged text survives the switch."""
    switched = switch_template(canvas, _style(layout_type, palette="tealModern"))

    assert _texts(switched) == _texts(canvas)


@pytest.mark.integration
@pytest.mark.parametrize("layout_type", LAYOUT_TYPES)
def test_switch_preserves_ids_and_groups(canvas, layout_type):
    """Test that ids and semantic groups follow their texts."""
    switched = switch_template(canvas, _style(layout_type))
    before = {e.id: (e.text, e.semantic_group) for e in canvas if e.kind == "text"}

    for element in switched:
        if element.kind == "text" and element.id in before:
            assert before[element.id] == (element.text, element.semantic_group)

    assert {e.id for e in switched if e.kind == "text"} == set(before)


@pytest.mark.integration
def test_switch_does_not_mutate_input(canvas):
    """Test that the source canvas is left untouched."""
    snapshot = [e.to_dict() for e in canvas]

    switch_template(canvas, _style("sidebar-left"))

    assert [e.to_dict() for e in canvas] == snapshot


@pytest.mark.integration
def test_switch_round_trips_content(canvas):
    """Test that the switched canvas still extracts the same record."""
    switched = switch_template(canvas, _style("sidebar-left"))

    record = extract_record(switched)
    assert record.personal_info.full_name == "John Smith"
    assert [e.title for e in record.experience] == ["Senior Software Engineer", "Software Engineer"]
    assert len(record.skills) == 10


@pytest.mark.integration
def test_switch_into_sidebar_moves_lists():
    """Test that list sections land in the sidebar."""
    canvas = render(get_sample_record("en"), _style("single-column"))
    style = _style("sidebar-left")

    switched = switch_template(canvas, style)

    skills = next(e for e in switched if e.semantic_type == "skill_list")
    job = next(e for e in switched if e.semantic_type == "experience_title")
    assert skills.left < style.sidebar_width
    assert job.left > style.sidebar_width


@pytest.mark.integration
def test_switch_untagged_canvas_renders_sample():
    """Test that a canvas without tags falls back to the sample content."""
    untagged = [TextElement(text="Some note", top=300), TextElement(text="Another", top=320)]

    switched = switch_template(untagged, _style("minimal"))

    assert any(e.kind == "text" and e.text == "John Smith" for e in switched)


@pytest.mark.integration
def test_switch_keeps_custom_text_and_shapes(canvas):
    """Test that custom texts and custom shapes are carried over."""
    note = TextElement(text="References available on request", top=800, semantic_type="custom_text")
    badge = CircleElement(left=500, top=20, radius=10, semantic_type="custom_shape")

    switched = switch_template(canvas + [note, badge], _style("modern-split"))

    assert any(e.id == note.id and e.text == note.text for e in switched)
    assert any(e.id == badge.id and e.kind == "circle" for e in switched)


@pytest.mark.integration
def test_switch_accepts_persisted_dicts(canvas):
    """Test dict inputs for elements and style."""
    switched = switch_template([e.to_dict() for e in canvas], _style("minimal").to_dict())

    assert _texts(switched) == _texts(canvas)


@pytest.mark.integration
def test_switch_to_named_template(canvas):
    """Test switching by catalog template id."""
    switched = switch_to_template(canvas, "eu-classic")

    assert _texts(switched) == _texts(canvas)


@pytest.mark.integration
def test_switch_to_unknown_template(canvas):
    """Test the error for a missing template id."""
    with pytest.raises(TemplateNotFoundError):
        switch_to_template(canvas, "no-such-template")


@pytest.mark.integration
@pytest.mark.parametrize("template_id", TemplateRegistry().template_ids())
def test_switch_to_every_catalog_template(canvas, template_id):
    """Test that every catalog template accepts the sample canvas."""
    switched = switch_to_template(canvas, template_id)

    assert "John Smith" in _texts(switched)


def _full_record():
    record = get_sample_record("en")
    record.projects = [
        ProjectEntry(name="Route Planner", description="Routing service for delivery fleets", technologies=["Go"]),
    ]
    record.certifications = [CertificationEntry(name="AWS Solutions Architect", issuer="Amazon Web Services")]
    record.interests = ["Rock climbing", "Chess"]
    return record


@pytest.mark.integration
@pytest.mark.parametrize("source_layout", SOURCE_LAYOUTS)
@pytest.mark.parametrize("target_layout", ["single-column", "sidebar-right", "modern-split"])
def test_switch_carries_every_section(source_layout, target_layout):
    """Test that projects, certifications and interests follow the switch between layouts."""
    canvas = render(_full_record(), _style(source_layout))

    switched = switch_template(canvas, _style(target_layout))

    assert _texts(switched) == _texts(canvas)
    record = extract_record(switched)
    assert [p.name for p in record.projects] == ["Route Planner"]
    assert record.projects[0].technologies == ["Go"]
    assert [(c.name, c.issuer) for c in record.certifications] == [("AWS Solutions Architect", "Amazon Web Services")]
    assert record.interests == ["Rock climbing", "Chess"]
