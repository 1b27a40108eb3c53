"""Unit tests for semantic maps, outlines and element lookup."""

import pytest

from vitae.contexts.schema import RectElement, TextElement
from vitae.contexts.semantics import (
    OutlineTemplateRegistry,
    extract_semantic_map,
    find_element,
    format_semantic_map,
)
from vitae.contexts.semantics.semantic_map import SEMANTIC_MAP_TEMPLATE

DESCRIPTION = (
    "Designed and operated the payment reconciliation service handling millions of "
    "transactions per day across three regions"
)


@pytest.fixture
def canvas():
    """Small tagged and untagged canvas."""
    return [
        TextElement(text="SKILLS", top=300, font_weight="bold"),
        TextElement(text="John Smith", top=20, font_size=28, font_weight="bold", semantic_type="name"),
        TextElement(text="john@example.com", top=60, font_size=10),
        TextElement(text="EXPERIENCE", top=100, font_weight="bold", semantic_type="experience_section"),
        TextElement(
            text=DESCRIPTION,
            top=140,
            font_size=10,
            semantic_type="experience_description",
            semantic_group="experience_0",
        ),
        TextElement(text="   ", top=500),
        TextElement(text="hidden", top=510, selectable=False),
        RectElement(top=0, height=100),
    ]


@pytest.mark.unit
def test_semantic_map_lists_texts_top_to_bottom(canvas):
    """Test entry order, inferred tags and skipped elements."""
    semantic_map = extract_semantic_map(canvas)

    assert [e.text for e in semantic_map.entries] == [
        "John Smith",
        "john@example.com",
        "EXPERIENCE",
        DESCRIPTION,
        "SKILLS",
    ]
    types = {e.text: e.semantic_type for e in semantic_map.entries}
    assert types["john@example.com"] == "email"
    assert types["SKILLS"] == "skills_section"
    assert semantic_map.section_headers == ["EXPERIENCE", "SKILLS"]
    assert semantic_map.full_text.startswith("John Smith\n\njohn@example.com")


@pytest.mark.unit
def test_semantic_map_does_not_modify_elements(canvas):
    """Test that inferred tags are not written back."""
    extract_semantic_map(canvas)

    assert canvas[2].semantic_type is None


@pytest.mark.unit
def test_semantic_map_to_dict(canvas):
    """Test the persisted camelCase shape."""
    data = extract_semantic_map(canvas).to_dict()

    assert data["sectionHeaders"] == ["EXPERIENCE", "SKILLS"]
    first = data["entries"][0]
    assert first["semanticType"] == "name"
    assert first["position"] == {"top": 20, "left": 0.0}


@pytest.mark.unit
def test_format_semantic_map_outline(canvas):
    """Test the rendered outline shows category blocks and previews."""
    outline = format_semantic_map(extract_semantic_map(canvas))

    assert "Resume outline: 5 text elements, 2 section headers" in outline
    assert "Sections: EXPERIENCE / SKILLS" in outline
    assert "[Personal Info]" in outline
    assert "[Experience]" in outline
    assert "(experience_0)" in outline
    # long texts are shortened to a one-line preview
    assert DESCRIPTION not in outline
    assert "…" in outline


@pytest.mark.unit
def test_format_semantic_map_localized(canvas):
    """Test Ukrainian category labels."""
    outline = format_semantic_map(extract_semantic_map(canvas), locale="uk")

    assert "[Досвід роботи]" in outline


@pytest.mark.unit
def test_outline_registry_caches_templates():
    """Test loading, caching and clearing of outline templates."""
    registry = OutlineTemplateRegistry()
    assert not registry.is_cached(SEMANTIC_MAP_TEMPLATE)

    first = registry.get_template(SEMANTIC_MAP_TEMPLATE)
    assert registry.is_cached(SEMANTIC_MAP_TEMPLATE)
    assert registry.get_template(SEMANTIC_MAP_TEMPLATE) is first

    registry.clear_cache()
    assert not registry.is_cached(SEMANTIC_MAP_TEMPLATE)


# =============================================================================
# find_element
# =============================================================================


@pytest.mark.unit
def test_find_element_exact_text(canvas):
    """Test case-insensitive exact match."""
    assert find_element(canvas, text="JOHN@EXAMPLE.COM") is canvas[2]


@pytest.mark.unit
def test_find_element_partial_text(canvas):
    """Test that a quoted fragment finds the paragraph containing it."""
    found = find_element(canvas, text="payment reconciliation service")

    assert found is canvas[4]


@pytest.mark.unit
def test_find_element_first_words(canvas):
    """Test that a quote with a changed ending still matches by its first words."""
    edited = "Designed and operated the payment reconciliation service handling a smaller volume"

    assert find_element(canvas, text=edited) is canvas[4]


@pytest.mark.unit
def test_find_element_word_overlap():
    """Test the significant word overlap fallback."""
    target = TextElement(text="Migrated legacy billing services onto managed Kubernetes clusters")
    elements = [TextElement(text="Unrelated"), target]

    found = find_element(elements, text="Kubernetes clusters hosting legacy billing services were migrated")

    assert found is target


@pytest.mark.unit
def test_find_element_falls_back_to_tag(canvas):
    """Test tag-only lookup and lookup by element id."""
    assert find_element(canvas, semantic_type="name") is canvas[1]
    assert find_element(canvas, semantic_type=canvas[3].id) is canvas[3]
    assert find_element(canvas, semantic_type="name", text="no such text anywhere") is canvas[1]


@pytest.mark.unit
def test_find_element_nothing_found(canvas):
    """Test that no match returns None."""
    assert find_element(canvas, text="nothing like this") is None
    assert find_element(canvas) is None
