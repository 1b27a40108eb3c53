"""Unit tests for the semantic tag vocabulary, sections and labels."""

import pytest

from vitae.contexts.vocabulary import (
    ALL_SEMANTIC_TYPES,
    SECTION_DEFINITIONS,
    get_category_label,
    get_present_label,
    get_section_definition,
    get_section_header,
    get_sections_sorted,
    get_semantic_type_label,
)
from vitae.contexts.vocabulary.semantic_types import (
    SECTION_HEADER_TYPES,
    SEMANTIC_TYPES_BY_CATEGORY,
    get_semantic_category,
    get_types_for_category,
    is_section_header_type,
    is_semantic_type,
)


@pytest.mark.unit
def test_every_tag_has_exactly_one_category():
    """Test that no tag is listed under two categories."""
    listed = [tag for tags in SEMANTIC_TYPES_BY_CATEGORY.values() for tag in tags]

    assert len(listed) == len(set(listed))
    assert set(listed) == set(ALL_SEMANTIC_TYPES)


@pytest.mark.unit
@pytest.mark.parametrize(
    "tag, category",
    [
        ("name", "personal"),
        ("email", "contact"),
        ("experience_title", "experience"),
        ("education_degree", "education"),
        ("skill_list", "skills"),
        ("language_entry", "languages"),
        ("divider", "layout"),
        ("custom_text", "custom"),
    ],
)
def test_get_semantic_category(tag, category):
    """Test the tag -> category map on representative tags."""
    assert get_semantic_category(tag) == category


@pytest.mark.unit
def test_missing_or_unknown_tags_are_custom():
    """Test that untagged and unknown tags fall into the custom category."""
    assert get_semantic_category(None) == "custom"
    assert get_semantic_category("") == "custom"
    assert get_semantic_category("not_a_tag") == "custom"
    assert not is_semantic_type("not_a_tag")
    assert not is_semantic_type(42)


@pytest.mark.unit
def test_section_header_types():
    """Test header tag detection."""
    assert is_section_header_type("experience_section")
    assert is_section_header_type("section_header")
    assert not is_section_header_type("experience_title")
    assert not is_section_header_type("made_up_section")
    assert not is_section_header_type(None)
    assert SECTION_HEADER_TYPES["skills"] == "skills_section"
    assert "layout" not in SECTION_HEADER_TYPES


@pytest.mark.unit
def test_get_types_for_unknown_category_is_empty():
    """Test the category -> tags lookup for an unknown category."""
    assert get_types_for_category("nope") == ()
    assert "skill" in get_types_for_category("skills")


@pytest.mark.unit
def test_section_definitions_exclude_header_from_allowed_types():
    """Test that each section lists its header separately from its body tags."""
    experience = get_section_definition("experience")

    assert experience.header_type == "experience_section"
    assert "experience_section" not in experience.allowed_types
    assert "experience_title" in experience.allowed_types
    assert experience.is_repeatable

    personal = get_section_definition("personal")
    assert personal.header_type is None
    assert personal.is_required


@pytest.mark.unit
def test_sections_sorted_by_default_order():
    """Test default section ordering."""
    ordered = get_sections_sorted()

    assert [s.id for s in ordered[:4]] == ["personal", "contact", "summary", "experience"]
    assert len(ordered) == len(SECTION_DEFINITIONS)
    assert get_section_definition("nope") is None


@pytest.mark.unit
def test_labels_with_fallbacks():
    """Test tag, category and header labels across locales."""
    assert get_semantic_type_label("name") == "Full Name"
    assert get_semantic_type_label("name", "uk") == "Повне ім'я"
    assert get_semantic_type_label("unlabelled_tag") == "unlabelled_tag"

    assert get_category_label("experience", "uk") == "Досвід роботи"
    assert get_category_label("mystery") == "mystery"


@pytest.mark.unit
def test_section_headers_per_locale():
    """Test rendered header strings and their English fallback."""
    assert get_section_header("experience") == "WORK EXPERIENCE"
    assert get_section_header("summary") == "PROFESSIONAL SUMMARY"
    assert get_section_header("skills", "de") == "KENNTNISSE"
    assert get_section_header("contact", "uk") == "КОНТАКТИ"
    # unknown locale falls back to English, unknown section upper-cases
    assert get_section_header("skills", "fr") == "SKILLS"
    assert get_section_header("awards") == "AWARDS"


@pytest.mark.unit
def test_present_label():
    """Test the open-ended date word per locale."""
    assert get_present_label() == "Present"
    assert get_present_label("de") == "Heute"
    assert get_present_label("xx") == "Present"
