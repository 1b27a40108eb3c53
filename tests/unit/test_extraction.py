"""Unit tests for reverse extraction on hand-built canvases."""

import pytest

from vitae.contexts.schema import ResumeRecord, TextElement
from vitae.contexts.semantics import coerce_elements, extract_record
from vitae.contexts.semantics.extraction import (
    parse_certifications,
    parse_education,
    parse_experience,
    parse_projects,
    split_list_items,
)


def _text(text, top, left=40, font_size=10, bold=False, **kwargs):
    return TextElement(
        text=text,
        top=top,
        left=left,
        font_size=font_size,
        font_weight="bold" if bold else "normal",
        **kwargs,
    )


@pytest.fixture
def legacy_canvas():
    """Untagged single-column canvas as an older editor would have saved it."""
    return [
        _text("Jane Doe", 30, font_size=26, bold=True),
        _text("Product Designer", 65, font_size=14),
        _text("jane@doe.io | +1 555 123 4567 | Berlin, Germany", 90, font_size=9),
        _text("EXPERIENCE", 130, font_size=11, bold=True),
        _text("Lead Designer", 150, font_size=12, bold=True),
        _text("2019 - Present", 150, left=450, font_size=9),
        _text("Studio X | Berlin", 168),
        _text("• Led a team of five", 186),
        _text("SKILLS", 230, font_size=11, bold=True),
        _text("Figma, Sketch • Prototyping", 250),
        _text("LANGUAGES", 290, font_size=11, bold=True),
        _text("German - Native\nEnglish (C1)", 310),
    ]


@pytest.mark.unit
def test_extract_untagged_personal_info(legacy_canvas):
    """Test name, title and split contact line on an untagged canvas."""
    personal = extract_record(legacy_canvas).personal_info

    assert personal.full_name == "Jane Doe"
    assert personal.title == "Product Designer"
    assert personal.email == "jane@doe.io"
    assert personal.phone == "+1 555 123 4567"


@pytest.mark.unit
def test_extract_untagged_experience(legacy_canvas):
    """Test entry structure from bold, date and pipe heuristics."""
    (entry,) = extract_record(legacy_canvas).experience

    assert entry.title == "Lead Designer"
    assert entry.company == "Studio X"
    assert entry.location == "Berlin"
    assert entry.start_date == "2019"
    assert entry.current is True
    assert entry.description == ["Led a team of five"]


@pytest.mark.unit
def test_extract_untagged_lists(legacy_canvas):
    """Test skills and languages sections."""
    record = extract_record(legacy_canvas)

    assert record.skills == ["Figma", "Sketch", "Prototyping"]
    assert [(l.language, l.level) for l in record.languages] == [
        ("German", "Native"),
        ("English", "C1"),
    ]


@pytest.mark.unit
def test_extract_accepts_persisted_dicts(legacy_canvas):
    """Test that persisted canvas objects extract like element objects."""
    persisted = [element.to_dict() for element in legacy_canvas]

    assert extract_record(persisted).personal_info.full_name == "Jane Doe"


@pytest.mark.unit
def test_extract_empty_canvas():
    """Test that an empty canvas yields an empty record without raising."""
    record = extract_record([])

    assert isinstance(record, ResumeRecord)
    assert record.is_empty()


@pytest.mark.unit
def test_coerce_elements_skips_malformed_dicts():
    """Test that unsupported objects are dropped and valid ones kept."""
    elements = coerce_elements([{"type": "image"}, {"type": "textbox", "text": "ok"}, "garbage"])

    assert [e.text for e in elements if getattr(e, "kind", None) == "text"] == ["ok"]


@pytest.mark.unit
def test_parse_experience_by_groups():
    """Test that tagged elements of different groups open separate entries."""
    texts = [
        _text("Engineer", 0, semantic_type="experience_title", semantic_group="experience_0"),
        _text("Acme", 15, semantic_type="experience_company", semantic_group="experience_0"),
        _text("Did things", 30, semantic_type="experience_description", semantic_group="experience_1"),
    ]

    entries = parse_experience(texts)

    assert [e.title for e in entries] == ["Engineer"]
    assert entries[0].company == "Acme"


@pytest.mark.unit
def test_bold_company_after_title_is_subtitle():
    """Test that a smaller bold line right after a title is the company."""
    texts = [
        _text("Engineer", 0, font_size=12, bold=True),
        _text("Acme Corp", 16, font_size=10, bold=True),
    ]

    (entry,) = parse_experience(texts)

    assert entry.title == "Engineer"
    assert entry.company == "Acme Corp"


@pytest.mark.unit
def test_parse_education():
    """Test degree, institution, dates and GPA."""
    texts = [
        _text("BSc Computer Science", 0, font_size=11, bold=True),
        _text("Kyiv Polytechnic", 15),
        _text("2012 - 2016", 30),
        _text("GPA: 3.8", 45),
    ]

    (entry,) = parse_education(texts)

    assert entry.degree == "BSc Computer Science"
    assert entry.institution == "Kyiv Polytechnic"
    assert (entry.start_date, entry.end_date) == ("2012", "2016")
    assert entry.gpa == "3.8"


@pytest.mark.unit
def test_parse_certifications():
    """Test bold names with issuer and date lines."""
    texts = [
        _text("AWS Solutions Architect", 0, bold=True),
        _text("Amazon | 2022", 15),
        _text("CKA", 30, bold=True),
        _text("2021", 45),
    ]

    entries = parse_certifications(texts)

    assert [(c.name, c.issuer, c.date) for c in entries] == [
        ("AWS Solutions Architect", "Amazon", "2022"),
        ("CKA", "", "2021"),
    ]


@pytest.mark.unit
def test_parse_projects():
    """Test project url, technologies and description lines."""
    texts = [
        _text("Vitae", 0, bold=True),
        _text("github.com/jane/vitae", 15),
        _text("Technologies: Python, Jinja2", 30),
        _text("Layout engine for resumes", 45),
    ]

    (project,) = parse_projects(texts)

    assert project.name == "Vitae"
    assert project.url == "github.com/jane/vitae"
    assert project.technologies == ["Python", "Jinja2"]
    assert project.description == "Layout engine for resumes"


@pytest.mark.unit
def test_split_list_items_dedupes_and_drops_prose():
    """Test list splitting rules."""
    long_item = "x" * 60
    texts = [_text(f"Python, Go | python\n{long_item}", 0), _text("• Rust", 20)]

    assert split_list_items(texts) == ["Python", "Go", "Rust"]
