"""
Integration test for render -> extract round trips.
Tests: sample record → rendered elements → extracted record matches the content.
"""

import pytest

from vitae.contexts.layout import render, render_document
from vitae.contexts.schema import (
    LAYOUT_TYPES,
    CertificationEntry,
    ExperienceEntry,
    PersonalInfo,
    ProjectEntry,
    ResumeRecord,
    create_style,
    flatten,
    get_sample_record,
)
from vitae.contexts.semantics import extract_record

ALL_LAYOUTS = list(LAYOUT_TYPES) + ["dynamic"]


def _style(layout_type):
    layout_preset = "sidebar" if layout_type.startswith("sidebar") else "standard"
    return create_style(layout_type, "tealModern", "modern", "standard", layout_preset)


@pytest.mark.integration
@pytest.mark.parametrize("layout_type", ALL_LAYOUTS)
def test_sample_round_trip(layout_type):
    """Test that the English sample survives render and extraction in every layout."""
    record = extract_record(render(get_sample_record("en"), _style(layout_type)))

    personal = record.personal_info
    assert personal.full_name == "John Smith"
    assert personal.title == "Senior Software Engineer"
    assert personal.email == "john.smith@email.com"
    assert personal.phone

    assert [e.title for e in record.experience] == ["Senior Software Engineer", "Software Engineer"]
    first = record.experience[0]
    assert "Tech Company Inc." in first.company
    assert first.current is True
    assert first.start_date == "Jan 2020"
    assert len(first.description) == 3

    assert record.education[0].degree == "Bachelor of Science in Computer Science"
    assert len(record.skills) == 10
    assert "Node.js" in record.skills
    assert [(l.language, l.level) for l in record.languages] == [
        ("English", "Native"),
        ("Spanish", "Intermediate"),
    ]


@pytest.mark.integration
def test_single_entry_round_trip():
    """Test a minimal record with one experience entry."""
    record = ResumeRecord(
        personal_info=PersonalInfo(full_name="Jane Doe"),
        experience=[
            ExperienceEntry(
                title="Engineer",
                company="Acme",
                start_date="2020",
                current=True,
                description=["Shipped the billing service", "Mentored two interns"],
            )
        ],
    )

    extracted = extract_record(render(record, _style("single-column")))

    assert extracted.personal_info.full_name == "Jane Doe"
    (entry,) = extracted.experience
    assert entry.title == "Engineer"
    assert "Acme" in entry.company
    assert (entry.start_date, entry.current) == ("2020", True)
    assert entry.description == ["Shipped the billing service", "Mentored two interns"]


@pytest.mark.integration
def test_round_trip_through_persisted_dicts():
    """Test extraction from the persisted canvas form."""
    elements = render(get_sample_record("en"), _style("sidebar-left"))

    record = extract_record([element.to_dict() for element in elements])

    assert record.personal_info.full_name == "John Smith"
    assert len(record.experience) == 2


@pytest.mark.integration
def test_round_trip_through_pages():
    """Test that paginating and flattening keeps the extracted content."""
    style = _style("single-column")
    document = render_document(get_sample_record("en"), style)

    record = extract_record(flatten(document))

    assert document.pages
    assert record.personal_info.full_name == "John Smith"
    assert len(record.experience) == 2
    assert len(record.skills) == 10


@pytest.mark.integration
def test_round_trip_other_locales():
    """Test localized sample content in the European sidebar layout."""
    style = create_style("sidebar-left", "tealModern", "modern", "standard", "sidebar", locale="de")

    record = extract_record(render(get_sample_record("de"), style))

    assert record.personal_info.full_name == "Max Müller"
    assert record.experience


def _stringify_numbers(data):
    return {k: (str(v) if isinstance(v, (int, float)) and not isinstance(v, bool) else v) for k, v in data.items()}


@pytest.mark.integration
def test_round_trip_with_string_numbers():
    """Test extraction from persisted objects whose numbers were saved as strings."""
    elements = render(get_sample_record("en"), _style("sidebar-left"))

    record = extract_record([_stringify_numbers(element.to_dict()) for element in elements])

    assert record.personal_info.full_name == "John Smith"
    assert [e.title for e in record.experience] == ["Senior Software Engineer", "Software Engineer"]
    assert len(record.skills) == 10


def _full_record():
    record = get_sample_record("en")
    record.projects = [
        ProjectEntry(
            name="Route Planner",
            description="Open-source routing service for delivery fleets",
            technologies=["Python", "PostGIS"],
            url="github.com/jsmith/route-planner",
        ),
        ProjectEntry(name="Budget Bot", description="Chat assistant that tracks shared expenses"),
    ]
    record.certifications = [
        CertificationEntry(name="AWS Solutions Architect", issuer="Amazon Web Services", date="2022"),
        CertificationEntry(name="Certified Kubernetes Administrator", issuer="CNCF"),
    ]
    record.interests = ["Rock climbing", "Chess", "Open source"]
    return record


@pytest.mark.integration
@pytest.mark.parametrize("layout_type", ALL_LAYOUTS)
def test_full_record_round_trip(layout_type):
    """Test projects, certifications and interests through render and extraction in every layout."""
    record = extract_record(render(_full_record(), _style(layout_type)))

    assert [p.name for p in record.projects] == ["Route Planner", "Budget Bot"]
    planner = record.projects[0]
    assert planner.technologies == ["Python", "PostGIS"]
    assert planner.url == "github.com/jsmith/route-planner"
    assert "routing service" in planner.description

    assert [(c.name, c.issuer) for c in record.certifications] == [
        ("AWS Solutions Architect", "Amazon Web Services"),
        ("Certified Kubernetes Administrator", "CNCF"),
    ]
    assert record.certifications[0].date == "2022"
    assert record.interests == ["Rock climbing", "Chess", "Open source"]
    assert len(record.experience) == 2
