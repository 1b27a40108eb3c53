"""Unit tests for text pattern matching."""

import pytest

from vitae.contexts.semantics.patterns import (
    classify_contact,
    has_year,
    is_bulleted,
    is_date_text,
    is_email,
    is_language_entry,
    is_phone,
    is_website,
    match_section_header,
    normalize_header_text,
    parse_date_range,
    parse_language_entry,
    strip_bullet,
)

# =============================================================================
# Section headers
# =============================================================================


@pytest.mark.unit
@pytest.mark.parametrize(
    "text, kind",
    [
        ("WORK EXPERIENCE", "experience"),
        ("Experience", "experience"),
        ("PROFESSIONAL SUMMARY", "summary"),
        ("About Me", "summary"),
        ("Skills:", "skills"),
        ("◦ Навички ◦", "skills"),
        ("ДОСВІД РОБОТИ", "experience"),
        ("BERUFSERFAHRUNG", "experience"),
        ("Sprachen", "languages"),
        ("EDUCATION", "education"),
        ("CONTACT", "contact"),
        ("DETAILS", "contact"),
        ("Certifications", "certifications"),
        ("Hobbies & Interests", "interests"),
    ],
)
def test_match_section_header(text, kind):
    """Test header recognition across locales and decorations."""
    assert match_section_header(text) == kind


@pytest.mark.unit
@pytest.mark.parametrize(
    "text",
    [
        "Senior Developer",
        "Skills and a lot of other words that make a very long sentence",
        "Experience\nSecond line",
        "",
        "• ",
    ],
)
def test_non_headers_are_rejected(text):
    """Test that job titles, long texts and multi-line texts are not headers."""
    assert match_section_header(text) is None


@pytest.mark.unit
def test_normalize_header_text():
    """Test stripping of bullets, colons and repeated whitespace."""
    assert normalize_header_text("  • Work   Experience:  ") == "Work Experience"


# =============================================================================
# Contact fields
# =============================================================================


@pytest.mark.unit
def test_phone_numbers():
    """Test phone detection on real numbers."""
    assert is_phone("+1 (555) 123-4567")
    assert is_phone("+380 67 123 45 67")
    assert not is_phone("12345")
    assert not is_phone("call me")


@pytest.mark.unit
@pytest.mark.parametrize("text", ["2013 - 2017", "01/2020 - 03/2021", "2019–2021"])
def test_date_ranges_are_not_phones(text):
    """Test that numeric date ranges are not mistaken for phone numbers."""
    assert not is_phone(text)


@pytest.mark.unit
def test_websites():
    """Test bare URL detection and its exclusions."""
    assert is_website("example.com")
    assert is_website("https://johnsmith.dev/portfolio")
    assert is_website("www.example.org")
    assert not is_website("Node.js")
    assert not is_website("config.json")
    assert not is_website("john@example.com")
    assert not is_website("two words.com")


@pytest.mark.unit
@pytest.mark.parametrize(
    "text, tag",
    [
        ("john.smith@email.com", "email"),
        ("linkedin.com/in/johnsmith", "linkedin"),
        ("github.com/johnsmith", "github"),
        ("johnsmith.dev", "website"),
        ("+1 (555) 123-4567", "phone"),
        ("San Francisco, CA", None),
    ],
)
def test_classify_contact(text, tag):
    """Test contact classification priority."""
    assert classify_contact(text) == tag


@pytest.mark.unit
def test_email_inside_text():
    """Test that an email is found inside a longer string."""
    assert is_email("Email: john@example.com")
    assert not is_email("john at example dot com")


# =============================================================================
# Dates
# =============================================================================


@pytest.mark.unit
@pytest.mark.parametrize(
    "text, expected",
    [
        ("2020 – Present", ("2020", "", True)),
        ("Jan 2020 - Dec 2022", ("Jan 2020", "Dec 2022", False)),
        ("2013 - 2017", ("2013", "2017", False)),
        ("01/2020 - 03/2021", ("01/2020", "03/2021", False)),
        ("Січень 2021 - Теперішній час", ("Січень 2021", "", True)),
        ("2018 bis heute", ("2018", "", True)),
    ],
)
def test_parse_date_range(text, expected):
    """Test date range parsing in several formats and locales."""
    assert parse_date_range(text) == expected


@pytest.mark.unit
def test_parse_date_range_without_range():
    """Test that texts without a range return None."""
    assert parse_date_range("Senior Developer") is None
    assert parse_date_range("2020") is None


@pytest.mark.unit
def test_is_date_text():
    """Test date-only text detection."""
    assert is_date_text("2019")
    assert is_date_text("Mar 2019 - Present")
    assert not is_date_text("Led the migration of 40 services between 2019 and 2021 to Kubernetes")
    assert not is_date_text("Senior Developer")
    assert has_year("Graduated 2015")
    assert not has_year("Level 42")


# =============================================================================
# Languages and bullets
# =============================================================================


@pytest.mark.unit
@pytest.mark.parametrize(
    "text, expected",
    [
        ("English - Native", ("English", "Native")),
        ("Spanish (Intermediate)", ("Spanish", "Intermediate")),
        ("German: B2", ("German", "B2")),
    ],
)
def test_parse_language_entry(text, expected):
    """Test the three supported language entry shapes."""
    assert parse_language_entry(text) == expected


@pytest.mark.unit
def test_is_language_entry_requires_proficiency_word():
    """Test that only known proficiency levels make a language entry."""
    assert is_language_entry("English - Native")
    assert is_language_entry("French (C1)")
    assert is_language_entry("Українська - рідна")
    assert not is_language_entry("Product Manager - Google")
    assert not is_language_entry("English")


@pytest.mark.unit
def test_bullets():
    """Test bullet detection and stripping."""
    assert is_bulleted("• Built a thing")
    assert is_bulleted("1. First")
    assert not is_bulleted("Built a thing")
    assert strip_bullet("• Built a thing") == "Built a thing"
    assert strip_bullet("- Shipped") == "Shipped"
