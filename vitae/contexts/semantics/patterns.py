"""
Pattern matching for resume canvas text.

Regex tables for section headers (English, Ukrainian, German), contact fields,
date ranges and language entries, plus small helper predicates built on them.
Tag inference and reverse extraction both read from these tables so a header
recognized by one is recognized by the other.

Pattern classes follow the usual convention:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Helper functions that use these patterns
"""

import re
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

# =============================================================================
# SECTION HEADER PATTERNS
# =============================================================================


@dataclass(frozen=True)
class SectionHeaderPatterns:
    """
    Header keywords per section kind.

    Each tuple lists alternatives matched against the whole (normalized) header
    text, case-insensitively. Ukrainian and German variants cover the labels the
    renderers emit for those locales, plus common hand-written variants.
    """

    SUMMARY: tuple = (
        r"(?:professional )?summary",
        r"about(?: me)?",
        r"(?:professional )?profile",
        r"objective",
        r"про мене",
        r"профіль",
        r"резюме",
        r"profil",
        r"zusammenfassung",
        r"über mich",
        r"kurzprofil",
    )

    EXPERIENCE: tuple = (
        r"(?:work |professional |relevant )?experience",
        r"employment(?: history)?",
        r"work history",
        r"career history",
        r"досвід(?: роботи)?",
        r"історія працевлаштування",
        r"berufserfahrung",
        r"(?:berufliche )?erfahrung",
        r"berufliche laufbahn",
    )

    EDUCATION: tuple = (
        r"education",
        r"academic background",
        r"освіта",
        r"bildung",
        r"ausbildung",
        r"bildungsweg",
    )

    SKILLS: tuple = (
        r"(?:key |technical |core |professional )?skills",
        r"competencies",
        r"expertise",
        r"навички",
        r"вміння",
        r"kenntnisse",
        r"fähigkeiten",
        r"kompetenzen",
    )

    LANGUAGES: tuple = (
        r"languages?",
        r"мови",
        r"знання мов",
        r"sprachen",
        r"sprachkenntnisse",
    )

    CERTIFICATIONS: tuple = (
        r"certifications?",
        r"certificates",
        r"licenses(?: (?:&|and) certifications)?",
        r"сертифікати",
        r"сертифікація",
        r"zertifikate",
        r"zertifizierungen",
    )

    PROJECTS: tuple = (
        r"(?:key |personal |side )?projects",
        r"проекти",
        r"проєкти",
        r"projekte",
    )

    INTERESTS: tuple = (
        r"interests",
        r"hobbies(?: (?:&|and) interests)?",
        r"інтереси",
        r"хобі",
        r"interessen",
        r"hobbys",
    )

    CONTACT: tuple = (
        r"contacts?",
        r"contact (?:info|information|details)",
        r"(?:personal )?details",
        r"контакти",
        r"особисті дані",
        r"kontakt(?:daten)?",
        r"persönliche daten",
    )

    AWARDS: tuple = (r"awards?(?: (?:&|and) honors)?", r"honors", r"нагороди", r"auszeichnungen")

    VOLUNTEER: tuple = (
        r"volunteer(?:ing| experience| work)?",
        r"волонтерство",
        r"ehrenamt(?:liches engagement)?",
    )

    REFERENCES: tuple = (r"references", r"рекомендації", r"referenzen")

    PUBLICATIONS: tuple = (r"publications", r"публікації", r"publikationen", r"veröffentlichungen")

    COURSES: tuple = (r"courses", r"training(?:s)?", r"курси", r"kurse", r"weiterbildung(?:en)?")

    MEMBERSHIPS: tuple = (
        r"memberships?",
        r"professional affiliations",
        r"членство",
        r"mitgliedschaften",
    )

    PATENTS: tuple = (r"patents", r"патенти", r"patente")

    MILITARY: tuple = (r"military(?: service)?", r"військова служба", r"wehrdienst")


# Section kinds in matching order; the first kind whose pattern matches wins
SECTION_HEADER_KINDS: Tuple[Tuple[str, tuple], ...] = (
    ("summary", SectionHeaderPatterns.SUMMARY),
    ("experience", SectionHeaderPatterns.EXPERIENCE),
    ("education", SectionHeaderPatterns.EDUCATION),
    ("skills", SectionHeaderPatterns.SKILLS),
    ("languages", SectionHeaderPatterns.LANGUAGES),
    ("certifications", SectionHeaderPatterns.CERTIFICATIONS),
    ("projects", SectionHeaderPatterns.PROJECTS),
    ("interests", SectionHeaderPatterns.INTERESTS),
    ("contact", SectionHeaderPatterns.CONTACT),
    ("awards", SectionHeaderPatterns.AWARDS),
    ("volunteer", SectionHeaderPatterns.VOLUNTEER),
    ("references", SectionHeaderPatterns.REFERENCES),
    ("publications", SectionHeaderPatterns.PUBLICATIONS),
    ("courses", SectionHeaderPatterns.COURSES),
    ("memberships", SectionHeaderPatterns.MEMBERSHIPS),
    ("patents", SectionHeaderPatterns.PATENTS),
    ("military", SectionHeaderPatterns.MILITARY),
)

_SECTION_HEADER_REGEXES: Dict[str, "re.Pattern"] = {
    kind: re.compile(r"^(?:" + "|".join(patterns) + r")$", re.IGNORECASE)
    for kind, patterns in SECTION_HEADER_KINDS
}

# Decorations stripped before matching: "◦ SKILLS ◦", "• Skills", "Skills:"
_HEADER_DECORATION = re.compile(r"^[\s◦•·▪■□\-–—|:]+|[\s◦•·▪■□\-–—|:]+$")
_WHITESPACE = re.compile(r"\s+")

MAX_HEADER_LENGTH = 40


def normalize_header_text(text: str) -> str:
    """Strip decorative bullets, trailing colons and repeated whitespace."""
    text = _HEADER_DECORATION.sub("", text or "")
    return _WHITESPACE.sub(" ", text).strip()


def match_section_header(text: str) -> Optional[str]:
    """
    Identify the section kind of a header text.

    Args:
        text: Candidate header text (decorations allowed)

    Returns:
        Section kind (e.g., "experience") or None

    Examples:
        >>> match_section_header("WORK EXPERIENCE")
        'experience'
        >>> match_section_header("◦ Навички ◦")
        'skills'
        >>> match_section_header("Senior Developer")
    """
    if not text or "\n" in text.strip() or len(text.strip()) > MAX_HEADER_LENGTH:
        return None
    normalized = normalize_header_text(text)
    if not normalized:
        return None
    for kind, regex in _SECTION_HEADER_REGEXES.items():
        if regex.match(normalized):
            return kind
    return None


# =============================================================================
# CONTACT PATTERNS
# =============================================================================


@dataclass(frozen=True)
class ContactPatterns:
    """Regex patterns for contact fields."""

    EMAIL: str = r"[\w.+-]+@[\w-]+(?:\.[\w-]+)*\.\w{2,}"

    # Characters a phone number may contain; digits are counted separately
    PHONE_CHARS: str = r"^[\d\s().\-/+]+$"

    # "2013 - 2017" is a year range, not a phone number
    YEAR_RANGE: str = r"^\s*\d{4}\s*[-–—/]\s*\d{4}\s*$"

    WEBSITE: str = r"^(?:https?://)?(?:www\.)?[a-z0-9-]+(?:\.[a-z0-9-]+)*\.([a-z]{2,})(?:/\S*)?$"

    URL_PREFIX: str = r"^(?:https?://|www\.)"


# File extensions that look like top-level domains ("Node.js", "config.json")
NON_DOMAIN_SUFFIXES = ("js", "ts", "py", "rb", "md", "txt", "json", "css", "html", "xml", "yaml", "yml")

PHONE_MIN_DIGITS = 7
PHONE_MAX_DIGITS = 15

_EMAIL = re.compile(ContactPatterns.EMAIL)
_PHONE_CHARS = re.compile(ContactPatterns.PHONE_CHARS)
_YEAR_RANGE = re.compile(ContactPatterns.YEAR_RANGE)
_WEBSITE = re.compile(ContactPatterns.WEBSITE, re.IGNORECASE)
_URL_PREFIX = re.compile(ContactPatterns.URL_PREFIX, re.IGNORECASE)


def is_email(text: str) -> bool:
    return bool(_EMAIL.search(text or ""))


def is_phone(text: str) -> bool:
    """
    Check whether a text is a phone number.

    Only phone characters are allowed, the digit count must be plausible and
    ranges that start with a year ("2013 - 2017", "01/2020 - 03/2021") are
    rejected.
    """
    text = (text or "").strip()
    if not text or not _PHONE_CHARS.match(text) or _YEAR_RANGE.match(text):
        return False
    date_range = DATE_RANGE.search(text)
    if date_range and YEAR.search(date_range.group(1)):
        return False
    digits = sum(ch.isdigit() for ch in text)
    return PHONE_MIN_DIGITS <= digits <= PHONE_MAX_DIGITS


def is_linkedin(text: str) -> bool:
    return "linkedin.com" in (text or "").lower()


def is_github(text: str) -> bool:
    return "github.com" in (text or "").lower()


def is_website(text: str) -> bool:
    """Check whether a text is a bare URL (not an email, not a file name like "Node.js")."""
    text = (text or "").strip()
    if not text or " " in text or "@" in text:
        return False
    match = _WEBSITE.match(text)
    if not match:
        return False
    if match.group(1).lower() in NON_DOMAIN_SUFFIXES and not _URL_PREFIX.match(text) and "/" not in text:
        return False
    return True


def classify_contact(text: str) -> Optional[str]:
    """Contact tag for a text fragment, or None when it is not a recognizable contact field."""
    if is_email(text):
        return "email"
    if is_linkedin(text):
        return "linkedin"
    if is_github(text):
        return "github"
    if is_website(text):
        return "website"
    if is_phone(text):
        return "phone"
    return None


# =============================================================================
# DATE PATTERNS
# =============================================================================


@dataclass(frozen=True)
class DatePatterns:
    """
    Date range patterns.

    A date is a 4-digit year, optionally preceded by a month word ("Jan 2020",
    "Січень 2021") or written numerically ("01/2020"). The end of a range may
    be a word meaning "now" in any supported locale.
    """

    DATE: str = r"(?:(?:[^\W\d_]+\.?\s+)?\d{4}|\d{1,2}[./]\d{4})"

    CURRENT: str = (
        r"(?:present|current|now|today|ongoing|"
        r"теперішній час|досі|зараз|сьогодні|дотепер|"
        r"heute|aktuell|bis heute|jetzt)"
    )

    RANGE_SEPARATOR: str = r"\s*(?:[-–—]|to|до|bis)\s*"


DATE_RANGE = re.compile(
    rf"({DatePatterns.DATE}){DatePatterns.RANGE_SEPARATOR}({DatePatterns.DATE}|{DatePatterns.CURRENT})",
    re.IGNORECASE,
)
SINGLE_DATE = re.compile(rf"^{DatePatterns.DATE}$", re.IGNORECASE)
_CURRENT = re.compile(rf"^{DatePatterns.CURRENT}$", re.IGNORECASE)
YEAR = re.compile(r"\b(?:19|20)\d{2}\b")

# Date-only texts longer than this are prose that mentions dates
MAX_DATE_TEXT_LENGTH = 45


def parse_date_range(text: str) -> Optional[Tuple[str, str, bool]]:
    """
    Parse a date range out of a text.

    Args:
        text: Text containing a range like "Jan 2020 – Present" or "2013 - 2017"

    Returns:
        (start, end, current) or None. ``end`` is empty when the range is open.

    Examples:
        >>> parse_date_range("Jan 2020 – Present")
        ('Jan 2020', '', True)
        >>> parse_date_range("2013 - 2017")
        ('2013', '2017', False)
    """
    match = DATE_RANGE.search(text or "")
    if not match:
        return None
    start, end = match.group(1).strip(), match.group(2).strip()
    if _CURRENT.match(end):
        return start, "", True
    return start, end, False


def is_date_text(text: str) -> bool:
    """True when a short text is a date range or a lone date."""
    text = (text or "").strip()
    if not text or len(text) > MAX_DATE_TEXT_LENGTH or "\n" in text:
        return False
    return bool(DATE_RANGE.search(text)) or bool(SINGLE_DATE.match(text))


def has_year(text: str) -> bool:
    return bool(YEAR.search(text or ""))


# =============================================================================
# LANGUAGE ENTRY PATTERNS
# =============================================================================


@dataclass(frozen=True)
class LanguagePatterns:
    """
    "Language - Level" entries.

    ENTRY parses any level; PROFICIENCY restricts levels to known proficiency
    words so that "Product Manager - Google" is not mistaken for a language.
    """

    ENTRY: str = r"^([^\W\d_][^\W\d_'’ ]*(?:[ '’][^\W\d_]+)?)\s*(?:[-–—:]\s*(.+?)|\((.+?)\))\s*$"

    PROFICIENCY: tuple = (
        r"native(?: speaker)?",
        r"mother tongue",
        r"bilingual",
        r"fluent",
        r"proficient",
        r"advanced",
        r"upper[- ]intermediate",
        r"intermediate",
        r"pre[- ]intermediate",
        r"conversational",
        r"professional(?: working)?(?: proficiency)?",
        r"elementary",
        r"basic",
        r"beginner",
        r"[abc][12](?:\+)?",
        r"рідна",
        r"вільно",
        r"вільне володіння",
        r"просунутий",
        r"середній",
        r"базовий",
        r"початковий",
        r"muttersprache",
        r"fließend",
        r"verhandlungssicher",
        r"gut",
        r"sehr gut",
        r"grundkenntnisse",
    )


_LANGUAGE_ENTRY = re.compile(LanguagePatterns.ENTRY)
_PROFICIENCY = re.compile(
    r"^(?:" + "|".join(LanguagePatterns.PROFICIENCY) + r")(?:\s*\(?[abc][12]\)?)?$", re.IGNORECASE
)


def parse_language_entry(text: str) -> Optional[Tuple[str, str]]:
    """
    Split "Language - Level", "Language (Level)" or "Language: Level".

    Returns:
        (language, level) or None when the text has no level separator
    """
    text = (text or "").strip()
    if not text or "\n" in text:
        return None
    match = _LANGUAGE_ENTRY.match(text)
    if not match:
        return None
    level = (match.group(2) or match.group(3) or "").strip()
    return match.group(1).strip(), level


def is_language_entry(text: str) -> bool:
    """True for a "Language - Level" text whose level is a known proficiency word."""
    parsed = parse_language_entry(text)
    return bool(parsed) and bool(_PROFICIENCY.match(parsed[1]))


# =============================================================================
# CONTENT SHAPE PATTERNS
# =============================================================================

BULLET_PREFIX = re.compile(r"^\s*(?:[•·▪◦●■\-*–]\s+|\d+[.)]\s+)")
BULLET_STRIP = re.compile(r"^\s*(?:[•·▪◦●■\-*–]\s*|\d+[.)]\s+)")

# Separators inside joined contact lines and inline lists
CONTACT_SPLIT = re.compile(r"\s*[|•·\n]\s*")
LIST_SPLIT = re.compile(r"\s*[•·,\n|]\s*")


def is_bulleted(text: str) -> bool:
    return bool(BULLET_PREFIX.match(text or ""))


def strip_bullet(line: str) -> str:
    return BULLET_STRIP.sub("", line or "", count=1).strip()
