"""
Reverse extraction: canvas elements -> ResumeRecord.

Works on tagged canvases (tags are honored first) and on legacy untagged ones
(section headers found by the multilingual pattern table, entry structure by
bold/date/pipe heuristics). Extraction never raises on odd input: missing
fields stay empty and unrecognized sections are skipped.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from vitae.contexts.schema.elements import TextElement, VisualElement, element_from_dict
from vitae.contexts.schema.exceptions import ElementFormatError
from vitae.contexts.schema.record import (
    CertificationEntry,
    EducationEntry,
    ExperienceEntry,
    LanguageEntry,
    PersonalInfo,
    ProjectEntry,
    ResumeRecord,
)
from vitae.contexts.semantics.grouping import (
    HEADER_GROUP,
    UNKNOWN_KIND,
    SectionGroup,
    assign_column,
    column_anchors,
    detect_section_header,
    group_sections,
)
from vitae.contexts.semantics.logger import _log_warning, log_extraction_result
from vitae.contexts.semantics.patterns import (
    CONTACT_SPLIT,
    DATE_RANGE,
    LIST_SPLIT,
    SINGLE_DATE,
    classify_contact,
    is_bulleted,
    is_date_text,
    is_github,
    is_website,
    parse_date_range,
    parse_language_entry,
    strip_bullet,
)
from vitae.contexts.vocabulary.semantic_types import get_semantic_category

NAME_MAX_TOP = 200
TITLE_MIN_FONT_SIZE = 10
TITLE_MAX_LENGTH = 80

# Untagged lines longer than this are descriptions
DESCRIPTION_MIN_LENGTH = 80

# List items (skills, interests) longer than this are prose, not items
MAX_LIST_ITEM_LENGTH = 50

CONTACT_FIELDS = ("email", "phone", "location", "linkedin", "github", "website")

# Contact tags outside CONTACT_FIELDS that still fill one of them
CONTACT_TAG_ALIASES = {"address": "location", "portfolio": "website", "custom_link": "website"}

_GPA = re.compile(r"^\s*(?:GPA|Середній бал|Notendurchschnitt|Note)\s*[:\-]?\s*", re.IGNORECASE)
_TECHNOLOGIES = re.compile(r"^\s*(?:Technologies|Tech stack|Stack|Технології|Technologien)\s*:\s*", re.IGNORECASE)


def _text(element: TextElement) -> str:
    return (element.text or "").strip()


def _is_untagged(element: TextElement) -> bool:
    return element.semantic_type in (None, "", "custom_text")


# =============================================================================
# ENTRY STATE MACHINE (experience, education)
# =============================================================================

EXPERIENCE_ROLES = {
    "experience_title": "title",
    "experience_company": "subtitle",
    "experience_location": "location",
    "experience_dates": "dates",
    "experience_start_date": "start",
    "experience_end_date": "end",
    "experience_description": "description",
    "experience_achievements": "description",
    "experience_technologies": "description",
}

EDUCATION_ROLES = {
    "education_degree": "title",
    "education_institution": "subtitle",
    "education_location": "location",
    "education_dates": "dates",
    "education_start_date": "start",
    "education_end_date": "end",
    "education_gpa": "gpa",
    "education_field": "description",
    "education_honors": "description",
    "education_thesis": "description",
    "education_description": "description",
}


@dataclass
class _EntryDraft:
    """Fields collected for one experience/education entry."""

    group: Optional[str] = None
    title: str = ""
    title_font: float = 0.0
    subtitle: str = ""
    location: str = ""
    start: str = ""
    end: str = ""
    current: bool = False
    gpa: str = ""
    description: List[str] = field(default_factory=list)
    last_role: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not (self.title or self.subtitle)

    def set_dates(self, text: str) -> bool:
        parsed = parse_date_range(text)
        if parsed:
            self.start, self.end, self.current = parsed
            return True
        if SINGLE_DATE.match(text.strip()):
            self.start = text.strip()
            return True
        return False


def _heuristic_role(element: TextElement, draft: Optional[_EntryDraft]) -> str:
    text = _text(element)
    if _GPA.match(text):
        return "gpa"
    if is_date_text(text):
        return "dates"
    if element.is_bold and "\n" not in text:
        return "title"
    if "|" in text or DATE_RANGE.search(text):
        return "subtitle"
    if is_bulleted(text) or "\n" in text or len(text) > DESCRIPTION_MIN_LENGTH:
        return "description"
    if draft is not None and draft.title and not draft.subtitle:
        return "subtitle"
    return "description"


def _apply_subtitle(draft: _EntryDraft, text: str) -> None:
    if not draft.start and draft.set_dates(text):
        text = DATE_RANGE.sub("", text)
    parts = [part.strip() for part in text.split("|") if part.strip()]
    if not parts:
        return
    if draft.subtitle:
        draft.description.append(text.strip())
        return
    draft.subtitle = parts[0]
    if len(parts) > 1 and not draft.location:
        draft.location = parts[1]


def _description_lines(text: str) -> List[str]:
    return [strip_bullet(line) for line in text.split("\n") if strip_bullet(line)]


def _collect_entries(texts: Sequence[TextElement], roles: Dict[str, str]) -> List[_EntryDraft]:
    """
    Walk a section's elements and collect entry drafts.

    A title opens a new entry. An untagged bold line right after a title, in
    a smaller font, is the entry's subtitle. Tagged elements from a different
    semantic group also open a new entry.
    """
    drafts: List[_EntryDraft] = []
    draft: Optional[_EntryDraft] = None

    for element in texts:
        text = _text(element)
        role = roles.get(element.semantic_type or "") or _heuristic_role(element, draft)

        if (
            role == "title"
            and draft is not None
            and draft.last_role == "title"
            and not draft.subtitle
            and _is_untagged(element)
            and element.font_size < draft.title_font
        ):
            role = "subtitle"

        group_changed = (
            draft is not None
            and element.semantic_group
            and draft.group
            and element.semantic_group != draft.group
        )
        if role == "title" or draft is None or group_changed:
            draft = _EntryDraft(group=element.semantic_group)
            drafts.append(draft)
        if draft.group is None:
            draft.group = element.semantic_group

        if role == "title":
            draft.title = text
            draft.title_font = element.font_size
        elif role == "subtitle":
            _apply_subtitle(draft, text)
        elif role == "location":
            draft.location = text
        elif role == "dates":
            if not draft.set_dates(text):
                draft.description.append(text)
        elif role == "start":
            draft.start = text
        elif role == "end":
            draft.end = text
        elif role == "gpa":
            draft.gpa = _GPA.sub("", text).strip()
        else:
            draft.description.extend(_description_lines(text))
        draft.last_role = role

    return [d for d in drafts if not d.is_empty]


def parse_experience(texts: Sequence[TextElement]) -> List[ExperienceEntry]:
    return [
        ExperienceEntry(
            title=d.title,
            company=d.subtitle,
            location=d.location,
            start_date=d.start,
            end_date=d.end,
            current=d.current,
            description=d.description,
        )
        for d in _collect_entries(texts, EXPERIENCE_ROLES)
    ]


def parse_education(texts: Sequence[TextElement]) -> List[EducationEntry]:
    return [
        EducationEntry(
            degree=d.title,
            institution=d.subtitle,
            location=d.location,
            start_date=d.start,
            end_date=d.end,
            gpa=d.gpa,
            description=" ".join(d.description),
        )
        for d in _collect_entries(texts, EDUCATION_ROLES)
    ]


# =============================================================================
# LIST AND SIMPLE SECTIONS
# =============================================================================


def split_list_items(texts: Sequence[TextElement]) -> List[str]:
    """
    Split list texts on bullets, commas, pipes and newlines.

    Items of MAX_LIST_ITEM_LENGTH characters or more are dropped and duplicates
    removed, keeping first occurrence order.
    """
    items: List[str] = []
    seen = set()
    for element in texts:
        for raw in LIST_SPLIT.split(_text(element)):
            item = strip_bullet(raw)
            if not item or len(item) >= MAX_LIST_ITEM_LENGTH or item.lower() in seen:
                continue
            seen.add(item.lower())
            items.append(item)
    return items


def parse_languages(texts: Sequence[TextElement]) -> List[LanguageEntry]:
    entries = []
    for element in texts:
        for line in _text(element).split("\n"):
            line = strip_bullet(line)
            if not line:
                continue
            parsed = parse_language_entry(line)
            language, level = parsed if parsed else (line, "")
            entries.append(LanguageEntry(language=language, level=level))
    return entries


def parse_certifications(texts: Sequence[TextElement]) -> List[CertificationEntry]:
    entries: List[CertificationEntry] = []
    for element in texts:
        text = _text(element)
        tag = element.semantic_type
        is_name = tag == "certification_name" or (_is_untagged(element) and element.is_bold)
        if is_name or not entries:
            entries.append(CertificationEntry())
        entry = entries[-1]
        if is_name:
            entry.name = text
        elif tag == "certification_date":
            entry.date = text
        else:
            parts = [part.strip() for part in text.split("|") if part.strip()]
            if len(parts) == 1 and is_date_text(parts[0]):
                entry.date = parts[0]
            elif parts:
                entry.issuer = parts[0]
                if len(parts) > 1:
                    entry.date = parts[1]
    return [e for e in entries if e.name or e.issuer]


def parse_projects(texts: Sequence[TextElement]) -> List[ProjectEntry]:
    entries: List[ProjectEntry] = []
    for element in texts:
        text = _text(element)
        tag = element.semantic_type
        is_name = tag == "project_name" or (_is_untagged(element) and element.is_bold)
        if is_name or not entries:
            entries.append(ProjectEntry())
        entry = entries[-1]
        if is_name:
            entry.name = text
        elif tag in ("project_url", "project_github") or (
            " " not in text and (is_website(text) or is_github(text))
        ):
            entry.url = text
        elif tag == "project_technologies" or _TECHNOLOGIES.match(text):
            entry.technologies = [
                t.strip() for t in _TECHNOLOGIES.sub("", text).split(",") if t.strip()
            ]
        else:
            entry.description = " ".join(filter(None, (entry.description, text)))
    return [e for e in entries if e.name or e.description]


# =============================================================================
# PERSONAL INFO
# =============================================================================


def _find_name(texts: Sequence[TextElement]) -> Optional[TextElement]:
    tagged = [e for e in texts if e.semantic_type == "name"]
    if tagged:
        return tagged[0]
    candidates = [
        e
        for e in texts
        if e.top < NAME_MAX_TOP
        and "\n" not in _text(e)
        and not detect_section_header(e)
        and classify_contact(_text(e)) is None
        and get_semantic_category(e.semantic_type) in ("personal", "custom")
    ]
    if not candidates:
        return None
    return max(candidates, key=lambda e: (e.font_size, -e.top))


def _find_title(texts: Sequence[TextElement], name: Optional[TextElement]) -> Optional[TextElement]:
    tagged = [e for e in texts if e.semantic_type == "title"]
    if tagged:
        return tagged[0]
    if name is None:
        return None

    anchors = column_anchors(texts)
    name_column = assign_column(name.left, anchors)
    below = [
        e
        for e in texts
        if e is not name
        and _is_untagged(e)
        and e.top > name.top
        and assign_column(e.left, anchors) == name_column
        and TITLE_MIN_FONT_SIZE <= e.font_size < name.font_size
        and "\n" not in _text(e)
        and len(_text(e)) <= TITLE_MAX_LENGTH
        and not detect_section_header(e)
        and classify_contact(_text(e)) is None
    ]
    return min(below, key=lambda e: e.top) if below else None


def _set_contact(personal: PersonalInfo, tag: str, value: str) -> None:
    tag = CONTACT_TAG_ALIASES.get(tag, tag)
    if tag in CONTACT_FIELDS and value and not getattr(personal, tag):
        setattr(personal, tag, value)


def extract_personal_info(texts: Sequence[TextElement], groups: Sequence[SectionGroup]) -> PersonalInfo:
    """
    Name, title and contact fields.

    Tagged contact elements fill their field first; then every fragment of the
    header, contact and unknown groups is classified by the contact regexes.
    Unclassified short fragments inside a contact section become the location.
    """
    personal = PersonalInfo()
    name = _find_name(texts)
    title = _find_title(texts, name)
    if name is not None:
        personal.full_name = _text(name)
    if title is not None:
        personal.title = _text(title)

    for element in texts:
        tag = element.semantic_type or ""
        if tag in CONTACT_FIELDS or tag in CONTACT_TAG_ALIASES:
            _set_contact(personal, tag, _text(element))

    for group in groups:
        if group.kind not in (HEADER_GROUP, "contact", UNKNOWN_KIND):
            continue
        for element in group.texts:
            if element is name or element is title:
                continue
            if not (_is_untagged(element) or get_semantic_category(element.semantic_type) == "contact"):
                continue
            for fragment in CONTACT_SPLIT.split(_text(element)):
                fragment = fragment.strip()
                if not fragment:
                    continue
                field_name = classify_contact(fragment)
                if field_name:
                    _set_contact(personal, field_name, fragment)
                elif group.kind == "contact" and _is_untagged(element):
                    _set_contact(personal, "location", fragment)

    return personal


# =============================================================================
# RECORD
# =============================================================================


def _summary(record: ResumeRecord, texts: Sequence[TextElement]) -> None:
    text = " ".join(_text(e) for e in texts if _text(e))
    record.summary = " ".join(filter(None, (record.summary, text)))


SECTION_PARSERS: Dict[str, Callable[[ResumeRecord, Sequence[TextElement]], None]] = {
    "summary": _summary,
    "experience": lambda r, t: r.experience.extend(parse_experience(t)),
    "education": lambda r, t: r.education.extend(parse_education(t)),
    "skills": lambda r, t: r.skills.extend(s for s in split_list_items(t) if s not in r.skills),
    "languages": lambda r, t: r.languages.extend(parse_languages(t)),
    "certifications": lambda r, t: r.certifications.extend(parse_certifications(t)),
    "projects": lambda r, t: r.projects.extend(parse_projects(t)),
    "interests": lambda r, t: r.interests.extend(
        s for s in split_list_items(t) if s not in r.interests
    ),
}


def coerce_elements(elements: Sequence[Any]) -> List[VisualElement]:
    """Accept persisted dicts alongside element objects; malformed dicts are skipped."""
    coerced: List[VisualElement] = []
    for item in elements or []:
        if isinstance(item, dict):
            try:
                item = element_from_dict(item)
            except ElementFormatError as e:
                _log_warning(f"Skipping canvas object: {e}")
                continue
        coerced.append(item)
    return coerced


def coerce_with_sources(elements: Sequence[Any]) -> List[Tuple[VisualElement, Optional[Dict[str, Any]]]]:
    """
    Like ``coerce_elements``, but pairs each element with the persisted dict it
    was built from (None for element objects).

    In-place operations mutate the elements, then write the changed attributes
    back into the source dicts so callers holding persisted canvases see them.
    """
    pairs: List[Tuple[VisualElement, Optional[Dict[str, Any]]]] = []
    for item in elements or []:
        for element in coerce_elements([item]):
            pairs.append((element, item if isinstance(item, dict) else None))
    return pairs


def extract_record(elements: Sequence[Any]) -> ResumeRecord:
    """
    Rebuild a structured record from canvas elements.

    Args:
        elements: Visual elements (or their persisted dicts), tagged or not

    Returns:
        ResumeRecord; fields that can't be found stay empty

    Example:
        >>> record = extract_record(render(get_sample_record("en"), style))
        >>> record.personal_info.full_name
        'John Smith'
    """
    elements = coerce_elements(elements)
    texts = [e for e in elements if getattr(e, "kind", None) == "text" and _text(e)]
    groups = group_sections(texts)

    record = ResumeRecord(personal_info=extract_personal_info(texts, groups))
    for group in groups:
        parser = SECTION_PARSERS.get(group.kind)
        if parser is not None and group.texts:
            parser(record, group.texts)

    log_extraction_result(record)
    return record
