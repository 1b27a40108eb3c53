"""
Semantic tag inference for untagged canvas text.

Tags are inferred by an ordered list of InferenceRule records; the first rule
whose predicate holds decides the tag. Rule order:

1. Regex rules: contact fields, section header keywords, date ranges,
   "Language - Level" entries
2. Style rules: large bold name, mid-size title, bold uppercase header
3. Content shape rules: bulleted or long text
4. Fallback: custom_text

``add_inferred_tags`` applies the rules over a whole canvas in two passes and
refines custom_text by the section the element sits in. Elements that already
carry a tag are never retagged, so running inference again changes nothing.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from vitae.contexts.schema.elements import TextElement, VisualElement
from vitae.contexts.semantics.extraction import coerce_elements, coerce_with_sources
from vitae.contexts.semantics.grouping import (
    detect_section_header,
    reading_order,
    section_kind_for_tag,
)
from vitae.contexts.semantics.logger import log_inference_result
from vitae.contexts.semantics.patterns import (
    SECTION_HEADER_KINDS,
    classify_contact,
    has_year,
    is_bulleted,
    is_date_text,
    is_email,
    is_github,
    is_language_entry,
    is_linkedin,
    is_phone,
    is_website,
    match_section_header,
)
from vitae.contexts.vocabulary.semantic_types import SECTION_HEADER_TYPES

# Style heuristic thresholds
NAME_MIN_FONT_SIZE = 24
TITLE_MIN_FONT_SIZE = 14
IDENTITY_MAX_TOP = 150
HEADER_MAX_LENGTH = 30

# Content shape thresholds
LONG_TEXT_LENGTH = 100
SUMMARY_MAX_TOP = 300

# Pass 1 name candidates
NAME_CANDIDATE_MAX_TOP = 200
NAME_CANDIDATE_MIN_FONT_SIZE = 16

# Context refinement thresholds
ENTRY_TITLE_MIN_FONT_SIZE = 11
DESCRIPTION_MIN_LENGTH = 50

FALLBACK_TAG = "custom_text"


@dataclass(frozen=True)
class InferenceRule:
    """
    One inference rule.

    Attributes:
        name: Rule name (used in logs and tests)
        predicate: Test on a non-empty text element
        tag: Tag assigned when the predicate holds
    """

    name: str
    predicate: Callable[[TextElement], bool]
    tag: str

    def apply(self, element: TextElement) -> Optional[str]:
        return self.tag if self.predicate(element) else None


def _text(element: TextElement) -> str:
    return (element.text or "").strip()


def _header_predicate(kind: str) -> Callable[[TextElement], bool]:
    def predicate(element: TextElement) -> bool:
        return match_section_header(_text(element)) == kind

    predicate.__name__ = f"is_{kind}_header"
    return predicate


def _is_name_style(element: TextElement) -> bool:
    return element.font_size >= NAME_MIN_FONT_SIZE and element.is_bold and element.top < IDENTITY_MAX_TOP


def _is_title_style(element: TextElement) -> bool:
    return TITLE_MIN_FONT_SIZE <= element.font_size < NAME_MIN_FONT_SIZE and element.top < IDENTITY_MAX_TOP


def _is_header_style(element: TextElement) -> bool:
    text = _text(element)
    return element.is_bold and text.isupper() and len(text) < HEADER_MAX_LENGTH


def _is_long_near_top(element: TextElement) -> bool:
    return len(_text(element)) > LONG_TEXT_LENGTH and element.top < SUMMARY_MAX_TOP


def _is_long(element: TextElement) -> bool:
    return len(_text(element)) > LONG_TEXT_LENGTH


INFERENCE_RULES: Tuple[InferenceRule, ...] = (
    # Regex rules
    InferenceRule("email", lambda e: is_email(_text(e)), "email"),
    InferenceRule("phone", lambda e: is_phone(_text(e)), "phone"),
    InferenceRule("linkedin", lambda e: is_linkedin(_text(e)), "linkedin"),
    InferenceRule("github", lambda e: is_github(_text(e)), "github"),
    InferenceRule("website", lambda e: is_website(_text(e)), "website"),
    *(
        InferenceRule(f"{kind}_header", _header_predicate(kind), SECTION_HEADER_TYPES[kind])
        for kind, _ in SECTION_HEADER_KINDS
    ),
    InferenceRule("date_range", lambda e: is_date_text(_text(e)), "experience_dates"),
    InferenceRule("language_entry", lambda e: is_language_entry(_text(e)), "language_entry"),
    # Style rules
    InferenceRule("name_style", _is_name_style, "name"),
    InferenceRule("title_style", _is_title_style, "title"),
    InferenceRule("header_style", _is_header_style, "section_header"),
    # Content shape rules
    InferenceRule("bulleted", lambda e: is_bulleted(_text(e)), "experience_description"),
    InferenceRule("long_near_top", _is_long_near_top, "summary"),
    InferenceRule("long", _is_long, "experience_description"),
)


def infer_tag(element: VisualElement) -> Optional[str]:
    """
    Infer the tag of one element from its own text and style.

    Args:
        element: Any visual element

    Returns:
        Tag from the first matching rule, "custom_text" when none matches, or
        None for shapes and empty text

    Examples:
        >>> infer_tag(TextElement(text="JOHN SMITH", font_size=28, font_weight="bold", top=20))
        'name'
        >>> infer_tag(TextElement(text="john@example.com"))
        'email'
    """
    if getattr(element, "kind", None) != "text" or not _text(element):
        return None
    for rule in INFERENCE_RULES:
        tag = rule.apply(element)
        if tag:
            return tag
    return FALLBACK_TAG


# =============================================================================
# SECTION CONTEXT REFINEMENT
# =============================================================================


def _is_entry_title(element: TextElement) -> bool:
    return element.is_bold and element.font_size >= ENTRY_TITLE_MIN_FONT_SIZE


def _experience_context(element: TextElement) -> Optional[str]:
    text = _text(element)
    if _is_entry_title(element):
        return "experience_title"
    if "•" in text or len(text) > DESCRIPTION_MIN_LENGTH:
        return "experience_description"
    if "|" in text or has_year(text):
        return "experience_company"
    return None


def _education_context(element: TextElement) -> Optional[str]:
    if _is_entry_title(element):
        return "education_degree"
    if has_year(_text(element)):
        return "education_dates"
    return "education_institution"


def _contact_context(element: TextElement) -> Optional[str]:
    return classify_contact(_text(element)) or "location"


CONTEXT_RULES: Dict[str, Callable[[TextElement], Optional[str]]] = {
    "experience": _experience_context,
    "education": _education_context,
    "skills": lambda e: "skill_list",
    "languages": lambda e: "language_entry",
    "interests": lambda e: "interests_list",
    "projects": lambda e: "project_name" if e.is_bold else "project_description",
    "certifications": lambda e: "certification_name" if e.is_bold else "certification_issuer",
    "summary": lambda e: "summary",
    "contact": _contact_context,
}

# Tags whose meaning depends on the section they appear in
RETARGETED_TAGS: Dict[Tuple[str, str], str] = {
    ("experience_dates", "education"): "education_dates",
    ("experience_dates", "projects"): "project_dates",
    ("experience_description", "education"): "education_description",
    ("experience_description", "projects"): "project_description",
    ("experience_description", "summary"): "summary",
    ("experience_description", "skills"): "skill_list",
    ("experience_description", "interests"): "interests_list",
}


def refine_with_context(tag: str, element: TextElement, section: Optional[str]) -> str:
    """
    Refine a rule result using the section the element sits in.

    Args:
        tag: Tag from ``infer_tag``
        element: The element
        section: Kind of the last section header seen in reading order

    Returns:
        Refined tag (unchanged when the context has nothing better)
    """
    if not section:
        return tag
    if tag == FALLBACK_TAG:
        rule = CONTEXT_RULES.get(section)
        return (rule(element) if rule else None) or tag
    return RETARGETED_TAGS.get((tag, section), tag)


# =============================================================================
# CANVAS-LEVEL INFERENCE
# =============================================================================


def _is_name_candidate(element: TextElement) -> bool:
    text = _text(element)
    return (
        element.semantic_type is None
        and element.is_bold
        and element.top < NAME_CANDIDATE_MAX_TOP
        and element.font_size >= NAME_CANDIDATE_MIN_FONT_SIZE
        and "\n" not in text
        and match_section_header(text) is None
        and classify_contact(text) is None
    )


def _tag_name(texts: Sequence[TextElement]) -> Optional[TextElement]:
    if any(e.semantic_type == "name" for e in texts):
        return None
    candidates = [e for e in texts if _is_name_candidate(e)]
    if not candidates:
        return None
    best = max(candidates, key=lambda e: (e.font_size, -e.top))
    best.semantic_type = "name"
    return best


def add_inferred_tags(elements: Sequence[Any]) -> bool:
    """
    Tag every untagged text element of a canvas in place.

    Pass 1 tags the best name candidate (largest bold font above y 200).
    Pass 2 walks the rest in column-aware reading order, carrying the last
    section header seen, and refines rule results by that section.

    Args:
        elements: Canvas elements, mutated in place; persisted dicts gain a
            ``semanticType`` key for each inferred tag

    Returns:
        True when any element gained a tag

    Example:
        >>> header = TextElement(text="EXPERIENCE", font_weight="bold", char_spacing=30, top=100)
        >>> job = TextElement(text="Senior Dev", font_weight="bold", font_size=12, top=130)
        >>> add_inferred_tags([header, job])
        True
        >>> job.semantic_type
        'experience_title'
    """
    pairs = coerce_with_sources(elements)
    texts = [e for e, _ in pairs if getattr(e, "kind", None) == "text" and _text(e)]
    tagged: Counter = Counter()

    named = _tag_name(texts)
    if named is not None:
        tagged["name"] += 1

    section: Optional[str] = None
    for element in reading_order(texts):
        if element.semantic_type:
            section = _section_after(element.semantic_type, element, section)
            continue

        tag = infer_tag(element)
        if tag is None:
            continue
        kind = section_kind_for_tag(tag)
        if kind:
            section = kind
        elif tag == "section_header":
            section = None
        else:
            tag = refine_with_context(tag, element, section)

        element.semantic_type = tag
        tagged[tag] += 1

    for element, source in pairs:
        if source is not None and element.semantic_type and not source.get("semanticType"):
            source["semanticType"] = element.semantic_type

    log_inference_result(tagged, len(texts))
    return bool(tagged)


def _section_after(tag: str, element: TextElement, current: Optional[str]) -> Optional[str]:
    """Section context after passing an element that was already tagged."""
    kind = section_kind_for_tag(tag)
    if kind:
        return kind
    if tag == "section_header":
        detected = detect_section_header(element)
        return None if detected in (None, "unknown") else detected
    return current


def can_infer_semantics(elements: Sequence[Any]) -> bool:
    """
    Quick check whether inference has anything to work with.

    True when any element is already tagged, any text matches a contact, header
    or date pattern, or any text is set in a font of 20 or more.
    """
    for element in coerce_elements(elements):
        if getattr(element, "semantic_type", None):
            return True
        if getattr(element, "kind", None) != "text":
            continue
        text = _text(element)
        if not text:
            continue
        if classify_contact(text) or match_section_header(text) or is_date_text(text):
            return True
        if element.font_size >= 20:
            return True
    return False


def rule_names() -> List[str]:
    """Names of the inference rules in evaluation order."""
    return [rule.name for rule in INFERENCE_RULES]
