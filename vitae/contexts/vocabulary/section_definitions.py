"""
Resume section definitions.

Each section lists the tags allowed inside it and its default position in a
freshly rendered resume.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from vitae.contexts.vocabulary.semantic_types import SEMANTIC_TYPES_BY_CATEGORY


@dataclass(frozen=True)
class SectionDefinition:
    """
    Static description of one resume section.

    Attributes:
        id: Section identifier (same as its category name)
        name_en: English display name
        name_uk: Ukrainian display name
        header_type: Tag used for the section's header element
        allowed_types: Tags that may appear in the section body
        is_repeatable: Whether the section holds repeated entries
        is_required: Whether every resume is expected to have it
        default_order: Position in the default section order
    """

    id: str
    name_en: str
    name_uk: str
    header_type: Optional[str]
    allowed_types: Tuple[str, ...]
    is_repeatable: bool
    is_required: bool
    default_order: int


def _section(
    section_id: str,
    name_en: str,
    name_uk: str,
    is_repeatable: bool,
    default_order: int,
    is_required: bool = False,
) -> SectionDefinition:
    header_type = f"{section_id}_section"
    tags = SEMANTIC_TYPES_BY_CATEGORY[section_id]
    if header_type not in tags:
        header_type = None
    return SectionDefinition(
        id=section_id,
        name_en=name_en,
        name_uk=name_uk,
        header_type=header_type,
        allowed_types=tuple(tag for tag in tags if tag != header_type),
        is_repeatable=is_repeatable,
        is_required=is_required,
        default_order=default_order,
    )


SECTION_DEFINITIONS: Tuple[SectionDefinition, ...] = (
    _section("personal", "Personal Information", "Особиста інформація", False, 0, True),
    _section("contact", "Contact", "Контакти", False, 1, True),
    _section("summary", "Summary", "Про мене", False, 2),
    _section("experience", "Experience", "Досвід роботи", True, 3),
    _section("education", "Education", "Освіта", True, 4),
    _section("skills", "Skills", "Навички", False, 5),
    _section("languages", "Languages", "Мови", False, 6),
    _section("certifications", "Certifications", "Сертифікати", True, 7),
    _section("projects", "Projects", "Проекти", True, 8),
    _section("awards", "Awards", "Нагороди", True, 9),
    _section("publications", "Publications", "Публікації", True, 10),
    _section("volunteer", "Volunteer Experience", "Волонтерство", True, 11),
    _section("interests", "Interests", "Інтереси", False, 12),
    _section("courses", "Courses", "Курси", True, 13),
    _section("memberships", "Memberships", "Членство", True, 14),
    _section("patents", "Patents", "Патенти", True, 15),
    _section("military", "Military Service", "Військова служба", False, 16),
    _section("references", "References", "Рекомендації", True, 17),
)


def get_section_definition(section_id: str) -> Optional[SectionDefinition]:
    """Look up a section definition by id."""
    for definition in SECTION_DEFINITIONS:
        if definition.id == section_id:
            return definition
    return None


def get_sections_sorted() -> List[SectionDefinition]:
    """Section definitions in default order."""
    return sorted(SECTION_DEFINITIONS, key=lambda d: d.default_order)
