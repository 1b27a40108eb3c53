"""
Vocabulary Context

Responsibilities:
- Defines the semantic tag vocabulary and the tag -> category map
- Defines resume sections, their allowed tags and default order
- Provides localized labels for tags, categories and rendered section headers

Owns: Tag vocabulary, category map, section definitions, labels
Never: Positions elements or inspects element geometry
"""

from vitae.contexts.vocabulary.labels import (
    CATEGORY_LABELS,
    SECTION_HEADER_LABELS,
    SEMANTIC_TYPE_LABELS,
    get_category_label,
    get_present_label,
    get_section_header,
    get_semantic_type_label,
)
from vitae.contexts.vocabulary.section_definitions import (
    SECTION_DEFINITIONS,
    SectionDefinition,
    get_section_definition,
    get_sections_sorted,
)
from vitae.contexts.vocabulary.semantic_types import (
    ALL_SEMANTIC_TYPES,
    SECTION_HEADER_TYPES,
    SEMANTIC_CATEGORIES,
    SEMANTIC_CATEGORY_MAP,
    SEMANTIC_TYPES_BY_CATEGORY,
    get_semantic_category,
    get_types_for_category,
    has_semantic_type,
    is_section_header_type,
    is_semantic_type,
)

__all__ = [
    # Tag vocabulary
    "ALL_SEMANTIC_TYPES",
    "SEMANTIC_CATEGORIES",
    "SEMANTIC_CATEGORY_MAP",
    "SEMANTIC_TYPES_BY_CATEGORY",
    "SECTION_HEADER_TYPES",
    "get_semantic_category",
    "get_types_for_category",
    "has_semantic_type",
    "is_section_header_type",
    "is_semantic_type",
    # Sections
    "SECTION_DEFINITIONS",
    "SectionDefinition",
    "get_section_definition",
    "get_sections_sorted",
    # Labels
    "CATEGORY_LABELS",
    "SECTION_HEADER_LABELS",
    "SEMANTIC_TYPE_LABELS",
    "get_category_label",
    "get_present_label",
    "get_section_header",
    "get_semantic_type_label",
]
