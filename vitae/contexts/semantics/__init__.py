"""
Semantics Context

Responsibilities:
- Infers semantic tags for untagged canvas text (ordered rule list, two passes)
- Detects section headers and folds elements into section groups per column
- Extracts a structured ResumeRecord back out of canvas elements
- Builds semantic maps, text outlines and fuzzy element lookups

Owns: Text patterns, header detection, section grouping, tag inference, reverse extraction
Never: Positions elements or changes element styling
"""

from vitae.contexts.semantics.extraction import (
    coerce_elements,
    coerce_with_sources,
    extract_personal_info,
    extract_record,
)
from vitae.contexts.semantics.grouping import (
    SectionGroup,
    assign_column,
    column_anchors,
    detect_section_header,
    fold_column,
    group_sections,
    reading_order,
    section_kind_for_tag,
)
from vitae.contexts.semantics.inference import (
    INFERENCE_RULES,
    InferenceRule,
    add_inferred_tags,
    can_infer_semantics,
    infer_tag,
    refine_with_context,
)
from vitae.contexts.semantics.patterns import (
    classify_contact,
    match_section_header,
    parse_date_range,
    parse_language_entry,
)
from vitae.contexts.semantics.semantic_map import (
    OutlineTemplateRegistry,
    SemanticMap,
    SemanticMapEntry,
    extract_semantic_map,
    find_element,
    format_semantic_map,
)

__all__ = [
    # Inference
    "INFERENCE_RULES",
    "InferenceRule",
    "add_inferred_tags",
    "can_infer_semantics",
    "infer_tag",
    "refine_with_context",
    # Patterns
    "classify_contact",
    "match_section_header",
    "parse_date_range",
    "parse_language_entry",
    # Grouping
    "SectionGroup",
    "assign_column",
    "column_anchors",
    "detect_section_header",
    "fold_column",
    "group_sections",
    "reading_order",
    "section_kind_for_tag",
    # Extraction
    "coerce_elements",
    "coerce_with_sources",
    "extract_personal_info",
    "extract_record",
    # Semantic map
    "OutlineTemplateRegistry",
    "SemanticMap",
    "SemanticMapEntry",
    "extract_semantic_map",
    "find_element",
    "format_semantic_map",
]
