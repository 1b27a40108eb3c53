"""
vitae - semantic resume layout engine

Converts a structured resume record into positioned, semantically tagged visual
elements on an A4 canvas, reconstructs records from edited element collections,
and re-flows edited content into a different layout template.

Architecture:
- Vocabulary Context: semantic tag vocabulary, categories and section definitions
- Schema Context: resume records, styles, presets, visual elements and text metrics
- Layout Context: forward rendering for the six layout archetypes and dynamic layouts
- Semantics Context: tag inference, section grouping and reverse extraction
- Switching Context: template zones, template switching and formatting
"""

__version__ = "0.1.0"

from vitae.contexts.layout import render
from vitae.contexts.schema import ResumeRecord, ResumeStyle, create_style
from vitae.contexts.semantics import add_inferred_tags as infer_tags
from vitae.contexts.semantics import extract_record
from vitae.contexts.switching import apply_style_delta, reorder_sections, switch_template

__all__ = [
    "__version__",
    "render",
    "extract_record",
    "switch_template",
    "infer_tags",
    "apply_style_delta",
    "reorder_sections",
    "create_style",
    "ResumeRecord",
    "ResumeStyle",
]
