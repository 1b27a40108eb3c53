"""
Layout Context

Responsibilities:
- Forward layout: turns a resume record + style into positioned, tagged visual elements
- Implements the six layout archetypes, the dynamic layout interpreter and zone rendering
- Keeps per-column monotonic cursors so elements in a column never overlap

Owns: Section emission, archetype geometry, dynamic layout interpretation
Never: Reads element geometry back or guesses tags (see semantics context)
"""

from vitae.contexts.layout.archetypes import ARCHETYPE_RENDERERS
from vitae.contexts.layout.dynamic import render_dynamic
from vitae.contexts.layout.renderer import render, render_document
from vitae.contexts.layout.section_emitter import (
    Column,
    HeaderDecoration,
    SectionEmitter,
    finalize_sidebar_height,
    format_date_range,
)
from vitae.contexts.layout.zone_renderer import render_zones

__all__ = [
    # Entry points
    "render",
    "render_document",
    "render_dynamic",
    "render_zones",
    "ARCHETYPE_RENDERERS",
    # Shared emission
    "Column",
    "HeaderDecoration",
    "SectionEmitter",
    "finalize_sidebar_height",
    "format_date_range",
]
