"""
Forward layout entry point.

``render`` turns a resume record and a style into positioned, tagged visual
elements. It is a pure function: the same record and style always produce the
same geometry (element ids aside).
"""

from typing import Any, Dict, List, Union

from vitae.contexts.layout.archetypes import ARCHETYPE_RENDERERS, render_single_column
from vitae.contexts.layout.dynamic import render_dynamic
from vitae.contexts.layout.logger import _log_warning, log_render_result
from vitae.contexts.schema.document import Document, paginate
from vitae.contexts.schema.elements import VisualElement
from vitae.contexts.schema.record import ResumeRecord
from vitae.contexts.schema.style import DYNAMIC_LAYOUT_TYPE, ResumeStyle


def render(
    record: Union[ResumeRecord, Dict[str, Any]],
    style: Union[ResumeStyle, Dict[str, Any]],
) -> List[VisualElement]:
    """
    Lay out a resume record.

    Args:
        record: ResumeRecord, or its persisted dict form
        style: ResumeStyle, or its persisted dict form

    Returns:
        Elements in canvas coordinates; content past the first page continues
        below y=842 (see ``render_document`` for paged output)

    Example:
        >>> style = create_style("sidebar-left", "tealModern", "modern", "standard", "sidebar")
        >>> elements = render(get_sample_record("en"), style)
    """
    if isinstance(record, dict):
        record = ResumeRecord.from_dict(record)
    if isinstance(style, dict):
        style = ResumeStyle.from_dict(style)

    if style.layout_type == DYNAMIC_LAYOUT_TYPE:
        elements = render_dynamic(record, style)
    else:
        renderer = ARCHETYPE_RENDERERS.get(style.layout_type)
        if renderer is None:
            _log_warning(f"Unknown layout type '{style.layout_type}', using single-column")
            renderer = render_single_column
        elements = renderer(record, style)

    log_render_result(style.layout_type, elements)
    return elements


def render_document(
    record: Union[ResumeRecord, Dict[str, Any]],
    style: Union[ResumeStyle, Dict[str, Any]],
) -> Document:
    """Render and split into A4 pages."""
    if isinstance(style, dict):
        style = ResumeStyle.from_dict(style)
    return paginate(render(record, style), background=style.colors.background)
