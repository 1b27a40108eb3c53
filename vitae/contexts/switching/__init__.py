"""
Switching Context

Responsibilities:
- Describes each layout archetype as template zones with resolved element styles
- Re-flows tagged canvas content into another archetype or catalog template
- Restyles existing elements in place by formatting role
- Reorders section groups vertically

Owns: Template zones, template switching, style deltas, section reordering
Never: Changes element text or infers tags
"""

from vitae.contexts.switching.formatting import (
    FormattingChanges,
    StyleDelta,
    apply_style_delta,
    formatting_role,
    preview_style_delta,
    reorder_sections,
)
from vitae.contexts.switching.switcher import switch_template, switch_to_template
from vitae.contexts.switching.zones import (
    DEFAULT_SECTION_ORDER,
    MAIN_SECTIONS,
    SIDEBAR_SECTIONS,
    TemplateZones,
    generate_zones,
    get_default_element_style,
    resolve_element_style,
)

__all__ = [
    # Zones
    "DEFAULT_SECTION_ORDER",
    "MAIN_SECTIONS",
    "SIDEBAR_SECTIONS",
    "TemplateZones",
    "generate_zones",
    "get_default_element_style",
    "resolve_element_style",
    # Switching
    "switch_template",
    "switch_to_template",
    # Formatting
    "FormattingChanges",
    "StyleDelta",
    "apply_style_delta",
    "formatting_role",
    "preview_style_delta",
    "reorder_sections",
]
