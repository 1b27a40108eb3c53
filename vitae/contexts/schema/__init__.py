"""
Schema Context

Responsibilities:
- Defines the resume record, style and visual element data models
- Serializes records, styles, elements, pages and documents (camelCase persisted form)
- Resolves style presets and the named template catalog
- Estimates text metrics for layout

Owns: Data models, persisted shapes, preset/template catalogs, page geometry, text metrics
Never: Decides where elements go or what untagged elements mean
"""

from vitae.contexts.schema.config_resolver import (
    apply_style_presets,
    create_style,
    load_preset_catalog,
    load_style_presets,
)
from vitae.contexts.schema.document import Document, Page, flatten, paginate
from vitae.contexts.schema.dynamic_layout import (
    SECTION_POSITIONS,
    SECTION_TYPES,
    DynamicLayout,
    SectionPlacement,
    default_dynamic_layout,
)
from vitae.contexts.schema.elements import (
    CircleElement,
    RectElement,
    TextElement,
    VisualElement,
    clone_element,
    element_from_dict,
    text_element,
)
from vitae.contexts.schema.exceptions import (
    ElementFormatError,
    TemplateNotFoundError,
    UnknownPresetError,
)
from vitae.contexts.schema.record import (
    CertificationEntry,
    EducationEntry,
    ExperienceEntry,
    LanguageEntry,
    PersonalInfo,
    ProjectEntry,
    ResumeRecord,
)
from vitae.contexts.schema.sample_data import SAMPLE_DATA, get_sample_record
from vitae.contexts.schema.style import (
    A4_HEIGHT,
    A4_WIDTH,
    CONTENT_WIDTH,
    LAYOUT_TYPES,
    MARGIN,
    ColorScheme,
    FontConfig,
    FontSizes,
    LayoutConfig,
    ResumeStyle,
)
from vitae.contexts.schema.template_registry import (
    TemplateDefinition,
    TemplateRegistry,
    merge_with_sample,
)
from vitae.contexts.schema.text_metrics import (
    estimate_element_height,
    estimate_height,
    estimate_lines,
    estimate_text_width,
    single_line_height,
)
from vitae.contexts.schema.zone_layout import LayoutZone, ZoneLayout

__all__ = [
    # Records
    "ResumeRecord",
    "PersonalInfo",
    "ExperienceEntry",
    "EducationEntry",
    "LanguageEntry",
    "CertificationEntry",
    "ProjectEntry",
    "SAMPLE_DATA",
    "get_sample_record",
    # Styles and presets
    "A4_WIDTH",
    "A4_HEIGHT",
    "MARGIN",
    "CONTENT_WIDTH",
    "LAYOUT_TYPES",
    "ResumeStyle",
    "ColorScheme",
    "FontConfig",
    "FontSizes",
    "LayoutConfig",
    "DynamicLayout",
    "SectionPlacement",
    "SECTION_POSITIONS",
    "SECTION_TYPES",
    "default_dynamic_layout",
    "ZoneLayout",
    "LayoutZone",
    "create_style",
    "apply_style_presets",
    "load_style_presets",
    "load_preset_catalog",
    "TemplateRegistry",
    "TemplateDefinition",
    "merge_with_sample",
    # Elements and persisted shapes
    "TextElement",
    "RectElement",
    "CircleElement",
    "VisualElement",
    "text_element",
    "clone_element",
    "element_from_dict",
    "Page",
    "Document",
    "paginate",
    "flatten",
    # Text metrics
    "estimate_height",
    "estimate_lines",
    "estimate_text_width",
    "estimate_element_height",
    "single_line_height",
    # Exceptions
    "ElementFormatError",
    "UnknownPresetError",
    "TemplateNotFoundError",
]
