"""
Template catalog.

Loads named templates from templates.yaml and resolves each into a ResumeStyle
plus sample content. Resolved definitions are cached per registry instance.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

from vitae.contexts.schema.config_resolver import create_style
from vitae.contexts.schema.exceptions import TemplateNotFoundError
from vitae.contexts.schema.logger import _log_debug, _log_info
from vitae.contexts.schema.record import ResumeRecord
from vitae.contexts.schema.sample_data import get_sample_record
from vitae.contexts.schema.style import ResumeStyle

load_dotenv()
TEMPLATES_PATH = Path(
    os.getenv("VITAE_TEMPLATES_PATH", str(Path(__file__).parent / "templates.yaml"))
)


@dataclass(frozen=True)
class TemplateDefinition:
    """A named template: style plus the locale of its sample content."""

    id: str
    name: str
    name_uk: str
    description: str
    region: str
    category: str
    is_premium: bool
    style: ResumeStyle
    sample_locale: str = "en"

    def sample_record(self) -> ResumeRecord:
        return get_sample_record(self.sample_locale)


class TemplateRegistry:
    """
    Registry for loading and caching template definitions.

    The catalog file is read once on first use; each template's style is
    resolved against the preset catalog on first lookup and then cached.
    """

    def __init__(self, catalog_path: Path = None, presets_path: Path = None):
        """
        Initialize the template registry.

        Args:
            catalog_path: Path to templates.yaml. Defaults to VITAE_TEMPLATES_PATH
            presets_path: Path to presets.yaml used to resolve template styles
        """
        if catalog_path is None:
            catalog_path = TEMPLATES_PATH

        self.catalog_path = catalog_path
        self.presets_path = presets_path
        self._catalog: Optional[Dict[str, dict]] = None
        self._cache: Dict[str, TemplateDefinition] = {}

    @property
    def catalog(self) -> Dict[str, dict]:
        if self._catalog is None:
            self._catalog = OmegaConf.to_container(OmegaConf.load(self.catalog_path), resolve=True)
            _log_info(f"Loaded {len(self._catalog)} templates from {self.catalog_path}")
        return self._catalog

    def template_ids(self) -> List[str]:
        return list(self.catalog.keys())

    def get_template(self, template_id: str) -> TemplateDefinition:
        """
        Get a template by id, resolving and caching it if necessary.

        Args:
            template_id: Template id (e.g., 'teal-modern')

        Returns:
            TemplateDefinition

        Raises:
            TemplateNotFoundError: If the id is not in the catalog
            UnknownPresetError: If the template references a missing preset
        """
        if template_id in self._cache:
            return self._cache[template_id]

        if template_id not in self.catalog:
            raise TemplateNotFoundError(template_id, self.catalog.keys())

        entry = self.catalog[template_id]
        sample_locale = entry.get("sampleLocale", "en")
        style_spec = entry["style"]
        style = create_style(
            style_spec["layoutType"],
            style_spec["palette"],
            style_spec.get("fonts", "professional"),
            style_spec.get("sizes", "standard"),
            style_spec.get("layout", "standard"),
            locale=sample_locale,
            config_path=self.presets_path,
        )

        definition = TemplateDefinition(
            id=template_id,
            name=entry["name"],
            name_uk=entry.get("nameUk", entry["name"]),
            description=entry.get("description", ""),
            region=entry.get("region", "INTL"),
            category=entry.get("category", "professional"),
            is_premium=bool(entry.get("isPremium", False)),
            style=style,
            sample_locale=sample_locale,
        )

        _log_debug(f"Resolved template {template_id}: {style.layout_type}")
        self._cache[template_id] = definition
        return definition

    def all_templates(self) -> List[TemplateDefinition]:
        return [self.get_template(template_id) for template_id in self.template_ids()]

    def by_region(self, region: str) -> List[TemplateDefinition]:
        """Templates for a region; INTL templates are included everywhere."""
        return [t for t in self.all_templates() if t.region in (region, "INTL")]

    def by_category(self, category: str) -> List[TemplateDefinition]:
        return [t for t in self.all_templates() if t.category == category]

    def free_templates(self) -> List[TemplateDefinition]:
        return [t for t in self.all_templates() if not t.is_premium]

    def premium_templates(self) -> List[TemplateDefinition]:
        return [t for t in self.all_templates() if t.is_premium]

    def clear_cache(self):
        """Clear the resolved template cache."""
        self._cache.clear()

    def is_cached(self, template_id: str) -> bool:
        return template_id in self._cache


def merge_with_sample(record: ResumeRecord, template: TemplateDefinition) -> ResumeRecord:
    """
    Fill empty parts of a record with the template's sample content.

    Non-empty user fields and sections are kept as they are; only empty
    personal fields and empty sections are taken from the sample.

    Args:
        record: User record (not modified)
        template: Template whose sample content fills the gaps

    Returns:
        New merged ResumeRecord
    """
    sample = template.sample_record()
    merged = ResumeRecord.from_dict(record.to_dict())

    user_info = merged.personal_info
    sample_info = sample.personal_info
    for field_name in ("full_name", "title", "email", "phone", "location", "linkedin", "website", "github"):
        if not getattr(user_info, field_name).strip():
            setattr(user_info, field_name, getattr(sample_info, field_name))

    if not merged.summary.strip():
        merged.summary = sample.summary
    for section in ("experience", "education", "skills", "languages", "certifications", "projects", "interests"):
        if not getattr(merged, section):
            setattr(merged, section, getattr(sample, section))

    return merged
