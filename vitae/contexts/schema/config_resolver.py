"""
Style Preset Resolution

Builds resume styles from named presets. Presets live in presets.yaml under four
composable categories (palettes, fonts, sizes, layouts); a style is one preset
from each, plus a layout archetype.

Examples:
    # Build a style from one preset per category
    >>> style = create_style("sidebar-left", "tealModern", "modern", "standard", "sidebar")

    # Override parts of an existing style (later presets win)
    >>> style = apply_style_presets(style, ["palettes_redBold", "sizes_compact"])
"""

import copy
import os
from pathlib import Path
from typing import Any, Dict, List

from dotenv import load_dotenv
from omegaconf import OmegaConf

from vitae.contexts.schema.defaults import get_default_style_dict
from vitae.contexts.schema.exceptions import UnknownPresetError
from vitae.contexts.schema.style import DYNAMIC_LAYOUT_TYPE, LAYOUT_TYPES, ResumeStyle

load_dotenv()
STYLE_PRESETS_PATH = Path(
    os.getenv("VITAE_PRESETS_PATH", str(Path(__file__).parent / "presets.yaml"))
)

# Preset category -> key of the persisted style it fills
PRESET_TARGETS = {
    "palettes": "colors",
    "fonts": "fonts",
    "sizes": "fontSizes",
    "layouts": "layout",
}


def load_preset_catalog(config_path: Path = None) -> Dict[str, Dict[str, Any]]:
    """
    Load presets.yaml as a nested dict: category -> preset name -> values.

    Args:
        config_path: Optional path to presets file (defaults to VITAE_PRESETS_PATH)

    Returns:
        Nested preset catalog
    """
    if config_path is None:
        config_path = STYLE_PRESETS_PATH
    return OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)


def load_style_presets(config_path: Path = None) -> Dict[str, Any]:
    """
    Load presets.yaml and flatten to single-level dict.

    Collapses nested structure: palettes.tealModern -> palettes_tealModern

    Args:
        config_path: Optional path to presets file (defaults to VITAE_PRESETS_PATH)

    Returns:
        Flattened dict mapping preset names to configs
        Example: {"palettes_tealModern": {...}, "sizes_compact": {...}}
    """
    nested = load_preset_catalog(config_path)

    flattened = {}
    for category, presets in nested.items():
        for name, config in presets.items():
            flattened[f"{category}_{name}"] = config

    return flattened


def _preset_category(preset_name: str) -> str:
    for category in PRESET_TARGETS:
        if preset_name.startswith(f"{category}_"):
            return category
    raise UnknownPresetError(
        f"Preset '{preset_name}' has no known category prefix",
        category="category",
        preset_name=preset_name,
        available=PRESET_TARGETS.keys(),
    )


def apply_style_presets(
    style: ResumeStyle,
    preset_names: List[str],
    config_path: Path = None,
) -> ResumeStyle:
    """
    Apply named presets to a style.

    Presets are applied in order, with later presets overriding earlier ones.
    Palettes replace the whole color scheme; the other categories merge
    key-by-key into the existing values.

    Args:
        style: Style to start from (not modified)
        preset_names: Flattened preset names (e.g., ["palettes_redBold", "sizes_compact"])
        config_path: Optional path to presets file

    Returns:
        New ResumeStyle with presets applied

    Raises:
        UnknownPresetError: If a preset is not in the catalog
    """
    presets = load_style_presets(config_path)
    data = copy.deepcopy(style.to_dict())

    for name in preset_names:
        if name not in presets:
            raise UnknownPresetError(
                f"Preset '{name}' not found",
                category=_preset_category(name),
                preset_name=name,
                available=presets.keys(),
            )
        target = PRESET_TARGETS[_preset_category(name)]
        if target == "colors":
            data[target] = copy.deepcopy(presets[name])
        else:
            data[target] = {**data.get(target, {}), **copy.deepcopy(presets[name])}

    return ResumeStyle.from_dict(data)


def create_style(
    layout_type: str,
    palette: str,
    font_combo: str = "professional",
    size_preset: str = "standard",
    layout_preset: str = "standard",
    locale: str = "en",
    config_path: Path = None,
) -> ResumeStyle:
    """
    Build a complete style from one preset per category.

    Args:
        layout_type: Layout archetype (e.g., "sidebar-left") or "dynamic"
        palette: Palette name (e.g., "tealModern")
        font_combo: Font combination name
        size_preset: Font size preset name
        layout_preset: Spacing preset name
        locale: Language of rendered section headers
        config_path: Optional path to presets file

    Returns:
        ResumeStyle instance

    Raises:
        UnknownPresetError: If the layout type or any preset name is unknown

    Example:
        >>> style = create_style("minimal", "warmCreative", "creative", "spacious", "spacious")
        >>> style.font_sizes.name
        32
    """
    if layout_type not in LAYOUT_TYPES and layout_type != DYNAMIC_LAYOUT_TYPE:
        raise UnknownPresetError(
            f"Unknown layout type '{layout_type}'",
            category="layout_type",
            preset_name=layout_type,
            available=(*LAYOUT_TYPES, DYNAMIC_LAYOUT_TYPE),
        )

    catalog = load_preset_catalog(config_path)
    selections = (
        ("palettes", palette),
        ("fonts", font_combo),
        ("sizes", size_preset),
        ("layouts", layout_preset),
    )

    data = get_default_style_dict()
    data["layoutType"] = layout_type
    data["locale"] = locale
    for category, name in selections:
        available = catalog.get(category, {})
        if name not in available:
            raise UnknownPresetError(
                f"Preset '{name}' not found in {category}",
                category=category,
                preset_name=name,
                available=available.keys(),
            )
        data[PRESET_TARGETS[category]] = copy.deepcopy(available[name])

    return ResumeStyle.from_dict(data)
