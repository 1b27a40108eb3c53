#!/usr/bin/env python3
"""
Browse style presets and the template catalog.

Presets come in four composable categories (palettes, fonts, sizes, layouts);
a style picks one preset per category. Templates pin a layout type plus one
preset per category.

Examples:
    # List all available presets
    python scripts/style_presets.py options

    # List presets in one category
    python scripts/style_presets.py options palettes

    # Print one preset
    python scripts/style_presets.py print palettes_tealModern

    # List catalog templates for a region
    python scripts/style_presets.py templates --region UA
"""

from typing import Optional

import typer
from dotenv import load_dotenv
from omegaconf import OmegaConf
from typing_extensions import Annotated

from vitae.contexts.schema import (
    TemplateNotFoundError,
    TemplateRegistry,
    UnknownPresetError,
    load_preset_catalog,
    load_style_presets,
)

load_dotenv()

app = typer.Typer(
    help="Browse style presets and resume templates",
    add_completion=False,
)


@app.command("options")
def options_command(
    category: Annotated[
        Optional[str],
        typer.Argument(help="Category to filter (e.g., 'palettes', 'sizes')"),
    ] = None,
):
    """
    List available preset options.

    Examples:\n
        $ style_presets.py options            # All categories and presets

        $ style_presets.py options palettes   # Only palettes
    """
    nested = load_preset_catalog()

    if category:
        if category not in nested:
            typer.secho(
                f"Unknown category '{category}'. Available: {', '.join(nested.keys())}",
                fg=typer.colors.RED,
                err=True,
            )
            raise typer.Exit(code=1)
        for name in nested[category]:
            typer.echo(f"{category}_{name}")
    else:
        for cat, presets in nested.items():
            typer.secho(cat, bold=True)
            for name in presets:
                typer.echo(f"  {name}")


@app.command("print")
def print_command(
    preset_name: Annotated[
        str,
        typer.Argument(help="Preset name (e.g., 'palettes_tealModern', 'sizes_compact')"),
    ],
):
    """
    Print the values of one preset.

    Examples:\n
        $ style_presets.py print palettes_darkTech

        $ style_presets.py print layouts_sidebar
    """
    presets = load_style_presets()

    if preset_name not in presets:
        typer.secho(f"Unknown preset '{preset_name}'", fg=typer.colors.RED, err=True)
        typer.echo(f"\nAvailable presets: {', '.join(sorted(presets.keys()))}")
        raise typer.Exit(code=1)

    typer.secho(preset_name, bold=True)
    typer.echo(OmegaConf.to_yaml(OmegaConf.create(presets[preset_name])).rstrip())


@app.command("templates")
def templates_command(
    template_id: Annotated[
        Optional[str],
        typer.Argument(help="Template id to show in full (e.g., 'eu-classic')"),
    ] = None,
    region: Annotated[
        Optional[str],
        typer.Option("--region", "-r", help="Only templates offered in a region (US, EU, UA)"),
    ] = None,
    free: Annotated[bool, typer.Option("--free", help="Only free templates")] = False,
):
    """
    List catalog templates, or show one template's resolved style.

    Examples:\n
        $ style_presets.py templates --region EU

        $ style_presets.py templates teal-modern
    """
    registry = TemplateRegistry()

    if template_id:
        try:
            template = registry.get_template(template_id)
        except (TemplateNotFoundError, UnknownPresetError) as e:
            typer.secho(f"✗ {e}", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1)
        typer.secho(f"{template.id}: {template.name}", bold=True)
        typer.echo(f"  {template.description}")
        typer.echo(OmegaConf.to_yaml(OmegaConf.create(template.style.to_dict())).rstrip())
        return

    templates = registry.by_region(region) if region else registry.all_templates()
    if free:
        templates = [t for t in templates if not t.is_premium]

    for template in templates:
        badge = typer.style(" premium", fg=typer.colors.YELLOW) if template.is_premium else ""
        typer.echo(f"{template.id:<22} {template.style.layout_type:<18} {template.region:<5} {template.name}{badge}")
    typer.echo(f"\n{len(templates)} template(s)")


if __name__ == "__main__":
    app()
