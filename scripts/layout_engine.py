#!/usr/bin/env python3
"""
Command-line interface for the resume layout engine.

Works on JSON or YAML files: resume records (snake_case/camelCase record dicts)
and canvases (a document ``{pages: [...]}``, a single page ``{objects: [...]}``
or a bare list of canvas objects). Canvases are always written as paged
documents.

Commands:
    render    - Lay out a resume record (or the sample record) as a canvas
    extract   - Rebuild a resume record from a canvas
    switch    - Re-flow a canvas into another layout or catalog template
    infer     - Tag untagged canvas text
    restyle   - Apply palette/font/size presets to a canvas in place
    reorder   - Reorder the sections of a canvas
    outline   - Print the semantic outline of a canvas
    roundtrip - Render and re-extract the sample record for every layout
"""

import json
from pathlib import Path
from typing import Any, List, Optional

import typer
from dotenv import load_dotenv
from omegaconf import OmegaConf
from typing_extensions import Annotated

from vitae.contexts.layout import render, render_zones
from vitae.contexts.layout.logger import setup_layout_logger
from vitae.contexts.schema import (
    LAYOUT_TYPES,
    Document,
    ResumeRecord,
    ResumeStyle,
    TemplateNotFoundError,
    TemplateRegistry,
    UnknownPresetError,
    ZoneLayout,
    create_style,
    flatten,
    get_sample_record,
    paginate,
)
from vitae.contexts.semantics import (
    add_inferred_tags,
    coerce_elements,
    extract_record,
    extract_semantic_map,
    format_semantic_map,
)
from vitae.contexts.semantics.logger import setup_semantic_logger
from vitae.contexts.switching import (
    StyleDelta,
    apply_style_delta,
    preview_style_delta,
    reorder_sections,
    switch_template,
)
from vitae.contexts.switching.logger import setup_switch_logger
from vitae.utils.logger import session_log_dir

load_dotenv()

app = typer.Typer(
    add_completion=False,
    help="Render, extract, switch and restyle resume canvases",
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


# =============================================================================
# FILE HELPERS
# =============================================================================


def _is_yaml(path: Path) -> bool:
    return path.suffix.lower() in (".yaml", ".yml")


def read_data(path: Path) -> Any:
    """Load a JSON or YAML file into plain Python data."""
    if _is_yaml(path):
        return OmegaConf.to_container(OmegaConf.load(path), resolve=True)
    return json.loads(path.read_text(encoding="utf-8"))


def write_data(data: Any, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    if _is_yaml(path):
        path.write_text(OmegaConf.to_yaml(OmegaConf.create(data)), encoding="utf-8")
    else:
        path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")


def read_elements(path: Path) -> List:
    """Load a canvas file as one tall element list."""
    data = read_data(path)
    if isinstance(data, list):
        return coerce_elements(data)
    return flatten(Document.from_dict(data))


def write_elements(elements: List, path: Path, background: str = "#ffffff") -> None:
    write_data(paginate(elements, background=background).to_dict(), path)


def _default_output(source: Path, command: str) -> Path:
    return source.with_name(f"{source.stem}.{command}.json")


def _fail(message: str) -> None:
    typer.secho(message, fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


def build_style(
    template: Optional[str],
    layout: str,
    palette: str,
    fonts: str,
    sizes: str,
    spacing: str,
    locale: str,
) -> ResumeStyle:
    """Style from a catalog template, or from one preset per category."""
    try:
        if template:
            return TemplateRegistry().get_template(template).style
        return create_style(layout, palette, fonts, sizes, spacing, locale=locale)
    except (UnknownPresetError, TemplateNotFoundError) as e:
        _fail(f"✗ {e}")


# Shared style options
TemplateOption = Annotated[
    Optional[str], typer.Option("--template", "-t", help="Catalog template id (overrides the presets)")
]
LayoutOption = Annotated[str, typer.Option("--layout", "-l", help=f"Layout type: {', '.join(LAYOUT_TYPES)}, dynamic")]
PaletteOption = Annotated[str, typer.Option("--palette", "-p", help="Palette preset (e.g., tealModern)")]
FontsOption = Annotated[str, typer.Option("--fonts", help="Font combo preset")]
SizesOption = Annotated[str, typer.Option("--sizes", help="Font size preset")]
SpacingOption = Annotated[str, typer.Option("--spacing", help="Spacing preset")]
LocaleOption = Annotated[str, typer.Option("--locale", help="Section header language (en, uk, de)")]
OutputOption = Annotated[Optional[Path], typer.Option("--output", "-o", help="Output file (.json or .yaml)")]


# =============================================================================
# COMMANDS
# =============================================================================


@app.command("render")
def render_command(
    record_file: Annotated[
        Optional[Path],
        typer.Argument(help="Resume record file; the sample record is used when omitted", exists=True),
    ] = None,
    template: TemplateOption = None,
    layout: LayoutOption = "single-column",
    palette: PaletteOption = "navyProfessional",
    fonts: FontsOption = "professional",
    sizes: SizesOption = "standard",
    spacing: SpacingOption = "standard",
    locale: LocaleOption = "en",
    zones: Annotated[
        Optional[Path],
        typer.Option("--zones", "-z", help="Zone layout file; its zones replace the layout type", exists=True),
    ] = None,
    output: OutputOption = None,
):
    """
    Lay out a resume record as a paged canvas.

    Examples:\n
        $ layout_engine.py render -l sidebar-left -p tealModern -o outs/sample.json

        $ layout_engine.py render resume.yaml -t eu-classic -o outs/resume.json

        $ layout_engine.py render resume.yaml -z zones/sidebar.json -p darkTech
    """
    style = build_style(template, layout, palette, fonts, sizes, spacing, locale)
    setup_layout_logger(session_log_dir("render"), layout_type=style.layout_type)

    record = ResumeRecord.from_dict(read_data(record_file)) if record_file else get_sample_record(style.locale)
    if zones:
        zone_layout = ZoneLayout.from_dict(read_data(zones))
        elements = render_zones(record, zone_layout, style)
        output = output or Path(f"outs/render_zones_{zone_layout.layout_type}.json")
    else:
        elements = render(record, style)
        output = output or Path(f"outs/render_{style.layout_type}.json")

    write_elements(elements, output, style.colors.background)
    typer.secho(f"✓ Rendered {len(elements)} elements → {output}", fg=typer.colors.GREEN)


@app.command("extract")
def extract_command(
    canvas_file: Annotated[Path, typer.Argument(help="Canvas file", exists=True)],
    infer: Annotated[bool, typer.Option("--infer", help="Tag untagged text before extracting")] = False,
    output: OutputOption = None,
):
    """
    Rebuild a resume record from a canvas.

    Examples:\n
        $ layout_engine.py extract outs/sample.json -o outs/sample_record.yaml
    """
    setup_semantic_logger(session_log_dir("extract"))
    elements = read_elements(canvas_file)
    if infer:
        add_inferred_tags(elements)

    record = extract_record(elements)
    output = output or canvas_file.with_name(f"{canvas_file.stem}.record.yaml")
    write_data(record.to_dict(), output)

    typer.secho(f"✓ Extracted {record.personal_info.full_name or '(no name)'} → {output}", fg=typer.colors.GREEN)
    typer.echo(
        f"  experience={len(record.experience)} education={len(record.education)} "
        f"skills={len(record.skills)} languages={len(record.languages)}"
    )


@app.command("switch")
def switch_command(
    canvas_file: Annotated[Path, typer.Argument(help="Canvas file", exists=True)],
    template: TemplateOption = None,
    layout: LayoutOption = "single-column",
    palette: PaletteOption = "navyProfessional",
    fonts: FontsOption = "professional",
    sizes: SizesOption = "standard",
    spacing: SpacingOption = "standard",
    locale: LocaleOption = "en",
    infer: Annotated[bool, typer.Option("--infer", help="Tag untagged text before switching")] = False,
    output: OutputOption = None,
):
    """
    Re-flow a canvas into another layout or catalog template.

    Examples:\n
        $ layout_engine.py switch outs/sample.json -l sidebar-right -p darkTech

        $ layout_engine.py switch outs/sample.json -t teal-modern --infer
    """
    style = build_style(template, layout, palette, fonts, sizes, spacing, locale)
    setup_switch_logger(session_log_dir("switch"), target_layout=style.layout_type)

    elements = read_elements(canvas_file)
    if infer:
        add_inferred_tags(elements)
    switched = switch_template(elements, style)

    output = output or _default_output(canvas_file, "switch")
    write_elements(switched, output, style.colors.background)
    typer.secho(f"✓ Switched to {style.layout_type}: {len(switched)} elements → {output}", fg=typer.colors.GREEN)


@app.command("infer")
def infer_command(
    canvas_file: Annotated[Path, typer.Argument(help="Canvas file", exists=True)],
    output: OutputOption = None,
):
    """
    Tag untagged canvas text.

    Examples:\n
        $ layout_engine.py infer imported.json -o imported_tagged.json
    """
    setup_semantic_logger(session_log_dir("infer"))
    elements = read_elements(canvas_file)
    untagged = sum(1 for e in elements if e.kind == "text" and not e.semantic_type)

    changed = add_inferred_tags(elements)
    remaining = sum(1 for e in elements if e.kind == "text" and (e.text or "").strip() and not e.semantic_type)

    output = output or _default_output(canvas_file, "tagged")
    write_elements(elements, output)
    if changed:
        typer.secho(f"✓ Tagged {untagged - remaining} of {untagged} untagged texts → {output}", fg=typer.colors.GREEN)
    else:
        typer.secho(f"Nothing to tag → {output}", fg=typer.colors.YELLOW)


@app.command("restyle")
def restyle_command(
    canvas_file: Annotated[Path, typer.Argument(help="Canvas file", exists=True)],
    palette: PaletteOption = "navyProfessional",
    fonts: FontsOption = "professional",
    sizes: SizesOption = "standard",
    spacing: SpacingOption = "standard",
    no_colors: Annotated[bool, typer.Option("--no-colors", help="Keep current colors")] = False,
    no_fonts: Annotated[bool, typer.Option("--no-fonts", help="Keep current fonts and sizes")] = False,
    no_spacing: Annotated[bool, typer.Option("--no-spacing", help="Keep current line heights")] = False,
    preview: Annotated[bool, typer.Option("--preview", "-n", help="Count changes without writing")] = False,
    output: OutputOption = None,
):
    """
    Apply presets to a canvas without moving anything.

    Examples:\n
        $ layout_engine.py restyle outs/sample.json -p roseElegant --preview

        $ layout_engine.py restyle outs/sample.json -p darkTech --sizes compact --no-spacing
    """
    style = build_style(None, "single-column", palette, fonts, sizes, spacing, "en")
    setup_switch_logger(session_log_dir("restyle"))

    elements = read_elements(canvas_file)
    delta = StyleDelta.from_style(style)
    options = {"apply_colors": not no_colors, "apply_fonts": not no_fonts, "apply_spacing": not no_spacing}

    if preview:
        changes = preview_style_delta(elements, delta, **options)
        typer.echo(
            f"Would change {changes.elements} elements: {changes.colors} colors, {changes.fonts} fonts, "
            f"{changes.sizes} sizes, {changes.line_heights} line heights"
        )
        return

    changes = apply_style_delta(elements, delta, **options)
    output = output or _default_output(canvas_file, "restyle")
    write_elements(elements, output, style.colors.background)
    typer.secho(f"✓ Restyled {changes.elements} elements → {output}", fg=typer.colors.GREEN)


@app.command("reorder")
def reorder_command(
    canvas_file: Annotated[Path, typer.Argument(help="Canvas file", exists=True)],
    order: Annotated[List[str], typer.Argument(help="Section names in the new order (e.g., skills experience)")],
    section_spacing: Annotated[
        Optional[float], typer.Option("--spacing", help="Gap between sections (default: median existing gap)")
    ] = None,
    output: OutputOption = None,
):
    """
    Move whole sections to follow a new order.

    Examples:\n
        $ layout_engine.py reorder outs/sample.json skills experience education
    """
    setup_switch_logger(session_log_dir("reorder"))
    elements = read_elements(canvas_file)
    moved = reorder_sections(elements, order, section_spacing)

    output = output or _default_output(canvas_file, "reorder")
    write_elements(elements, output)
    typer.secho(f"✓ Moved {moved} section group(s) → {output}", fg=typer.colors.GREEN)


@app.command("outline")
def outline_command(
    canvas_file: Annotated[Path, typer.Argument(help="Canvas file", exists=True)],
    locale: LocaleOption = "en",
):
    """
    Print the semantic outline of a canvas.

    Examples:\n
        $ layout_engine.py outline outs/sample.json --locale uk
    """
    setup_semantic_logger(session_log_dir("outline"))
    semantic_map = extract_semantic_map(read_elements(canvas_file))
    typer.echo(format_semantic_map(semantic_map, locale=locale))


def _normalized(values) -> set:
    return {" ".join(v.split()).lower() for v in values if v.strip()}


@app.command("roundtrip")
def roundtrip_command(
    palette: PaletteOption = "navyProfessional",
    locale: LocaleOption = "en",
):
    """
    Render the sample record in every layout and check what extraction recovers.

    Checks the name, experience titles and companies, and the skill set.

    Examples:\n
        $ layout_engine.py roundtrip --locale de
    """
    setup_layout_logger(session_log_dir("roundtrip"))
    record = get_sample_record(locale)
    failures = 0

    for layout_type in LAYOUT_TYPES:
        style = build_style(None, layout_type, palette, "professional", "standard", "standard", locale)
        extracted = extract_record(render(record, style))

        problems = []
        if extracted.personal_info.full_name != record.personal_info.full_name:
            problems.append(f"name {extracted.personal_info.full_name!r}")
        if [e.title for e in extracted.experience] != [e.title for e in record.experience]:
            problems.append("experience titles")
        if any(e.company not in x.company for e, x in zip(record.experience, extracted.experience)):
            problems.append("experience companies")
        if _normalized(extracted.skills) != _normalized(record.skills):
            problems.append("skills")

        if problems:
            failures += 1
            typer.secho(f"✗ {layout_type}: {', '.join(problems)}", fg=typer.colors.RED)
        else:
            typer.secho(f"✓ {layout_type}", fg=typer.colors.GREEN)

    if failures:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
