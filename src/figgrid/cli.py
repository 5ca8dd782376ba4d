"""CLI for figgrid."""

from __future__ import annotations

import logging
import warnings
from pathlib import Path

import click

from figgrid import __version__
from figgrid.layout.errors import StartOverrunWarning
from figgrid.layout.placement import FigurePlacement, place_figure
from figgrid.layout.units import convert_unit
from figgrid.logging_config import setup_logging
from figgrid.parser import parse_figure
from figgrid.parser.model import FigureSpec, Unit
from figgrid.parser.writer import format_figure_spec
from figgrid.render import render_svg
from figgrid.render.constants import DEFAULT_ZOOM
from figgrid.themes import THEMES


def _load(input_file: Path) -> FigureSpec:
    try:
        return parse_figure(input_file.read_text())
    except ValueError as e:
        raise click.ClickException(f"Parse error: {e}") from e


def _place(spec: FigureSpec, exact_gaps: bool = False) -> FigurePlacement:
    try:
        return place_figure(spec, exact_gaps=exact_gaps)
    except ValueError as e:
        raise click.ClickException(f"Layout error: {e}") from e


def _fmt_rect(rect) -> str:
    return (f"left={rect.left:.4f} bottom={rect.bottom:.4f} "
            f"width={rect.width:.4f} height={rect.height:.4f}")


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option("--log-file", type=click.Path(path_type=Path), default=None,
              help="Also write log messages to this file")
def cli(verbose: bool, log_file: Path | None) -> None:
    """figgrid: Lay out multi-panel figures on a weighted grid."""
    setup_logging(logging.DEBUG if verbose else logging.WARNING,
                  str(log_file) if log_file else None)


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output SVG file path. Defaults to <input>.svg")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="light",
              help="Preview theme (default: light)")
@click.option("--zoom", type=float, default=DEFAULT_ZOOM,
              help=f"Magnification over print size (default: {DEFAULT_ZOOM})")
@click.option("--no-grid", is_flag=True, help="Hide the cell grid overlay")
@click.option("--exact-gaps", is_flag=True,
              help="Sum per-gap paddings exactly instead of by their mean")
def render(
    input_file: Path,
    output: Path | None,
    theme: str,
    zoom: float,
    no_grid: bool,
    exact_gaps: bool,
) -> None:
    """Render a layout file to an SVG preview."""
    spec = _load(input_file)
    placement = _place(spec, exact_gaps=exact_gaps)

    svg = render_svg(spec, THEMES[theme], placement=placement,
                     zoom=zoom, show_grid=not no_grid)
    if not svg.endswith("\n"):
        svg += "\n"

    if output is None:
        output = input_file.with_suffix(".svg")

    output.write_text(svg)
    click.echo(f"Rendered {len(placement.plots)} plots, "
               f"{len(placement.colorbars)} colorbars, "
               f"{len(placement.labels)} labels -> {output}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("--exact-gaps", is_flag=True,
              help="Sum per-gap paddings exactly instead of by their mean")
def validate(input_file: Path, exact_gaps: bool) -> None:
    """Validate a layout file."""
    try:
        spec = parse_figure(input_file.read_text())
    except ValueError as e:
        click.echo(f"Parse error: {e}", err=True)
        raise SystemExit(1)

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", StartOverrunWarning)
        try:
            placement = place_figure(spec, exact_gaps=exact_gaps)
        except ValueError as e:
            click.echo("Validation errors:", err=True)
            click.echo(f"  - {e}", err=True)
            raise SystemExit(1)

    overruns = [w for w in caught if issubclass(w.category, StartOverrunWarning)]
    if overruns:
        click.echo("Warnings:", err=True)
        for w in overruns:
            click.echo(f"  - {w.message}", err=True)

    layout = placement.layout
    click.echo(f"Valid: {layout.num_columns}x{layout.num_rows} grid, "
               f"{len(placement.plots)} plots, "
               f"{len(placement.colorbars)} colorbars, "
               f"{len(placement.labels)} labels")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("--exact-gaps", is_flag=True,
              help="Sum per-gap paddings exactly instead of by their mean")
def info(input_file: Path, exact_gaps: bool) -> None:
    """Show the computed layout of a layout file."""
    spec = _load(input_file)
    placement = _place(spec, exact_gaps=exact_gaps)
    config = spec.config
    layout = placement.layout

    click.echo(f"Title: {spec.title or '(none)'}")
    click.echo(f"Canvas: {config.total_width:g} x {config.total_height:g} "
               f"{config.unit.value}")
    click.echo(f"Grid: {layout.num_columns} columns x {layout.num_rows} rows")
    click.echo(f"Unit cell: {layout.cell_width:.4f} x {layout.cell_height:.4f} "
               f"(normalized)")
    click.echo(f"Plots: {len(placement.plots)}")
    for plot_id, rect in placement.plots.items():
        click.echo(f"  {plot_id}: {_fmt_rect(rect)}")
    click.echo(f"Colorbars: {len(placement.colorbars)}")
    for plot_id, rect in placement.colorbars.items():
        click.echo(f"  {plot_id}: {_fmt_rect(rect)}")
    click.echo(f"Labels: {len(placement.labels)}")
    for label in placement.labels:
        local = label.local
        click.echo(f"  {label.plot_id} {local.corner.value} '{local.text}': "
                   f"x={local.x:.3f} y={local.y:.3f} {config.unit.value} "
                   f"({local.horizontal_alignment})")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("--to", "to_unit", type=click.Choice([u.value for u in Unit]),
              required=True, help="Target unit")
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output file path. Defaults to <input>_<unit>.fgl")
def convert(input_file: Path, to_unit: str, output: Path | None) -> None:
    """Rewrite a layout file with every length in another unit."""
    spec = _load(input_file)
    spec.config = convert_unit(spec.config, spec.config.unit, to_unit)

    if output is None:
        output = input_file.with_name(f"{input_file.stem}_{to_unit}.fgl")

    output.write_text(format_figure_spec(spec))
    click.echo(f"Converted {input_file.name} to {to_unit} -> {output}")
