"""CLI for chart-canvas."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable

import click

from chart_canvas import __version__
from chart_canvas.chart import CartesianChart
from chart_canvas.layout.constants import TITLE_ALIGNMENTS
from chart_canvas.options import ChartOptions, OptionsError, group_flat_options, load_options
from chart_canvas.render import SvgSurface
from chart_canvas.themes import THEMES

DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 400


def _chart_options(command: Callable[..., Any]) -> Callable[..., Any]:
    """Options shared by every command that builds a chart."""
    decorators = [
        click.argument("options_file", required=False,
                       type=click.Path(exists=True, dir_okay=False, path_type=Path)),
        click.option("--width", type=int, default=DEFAULT_WIDTH,
                     help=f"Canvas width in pixels (default: {DEFAULT_WIDTH})"),
        click.option("--height", type=int, default=DEFAULT_HEIGHT,
                     help=f"Canvas height in pixels (default: {DEFAULT_HEIGHT})"),
        click.option("--theme", type=click.Choice(list(THEMES.keys())), default="light",
                     help="Colour theme (default: light)"),
        click.option("--title", default=None, help="Title text; shows the title"),
        click.option("--align", type=click.Choice(TITLE_ALIGNMENTS), default=None,
                     help="Title alignment"),
        click.option("--padding", type=float, default=None, help="Outer padding in pixels"),
        click.option("--gap", type=float, default=None,
                     help="Gap above the plot region in pixels"),
        click.option("--x-label", default=None, help="Horizontal axis label"),
        click.option("--y-label", default=None, help="Vertical axis label"),
        click.option("--labels", "show_labels", is_flag=True, help="Draw axis labels"),
        click.option("--arrows", "show_arrows", is_flag=True, help="Draw axis arrowheads"),
        click.option("--borders", "show_borders", is_flag=True,
                     help="Outline the layout regions (debug)"),
        click.option("-v", "--verbose", is_flag=True, help="Log each layout and render step"),
    ]
    for decorator in reversed(decorators):
        command = decorator(command)
    return command


def _build_chart(
    surface: SvgSurface,
    options_file: Path | None,
    theme: str,
    title: str | None,
    align: str | None,
    padding: float | None,
    gap: float | None,
    x_label: str | None,
    y_label: str | None,
    show_labels: bool,
    show_arrows: bool,
    show_borders: bool,
) -> CartesianChart:
    """Layer defaults, theme, options file and flags, then build the chart."""
    options = ChartOptions().merge(THEMES[theme].as_overrides())
    if options_file is not None:
        options = load_options(options_file, base=options)

    flat: dict[str, Any] = {}
    if title is not None:
        flat["titleText"] = title
        flat["showTitle"] = True
    if align is not None:
        flat["titleAlign"] = align
    if padding is not None:
        flat["padding"] = padding
    if gap is not None:
        flat["gap"] = gap
    if x_label is not None:
        flat["xLabel"] = x_label
    if y_label is not None:
        flat["yLabel"] = y_label
    if show_labels:
        flat["showAxisLabels"] = True
    if show_arrows:
        flat["showAxisArrows"] = True
    if show_borders:
        flat["showBorderDebug"] = True

    options = options.merge(group_flat_options(flat))
    return CartesianChart(surface, options)


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """chart-canvas: Lay out and draw Cartesian chart canvases as SVG."""


@cli.command()
@_chart_options
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output SVG file path. Defaults to <options_file>.svg or chart.svg")
def render(
    options_file: Path | None,
    output: Path | None,
    width: int,
    height: int,
    theme: str,
    verbose: bool,
    **overrides: Any,
) -> None:
    """Render a chart canvas to SVG."""
    _configure_logging(verbose)
    surface = SvgSurface(width, height, background=THEMES[theme].background_color)
    try:
        chart = _build_chart(surface, options_file, theme, **overrides)
    except OptionsError as e:
        click.echo(f"Options error: {e}", err=True)
        raise SystemExit(1)

    chart.draw()

    if output is None:
        output = options_file.with_suffix(".svg") if options_file else Path("chart.svg")

    surface.save_svg(output)
    click.echo(f"Rendered {width}x{height} chart -> {output}")


@cli.command()
@_chart_options
def layout(
    options_file: Path | None,
    width: int,
    height: int,
    theme: str,
    verbose: bool,
    **overrides: Any,
) -> None:
    """Print the computed layout of a chart canvas as JSON."""
    _configure_logging(verbose)
    surface = SvgSurface(width, height)
    try:
        chart = _build_chart(surface, options_file, theme, **overrides)
    except OptionsError as e:
        click.echo(f"Options error: {e}", err=True)
        raise SystemExit(1)

    click.echo(json.dumps(chart.layout.as_dict(), indent=2))
