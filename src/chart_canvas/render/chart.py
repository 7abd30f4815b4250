"""Chart rendering: ordered draw passes over a drawing surface.

Passes run in a fixed order: clear, debug borders, title, then the axes,
arrowheads and axis labels inside the plot transform. Axis passes work in
the plot's local y-up space: the origin is moved to the plot's bottom-left
corner and the y-axis flipped. Labels flip back so text stays upright.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from chart_canvas.layout.geometry import AxisSegment, ChartLayout, LabelAnchor
from chart_canvas.render.surface import DrawingSurface, saver

if TYPE_CHECKING:
    from chart_canvas.options import ChartOptions

LOGGER = logging.getLogger(__name__)

Point = tuple[float, float]


def draw_chart(surface: DrawingSurface, layout: ChartLayout, options: ChartOptions) -> None:
    """Draw the chart described by ``layout`` onto ``surface``."""
    LOGGER.debug("Drawing chart on %gx%g surface", surface.width, surface.height)

    surface.clear_rect(0, 0, surface.width, surface.height)

    if options.debug.show_borders:
        _draw_region_borders(surface, layout, options)

    if options.title.display:
        _draw_title(surface, layout, options)

    with saver(surface):
        x, y = layout.plot.bottom_left
        surface.translate(x, y)
        surface.scale(1, -1)

        _draw_axes(surface, layout, options)

        if options.arrows.display:
            _draw_arrows(surface, layout, options)

        if options.labels.display and layout.x_label and layout.y_label:
            _draw_axis_labels(surface, layout.x_label, layout.y_label, options)


def _draw_region_borders(
    surface: DrawingSurface,
    layout: ChartLayout,
    options: ChartOptions,
) -> None:
    """Outline the title and plot regions in surface space."""
    LOGGER.debug("Drawing region borders")
    with saver(surface):
        surface.stroke_style = options.debug.border_color
        for region in (layout.title, layout.plot):
            surface.stroke_rect(region.x, region.y, region.width, region.height)


def _draw_title(
    surface: DrawingSurface,
    layout: ChartLayout,
    options: ChartOptions,
) -> None:
    """Draw the title text, aligned within the title region."""
    title = options.title
    region = layout.title
    LOGGER.debug("Drawing title %r aligned %s", title.text, title.align)

    with saver(surface):
        surface.translate(region.x, region.y)

        surface.font = title.font
        surface.fill_style = title.color
        surface.text_align = "center"
        surface.text_baseline = "top"

        metrics = surface.measure_text(title.text)
        if title.align == "center":
            title_x = region.width / 2
        elif title.align == "right":
            title_x = region.width - metrics.right
        else:
            title_x = metrics.left

        surface.fill_text(title.text, title_x, 0)


def _draw_axes(
    surface: DrawingSurface,
    layout: ChartLayout,
    options: ChartOptions,
) -> None:
    """Stroke both axes as a single path."""
    LOGGER.debug("Drawing axes %s %s", layout.x_axis, layout.y_axis)
    with saver(surface):
        surface.begin_path()
        surface.stroke_style = options.axes.color
        surface.line_width = options.axes.width
        surface.line_cap = "square"

        for axis in (layout.x_axis, layout.y_axis):
            surface.move_to(*axis.start)
            surface.line_to(*axis.end)

        surface.stroke()


def arrow_chevron(axis: AxisSegment, size: float) -> tuple[Point, Point] | None:
    """Return the two barb ends of an arrowhead at the far end of ``axis``.

    Barbs reach ``size`` back along the axis and ``size / 2`` to either
    side of it. A zero-length axis has no direction and gets no arrow.
    """
    dx = axis.x1 - axis.x2
    dy = axis.y1 - axis.y2
    length = math.hypot(dx, dy)
    if length == 0:
        return None

    ux, uy = dx / length, dy / length
    back_x = axis.x2 + ux * size
    back_y = axis.y2 + uy * size
    half = size / 2
    return (
        (back_x - uy * half, back_y + ux * half),
        (back_x + uy * half, back_y - ux * half),
    )


def _draw_arrows(
    surface: DrawingSurface,
    layout: ChartLayout,
    options: ChartOptions,
) -> None:
    """Draw a chevron at the far end of each axis."""
    LOGGER.debug("Drawing axis arrows")
    with saver(surface):
        surface.begin_path()
        surface.stroke_style = options.arrows.color
        surface.line_width = options.axes.width
        surface.line_cap = "square"

        for axis in (layout.x_axis, layout.y_axis):
            chevron = arrow_chevron(axis, options.arrows.size)
            if chevron is None:
                continue
            for barb in chevron:
                surface.move_to(*axis.end)
                surface.line_to(*barb)

        surface.stroke()


def _draw_axis_labels(
    surface: DrawingSurface,
    x_label: LabelAnchor,
    y_label: LabelAnchor,
    options: ChartOptions,
) -> None:
    """Draw the axis labels upright at their anchors."""
    labels = options.labels
    LOGGER.debug("Drawing axis labels %r %r", labels.x_label, labels.y_label)
    with saver(surface):
        # Undo the plot flip; anchors are in y-up space so negate y.
        surface.scale(1, -1)

        surface.font = labels.font
        surface.fill_style = labels.color
        surface.text_align = "center"
        surface.text_baseline = "middle"

        surface.fill_text(labels.x_label, x_label.x, -x_label.y)
        surface.fill_text(labels.y_label, y_label.x, -y_label.y)
