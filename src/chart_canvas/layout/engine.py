"""Layout coordinator: derives regions and axis geometry from canvas size.

Regions are stacked top to bottom: an optional title region, then the plot
region. Axis geometry is expressed in the plot's local y-up space.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chart_canvas.layout.geometry import AxisSegment, ChartLayout, Region
from chart_canvas.layout.labels import MeasureText, place_axis_labels

if TYPE_CHECKING:
    from chart_canvas.options import ChartOptions, LayoutOptions, TitleOptions

LOGGER = logging.getLogger(__name__)


def compute_layout(
    width: float,
    height: float,
    options: ChartOptions,
    measure_text: MeasureText | None = None,
) -> ChartLayout:
    """Compute the layout of a ``width`` x ``height`` canvas.

    ``measure_text`` is only consulted when axis labels are displayed.
    Degenerate configurations produce negative sizes; nothing is clamped.
    """
    title = _title_region(width, options.layout, options.title)
    plot = _plot_region(width, height, title, options.layout)

    x_axis = AxisSegment(0.0, 0.0, plot.width, 0.0)
    y_axis = AxisSegment(0.0, 0.0, 0.0, plot.height)

    x_label = y_label = None
    if options.labels.display:
        if measure_text is None:
            raise ValueError("measure_text is required when axis labels are displayed")
        placement = place_axis_labels(x_axis, y_axis, options.labels, measure_text)
        x_axis, y_axis = placement.x_axis, placement.y_axis
        x_label, y_label = placement.x_label, placement.y_label

    layout = ChartLayout(
        width=width,
        height=height,
        title=title,
        plot=plot,
        x_axis=x_axis,
        y_axis=y_axis,
        x_label=x_label,
        y_label=y_label,
    )
    LOGGER.debug("Computed layout for %gx%g canvas: title=%s plot=%s", width, height, title, plot)
    return layout


def _title_region(width: float, layout: LayoutOptions, title: TitleOptions) -> Region:
    """Title strip along the top edge, or an empty region when hidden."""
    if not title.display:
        return Region()
    return Region(
        x=layout.padding + layout.snapping,
        y=layout.padding + layout.snapping,
        width=width - layout.padding * 2,
        height=title.font_size,
    )


def _plot_region(
    width: float,
    height: float,
    title_region: Region,
    layout: LayoutOptions,
) -> Region:
    """Plot area below the title region, separated from it by the gap.

    The gap applies whether or not the title is displayed.
    """
    return Region(
        x=layout.padding + layout.snapping,
        y=title_region.height + layout.padding + layout.snapping + layout.gap,
        width=width - layout.padding * 2,
        height=height - title_region.height - layout.padding * 2 - layout.gap,
    )
