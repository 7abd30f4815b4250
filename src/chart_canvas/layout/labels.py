"""Axis label placement.

Labels sit just past the far end of their axis. The axis is shortened so
the label never overlaps the line, and the label's centre is anchored
inside the space that was given up.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Callable

from chart_canvas.layout.geometry import AxisSegment, LabelAnchor, TextMetrics

if TYPE_CHECKING:
    from chart_canvas.options import LabelOptions

MeasureText = Callable[[str, str], TextMetrics]
"""Measure ``text`` drawn in the CSS ``font`` shorthand given."""


@dataclass(frozen=True)
class LabelPlacement:
    """Axes shortened for their labels, and where each label is drawn."""

    x_axis: AxisSegment
    y_axis: AxisSegment
    x_label: LabelAnchor
    y_label: LabelAnchor


def place_axis_labels(
    x_axis: AxisSegment,
    y_axis: AxisSegment,
    labels: LabelOptions,
    measure_text: MeasureText,
) -> LabelPlacement:
    """Reserve room for both axis labels at the far end of the raw axes.

    The horizontal axis gives up the label's width plus the margin, the
    vertical axis its ascent and descent plus the margin. An empty label
    measures zero, so only the margin is given up.
    """
    x_metrics = measure_text(labels.x_label, labels.font)
    y_metrics = measure_text(labels.y_label, labels.font)

    x_reserved = x_metrics.width + labels.margin
    y_reserved = y_metrics.height + labels.margin

    return LabelPlacement(
        x_axis=replace(x_axis, x2=x_axis.x2 - x_reserved),
        y_axis=replace(y_axis, y2=y_axis.y2 - y_reserved),
        x_label=LabelAnchor(x=x_axis.x2 - x_metrics.width / 2, y=x_axis.y2),
        y_label=LabelAnchor(x=y_axis.x2, y=y_axis.y2 - y_metrics.height / 2),
    )
