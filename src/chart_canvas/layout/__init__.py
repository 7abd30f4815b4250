"""Layout engine for the chart canvas."""

from chart_canvas.layout.engine import compute_layout
from chart_canvas.layout.geometry import (
    AxisSegment,
    ChartLayout,
    LabelAnchor,
    Region,
    TextMetrics,
)

__all__ = [
    "AxisSegment",
    "ChartLayout",
    "LabelAnchor",
    "Region",
    "TextMetrics",
    "compute_layout",
]
