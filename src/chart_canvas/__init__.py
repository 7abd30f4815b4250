"""chart-canvas: layout and rendering of Cartesian chart canvases."""

from chart_canvas.chart import CartesianChart
from chart_canvas.layout import ChartLayout, compute_layout
from chart_canvas.options import ChartOptions, OptionsError
from chart_canvas.render import SvgSurface, draw_chart

__version__ = "0.1.0"

__all__ = [
    "CartesianChart",
    "ChartLayout",
    "ChartOptions",
    "OptionsError",
    "SvgSurface",
    "__version__",
    "compute_layout",
    "draw_chart",
]
