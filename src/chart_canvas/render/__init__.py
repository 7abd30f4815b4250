"""Rendering for the chart canvas."""

from chart_canvas.render.chart import arrow_chevron, draw_chart
from chart_canvas.render.style import Theme
from chart_canvas.render.surface import DrawingSurface, measure_with_font, saver
from chart_canvas.render.svg import SvgSurface

__all__ = [
    "DrawingSurface",
    "SvgSurface",
    "Theme",
    "arrow_chevron",
    "draw_chart",
    "measure_with_font",
    "saver",
]
