"""Cartesian chart: binds options and a drawing surface to the pipeline."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from chart_canvas.layout import ChartLayout, compute_layout
from chart_canvas.options import ChartOptions
from chart_canvas.render import DrawingSurface, draw_chart, measure_with_font

LOGGER = logging.getLogger(__name__)


class CartesianChart:
    """A chart drawn onto a single surface.

    The layout is computed once, from the surface size at construction.
    Call ``relayout()`` after resizing the surface; nothing watches for it.
    """

    def __init__(
        self,
        surface: DrawingSurface,
        options: ChartOptions | Mapping[str, Any] | None = None,
    ) -> None:
        if options is None:
            options = ChartOptions()
        elif not isinstance(options, ChartOptions):
            options = ChartOptions.from_overrides(options)

        self.surface = surface
        self.options = options
        self._layout = self._compute_layout()

    @property
    def layout(self) -> ChartLayout:
        """The computed regions and axis geometry, for diagnostics."""
        return self._layout

    def relayout(self) -> ChartLayout:
        """Recompute the layout from the surface's current size."""
        self._layout = self._compute_layout()
        return self._layout

    def draw(self) -> None:
        draw_chart(self.surface, self._layout, self.options)

    def _compute_layout(self) -> ChartLayout:
        LOGGER.debug("Laying out chart on %gx%g surface", self.surface.width, self.surface.height)
        return compute_layout(
            self.surface.width,
            self.surface.height,
            self.options,
            measure_text=lambda text, font: measure_with_font(self.surface, text, font),
        )
