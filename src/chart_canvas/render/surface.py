"""The drawing surface the renderer draws on.

Any object with the canvas-style API below can be drawn on; ``SvgSurface``
is the implementation that ships with the package.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Protocol, runtime_checkable

from chart_canvas.layout.geometry import TextMetrics


@runtime_checkable
class DrawingSurface(Protocol):
    """A 2D surface with y increasing downward and a stack of saved states."""

    width: float
    height: float

    stroke_style: str
    fill_style: str
    line_width: float
    line_cap: str
    font: str
    text_align: str
    text_baseline: str

    def save(self) -> None: ...

    def restore(self) -> None: ...

    def translate(self, x: float, y: float) -> None: ...

    def scale(self, x: float, y: float) -> None: ...

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None: ...

    def stroke_rect(self, x: float, y: float, width: float, height: float) -> None: ...

    def begin_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def stroke(self) -> None: ...

    def fill_text(self, text: str, x: float, y: float) -> None: ...

    def measure_text(self, text: str) -> TextMetrics: ...


@contextmanager
def saver(surface: DrawingSurface) -> Iterator[DrawingSurface]:
    """Save the surface state and restore it however the block exits."""
    surface.save()
    try:
        yield surface
    finally:
        surface.restore()


def measure_with_font(surface: DrawingSurface, text: str, font: str) -> TextMetrics:
    """Measure ``text`` in ``font`` without disturbing the surface state."""
    with saver(surface):
        surface.font = font
        return surface.measure_text(text)
