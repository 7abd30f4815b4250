"""SVG drawing surface using drawsvg.

Implements the canvas-style ``DrawingSurface`` API by turning each stroke,
rectangle and text call into a drawsvg element that carries the transform
in effect as its SVG ``transform`` attribute.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, fields
from pathlib import Path

import drawsvg as draw

from chart_canvas.layout.geometry import TextMetrics
from chart_canvas.render.constants import (
    ASCENT_RATIO,
    CHAR_WIDTH_RATIO,
    DEFAULT_FONT,
    DESCENT_RATIO,
    DOMINANT_BASELINES,
    TEXT_ANCHORS,
)

_FONT_RE = re.compile(r"(?P<size>\d+(?:\.\d+)?)px\s+(?P<family>.+)")


@dataclass(frozen=True)
class _State:
    """Everything save()/restore() snapshot."""

    transform_ops: tuple[str, ...] = ()
    stroke_style: str = "black"
    fill_style: str = "black"
    line_width: float = 1.0
    line_cap: str = "butt"
    font: str = DEFAULT_FONT
    text_align: str = "start"
    text_baseline: str = "alphabetic"


def parse_font(font: str) -> tuple[float, str]:
    """Split a CSS font shorthand such as ``"18px Arial"`` into size and family."""
    match = _FONT_RE.search(font)
    if match is None:
        return parse_font(DEFAULT_FONT)
    return float(match.group("size")), match.group("family").strip()


class SvgSurface:
    """A drawing surface that records into an SVG document.

    Path points take the transform in effect when the path is stroked.
    """

    def __init__(self, width: float, height: float, background: str | None = None) -> None:
        self.width = width
        self.height = height
        self.background = background
        self._elements: list[draw.DrawingElement] = []
        self._stack: list[_State] = []
        self._apply(_State())
        self._path: list[tuple[str, float, float]] = []

    # -- state -------------------------------------------------------------

    @property
    def transform(self) -> str:
        return " ".join(self.transform_ops)

    def _apply(self, state: _State) -> None:
        for f in fields(state):
            setattr(self, f.name, getattr(state, f.name))

    def save(self) -> None:
        self._stack.append(_State(**{f.name: getattr(self, f.name) for f in fields(_State)}))

    def restore(self) -> None:
        # An unbalanced restore is a no-op, as on an HTML canvas.
        if self._stack:
            self._apply(self._stack.pop())

    def translate(self, x: float, y: float) -> None:
        self._push_transform(f"translate({x:g},{y:g})")

    def scale(self, x: float, y: float) -> None:
        self._push_transform(f"scale({x:g},{y:g})")

    def _push_transform(self, op: str) -> None:
        self.transform_ops = self.transform_ops + (op,)

    def _transform_args(self) -> dict[str, str]:
        return {"transform": self.transform} if self.transform_ops else {}

    # -- drawing -----------------------------------------------------------

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None:
        """Clear an area; clearing the whole canvas discards everything drawn."""
        covers = (
            not self.transform_ops
            and x <= 0
            and y <= 0
            and x + width >= self.width
            and y + height >= self.height
        )
        if covers:
            self._elements.clear()
            return
        self._elements.append(draw.Rectangle(
            x, y, width, height,
            fill=self.background or "white",
            **self._transform_args(),
        ))

    def stroke_rect(self, x: float, y: float, width: float, height: float) -> None:
        self._elements.append(draw.Rectangle(
            x, y, width, height,
            fill="none",
            stroke=self.stroke_style,
            stroke_width=self.line_width,
            **self._transform_args(),
        ))

    def begin_path(self) -> None:
        self._path = []

    def move_to(self, x: float, y: float) -> None:
        self._path.append(("M", x, y))

    def line_to(self, x: float, y: float) -> None:
        self._path.append(("L", x, y))

    def stroke(self) -> None:
        if not self._path:
            return
        path = draw.Path(
            stroke=self.stroke_style,
            stroke_width=self.line_width,
            stroke_linecap=self.line_cap,
            fill="none",
            **self._transform_args(),
        )
        for command, x, y in self._path:
            if command == "M":
                path.M(x, y)
            else:
                path.L(x, y)
        self._elements.append(path)

    def fill_text(self, text: str, x: float, y: float) -> None:
        if not text:
            return
        size, family = parse_font(self.font)
        self._elements.append(draw.Text(
            text,
            size,
            x, y,
            fill=self.fill_style,
            font_family=family,
            text_anchor=TEXT_ANCHORS.get(self.text_align, "start"),
            dominant_baseline=DOMINANT_BASELINES.get(self.text_baseline, "auto"),
            **self._transform_args(),
        ))

    def measure_text(self, text: str) -> TextMetrics:
        """Approximate text extents from the font size.

        Bounds follow the current ``text_align`` and ``text_baseline`` the
        way canvas ``measureText`` reports them.
        """
        size, _ = parse_font(self.font)
        width = len(text) * size * CHAR_WIDTH_RATIO

        anchor = TEXT_ANCHORS.get(self.text_align, "start")
        if anchor == "middle":
            left = right = width / 2
        elif anchor == "end":
            left, right = width, 0.0
        else:
            left, right = 0.0, width

        full = size * (ASCENT_RATIO + DESCENT_RATIO)
        if self.text_baseline in ("top", "hanging"):
            ascent, descent = 0.0, full
        elif self.text_baseline == "middle":
            ascent = descent = full / 2
        elif self.text_baseline == "bottom":
            ascent, descent = full, 0.0
        else:
            ascent, descent = size * ASCENT_RATIO, size * DESCENT_RATIO

        return TextMetrics(width=width, left=left, right=right, ascent=ascent, descent=descent)

    # -- output ------------------------------------------------------------

    @property
    def elements(self) -> list[draw.DrawingElement]:
        return list(self._elements)

    def as_svg(self) -> str:
        d = draw.Drawing(self.width, self.height)
        if self.background:
            d.append(draw.Rectangle(0, 0, self.width, self.height, fill=self.background))
        for element in self._elements:
            d.append(element)
        svg = d.as_svg()
        return svg if svg.endswith("\n") else svg + "\n"

    def save_svg(self, path: Path) -> None:
        path.write_text(self.as_svg())
