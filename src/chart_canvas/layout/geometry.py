"""Geometry produced by the layout engine."""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class Region:
    """An axis-aligned rectangle in surface pixels (origin top-left, y down)."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def bottom_left(self) -> tuple[float, float]:
        return (self.x, self.y + self.height)


@dataclass(frozen=True)
class AxisSegment:
    """An axis line in local y-up space, origin at the plot's bottom-left."""

    x1: float
    y1: float
    x2: float
    y2: float

    @property
    def start(self) -> tuple[float, float]:
        return (self.x1, self.y1)

    @property
    def end(self) -> tuple[float, float]:
        return (self.x2, self.y2)


@dataclass(frozen=True)
class LabelAnchor:
    """Text origin of an axis label, in the same local space as the axes."""

    x: float
    y: float


@dataclass(frozen=True)
class TextMetrics:
    """Extents of a run of text, as reported by a drawing surface.

    ``left`` and ``right`` are distances from the draw position to the
    text's left and right bounds for the alignment in effect; ``ascent``
    and ``descent`` are measured from the baseline.
    """

    width: float
    left: float
    right: float
    ascent: float
    descent: float

    @property
    def height(self) -> float:
        return self.ascent + self.descent


@dataclass(frozen=True)
class ChartLayout:
    """Every region and axis descriptor needed to draw a chart."""

    width: float
    height: float
    title: Region
    plot: Region
    x_axis: AxisSegment
    y_axis: AxisSegment
    x_label: LabelAnchor | None = None
    y_label: LabelAnchor | None = None

    def as_dict(self) -> dict:
        return asdict(self)
