"""Shared fixtures: a drawing surface that records every call."""

from __future__ import annotations

import pytest

from chart_canvas.layout.geometry import TextMetrics

CHAR_WIDTH = 7.0
ASCENT = 10.0
DESCENT = 4.0


class RecordingSurface:
    """Drawing surface that records calls together with the state they ran in."""

    def __init__(self, width: float = 800, height: float = 400) -> None:
        self.width = width
        self.height = height
        self.calls: list[tuple] = []
        self.transform: tuple[tuple, ...] = ()
        self.stroke_style = "black"
        self.fill_style = "black"
        self.line_width = 1.0
        self.line_cap = "butt"
        self.font = "10px sans-serif"
        self.text_align = "start"
        self.text_baseline = "alphabetic"
        self._stack: list[dict] = []
        self.depth = 0

    _STATE = (
        "transform", "stroke_style", "fill_style", "line_width", "line_cap",
        "font", "text_align", "text_baseline",
    )

    def state(self) -> dict:
        return {name: getattr(self, name) for name in self._STATE}

    def names(self) -> list[str]:
        return [call[0] for call in self.calls]

    def find(self, name: str) -> list[tuple]:
        return [call for call in self.calls if call[0] == name]

    def save(self) -> None:
        self.calls.append(("save",))
        self._stack.append(self.state())
        self.depth += 1

    def restore(self) -> None:
        self.calls.append(("restore",))
        for name, value in self._stack.pop().items():
            setattr(self, name, value)
        self.depth -= 1

    def translate(self, x: float, y: float) -> None:
        self.calls.append(("translate", x, y))
        self.transform = self.transform + (("translate", x, y),)

    def scale(self, x: float, y: float) -> None:
        self.calls.append(("scale", x, y))
        self.transform = self.transform + (("scale", x, y),)

    def clear_rect(self, x, y, width, height) -> None:
        self.calls.append(("clear_rect", x, y, width, height))

    def stroke_rect(self, x, y, width, height) -> None:
        self.calls.append(("stroke_rect", x, y, width, height, self.state()))

    def begin_path(self) -> None:
        self.calls.append(("begin_path",))

    def move_to(self, x, y) -> None:
        self.calls.append(("move_to", x, y))

    def line_to(self, x, y) -> None:
        self.calls.append(("line_to", x, y))

    def stroke(self) -> None:
        self.calls.append(("stroke", self.state()))

    def fill_text(self, text, x, y) -> None:
        self.calls.append(("fill_text", text, x, y, self.state()))

    def measure_text(self, text: str) -> TextMetrics:
        width = len(text) * CHAR_WIDTH
        if self.text_align == "center":
            left = right = width / 2
        elif self.text_align in ("right", "end"):
            left, right = width, 0.0
        else:
            left, right = 0.0, width
        return TextMetrics(width=width, left=left, right=right, ascent=ASCENT, descent=DESCENT)


def measure(text: str, font: str) -> TextMetrics:
    """Stand-alone measure function matching RecordingSurface metrics."""
    return RecordingSurface().measure_text(text)


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface(800, 400)
