"""Theme and style presets for chart rendering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class Theme:
    """Colour preset for a chart.

    A theme is applied as grouped overrides beneath anything the caller
    sets explicitly.
    """

    name: str
    background_color: str | None
    axis_color: str
    arrow_color: str
    label_color: str
    title_color: str
    border_color: str

    def as_overrides(self) -> dict[str, dict[str, Any]]:
        return {
            "axes": {"color": self.axis_color},
            "arrows": {"color": self.arrow_color},
            "labels": {"color": self.label_color},
            "title": {"color": self.title_color},
            "debug": {"border_color": self.border_color},
        }
