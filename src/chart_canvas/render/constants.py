"""Render constants used across render modules.

Colours, fonts and the text-metric ratios of the SVG surface.
"""

# ---------------------------------------------------------------------------
# Colours
# ---------------------------------------------------------------------------
AXIS_COLOR: str = "black"
"""Default stroke colour of the axis lines."""

ARROW_COLOR: str = "black"
"""Default stroke colour of the arrowheads."""

LABEL_COLOR: str = "black"
"""Default fill colour of axis labels."""

TITLE_COLOR: str = "black"
"""Default fill colour of the title."""

BORDER_COLOR: str = "lightblue"
"""Stroke colour of the debug region borders."""

# ---------------------------------------------------------------------------
# Fonts
# ---------------------------------------------------------------------------
FONT_FAMILY: str = "Arial"
"""Default font family for the title and axis labels."""

DEFAULT_FONT: str = "10px sans-serif"
"""Font a fresh surface starts with, as on an HTML canvas."""

# ---------------------------------------------------------------------------
# SVG text metrics
# ---------------------------------------------------------------------------
CHAR_WIDTH_RATIO: float = 0.55
"""Character width as a fraction of font size for text sizing."""

ASCENT_RATIO: float = 0.8
"""Glyph ascent above the alphabetic baseline, as a fraction of font size."""

DESCENT_RATIO: float = 0.2
"""Glyph descent below the alphabetic baseline, as a fraction of font size."""

# ---------------------------------------------------------------------------
# SVG text alignment
# ---------------------------------------------------------------------------
TEXT_ANCHORS: dict[str, str] = {
    "left": "start",
    "start": "start",
    "center": "middle",
    "right": "end",
    "end": "end",
}
"""Canvas ``textAlign`` values mapped to SVG ``text-anchor``."""

DOMINANT_BASELINES: dict[str, str] = {
    "top": "text-before-edge",
    "hanging": "hanging",
    "middle": "central",
    "alphabetic": "auto",
    "ideographic": "ideographic",
    "bottom": "text-after-edge",
}
"""Canvas ``textBaseline`` values mapped to SVG ``dominant-baseline``."""
