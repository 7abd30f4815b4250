"""Layout constants used across layout modules.

Default geometry for the chart canvas. Values are in surface pixels.
"""

# ---------------------------------------------------------------------------
# Canvas spacing
# ---------------------------------------------------------------------------
PADDING: float = 35.0
"""Outer margin between the surface edge and any region."""

SNAPPING: float = 0.5
"""Sub-pixel offset that keeps 1px strokes on the pixel grid."""

GAP: float = 5.0
"""Vertical separator between the title region and the plot region."""

# ---------------------------------------------------------------------------
# Title
# ---------------------------------------------------------------------------
TITLE_FONT_SIZE: float = 18.0
"""Title font size; also the height of the title region."""

TITLE_TEXT: str = "Title"
"""Placeholder title text."""

TITLE_ALIGN: str = "left"
"""Horizontal alignment of the title within its region."""

TITLE_ALIGNMENTS: tuple[str, ...] = ("left", "center", "right")
"""Recognised title alignments. Anything else draws as ``left``."""

# ---------------------------------------------------------------------------
# Axes
# ---------------------------------------------------------------------------
AXIS_WIDTH: float = 1.0
"""Stroke width of both axis lines."""

ARROW_SIZE: float = 10.0
"""Length of an arrowhead along its axis."""

# ---------------------------------------------------------------------------
# Axis labels
# ---------------------------------------------------------------------------
LABEL_FONT_SIZE: float = 14.0
"""Axis label font size."""

LABEL_MARGIN: float = 10.0
"""Space left between a shortened axis end and its label."""

X_LABEL: str = "x"
"""Default horizontal axis label."""

Y_LABEL: str = "y"
"""Default vertical axis label."""
