"""Theme definitions for charts."""

from chart_canvas.themes.dark import DARK_THEME
from chart_canvas.themes.light import LIGHT_THEME

THEMES = {
    "light": LIGHT_THEME,
    "dark": DARK_THEME,
}

__all__ = ["THEMES", "LIGHT_THEME", "DARK_THEME"]
