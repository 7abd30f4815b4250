"""Dark grey theme."""

from chart_canvas.render.style import Theme

DARK_THEME = Theme(
    name="dark",
    background_color="#2b2b2b",
    axis_color="#e0e0e0",
    arrow_color="#e0e0e0",
    label_color="#aaaaaa",
    title_color="#ffffff",
    border_color="rgba(173, 216, 230, 0.6)",
)
