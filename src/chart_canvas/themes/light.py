"""Light theme: black ink on a transparent background."""

from chart_canvas.render.style import Theme

LIGHT_THEME = Theme(
    name="light",
    background_color=None,
    axis_color="black",
    arrow_color="black",
    label_color="black",
    title_color="black",
    border_color="lightblue",
)
