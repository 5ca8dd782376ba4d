"""Dark grey theme."""

from figgrid.render.style import Theme

DARK_THEME = Theme(
    name="dark",
    background_color="#2b2b2b",
    canvas_stroke="#e0e0e0",
    margin_fill="rgba(255, 255, 255, 0.04)",
    grid_stroke="rgba(255, 255, 255, 0.2)",
    plot_fill="rgba(255, 255, 255, 0.06)",
    plot_stroke="#8ecae6",
    plot_stroke_width=1.5,
    colorbar_fill="rgba(255, 183, 3, 0.25)",
    colorbar_stroke="#ffb703",
    label_color="#e0e0e0",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=11.0,
    id_color="#8ecae6",
    title_color="#ffffff",
    title_font_size=16.0,
    anchor_color="#ffb703",
)
