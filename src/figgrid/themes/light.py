"""Light theme."""

from figgrid.render.style import Theme

LIGHT_THEME = Theme(
    name="light",
    background_color="#ffffff",
    canvas_stroke="#333333",
    margin_fill="rgba(0, 0, 0, 0.04)",
    grid_stroke="rgba(0, 0, 0, 0.25)",
    plot_fill="rgba(31, 119, 180, 0.12)",
    plot_stroke="#1f77b4",
    plot_stroke_width=1.5,
    colorbar_fill="rgba(255, 127, 14, 0.25)",
    colorbar_stroke="#ff7f0e",
    label_color="#333333",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=11.0,
    id_color="#1f77b4",
    title_color="#111111",
    title_font_size=16.0,
)
