"""Theme and style constants for layout previews."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Theme:
    """Visual theme for a layout preview."""

    name: str
    background_color: str
    canvas_stroke: str
    margin_fill: str
    grid_stroke: str
    plot_fill: str
    plot_stroke: str
    plot_stroke_width: float
    colorbar_fill: str
    colorbar_stroke: str
    label_color: str
    label_font_family: str
    label_font_size: float
    id_color: str
    title_color: str
    title_font_size: float
    # Label anchor marker
    anchor_radius: float = 2.0
    anchor_color: str = ""  # empty = inherit label_color
    grid_dash: str = "4,3"
