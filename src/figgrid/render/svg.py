"""SVG preview of a figure layout using drawsvg.

Draws the canvas, the margins left by the outer paddings, the cell grid
and every placed plot, colorbar and label anchor, at the figure's print
size times a zoom factor. Nothing here feeds back into the layout.
"""

from __future__ import annotations

import drawsvg as draw

from figgrid.layout.engine import Rect, grid_rectangles
from figgrid.layout.placement import FigurePlacement, place_figure
from figgrid.parser.model import FigureSpec, Unit
from figgrid.render.constants import (
    CANVAS_PADDING,
    CELL_INDEX_FONT_SIZE,
    DEFAULT_ZOOM,
    ID_INSET,
    PX_PER_CM,
    PX_PER_INCH,
    TITLE_HEIGHT,
)
from figgrid.render.style import Theme


class _CanvasFrame:
    """Maps normalized canvas coordinates (origin bottom-left) to SVG pixels."""

    def __init__(self, x: float, y: float, width: float, height: float) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    def point(self, nx: float, ny: float) -> tuple[float, float]:
        return self.x + nx * self.width, self.y + (1 - ny) * self.height

    def rect(self, rect: Rect) -> tuple[float, float, float, float]:
        x, y = self.point(rect.left, rect.top)
        return x, y, rect.width * self.width, rect.height * self.height


def render_svg(
    spec: FigureSpec,
    theme: Theme,
    placement: FigurePlacement | None = None,
    zoom: float = DEFAULT_ZOOM,
    show_grid: bool = True,
) -> str:
    """Render a layout preview of ``spec`` to an SVG string."""
    if placement is None:
        placement = place_figure(spec)
    config = spec.config

    px_per_unit = PX_PER_CM if config.unit is Unit.CM else PX_PER_INCH
    canvas_w = config.total_width * px_per_unit * zoom
    canvas_h = config.total_height * px_per_unit * zoom
    title_h = TITLE_HEIGHT if spec.title else 0.0

    svg_width = canvas_w + CANVAS_PADDING * 2
    svg_height = canvas_h + CANVAS_PADDING * 2 + title_h

    d = draw.Drawing(svg_width, svg_height)
    d.append(draw.Rectangle(0, 0, svg_width, svg_height, fill=theme.background_color))

    if spec.title:
        d.append(draw.Text(
            spec.title,
            theme.title_font_size,
            CANVAS_PADDING, CANVAS_PADDING + theme.title_font_size * 0.8,
            fill=theme.title_color,
            font_family=theme.label_font_family,
            font_weight="bold",
        ))

    frame = _CanvasFrame(CANVAS_PADDING, CANVAS_PADDING + title_h, canvas_w, canvas_h)

    _render_canvas(d, frame, placement, theme)
    if show_grid:
        _render_grid(d, frame, placement, theme)
    _render_plots(d, frame, placement, theme)
    _render_colorbars(d, frame, placement, theme)
    _render_labels(d, frame, placement, theme)

    return d.as_svg()


def _render_canvas(
    d: draw.Drawing,
    frame: _CanvasFrame,
    placement: FigurePlacement,
    theme: Theme,
) -> None:
    """Canvas outline with the outer-padding margins shaded."""
    layout = placement.layout
    d.append(draw.Rectangle(
        frame.x, frame.y, frame.width, frame.height,
        fill=theme.margin_fill,
        stroke=theme.canvas_stroke,
        stroke_width=1.0,
    ))
    interior = Rect(
        left=layout.lop,
        bottom=layout.bop,
        width=1 - layout.lop - layout.rop,
        height=1 - layout.top - layout.bop,
    )
    d.append(draw.Rectangle(*frame.rect(interior), fill=theme.background_color))


def _render_grid(
    d: draw.Drawing,
    frame: _CanvasFrame,
    placement: FigurePlacement,
    theme: Theme,
) -> None:
    """Dashed outline and (column, row) index of every single cell."""
    for (column, row), cell in grid_rectangles(placement.layout):
        x, y, w, h = frame.rect(cell)
        d.append(draw.Rectangle(
            x, y, w, h,
            fill="none",
            stroke=theme.grid_stroke,
            stroke_width=1.0,
            stroke_dasharray=theme.grid_dash,
        ))
        d.append(draw.Text(
            f"{column},{row}",
            CELL_INDEX_FONT_SIZE,
            x + w - ID_INSET, y + h - ID_INSET,
            fill=theme.grid_stroke,
            font_family=theme.label_font_family,
            text_anchor="end",
        ))


def _render_plots(
    d: draw.Drawing,
    frame: _CanvasFrame,
    placement: FigurePlacement,
    theme: Theme,
) -> None:
    for plot_id, rect in placement.plots.items():
        x, y, w, h = frame.rect(rect)
        d.append(draw.Rectangle(
            x, y, w, h,
            fill=theme.plot_fill,
            stroke=theme.plot_stroke,
            stroke_width=theme.plot_stroke_width,
        ))
        d.append(draw.Text(
            plot_id,
            theme.label_font_size,
            x + w / 2, y + h / 2,
            fill=theme.id_color,
            font_family=theme.label_font_family,
            text_anchor="middle",
            dominant_baseline="central",
        ))


def _render_colorbars(
    d: draw.Drawing,
    frame: _CanvasFrame,
    placement: FigurePlacement,
    theme: Theme,
) -> None:
    for rect in placement.colorbars.values():
        d.append(draw.Rectangle(
            *frame.rect(rect),
            fill=theme.colorbar_fill,
            stroke=theme.colorbar_stroke,
            stroke_width=1.0,
        ))


def _render_labels(
    d: draw.Drawing,
    frame: _CanvasFrame,
    placement: FigurePlacement,
    theme: Theme,
) -> None:
    """Label anchor points, with the label text aligned as it would be placed."""
    anchor_color = theme.anchor_color or theme.label_color
    for label in placement.labels:
        x, y = frame.point(label.canvas_x, label.canvas_y)
        d.append(draw.Circle(x, y, theme.anchor_radius, fill=anchor_color))
        d.append(draw.Text(
            label.local.text,
            theme.label_font_size,
            x, y,
            fill=theme.label_color,
            font_family=theme.label_font_family,
            text_anchor="start" if label.local.horizontal_alignment == "left" else "end",
            dominant_baseline="central",
        ))
