"""Figure placement: lay out every plot, colorbar and label of a figure.

The caller owns the :class:`FigureSpec`. Any change to it is followed by
a fresh call to :func:`place_figure`; nothing is cached between calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from figgrid.layout.colorbar import colorbar_rect
from figgrid.layout.engine import Layout, Rect, compute_layout, rectangle
from figgrid.layout.errors import ConfigurationError
from figgrid.layout.labels import LabelPlacement, label_position, label_to_canvas
from figgrid.parser.model import FigureSpec

logger = logging.getLogger(__name__)


@dataclass
class PlacedLabel:
    """A label anchored inside a plot, in both local and canvas coordinates."""

    plot_id: str
    local: LabelPlacement
    canvas_x: float
    canvas_y: float


@dataclass
class FigurePlacement:
    """Result of laying out a figure; all rects are normalized."""

    layout: Layout
    plots: dict[str, Rect] = field(default_factory=dict)
    colorbars: dict[str, Rect] = field(default_factory=dict)
    labels: list[PlacedLabel] = field(default_factory=list)


def place_figure(spec: FigureSpec, exact_gaps: bool = False) -> FigurePlacement:
    """Compute the layout of ``spec`` and place everything it declares."""
    config = spec.config
    layout = compute_layout(config, exact_gaps=exact_gaps)
    placement = FigurePlacement(layout=layout)

    for plot in spec.plots.values():
        placement.plots[plot.id] = rectangle(
            plot.column,
            plot.row,
            plot.column_span,
            plot.row_span,
            layout=layout,
        )

    for plot_id in spec.colorbars:
        host = _host(placement, plot_id, "Colorbar")
        placement.colorbars[plot_id] = colorbar_rect(
            host, layout, config.cbar_width, config.cbar_padding
        )

    for label in spec.labels:
        host = _host(placement, label.plot_id, "Label")
        local = label_position(
            layout.to_physical(host),
            label.corner,
            config.font_size,
            config.unit,
            text=label.text,
        )
        x, y = label_to_canvas(local, host, layout)
        placement.labels.append(
            PlacedLabel(plot_id=label.plot_id, local=local, canvas_x=x, canvas_y=y)
        )

    logger.info(
        "Placed %d plot(s), %d colorbar(s), %d label(s) on a %gx%g %s canvas",
        len(placement.plots),
        len(placement.colorbars),
        len(placement.labels),
        config.total_width,
        config.total_height,
        config.unit.value,
    )
    return placement


def _host(placement: FigurePlacement, plot_id: str, what: str) -> Rect:
    try:
        return placement.plots[plot_id]
    except KeyError:
        raise ConfigurationError(
            f"{what} references unknown plot '{plot_id}'"
        ) from None
