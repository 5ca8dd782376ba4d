"""Corner label placement inside a plot.

Labels are positioned in the plot's own coordinate space, in the
figure's physical unit, with the origin at the plot's lower-left corner.
The anchor is the label's vertical center, so the glyph height estimated
from the font size is folded into the vertical inset.
"""

from __future__ import annotations

from dataclasses import dataclass

from figgrid.layout.constants import LABEL_INSET_X, LABEL_INSET_Y
from figgrid.layout.engine import Layout, Rect
from figgrid.layout.units import Length
from figgrid.parser.model import Corner, Unit


@dataclass
class LabelPlacement:
    """Anchor point and alignment of a corner label."""

    x: float
    y: float
    horizontal_alignment: str
    corner: Corner
    text: str = ""

    def as_tuple(self) -> tuple[float, float, str]:
        return (self.x, self.y, self.horizontal_alignment)


def glyph_height(font_size: float, unit: Unit | str) -> float:
    """Approximate height of a line of text at ``font_size`` points."""
    return Length.from_points(font_size, unit).value


def label_position(
    host_local: Rect,
    corner: Corner | str,
    font_size: float,
    unit: Unit | str,
    text: str = "",
    inset_x: float = LABEL_INSET_X,
    inset_y: float = LABEL_INSET_Y,
) -> LabelPlacement:
    """Anchor a label at ``corner`` of a plot of size ``host_local``.

    Only the width and height of ``host_local`` are used; they must be in
    ``unit``. Raises :class:`InvalidCornerError` for an unknown corner and
    :class:`InvalidUnitError` for an unknown unit.
    """
    corner = Corner.parse(corner)
    half_glyph = glyph_height(font_size, unit) / 2

    if corner.is_left:
        x, align = inset_x, "left"
    else:
        x, align = host_local.width - inset_x, "right"

    if corner.is_top:
        y = host_local.height - inset_y - half_glyph
    else:
        y = inset_y + half_glyph

    return LabelPlacement(x=x, y=y, horizontal_alignment=align, corner=corner, text=text)


def label_to_canvas(
    placement: LabelPlacement,
    host: Rect,
    layout: Layout,
) -> tuple[float, float]:
    """Convert a plot-local label anchor to normalized canvas coordinates."""
    return (
        host.left + placement.x / layout.total_width,
        host.bottom + placement.y / layout.total_height,
    )
