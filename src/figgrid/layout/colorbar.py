"""Colorbar placement next to a plot."""

from __future__ import annotations

from figgrid.layout.engine import Layout, Rect


def colorbar_rect(
    host: Rect,
    layout: Layout,
    cbar_width: float,
    cbar_padding: float,
) -> Rect:
    """Place a colorbar to the right of ``host``.

    ``cbar_width`` and ``cbar_padding`` are physical lengths in the
    layout's unit. The colorbar shares the host's bottom edge and height.
    """
    return Rect(
        left=host.right + cbar_padding / layout.total_width,
        bottom=host.bottom,
        width=cbar_width / layout.total_width,
        height=host.height,
    )
