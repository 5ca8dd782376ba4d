"""Render constants used across render modules.

Theme-dependent values remain in style.py.
"""

# ---------------------------------------------------------------------------
# Scale
# ---------------------------------------------------------------------------
PX_PER_INCH: float = 96.0
"""CSS reference pixels per inch."""

PX_PER_CM: float = PX_PER_INCH / 2.54
"""CSS reference pixels per centimeter."""

DEFAULT_ZOOM: float = 2.0
"""Preview magnification over the physical print size."""

# ---------------------------------------------------------------------------
# Canvas
# ---------------------------------------------------------------------------
CANVAS_PADDING: float = 20.0
"""Padding around the canvas in the preview SVG."""

TITLE_HEIGHT: float = 28.0
"""Space reserved above the canvas when the figure has a title."""

# ---------------------------------------------------------------------------
# Plot annotations
# ---------------------------------------------------------------------------
ID_INSET: float = 4.0
"""Inset of the plot id from the plot's top-left corner."""

CELL_INDEX_FONT_SIZE: float = 8.0
"""Font size of the (column, row) cell index in the grid overlay."""
