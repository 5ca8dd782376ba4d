"""Layout constants used across layout modules.

Defaults reproduce a square figure with a single axis, sized for a
one-column-wide figure in a two-column journal layout. All physical
defaults are in centimeters.
"""

# ---------------------------------------------------------------------------
# Unit conversion
# ---------------------------------------------------------------------------
CM_PER_INCH: float = 2.54
"""Centimeters per inch."""

POINTS_PER_INCH: float = 72.0
"""Typographic points per inch."""

# ---------------------------------------------------------------------------
# Canvas
# ---------------------------------------------------------------------------
TOTAL_WIDTH: float = 8.6
"""Default canvas width."""

TOTAL_HEIGHT: float = 8.6
"""Default canvas height."""

# ---------------------------------------------------------------------------
# Outer paddings (consumed once, outside the grid)
# ---------------------------------------------------------------------------
LEFT_OUTER_PADDING: float = 1.1
"""Room for y tick labels and the y axis label."""

RIGHT_OUTER_PADDING: float = 0.1

TOP_OUTER_PADDING: float = 0.1

BOTTOM_OUTER_PADDING: float = 1.0
"""Room for x tick labels and the x axis label."""

# ---------------------------------------------------------------------------
# Internal paddings (per row / column)
# ---------------------------------------------------------------------------
INTERNAL_PADDING: float = 0.0
"""Default padding on every side of every cell."""

# ---------------------------------------------------------------------------
# Text and colorbars
# ---------------------------------------------------------------------------
FONT_SIZE: float = 8.0
"""Default label font size in points."""

CBAR_WIDTH: float = 0.2
"""Default colorbar width."""

CBAR_PADDING: float = 0.1
"""Default gap between a cell and its colorbar."""

LABEL_INSET_X: float = 0.1
"""Horizontal distance of a corner label from the cell edge."""

LABEL_INSET_Y: float = 0.1
"""Vertical distance of a corner label's edge from the cell edge."""

# ---------------------------------------------------------------------------
# Tolerances
# ---------------------------------------------------------------------------
LAYOUT_TOLERANCE: float = 1e-9
"""Tolerance for normalized coordinate comparisons."""
