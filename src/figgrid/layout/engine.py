"""Layout calculator and rectangle solver.

Turns a :class:`FigureConfig` into normalized canvas fractions
(:func:`compute_layout`), then places cells and multi-cell spans on the
canvas (:func:`rectangle`). Coordinates are fractions of the canvas with
the origin at its lower-left corner. Rows are numbered from the top but
stacked from the bottom; :func:`row_from_bottom` is the single place that
turns one into the other.
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Iterator
from dataclasses import dataclass

from figgrid.layout.errors import (
    ConfigurationError,
    OutOfBoundsError,
    StartOverrunWarning,
)
from figgrid.layout.resolve import (
    check_padding_length,
    gap_value,
    resolve_weights,
    sum_of_gaps,
)
from figgrid.parser.model import FigureConfig, Padding, Unit

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle as (left, bottom, width, height)."""

    left: float
    bottom: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def top(self) -> float:
        return self.bottom + self.height

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.left, self.bottom, self.width, self.height)

    def scaled(self, sx: float, sy: float) -> Rect:
        return Rect(self.left * sx, self.bottom * sy, self.width * sx, self.height * sy)


@dataclass(frozen=True)
class Layout:
    """Configuration re-expressed as fractions of the canvas.

    ``cell_width`` and ``cell_height`` are the size of one unit of weight:
    a column of weight ``w`` is ``w * cell_width`` wide.
    """

    lop: float
    rop: float
    top: float
    bop: float
    lp: Padding
    rp: Padding
    tp: Padding
    bp: Padding
    cell_width: float
    cell_height: float
    col_weights: tuple[float, ...]
    row_weights: tuple[float, ...]
    num_columns: int
    num_rows: int
    total_width: float
    total_height: float
    unit: Unit = Unit.CM

    def to_physical(self, rect: Rect) -> Rect:
        """Scale a normalized rectangle back to lengths in ``unit``."""
        return rect.scaled(self.total_width, self.total_height)

    def horizontal_total(self) -> float:
        """Sum of every horizontal share of the canvas (1.0 when consistent)."""
        return (
            self.lop
            + self.rop
            + sum_of_gaps(self.lp, 1, self.num_columns)
            + sum_of_gaps(self.rp, 1, self.num_columns)
            + self.cell_width * sum(self.col_weights)
        )

    def vertical_total(self) -> float:
        """Sum of every vertical share of the canvas (1.0 when consistent)."""
        return (
            self.top
            + self.bop
            + sum_of_gaps(self.tp, 1, self.num_rows)
            + sum_of_gaps(self.bp, 1, self.num_rows)
            + self.cell_height * sum(self.row_weights)
        )


def _gap_share(first: Padding, second: Padding, count: int, exact_gaps: bool) -> float:
    """Fraction of the canvas taken by internal paddings along one axis.

    By default both paddings contribute their mean once per row/column,
    which is exact when a per-gap padding has exactly ``count`` values.
    ``exact_gaps`` sums the first ``count`` values of each instead.
    """
    if exact_gaps:
        return sum_of_gaps(first, 1, count) + sum_of_gaps(second, 1, count)
    return (first.mean() + second.mean()) * count


def compute_layout(config: FigureConfig, exact_gaps: bool = False) -> Layout:
    """Derive normalized paddings and unit cell sizes from ``config``.

    Raises :class:`ConfigurationError` when the grid or the canvas has a
    zero dimension, when a per-gap padding is too short for the grid, or
    when paddings leave no room for the cells.
    """
    if config.num_columns == 0 or config.num_rows == 0:
        raise ConfigurationError(
            f"Grid must have at least one column and one row, got "
            f"{config.num_columns}x{config.num_rows}"
        )
    if config.total_width == 0 or config.total_height == 0:
        raise ConfigurationError(
            f"Canvas must have a non-zero size, got "
            f"{config.total_width}x{config.total_height} {config.unit.value}"
        )
    num_columns = int(config.num_columns)
    num_rows = int(config.num_rows)
    check_padding_length(config.left_padding, num_columns, "left_padding")
    check_padding_length(config.right_padding, num_columns, "right_padding")
    check_padding_length(config.top_padding, num_rows, "top_padding")
    check_padding_length(config.bottom_padding, num_rows, "bottom_padding")

    col_weights = resolve_weights(config.col_width_weights, num_columns)
    row_weights = resolve_weights(config.row_height_weights, num_rows)

    width = config.total_width
    lop = config.left_outer_padding / width
    rop = config.right_outer_padding / width
    lp = config.left_padding.scaled(1 / width)
    rp = config.right_padding.scaled(1 / width)
    cell_width = (
        1 - lop - rop - _gap_share(lp, rp, num_columns, exact_gaps)
    ) / sum(col_weights)

    height = config.total_height
    top = config.top_outer_padding / height
    bop = config.bottom_outer_padding / height
    tp = config.top_padding.scaled(1 / height)
    bp = config.bottom_padding.scaled(1 / height)
    cell_height = (
        1 - top - bop - _gap_share(tp, bp, num_rows, exact_gaps)
    ) / sum(row_weights)

    if cell_width <= 0:
        raise ConfigurationError(
            f"Horizontal paddings consume the whole canvas width "
            f"({config.total_width} {config.unit.value}); no room left for "
            f"{num_columns} column(s)"
        )
    if cell_height <= 0:
        raise ConfigurationError(
            f"Vertical paddings consume the whole canvas height "
            f"({config.total_height} {config.unit.value}); no room left for "
            f"{num_rows} row(s)"
        )

    logger.debug(
        "Layout %dx%d: cell %.4f x %.4f (normalized)",
        num_columns, num_rows, cell_width, cell_height,
    )
    return Layout(
        lop=lop,
        rop=rop,
        top=top,
        bop=bop,
        lp=lp,
        rp=rp,
        tp=tp,
        bp=bp,
        cell_width=cell_width,
        cell_height=cell_height,
        col_weights=col_weights,
        row_weights=row_weights,
        num_columns=num_columns,
        num_rows=num_rows,
        total_width=config.total_width,
        total_height=config.total_height,
        unit=config.unit,
    )


def row_from_bottom(row: int, row_span: int, num_rows: int) -> int:
    """Position of a rectangle's lowest row, counted from the bottom (1-indexed).

    Rows are addressed from the top, so a rectangle starting at ``row``
    and spanning ``row_span`` rows ends on row ``row + row_span - 1``.
    The bottom row of the grid is 1.
    """
    return num_rows - (row + row_span - 1) + 1


def plot_left(layout: Layout, column: int) -> float:
    """Left edge of ``column``: every column to its left plus its own left padding."""
    return (
        layout.lop
        + layout.cell_width * sum(layout.col_weights[:column - 1])
        + sum_of_gaps(layout.lp, 1, column)
        + sum_of_gaps(layout.rp, 1, column - 1)
    )


def plot_bottom(layout: Layout, row: int, row_span: int = 1) -> float:
    """Bottom edge of a rectangle whose rows start at ``row``."""
    last_row = row + row_span - 1
    if last_row == layout.num_rows:
        return gap_value(layout.bp, layout.num_rows, layout.num_rows) + layout.bop
    rows_below = row_from_bottom(row, row_span, layout.num_rows) - 1
    return (
        layout.bop
        + layout.cell_height * sum(layout.row_weights[layout.num_rows - rows_below:])
        + sum_of_gaps(layout.bp, last_row, layout.num_rows)
        + sum_of_gaps(layout.tp, last_row + 1, layout.num_rows)
    )


def plot_width(layout: Layout, column: int, column_span: int = 1) -> float:
    """Width of ``column_span`` columns plus the paddings between them."""
    last = column + column_span - 1
    return (
        layout.cell_width * sum(layout.col_weights[column - 1:last])
        + sum_of_gaps(layout.rp, column, last - 1)
        + sum_of_gaps(layout.lp, column + 1, last)
    )


def plot_height(layout: Layout, row: int, row_span: int = 1) -> float:
    """Height of ``row_span`` rows plus the paddings between them."""
    last = row + row_span - 1
    return (
        layout.cell_height * sum(layout.row_weights[row - 1:last])
        + sum_of_gaps(layout.tp, row + 1, last)
        + sum_of_gaps(layout.bp, row, last - 1)
    )


def _check_cell(
    layout: Layout,
    column: int,
    row: int,
    column_span: int | None,
    row_span: int | None,
) -> tuple[int, int]:
    if column < 1 or row < 1:
        raise OutOfBoundsError(
            f"Cells are 1-indexed, got column {column}, row {row}"
        )
    if column > layout.num_columns:
        message = (
            f"Rectangle starting at column {column} may not line up with the "
            f"figure; the grid has {layout.num_columns} column(s)"
        )
        logger.warning(message)
        warnings.warn(message, StartOverrunWarning, stacklevel=3)
    if row > layout.num_rows:
        message = (
            f"Rectangle starting at row {row} may not line up with the "
            f"figure; the grid has {layout.num_rows} row(s)"
        )
        logger.warning(message)
        warnings.warn(message, StartOverrunWarning, stacklevel=3)
    if column_span is None and row_span is None:
        return 1, 1

    column_span = 1 if column_span is None else column_span
    row_span = 1 if row_span is None else row_span
    if column_span < 1 or row_span < 1:
        raise OutOfBoundsError(
            f"Spans must be at least 1, got {column_span}x{row_span}"
        )
    if column + column_span - 1 > layout.num_columns:
        raise OutOfBoundsError(
            f"Rectangle starting at column {column} and spanning "
            f"{column_span} column(s) overruns the grid of "
            f"{layout.num_columns} column(s)"
        )
    if row + row_span - 1 > layout.num_rows:
        raise OutOfBoundsError(
            f"Rectangle starting at row {row} and spanning {row_span} row(s) "
            f"overruns the grid of {layout.num_rows} row(s)"
        )
    return column_span, row_span


def rectangle(
    column: int,
    row: int,
    column_span: int | None = None,
    row_span: int | None = None,
    *,
    layout: Layout,
) -> Rect:
    """Normalized rectangle of the cell at (``column``, ``row``), 1-indexed.

    Leaving both spans as ``None`` requests a single cell; a start cell
    outside the grid then only emits :class:`StartOverrunWarning`. Any
    explicit span is bounds-checked and raises :class:`OutOfBoundsError`
    when it runs past the grid.
    """
    column_span, row_span = _check_cell(layout, column, row, column_span, row_span)
    return Rect(
        left=plot_left(layout, column),
        bottom=plot_bottom(layout, row, row_span),
        width=plot_width(layout, column, column_span),
        height=plot_height(layout, row, row_span),
    )


def grid_rectangles(layout: Layout) -> Iterator[tuple[tuple[int, int], Rect]]:
    """Yield ``((column, row), rect)`` for every single cell, row by row."""
    for row in range(1, layout.num_rows + 1):
        for column in range(1, layout.num_columns + 1):
            yield (column, row), rectangle(column, row, layout=layout)
