"""Data model for figure grid layouts."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from figgrid.layout import constants as C
from figgrid.layout.errors import ConfigurationError, InvalidCornerError, InvalidUnitError


class Unit(Enum):
    """Physical unit of every length in a configuration."""

    CM = "cm"
    IN = "in"

    @classmethod
    def parse(cls, value: Unit | str) -> Unit:
        """Return the unit for ``value``, accepting enum members or names."""
        if isinstance(value, Unit):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidUnitError(
                f"Unknown unit {value!r}. Must be either 'cm' or 'in'."
            ) from None


class Corner(Enum):
    """Cell corner a text label is anchored to."""

    TOP_LEFT = "topleft"
    TOP_RIGHT = "topright"
    BOTTOM_LEFT = "bottomleft"
    BOTTOM_RIGHT = "bottomright"

    @classmethod
    def parse(cls, value: Corner | str) -> Corner:
        if isinstance(value, Corner):
            return value
        key = str(value).strip().lower().replace("-", "").replace("_", "")
        try:
            return cls(key)
        except ValueError:
            raise InvalidCornerError(
                f"Unknown label corner {value!r}. Must be one of "
                f"{', '.join(c.value for c in cls)}."
            ) from None

    @property
    def is_top(self) -> bool:
        return self in (Corner.TOP_LEFT, Corner.TOP_RIGHT)

    @property
    def is_left(self) -> bool:
        return self in (Corner.TOP_LEFT, Corner.BOTTOM_LEFT)


@dataclass(frozen=True)
class Uniform:
    """The same padding on this side of every row or column."""

    value: float

    @property
    def values(self) -> tuple[float, ...]:
        return (self.value,)

    def mean(self) -> float:
        return self.value

    def scaled(self, factor: float) -> Uniform:
        return Uniform(self.value * factor)


@dataclass(frozen=True)
class PerGap:
    """One padding value per row or column, in grid order."""

    values: tuple[float, ...]

    def mean(self) -> float:
        return sum(self.values) / len(self.values)

    def scaled(self, factor: float) -> PerGap:
        return PerGap(tuple(v * factor for v in self.values))


Padding = Uniform | PerGap


def as_padding(value: Padding | float | Sequence[float]) -> Padding:
    """Coerce a scalar or a sequence into a padding variant.

    A one-element sequence is treated as a scalar.
    """
    if isinstance(value, (Uniform, PerGap)):
        return value
    if isinstance(value, (int, float)):
        return Uniform(float(value))
    values = tuple(float(v) for v in value)
    if not values:
        raise ConfigurationError("Padding sequence must not be empty")
    if len(values) == 1:
        return Uniform(values[0])
    return PerGap(values)


_CM_DEFAULTS: dict[str, float] = {
    "total_width": C.TOTAL_WIDTH,
    "total_height": C.TOTAL_HEIGHT,
    "left_outer_padding": C.LEFT_OUTER_PADDING,
    "right_outer_padding": C.RIGHT_OUTER_PADDING,
    "top_outer_padding": C.TOP_OUTER_PADDING,
    "bottom_outer_padding": C.BOTTOM_OUTER_PADDING,
    "left_padding": C.INTERNAL_PADDING,
    "right_padding": C.INTERNAL_PADDING,
    "top_padding": C.INTERNAL_PADDING,
    "bottom_padding": C.INTERNAL_PADDING,
    "cbar_width": C.CBAR_WIDTH,
    "cbar_padding": C.CBAR_PADDING,
}


@dataclass(frozen=True)
class FigureConfig:
    """Immutable description of a figure's canvas and grid.

    Every length is expressed in ``unit``. A length left as ``None`` takes
    its default, which is defined in cm and converted to ``unit``, so
    ``FigureConfig(unit="in")`` describes the same physical figure as
    ``FigureConfig()``. Internal paddings are indexed per column
    (left/right) and per row (top/bottom); a per-gap sequence must hold
    at least one value per column or row.
    """

    total_width: float | None = None
    total_height: float | None = None
    left_outer_padding: float | None = None
    right_outer_padding: float | None = None
    top_outer_padding: float | None = None
    bottom_outer_padding: float | None = None
    left_padding: Padding | None = None
    right_padding: Padding | None = None
    top_padding: Padding | None = None
    bottom_padding: Padding | None = None
    num_columns: int = 1
    num_rows: int = 1
    col_width_weights: tuple[float, ...] = (1.0,)
    row_height_weights: tuple[float, ...] = (1.0,)
    font_size: float = C.FONT_SIZE
    cbar_width: float | None = None
    cbar_padding: float | None = None
    unit: Unit = Unit.CM

    def __post_init__(self) -> None:
        # Frozen: normalize through object.__setattr__
        object.__setattr__(self, "unit", Unit.parse(self.unit))
        scale = 1.0 if self.unit is Unit.CM else 1 / C.CM_PER_INCH
        for name, default in _CM_DEFAULTS.items():
            if getattr(self, name) is None:
                object.__setattr__(self, name, default * scale)
        for name in PADDING_FIELDS:
            object.__setattr__(self, name, as_padding(getattr(self, name)))
        for name in WEIGHT_FIELDS:
            weights = getattr(self, name)
            if isinstance(weights, (int, float)):
                weights = (weights,)
            object.__setattr__(self, name, tuple(float(w) for w in weights))
        self._validate()

    def _validate(self) -> None:
        for name in LENGTH_FIELDS:
            if getattr(self, name) < 0:
                raise ConfigurationError(
                    f"{name} must be non-negative, got {getattr(self, name)}"
                )
        for name in PADDING_FIELDS:
            if any(v < 0 for v in getattr(self, name).values):
                raise ConfigurationError(f"{name} values must be non-negative")
        for name in ("num_columns", "num_rows"):
            count = getattr(self, name)
            if count < 0 or count != int(count):
                raise ConfigurationError(
                    f"{name} must be a non-negative integer, got {count}"
                )
        for name in WEIGHT_FIELDS:
            weights = getattr(self, name)
            if not weights:
                raise ConfigurationError(f"{name} must not be empty")
            if any(not 0 < w <= 1 for w in weights):
                raise ConfigurationError(
                    f"{name} values must lie in (0, 1], got {list(weights)}"
                )
        if self.font_size <= 0:
            raise ConfigurationError(
                f"font_size must be positive, got {self.font_size}"
            )


LENGTH_FIELDS: tuple[str, ...] = (
    "total_width",
    "total_height",
    "left_outer_padding",
    "right_outer_padding",
    "top_outer_padding",
    "bottom_outer_padding",
    "cbar_width",
    "cbar_padding",
)
"""Scalar physical lengths, scaled by unit conversion."""

PADDING_FIELDS: tuple[str, ...] = (
    "left_padding",
    "right_padding",
    "top_padding",
    "bottom_padding",
)
"""Internal paddings, scaled by unit conversion."""

WEIGHT_FIELDS: tuple[str, ...] = ("col_width_weights", "row_height_weights")


@dataclass
class PlotEntry:
    """A plot placed on the grid, starting at a 1-indexed (column, row).

    ``None`` spans mean that no span was requested: the plot takes a
    single cell and a start cell outside the grid is only a warning.
    """

    id: str
    column: int
    row: int
    column_span: int | None = None
    row_span: int | None = None

    @property
    def has_span(self) -> bool:
        return self.column_span is not None or self.row_span is not None


@dataclass
class LabelSpec:
    """A corner label attached to a plot."""

    plot_id: str
    corner: Corner
    text: str


@dataclass
class FigureSpec:
    """Complete figure definition: configuration plus the caller's plots."""

    title: str = ""
    config: FigureConfig = field(default_factory=FigureConfig)
    plots: dict[str, PlotEntry] = field(default_factory=dict)
    colorbars: list[str] = field(default_factory=list)
    labels: list[LabelSpec] = field(default_factory=list)

    def add_plot(self, plot: PlotEntry) -> None:
        self.plots[plot.id] = plot

    def add_colorbar(self, plot_id: str) -> None:
        if plot_id not in self.colorbars:
            self.colorbars.append(plot_id)

    def add_label(self, label: LabelSpec) -> None:
        self.labels.append(label)

    def plot_labels(self, plot_id: str) -> list[LabelSpec]:
        """Return labels attached to a plot, in definition order."""
        return [lb for lb in self.labels if lb.plot_id == plot_id]
