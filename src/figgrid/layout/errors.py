"""Error and warning types raised by the layout engine."""

from __future__ import annotations


class FigGridError(Exception):
    """Base class for figgrid errors."""


class ConfigurationError(FigGridError, ValueError):
    """The configuration cannot produce a valid layout.

    Raised when paddings and margins leave no room for the cells, when a
    grid or canvas dimension is zero, or when a field holds a value it
    must never hold (negative lengths, weights outside (0, 1]).
    """


class OutOfBoundsError(FigGridError, ValueError):
    """A requested cell or span does not fit inside the grid."""


class InvalidCornerError(FigGridError, ValueError):
    """Unknown label corner."""


class InvalidUnitError(FigGridError, ValueError):
    """Unknown or mismatched physical unit."""


class StartOverrunWarning(UserWarning):
    """A rectangle was requested for a start cell outside the grid.

    The rectangle is still computed, but it will not line up with the
    rest of the figure.
    """
