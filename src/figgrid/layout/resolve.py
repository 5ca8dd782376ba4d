"""Weight vector and padding resolution.

Weights are reconciled to the grid size (trimmed or padded with 1).
Paddings are either one value for every row/column or one value per
row/column; both reduce through the same helpers so callers never branch
on the representation.
"""

from __future__ import annotations

from collections.abc import Sequence

from figgrid.layout.errors import ConfigurationError, OutOfBoundsError
from figgrid.parser.model import Padding, PerGap, Uniform


def resolve_weights(weights: Sequence[float], target_length: int) -> tuple[float, ...]:
    """Trim or pad ``weights`` with neutral 1.0 entries to ``target_length``."""
    resolved = tuple(weights[:target_length])
    if len(resolved) < target_length:
        resolved += (1.0,) * (target_length - len(resolved))
    return resolved


def check_padding_length(padding: Padding, count: int, name: str = "padding") -> None:
    """Raise if a per-gap padding holds fewer values than ``count``."""
    if isinstance(padding, PerGap) and len(padding.values) < count:
        raise ConfigurationError(
            f"{name} has {len(padding.values)} values but the grid needs {count}"
        )


def gap_value(padding: Padding, index: int, count: int) -> float:
    """Return the padding of row/column ``index`` (1-indexed) out of ``count``."""
    if not 1 <= index <= count:
        raise OutOfBoundsError(f"Gap index {index} outside [1, {count}]")
    if isinstance(padding, Uniform):
        return padding.value
    check_padding_length(padding, count)
    return padding.values[index - 1]


def sum_of_gaps(padding: Padding, start: int, stop: int) -> float:
    """Sum paddings of rows/columns ``start`` to ``stop`` inclusive (1-indexed).

    Empty ranges sum to zero. Per-gap ranges running past the stored
    values sum only what is stored.
    """
    if stop < start:
        return 0.0
    if isinstance(padding, Uniform):
        return padding.value * (stop - start + 1)
    return sum(padding.values[max(start, 1) - 1:stop])
