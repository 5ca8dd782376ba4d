"""Physical lengths and cm/in conversion of whole configurations."""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass

from figgrid.layout.constants import CM_PER_INCH, POINTS_PER_INCH
from figgrid.layout.errors import InvalidUnitError
from figgrid.parser.model import (
    LENGTH_FIELDS,
    PADDING_FIELDS,
    FigureConfig,
    PerGap,
    Uniform,
    Unit,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Length:
    """A physical length tagged with its unit."""

    value: float
    unit: Unit = Unit.CM

    def __post_init__(self) -> None:
        object.__setattr__(self, "unit", Unit.parse(self.unit))

    def to(self, unit: Unit | str) -> Length:
        target = Unit.parse(unit)
        if target is self.unit:
            return self
        if target is Unit.CM:
            return Length(self.value * CM_PER_INCH, target)
        return Length(self.value / CM_PER_INCH, target)

    @classmethod
    def from_points(cls, points: float, unit: Unit | str = Unit.CM) -> Length:
        """Length of ``points`` typographic points, expressed in ``unit``."""
        return cls(points / POINTS_PER_INCH, Unit.IN).to(unit)


def convert_unit(
    config: FigureConfig,
    from_unit: Unit | str,
    to_unit: Unit | str,
) -> FigureConfig:
    """Re-express every physical length of ``config`` in ``to_unit``.

    Weights, grid counts and the font size (in points) are unit-free and
    stay untouched. Each length is multiplied or divided by the same
    2.54 constant, so a cm -> in -> cm round trip reproduces the input
    up to floating-point rounding.
    """
    src = Unit.parse(from_unit)
    dst = Unit.parse(to_unit)
    if config.unit is not src:
        raise InvalidUnitError(
            f"Configuration is in {config.unit.value}, not {src.value}"
        )
    if src is dst:
        return config

    def _convert(value: float) -> float:
        if dst is Unit.CM:
            return value * CM_PER_INCH
        return value / CM_PER_INCH

    changes: dict[str, object] = {
        name: _convert(getattr(config, name)) for name in LENGTH_FIELDS
    }
    for name in PADDING_FIELDS:
        padding = getattr(config, name)
        if isinstance(padding, Uniform):
            changes[name] = Uniform(_convert(padding.value))
        else:
            changes[name] = PerGap(tuple(_convert(v) for v in padding.values))
    changes["unit"] = dst
    logger.debug("Converting configuration from %s to %s", src.value, dst.value)
    return dataclasses.replace(config, **changes)
