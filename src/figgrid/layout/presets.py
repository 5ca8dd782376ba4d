"""Named starting configurations.

Each preset is a set of overrides on top of the defaults, all in cm.
Asking for another unit converts the preset before the caller's own
overrides apply, so a preset always describes the same physical figure.
"""

from __future__ import annotations

import dataclasses
from typing import Any

from figgrid.layout.errors import ConfigurationError
from figgrid.layout.units import convert_unit
from figgrid.parser.model import FigureConfig, Unit

PRESETS: dict[str, dict[str, Any]] = {
    # One-column-wide journal figure with a single axis
    "default": {},
    "presentation": {
        "total_width": 15.0,
        "total_height": 12.0,
        "font_size": 16.0,
        "cbar_width": 0.5,
        "cbar_padding": 0.2,
        "bottom_outer_padding": 2.1,
        "left_outer_padding": 2.9,
    },
    "tight": {
        "left_padding": 0.05,
        "right_padding": 0.05,
        "top_padding": 0.05,
        "bottom_padding": 0.05,
        "top_outer_padding": 0.05,
        "right_outer_padding": 0.05,
    },
    # Every cell carries its own tick-label room
    "sparse": {
        "left_padding": 1.1,
        "right_padding": 0.0,
        "top_padding": 0.1,
        "bottom_padding": 1.0,
        "top_outer_padding": 0.0,
        "right_outer_padding": 0.1,
        "left_outer_padding": 0.0,
        "bottom_outer_padding": 0.0,
    },
}


def preset_config(name: str = "default", **overrides: Any) -> FigureConfig:
    """Build a configuration from preset ``name`` with ``overrides`` applied.

    Overrides are taken in ``unit`` (cm unless given); the preset values
    are converted to that unit first.
    """
    try:
        values = dict(PRESETS[name])
    except KeyError:
        raise ConfigurationError(
            f"Unknown preset {name!r}. Available: {', '.join(PRESETS)}"
        ) from None
    unit = Unit.parse(overrides.pop("unit", Unit.CM))
    config = FigureConfig(**values)
    if unit is not Unit.CM:
        config = convert_unit(config, Unit.CM, unit)
    return dataclasses.replace(config, **overrides)
