"""Parser for figure layout files (``.fgl``).

Uses a simple line-by-line approach. A layout file holds ``%%figure``
directives that set up the canvas and grid, followed by plot, colorbar
and label statements::

    %%figure title: Two panels
    %%figure preset: tight
    %%figure size: 17.2 x 8.6
    %%figure grid: 2 x 1
    %%figure left_padding: 1.1, 0.6

    plot a at 1,1
    plot b at 2,1 span 1x1
    colorbar b
    label a topleft (a)

Lengths are in the unit given by ``%%figure unit:`` (cm by default).
Preset values are defined in cm and converted when the file uses inches.
Other ``%%`` lines are comments.
"""

from __future__ import annotations

import re
from typing import Any

from figgrid.layout.errors import FigGridError
from figgrid.layout.presets import preset_config
from figgrid.parser.model import (
    LENGTH_FIELDS,
    PADDING_FIELDS,
    WEIGHT_FIELDS,
    Corner,
    FigureSpec,
    LabelSpec,
    PlotEntry,
    Unit,
)

_DIRECTIVE_PATTERN = re.compile(r"^%%figure\s+([\w-]+)\s*:\s*(.*)$")
_PLOT_PATTERN = re.compile(
    r"^plot\s+(\w+)\s+at\s+(\d+)\s*,\s*(\d+)"
    r"(?:\s+span\s+(\d+)\s*x\s*(\d+))?\s*$"
)
_COLORBAR_PATTERN = re.compile(r"^colorbar\s+(\w+)\s*$")
_LABEL_PATTERN = re.compile(r"^label\s+(\w+)\s+([\w-]+)\s+(.+)$")
_PAIR_PATTERN = re.compile(r"^([\d.]+)\s*x\s*([\d.]+)$")

_INT_FIELDS = ("num_columns", "num_rows")


def parse_figure(text: str) -> FigureSpec:
    """Parse a layout file into a :class:`FigureSpec`.

    Raises ``ValueError`` naming the offending line for malformed input
    and :class:`ConfigurationError` for values the model rejects.
    """
    spec = FigureSpec()
    preset = "default"
    unit = Unit.CM
    overrides: dict[str, Any] = {}

    for lineno, line in enumerate(text.split("\n"), start=1):
        stripped = line.strip()
        if not stripped:
            continue

        directive_m = _DIRECTIVE_PATTERN.match(stripped)
        if directive_m:
            key = directive_m.group(1).replace("-", "_").lower()
            value = directive_m.group(2).strip()
            try:
                if key == "title":
                    spec.title = value
                elif key == "preset":
                    preset = value
                elif key == "unit":
                    unit = Unit.parse(value)
                else:
                    overrides.update(_parse_config_value(key, value))
            except (ValueError, FigGridError) as e:
                raise ValueError(f"Line {lineno}: {e}") from e
            continue

        # Regular comments
        if stripped.startswith("%%"):
            continue

        try:
            _parse_statement(stripped, spec)
        except ValueError as e:
            raise ValueError(f"Line {lineno}: {e}") from e

    spec.config = preset_config(preset, unit=unit, **overrides)
    return spec


def _parse_config_value(key: str, value: str) -> dict[str, Any]:
    """Parse one configuration directive into config field overrides."""
    if key == "size":
        width, height = _parse_pair(value)
        return {"total_width": width, "total_height": height}
    if key == "grid":
        columns, rows = _parse_pair(value)
        return {"num_columns": _as_int(columns), "num_rows": _as_int(rows)}
    if key in _INT_FIELDS:
        return {key: _as_int(_parse_float(value))}
    if key in LENGTH_FIELDS or key == "font_size":
        return {key: _parse_float(value)}
    if key in PADDING_FIELDS or key in WEIGHT_FIELDS:
        return {key: _parse_list(value)}
    raise ValueError(f"Unknown directive '{key}'")


def _parse_statement(line: str, spec: FigureSpec) -> None:
    plot_m = _PLOT_PATTERN.match(line)
    if plot_m:
        plot_id = plot_m.group(1)
        if plot_id in spec.plots:
            raise ValueError(f"Duplicate plot '{plot_id}'")
        spans = plot_m.group(4), plot_m.group(5)
        spec.add_plot(PlotEntry(
            id=plot_id,
            column=int(plot_m.group(2)),
            row=int(plot_m.group(3)),
            column_span=int(spans[0]) if spans[0] else None,
            row_span=int(spans[1]) if spans[1] else None,
        ))
        return

    colorbar_m = _COLORBAR_PATTERN.match(line)
    if colorbar_m:
        spec.add_colorbar(colorbar_m.group(1))
        return

    label_m = _LABEL_PATTERN.match(line)
    if label_m:
        spec.add_label(LabelSpec(
            plot_id=label_m.group(1),
            corner=Corner.parse(label_m.group(2)),
            text=label_m.group(3).strip(),
        ))
        return

    raise ValueError(f"Cannot parse statement: {line!r}")


def _parse_float(value: str) -> float:
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"Expected a number, got {value!r}") from None


def _as_int(value: float) -> int:
    if value != int(value):
        raise ValueError(f"Expected a whole number, got {value}")
    return int(value)


def _parse_pair(value: str) -> tuple[float, float]:
    pair_m = _PAIR_PATTERN.match(value)
    if not pair_m:
        raise ValueError(f"Expected '<a> x <b>', got {value!r}")
    return float(pair_m.group(1)), float(pair_m.group(2))


def _parse_list(value: str) -> list[float]:
    items = [v.strip() for v in value.split(",") if v.strip()]
    if not items:
        raise ValueError("Expected at least one number")
    return [_parse_float(v) for v in items]
