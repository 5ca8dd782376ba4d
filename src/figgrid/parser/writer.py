"""Write a :class:`FigureSpec` back to layout file text.

Every configuration field is written explicitly (no preset), so the
output reproduces the figure exactly when parsed again.
"""

from __future__ import annotations

from figgrid.parser.model import (
    LENGTH_FIELDS,
    PADDING_FIELDS,
    WEIGHT_FIELDS,
    FigureSpec,
)


def _fmt(value: float) -> str:
    return repr(float(value))


def format_figure_spec(spec: FigureSpec) -> str:
    """Return the layout file text for ``spec``, ending with a newline."""
    config = spec.config
    out_lines: list[str] = []

    if spec.title:
        out_lines.append(f"%%figure title: {spec.title}")
    out_lines.append(f"%%figure unit: {config.unit.value}")
    out_lines.append(f"%%figure grid: {config.num_columns} x {config.num_rows}")
    for name in LENGTH_FIELDS:
        out_lines.append(f"%%figure {name}: {_fmt(getattr(config, name))}")
    out_lines.append(f"%%figure font_size: {_fmt(config.font_size)}")
    for name in PADDING_FIELDS:
        values = getattr(config, name).values
        out_lines.append(f"%%figure {name}: {', '.join(_fmt(v) for v in values)}")
    for name in WEIGHT_FIELDS:
        values = getattr(config, name)
        out_lines.append(f"%%figure {name}: {', '.join(_fmt(v) for v in values)}")

    if spec.plots:
        out_lines.append("")
    for plot in spec.plots.values():
        line = f"plot {plot.id} at {plot.column},{plot.row}"
        if plot.has_span:
            line += f" span {plot.column_span or 1}x{plot.row_span or 1}"
        out_lines.append(line)

    for plot_id in spec.colorbars:
        out_lines.append(f"colorbar {plot_id}")

    for label in spec.labels:
        out_lines.append(f"label {label.plot_id} {label.corner.value} {label.text}")

    return "\n".join(out_lines) + "\n"
