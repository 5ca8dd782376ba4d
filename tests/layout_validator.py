"""Layout validator: programmatic checks for placement defects.

Runs a suite of checks against a placed figure and returns a list of
Violation objects describing any problems found.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from figgrid.layout.constants import LAYOUT_TOLERANCE
from figgrid.layout.engine import Rect
from figgrid.layout.placement import FigurePlacement


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass
class Violation:
    check: str
    severity: Severity
    message: str
    context: dict = field(default_factory=dict)


def validate_placement(placement: FigurePlacement) -> list[Violation]:
    """Run all placement checks and return violations."""
    violations: list[Violation] = []
    violations.extend(check_plot_overlap(placement))
    violations.extend(check_canvas_containment(placement))
    violations.extend(check_label_containment(placement))
    violations.extend(check_positive_size(placement))
    return violations


def _fmt(rect: Rect) -> str:
    return f"({rect.left:.3f},{rect.bottom:.3f},{rect.right:.3f},{rect.top:.3f})"


def check_plot_overlap(
    placement: FigurePlacement, tolerance: float = LAYOUT_TOLERANCE
) -> list[Violation]:
    """Check that no two plots or colorbars overlap.

    Flush (touching) rectangles are allowed.
    """
    violations: list[Violation] = []
    rects = [(f"plot '{pid}'", r) for pid, r in placement.plots.items()]
    rects += [(f"colorbar '{pid}'", r) for pid, r in placement.colorbars.items()]

    for i in range(len(rects)):
        name_a, a = rects[i]
        for j in range(i + 1, len(rects)):
            name_b, b = rects[j]
            overlap_x = a.right - tolerance > b.left and b.right - tolerance > a.left
            overlap_y = a.top - tolerance > b.bottom and b.top - tolerance > a.bottom
            if overlap_x and overlap_y:
                violations.append(
                    Violation(
                        check="plot_overlap",
                        severity=Severity.ERROR,
                        message=f"{name_a} {_fmt(a)} overlaps {name_b} {_fmt(b)}",
                        context={"a": name_a, "b": name_b},
                    )
                )

    return violations


def check_canvas_containment(
    placement: FigurePlacement, tolerance: float = LAYOUT_TOLERANCE
) -> list[Violation]:
    """Check that every plot and colorbar lies inside the unit canvas."""
    violations: list[Violation] = []
    rects = [(f"plot '{pid}'", r) for pid, r in placement.plots.items()]
    rects += [(f"colorbar '{pid}'", r) for pid, r in placement.colorbars.items()]

    for name, rect in rects:
        inside = (
            rect.left >= -tolerance
            and rect.bottom >= -tolerance
            and rect.right <= 1 + tolerance
            and rect.top <= 1 + tolerance
        )
        if not inside:
            violations.append(
                Violation(
                    check="canvas_containment",
                    severity=Severity.ERROR,
                    message=f"{name} {_fmt(rect)} extends past the canvas",
                    context={"rect": name},
                )
            )

    return violations


def check_label_containment(placement: FigurePlacement) -> list[Violation]:
    """Check that every label anchor lies inside its plot."""
    violations: list[Violation] = []

    for label in placement.labels:
        host = placement.plots[label.plot_id]
        if not (
            host.left <= label.canvas_x <= host.right
            and host.bottom <= label.canvas_y <= host.top
        ):
            violations.append(
                Violation(
                    check="label_containment",
                    severity=Severity.WARNING,
                    message=(
                        f"Label '{label.local.text}' at "
                        f"({label.canvas_x:.3f},{label.canvas_y:.3f}) is outside "
                        f"plot '{label.plot_id}' {_fmt(host)}"
                    ),
                    context={"plot": label.plot_id},
                )
            )

    return violations


def check_positive_size(placement: FigurePlacement) -> list[Violation]:
    """Check that every plot has a positive width and height."""
    violations: list[Violation] = []

    for pid, rect in placement.plots.items():
        if rect.width <= 0 or rect.height <= 0:
            violations.append(
                Violation(
                    check="positive_size",
                    severity=Severity.ERROR,
                    message=f"Plot '{pid}' has empty size {_fmt(rect)}",
                    context={"plot": pid},
                )
            )

    return violations
