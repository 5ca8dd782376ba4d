#!/usr/bin/env python3
"""Batch render every example layout file to an SVG preview.

Outputs go to /tmp/figgrid_example_renders/.

Usage:
    python scripts/render_examples.py [--theme dark] [--exact-gaps]
"""

from __future__ import annotations

import argparse
import sys
import warnings
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from figgrid.layout.errors import StartOverrunWarning  # noqa: E402
from figgrid.layout.placement import place_figure  # noqa: E402
from figgrid.parser import parse_figure  # noqa: E402
from figgrid.render import render_svg  # noqa: E402
from figgrid.themes import THEMES  # noqa: E402

OUTPUT_DIR = Path("/tmp/figgrid_example_renders")
EXAMPLES_DIR = project_root / "examples"


def render_file(
    fgl_path: Path, output_dir: Path, theme: str, *, exact_gaps: bool = False
) -> tuple[str, list[str]]:
    """Parse, place, and render a .fgl file to SVG.

    Returns (name, list_of_issues).
    """
    name = fgl_path.stem
    issues: list[str] = []

    try:
        spec = parse_figure(fgl_path.read_text())
    except ValueError as e:
        return name, [f"PARSE ERROR: {e}"]

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", StartOverrunWarning)
        try:
            placement = place_figure(spec, exact_gaps=exact_gaps)
        except ValueError as e:
            return name, [f"LAYOUT ERROR: {e}"]
    issues.extend(str(w.message) for w in caught)

    svg_str = render_svg(spec, THEMES[theme], placement=placement)
    svg_path = output_dir / f"{name}.svg"
    svg_path.write_text(svg_str)

    return name, issues


def main():
    parser = argparse.ArgumentParser(description="Batch render example layouts")
    parser.add_argument(
        "--theme", choices=sorted(THEMES), default="light", help="Preview theme"
    )
    parser.add_argument(
        "--exact-gaps", action="store_true",
        help="Sum per-gap paddings exactly instead of by their mean",
    )
    args = parser.parse_args()

    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)

    all_files = sorted(EXAMPLES_DIR.glob("*.fgl"))
    print(f"Rendering {len(all_files)} files to {OUTPUT_DIR}/")
    print()

    max_name_len = max(len(f.stem) for f in all_files)
    any_errors = False

    for fgl_path in all_files:
        name, issues = render_file(
            fgl_path, OUTPUT_DIR, args.theme, exact_gaps=args.exact_gaps
        )
        status = "OK" if not issues else "ISSUES"
        if any("ERROR" in i for i in issues):
            status = "FAIL"
            any_errors = True

        print(f"  {name:<{max_name_len}}  [{status}]")
        for issue in issues:
            print(f"    - {issue}")

    print(f"\nOutputs in: {OUTPUT_DIR}/")

    if any_errors:
        sys.exit(1)


if __name__ == "__main__":
    main()
