"""SVG previews of figure layouts."""

from figgrid.render.svg import render_svg

__all__ = ["render_svg"]
