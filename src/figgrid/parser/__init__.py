"""Layout file parsing and the figure data model."""

from figgrid.parser.directives import parse_figure

__all__ = ["parse_figure"]
