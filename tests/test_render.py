"""Tests for SVG rendering."""

import xml.etree.ElementTree as ET

from figgrid.layout.placement import place_figure
from figgrid.parser.directives import parse_figure
from figgrid.render.svg import render_svg
from figgrid.themes import DARK_THEME, LIGHT_THEME

SIMPLE = (
    "%%figure title: Test figure\n"
    "%%figure grid: 2 x 1\n"
    "%%figure size: 17.2 x 8.6\n"
    "%%figure right_outer_padding: 0.5\n"
    "plot left at 1,1\n"
    "plot right at 2,1\n"
    "colorbar right\n"
    "label left topleft (a)\n"
)


def _render_simple(theme=LIGHT_THEME, **kwargs):
    spec = parse_figure(SIMPLE)
    return render_svg(spec, theme, **kwargs)


def test_render_produces_valid_svg():
    svg = _render_simple()
    root = ET.fromstring(svg)
    assert root.tag.endswith("svg") or "svg" in root.tag


def test_render_contains_title():
    svg = _render_simple()
    assert "Test figure" in svg


def test_render_contains_plot_ids():
    svg = _render_simple()
    assert ">left<" in svg
    assert ">right<" in svg


def test_render_contains_label_text():
    svg = _render_simple()
    assert "(a)" in svg


def test_render_colorbar_stroke():
    svg = _render_simple()
    assert LIGHT_THEME.colorbar_stroke in svg


def test_render_grid_overlay():
    assert "2,1" in _render_simple()
    assert "2,1" not in _render_simple(show_grid=False)


def test_render_dark_theme_background():
    svg = _render_simple(DARK_THEME)
    assert DARK_THEME.background_color in svg


def test_render_accepts_precomputed_placement():
    spec = parse_figure(SIMPLE)
    placement = place_figure(spec)
    assert render_svg(spec, LIGHT_THEME, placement=placement) == render_svg(
        spec, LIGHT_THEME
    )


def test_zoom_scales_canvas():
    small = ET.fromstring(_render_simple(zoom=1.0))
    large = ET.fromstring(_render_simple(zoom=2.0))
    assert float(large.get("width")) > float(small.get("width"))


def test_render_without_title():
    spec = parse_figure("plot a at 1,1\n")
    svg = render_svg(spec, LIGHT_THEME)
    ET.fromstring(svg)
    assert "bold" not in svg
