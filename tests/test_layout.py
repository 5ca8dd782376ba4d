"""Tests for the layout calculator."""

from __future__ import annotations

import pytest

from figgrid.layout.engine import compute_layout
from figgrid.layout.errors import ConfigurationError
from figgrid.layout.presets import PRESETS, preset_config
from figgrid.parser.model import FigureConfig, PerGap, Uniform, Unit


def _grid_config(**overrides):
    values = dict(
        total_width=10.0,
        total_height=8.0,
        left_outer_padding=1.0,
        right_outer_padding=0.5,
        top_outer_padding=0.4,
        bottom_outer_padding=0.8,
        left_padding=0.2,
        right_padding=0.1,
        top_padding=0.1,
        bottom_padding=0.3,
        num_columns=3,
        num_rows=2,
    )
    values.update(overrides)
    return FigureConfig(**values)


def test_default_single_cell():
    layout = compute_layout(FigureConfig())
    assert layout.lop == pytest.approx(1.1 / 8.6)
    assert layout.rop == pytest.approx(0.1 / 8.6)
    assert layout.top == pytest.approx(0.1 / 8.6)
    assert layout.bop == pytest.approx(1.0 / 8.6)
    assert layout.cell_width == pytest.approx(7.4 / 8.6)
    assert layout.cell_height == pytest.approx(7.5 / 8.6)


def test_paddings_normalized_by_canvas():
    layout = compute_layout(_grid_config())
    assert layout.lp == Uniform(pytest.approx(0.02))
    assert layout.bp == Uniform(pytest.approx(0.3 / 8.0))


def test_uniform_cell_width():
    layout = compute_layout(_grid_config())
    # 10 - 1.0 - 0.5 - (0.2 + 0.1) * 3 = 7.6 left for three unit columns
    assert layout.cell_width == pytest.approx(7.6 / 10 / 3)
    # 8 - 0.4 - 0.8 - (0.1 + 0.3) * 2 = 6.0 left for two unit rows
    assert layout.cell_height == pytest.approx(6.0 / 8 / 2)


def test_weights_divide_available_space():
    layout = compute_layout(_grid_config(col_width_weights=(1.0, 0.5, 0.5)))
    assert layout.cell_width == pytest.approx(7.6 / 10 / 2)


def test_weights_are_resolved_to_grid():
    layout = compute_layout(
        _grid_config(col_width_weights=(0.5,), row_height_weights=(1.0, 0.5, 0.25))
    )
    assert layout.col_weights == (0.5, 1.0, 1.0)
    assert layout.row_weights == (1.0, 0.5)


@pytest.mark.parametrize(
    "overrides",
    [
        {},
        {"col_width_weights": (1.0, 0.3, 0.6), "row_height_weights": (0.2, 1.0)},
        {"left_padding": (0.1, 0.4, 0.2), "right_padding": (0.3, 0.0, 0.1)},
        {"top_padding": (0.2, 0.5), "bottom_padding": (0.0, 0.7)},
        {"num_columns": 1, "num_rows": 1},
    ],
)
def test_shares_sum_to_one(overrides):
    """Outer paddings, internal paddings and cells fill the canvas exactly."""
    layout = compute_layout(_grid_config(**overrides))
    assert layout.horizontal_total() == pytest.approx(1.0, abs=1e-9)
    assert layout.vertical_total() == pytest.approx(1.0, abs=1e-9)


# ---------------------------------------------------------------------------
# Mean-based internal padding term
# ---------------------------------------------------------------------------


class TestGapShare:
    def test_mean_term_exact_for_one_value_per_column(self):
        config = _grid_config(left_padding=(0.1, 0.4, 0.7))
        mean_layout = compute_layout(config)
        exact_layout = compute_layout(config, exact_gaps=True)
        assert mean_layout.cell_width == pytest.approx(exact_layout.cell_width)

    def test_mean_term_differs_for_extra_values(self):
        """Extra per-gap values shift the mean; exact_gaps ignores them."""
        config = _grid_config(left_padding=(0.1, 0.1, 0.1, 1.3))
        mean_layout = compute_layout(config)
        exact_layout = compute_layout(config, exact_gaps=True)
        # mean(lp) = 0.4 vs the 0.1 actually used by each of the 3 columns
        assert mean_layout.cell_width == pytest.approx(
            (1 - 0.1 - 0.05 - (0.04 + 0.01) * 3) / 3
        )
        assert exact_layout.cell_width == pytest.approx(
            (1 - 0.1 - 0.05 - (0.03 + 0.03)) / 3
        )
        assert exact_layout.horizontal_total() == pytest.approx(1.0)
        assert mean_layout.horizontal_total() != pytest.approx(1.0)


# ---------------------------------------------------------------------------
# Configuration errors
# ---------------------------------------------------------------------------


class TestConfigurationErrors:
    def test_paddings_fill_width(self):
        config = FigureConfig(left_outer_padding=4.3, right_outer_padding=4.3)
        with pytest.raises(ConfigurationError, match="width"):
            compute_layout(config)

    def test_paddings_exceed_height(self):
        config = _grid_config(top_padding=2.0, bottom_padding=2.0)
        with pytest.raises(ConfigurationError, match="height"):
            compute_layout(config)

    def test_zero_columns(self):
        with pytest.raises(ConfigurationError):
            compute_layout(FigureConfig(num_columns=0))

    def test_zero_rows(self):
        with pytest.raises(ConfigurationError):
            compute_layout(FigureConfig(num_rows=0))

    def test_zero_width(self):
        with pytest.raises(ConfigurationError):
            compute_layout(FigureConfig(total_width=0))

    def test_zero_height(self):
        with pytest.raises(ConfigurationError):
            compute_layout(FigureConfig(total_height=0))

    def test_short_padding_sequence(self):
        config = _grid_config(left_padding=(0.1, 0.2))
        with pytest.raises(ConfigurationError, match="left_padding"):
            compute_layout(config)

    def test_negative_length_rejected_at_construction(self):
        with pytest.raises(ConfigurationError):
            FigureConfig(left_outer_padding=-0.1)

    def test_negative_padding_rejected_at_construction(self):
        with pytest.raises(ConfigurationError):
            FigureConfig(num_columns=2, left_padding=(0.1, -0.1))

    def test_weight_above_one_rejected(self):
        with pytest.raises(ConfigurationError):
            FigureConfig(col_width_weights=(2.0,))

    def test_zero_weight_rejected(self):
        with pytest.raises(ConfigurationError):
            FigureConfig(row_height_weights=(1.0, 0.0))

    def test_fractional_grid_rejected(self):
        with pytest.raises(ConfigurationError):
            FigureConfig(num_columns=1.5)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            compute_layout(FigureConfig(num_rows=0))


# ---------------------------------------------------------------------------
# Configuration model
# ---------------------------------------------------------------------------


def test_config_is_immutable():
    config = FigureConfig()
    with pytest.raises(AttributeError):
        config.total_width = 10.0


def test_config_coerces_fields():
    config = FigureConfig(
        num_columns=2, left_padding=[0.1, 0.2], col_width_weights=[1, 0.5], unit="in"
    )
    assert config.left_padding == PerGap((0.1, 0.2))
    assert config.right_padding == Uniform(0.0)
    assert config.col_width_weights == (1.0, 0.5)
    assert config.unit is Unit.IN


# ---------------------------------------------------------------------------
# Presets
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("name", sorted(PRESETS))
def test_presets_produce_valid_layouts(name):
    layout = compute_layout(preset_config(name, num_columns=2, num_rows=2))
    assert layout.cell_width > 0
    assert layout.cell_height > 0


def test_presentation_preset_values():
    config = preset_config("presentation")
    assert config.total_width == 15.0
    assert config.total_height == 12.0
    assert config.font_size == 16.0
    assert config.left_outer_padding == 2.9


def test_preset_overrides_win():
    config = preset_config("tight", left_padding=0.3)
    assert config.left_padding == Uniform(0.3)
    assert config.right_padding == Uniform(0.05)


def test_unknown_preset():
    with pytest.raises(ConfigurationError, match="Unknown preset"):
        preset_config("poster")


class TestPresetUnits:
    def test_inch_preset_converts_lengths(self):
        config = preset_config("presentation", unit="in")
        assert config.unit is Unit.IN
        assert config.total_width == pytest.approx(15.0 / 2.54)
        assert config.left_outer_padding == pytest.approx(2.9 / 2.54)
        assert config.cbar_width == pytest.approx(0.5 / 2.54)
        assert config.font_size == 16.0

    def test_inch_overrides_are_taken_as_given(self):
        config = preset_config("tight", unit=Unit.IN, total_width=7.0, left_padding=0.1)
        assert config.total_width == 7.0
        assert config.left_padding == Uniform(0.1)
        assert config.right_padding == Uniform(pytest.approx(0.05 / 2.54))

    def test_default_config_in_inches_is_same_figure(self):
        config = FigureConfig(unit="in")
        assert config.total_width == pytest.approx(8.6 / 2.54)
        assert config.left_outer_padding == pytest.approx(1.1 / 2.54)
        assert config.cbar_padding == pytest.approx(0.1 / 2.54)
        cm_layout = compute_layout(FigureConfig())
        in_layout = compute_layout(config)
        assert in_layout.cell_width == pytest.approx(cm_layout.cell_width)
        assert in_layout.lop == pytest.approx(cm_layout.lop)

    def test_explicit_inch_lengths_are_kept(self):
        config = FigureConfig(total_width=4.0, unit="in")
        assert config.total_width == 4.0
        assert config.total_height == pytest.approx(8.6 / 2.54)
