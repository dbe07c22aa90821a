"""Tests for value-to-pixel mapping."""

import math

import pytest

from boxplot.services.layout import DimensionParams, calculate_dimensions
from boxplot.services.scale import (
    ValueAxis,
    group_center,
    resolve_scale,
    value_to_coordinate,
)


@pytest.mark.parametrize("scale", ["linear", "log"])
def test_domain_ends_map_to_axis_ends(scale: str) -> None:
    """Ensure min and max land on the axis ends in both orientations."""
    assert value_to_coordinate(1, 1, 100, 40, 500, "horizontal", scale) == pytest.approx(40)
    assert value_to_coordinate(100, 1, 100, 40, 500, "horizontal", scale) == pytest.approx(540)
    assert value_to_coordinate(1, 1, 100, 40, 500, "vertical", scale) == pytest.approx(540)
    assert value_to_coordinate(100, 1, 100, 40, 500, "vertical", scale) == pytest.approx(40)


def test_linear_midpoint() -> None:
    """Ensure linear mapping is proportional."""
    assert value_to_coordinate(5, 0, 10, 0, 200, "horizontal") == 100
    assert value_to_coordinate(5, 0, 10, 0, 200, "vertical") == 100


def test_log_scale_spaces_decades_evenly() -> None:
    """Ensure 10 sits halfway between 1 and 100 on a log axis."""
    assert value_to_coordinate(10, 1, 100, 0, 200, "horizontal", "log") == pytest.approx(100)


def test_degenerate_domain_maps_to_midpoint() -> None:
    """Ensure a zero-width domain returns the axis midpoint."""
    assert value_to_coordinate(5, 5, 5, 20, 300, "vertical") == 170
    assert value_to_coordinate(5, 5, 5, 20, 300, "vertical", "log") == 170


def test_log_scale_with_negative_minimum_does_not_fail() -> None:
    """Ensure a log axis over a negative domain still maps finitely."""
    for value in (-5, 0, 10, 20):
        pixel = value_to_coordinate(value, -5, 20, 0, 100, "horizontal", "log")
        assert math.isfinite(pixel)
        assert 0 <= pixel <= 100
    assert resolve_scale("log", -5, 20) == "linear"


def test_log_scale_falls_back_below_shifted_domain() -> None:
    """Ensure values far below the domain use the linear formula."""
    pixel = value_to_coordinate(-50, -5, 20, 0, 100, "horizontal", "log")
    assert pixel == pytest.approx((-50 + 5) / 25 * 100)


@pytest.mark.parametrize(
    ("requested", "low", "high", "expected"),
    [
        ("linear", 1, 10, "linear"),
        ("log", 1, 10, "log"),
        ("log", 0, 10, "linear"),
        ("log", -5, 10, "linear"),
        ("other", 1, 10, "linear"),
    ],
)
def test_resolve_scale(requested, low, high, expected) -> None:
    """Ensure log is only applied to strictly positive domains."""
    assert resolve_scale(requested, low, high) == expected


def _config(width: float = 600, height: float = 400):
    params = DimensionParams(
        show_y_axis=True,
        label_font_size=12,
        value_label_font_size=10,
        num_groups=3,
        margin_top=0,
        margin_bottom=0,
        margin_left=0,
        margin_right=0,
    )
    return calculate_dimensions(width, height, params)


def test_group_centers_split_the_plot_area() -> None:
    """Ensure group centres sit in the middle of equal slots."""
    config = _config()
    assert group_center(0, 3, config, "vertical") == (100, 200)
    assert group_center(2, 3, config, "vertical") == (500, 200)
    assert group_center(1, 4, config, "horizontal") == (300, 150)


def test_group_spacing_does_not_move_groups() -> None:
    """Ensure a wide group spacing is reported but groups keep equal slots."""
    params = DimensionParams(
        show_y_axis=True,
        label_font_size=12,
        value_label_font_size=10,
        num_groups=3,
        group_spacing=500,
        margin_top=0,
        margin_bottom=0,
        margin_left=0,
        margin_right=0,
    )
    config = calculate_dimensions(600, 400, params)
    assert config.group_spacing == 500
    assert group_center(2, 3, config, "vertical") == group_center(
        2, 3, _config(), "vertical"
    )


def test_value_axis_follows_orientation() -> None:
    """Ensure the value axis runs along y when vertical and x otherwise."""
    config = _config()
    vertical = ValueAxis(0, 10, config, "vertical")
    horizontal = ValueAxis(0, 10, config, "horizontal")
    assert (vertical.start, vertical.length) == (0, 400)
    assert (horizontal.start, horizontal.length) == (0, 600)
    assert vertical.to_pixel(10) == 0
    assert horizontal.to_pixel(10) == 600
    assert vertical.cross((5, 7)) == 5
    assert horizontal.cross((5, 7)) == 7
