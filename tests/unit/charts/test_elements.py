"""Tests for the individual SVG element renderers."""

import pytest

from boxplot.plugins.charts.axis import axis_ticks, render_axis_titles, render_value_axis
from boxplot.plugins.charts.box import box_thickness, render_box
from boxplot.plugins.charts.labels import render_category_label, render_value_labels
from boxplot.plugins.charts.lines import (
    render_divider_lines,
    render_grid_lines,
    render_reference_line,
    resolve_reference_value,
)
from boxplot.plugins.charts.median import render_mean, render_median
from boxplot.plugins.charts.outliers import render_outliers
from boxplot.plugins.charts.points import jitter_offset
from boxplot.plugins.charts.svg import attrs, num
from boxplot.plugins.charts.whiskers import render_whiskers
from boxplot.services.layout import DimensionParams, calculate_dimensions
from boxplot.services.options import (
    BoxStyle,
    DividerLinesConfig,
    GridLinesConfig,
    MedianStyle,
    OutlierStyle,
    ReferenceLinesConfig,
    ValueLabelsConfig,
    WhiskerStyle,
)
from boxplot.services.scale import ValueAxis
from boxplot.services.statistics import calculate_boxplot_stats
from boxplot.settings.constants import OUTLIER_SHAPES

STATS = calculate_boxplot_stats([1, 2, 3, 4, 5], include_mean=True)
CENTER = (100.0, 200.0)


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


def _axis(min_value=0, max_value=10, orientation="vertical", config=None):
    return ValueAxis(min_value, max_value, config or _config(), orientation)


def test_num_trims_trailing_zeros() -> None:
    """Ensure coordinates are written compactly."""
    assert num(70.0) == "70"
    assert num(1.23456) == "1.235"
    assert num(-0.0001) == "0"


def test_attrs_escape_and_rename() -> None:
    """Ensure attribute names are hyphenated and values escaped."""
    text = attrs(stroke_width=1.5, data_label='a"b', class_="x", skipped=None)
    assert text == 'stroke-width="1.5" data-label="a&quot;b" class="x"'


def test_box_thickness_scales_with_sqrt_of_size() -> None:
    """Ensure variable width follows the square root of the size ratio."""
    assert box_thickness(60, 25, 100, True) == 30
    assert box_thickness(60, 25, 100, False) == 60
    assert box_thickness(60, 0, 0, True) == 60


def test_render_box_rect() -> None:
    """Ensure the box spans q1..q3 and is centred on the group."""
    markup = render_box(STATS, CENTER, _axis(), BoxStyle(), 60)
    assert markup.startswith("<rect ")
    assert 'x="70" y="220" width="60" height="120"' in markup


def test_render_box_horizontal() -> None:
    """Ensure horizontal boxes run along x."""
    markup = render_box(STATS, CENTER, _axis(orientation="horizontal"), BoxStyle(), 60)
    assert 'x="90" y="170" width="180" height="60"' in markup


def test_notched_box_is_one_closed_path() -> None:
    """Ensure the notch draws one outline pinched at the median."""
    markup = render_box(STATS, CENTER, _axis(), BoxStyle(), 60, show_notch=True, sample_size=5)
    assert "<rect" not in markup
    assert markup.count("<path") == 1
    d = markup.split(' d="')[1].split('"')[0]
    assert d.startswith("M") and d.endswith(" Z")
    assert d.count(" L") == 9
    # The waist sits 30% of the thickness in from each side.
    assert "88,280" in d and "112,280" in d


def test_notch_without_sample_size_draws_rect() -> None:
    """Ensure a notch needs a sample size."""
    markup = render_box(STATS, CENTER, _axis(), BoxStyle(), 60, show_notch=True)
    assert markup.startswith("<rect ")


def test_render_whiskers_segments_and_caps() -> None:
    """Ensure whiskers reach min/max and carry caps."""
    markup = render_whiskers(STATS, CENTER, _axis(), WhiskerStyle(cap_width=40))
    assert markup.count('class="boxplot-whisker"') == 2
    assert markup.count('class="boxplot-whisker-cap"') == 2
    assert 'x1="80" y1="200" x2="120" y2="200"' in markup
    no_caps = render_whiskers(STATS, CENTER, _axis(), WhiskerStyle(cap_width=0))
    assert "boxplot-whisker-cap" not in no_caps


def test_median_line_and_inset() -> None:
    """Ensure the median crosses the box and shrinks with an inset."""
    markup = render_median(STATS, CENTER, _axis(), MedianStyle(), 60)
    assert 'x1="70" y1="280" x2="130" y2="280"' in markup
    inset = render_median(STATS, CENTER, _axis(), MedianStyle(), 60, inset=18)
    assert 'x1="88" y1="280" x2="112" y2="280"' in inset


def test_mean_marker_requires_mean() -> None:
    """Ensure the mean diamond only draws when the mean exists."""
    assert "boxplot-mean" in render_mean(STATS, CENTER, _axis(), "#000")
    without = calculate_boxplot_stats([1, 2, 3, 4, 5])
    assert render_mean(without, CENTER, _axis(), "#000") == ""


@pytest.mark.parametrize("shape", OUTLIER_SHAPES)
def test_outlier_glyphs_carry_data_attributes(shape: str) -> None:
    """Ensure every shape tags its group and value."""
    stats = calculate_boxplot_stats([1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 100])
    markup = render_outliers(
        stats, CENTER, _axis(0, 100), OutlierStyle(shape=shape), group_index=2
    )
    assert markup.count('data-outlier="true"') == 1
    assert 'data-group-index="2"' in markup
    assert 'data-outlier-value="100.00"' in markup


def test_cross_outlier_is_two_strokes() -> None:
    """Ensure the cross glyph has two lines and no fill."""
    stats = calculate_boxplot_stats([1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 100])
    markup = render_outliers(
        stats, CENTER, _axis(0, 100), OutlierStyle(shape="cross"), group_index=0
    )
    assert markup.startswith("<g ")
    assert markup.count("<line") == 2
    assert 'fill="none"' in markup


def test_hidden_outliers_render_nothing() -> None:
    """Ensure hidden outliers produce no markup."""
    stats = calculate_boxplot_stats([1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 100])
    assert render_outliers(stats, CENTER, _axis(0, 100), OutlierStyle(show=False), 0) == ""


def test_jitter_offset_is_deterministic_and_bounded() -> None:
    """Ensure jitter offsets repeat exactly and stay within 40% of the width."""
    assert jitter_offset(1, 0, 60) == -24
    assert jitter_offset(2.5, 0, 60) == 0
    for index, value in enumerate([-7.3, 0.0, 3.14159, 42.0, 1e6]):
        offset = jitter_offset(value, index, 60)
        assert offset == jitter_offset(value, index, 60)
        assert -24 <= offset <= 24


@pytest.mark.parametrize(
    ("reference", "expected"),
    [
        (ReferenceLinesConfig(show=True, type="fixed", value=7), 7),
        (ReferenceLinesConfig(show=True, type="global_mean"), 3.0),
        (ReferenceLinesConfig(show=True, type="global_median"), 3.0),
        (ReferenceLinesConfig(show=True, type="none"), None),
        (ReferenceLinesConfig(show=False, type="fixed", value=7), None),
    ],
)
def test_resolve_reference_value(reference, expected) -> None:
    """Ensure each reference type reads its value."""
    assert resolve_reference_value(reference, STATS) == expected


def test_reference_line_label_is_escaped() -> None:
    """Ensure reference labels are escaped."""
    reference = ReferenceLinesConfig(show=True, type="fixed", value=5, label="<x>")
    markup = render_reference_line(_axis(), reference, STATS)
    assert 'y1="200"' in markup
    assert "&lt;x&gt;" in markup
    assert "<x>" not in markup


def test_grid_and_divider_lines() -> None:
    """Ensure grid lines follow ticks and dividers separate slots."""
    grid = render_grid_lines(_axis(), GridLinesConfig(show=True))
    assert grid.count("<line") == 5
    assert render_grid_lines(_axis(), GridLinesConfig(show=False)) == ""
    dividers = render_divider_lines(_axis(), DividerLinesConfig(show=True), 3)
    assert dividers.count("<line") == 2
    assert 'x1="200"' in dividers and 'x1="400"' in dividers


def test_axis_ticks() -> None:
    """Ensure five evenly spaced ticks include both ends."""
    assert axis_ticks(0, 100) == [0, 25, 50, 75, 100]
    assert axis_ticks(3, 3) == [3, 3, 3, 3, 3]


def test_value_axis_labels() -> None:
    """Ensure tick labels use one decimal."""
    markup = render_value_axis(_axis(0, 100), "#333", 1.5, 12)
    for label in ("0.0", "25.0", "50.0", "75.0", "100.0"):
        assert f">{label}</text>" in markup


def test_axis_titles_are_escaped() -> None:
    """Ensure axis titles escape data-derived text."""
    markup = render_axis_titles(_config(), "a<b", "c&d", "#333", 12)
    assert "a&lt;b" in markup
    assert "c&amp;d" in markup
    assert "rotate(-90" in markup
    assert render_axis_titles(_config(), None, None, "#333", 12) == ""


def test_value_labels_positions() -> None:
    """Ensure one label per enabled statistic and slot."""
    outside = render_value_labels(STATS, CENTER, _axis(), ValueLabelsConfig(show=True), 60)
    assert outside.count("<text") == 5
    both = render_value_labels(
        STATS, CENTER, _axis(), ValueLabelsConfig(show=True, position="both"), 60
    )
    assert both.count("<text") == 10
    assert render_value_labels(STATS, CENTER, _axis(), ValueLabelsConfig(), 60) == ""


def test_category_label_is_escaped_and_truncated() -> None:
    """Ensure category labels are escaped and shortened."""
    markup = render_category_label("<b>" + "x" * 30, CENTER, _axis(), "#333", 12)
    assert "&lt;b&gt;" in markup
    assert "<b>" not in markup
    assert "...</text>" in markup


def test_elements_are_empty_without_plot_area() -> None:
    """Ensure a negative plot area yields empty markup, not errors."""
    axis = _axis(config=_config(-10, -10))
    assert render_box(STATS, CENTER, axis, BoxStyle(), 60) == ""
    assert render_whiskers(STATS, CENTER, axis, WhiskerStyle()) == ""
    assert render_median(STATS, CENTER, axis, MedianStyle(), 60) == ""
    assert render_grid_lines(axis, GridLinesConfig(show=True)) == ""
    assert render_value_axis(axis, "#333", 1, 12) == ""
