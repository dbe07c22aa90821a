"""Tests for reading host visual properties."""

import pytest

from boxplot.services.options import (
    BoxplotOptions,
    map_choice,
    map_orientation,
    map_scale,
    read_boxplot_options,
)
from boxplot.settings.constants import SORT_TYPE_ALIASES, WHISKER_TYPE_ALIASES


def test_defaults_for_missing_props() -> None:
    """Ensure an empty or invalid bag yields default options."""
    assert read_boxplot_options(None, "m") == BoxplotOptions()
    assert read_boxplot_options({}, "m") == BoxplotOptions()
    assert read_boxplot_options({"columnVisualProps": "oops"}, "m") == BoxplotOptions()


def test_reads_measure_sections() -> None:
    """Ensure per-measure sections are read for the given measure only."""
    props = {
        "columnVisualProps": {
            "sales": {
                "visualization": {"orientation": "Horizontal", "color": "#111111"},
                "boxStyle": {"boxWidth": 30, "variableWidth": True, "opacity": 0.5},
                "medianWhiskers": {
                    "showMean": True,
                    "showNotch": True,
                    "medianColor": "#222222",
                    "whiskerCapWidth": 12,
                },
                "outlierStyle": {"shape": "Diamond", "size": 6},
                "dataConfig": {
                    "calculationMethod": "Inclusive",
                    "whiskerType": "Conservative (3x IQR)",
                },
            },
            "other": {"visualization": {"orientation": "vertical"}},
        }
    }
    options = read_boxplot_options(props, "sales")
    assert options.orientation == "horizontal"
    assert options.color == "#111111"
    assert options.box_style.fill == "#111111"
    assert options.box_width == 30
    assert options.variable_width is True
    assert options.opacity == 0.5
    assert options.show_mean is True
    assert options.show_notch is True
    assert options.median_style.color == "#222222"
    assert options.whisker_width == 12
    assert options.outlier_style.shape == "diamond"
    assert options.outlier_style.size == 6
    assert options.calculation_method == "inclusive"
    assert options.whisker_type == "iqr_3"


def test_reads_chart_wide_sections() -> None:
    """Ensure top-level sections configure the whole chart."""
    props = {
        "chart_options": {"yScale": "Logarithmic"},
        "axes": {"sortType": "Median descending", "showYAxis": False},
        "text_sizes": {"labelFontSize": 14},
        "gridLines": {"show": True, "color": "#cccccc"},
        "referenceLines": {"show": True, "type": "Global Median", "label": "P50"},
        "jitterPlot": {"showJitter": True, "jitterOpacity": 0.3},
        "tooltip": {"format": "custom", "customTemplate": "{median}"},
        "layout": {"layoutStyle": "Compact", "marginTop": 12, "fitWidth": True},
    }
    options = read_boxplot_options(props, "m")
    assert options.y_scale == "log"
    assert options.sort_type == "median_desc"
    assert options.show_y_axis is False
    assert options.label_font_size == 14
    assert options.grid_lines.show is True
    assert options.grid_lines.color == "#cccccc"
    assert options.reference_lines.type == "global_median"
    assert options.reference_lines.label == "P50"
    assert options.show_jitter is True
    assert options.jitter_opacity == 0.3
    assert options.tooltip.format == "custom"
    assert options.tooltip.custom_template == "{median}"
    assert options.layout.layout_style == "compact"
    assert options.layout.margin_top == 12
    assert options.fit_width is True


def test_numbers_reject_bools_and_strings() -> None:
    """Ensure only real numbers override numeric defaults."""
    props = {"columnVisualProps": {"m": {"boxStyle": {"boxWidth": True}}}}
    assert read_boxplot_options(props, "m").box_width == 60
    props = {"columnVisualProps": {"m": {"boxStyle": {"boxWidth": "90"}}}}
    assert read_boxplot_options(props, "m").box_width == 60


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
def test_numbers_reject_non_finite(bad: float) -> None:
    """Ensure NaN and infinities fall back to the defaults."""
    props = {
        "columnVisualProps": {
            "m": {
                "boxStyle": {"boxWidth": bad},
                "valueLabels": {"decimals": bad},
            }
        },
        "referenceLines": {"show": True, "type": "fixed", "value": bad},
    }
    options = read_boxplot_options(props, "m")
    assert options.box_width == 60
    assert options.value_labels.decimals == 2
    assert options.reference_lines.value is None


def test_negative_decimals_clamp_to_zero() -> None:
    """Ensure label decimals never go below zero."""
    props = {"columnVisualProps": {"m": {"valueLabels": {"decimals": -3}}}}
    assert read_boxplot_options(props, "m").value_labels.decimals == 0


def test_hidden_outliers_flag() -> None:
    """Ensure showOutliers=false hides outliers unless the style overrides it."""
    props = {"columnVisualProps": {"m": {"showOutliers": False}}}
    assert read_boxplot_options(props, "m").show_outliers is False
    props = {
        "columnVisualProps": {
            "m": {"showOutliers": False, "outlierStyle": {"show": True}}
        }
    }
    assert read_boxplot_options(props, "m").show_outliers is True


@pytest.mark.parametrize(
    ("label", "expected"),
    [
        ("iqr_3", "iqr_3"),
        ("Standard (1.5 IQR)", "iqr_1_5"),
        ("Data extremes", "data_extremes"),
        ("Percentile 5-95", "percentile_5_95"),
        ("Min/Max", "min_max"),
        ("something else", "iqr_1_5"),
        (None, "iqr_1_5"),
    ],
)
def test_map_whisker_labels(label, expected) -> None:
    """Ensure whisker labels map to technical values."""
    assert map_choice(label, WHISKER_TYPE_ALIASES, "iqr_1_5") == expected


def test_map_sort_labels() -> None:
    """Ensure sort labels map to technical values."""
    assert map_choice("Variability descending", SORT_TYPE_ALIASES, "alphabetical") == "iqr_desc"
    assert map_choice("MEAN_ASC", SORT_TYPE_ALIASES, "alphabetical") == "mean_asc"


def test_map_orientation_and_scale() -> None:
    """Ensure orientation and scale fall back to vertical/linear."""
    assert map_orientation("Horizontal bars") == "horizontal"
    assert map_orientation(3) == "vertical"
    assert map_scale("Log") == "log"
    assert map_scale(None) == "linear"


def test_needs_global_mean() -> None:
    """Ensure the global mean is needed for mean markers or mean lines."""
    assert BoxplotOptions().needs_global_mean is False
    assert BoxplotOptions(show_mean=True).needs_global_mean is True
