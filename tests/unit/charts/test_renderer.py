"""Tests for composing a full boxplot SVG."""

import re

from boxplot.plugins.charts.renderer import render_boxplot, render_message
from boxplot.services.grouping import TabularResult, calculate_boxplot_data
from boxplot.services.layout import DimensionParams, calculate_dimensions
from boxplot.services.options import (
    BoxplotOptions,
    DividerLinesConfig,
    GridLinesConfig,
    ReferenceLinesConfig,
    TooltipConfig,
)


def _data(rows: list, options: BoxplotOptions = None):
    result = TabularResult(columns=["g", "v"], rows=rows)
    return calculate_boxplot_data(result, "v", ["g"], options)


def _config(width: float = 800, height: float = 600, groups: int = 2):
    params = DimensionParams(
        show_y_axis=True,
        label_font_size=12,
        value_label_font_size=10,
        num_groups=groups,
    )
    return calculate_dimensions(width, height, params)


ROWS = [["A", 1], ["A", 2]] + [["B", v] for v in [1, 2, 3, 4, 5, 40]]


def test_small_group_renders_as_dot_plot() -> None:
    """Ensure groups with fewer than three values use the dot plot."""
    options = BoxplotOptions()
    markup = render_boxplot(_data(ROWS, options), _config(), options)
    assert markup.startswith("<svg ")
    assert markup.endswith("</svg>")
    assert markup.count('class="dot-plot"') == 1
    assert markup.count('class="boxplot-box"') == 1
    assert markup.count('class="boxplot-median"') == 1
    assert 'data-group-index="0"' in markup
    assert 'data-group-index="1"' in markup


def test_three_values_render_a_box() -> None:
    """Ensure three values are enough for a box."""
    options = BoxplotOptions()
    rows = [["A", 1], ["A", 2], ["A", 3]]
    markup = render_boxplot(_data(rows, options), _config(groups=1), options)
    assert "dot-plot" not in markup
    assert markup.count('class="boxplot-box"') == 1


def test_layers_follow_paint_order() -> None:
    """Ensure background layers precede groups and the axis comes last."""
    options = BoxplotOptions(
        grid_lines=GridLinesConfig(show=True),
        divider_lines=DividerLinesConfig(show=True),
        reference_lines=ReferenceLinesConfig(show=True, type="global_median"),
        show_jitter=True,
    )
    markup = render_boxplot(_data(ROWS, options), _config(), options)
    order = [
        'class="boxplot-grid"',
        'class="boxplot-dividers"',
        'class="boxplot-reference-line"',
        'class="boxplot-jitter"',
        'class="boxplot-group"',
        'class="boxplot-value-axis"',
    ]
    positions = [markup.index(token) for token in order]
    assert positions == sorted(positions)


def test_outliers_and_hit_regions() -> None:
    """Ensure outliers and tooltip hit regions are emitted per group."""
    options = BoxplotOptions()
    markup = render_boxplot(_data(ROWS, options), _config(), options)
    assert 'data-outlier-value="40.00"' in markup
    assert markup.count('class="boxplot-hit-region"') == 2
    assert 'data-tooltip-key="group-1"' in markup
    assert "<title>B" in markup


def test_tooltips_disabled_drop_titles() -> None:
    """Ensure hit regions carry no title when tooltips are off."""
    options = BoxplotOptions(tooltip=TooltipConfig(enabled=False))
    markup = render_boxplot(_data(ROWS, options), _config(), options)
    assert 'class="boxplot-hit-region"' in markup
    assert "<title>A\nMax" not in markup


def test_category_labels_are_escaped() -> None:
    """Ensure group labels cannot inject markup."""
    options = BoxplotOptions()
    rows = [["<script>", 1], ["<script>", 2], ["<script>", 3]]
    markup = render_boxplot(_data(rows, options), _config(groups=1), options)
    assert "<script>" not in markup
    assert "&lt;script&gt;" in markup


def test_log_scale_with_negative_values_renders() -> None:
    """Ensure a log request over a negative domain still renders."""
    options = BoxplotOptions(y_scale="log")
    rows = [["A", v] for v in [-5, 1, 2, 3, 20]]
    markup = render_boxplot(_data(rows, options), _config(groups=1), options)
    assert 'class="boxplot-value-axis"' in markup
    assert ">-5.0</text>" in markup
    assert ">20.0</text>" in markup


def test_horizontal_orientation_renders() -> None:
    """Ensure horizontal charts render the same elements."""
    options = BoxplotOptions(orientation="horizontal", show_notch=True, show_mean=True)
    markup = render_boxplot(_data(ROWS, options), _config(), options)
    assert 'class="boxplot-box boxplot-box-notched"' in markup
    assert 'class="boxplot-mean"' in markup


def test_variable_width_shrinks_smaller_groups() -> None:
    """Ensure box thickness follows the group size."""
    options = BoxplotOptions(variable_width=True, box_width=60)
    rows = [["A", v] for v in [1, 2, 3]] + [["B", v] for v in range(1, 13)]
    markup = render_boxplot(_data(rows, options), _config(), options)
    assert 'width="30" height=' in markup
    assert 'width="60" height=' in markup


def test_no_plot_area_gives_empty_svg() -> None:
    """Ensure a container smaller than its margins yields an empty chart."""
    options = BoxplotOptions()
    markup = render_boxplot(_data(ROWS, options), _config(50, 40), options)
    assert markup.startswith("<svg ")
    assert "<g" not in markup


def test_background_color() -> None:
    """Ensure a non-transparent background paints a rect."""
    options = BoxplotOptions(background_color="#fafafa")
    markup = render_boxplot(_data(ROWS, options), _config(), options)
    assert 'class="boxplot-background"' in markup
    plain = render_boxplot(_data(ROWS), _config(), BoxplotOptions())
    assert "boxplot-background" not in plain


def test_render_message_escapes() -> None:
    """Ensure placeholder messages are escaped."""
    assert render_message("a<b") == "<div class='boxplot-message'>a&lt;b</div>"


def test_hidden_outliers_keep_boxes_inside_plot_area() -> None:
    """Ensure groups on very different scales stay on the canvas."""
    options = BoxplotOptions(show_outliers=False)
    rows = [["A", v] for v in [0, 1, 2, 3]] + [["B", 100 + i % 5] for i in range(40)]
    config = _config()
    markup = render_boxplot(_data(rows, options), config, options)
    boxes = re.findall(
        r'<rect x="[^"]+" y="([^"]+)" width="[^"]+" height="([^"]+)" class="boxplot-box"',
        markup,
    )
    assert len(boxes) == 2
    top = config.top_margin
    bottom = config.top_margin + config.plot_area_height
    for y, height in boxes:
        assert top - 1e-2 <= float(y)
        assert float(y) + float(height) <= bottom + 1e-2
