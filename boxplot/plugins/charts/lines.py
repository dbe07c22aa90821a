"""Grid lines, group dividers and the reference line."""

from __future__ import annotations

from typing import Optional

from boxplot.plugins.charts.axis import axis_ticks
from boxplot.plugins.charts.svg import group, line, place, text
from boxplot.services.options import (
    DividerLinesConfig,
    GridLinesConfig,
    ReferenceLinesConfig,
)
from boxplot.services.scale import ValueAxis
from boxplot.services.statistics import BoxplotStatistics


def _across(axis: ValueAxis, value_px: float, **paint) -> str:
    """A line spanning the plot area perpendicular to the value axis."""
    config = axis.config
    if axis.is_vertical:
        cross_start = config.left_margin
        cross_end = config.left_margin + config.plot_area_width
    else:
        cross_start = config.top_margin
        cross_end = config.top_margin + config.plot_area_height
    x1, y1 = place(value_px, cross_start, axis.orientation)
    x2, y2 = place(value_px, cross_end, axis.orientation)
    return line(x1, y1, x2, y2, **paint)


def render_grid_lines(axis: ValueAxis, style: GridLinesConfig) -> str:
    """Return one line per value-axis tick."""
    if not style.show or not axis.config.has_plot_area:
        return ""
    lines = [
        _across(
            axis,
            axis.to_pixel(tick),
            stroke=style.color,
            stroke_width=float(style.stroke_width),
            stroke_dasharray=style.stroke_dasharray,
        )
        for tick in axis_ticks(axis.min_value, axis.max_value)
    ]
    return group(lines, class_="boxplot-grid")


def render_divider_lines(
    axis: ValueAxis, style: DividerLinesConfig, group_count: int
) -> str:
    """Return separators between neighbouring group slots."""
    config = axis.config
    if not style.show or group_count < 2 or not config.has_plot_area:
        return ""

    if axis.is_vertical:
        slot = config.plot_area_width / group_count
        origin = config.left_margin
        value_start = config.top_margin
        value_end = config.top_margin + config.plot_area_height
    else:
        slot = config.plot_area_height / group_count
        origin = config.top_margin
        value_start = config.left_margin
        value_end = config.left_margin + config.plot_area_width

    lines = []
    for index in range(1, group_count):
        cross = origin + slot * index
        x1, y1 = place(value_start, cross, axis.orientation)
        x2, y2 = place(value_end, cross, axis.orientation)
        lines.append(
            line(
                x1,
                y1,
                x2,
                y2,
                stroke=style.color,
                stroke_width=float(style.stroke_width),
                stroke_dasharray=style.stroke_dasharray,
            )
        )
    return group(lines, class_="boxplot-dividers")


def resolve_reference_value(
    reference: ReferenceLinesConfig, global_stats: BoxplotStatistics
) -> Optional[float]:
    """Return the value the reference line marks, or None for no line."""
    if not reference.show or reference.type == "none":
        return None
    if reference.type == "fixed":
        return reference.value
    if reference.type == "global_mean":
        return global_stats.mean
    if reference.type == "global_median":
        return global_stats.q2
    return None


def render_reference_line(
    axis: ValueAxis,
    reference: ReferenceLinesConfig,
    global_stats: BoxplotStatistics,
    font_size: float = 10,
) -> str:
    """Return the reference line with its optional label."""
    value = resolve_reference_value(reference, global_stats)
    if value is None or not axis.config.has_plot_area:
        return ""

    value_px = axis.to_pixel(value)
    parts = [
        _across(
            axis,
            value_px,
            stroke=reference.color,
            stroke_width=float(reference.stroke_width),
            stroke_dasharray=reference.stroke_dasharray,
        )
    ]
    if reference.label:
        config = axis.config
        if axis.is_vertical:
            x = config.left_margin + config.plot_area_width - 4
            y = value_px - 4
            anchor = "end"
        else:
            x = value_px + 4
            y = config.top_margin + font_size
            anchor = "start"
        parts.append(
            text(
                x,
                y,
                reference.label,
                text_anchor=anchor,
                fill=reference.color,
                font_size=float(font_size),
            )
        )
    return group(parts, class_="boxplot-reference-line")
