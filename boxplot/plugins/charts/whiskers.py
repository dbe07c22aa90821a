"""Whisker segments and their end caps."""

from __future__ import annotations

from typing import Tuple

from boxplot.plugins.charts.svg import line, place
from boxplot.services.options import WhiskerStyle
from boxplot.services.scale import ValueAxis
from boxplot.services.statistics import BoxplotStatistics


def _segment(axis: ValueAxis, start_px: float, end_px: float, cross: float, **paint) -> str:
    x1, y1 = place(start_px, cross, axis.orientation)
    x2, y2 = place(end_px, cross, axis.orientation)
    return line(x1, y1, x2, y2, **paint)


def _cap(axis: ValueAxis, value_px: float, cross: float, width: float, **paint) -> str:
    x1, y1 = place(value_px, cross - width / 2, axis.orientation)
    x2, y2 = place(value_px, cross + width / 2, axis.orientation)
    return line(x1, y1, x2, y2, **paint)


def render_whiskers(
    stats: BoxplotStatistics,
    center: Tuple[float, float],
    axis: ValueAxis,
    style: WhiskerStyle,
) -> str:
    """Return q1->min and q3->max segments, each with a perpendicular cap."""
    if not axis.config.has_plot_area:
        return ""

    cross = axis.cross(center)
    paint = dict(
        stroke=style.color,
        stroke_width=float(style.stroke_width),
        stroke_dasharray=style.stroke_dasharray,
    )
    q1_px = axis.to_pixel(stats.q1)
    q3_px = axis.to_pixel(stats.q3)
    min_px = axis.to_pixel(stats.min)
    max_px = axis.to_pixel(stats.max)
    cap_width = max(float(style.cap_width), 0.0)

    parts = [
        _segment(axis, q1_px, min_px, cross, class_="boxplot-whisker", **paint),
        _segment(axis, q3_px, max_px, cross, class_="boxplot-whisker", **paint),
    ]
    if cap_width > 0:
        cap_paint = dict(paint, stroke_dasharray=None)
        parts.append(
            _cap(axis, min_px, cross, cap_width, class_="boxplot-whisker-cap", **cap_paint)
        )
        parts.append(
            _cap(axis, max_px, cross, cap_width, class_="boxplot-whisker-cap", **cap_paint)
        )
    return "".join(parts)
