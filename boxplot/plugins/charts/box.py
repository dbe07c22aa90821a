"""Box body: the q1..q3 rectangle, or a notched outline around the median."""

from __future__ import annotations

import math
from typing import Optional, Tuple

from boxplot.plugins.charts.svg import element, path_from_points, place
from boxplot.services.options import BoxStyle
from boxplot.services.scale import ValueAxis
from boxplot.services.statistics import BoxplotStatistics, calculate_notch_limits
from boxplot.settings.constants import NOTCH_MAX_DEPTH_RATIO


def box_thickness(
    base_width: float, count: int, max_count: int, variable_width: bool
) -> float:
    """
    Return the cross-axis size of a box.

    With variable width the size follows ``sqrt(count / max_count)`` so the
    box area tracks the sample size.
    """
    if not variable_width or max_count <= 0:
        return max(base_width, 0.0)
    return max(base_width * math.sqrt(count / max_count), 0.0)


def notch_geometry(
    stats: BoxplotStatistics, sample_size: int, axis: ValueAxis, thickness: float
) -> Optional[Tuple[float, float, float]]:
    """
    Return ``(start_px, end_px, depth)`` of the notch, or None.

    The interval is clamped to [q1, q3]. Depth is the per-side pinch at the
    median, at most ``NOTCH_MAX_DEPTH_RATIO`` of the thickness.
    """
    if sample_size <= 0:
        return None
    lower, upper = calculate_notch_limits(stats, sample_size)
    lower = min(max(lower, stats.q1), stats.q3)
    upper = min(max(upper, stats.q1), stats.q3)
    start_px = axis.to_pixel(lower)
    end_px = axis.to_pixel(upper)
    depth = min(abs(end_px - start_px) / 2, NOTCH_MAX_DEPTH_RATIO * thickness)
    return start_px, end_px, max(depth, 0.0)


def _notched_path(
    stats: BoxplotStatistics,
    axis: ValueAxis,
    cross: float,
    thickness: float,
    notch: Tuple[float, float, float],
) -> str:
    start_px, end_px, depth = notch
    q1_px = axis.to_pixel(stats.q1)
    q3_px = axis.to_pixel(stats.q3)
    median_px = axis.to_pixel(stats.q2)
    side_a = cross - thickness / 2
    side_b = cross + thickness / 2

    # Up one side and back down the other, so the outline stays one shape.
    outline = [
        (q1_px, side_a),
        (start_px, side_a),
        (median_px, side_a + depth),
        (end_px, side_a),
        (q3_px, side_a),
        (q3_px, side_b),
        (end_px, side_b),
        (median_px, side_b - depth),
        (start_px, side_b),
        (q1_px, side_b),
    ]
    return path_from_points(place(v, c, axis.orientation) for v, c in outline)


def render_box(
    stats: BoxplotStatistics,
    center: Tuple[float, float],
    axis: ValueAxis,
    style: BoxStyle,
    thickness: float,
    show_notch: bool = False,
    sample_size: int = 0,
) -> str:
    """Return the box body markup for one group."""
    if not axis.config.has_plot_area or thickness <= 0:
        return ""

    cross = axis.cross(center)
    paint = dict(
        fill=style.fill,
        fill_opacity=float(style.opacity),
        stroke=style.stroke,
        stroke_width=float(style.stroke_width),
    )

    notch = notch_geometry(stats, sample_size, axis, thickness) if show_notch else None
    if notch is not None:
        return element(
            "path",
            d=_notched_path(stats, axis, cross, thickness, notch),
            class_="boxplot-box boxplot-box-notched",
            **paint,
        )

    q1_px = axis.to_pixel(stats.q1)
    q3_px = axis.to_pixel(stats.q3)
    low, high = min(q1_px, q3_px), max(q1_px, q3_px)
    if axis.is_vertical:
        x, y, width, height = cross - thickness / 2, low, thickness, high - low
    else:
        x, y, width, height = low, cross - thickness / 2, high - low, thickness

    return element(
        "rect",
        x=float(x),
        y=float(y),
        width=float(width),
        height=float(height),
        rx=float(style.border_radius) if style.border_radius else None,
        class_="boxplot-box",
        **paint,
    )
