"""Median line and mean marker."""

from __future__ import annotations

from typing import Tuple

from boxplot.plugins.charts.svg import element, line, path_from_points, place
from boxplot.services.options import MedianStyle
from boxplot.services.scale import ValueAxis
from boxplot.services.statistics import BoxplotStatistics

MEAN_MARKER_SIZE = 5


def render_median(
    stats: BoxplotStatistics,
    center: Tuple[float, float],
    axis: ValueAxis,
    style: MedianStyle,
    thickness: float,
    inset: float = 0.0,
) -> str:
    """
    Return the median line across the box.

    ``inset`` shortens both ends, so a notched box gets a line that spans
    only its waist.
    """
    if not axis.config.has_plot_area or thickness <= 0:
        return ""
    cross = axis.cross(center)
    median_px = axis.to_pixel(stats.q2)
    half = max(thickness / 2 - inset, 0.0)
    x1, y1 = place(median_px, cross - half, axis.orientation)
    x2, y2 = place(median_px, cross + half, axis.orientation)
    return line(
        x1,
        y1,
        x2,
        y2,
        stroke=style.color,
        stroke_width=float(style.stroke_width),
        stroke_dasharray=style.stroke_dasharray,
        class_="boxplot-median",
    )


def render_mean(
    stats: BoxplotStatistics,
    center: Tuple[float, float],
    axis: ValueAxis,
    color: str,
    size: float = MEAN_MARKER_SIZE,
) -> str:
    """Return a diamond at the mean; empty when the mean was not computed."""
    if stats.mean is None or not axis.config.has_plot_area:
        return ""
    cross = axis.cross(center)
    mean_px = axis.to_pixel(stats.mean)
    diamond = [
        place(mean_px - size, cross, axis.orientation),
        place(mean_px, cross + size, axis.orientation),
        place(mean_px + size, cross, axis.orientation),
        place(mean_px, cross - size, axis.orientation),
    ]
    return element(
        "path",
        d=path_from_points(diamond),
        fill="#ffffff",
        stroke=color,
        stroke_width=1.5,
        class_="boxplot-mean",
    )
