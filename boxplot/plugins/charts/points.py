"""Raw data points: the jitter scatter and the small-sample dot plot."""

from __future__ import annotations

import html
from typing import Sequence, Tuple

from boxplot.plugins.charts.svg import element, group, place
from boxplot.services.grouping import BoxplotDataGroup
from boxplot.services.scale import ValueAxis
from boxplot.services.tooltips import build_point_tooltip
from boxplot.settings.constants import JITTER_SPREAD_RATIO

JITTER_RADIUS = 3
DOT_RADIUS = 4


def jitter_offset(value: float, index: int, box_width: float) -> float:
    """
    Return a stable cross-axis offset for a point.

    The seed ``(value * 1000 + index) % 1000`` is normalised to [-1, 1) and
    scaled to ``JITTER_SPREAD_RATIO`` of the box width, so identical data
    always lands on identical pixels.
    """
    seed = (value * 1000 + index) % 1000
    return (seed / 1000 - 0.5) * 2 * (JITTER_SPREAD_RATIO * box_width)


def render_jitter(
    groups: Sequence[BoxplotDataGroup],
    centers: Sequence[Tuple[float, float]],
    axis: ValueAxis,
    box_width: float,
    color: str,
    opacity: float,
) -> str:
    """Return every raw value as a faint, offset dot."""
    if not axis.config.has_plot_area:
        return ""

    dots = []
    for group_index, (data_group, center) in enumerate(zip(groups, centers)):
        cross = axis.cross(center)
        for point_index, value in enumerate(data_group.values):
            x, y = place(
                axis.to_pixel(value),
                cross + jitter_offset(value, point_index, box_width),
                axis.orientation,
            )
            dots.append(
                element(
                    "circle",
                    cx=float(x),
                    cy=float(y),
                    r=float(JITTER_RADIUS),
                    fill=color,
                    fill_opacity=float(opacity),
                    data_jitter="true",
                    data_group_index=group_index,
                    data_point_index=point_index,
                )
            )
    return group(dots, class_="boxplot-jitter")


def render_dot_plot(
    data_group: BoxplotDataGroup,
    group_index: int,
    center: Tuple[float, float],
    axis: ValueAxis,
    color: str,
    radius: float = DOT_RADIUS,
) -> str:
    """Return one dot per value for groups too small for quartiles."""
    if not axis.config.has_plot_area:
        return ""

    cross = axis.cross(center)
    dots = []
    for point_index, value in enumerate(data_group.values):
        x, y = place(axis.to_pixel(value), cross, axis.orientation)
        title = build_point_tooltip(data_group.dimension_value, value, point_index)
        dots.append(
            element(
                "circle",
                f"<title>{html.escape(title)}</title>",
                cx=float(x),
                cy=float(y),
                r=float(radius),
                fill=color,
                stroke="#ffffff",
                stroke_width=1.0,
                data_point_index=point_index,
            )
        )
    return group(dots, class_="dot-plot", data_group_index=group_index)
