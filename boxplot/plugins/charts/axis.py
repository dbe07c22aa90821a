"""Value axis with tick labels, and the optional axis titles."""

from __future__ import annotations

from typing import List, Optional

from boxplot.plugins.charts.svg import group, line, text
from boxplot.services.layout import RenderConfig
from boxplot.services.scale import ValueAxis
from boxplot.settings.constants import AXIS_TICK_COUNT
from boxplot.views.components.formatters import format_value

TICK_LENGTH = 5
TICK_LABEL_GAP = 8


def axis_ticks(
    min_value: float, max_value: float, count: int = AXIS_TICK_COUNT
) -> List[float]:
    """Return ``count`` evenly spaced values from min to max inclusive."""
    if count < 2:
        return [min_value]
    step = (max_value - min_value) / (count - 1)
    return [min_value + step * i for i in range(count)]


def render_value_axis(
    axis: ValueAxis, color: str, stroke_width: float, font_size: float
) -> str:
    """
    Return the value axis line with ticks and one-decimal labels.

    Ticks go through ``axis.to_pixel``, so a log axis downgraded to linear
    places them linearly too.
    """
    config = axis.config
    if not config.has_plot_area:
        return ""

    paint = dict(stroke=color, stroke_width=float(stroke_width))
    label_paint = dict(fill=color, font_size=float(font_size))
    parts = []
    if axis.is_vertical:
        x = config.left_margin
        parts.append(
            line(x, config.top_margin, x, config.top_margin + config.plot_area_height, **paint)
        )
        for tick in axis_ticks(axis.min_value, axis.max_value):
            y = axis.to_pixel(tick)
            parts.append(line(x - TICK_LENGTH, y, x, y, **paint))
            parts.append(
                text(
                    x - TICK_LABEL_GAP,
                    y,
                    format_value(tick, "decimal", 1),
                    text_anchor="end",
                    dominant_baseline="middle",
                    **label_paint,
                )
            )
    else:
        y = config.top_margin + config.plot_area_height
        parts.append(
            line(config.left_margin, y, config.left_margin + config.plot_area_width, y, **paint)
        )
        for tick in axis_ticks(axis.min_value, axis.max_value):
            x = axis.to_pixel(tick)
            parts.append(line(x, y, x, y + TICK_LENGTH, **paint))
            parts.append(
                text(
                    x,
                    y + TICK_LABEL_GAP + font_size,
                    format_value(tick, "decimal", 1),
                    text_anchor="middle",
                    **label_paint,
                )
            )
    return group(parts, class_="boxplot-value-axis")


def render_axis_titles(
    config: RenderConfig,
    x_title: Optional[str],
    y_title: Optional[str],
    color: str,
    font_size: float,
) -> str:
    """Return the bottom and left axis titles; either may be missing."""
    parts = []
    if x_title:
        parts.append(
            text(
                config.left_margin + config.plot_area_width / 2,
                config.chart_height - 4,
                x_title,
                text_anchor="middle",
                fill=color,
                font_size=float(font_size),
                class_="boxplot-axis-title-x",
            )
        )
    if y_title:
        x = float(font_size)
        y = config.top_margin + config.plot_area_height / 2
        parts.append(
            text(
                x,
                y,
                y_title,
                transform=f"rotate(-90 {x:g} {y:g})",
                text_anchor="middle",
                fill=color,
                font_size=float(font_size),
                class_="boxplot-axis-title-y",
            )
        )
    return "".join(parts)
