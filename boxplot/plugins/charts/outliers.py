"""Outlier glyphs in five shapes."""

from __future__ import annotations

from typing import Callable, Dict, Tuple

from boxplot.plugins.charts.svg import element, group, line, path_from_points, place
from boxplot.services.options import OutlierStyle
from boxplot.services.scale import ValueAxis
from boxplot.services.statistics import BoxplotStatistics
from boxplot.views.components.formatters import format_value


def _circle(x: float, y: float, size: float, style: OutlierStyle, **data) -> str:
    return element(
        "circle",
        cx=float(x),
        cy=float(y),
        r=float(size),
        fill=style.fill,
        stroke=style.stroke,
        stroke_width=float(style.stroke_width),
        **data,
    )


def _square(x: float, y: float, size: float, style: OutlierStyle, **data) -> str:
    return element(
        "rect",
        x=float(x - size),
        y=float(y - size),
        width=float(size * 2),
        height=float(size * 2),
        fill=style.fill,
        stroke=style.stroke,
        stroke_width=float(style.stroke_width),
        **data,
    )


def _diamond(x: float, y: float, size: float, style: OutlierStyle, **data) -> str:
    points = [(x, y - size), (x + size, y), (x, y + size), (x - size, y)]
    return element(
        "path",
        d=path_from_points(points),
        fill=style.fill,
        stroke=style.stroke,
        stroke_width=float(style.stroke_width),
        **data,
    )


def _triangle(x: float, y: float, size: float, style: OutlierStyle, **data) -> str:
    points = [(x, y - size), (x + size, y + size), (x - size, y + size)]
    return element(
        "path",
        d=path_from_points(points),
        fill=style.fill,
        stroke=style.stroke,
        stroke_width=float(style.stroke_width),
        **data,
    )


def _cross(x: float, y: float, size: float, style: OutlierStyle, **data) -> str:
    # Strokes only; the fill colour paints them.
    paint = dict(stroke=style.fill, stroke_width=float(max(style.stroke_width, 1)))
    strokes = [
        line(x - size, y - size, x + size, y + size, **paint),
        line(x - size, y + size, x + size, y - size, **paint),
    ]
    return group(strokes, fill="none", **data)


SHAPES: Dict[str, Callable[..., str]] = {
    "circle": _circle,
    "square": _square,
    "diamond": _diamond,
    "triangle": _triangle,
    "cross": _cross,
}


def render_outliers(
    stats: BoxplotStatistics,
    center: Tuple[float, float],
    axis: ValueAxis,
    style: OutlierStyle,
    group_index: int,
) -> str:
    """Return one glyph per outlier, tagged with its group and value."""
    if not style.show or not stats.outliers or not axis.config.has_plot_area:
        return ""

    draw = SHAPES.get(style.shape, _circle)
    cross = axis.cross(center)
    glyphs = []
    for value in stats.outliers:
        x, y = place(axis.to_pixel(value), cross, axis.orientation)
        glyphs.append(
            draw(
                x,
                y,
                float(style.size),
                style,
                class_="boxplot-outlier",
                data_outlier="true",
                data_group_index=group_index,
                data_outlier_value=format_value(value, "decimal", 2),
            )
        )
    return "".join(glyphs)
