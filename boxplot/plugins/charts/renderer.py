"""Compose the element renderers into one boxplot SVG."""

from __future__ import annotations

import html
from typing import List, Tuple

from boxplot.plugins.charts.axis import render_axis_titles, render_value_axis
from boxplot.plugins.charts.box import box_thickness, notch_geometry, render_box
from boxplot.plugins.charts.labels import render_category_label, render_value_labels
from boxplot.plugins.charts.lines import (
    render_divider_lines,
    render_grid_lines,
    render_reference_line,
    resolve_reference_value,
)
from boxplot.plugins.charts.median import render_mean, render_median
from boxplot.plugins.charts.outliers import render_outliers
from boxplot.plugins.charts.points import render_dot_plot, render_jitter
from boxplot.plugins.charts.svg import attrs, element, group, place
from boxplot.plugins.charts.whiskers import render_whiskers
from boxplot.services.grouping import BoxplotData, BoxplotDataGroup, compute_value_range
from boxplot.services.layout import RenderConfig
from boxplot.services.options import BoxplotOptions
from boxplot.services.scale import ValueAxis, group_center, resolve_scale
from boxplot.services.tooltips import build_svg_title
from boxplot.settings.constants import DOT_PLOT_THRESHOLD


def _svg(config: RenderConfig, options: BoxplotOptions, layers: List[str]) -> str:
    width = max(float(config.chart_width), 0.0)
    height = max(float(config.chart_height), 0.0)
    background = ""
    if options.background_color and options.background_color != "transparent":
        background = element(
            "rect",
            x=0.0,
            y=0.0,
            width=width,
            height=height,
            fill=options.background_color,
            class_="boxplot-background",
        )
    head = attrs(
        xmlns="http://www.w3.org/2000/svg",
        width=width,
        height=height,
        viewBox=f"0 0 {width:g} {height:g}",
        class_="boxplot-chart",
    )
    return f"<svg {head}>{background}{''.join(layers)}</svg>"


def _hit_region(
    data_group: BoxplotDataGroup,
    group_index: int,
    center: Tuple[float, float],
    axis: ValueAxis,
    thickness: float,
    options: BoxplotOptions,
) -> str:
    """An invisible rectangle over the whole slot that carries the tooltip."""
    if not axis.config.has_plot_area:
        return ""
    cross = axis.cross(center)
    width = max(thickness, float(options.whisker_style.cap_width), 1.0)
    x1, y1 = place(axis.start, cross - width / 2, axis.orientation)
    x2, y2 = place(axis.start + axis.length, cross + width / 2, axis.orientation)
    title = ""
    if options.tooltip.enabled:
        title = build_svg_title(
            data_group.dimension_value, data_group.stats, data_group.count
        )
    return element(
        "rect",
        title,
        x=float(min(x1, x2)),
        y=float(min(y1, y2)),
        width=float(abs(x2 - x1)),
        height=float(abs(y2 - y1)),
        fill="transparent",
        pointer_events="all",
        class_="boxplot-hit-region",
        data_group_index=group_index,
        data_tooltip_key=f"group-{group_index}",
    )


def _render_group(
    data_group: BoxplotDataGroup,
    group_index: int,
    center: Tuple[float, float],
    axis: ValueAxis,
    options: BoxplotOptions,
    max_group_size: int,
) -> str:
    config = axis.config
    thickness = box_thickness(
        config.box_width, data_group.count, max_group_size, options.variable_width
    )
    stats = data_group.stats
    parts = []
    if data_group.count < DOT_PLOT_THRESHOLD:
        parts.append(
            render_dot_plot(data_group, group_index, center, axis, options.box_style.fill)
        )
    else:
        parts.append(
            render_box(
                stats,
                center,
                axis,
                options.box_style,
                thickness,
                options.show_notch,
                data_group.count,
            )
        )
        parts.append(render_whiskers(stats, center, axis, options.whisker_style))
        inset = 0.0
        if options.show_notch:
            notch = notch_geometry(stats, data_group.count, axis, thickness)
            if notch is not None:
                inset = notch[2]
        parts.append(
            render_median(stats, center, axis, options.median_style, thickness, inset)
        )
        if options.show_mean:
            parts.append(render_mean(stats, center, axis, options.median_style.color))
        if options.show_outliers:
            parts.append(
                render_outliers(stats, center, axis, options.outlier_style, group_index)
            )
        parts.append(
            render_value_labels(stats, center, axis, options.value_labels, thickness)
        )
    parts.append(
        render_category_label(
            data_group.dimension_value,
            center,
            axis,
            options.x_axis_color,
            options.label_font_size,
        )
    )
    parts.append(_hit_region(data_group, group_index, center, axis, thickness, options))
    return group(parts, class_="boxplot-group", data_group_index=group_index)


def render_boxplot(
    data: BoxplotData, config: RenderConfig, options: BoxplotOptions
) -> str:
    """
    Return the complete SVG for a boxplot.

    Layers are painted back to front: grid, dividers, reference line,
    jitter, one layer per group, then the value axis and axis titles. A
    chart without plot area is an empty ``<svg>``.
    """
    if not config.has_plot_area or not data.groups:
        return _svg(config, options, [])

    reference_value = resolve_reference_value(
        options.reference_lines, data.global_stats
    )
    min_value, max_value = compute_value_range(
        data, options.show_outliers, reference_value
    )
    scale = resolve_scale(options.y_scale, min_value, max_value)
    axis = ValueAxis(min_value, max_value, config, options.orientation, scale)

    count = len(data.groups)
    centers = [group_center(i, count, config, options.orientation) for i in range(count)]

    layers = [
        render_grid_lines(axis, options.grid_lines),
        render_divider_lines(axis, options.divider_lines, count),
        render_reference_line(
            axis,
            options.reference_lines,
            data.global_stats,
            options.value_label_font_size,
        ),
    ]
    if options.show_jitter:
        layers.append(
            render_jitter(
                data.groups,
                centers,
                axis,
                config.box_width,
                options.box_style.fill,
                options.jitter_opacity,
            )
        )

    max_group_size = data.max_group_size
    for index, (data_group, center) in enumerate(zip(data.groups, centers)):
        layers.append(
            _render_group(data_group, index, center, axis, options, max_group_size)
        )

    if options.show_y_axis:
        layers.append(
            render_value_axis(
                axis,
                options.y_axis_color,
                options.axis_stroke_width,
                options.label_font_size,
            )
        )
    layers.append(
        render_axis_titles(
            config,
            options.axis_label_x,
            options.axis_label_y,
            options.x_axis_color,
            options.label_font_size,
        )
    )
    return _svg(config, options, layers)


def render_message(message: str, css_class: str = "boxplot-message") -> str:
    """Return an inline placeholder block with an escaped message."""
    return f"<div class='{css_class}'>{html.escape(message)}</div>"
