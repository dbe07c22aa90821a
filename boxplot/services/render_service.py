"""Entry point the host calls: table in, SVG and tooltip index out."""

from __future__ import annotations

import time
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional, Sequence

from boxplot.plugins.charts.renderer import render_boxplot, render_message
from boxplot.services.grouping import (
    BoxplotData,
    ChartColumn,
    TabularResult,
    calculate_boxplot_data,
    select_columns,
)
from boxplot.services.layout import DimensionParams, RenderConfig, calculate_dimensions
from boxplot.services.options import BoxplotOptions, read_boxplot_options
from boxplot.services.tooltips import build_tooltip_index
from boxplot.settings.config import (
    DEFAULT_CONTAINER_HEIGHT,
    DEFAULT_CONTAINER_WIDTH,
    MAX_GROUPS_WARNING,
)
from boxplot.settings.logging import log_event, log_exception, log_warning

NO_DATA_MESSAGE = "No data available for the boxplot"
MISSING_COLUMNS_MESSAGE = "Boxplot requires at least 1 measure and 1 dimension"
NO_GROUPS_MESSAGE = "Unable to compute boxplot data"

# Share of a group slot a box takes when fitting the width.
FIT_WIDTH_RATIO = 0.6


@dataclass(frozen=True)
class RenderResult:
    html: str
    config: Optional[RenderConfig] = None
    tooltips: Dict[str, str] = field(default_factory=dict)
    status: str = "ok"
    message: str = ""
    data: Optional[BoxplotData] = None


def _placeholder(message: str) -> RenderResult:
    return RenderResult(html=render_message(message), status="empty", message=message)


def _container_size(value: Optional[float], default: int) -> float:
    if value is None or value <= 0:
        return float(default)
    return float(value)


def build_render_config(
    options: BoxplotOptions,
    num_groups: int,
    container_width: float,
    container_height: float,
) -> RenderConfig:
    """Lay out the chart, resizing boxes to their slots when ``fit_width`` is on."""
    params = DimensionParams(
        show_y_axis=options.show_y_axis,
        label_font_size=options.label_font_size,
        value_label_font_size=options.value_label_font_size,
        num_groups=num_groups,
        box_width=options.box_width,
        group_spacing=options.layout.group_spacing,
        layout_style=options.layout.layout_style,
        margin_top=options.layout.margin_top,
        margin_bottom=options.layout.margin_bottom,
        margin_left=options.layout.margin_left,
        margin_right=options.layout.margin_right,
    )
    config = calculate_dimensions(container_width, container_height, params)
    if options.fit_width and num_groups > 0 and config.has_plot_area:
        extent = (
            config.plot_area_width
            if options.orientation == "vertical"
            else config.plot_area_height
        )
        config = replace(config, box_width=extent / num_groups * FIT_WIDTH_RATIO)
    return config


def _options_summary(options: BoxplotOptions) -> Dict[str, Any]:
    return {
        "orientation": options.orientation,
        "method": options.calculation_method,
        "whiskers": options.whisker_type,
        "sort": options.sort_type,
        "scale": options.y_scale,
        "notch": options.show_notch,
        "jitter": options.show_jitter,
        "mean": options.show_mean,
    }


def render_chart(
    result: Optional[TabularResult],
    columns: Sequence[ChartColumn],
    visual_props: Optional[Mapping[str, Any]] = None,
    container_width: Optional[float] = None,
    container_height: Optional[float] = None,
) -> RenderResult:
    """
    Render a boxplot for the host.

    Missing input yields an ``empty`` result with a placeholder message;
    any failure while rendering yields an ``error`` result and is logged
    with its stack trace.
    """
    started = time.perf_counter()
    if result is None or not result.rows:
        return _placeholder(NO_DATA_MESSAGE)

    measure, dimensions = select_columns(columns, result)
    if measure is None or not dimensions:
        return _placeholder(MISSING_COLUMNS_MESSAGE)

    try:
        options = read_boxplot_options(visual_props, measure.id)
        data = calculate_boxplot_data(
            result, measure.id, [d.id for d in dimensions], options
        )
        if data is None or not data.groups:
            return _placeholder(NO_GROUPS_MESSAGE)

        num_groups = len(data.groups)
        if num_groups > MAX_GROUPS_WARNING:
            log_warning(
                "render.too_many_groups",
                {"measure": measure.id, "groups": num_groups, "limit": MAX_GROUPS_WARNING},
            )

        config = build_render_config(
            options,
            num_groups,
            _container_size(container_width, DEFAULT_CONTAINER_WIDTH),
            _container_size(container_height, DEFAULT_CONTAINER_HEIGHT),
        )
        svg = render_boxplot(data, config, options)
        tooltips = build_tooltip_index(data, options.tooltip)
    except Exception as exc:
        log_exception("render.failed", {"measure": measure.id})
        message = f"Error rendering boxplot: {exc}"
        return RenderResult(
            html=render_message(message, "boxplot-error"),
            status="error",
            message=message,
        )

    elapsed_ms = (time.perf_counter() - started) * 1000
    log_event(
        "render",
        {
            "measure": measure.id,
            "groups": num_groups,
            "rows": len(result.rows),
            "elapsed_ms": f"{elapsed_ms:.1f}",
            **_options_summary(options),
        },
    )
    return RenderResult(html=svg, config=config, tooltips=tooltips, data=data)
