"""Tooltip text and HTML for boxplot groups and points."""

from __future__ import annotations

import html
import re
from typing import Dict, List, Optional

from boxplot.services.grouping import BoxplotData
from boxplot.services.options import TooltipConfig
from boxplot.services.statistics import BoxplotStatistics
from boxplot.views.components.formatters import format_value

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


def _fmt(value: float) -> str:
    return format_value(value, "decimal", 2)


def build_tooltip_text(category_name: str, stats: BoxplotStatistics, count: int) -> str:
    """Return one line per statistic, for native SVG ``<title>`` tooltips."""
    lines = [
        str(category_name),
        f"Max: {_fmt(stats.max)}",
        f"Q3: {_fmt(stats.q3)}",
        f"Median: {_fmt(stats.q2)}",
    ]
    if stats.mean is not None:
        lines.append(f"Mean: {_fmt(stats.mean)}")
    lines.extend(
        [
            f"Q1: {_fmt(stats.q1)}",
            f"Min: {_fmt(stats.min)}",
            f"n={count}",
        ]
    )
    return "\n".join(lines)


def build_svg_title(category_name: str, stats: BoxplotStatistics, count: int) -> str:
    """Return an escaped ``<title>`` element."""
    text = build_tooltip_text(category_name, stats, count)
    return f"<title>{html.escape(text)}</title>"


def build_point_tooltip(category_name: str, value: float, index: int) -> str:
    """Return the plain-text tooltip of a single data point."""
    return f"{category_name}\nValue: {_fmt(value)}\nPoint #{index + 1}"


def _simple_html(category_name: str, stats: BoxplotStatistics, count: int) -> str:
    return (
        "<div class='boxplot-tooltip'>"
        f"<div class='boxplot-tooltip-title'>{html.escape(category_name)}</div>"
        f"<div>Median: {_fmt(stats.q2)}</div>"
        f"<div class='boxplot-tooltip-count'>n = {count}</div>"
        "</div>"
    )


def _detailed_html(category_name: str, stats: BoxplotStatistics, count: int) -> str:
    rows: List[tuple[str, float]] = [
        ("Max", stats.max),
        ("Q3", stats.q3),
        ("Median", stats.q2),
    ]
    if stats.mean is not None:
        rows.append(("Mean", stats.mean))
    rows.extend([("Q1", stats.q1), ("Min", stats.min)])
    body = "".join(
        f"<tr><td><strong>{name}</strong></td><td>{_fmt(value)}</td></tr>"
        for name, value in rows
    )
    return (
        "<div class='boxplot-tooltip'>"
        f"<div class='boxplot-tooltip-title'>{html.escape(category_name)}</div>"
        f"<table>{body}</table>"
        f"<div class='boxplot-tooltip-count'>n = {count}</div>"
        "</div>"
    )


def _custom_html(
    template: str, category_name: str, stats: BoxplotStatistics, count: int
) -> str:
    """
    Fill ``{placeholder}`` tokens in an escaped template.

    The template text is escaped before substitution, so markup typed by the
    user shows up literally. Unknown placeholders are left untouched.
    """
    values = {
        "categoryName": html.escape(category_name),
        "max": _fmt(stats.max),
        "q3": _fmt(stats.q3),
        "median": _fmt(stats.q2),
        "mean": _fmt(stats.mean) if stats.mean is not None else "-",
        "q1": _fmt(stats.q1),
        "min": _fmt(stats.min),
        "count": str(count),
    }
    escaped = html.escape(template)
    filled = _PLACEHOLDER.sub(
        lambda m: values.get(m.group(1), m.group(0)), escaped
    )
    return (
        "<div class='boxplot-tooltip'>" + filled.replace("\n", "<br>") + "</div>"
    )


def build_tooltip_html(
    category_name: str,
    stats: BoxplotStatistics,
    count: int,
    tooltip: Optional[TooltipConfig] = None,
) -> str:
    """Return tooltip HTML in the configured format."""
    tooltip = tooltip or TooltipConfig()
    if tooltip.format == "custom" and tooltip.custom_template:
        return _custom_html(tooltip.custom_template, category_name, stats, count)
    if tooltip.format == "simple":
        return _simple_html(category_name, stats, count)
    return _detailed_html(category_name, stats, count)


def build_tooltip_index(
    data: BoxplotData, tooltip: Optional[TooltipConfig] = None
) -> Dict[str, str]:
    """
    Return tooltip content keyed by element identity.

    Groups use ``group-{i}`` (HTML) and points ``point-{i}-{j}`` (text), with
    indices matching the ``data-group-index`` / ``data-point-index``
    attributes in the SVG.
    """
    tooltip = tooltip or TooltipConfig()
    if not tooltip.enabled:
        return {}

    index: Dict[str, str] = {}
    for group_index, group in enumerate(data.groups):
        index[f"group-{group_index}"] = build_tooltip_html(
            group.dimension_value, group.stats, group.count, tooltip
        )
        for point_index, value in enumerate(group.values):
            index[f"point-{group_index}-{point_index}"] = build_point_tooltip(
                group.dimension_value, value, point_index
            )
    return index
