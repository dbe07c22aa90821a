"""Statistic value labels and the category label of each group."""

from __future__ import annotations

from typing import List, Tuple

from boxplot.plugins.charts.svg import text
from boxplot.services.options import ValueLabelsConfig
from boxplot.services.scale import ValueAxis
from boxplot.services.statistics import BoxplotStatistics
from boxplot.views.components.formatters import format_value, truncate_text

LABEL_GAP = 4
CATEGORY_LABEL_MAX_LEN = 20
_FORMATS = ("decimal", "integer", "percentage", "compact")


def _label_entries(
    stats: BoxplotStatistics, cfg: ValueLabelsConfig
) -> List[Tuple[str, float]]:
    entries = [
        (cfg.show_max, "max", stats.max),
        (cfg.show_q3, "q3", stats.q3),
        (cfg.show_median, "median", stats.q2),
        (cfg.show_mean and stats.mean is not None, "mean", stats.mean),
        (cfg.show_q1, "q1", stats.q1),
        (cfg.show_min, "min", stats.min),
    ]
    return [(name, value) for shown, name, value in entries if shown]


def render_value_labels(
    stats: BoxplotStatistics,
    center: Tuple[float, float],
    axis: ValueAxis,
    cfg: ValueLabelsConfig,
    thickness: float,
) -> str:
    """
    Return labels for the enabled statistics.

    ``outside`` puts them beside the box (right of it, or above it when
    horizontal), ``inside`` just within the box edge, ``both`` does both.
    """
    if not cfg.show or not axis.config.has_plot_area:
        return ""

    fmt = cfg.format if cfg.format in _FORMATS else "decimal"
    cross = axis.cross(center)
    half = thickness / 2
    slots = []
    if cfg.position in ("outside", "both"):
        slots.append("outside")
    if cfg.position in ("inside", "both"):
        slots.append("inside")

    parts = []
    for name, value in _label_entries(stats, cfg):
        value_px = axis.to_pixel(value)
        content = format_value(value, fmt, cfg.decimals)
        for slot in slots:
            if axis.is_vertical:
                edge = cross + half if slot == "outside" else cross - half
                x, y = edge + LABEL_GAP, value_px
                anchor, baseline = "start", "middle"
            else:
                if slot == "outside":
                    y = cross - half - LABEL_GAP
                else:
                    y = cross - half + LABEL_GAP + cfg.font_size
                x = value_px
                anchor, baseline = "middle", None
            parts.append(
                text(
                    x,
                    y,
                    content,
                    text_anchor=anchor,
                    dominant_baseline=baseline,
                    fill=cfg.color,
                    font_size=float(cfg.font_size),
                    class_=f"boxplot-value-label boxplot-value-label-{name}",
                )
            )
    return "".join(parts)


def render_category_label(
    label: str,
    center: Tuple[float, float],
    axis: ValueAxis,
    color: str,
    font_size: float,
) -> str:
    """Return the group label under the slot, or left of it when horizontal."""
    config = axis.config
    if not config.has_plot_area:
        return ""
    shown = truncate_text(str(label), CATEGORY_LABEL_MAX_LEN)
    if axis.is_vertical:
        return text(
            center[0],
            config.top_margin + config.plot_area_height + font_size + 8,
            shown,
            text_anchor="middle",
            fill=color,
            font_size=float(font_size),
            class_="boxplot-category-label",
        )
    return text(
        config.left_margin - 8,
        center[1],
        shown,
        text_anchor="end",
        dominant_baseline="middle",
        fill=color,
        font_size=float(font_size),
        class_="boxplot-category-label",
    )
