"""Map data values to pixel coordinates along the value axis."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from boxplot.services.layout import RenderConfig
from boxplot.settings.logging import log_warning


def _linear_ratio(value: float, min_value: float, max_value: float) -> float:
    return (value - min_value) / (max_value - min_value)


def _log_ratio(value: float, min_value: float, max_value: float) -> float:
    """
    Return the log10 position of value, or the linear one as a fallback.

    Non-positive domains are shifted by ``abs(min) + 1`` first. Operands that
    are still non-positive (a value far below the domain) fall back to the
    linear ratio.
    """
    if min_value <= 0:
        offset = abs(min_value) + 1
        value += offset
        min_value += offset
        max_value += offset

    if value <= 0 or min_value <= 0 or max_value <= 0:
        log_warning(
            "scale.log_fallback_linear",
            {"value": value, "min": min_value, "max": max_value},
        )
        return _linear_ratio(value, min_value, max_value)

    log_min = math.log10(min_value)
    return (math.log10(value) - log_min) / (math.log10(max_value) - log_min)


def value_to_coordinate(
    value: float,
    min_value: float,
    max_value: float,
    axis_start: float,
    axis_length: float,
    orientation: str,
    scale: str = "linear",
) -> float:
    """
    Convert a data value to a pixel position along the value axis.

    Vertical charts grow upwards, so larger values get smaller pixel
    positions. A zero-width domain maps everything to the axis midpoint.
    """
    if max_value == min_value:
        return axis_start + axis_length / 2

    if scale == "log":
        ratio = _log_ratio(value, min_value, max_value)
    else:
        ratio = _linear_ratio(value, min_value, max_value)

    if orientation == "vertical":
        return axis_start + axis_length - ratio * axis_length
    return axis_start + ratio * axis_length


def resolve_scale(requested: str, min_value: float, max_value: float) -> str:
    """Return the scale actually applied for the domain."""
    if requested != "log":
        return "linear"
    if min_value <= 0 or max_value <= 0:
        log_warning(
            "scale.log_domain_not_positive",
            {"min": min_value, "max": max_value},
        )
        return "linear"
    return "log"


@dataclass(frozen=True)
class ValueAxis:
    """A value domain bound to the plot area it is drawn along."""

    min_value: float
    max_value: float
    config: RenderConfig
    orientation: str = "vertical"
    scale: str = "linear"

    @property
    def is_vertical(self) -> bool:
        return self.orientation == "vertical"

    @property
    def start(self) -> float:
        if self.is_vertical:
            return self.config.top_margin
        return self.config.left_margin

    @property
    def length(self) -> float:
        if self.is_vertical:
            return self.config.plot_area_height
        return self.config.plot_area_width

    def to_pixel(self, value: float) -> float:
        return value_to_coordinate(
            value,
            self.min_value,
            self.max_value,
            self.start,
            self.length,
            self.orientation,
            self.scale,
        )

    def cross(self, center: Tuple[float, float]) -> float:
        """Return the cross-axis component of a group centre."""
        return center[0] if self.is_vertical else center[1]


def group_center(
    index: int, count: int, config: RenderConfig, orientation: str
) -> Tuple[float, float]:
    """Return the centre of group ``index`` in its slot of the plot area."""
    if orientation == "vertical":
        slot = config.plot_area_width / count
        return (
            config.left_margin + (index + 0.5) * slot,
            config.top_margin + config.plot_area_height / 2,
        )
    slot = config.plot_area_height / count
    return (
        config.left_margin + config.plot_area_width / 2,
        config.top_margin + (index + 0.5) * slot,
    )
