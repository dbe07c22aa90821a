"""Chart dimensioning: margins, plot area and group spacing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from boxplot.settings.constants import LAYOUT_PRESETS


@dataclass(frozen=True)
class RenderConfig:
    """
    Layout geometry shared by every renderer.

    Groups are placed in equal slots of the plot area. ``group_spacing`` is
    reported to the host for its own layout and does not move the groups.
    """

    chart_width: float
    chart_height: float
    left_margin: float
    right_margin: float
    top_margin: float
    bottom_margin: float
    plot_area_width: float
    plot_area_height: float
    group_spacing: float
    box_width: float
    show_y_axis: bool
    label_font_size: float
    value_label_font_size: float

    @property
    def has_plot_area(self) -> bool:
        return self.plot_area_width > 0 and self.plot_area_height > 0


@dataclass(frozen=True)
class DimensionParams:
    show_y_axis: bool
    label_font_size: float
    value_label_font_size: float
    num_groups: int
    box_width: float = 60
    group_spacing: Optional[float] = None
    layout_style: str = "normal"
    margin_top: Optional[float] = None
    margin_bottom: Optional[float] = None
    margin_left: Optional[float] = None
    margin_right: Optional[float] = None


def _override(value: Optional[float], default: float) -> float:
    return default if value is None else value


def calculate_dimensions(
    container_width: float, container_height: float, params: DimensionParams
) -> RenderConfig:
    """
    Derive margins, plot area and group spacing for a container.

    Margins come from the density preset unless overridden per side. The
    plot area is not clamped; renderers skip geometry when it is empty.
    """
    preset = LAYOUT_PRESETS.get(params.layout_style, LAYOUT_PRESETS["normal"])

    default_left = preset["left_axis"] if params.show_y_axis else preset["left_no_axis"]
    default_bottom = (
        preset["bottom_font_factor"] * params.label_font_size + preset["bottom_base"]
    )

    top_margin = _override(params.margin_top, preset["top"])
    bottom_margin = _override(params.margin_bottom, default_bottom)
    left_margin = _override(params.margin_left, default_left)
    right_margin = _override(params.margin_right, preset["right"])

    plot_area_width = container_width - left_margin - right_margin
    plot_area_height = container_height - top_margin - bottom_margin

    base_spacing = _override(params.group_spacing, preset["group_spacing"])
    if params.num_groups > 0:
        group_spacing = max(base_spacing, plot_area_width / (params.num_groups + 1))
    else:
        group_spacing = base_spacing

    return RenderConfig(
        chart_width=container_width,
        chart_height=container_height,
        left_margin=left_margin,
        right_margin=right_margin,
        top_margin=top_margin,
        bottom_margin=bottom_margin,
        plot_area_width=plot_area_width,
        plot_area_height=plot_area_height,
        group_spacing=group_spacing,
        box_width=params.box_width,
        show_y_axis=params.show_y_axis,
        label_font_size=params.label_font_size,
        value_label_font_size=params.value_label_font_size,
    )
