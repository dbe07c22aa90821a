"""Read the host visual-property bag into a flat boxplot options value."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from boxplot.settings.constants import (
    CALCULATION_METHOD_ALIASES,
    DEFAULT_COLORS,
    LAYOUT_STYLE_ALIASES,
    OUTLIER_SHAPES,
    REFERENCE_LINE_ALIASES,
    SORT_TYPE_ALIASES,
    TOOLTIP_FORMATS,
    VALUE_LABEL_POSITIONS,
    WHISKER_TYPE_ALIASES,
)
from boxplot.settings.logging import log_debug


@dataclass(frozen=True)
class BoxStyle:
    fill: str = DEFAULT_COLORS[0]
    stroke: str = "#374151"
    stroke_width: float = 1
    border_radius: float = 0
    opacity: float = 0.8


@dataclass(frozen=True)
class MedianStyle:
    color: str = "#000000"
    stroke_width: float = 2
    stroke_dasharray: Optional[str] = None


@dataclass(frozen=True)
class WhiskerStyle:
    color: str = DEFAULT_COLORS[0]
    stroke_width: float = 1
    cap_width: float = 40
    stroke_dasharray: Optional[str] = None


@dataclass(frozen=True)
class OutlierStyle:
    show: bool = True
    shape: str = "circle"
    size: float = 4
    fill: str = "#ef4444"
    stroke: str = "#000000"
    stroke_width: float = 1


@dataclass(frozen=True)
class GridLinesConfig:
    show: bool = False
    color: str = "#e5e7eb"
    stroke_width: float = 1
    stroke_dasharray: Optional[str] = None


@dataclass(frozen=True)
class DividerLinesConfig:
    show: bool = False
    color: str = "#e5e7eb"
    stroke_width: float = 1
    stroke_dasharray: Optional[str] = None


@dataclass(frozen=True)
class ReferenceLinesConfig:
    show: bool = False
    type: str = "none"
    value: Optional[float] = None
    label: Optional[str] = None
    color: str = "#ef4444"
    stroke_width: float = 2
    stroke_dasharray: str = "5,5"


@dataclass(frozen=True)
class ValueLabelsConfig:
    show: bool = False
    position: str = "outside"
    color: str = "#374151"
    font_size: float = 10
    format: str = "auto"
    decimals: int = 2
    show_min: bool = True
    show_q1: bool = True
    show_median: bool = True
    show_mean: bool = False
    show_q3: bool = True
    show_max: bool = True


@dataclass(frozen=True)
class TooltipConfig:
    enabled: bool = True
    format: str = "simple"
    custom_template: Optional[str] = None


@dataclass(frozen=True)
class LayoutConfig:
    margin_top: Optional[float] = None
    margin_bottom: Optional[float] = None
    margin_left: Optional[float] = None
    margin_right: Optional[float] = None
    group_spacing: Optional[float] = None
    layout_style: str = "normal"


@dataclass(frozen=True)
class BoxplotOptions:
    show_y_axis: bool = True
    show_outliers: bool = True
    orientation: str = "vertical"
    box_width: float = 60
    variable_width: bool = False
    whisker_width: float = 40
    color: str = DEFAULT_COLORS[0]
    opacity: float = 0.8
    label_font_size: float = 12
    value_label_font_size: float = 10
    y_axis_color: str = "#374151"
    x_axis_color: str = "#374151"
    background_color: str = "transparent"
    axis_stroke_width: float = 1.5
    calculation_method: str = "auto"
    whisker_type: str = "iqr_1_5"
    show_mean: bool = False
    show_notch: bool = False
    sort_type: str = "alphabetical"
    y_scale: str = "linear"
    median_style: MedianStyle = field(default_factory=MedianStyle)
    whisker_style: WhiskerStyle = field(default_factory=WhiskerStyle)
    box_style: BoxStyle = field(default_factory=BoxStyle)
    outlier_style: OutlierStyle = field(default_factory=OutlierStyle)
    grid_lines: GridLinesConfig = field(default_factory=GridLinesConfig)
    divider_lines: DividerLinesConfig = field(default_factory=DividerLinesConfig)
    reference_lines: ReferenceLinesConfig = field(
        default_factory=ReferenceLinesConfig
    )
    value_labels: ValueLabelsConfig = field(default_factory=ValueLabelsConfig)
    show_jitter: bool = False
    jitter_opacity: float = 0.5
    tooltip: TooltipConfig = field(default_factory=TooltipConfig)
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    fit_width: bool = False
    axis_label_x: Optional[str] = None
    axis_label_y: Optional[str] = None

    @property
    def needs_global_mean(self) -> bool:
        """Whether global stats must carry the mean."""
        return self.show_mean or (
            self.reference_lines.show
            and self.reference_lines.type == "global_mean"
        )


def _section(source: Any, key: str) -> Dict[str, Any]:
    """Return a nested mapping, or an empty dict for anything else."""
    if not isinstance(source, Mapping):
        return {}
    value = source.get(key)
    return dict(value) if isinstance(value, Mapping) else {}


def _number(value: Any, default: Optional[float]) -> Optional[float]:
    """Return value when it is a finite real number (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    if not math.isfinite(value):
        return default
    return value


def _text(value: Any, default: Optional[str]) -> Optional[str]:
    """Return value when it is a non-empty string."""
    if isinstance(value, str) and value:
        return value
    return default


def _flag(value: Any, default: bool) -> bool:
    """Return value when it is a bool."""
    return value if isinstance(value, bool) else default


def map_choice(
    value: Any, aliases: List[Tuple[str, str]], default: str, name: str = ""
) -> str:
    """
    Map a persisted option label to its technical value.

    Exact technical values win; otherwise the first alias contained in the
    lower-cased label is used. Unknown labels return ``default``.
    """
    if not isinstance(value, str) or not value.strip():
        return default
    normalized = value.strip().lower()
    technical = {tech for _, tech in aliases}
    if normalized in technical:
        return normalized
    for alias, tech in aliases:
        if alias in normalized:
            return tech
    log_debug("options.unknown_choice", {"option": name, "value": value})
    return default


def _map_member(value: Any, members: Tuple[str, ...], default: str) -> str:
    """Return the lower-cased value when it is one of ``members``."""
    if isinstance(value, str) and value.strip().lower() in members:
        return value.strip().lower()
    return default


def map_orientation(value: Any) -> str:
    if isinstance(value, str):
        normalized = value.lower()
        if "horizontal" in normalized:
            return "horizontal"
        if "vertical" in normalized:
            return "vertical"
    return "vertical"


def map_scale(value: Any) -> str:
    if isinstance(value, str):
        normalized = value.lower()
        if "linear" in normalized:
            return "linear"
        if "log" in normalized:
            return "log"
    return "linear"


def read_boxplot_options(
    visual_props: Optional[Mapping[str, Any]], measure_id: str
) -> BoxplotOptions:
    """
    Resolve the host visual-property bag into ``BoxplotOptions``.

    Per-measure sections live under ``columnVisualProps[measure_id]``; chart
    wide sections sit at the top level. Missing or mistyped entries fall back
    to defaults.
    """
    props = visual_props if isinstance(visual_props, Mapping) else {}

    measure_config = _section(_section(props, "columnVisualProps"), measure_id)
    visualization = _section(measure_config, "visualization")
    box_section = _section(measure_config, "boxStyle")
    median_section = _section(measure_config, "medianWhiskers")
    outlier_section = _section(measure_config, "outlierStyle")
    data_config = _section(measure_config, "dataConfig")
    value_labels_section = _section(measure_config, "valueLabels")

    chart_options = _section(props, "chart_options")
    axes = _section(props, "axes")
    text_sizes = _section(props, "text_sizes")
    colors_style = _section(props, "chart_colors_style")
    grid_section = _section(props, "gridLines")
    divider_section = _section(props, "dividerLines")
    tooltip_section = _section(props, "tooltip")
    layout_section = _section(props, "layout")
    reference_section = _section(props, "referenceLines")
    jitter_section = _section(props, "jitterPlot")

    default_color = _text(visualization.get("color"), DEFAULT_COLORS[0])

    box_style = BoxStyle(
        fill=_text(box_section.get("fill"), default_color),
        stroke=_text(box_section.get("stroke"), "#374151"),
        stroke_width=_number(box_section.get("strokeWidth"), 1),
        border_radius=_number(box_section.get("borderRadius"), 0),
        opacity=_number(box_section.get("opacity"), 0.8),
    )

    median_style = MedianStyle(
        color=_text(median_section.get("medianColor"), "#000000"),
        stroke_width=_number(median_section.get("medianStrokeWidth"), 2),
        stroke_dasharray=_text(median_section.get("medianStrokeDash"), None),
    )

    whisker_style = WhiskerStyle(
        color=_text(median_section.get("whiskerColor"), default_color),
        stroke_width=_number(median_section.get("whiskerStrokeWidth"), 1),
        cap_width=_number(median_section.get("whiskerCapWidth"), 40),
    )

    show_outliers_default = measure_config.get("showOutliers") is not False
    outlier_style = OutlierStyle(
        show=_flag(outlier_section.get("show"), show_outliers_default),
        shape=_map_member(outlier_section.get("shape"), OUTLIER_SHAPES, "circle"),
        size=_number(outlier_section.get("size"), 4),
        fill=_text(outlier_section.get("fill"), "#ef4444"),
        stroke=_text(outlier_section.get("stroke"), "#000000"),
        stroke_width=_number(outlier_section.get("strokeWidth"), 1),
    )

    grid_lines = GridLinesConfig(
        show=_flag(grid_section.get("show"), False),
        color=_text(grid_section.get("color"), "#e5e7eb"),
        stroke_width=_number(grid_section.get("strokeWidth"), 1),
        stroke_dasharray=_text(grid_section.get("strokeDash"), None),
    )

    divider_lines = DividerLinesConfig(
        show=_flag(divider_section.get("show"), False),
        color=_text(divider_section.get("color"), "#e5e7eb"),
        stroke_width=_number(divider_section.get("strokeWidth"), 1),
        stroke_dasharray=_text(divider_section.get("strokeDash"), None),
    )

    reference_lines = ReferenceLinesConfig(
        show=_flag(reference_section.get("show"), False),
        type=map_choice(
            reference_section.get("type"),
            REFERENCE_LINE_ALIASES,
            "none",
            "referenceLines.type",
        ),
        value=_number(reference_section.get("value"), None),
        label=_text(reference_section.get("label"), None),
        color=_text(reference_section.get("color"), "#ef4444"),
        stroke_width=_number(reference_section.get("strokeWidth"), 2),
        stroke_dasharray=_text(reference_section.get("strokeDasharray"), "5,5"),
    )

    value_labels = ValueLabelsConfig(
        show=_flag(value_labels_section.get("show"), False),
        position=_map_member(
            value_labels_section.get("position"), VALUE_LABEL_POSITIONS, "outside"
        ),
        color=_text(value_labels_section.get("color"), "#374151"),
        font_size=_number(
            value_labels_section.get("fontSize"),
            _number(text_sizes.get("valueLabelFontSize"), 10),
        ),
        format=_text(value_labels_section.get("format"), "auto"),
        decimals=max(int(_number(value_labels_section.get("decimals"), 2)), 0),
        show_min=_flag(value_labels_section.get("showMin"), True),
        show_q1=_flag(value_labels_section.get("showQ1"), True),
        show_median=_flag(value_labels_section.get("showMedian"), True),
        show_mean=_flag(value_labels_section.get("showMean"), False),
        show_q3=_flag(value_labels_section.get("showQ3"), True),
        show_max=_flag(value_labels_section.get("showMax"), True),
    )

    tooltip = TooltipConfig(
        enabled=_flag(tooltip_section.get("enabled"), True),
        format=_map_member(tooltip_section.get("format"), TOOLTIP_FORMATS, "simple"),
        custom_template=_text(tooltip_section.get("customTemplate"), None),
    )

    layout = LayoutConfig(
        margin_top=_number(layout_section.get("marginTop"), None),
        margin_bottom=_number(layout_section.get("marginBottom"), None),
        margin_left=_number(layout_section.get("marginLeft"), None),
        margin_right=_number(layout_section.get("marginRight"), None),
        group_spacing=_number(layout_section.get("groupSpacing"), None),
        layout_style=map_choice(
            layout_section.get("layoutStyle"),
            LAYOUT_STYLE_ALIASES,
            "normal",
            "layout.layoutStyle",
        ),
    )

    if "showYAxis" in axes:
        show_y_axis = _flag(axes.get("showYAxis"), True)
    else:
        show_y_axis = chart_options.get("showYAxis") is not False

    box_width = _number(
        box_section.get("boxWidth"), _number(measure_config.get("boxWidth"), 60)
    )

    return BoxplotOptions(
        show_y_axis=show_y_axis,
        show_outliers=outlier_style.show,
        orientation=map_orientation(visualization.get("orientation")),
        box_width=box_width,
        variable_width=box_section.get("variableWidth") is True,
        whisker_width=whisker_style.cap_width,
        color=default_color,
        opacity=box_style.opacity,
        label_font_size=_number(text_sizes.get("labelFontSize"), 12),
        value_label_font_size=_number(text_sizes.get("valueLabelFontSize"), 10),
        y_axis_color=_text(colors_style.get("yAxisColor"), "#374151"),
        x_axis_color=_text(colors_style.get("xAxisColor"), "#374151"),
        background_color=_text(colors_style.get("backgroundColor"), "transparent"),
        axis_stroke_width=_number(colors_style.get("axisStrokeWidth"), 1.5),
        calculation_method=map_choice(
            data_config.get("calculationMethod"),
            CALCULATION_METHOD_ALIASES,
            "auto",
            "dataConfig.calculationMethod",
        ),
        whisker_type=map_choice(
            data_config.get("whiskerType"),
            WHISKER_TYPE_ALIASES,
            "iqr_1_5",
            "dataConfig.whiskerType",
        ),
        show_mean=median_section.get("showMean") is True,
        show_notch=median_section.get("showNotch") is True,
        sort_type=map_choice(
            axes.get("sortType"), SORT_TYPE_ALIASES, "alphabetical", "axes.sortType"
        ),
        y_scale=map_scale(chart_options.get("yScale")),
        median_style=median_style,
        whisker_style=whisker_style,
        box_style=box_style,
        outlier_style=outlier_style,
        grid_lines=grid_lines,
        divider_lines=divider_lines,
        reference_lines=reference_lines,
        value_labels=value_labels,
        show_jitter=jitter_section.get("showJitter") is True,
        jitter_opacity=_number(jitter_section.get("jitterOpacity"), 0.5),
        tooltip=tooltip,
        layout=layout,
        fit_width=_flag(layout_section.get("fitWidth"), False),
        axis_label_x=_text(layout_section.get("axisLabelX"), None),
        axis_label_y=_text(layout_section.get("axisLabelY"), None),
    )
