"""Shared constants used across the boxplot pipeline."""

DEFAULT_COLORS = ["#3b82f6", "#10b981", "#f59e0b", "#ef4444", "#8b5cf6"]

# Median confidence interval: +/- 1.58 * IQR / sqrt(n).
NOTCH_FACTOR = 1.58
# Per-side pinch of the notch as a share of box thickness.
NOTCH_MAX_DEPTH_RATIO = 0.3

# Groups with fewer values than this render as a dot plot.
DOT_PLOT_THRESHOLD = 3

# Jitter spread as a share of box width.
JITTER_SPREAD_RATIO = 0.4

AXIS_TICK_COUNT = 5

GROUP_KEY_SEPARATOR = "\x1f"

OUTLIER_SHAPES = ("circle", "square", "diamond", "triangle", "cross")
TOOLTIP_FORMATS = ("simple", "detailed", "custom")
VALUE_LABEL_POSITIONS = ("inside", "outside", "both")

# Margins and base group spacing per layout density.
LAYOUT_PRESETS = {
    "compact": {
        "top": 20,
        "bottom_base": 10,
        "bottom_font_factor": 1,
        "left_axis": 60,
        "left_no_axis": 20,
        "right": 20,
        "group_spacing": 40,
    },
    "normal": {
        "top": 40,
        "bottom_base": 20,
        "bottom_font_factor": 2,
        "left_axis": 80,
        "left_no_axis": 40,
        "right": 40,
        "group_spacing": 80,
    },
    "spacious": {
        "top": 60,
        "bottom_base": 30,
        "bottom_font_factor": 2,
        "left_axis": 100,
        "left_no_axis": 50,
        "right": 60,
        "group_spacing": 120,
    },
}

# Display labels the host may persist, mapped to technical values.
# Keys are matched case-insensitively as substrings, in order.
CALCULATION_METHOD_ALIASES = [
    ("auto", "auto"),
    ("automatic", "auto"),
    ("tukey", "tukey"),
    ("inclusive", "inclusive"),
    ("exclusive", "exclusive"),
]

WHISKER_TYPE_ALIASES = [
    ("iqr_1_5", "iqr_1_5"),
    ("1.5", "iqr_1_5"),
    ("standard", "iqr_1_5"),
    ("iqr_3", "iqr_3"),
    ("3x", "iqr_3"),
    ("conservative", "iqr_3"),
    ("data_extremes", "data_extremes"),
    ("extremes", "data_extremes"),
    ("percentile", "percentile_5_95"),
    ("5-95", "percentile_5_95"),
    ("min_max", "min_max"),
    ("min/max", "min_max"),
]

SORT_TYPE_ALIASES = [
    ("alphabetical", "alphabetical"),
    ("mean_asc", "mean_asc"),
    ("mean ascending", "mean_asc"),
    ("mean_desc", "mean_desc"),
    ("mean descending", "mean_desc"),
    ("median_asc", "median_asc"),
    ("median ascending", "median_asc"),
    ("median_desc", "median_desc"),
    ("median descending", "median_desc"),
    ("iqr_asc", "iqr_asc"),
    ("variability ascending", "iqr_asc"),
    ("iqr_desc", "iqr_desc"),
    ("variability descending", "iqr_desc"),
]

REFERENCE_LINE_ALIASES = [
    ("none", "none"),
    ("fixed", "fixed"),
    ("global_mean", "global_mean"),
    ("mean", "global_mean"),
    ("global_median", "global_median"),
    ("median", "global_median"),
]

LAYOUT_STYLE_ALIASES = [
    ("compact", "compact"),
    ("normal", "normal"),
    ("spacious", "spacious"),
    ("custom", "custom"),
]
