"""Whisker fence policies for boxplot statistics."""

from typing import Sequence, Tuple

from . import register_whisker_method
from .quartiles import calculate_percentile

Fences = Tuple[float, float]


def iqr_fences(q1: float, q3: float, iqr: float, factor: float) -> Fences:
    """Return Tukey fences ``q1 - k*iqr`` / ``q3 + k*iqr``."""
    return q1 - factor * iqr, q3 + factor * iqr


@register_whisker_method("iqr_1_5")
def whiskers_iqr_1_5(
    sorted_values: Sequence[float], q1: float, q3: float, iqr: float
) -> Fences:
    """Standard fences at 1.5 IQR."""
    return iqr_fences(q1, q3, iqr, 1.5)


@register_whisker_method("iqr_3")
def whiskers_iqr_3(
    sorted_values: Sequence[float], q1: float, q3: float, iqr: float
) -> Fences:
    """Conservative fences at 3 IQR."""
    return iqr_fences(q1, q3, iqr, 3.0)


@register_whisker_method("data_extremes")
def whiskers_data_extremes(
    sorted_values: Sequence[float], q1: float, q3: float, iqr: float
) -> Fences:
    """Fences at the sample extremes, so nothing is an outlier."""
    return float(sorted_values[0]), float(sorted_values[-1])


@register_whisker_method("percentile_5_95")
def whiskers_percentile_5_95(
    sorted_values: Sequence[float], q1: float, q3: float, iqr: float
) -> Fences:
    """Fences at the interpolated 5th and 95th percentiles."""
    return (
        calculate_percentile(sorted_values, 5),
        calculate_percentile(sorted_values, 95),
    )


@register_whisker_method("min_max")
def whiskers_min_max(
    sorted_values: Sequence[float], q1: float, q3: float, iqr: float
) -> Fences:
    """
    Fences at the extremes of values inside the 1.5 IQR fences.

    The pre-filter is always 1.5 IQR, whatever method produced q1/q3.
    Falls back to the sample extremes when nothing survives.
    """
    lower, upper = iqr_fences(q1, q3, iqr, 1.5)
    kept = [v for v in sorted_values if lower <= v <= upper]
    if not kept:
        return float(sorted_values[0]), float(sorted_values[-1])
    return float(kept[0]), float(kept[-1])
