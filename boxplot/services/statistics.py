"""Order statistics for boxplots: quartiles, fences, outliers and notches."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from boxplot.plugins.methods import (
    QUARTILE_METHODS,
    WHISKER_METHODS,
    percentile_quartiles,
)
from boxplot.settings.constants import NOTCH_FACTOR
from boxplot.settings.logging import log_warning


@dataclass(frozen=True)
class BoxplotStatistics:
    q1: float
    q2: float
    q3: float
    iqr: float
    min: float
    max: float
    whisker_lower: float
    whisker_upper: float
    outliers: Tuple[float, ...] = ()
    mean: Optional[float] = None

    @property
    def median(self) -> float:
        return self.q2


def empty_statistics(include_mean: bool = False) -> BoxplotStatistics:
    """Return the all-zero statistics used for empty samples."""
    return BoxplotStatistics(
        q1=0.0,
        q2=0.0,
        q3=0.0,
        iqr=0.0,
        min=0.0,
        max=0.0,
        whisker_lower=0.0,
        whisker_upper=0.0,
        outliers=(),
        mean=0.0 if include_mean else None,
    )


def calculate_boxplot_stats(
    sample: Sequence[float],
    include_mean: bool = False,
    calculation_method: str = "auto",
    whisker_type: str = "iqr_1_5",
) -> BoxplotStatistics:
    """
    Compute boxplot statistics for an unordered numeric sample.

    Parameters
    ----------
    sample:
        Finite numbers in any order. May be empty.
    include_mean:
        Also compute the arithmetic mean.
    calculation_method:
        ``auto``/``tukey``, ``inclusive`` or ``exclusive``. Unknown names use
        plain 25/50/75 percentiles.
    whisker_type:
        ``iqr_1_5``, ``iqr_3``, ``data_extremes``, ``percentile_5_95`` or
        ``min_max``. Unknown names use ``iqr_1_5``.
    """
    if len(sample) == 0:
        return empty_statistics(include_mean)

    sorted_values = sorted(float(v) for v in sample)

    quartile_func = QUARTILE_METHODS.get(calculation_method)
    if quartile_func is None:
        log_warning(
            "statistics.unknown_calculation_method",
            {"method": calculation_method},
        )
        q1, q2, q3 = percentile_quartiles(sorted_values)
    else:
        q1, q2, q3 = quartile_func(sorted_values)

    iqr = q3 - q1

    whisker_func = WHISKER_METHODS.get(whisker_type)
    if whisker_func is None:
        log_warning(
            "statistics.unknown_whisker_type", {"whisker_type": whisker_type}
        )
        whisker_func = WHISKER_METHODS["iqr_1_5"]
    whisker_lower, whisker_upper = whisker_func(sorted_values, q1, q3, iqr)

    within = [v for v in sorted_values if whisker_lower <= v <= whisker_upper]
    outliers = tuple(
        v for v in sorted_values if v < whisker_lower or v > whisker_upper
    )

    mean = None
    if include_mean:
        mean = math.fsum(sorted_values) / len(sorted_values)

    return BoxplotStatistics(
        q1=q1,
        q2=q2,
        q3=q3,
        iqr=iqr,
        min=within[0] if within else whisker_lower,
        max=within[-1] if within else whisker_upper,
        whisker_lower=whisker_lower,
        whisker_upper=whisker_upper,
        outliers=outliers,
        mean=mean,
    )


def calculate_notch_interval(stats: BoxplotStatistics, sample_size: int) -> float:
    """Return the notch half-width ``1.58 * IQR / sqrt(n)``, or 0."""
    if sample_size <= 0 or stats.iqr <= 0:
        return 0.0
    return NOTCH_FACTOR * stats.iqr / math.sqrt(sample_size)


def calculate_notch_limits(
    stats: BoxplotStatistics, sample_size: int
) -> Tuple[float, float]:
    """Return the median confidence interval as ``(lower, upper)``."""
    half_width = calculate_notch_interval(stats, sample_size)
    return stats.q2 - half_width, stats.q2 + half_width
