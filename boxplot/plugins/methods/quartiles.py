"""Quartile methods for boxplot statistics."""

from typing import Sequence, Tuple

import numpy as np

from . import register_quartile_method

Quartiles = Tuple[float, float, float]


def calculate_percentile(sorted_values: Sequence[float], percentile: float) -> float:
    """
    Return a linearly interpolated percentile of an already sorted sample.

    The position is ``p / 100 * (n - 1)``, weighted between the floor and
    ceil order statistics. An empty sample yields 0.
    """
    if len(sorted_values) == 0:
        return 0.0
    return float(np.percentile(np.asarray(sorted_values, dtype=float), percentile))


def percentile_quartiles(sorted_values: Sequence[float]) -> Quartiles:
    """Return plain 25/50/75 percentiles of the full sample."""
    return (
        calculate_percentile(sorted_values, 25),
        calculate_percentile(sorted_values, 50),
        calculate_percentile(sorted_values, 75),
    )


def _split_quartiles(
    sorted_values: Sequence[float], include_median: bool
) -> Quartiles:
    """Return quartiles as medians of the lower and upper halves."""
    n = len(sorted_values)
    if n == 1:
        only = float(sorted_values[0])
        return only, only, only

    mid = n // 2
    odd = n % 2 == 1
    if odd and include_median:
        lower_half = sorted_values[: mid + 1]
        upper_half = sorted_values[mid:]
    else:
        lower_half = sorted_values[:mid]
        upper_half = sorted_values[mid + 1 :] if odd else sorted_values[mid:]

    return (
        calculate_percentile(lower_half, 50),
        calculate_percentile(sorted_values, 50),
        calculate_percentile(upper_half, 50),
    )


@register_quartile_method("auto", "tukey", "exclusive")
def tukey_quartiles(sorted_values: Sequence[float]) -> Quartiles:
    """
    Tukey hinges: the true median is left out of both halves for odd n.

    ``exclusive`` is registered as an alias: dropping the median from the
    halves is exactly what this split already does.
    """
    return _split_quartiles(sorted_values, include_median=False)


@register_quartile_method("inclusive")
def inclusive_quartiles(sorted_values: Sequence[float]) -> Quartiles:
    """Same split as Tukey, but odd-n medians join both halves."""
    return _split_quartiles(sorted_values, include_median=True)
