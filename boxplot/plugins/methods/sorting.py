"""Sort policies applied to finished boxplot groups."""

from __future__ import annotations

import math
from functools import cmp_to_key
from typing import Any, List, Optional

from . import register_sort_method


def _parse_number(text: str) -> Optional[float]:
    """Return the label as a finite float, or None when it is not numeric."""
    try:
        number = float(text)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def _compare_labels(a: Any, b: Any) -> int:
    """Compare numerically when both labels are numbers, else as text."""
    a_label = a.dimension_value
    b_label = b.dimension_value
    a_num = _parse_number(a_label)
    b_num = _parse_number(b_label)
    if a_num is not None and b_num is not None:
        return (a_num > b_num) - (a_num < b_num)
    a_key = a_label.casefold()
    b_key = b_label.casefold()
    if a_key != b_key:
        return (a_key > b_key) - (a_key < b_key)
    return (a_label > b_label) - (a_label < b_label)


def _group_mean(group: Any) -> float:
    """Return the group mean, computing it when stats omit it."""
    if group.stats.mean is not None:
        return group.stats.mean
    if not group.values:
        return 0.0
    return sum(group.values) / len(group.values)


@register_sort_method("alphabetical")
def sort_alphabetical(groups: List[Any]) -> List[Any]:
    """Order by label; numeric labels compare as numbers."""
    return sorted(groups, key=cmp_to_key(_compare_labels))


@register_sort_method("mean_asc")
def sort_mean_asc(groups: List[Any]) -> List[Any]:
    return sorted(groups, key=_group_mean)


@register_sort_method("mean_desc")
def sort_mean_desc(groups: List[Any]) -> List[Any]:
    return sorted(groups, key=_group_mean, reverse=True)


@register_sort_method("median_asc")
def sort_median_asc(groups: List[Any]) -> List[Any]:
    return sorted(groups, key=lambda g: g.stats.q2)


@register_sort_method("median_desc")
def sort_median_desc(groups: List[Any]) -> List[Any]:
    return sorted(groups, key=lambda g: g.stats.q2, reverse=True)


@register_sort_method("iqr_asc")
def sort_iqr_asc(groups: List[Any]) -> List[Any]:
    """Least variable groups first."""
    return sorted(groups, key=lambda g: g.stats.iqr)


@register_sort_method("iqr_desc")
def sort_iqr_desc(groups: List[Any]) -> List[Any]:
    """Most variable groups first."""
    return sorted(groups, key=lambda g: g.stats.iqr, reverse=True)
