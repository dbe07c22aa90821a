"""Group tabular query results into boxplot-ready statistics."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from numbers import Real
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

import pandas as pd

from boxplot.plugins.methods import SORT_METHODS
from boxplot.services.options import BoxplotOptions
from boxplot.services.statistics import BoxplotStatistics, calculate_boxplot_stats
from boxplot.settings.constants import GROUP_KEY_SEPARATOR
from boxplot.settings.logging import log_warning


@dataclass(frozen=True)
class ChartColumn:
    id: str
    name: str = ""
    type: str = "attribute"
    section: Optional[str] = None

    @property
    def is_measure(self) -> bool:
        return self.type == "measure"


@dataclass(frozen=True)
class TabularResult:
    columns: List[str]
    rows: List[Sequence[Any]] = field(default_factory=list)

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame) -> "TabularResult":
        """Build a result from a DataFrame; missing cells become None."""
        clean = df.astype(object).where(pd.notna(df), None)
        return cls(
            columns=[str(c) for c in clean.columns],
            rows=clean.values.tolist(),
        )


@dataclass(frozen=True)
class BoxplotDataGroup:
    dimension_value: str
    values: Tuple[float, ...]
    stats: BoxplotStatistics
    key: str = ""

    @property
    def count(self) -> int:
        return len(self.values)


@dataclass(frozen=True)
class BoxplotData:
    measure: str
    groups: Tuple[BoxplotDataGroup, ...]
    global_stats: BoxplotStatistics

    @property
    def max_group_size(self) -> int:
        return max((g.count for g in self.groups), default=0)


def _parse_text(text: str) -> float:
    """Parse a numeric string; anything unusable becomes 0."""
    try:
        number = float(text.strip())
    except ValueError:
        return 0.0
    return number if math.isfinite(number) else 0.0


def _decode_number(value: Real) -> Optional[float]:
    number = float(value)
    return number if math.isfinite(number) else None


def _decode_wrapped(wrapped: Mapping[str, Any]) -> float:
    """Decode a ``{"v": ...}`` cell; unknown inner shapes become 0."""
    inner = wrapped.get("v")
    if isinstance(inner, bool):
        return 0.0
    if isinstance(inner, Real):
        return _decode_number(inner) or 0.0
    if isinstance(inner, str):
        return _parse_text(inner)
    if isinstance(inner, Mapping) and "n" in inner:
        nested = inner.get("n")
        if isinstance(nested, Real) and not isinstance(nested, bool):
            return _decode_number(nested) or 0.0
    return 0.0


def decode_cell(cell: Any) -> Optional[float]:
    """
    Decode one measure cell into a float.

    Known shapes: plain number, numeric string, and a mapping wrapping the
    value under ``v`` (itself a number, a string or ``{"n": number}``).
    Unknown shapes decode to 0. Non-finite plain numbers return None so the
    row is dropped.
    """
    if isinstance(cell, bool):
        return 0.0
    if isinstance(cell, Real):
        return _decode_number(cell)
    if isinstance(cell, str):
        return _parse_text(cell)
    if isinstance(cell, Mapping) and "v" in cell:
        return _decode_wrapped(cell)
    return 0.0


def _label_text(cell: Any) -> str:
    """Return the text used for a dimension cell in the group key."""
    if cell is None:
        return ""
    return str(cell)


def select_columns(
    columns: Sequence[ChartColumn], result: Optional[TabularResult] = None
) -> Tuple[Optional[ChartColumn], List[ChartColumn]]:
    """
    Pick the measure and the grouping dimensions from column metadata.

    The first measure is used. Dimensions in the ``x`` section group the
    data; without section info the first dimension present in the result
    columns is used, and as a last resort every dimension.
    """
    measures = [c for c in columns if c.is_measure]
    dimensions = [c for c in columns if not c.is_measure]
    measure = measures[0] if measures else None
    if not dimensions:
        return measure, []

    in_x = [c for c in dimensions if c.section == "x"]
    if in_x:
        return measure, in_x

    if result is not None:
        by_id = {c.id: c for c in dimensions}
        for col_id in result.columns:
            if col_id in by_id:
                return measure, [by_id[col_id]]

    return measure, list(dimensions)


def calculate_boxplot_data(
    result: TabularResult,
    measure_id: str,
    dimension_ids: Sequence[str],
    options: Optional[BoxplotOptions] = None,
) -> Optional[BoxplotData]:
    """
    Group rows by dimension key and compute per-group and global statistics.

    Returns None when there are no rows, the measure column is missing, or
    none of the dimension columns is present.
    """
    if not result.rows:
        return None
    if measure_id not in result.columns:
        return None
    measure_index = result.columns.index(measure_id)

    dimension_indices = [
        result.columns.index(dim_id)
        for dim_id in dimension_ids
        if dim_id in result.columns
    ]
    if not dimension_indices:
        return None

    options = options or BoxplotOptions()

    groups_map: Dict[str, List[float]] = {}
    labels: Dict[str, str] = {}
    dropped = 0
    for row in result.rows:
        parts = [_label_text(row[idx]) for idx in dimension_indices]
        key = GROUP_KEY_SEPARATOR.join(parts)
        value = decode_cell(row[measure_index])
        if value is None:
            dropped += 1
            continue
        if key not in groups_map:
            groups_map[key] = []
            labels[key] = parts[0]
        groups_map[key].append(value)

    if dropped:
        log_warning(
            "grouping.dropped_non_finite",
            {"measure": measure_id, "rows": dropped},
        )

    groups: List[BoxplotDataGroup] = []
    all_values: List[float] = []
    for key, values in groups_map.items():
        stats = calculate_boxplot_stats(
            values,
            options.show_mean,
            options.calculation_method,
            options.whisker_type,
        )
        all_values.extend(values)
        groups.append(
            BoxplotDataGroup(
                dimension_value=labels[key],
                values=tuple(values),
                stats=stats,
                key=key,
            )
        )

    sort_func = SORT_METHODS.get(options.sort_type, SORT_METHODS["alphabetical"])
    ordered = sort_func(groups)

    global_stats = calculate_boxplot_stats(
        all_values,
        options.needs_global_mean,
        options.calculation_method,
        options.whisker_type,
    )

    return BoxplotData(
        measure=measure_id,
        groups=tuple(ordered),
        global_stats=global_stats,
    )


def compute_value_range(
    data: BoxplotData,
    show_outliers: bool,
    reference_value: Optional[float] = None,
) -> Tuple[float, float]:
    """
    Return the value-axis domain.

    With outliers shown every raw value must fit; otherwise each group's
    box and whisker ends (and its mean, when computed) bound the axis. A
    reference value is always kept inside the domain.
    """
    if show_outliers:
        values = [v for g in data.groups for v in g.values]
    else:
        values = []
        for g in data.groups:
            stats = g.stats
            values.extend((stats.min, stats.max, stats.q1, stats.q3))
            if stats.mean is not None:
                values.append(stats.mean)
    if reference_value is not None and math.isfinite(reference_value):
        values.append(float(reference_value))
    if not values:
        return data.global_stats.whisker_lower, data.global_stats.whisker_upper
    return min(values), max(values)
