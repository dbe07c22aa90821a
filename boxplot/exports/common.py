"""Common export helpers."""

from __future__ import annotations

import pandas as pd

from boxplot.services.grouping import BoxplotData

SUMMARY_COLUMNS = [
    "group",
    "n",
    "min",
    "q1",
    "median",
    "q3",
    "max",
    "iqr",
    "whisker_lower",
    "whisker_upper",
    "outliers",
    "mean",
]


def df_to_csv_bytes(df: pd.DataFrame, index: bool = False) -> bytes:
    """Return CSV bytes encoded as UTF-8 with BOM for Excel compatibility."""
    return df.to_csv(index=index).encode("utf-8-sig")


def build_summary_frame(data: BoxplotData) -> pd.DataFrame:
    """Return one row of statistics per group, in display order."""
    rows = []
    for group in data.groups:
        stats = group.stats
        rows.append(
            {
                "group": group.dimension_value,
                "n": group.count,
                "min": stats.min,
                "q1": stats.q1,
                "median": stats.q2,
                "q3": stats.q3,
                "max": stats.max,
                "iqr": stats.iqr,
                "whisker_lower": stats.whisker_lower,
                "whisker_upper": stats.whisker_upper,
                "outliers": len(stats.outliers),
                "mean": stats.mean,
            }
        )
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)
