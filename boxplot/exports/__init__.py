from .charts import build_chart_export_html
from .common import build_summary_frame, df_to_csv_bytes

__all__ = [
    "build_chart_export_html",
    "build_summary_frame",
    "df_to_csv_bytes",
]
