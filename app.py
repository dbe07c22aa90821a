"""Streamlit preview page: load a CSV, pick columns, tune the boxplot."""

from typing import Any, Dict, List

import pandas as pd
import streamlit as st

from boxplot.exports import build_chart_export_html, build_summary_frame, df_to_csv_bytes
from boxplot.services.grouping import ChartColumn, TabularResult
from boxplot.services.render_service import render_chart
from boxplot.settings.logging import log_access, log_error, log_event

st.set_page_config(page_title="Boxplot preview", layout="wide")
st.title("📦 Boxplot preview")

WHISKER_LABELS = {
    "Standard (1.5 IQR)": "iqr_1_5",
    "Conservative (3x IQR)": "iqr_3",
    "Data extremes": "data_extremes",
    "Percentile 5-95": "percentile_5_95",
    "Min/Max": "min_max",
}
METHOD_LABELS = {
    "Automatic": "auto",
    "Tukey": "tukey",
    "Inclusive": "inclusive",
    "Exclusive": "exclusive",
}
SORT_LABELS = {
    "Alphabetical": "alphabetical",
    "Mean ascending": "mean_asc",
    "Mean descending": "mean_desc",
    "Median ascending": "median_asc",
    "Median descending": "median_desc",
    "Variability ascending": "iqr_asc",
    "Variability descending": "iqr_desc",
}
REFERENCE_LABELS = {
    "None": "none",
    "Fixed value": "fixed",
    "Global mean": "global_mean",
    "Global median": "global_median",
}


def _build_columns(measure: str, dimensions: List[str]) -> List[ChartColumn]:
    columns = [ChartColumn(id=measure, name=measure, type="measure")]
    columns.extend(
        ChartColumn(id=dim, name=dim, type="attribute", section="x") for dim in dimensions
    )
    return columns


def _sidebar_props(measure: str) -> Dict[str, Any]:
    """Collect sidebar widgets into a host-style visual-property bag."""
    st.sidebar.header("🧮 Statistics")
    method = st.sidebar.selectbox("Quartile method", list(METHOD_LABELS))
    whiskers = st.sidebar.selectbox("Whiskers", list(WHISKER_LABELS))
    sort_label = st.sidebar.selectbox("Sort groups", list(SORT_LABELS))

    st.sidebar.header("🎨 Appearance")
    orientation = st.sidebar.radio("Orientation", ["Vertical", "Horizontal"], horizontal=True)
    y_scale = st.sidebar.radio("Value scale", ["Linear", "Log"], horizontal=True)
    layout_style = st.sidebar.selectbox("Density", ["normal", "compact", "spacious"])
    color = st.sidebar.color_picker("Box color", "#3b82f6")
    box_width = st.sidebar.slider("Box width", 10, 120, 60)
    variable_width = st.sidebar.checkbox("Width by sample size")
    show_notch = st.sidebar.checkbox("Notch")
    show_mean = st.sidebar.checkbox("Mean marker")
    show_outliers = st.sidebar.checkbox("Outliers", value=True)
    outlier_shape = st.sidebar.selectbox(
        "Outlier shape", ["circle", "square", "diamond", "triangle", "cross"]
    )
    show_jitter = st.sidebar.checkbox("Jitter points")
    show_grid = st.sidebar.checkbox("Grid lines", value=True)
    show_labels = st.sidebar.checkbox("Value labels")

    st.sidebar.header("📏 Reference line")
    reference_label = st.sidebar.selectbox("Type", list(REFERENCE_LABELS))
    reference_value = st.sidebar.number_input("Fixed value", value=0.0)

    st.sidebar.header("💬 Tooltip")
    tooltip_format = st.sidebar.selectbox("Format", ["simple", "detailed", "custom"])
    template = st.sidebar.text_area(
        "Custom template", "{categoryName}\nMedian: {median}\nn = {count}"
    )

    return {
        "columnVisualProps": {
            measure: {
                "visualization": {"orientation": orientation, "color": color},
                "boxStyle": {"boxWidth": box_width, "variableWidth": variable_width},
                "medianWhiskers": {"showMean": show_mean, "showNotch": show_notch},
                "outlierStyle": {"show": show_outliers, "shape": outlier_shape},
                "dataConfig": {
                    "calculationMethod": METHOD_LABELS[method],
                    "whiskerType": WHISKER_LABELS[whiskers],
                },
                "valueLabels": {"show": show_labels},
            }
        },
        "chart_options": {"yScale": y_scale},
        "axes": {"sortType": SORT_LABELS[sort_label]},
        "gridLines": {"show": show_grid},
        "referenceLines": {
            "show": REFERENCE_LABELS[reference_label] != "none",
            "type": REFERENCE_LABELS[reference_label],
            "value": reference_value,
        },
        "jitterPlot": {"showJitter": show_jitter},
        "tooltip": {"format": tooltip_format, "customTemplate": template},
        "layout": {"layoutStyle": layout_style, "axisLabelY": measure},
    }


def main() -> None:
    """Render the preview page."""
    log_access("boxplot_preview")

    uploaded = st.file_uploader("CSV file", type=["csv"])
    if uploaded is None:
        st.info("Upload a CSV with at least one numeric and one category column.")
        return

    try:
        df = pd.read_csv(uploaded)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as exc:
        log_error("preview.csv_unreadable", {"file": uploaded.name, "error": exc})
        st.error(f"Could not read the file: {exc}")
        return

    if df.empty:
        st.warning("The file has no rows.")
        return

    numeric_cols = df.select_dtypes("number").columns.tolist()
    all_cols = df.columns.tolist()

    col_measure, col_dims = st.columns(2)
    with col_measure:
        measure = st.selectbox("Measure", numeric_cols or all_cols)
    with col_dims:
        dimensions = st.multiselect(
            "Group by", [c for c in all_cols if c != measure], max_selections=3
        )

    props = _sidebar_props(measure)
    width = st.slider("Chart width", 300, 1600, 900, step=50)
    height = st.slider("Chart height", 200, 1000, 500, step=50)

    used = [measure] + dimensions
    # Empty measure cells would decode to 0.
    result = TabularResult.from_dataframe(df[used].dropna(subset=[measure]))
    rendered = render_chart(
        result,
        _build_columns(measure, dimensions),
        props,
        container_width=width,
        container_height=height,
    )

    if rendered.status == "error":
        st.error(rendered.message)
        return
    if rendered.status == "empty":
        st.info(rendered.message)
        return

    st.markdown(rendered.html, unsafe_allow_html=True)

    summary = build_summary_frame(rendered.data)
    with st.expander("Summary statistics", expanded=False):
        st.dataframe(summary, use_container_width=True)

    export_html = build_chart_export_html(rendered.html, f"{measure} by {', '.join(dimensions)}")
    col_html, col_csv = st.columns(2)
    with col_html:
        if st.download_button(
            "Download chart (HTML)",
            data=export_html.encode("utf-8"),
            file_name="boxplot.html",
            mime="text/html",
        ):
            log_event("export_html", {"measure": measure})
    with col_csv:
        if st.download_button(
            "Download statistics (CSV)",
            data=df_to_csv_bytes(summary),
            file_name="boxplot_summary.csv",
            mime="text/csv",
        ):
            log_event("export_csv", {"measure": measure})


main()
