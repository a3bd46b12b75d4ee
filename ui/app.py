import sys
from pathlib import Path

import pandas as pd
import streamlit as st

# -------------------------------------------------
# PATH FIX (REQUIRED FOR STREAMLIT)
# -------------------------------------------------
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from tabscope.core.models import NumericStats
from tabscope.reporting.formatters import fmt_number
from ui.backend import (
    available_samples,
    run_analysis_from_sample,
    run_analysis_from_upload,
)
from ui.config import APP_ICON, APP_NAME, TABS, UPLOAD_TYPES

# -------------------------------------------------
# UI CONFIG
# -------------------------------------------------
st.set_page_config(page_title=APP_NAME, page_icon=APP_ICON, layout="wide")

st.title(f"{APP_ICON} {APP_NAME}")

# The host owns the upload -> result -> reset cycle; the engine keeps no state
state = st.session_state
state.setdefault("analysis", None)
state.setdefault("error", None)
state.setdefault("last_upload", None)


def _store(outcome):
    state.analysis = outcome if outcome["result"] is not None else None
    state.error = outcome["error"]


# -------------------------------------------------
# INPUTS
# -------------------------------------------------
if state.analysis is None:
    st.subheader("Upload Your Dataset")
    st.caption("Upload a CSV file or try a sample dataset")

    uploaded_file = st.file_uploader("CSV file", UPLOAD_TYPES)
    upload_key = (uploaded_file.name, uploaded_file.size) if uploaded_file else None
    if upload_key is not None and upload_key != state.last_upload:
        state.last_upload = upload_key
        with st.spinner("Analyzing…"):
            _store(
                run_analysis_from_upload(
                    uploaded_file.name,
                    uploaded_file.getvalue(),
                    mime_type=uploaded_file.type,
                )
            )
        st.rerun()

    cols = st.columns(len(available_samples()))
    for col, name in zip(cols, available_samples()):
        if col.button(f"Load {name.title()} Data"):
            _store(run_analysis_from_sample(name))
            st.rerun()

    if state.error:
        st.error(state.error)
    st.stop()

# -------------------------------------------------
# RESULTS
# -------------------------------------------------
analysis = state.analysis
result = analysis["result"]

header, reset = st.columns([4, 1])
header.success(f"Analyzing: {analysis['source']}")
if reset.button("New Analysis"):
    state.analysis = None
    state.error = None
    state.last_upload = None
    st.rerun()

overview, columns, insights, visuals = st.tabs(TABS)

with overview:
    a, b, c, d = st.columns(4)
    a.metric("Rows", result.row_count)
    b.metric("Columns", result.column_count)
    c.metric("Numeric", len(result.numeric_profiles()))
    d.metric("Categorical", len(result.categorical_profiles()))
    st.write("**Columns:** " + ", ".join(result.column_names))

with columns:
    for profile in result.column_profiles:
        with st.expander(f"{profile.name} ({profile.kind.value})"):
            st.write(f"Missing: {profile.missing_count} · Unique: {profile.unique_count}")
            stats = profile.stats
            if isinstance(stats, NumericStats):
                st.table(
                    pd.DataFrame(
                        {k: [fmt_number(v)] for k, v in stats.to_dict().items()}
                    )
                )
            elif stats.top_values:
                st.table(
                    pd.DataFrame(
                        [(vc.value, vc.count) for vc in stats.top_values],
                        columns=["value", "count"],
                    )
                )
            else:
                st.info("No data")

with insights:
    for line in result.insights:
        st.write(f"- {line}")
    if result.correlations:
        st.subheader("Correlations")
        st.table(
            pd.DataFrame(
                [(e.column_a, e.column_b, round(e.coefficient, 3)) for e in result.correlations],
                columns=["column A", "column B", "r"],
            )
        )

with visuals:
    for hist in result.histograms:
        st.subheader(f"Distribution: {hist.column}")
        st.bar_chart(
            pd.DataFrame(
                {"count": [b.count for b in hist.buckets]},
                index=[f"{i + 1}: {b.label}" for i, b in enumerate(hist.buckets)],
            )
        )
    for chart in result.category_charts:
        st.subheader(f"Top values: {chart.column}")
        if chart.bars:
            st.bar_chart(
                pd.DataFrame(
                    {"count": [b.count for b in chart.bars]},
                    index=[b.category for b in chart.bars],
                )
            )
        else:
            st.info("No data")
