"""
app/streamlit_app.py

Purpose
-------
A Streamlit dashboard over the same pipeline as src/report.py:
  - loads a student habits CSV (upload, or the synthetic dataset)
  - derives study intensity / screen time / performance labels
  - shows group summaries, the four chart types and prose findings
  - offers the labelled dataset as a download

Run
---
streamlit run app/streamlit_app.py
"""

import pandas as pd
import streamlit as st

from src import charts
from src.aggregate import category_means, correlations, crosstab_counts, summarize_by, summary_frame
from src.classify import LABELERS, add_labels
from src.commentary import describe_correlations, describe_groups, describe_linear_fit
from src.data_dictionary import CATEGORICAL_COLUMNS, BOOLEAN_COLUMNS, DATA_DICTIONARY, NUMERIC_COLUMNS, display_name
from src.errors import ReportError
from src.loader import prepare_students, read_students_csv
from src.make_synthetic_data import generate_student_habits_dataset
from src.report import SUMMARY_FIELDS


# ---------------------------------------------------------------------
# Streamlit page configuration
# ---------------------------------------------------------------------
st.set_page_config(
    page_title="Student Habits & Performance",
    layout="wide",
)
st.title("📊 Student Habits & Exam Performance")


# ---------------------------------------------------------------------
# Caching helpers
# ---------------------------------------------------------------------
# Streamlit reruns the script top-to-bottom on every interaction; labelling
# 1,000 rows is quick but there is no reason to repeat it.

@st.cache_data
def get_synthetic(n_students: int, random_state: int) -> pd.DataFrame:
    return generate_student_habits_dataset(n_students=n_students, random_state=random_state)

@st.cache_data
def get_labelled(raw: pd.DataFrame) -> pd.DataFrame:
    """Validate + label once per distinct input."""
    return add_labels(prepare_students(raw))


# ---------------------------------------------------------------------
# Sidebar controls
# ---------------------------------------------------------------------
st.sidebar.header("Controls")

grouping = st.sidebar.selectbox(
    "Group students by",
    options=list(LABELERS),
    format_func=display_name,
    help="Derived label used for the summary table, bar chart, box plot and density plot.",
)

sort_by = st.sidebar.selectbox(
    "Sort groups by",
    options=["label", "count"] + SUMMARY_FIELDS,
    format_func=lambda s: {"label": "Label order", "count": "Group size"}.get(s, f"Mean {display_name(s).lower()}"),
)
descending = st.sidebar.checkbox("Descending", value=False)

scatter_x = st.sidebar.selectbox(
    "Scatter x-axis",
    options=[c for c in NUMERIC_COLUMNS if c != "exam_score"],
    index=[c for c in NUMERIC_COLUMNS if c != "exam_score"].index("study_hours_per_day"),
    format_func=display_name,
)

breakdown = st.sidebar.selectbox(
    "Compare exam score by",
    options=CATEGORICAL_COLUMNS + BOOLEAN_COLUMNS,
    format_func=display_name,
)


# ---------------------------------------------------------------------
# Data input section
# ---------------------------------------------------------------------
st.subheader("Data")

with st.expander("Data dictionary"):
    st.table(pd.DataFrame({"description": DATA_DICTIONARY}))

file = st.file_uploader("Upload student_habits_performance.csv", type="csv")

if not file:
    st.info("No file uploaded. Using a synthetic dataset of 1,000 students.")

try:
    raw = read_students_csv(file) if file else get_synthetic(1000, 42)
    df = get_labelled(raw)
except ReportError as e:
    st.error("Input data failed validation.")
    st.code(str(e))
    st.stop()

st.caption(f"{len(df)} students loaded.")


# ---------------------------------------------------------------------
# Group summaries
# ---------------------------------------------------------------------
summaries = summarize_by(df, grouping, SUMMARY_FIELDS, sort_by=sort_by, ascending=not descending)

col1, col2 = st.columns([3, 2])

with col1:
    st.subheader(f"Summary by {display_name(grouping).lower()}")
    st.dataframe(summary_frame(summaries, label_name=grouping).round(2), use_container_width=True)
    st.write(describe_groups(summaries, grouping))

with col2:
    fig = charts.plot_group_bar(summaries, "exam_score", xlabel=display_name(grouping))
    st.pyplot(fig)
    charts.close(fig)


# ---------------------------------------------------------------------
# Distributions
# ---------------------------------------------------------------------
col3, col4 = st.columns(2)

with col3:
    st.subheader("Box plot")
    fig = charts.plot_box_by_group(df, grouping, "exam_score")
    st.pyplot(fig)
    charts.close(fig)

with col4:
    st.subheader("Density")
    fig = charts.plot_density_by_group(df, grouping, "exam_score")
    st.pyplot(fig)
    charts.close(fig)


# ---------------------------------------------------------------------
# Relationships
# ---------------------------------------------------------------------
st.subheader("Relationships with exam score")

col5, col6 = st.columns(2)

with col5:
    try:
        fig, fit = charts.plot_scatter_fit(df, scatter_x, "exam_score", hue=grouping)
        st.pyplot(fig)
        charts.close(fig)
        st.write(describe_linear_fit(scatter_x, "exam_score", fit.slope, fit.intercept, fit.r_squared))
    except ValueError as e:
        st.warning(str(e))

with col6:
    corr = correlations(df, "exam_score")
    fig = charts.plot_correlation_bar(corr)
    st.pyplot(fig)
    charts.close(fig)
    st.write(describe_correlations(corr))

st.subheader(f"Exam score by {display_name(breakdown).lower()}")
st.dataframe(summary_frame(category_means(df, breakdown), label_name=breakdown).round(2), use_container_width=True)

st.subheader("Study intensity × performance group")
st.dataframe(crosstab_counts(df, "study_intensity", "performance_group"), use_container_width=True)


# ---------------------------------------------------------------------
# Download
# ---------------------------------------------------------------------
csv = df.to_csv(index=False).encode("utf-8")
st.download_button(
    "Download labelled CSV",
    data=csv,
    file_name="labelled.csv",
    mime="text/csv",
    help="The input records plus study_intensity, screen_time_level and performance_group.",
)
