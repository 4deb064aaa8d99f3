"""Streamlit page showing the educational attainment legend.

Run with: streamlit run streamlit_app.py
"""
import sys
from pathlib import Path

import streamlit as st

# Add src directory to path for Streamlit Cloud compatibility
src_path = Path(__file__).parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from attainment.choropleth import (
    PAGE_DESCRIPTION,
    PAGE_TITLE,
    SCALE_METHODS,
    build_color_scale,
    build_legend,
)
from attainment.dashboard import render_legend_panel
from attainment.data import EDUCATION_FILENAME, load_education, validate_education
from attainment.utils import get_data_path

st.set_page_config(page_title=PAGE_TITLE)
st.title(PAGE_TITLE)
st.write(PAGE_DESCRIPTION)

method = st.sidebar.selectbox("Color scale", SCALE_METHODS)

try:
    df = load_education(get_data_path("education") / EDUCATION_FILENAME)
except (FileNotFoundError, ValueError) as e:
    st.error(f"Failed to load education data: {e}")
    st.stop()

validation = validate_education(df)
if not validation.valid:
    st.warning(f"Data issues: {', '.join(validation.issues)}")

node = build_legend(build_color_scale(df, method=method))
render_legend_panel(node, caption=f"{validation.total_rows} counties")
