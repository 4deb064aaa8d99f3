"""Streamlit display components for attainment legends."""

from attainment.dashboard.legend import legend_html, render_legend_panel

__all__ = [
    "legend_html",
    "render_legend_panel",
]
