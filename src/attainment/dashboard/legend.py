"""Legend panel for the Streamlit dashboard.

Example:
    >>> node = build_legend(build_color_scale(df))
    >>> render_legend_panel(node, st.sidebar)
"""

import html
from typing import Optional

from attainment.visualization import LegendNode


def legend_html(node: LegendNode, caption: Optional[str] = None) -> str:
    """Wrap a rendered legend in an HTML block for st.markdown.

    Args:
        node: Rendered legend
        caption: Optional small caption under the legend, shown as plain text

    Returns:
        HTML string with the inline SVG
    """
    block = f'<div class="legend" style="margin:4px 0;">{node.to_string()}</div>'
    if caption:
        block += f'<div style="font-size:12px;color:#666;">{html.escape(caption)}</div>'
    return block


def render_legend_panel(
    node: LegendNode,
    container=None,
    caption: Optional[str] = None,
) -> None:
    """Render a legend in Streamlit.

    Args:
        node: Rendered legend
        container: Streamlit container (st, st.sidebar, st.columns()[0], etc.)
                   If None, uses st directly.
        caption: Optional small caption under the legend
    """
    import streamlit as st

    target = container if container is not None else st
    target.markdown(legend_html(node, caption), unsafe_allow_html=True)
