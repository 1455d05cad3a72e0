"""
CORPORATE COORDINATES - Summary Panel Component

Displays the presenter's summary lines.
"""

import streamlit as st


def render_summary_panel(lines: list[str]) -> None:
    """Render the summary lines."""
    st.markdown("### Summary")
    for line in lines:
        st.markdown(f"- {line}")
