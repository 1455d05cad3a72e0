"""
CORPORATE COORDINATES - Progress Gauge Component

Semicircular gauge showing the share of the quarter still remaining.
"""

import plotly.graph_objects as go
import streamlit as st

from corporate_coordinates.types import CorporateCoordinates


def render_progress_gauge(coordinates: CorporateCoordinates) -> None:
    """Render semicircular gauge for percent of quarter remaining."""
    value = coordinates.percent_remaining

    fig = go.Figure(
        go.Indicator(
            mode="gauge+number",
            value=value,
            number={"suffix": "%", "valueformat": ".2f"},
            title={"text": f"{coordinates.label} remaining", "font": {"size": 14}},
            gauge={
                # Day one of a quarter reads just over 100
                "axis": {"range": [0, max(100.0, value)]},
                "bar": {"color": "#1f2937"},
                "bgcolor": "#f3f4f6",
                "steps": [
                    {"range": [0, 33.3], "color": "#ef4444"},
                    {"range": [33.3, 66.7], "color": "#eab308"},
                    {"range": [66.7, max(100.0, value)], "color": "#22c55e"},
                ],
            },
        )
    )

    fig.update_layout(
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        height=250,
        margin=dict(l=20, r=20, t=50, b=10),
    )

    st.plotly_chart(fig, use_container_width=True)

    st.markdown(
        f"<p style='text-align:center; color:#6b7280;'>"
        f"{coordinates.days_left_in_quarter} calendar days left</p>",
        unsafe_allow_html=True,
    )
