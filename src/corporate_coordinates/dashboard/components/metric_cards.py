"""
CORPORATE COORDINATES - Metric Cards Component

Displays the quarter counters as cards in a row.
"""

import streamlit as st

from corporate_coordinates.types import CorporateCoordinates

CARD_COLOR = "#ef4444"


def render_metric_cards(coordinates: CorporateCoordinates) -> None:
    """Render quarter counter cards."""
    metrics = [
        ("Quarter", coordinates.label, ""),
        (
            "Weeks Done",
            str(coordinates.full_week_of_quarter_done),
            f"of {coordinates.weeks_in_quarter} per quarter",
        ),
        ("Days Left", str(coordinates.days_left_in_quarter), "including today"),
        (
            "Days In Quarter",
            str(coordinates.days_in_quarter),
            f"{coordinates.start_of_quarter:%d %b} to {coordinates.end_of_quarter:%d %b}",
        ),
    ]

    cols = st.columns(len(metrics))
    for i, (name, value, detail) in enumerate(metrics):
        with cols[i]:
            st.markdown(
                f"""
                <div style="
                    background: linear-gradient(135deg, {CARD_COLOR}20, {CARD_COLOR}10);
                    border-left: 4px solid {CARD_COLOR};
                    padding: 1rem; border-radius: 0.5rem;
                ">
                    <div style="font-weight:bold; font-size:0.9rem;">{name}</div>
                    <div style="color:{CARD_COLOR}; font-size:1.2rem; font-weight:bold;">{value}</div>
                    <div style="font-size:0.75rem; color:#6b7280;">{detail}</div>
                </div>
                """,
                unsafe_allow_html=True,
            )
