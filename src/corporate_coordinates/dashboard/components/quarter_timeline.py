"""
CORPORATE COORDINATES - Quarter Timeline Component

Week-by-week bar per 7-day block of the quarter, colored by status.
"""

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from corporate_coordinates.types import CorporateCoordinates

STATUS_COLORS = {"done": "#6b7280", "current": "#ef4444", "remaining": "#22c55e"}


def build_week_frame(coordinates: CorporateCoordinates) -> pd.DataFrame:
    """
    One row per 7-day block from the first to the last day of the quarter.

    Columns: week (1-based), week_start, week_end, days, status.
    The final block is cut at the last day of the quarter.
    """
    first_day = pd.Timestamp(coordinates.start_of_quarter.date())
    last_day = pd.Timestamp(coordinates.end_of_quarter.date())

    starts = pd.date_range(start=first_day, end=last_day, freq="7D")
    df = pd.DataFrame({"week_start": starts})
    ends = df["week_start"] + pd.Timedelta(days=6)
    df["week_end"] = ends.where(ends <= last_day, last_day)
    df["days"] = (df["week_end"] - df["week_start"]).dt.days + 1
    df.insert(0, "week", list(range(1, len(df) + 1)))

    done = coordinates.full_week_of_quarter_done
    df["status"] = [
        "done" if i < done else "current" if i == done else "remaining"
        for i in range(len(df))
    ]
    return df


def render_quarter_timeline(coordinates: CorporateCoordinates) -> None:
    """Render the quarter's weeks as colored bars."""
    weeks = build_week_frame(coordinates)
    fig = go.Figure()

    for status, color in STATUS_COLORS.items():
        subset = weeks[weeks["status"] == status]
        if not subset.empty:
            fig.add_trace(
                go.Bar(
                    x=subset["week"],
                    y=subset["days"],
                    name=status,
                    marker=dict(color=color),
                    customdata=subset["week_start"].dt.strftime("%d %b"),
                    hovertemplate="Week %{x} from %{customdata}<extra></extra>",
                )
            )

    fig.update_layout(
        xaxis=dict(title="Week of quarter", dtick=1),
        yaxis=dict(title="Days", range=[0, 7.5]),
        height=300,
        margin=dict(l=0, r=0, t=30, b=0),
        showlegend=True,
    )

    st.plotly_chart(fig, use_container_width=True)
