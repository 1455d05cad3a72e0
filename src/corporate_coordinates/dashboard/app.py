"""
CORPORATE COORDINATES Streamlit Dashboard.

Run with: streamlit run src/corporate_coordinates/dashboard/app.py
"""

import sys
from pathlib import Path

# Ensure corporate_coordinates is importable when run via `streamlit run`
_SRC_DIR = str(Path(__file__).resolve().parents[2])
if _SRC_DIR not in sys.path:
    sys.path.insert(0, _SRC_DIR)

import streamlit as st

from corporate_coordinates.clock import ClockUnavailableError
from corporate_coordinates.dashboard.components.metric_cards import render_metric_cards
from corporate_coordinates.dashboard.components.progress_gauge import render_progress_gauge
from corporate_coordinates.dashboard.components.quarter_timeline import render_quarter_timeline
from corporate_coordinates.dashboard.components.summary_panel import render_summary_panel
from corporate_coordinates.pipeline.report import QuarterReport


def main() -> None:
    st.set_page_config(
        page_title="CORPORATE COORDINATES",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    st.title("CORPORATE COORDINATES")
    st.markdown("**Where are we in the quarter?**")

    with st.sidebar:
        st.header("About")
        st.markdown(
            """
            **Quarters** start January, April, July and October.

            **Counting:**
            - Weeks done: whole weeks since the quarter started
            - Days left: today and the last day both count
            - Each quarter is nominally 13 weeks
            """
        )

    report = QuarterReport()
    try:
        coordinates = report.run()
    except ClockUnavailableError as e:
        st.error(f"Cannot read the system clock: {e}")
        return

    # Row 1: Gauge + Summary
    col1, col2 = st.columns([1, 2])
    with col1:
        render_progress_gauge(coordinates)
    with col2:
        render_summary_panel(report.lines(coordinates))

    # Row 2: Counters
    st.markdown("### Quarter Counters")
    render_metric_cards(coordinates)

    # Row 3: Week timeline
    st.markdown("### Weeks Of The Quarter")
    render_quarter_timeline(coordinates)

    with st.expander("All Fields"):
        st.table(
            [{"field": k, "value": str(v)} for k, v in coordinates.to_dict().items()]
        )


if __name__ == "__main__":
    main()
