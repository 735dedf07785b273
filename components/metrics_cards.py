"""KPI metric cards for occupancy and the latest booking."""

import streamlit as st


def render_metric_row(metrics: list[dict]):
    """Render a row of metric cards.

    Each metric dict should have: label, value, and optionally help.
    """
    cols = st.columns(len(metrics))
    for col, m in zip(cols, metrics):
        with col:
            st.metric(label=m["label"], value=m["value"], help=m.get("help"))


def render_booking_outcome(message: str, success: bool):
    if success:
        st.success(message, icon="✅")
    else:
        st.error(message, icon="🔴")
