"""Tab 2: Heuristic vs Optimal. Checks the booking heuristic against the exact optimum."""

import streamlit as st
import pandas as pd

from data.session_store import get_layout, get_occupied, get_rule_config
from engine.allocator import plan_booking
from engine.optimizer import optimize_selection
from engine.occupancy import available_rooms
from models.booking import InsufficientAvailability
from config.defaults import (
    STRATEGY_LABELS, MIN_ROOMS_PER_BOOKING, MAX_ROOMS_PER_BOOKING,
    EXACT_SEARCH_MAX_AVAILABLE,
)


def render(sidebar_state):
    """Render the Heuristic vs Optimal tab."""
    st.header("Heuristic vs Optimal")

    with st.expander("How does this comparison work?", expanded=False):
        st.markdown(f"""
**Heuristic** (used for real bookings): same-floor windows first, otherwise rooms
gathered around the floors with the most availability.

**Exact search** (PuLP): picks the rooms with the lowest possible travel time,
ignoring the same-floor preference. It only runs while at most
{EXACT_SEARCH_MAX_AVAILABLE} rooms are free. Nothing is booked from this tab.
        """)

    config = get_rule_config()
    free = available_rooms(get_layout(), get_occupied())

    n = st.slider(
        "Rooms to compare",
        min_value=MIN_ROOMS_PER_BOOKING, max_value=MAX_ROOMS_PER_BOOKING,
        value=min(3, MAX_ROOMS_PER_BOOKING), key="compare_count",
    )

    if not st.button("Run Comparison", key="compare_run"):
        return

    rows = []
    try:
        heuristic = plan_booking(free, n, config)
        rows.append({
            "Method": f"Heuristic ({STRATEGY_LABELS.get(heuristic.strategy, heuristic.strategy)})",
            "Rooms": ", ".join(str(num) for num in heuristic.room_numbers),
            "Travel Time (min)": heuristic.travel_time,
        })
    except InsufficientAvailability as exc:
        heuristic = None
        st.error(str(exc))

    with st.spinner("Solving..."):
        exact = optimize_selection(free, n, config)

    if exact.status == "Optimal":
        rows.append({
            "Method": "Exact (PuLP)",
            "Rooms": ", ".join(str(num) for num in exact.room_numbers),
            "Travel Time (min)": exact.travel_time,
        })
    else:
        st.info(exact.message)

    if rows:
        st.dataframe(pd.DataFrame(rows), use_container_width=True, hide_index=True)

    if heuristic and exact.status == "Optimal":
        gap = heuristic.travel_time - exact.travel_time
        if gap > 0:
            st.warning(f"The heuristic is {gap} min above the optimum for this availability.")
        else:
            st.success("The heuristic matches the optimal travel time.")
