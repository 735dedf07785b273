"""Tab 1: Booking. Request rooms and see them on the building grid."""

import streamlit as st

from data.session_store import (
    get_layout, get_occupied, get_booked_ids, get_last_booking, get_rule_config,
    set_occupied, record_booking,
)
from data.validator import clamp_room_count, validate_booking_request
from engine.allocator import plan_booking
from engine.distance import format_minutes
from engine.occupancy import available_rooms, availability_by_floor, commit_booking
from models.booking import InsufficientAvailability
from components.charts import building_grid, availability_by_floor_bar
from components.metrics_cards import render_metric_row, render_booking_outcome
from config.defaults import STRATEGY_LABELS, MIN_ROOMS_PER_BOOKING, MAX_ROOMS_PER_BOOKING


def render(sidebar_state):
    """Render the Booking tab."""
    st.header("Room Booking")

    layout = get_layout()
    config = get_rule_config()

    col1, col2 = st.columns([1, 3])
    with col1:
        raw_count = st.number_input(
            f"Rooms to book ({MIN_ROOMS_PER_BOOKING}–{MAX_ROOMS_PER_BOOKING})",
            min_value=MIN_ROOMS_PER_BOOKING, max_value=MAX_ROOMS_PER_BOOKING,
            value=1, step=1, key="booking_count",
        )
    with col2:
        st.write("")
        book_clicked = st.button("Book Optimally", type="primary")

    if book_clicked:
        n = clamp_room_count(raw_count)
        free = available_rooms(layout, get_occupied())
        validation = validate_booking_request(n, len(free), config)
        for w in validation.warnings:
            st.warning(w)
        try:
            booking = plan_booking(free, n, config)
        except InsufficientAvailability as exc:
            render_booking_outcome(" ".join(validation.errors) or str(exc), success=False)
        else:
            set_occupied(commit_booking(get_occupied(), booking.rooms))
            record_booking(booking)
            render_booking_outcome(
                f"Booked rooms {', '.join(str(num) for num in booking.room_numbers)}.",
                success=True,
            )

    occupied = get_occupied()
    booked_ids = get_booked_ids()
    free = available_rooms(layout, occupied)
    booking = get_last_booking()

    render_metric_row([
        {"label": "Available Rooms", "value": len(free)},
        {"label": "Occupied Rooms", "value": len(layout) - len(free)},
        {"label": "Last Booking", "value": ", ".join(str(n) for n in booking.room_numbers) if booking else "—"},
        {
            "label": "Total Travel Time",
            "value": format_minutes(booking.travel_time if booking else 0),
            "help": "Travel time between the first and last room of the last booking.",
        },
    ])

    st.plotly_chart(building_grid(layout, occupied - booked_ids, booked_ids), use_container_width=True)
    st.caption("Blue: available • Grey: occupied • Orange: newly booked")

    counts = availability_by_floor(free)
    st.plotly_chart(availability_by_floor_bar(counts), use_container_width=True)
    if not counts:
        st.caption("All floors are full.")

    if booking:
        with st.expander(f"Why these rooms? ({STRATEGY_LABELS.get(booking.strategy, booking.strategy)})"):
            for step in booking.explanation_steps:
                st.markdown(f"- {step}")

    st.caption(
        "Rule summary: prefer same-floor windows; otherwise minimize the travel time "
        "(vertical and horizontal minutes) between the first and last room."
    )
