"""Tab 3: Booking History. Bookings made in this session."""

import streamlit as st

from data.session_store import get_booking_history
from components.tables import render_booking_history


def render(sidebar_state):
    st.header("Booking History")
    history = get_booking_history()
    render_booking_history(history)
    if history:
        total_rooms = sum(len(rec.room_numbers) for rec in history)
        st.caption(f"{len(history)} booking(s), {total_rooms} room(s) in this session.")
