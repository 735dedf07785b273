"""Booking history table helpers."""

import streamlit as st
import pandas as pd
from typing import List

from models.booking import BookingRecord
from config.defaults import STRATEGY_LABELS


def booking_history_df(history: List[BookingRecord]) -> pd.DataFrame:
    rows = [{
        "Booked At": rec.timestamp.strftime("%H:%M:%S"),
        "Rooms": ", ".join(str(n) for n in rec.room_numbers),
        "# Rooms": len(rec.room_numbers),
        "Travel Time (min)": rec.travel_time,
        "Strategy": STRATEGY_LABELS.get(rec.strategy, rec.strategy),
    } for rec in history]
    return pd.DataFrame(rows, columns=["Booked At", "Rooms", "# Rooms", "Travel Time (min)", "Strategy"])


def render_booking_history(history: List[BookingRecord]):
    """Render booking history, newest first."""
    df = booking_history_df(history)
    if df.empty:
        st.info("No bookings yet.")
        return
    st.dataframe(df.iloc[::-1], use_container_width=True, hide_index=True)
