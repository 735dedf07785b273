"""Typed wrapper around st.session_state for booking state."""

import streamlit as st
from typing import List, Set, Tuple
from datetime import datetime
from models.room import Room
from models.booking import BookingResult, BookingRecord
from engine.layout import build_layout
from config.defaults import (
    DEFAULT_OCCUPANCY_PROBABILITY, MAX_CENTER_FLOORS, EXACT_SEARCH_MAX_AVAILABLE,
    MIN_ROOMS_PER_BOOKING, MAX_ROOMS_PER_BOOKING,
)


def initialize_session_state():
    """Initialize all session state keys with defaults."""
    defaults = {
        "layout": build_layout(),
        "occupied": set(),
        "last_booking": None,
        "booking_history": [],
        "occupancy_probability": DEFAULT_OCCUPANCY_PROBABILITY,
        "rule_config": {
            "min_rooms_per_booking": MIN_ROOMS_PER_BOOKING,
            "max_rooms_per_booking": MAX_ROOMS_PER_BOOKING,
            "max_center_floors": MAX_CENTER_FLOORS,
            "exact_search_max_available": EXACT_SEARCH_MAX_AVAILABLE,
        },
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default


# --- Getters ---

def get_layout() -> Tuple[Room, ...]:
    return st.session_state.get("layout") or build_layout()


def get_occupied() -> Set[str]:
    return st.session_state.get("occupied", set())


def get_last_booking() -> BookingResult:
    return st.session_state.get("last_booking")


def get_booked_ids() -> Set[str]:
    booking = get_last_booking()
    return {r.room_id for r in booking.rooms} if booking else set()


def get_booking_history() -> List[BookingRecord]:
    return st.session_state.get("booking_history", [])


def get_rule_config() -> dict:
    return st.session_state.get("rule_config", {})


# --- Setters ---

def set_occupied(occupied: Set[str]):
    st.session_state["occupied"] = occupied


def set_last_booking(booking: BookingResult):
    st.session_state["last_booking"] = booking


def set_occupancy_probability(probability: float):
    st.session_state["occupancy_probability"] = probability


def record_booking(booking: BookingResult):
    """Remember the booking as the latest one and append it to the history."""
    set_last_booking(booking)
    st.session_state["booking_history"].append(BookingRecord(
        timestamp=datetime.now(),
        room_numbers=booking.room_numbers,
        travel_time=booking.travel_time,
        strategy=booking.strategy,
    ))


def reset_all():
    st.session_state["occupied"] = set()
    st.session_state["last_booking"] = None
    st.session_state["booking_history"] = []
