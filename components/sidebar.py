"""Global sidebar controls for demo occupancy and reset."""

import random
import logging
import streamlit as st
from dataclasses import dataclass

from data.session_store import (
    get_layout, get_occupied, set_occupied, set_last_booking,
    set_occupancy_probability, reset_all,
)
from data.sample_data import generate_random_occupancy
from engine.occupancy import occupancy_summary
from config.defaults import DEFAULT_OCCUPANCY_PROBABILITY

logger = logging.getLogger(__name__)


@dataclass
class SidebarState:
    occupancy_probability: float
    seed: int


def render_sidebar() -> SidebarState:
    """Render the global sidebar controls and return current state."""
    with st.sidebar:
        st.title("Hotel Reservations")
        st.caption("97 rooms • Floors 1–9: 10 rooms each • Floor 10: 7 rooms")
        st.divider()

        probability = st.slider(
            "Random occupancy probability",
            min_value=0.0, max_value=1.0,
            value=st.session_state.get("occupancy_probability", DEFAULT_OCCUPANCY_PROBABILITY),
            step=0.05,
            key="sidebar_probability",
        )
        seed = st.number_input(
            "Seed (0 = random)", min_value=0, value=0, step=1, key="sidebar_seed",
        )

        col1, col2 = st.columns(2)
        with col1:
            if st.button("Random Occupancy", use_container_width=True):
                set_occupancy_probability(probability)
                rng = random.Random(seed) if seed else random.Random()
                set_last_booking(None)
                set_occupied(generate_random_occupancy(get_layout(), probability, rng))
                logger.info("Generated random occupancy with p=%.2f", probability)
        with col2:
            if st.button("Reset All", use_container_width=True):
                reset_all()

        st.divider()
        summary = occupancy_summary(get_layout(), get_occupied())
        st.caption(f"Occupied: {summary['occupied_rooms']} / {summary['total_rooms']}")
        st.caption(f"Available: {summary['available_rooms']}")

    return SidebarState(occupancy_probability=probability, seed=int(seed))
