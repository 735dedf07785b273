"""Plotly chart builders for the Hotel Room Reservation Planner."""

import plotly.express as px
import plotly.graph_objects as go
import pandas as pd
from typing import Dict, Set, Tuple

from models.room import Room
from config.defaults import (
    FLOOR_COUNT, STANDARD_ROOMS_PER_FLOOR,
    COLOR_AVAILABLE, COLOR_OCCUPIED, COLOR_BOOKED,
)

# Cell states for the grid heatmap
AVAILABLE, OCCUPIED, BOOKED = 0, 1, 2


def room_state(room: Room, occupied_ids: Set[str], booked_ids: Set[str]) -> int:
    if room.room_id in booked_ids:
        return BOOKED
    if room.room_id in occupied_ids:
        return OCCUPIED
    return AVAILABLE


def building_grid(
    layout: Tuple[Room, ...],
    occupied_ids: Set[str],
    booked_ids: Set[str],
) -> go.Figure:
    """Heatmap of the building: one row per floor, stairs/lift on the left."""
    floors = list(range(FLOOR_COUNT, 0, -1))
    positions = list(range(STANDARD_ROOMS_PER_FLOOR))
    by_cell = {(r.floor, r.pos): r for r in layout}

    z, text = [], []
    for floor in floors:
        row_z, row_text = [], []
        for pos in positions:
            room = by_cell.get((floor, pos))
            if room is None:
                row_z.append(None)
                row_text.append("")
            else:
                row_z.append(room_state(room, occupied_ids, booked_ids))
                row_text.append(str(room.num))
        z.append(row_z)
        text.append(row_text)

    colorscale = [
        [0.0, COLOR_AVAILABLE], [0.33, COLOR_AVAILABLE],
        [0.34, COLOR_OCCUPIED], [0.66, COLOR_OCCUPIED],
        [0.67, COLOR_BOOKED], [1.0, COLOR_BOOKED],
    ]
    fig = go.Figure(data=go.Heatmap(
        z=z,
        x=[f"#{p + 1}" for p in positions],
        y=[f"F{f}" for f in floors],
        text=text,
        texttemplate="%{text}",
        colorscale=colorscale,
        zmin=AVAILABLE,
        zmax=BOOKED,
        showscale=False,
        xgap=3,
        ygap=3,
        hovertemplate="Room %{text}<extra></extra>",
    ))
    fig.update_layout(
        title="Floors (stairs / lift on the left)",
        xaxis_title="Distance from stairs",
        height=520,
        yaxis_type="category",
        xaxis_type="category",
    )
    return fig


def availability_by_floor_bar(counts: Dict[int, int]) -> go.Figure:
    """Bar chart of free rooms per floor."""
    df = pd.DataFrame(
        [{"Floor": f"F{f}", "Available": counts.get(f, 0)} for f in range(1, FLOOR_COUNT + 1)]
    )
    fig = px.bar(
        df, x="Floor", y="Available",
        title="Available Rooms by Floor",
        color_discrete_sequence=[COLOR_AVAILABLE],
    )
    fig.update_layout(height=300, xaxis_type="category")
    return fig
