"""Random occupancy generator for demos and test data."""

import random
from typing import Optional, Set, Tuple

import pandas as pd

from models.room import Room
from config.defaults import DEFAULT_OCCUPANCY_PROBABILITY


def generate_random_occupancy(
    layout: Tuple[Room, ...],
    probability: float = DEFAULT_OCCUPANCY_PROBABILITY,
    rng: Optional[random.Random] = None,
) -> Set[str]:
    """Mark each room occupied independently with the given probability."""
    if probability < 0 or probability > 1:
        raise ValueError(f"Occupancy probability must be between 0 and 1, got {probability}")
    rng = rng or random.Random()
    return {r.room_id for r in layout if rng.random() < probability}


def generate_occupancy_df(layout: Tuple[Room, ...], occupied_ids: Set[str]) -> pd.DataFrame:
    """One row per room with its occupancy flag."""
    rows = [{
        "Room": r.num,
        "Floor": r.floor,
        "Position": r.pos,
        "Occupied": r.room_id in occupied_ids,
    } for r in layout]
    return pd.DataFrame(rows)


if __name__ == "__main__":
    from engine.layout import build_layout

    layout = build_layout()
    occupied = generate_random_occupancy(layout, rng=random.Random(42))
    print(generate_occupancy_df(layout, occupied).groupby("Floor")["Occupied"].sum())
