"""Generates human-readable explanations for booking decisions."""

from typing import Dict, List
from models.room import Room
from config.defaults import STRATEGY_PROXIMITY_FALLBACK


def _rooms_label(rooms: List[Room]) -> str:
    return ", ".join(str(r.num) for r in rooms)


def _rooms_by_floor(rooms: List[Room]) -> Dict[int, List[Room]]:
    grouped: Dict[int, List[Room]] = {}
    for r in rooms:
        grouped.setdefault(r.floor, []).append(r)
    return grouped


def explain_same_floor(
    requested: int,
    floor: int,
    rooms: List[Room],
    span: int,
    travel_time: int,
) -> List[str]:
    """Produce step-by-step explanation for a same-floor booking."""
    steps = [
        f"Step 1 - Request: {requested} room(s)",
        f"Step 2 - Same floor: floor {floor} has the tightest run of "
        f"{requested} available room(s) ({_rooms_label(rooms)}), span {span}",
        f"Step 3 - Travel time between first and last room: {travel_time} min",
    ]
    return steps


def explain_cross_floor(
    requested: int,
    rooms: List[Room],
    strategy: str,
    centers: List[int],
    travel_time: int,
) -> List[str]:
    """Produce step-by-step explanation for a booking spread over several floors."""
    steps = [
        f"Step 1 - Request: {requested} room(s)",
        f"Step 2 - No single floor has {requested} free room(s); "
        f"tried center floors {', '.join(str(c) for c in centers)}",
    ]

    if strategy == STRATEGY_PROXIMITY_FALLBACK:
        steps.append(
            f"Step 3 - Filled from the nearest floors around floor {centers[0]}"
        )
    else:
        steps.append(
            "Step 3 - Kept the combination with the lowest travel time "
            "(walk to the stairs, climb between floors, walk to the room)"
        )

    for floor, on_floor in sorted(_rooms_by_floor(rooms).items()):
        steps.append(f"  Floor {floor}: {_rooms_label(on_floor)}")

    steps.append(f"Step 4 - Travel time between first and last room: {travel_time} min")
    return steps
