"""Travel cost between rooms and the diameter of a room set."""

from itertools import combinations
from typing import Iterable, Optional
from models.room import Room
from config.defaults import HORIZONTAL_COST_PER_ROOM, VERTICAL_COST_PER_FLOOR


def distance(a: Room, b: Room, rule_config: Optional[dict] = None) -> int:
    """Walking cost between two rooms.

    Same floor: one unit per room along the corridor. Different floors: walk
    from each room to the stairs (its pos) plus the vertical cost per floor.
    """
    cfg = rule_config or {}
    horizontal = cfg.get("horizontal_cost_per_room", HORIZONTAL_COST_PER_ROOM)
    vertical = cfg.get("vertical_cost_per_floor", VERTICAL_COST_PER_FLOOR)

    if a.floor == b.floor:
        return abs(a.pos - b.pos) * horizontal
    return (a.pos + b.pos) * horizontal + vertical * abs(a.floor - b.floor)


def diameter(rooms: Iterable[Room], rule_config: Optional[dict] = None) -> int:
    """Max pairwise distance; 0 for empty or single-room sets."""
    rooms = list(rooms)
    if len(rooms) <= 1:
        return 0
    return max(distance(a, b, rule_config) for a, b in combinations(rooms, 2))


def travel_cost(rooms: Iterable[Room], rule_config: Optional[dict] = None) -> int:
    """Travel time between the first and last room of a booking."""
    return diameter(rooms, rule_config)


def format_minutes(minutes: int) -> str:
    return f"{minutes} min"
