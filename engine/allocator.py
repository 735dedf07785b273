"""Booking allocator: same floor first, then the cross-floor heuristic."""

import logging
from typing import Dict, Iterable, List, Optional
from models.room import Room
from models.booking import BookingResult, InsufficientAvailability
from engine.distance import diameter
from engine.same_floor import best_same_floor_pick, window_span
from engine.cross_floor import best_cross_floor_pick, candidate_centers
from engine.explainer import explain_same_floor, explain_cross_floor
from config.defaults import (
    MIN_ROOMS_PER_BOOKING, MAX_ROOMS_PER_BOOKING, MAX_CENTER_FLOORS,
    STRATEGY_SAME_FLOOR,
)

logger = logging.getLogger(__name__)


def group_by_floor(available: Iterable[Room]) -> Dict[int, List[Room]]:
    """Available rooms per floor, floors ascending, rooms sorted by pos."""
    unique = {(r.floor, r.pos): r for r in available}
    by_floor: Dict[int, List[Room]] = {}
    for floor, pos in sorted(unique):
        by_floor.setdefault(floor, []).append(unique[(floor, pos)])
    return by_floor


def plan_booking(
    available: Iterable[Room],
    n: int,
    rule_config: Optional[dict] = None,
) -> BookingResult:
    """Choose exactly n rooms from the available set.

    Same-floor windows always win over cross-floor sets. Raises
    InsufficientAvailability when n is out of bounds or no set of n rooms exists.
    """
    cfg = rule_config or {}
    min_rooms = cfg.get("min_rooms_per_booking", MIN_ROOMS_PER_BOOKING)
    max_rooms = cfg.get("max_rooms_per_booking", MAX_ROOMS_PER_BOOKING)

    by_floor = group_by_floor(available)
    available_count = sum(len(rooms) for rooms in by_floor.values())

    if n < min_rooms or n > max_rooms:
        logger.warning("Rejected booking request for %s room(s): allowed %d-%d", n, min_rooms, max_rooms)
        raise InsufficientAvailability(
            n, available_count,
            f"Bookings must be for {min_rooms} to {max_rooms} rooms (requested {n}).",
        )

    same_floor = best_same_floor_pick(by_floor, n)
    if same_floor is not None:
        floor, rooms = same_floor
        travel_time = diameter(rooms, rule_config)
        return BookingResult(
            rooms=rooms,
            strategy=STRATEGY_SAME_FLOOR,
            travel_time=travel_time,
            explanation_steps=explain_same_floor(n, floor, rooms, window_span(rooms), travel_time),
        )

    rooms, strategy = best_cross_floor_pick(by_floor, n, rule_config)
    if rooms is None or len(rooms) != n:
        logger.warning("No set of %d room(s) available (%d free)", n, available_count)
        raise InsufficientAvailability(n, available_count)

    travel_time = diameter(rooms, rule_config)
    centers = candidate_centers(by_floor, cfg.get("max_center_floors", MAX_CENTER_FLOORS))
    return BookingResult(
        rooms=rooms,
        strategy=strategy,
        travel_time=travel_time,
        explanation_steps=explain_cross_floor(n, rooms, strategy, centers, travel_time),
    )


def allocate(
    available: Iterable[Room],
    n: int,
    rule_config: Optional[dict] = None,
) -> List[Room]:
    """Rooms for a booking of n; raises InsufficientAvailability on failure."""
    return plan_booking(available, n, rule_config).rooms
