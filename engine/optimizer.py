"""PuLP exact search for the minimum-diameter room set."""

import logging
from dataclasses import dataclass, field
from itertools import combinations
from typing import Iterable, List, Optional
import pulp

from models.room import Room
from engine.allocator import group_by_floor
from engine.distance import distance, diameter
from config.defaults import (
    EXACT_SEARCH_MAX_AVAILABLE, EXACT_SEARCH_TIME_LIMIT, EXACT_TIEBREAK_WEIGHT,
    MIN_ROOMS_PER_BOOKING, MAX_ROOMS_PER_BOOKING,
)

logger = logging.getLogger(__name__)


@dataclass
class OptimizationResult:
    status: str  # "Optimal", "Infeasible", "Skipped", "Not Solved"
    travel_time: Optional[int]
    rooms: List[Room] = field(default_factory=list)
    message: str = ""

    @property
    def room_numbers(self) -> List[int]:
        return [r.num for r in self.rooms]


def optimize_selection(
    available: Iterable[Room],
    n: int,
    rule_config: Optional[dict] = None,
) -> OptimizationResult:
    """
    Pick exactly n available rooms minimizing the worst pairwise travel cost.

    Model:
    - x[r] binary: room r is booked
    - D continuous: diameter, D >= d(a, b) * (x[a] + x[b] - 1) for every pair
    - minimize D plus a tiny weight on room numbers so equal diameters resolve
      to the same rooms every time

    Only solved while the availability is small (exact_search_max_available).
    Same-floor preference is not applied; this is the pure diameter optimum.
    """
    cfg = rule_config or {}
    max_available = cfg.get("exact_search_max_available", EXACT_SEARCH_MAX_AVAILABLE)
    time_limit = cfg.get("exact_search_time_limit", EXACT_SEARCH_TIME_LIMIT)
    min_rooms = cfg.get("min_rooms_per_booking", MIN_ROOMS_PER_BOOKING)
    max_rooms = cfg.get("max_rooms_per_booking", MAX_ROOMS_PER_BOOKING)

    rooms = [r for floor_rooms in group_by_floor(available).values() for r in floor_rooms]

    if n < min_rooms or n > max_rooms:
        return OptimizationResult(
            status="Infeasible", travel_time=None,
            message=f"Bookings must be for {min_rooms} to {max_rooms} rooms.",
        )
    if len(rooms) < n:
        return OptimizationResult(
            status="Infeasible", travel_time=None,
            message=f"Only {len(rooms)} room(s) available for a booking of {n}.",
        )
    if len(rooms) > max_available:
        return OptimizationResult(
            status="Skipped", travel_time=None,
            message=(
                f"Exact search skipped: {len(rooms)} rooms available "
                f"(limit {max_available})."
            ),
        )

    prob = pulp.LpProblem("MinDiameterBooking", pulp.LpMinimize)

    x = {r.room_id: pulp.LpVariable(f"x_{r.room_id}", cat="Binary") for r in rooms}
    max_pair = max((distance(a, b, rule_config) for a, b in combinations(rooms, 2)), default=0)
    d = pulp.LpVariable("diameter", lowBound=0, upBound=max_pair)

    prob += (
        d + EXACT_TIEBREAK_WEIGHT * pulp.lpSum(x[r.room_id] * r.num for r in rooms) / max(1, n)
    ), "diameter_objective"

    prob += pulp.lpSum(x.values()) == n, "booking_size"

    for a, b in combinations(rooms, 2):
        cost = distance(a, b, rule_config)
        if cost > 0:
            prob += d >= cost * (x[a.room_id] + x[b.room_id] - 1), f"pair_{a.room_id}_{b.room_id}"

    prob.solve(pulp.PULP_CBC_CMD(msg=0, timeLimit=time_limit))
    status = pulp.LpStatus[prob.status]

    if status != "Optimal":
        logger.warning("Exact search ended with status %s", status)
        return OptimizationResult(
            status=status, travel_time=None,
            message=f"Optimization could not find a solution. Status: {status}",
        )

    chosen = [r for r in rooms if (x[r.room_id].varValue or 0) > 0.5]
    travel_time = diameter(chosen, rule_config)
    logger.info("Exact search picked %s with travel time %d", [r.num for r in chosen], travel_time)

    return OptimizationResult(
        status=status,
        travel_time=travel_time,
        rooms=chosen,
        message=f"Optimal set of {n} room(s) found. Travel time: {travel_time} min.",
    )
