"""Minimum-span window search on a single floor."""

import logging
from typing import Dict, List, Optional, Tuple
from models.room import Room

logger = logging.getLogger(__name__)


def window_span(rooms: List[Room]) -> int:
    return rooms[-1].pos - rooms[0].pos


def best_window_on_floor(rooms_on_floor: List[Room], n: int) -> Optional[List[Room]]:
    """Pick n consecutive available rooms with the smallest span.

    rooms_on_floor must be sorted by pos ascending. Ties keep the leftmost
    window. Returns None if the floor has fewer than n rooms.
    """
    if n < 1 or len(rooms_on_floor) < n:
        return None

    best = None
    best_span = None
    for i in range(len(rooms_on_floor) - n + 1):
        window = rooms_on_floor[i:i + n]
        span = window_span(window)
        if best is None or span < best_span:
            best = window
            best_span = span
    return best


def best_same_floor_pick(
    by_floor: Dict[int, List[Room]],
    n: int,
) -> Optional[Tuple[int, List[Room]]]:
    """Best window across all floors. Returns (floor, rooms) or None.

    Floors are scanned in ascending number so equal spans go to the lowest floor.
    """
    best_floor = None
    best_pick = None
    for floor in sorted(by_floor):
        pick = best_window_on_floor(by_floor[floor], n)
        if pick is None:
            continue
        if best_pick is None or window_span(pick) < window_span(best_pick):
            best_floor = floor
            best_pick = pick

    if best_pick is not None:
        logger.debug("Same-floor window on floor %d with span %d", best_floor, window_span(best_pick))
        return best_floor, best_pick
    return None
