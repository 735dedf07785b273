"""Cross-floor heuristic used when no single floor can hold the whole booking."""

import logging
from typing import Dict, List, Optional, Tuple
from models.room import Room
from engine.distance import diameter
from engine.same_floor import best_window_on_floor
from config.defaults import (
    FLOOR_COUNT, MAX_CENTER_FLOORS,
    STRATEGY_CROSS_FLOOR, STRATEGY_PROXIMITY_FALLBACK,
)

logger = logging.getLogger(__name__)


def candidate_centers(by_floor: Dict[int, List[Room]], limit: int = MAX_CENTER_FLOORS) -> List[int]:
    """Floors with the most availability first, lowest floor number on ties."""
    counts = [(floor, len(rooms)) for floor, rooms in by_floor.items() if rooms]
    counts.sort(key=lambda fc: (-fc[1], fc[0]))
    return [floor for floor, _ in counts[:limit]]


def _fill_from_nearby_floors(
    by_floor: Dict[int, List[Room]],
    center: int,
    picked: List[Room],
    n: int,
) -> List[Room]:
    """Top up picked with rooms from C-1, C+1, C-2, C+2, ... nearest the stairs first."""
    result = list(picked)
    delta = 1
    while len(result) < n and (center - delta >= 1 or center + delta <= FLOOR_COUNT):
        for floor in (center - delta, center + delta):
            if floor < 1 or floor > FLOOR_COUNT:
                continue
            for room in by_floor.get(floor, []):
                if len(result) >= n:
                    break
                result.append(room)
            if len(result) >= n:
                break
        delta += 1
    return result


def centered_pick(
    by_floor: Dict[int, List[Room]],
    n: int,
    center: int,
    rule_config: Optional[dict] = None,
) -> Optional[List[Room]]:
    """Best set built from a window of k rooms on the center floor plus nearby fill.

    k runs from min(n, available on center) down to 1; the first set reaching
    the lowest diameter wins, so larger windows win ties.
    """
    on_center = by_floor.get(center, [])
    best_set = None
    best_score = None

    for k in range(min(n, len(on_center)), 0, -1):
        picks_on_center = best_window_on_floor(on_center, k) or on_center[:k]
        result = list(picks_on_center)
        if k < n:
            result = _fill_from_nearby_floors(by_floor, center, result, n)
        if len(result) != n:
            continue

        score = diameter(result, rule_config)
        if best_score is None or score < best_score:
            best_score = score
            best_set = result

    if best_set is not None:
        logger.debug("Center floor %d: best diameter %d", center, best_score)
    return best_set


def proximity_order(center: int) -> List[int]:
    """Floors ordered center, center-1, center+1, center-2, ... within the building."""
    order = [center]
    for d in range(1, FLOOR_COUNT):
        if center - d >= 1:
            order.append(center - d)
        if center + d <= FLOOR_COUNT:
            order.append(center + d)
    return order


def proximity_fallback(
    by_floor: Dict[int, List[Room]],
    n: int,
    center: int,
) -> Optional[List[Room]]:
    """Fill floor by floor outward from center; None if n rooms cannot be reached."""
    result = []
    for floor in proximity_order(center):
        for room in by_floor.get(floor, []):
            result.append(room)
            if len(result) == n:
                return result
    return None


def best_cross_floor_pick(
    by_floor: Dict[int, List[Room]],
    n: int,
    rule_config: Optional[dict] = None,
) -> Tuple[Optional[List[Room]], Optional[str]]:
    """Lowest-diameter set over the candidate centers. Returns (rooms, strategy)."""
    cfg = rule_config or {}
    max_centers = cfg.get("max_center_floors", MAX_CENTER_FLOORS)

    centers = candidate_centers(by_floor, max_centers)
    best = None
    best_score = None
    best_center = None

    for center in centers:
        pick = centered_pick(by_floor, n, center, rule_config)
        if pick is None:
            continue
        score = diameter(pick, rule_config)
        if best_score is None or score < best_score:
            best_score = score
            best = pick
            best_center = center

    if best is not None:
        logger.debug("Cross-floor pick centered on floor %d, diameter %d", best_center, best_score)
        return best, STRATEGY_CROSS_FLOOR

    if centers:
        fallback = proximity_fallback(by_floor, n, centers[0])
        if fallback is not None:
            logger.debug("Proximity fallback around floor %d", centers[0])
            return fallback, STRATEGY_PROXIMITY_FALLBACK

    return None, None
