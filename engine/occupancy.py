"""Availability views over the layout and booking commits."""

import logging
from typing import Dict, Iterable, List, Set, Tuple
from models.room import Room

logger = logging.getLogger(__name__)


def available_rooms(layout: Tuple[Room, ...], occupied_ids: Set[str]) -> List[Room]:
    """Rooms not occupied, in layout order."""
    return [r for r in layout if r.room_id not in occupied_ids]


def commit_booking(occupied_ids: Set[str], rooms: Iterable[Room]) -> Set[str]:
    """Return a new occupied set including the booked rooms."""
    booked = {r.room_id for r in rooms}
    clash = booked & occupied_ids
    if clash:
        raise ValueError(f"Rooms already occupied: {', '.join(sorted(clash))}")
    logger.info("Committed booking for rooms %s", ", ".join(sorted(booked, key=int)))
    return set(occupied_ids) | booked


def availability_by_floor(rooms: Iterable[Room]) -> Dict[int, int]:
    """Free room count per floor, floors ascending, empty floors omitted."""
    counts: Dict[int, int] = {}
    for r in rooms:
        counts[r.floor] = counts.get(r.floor, 0) + 1
    return dict(sorted(counts.items()))


def occupancy_summary(layout: Tuple[Room, ...], occupied_ids: Set[str]) -> dict:
    total = len(layout)
    occupied = sum(1 for r in layout if r.room_id in occupied_ids)
    return {
        "total_rooms": total,
        "occupied_rooms": occupied,
        "available_rooms": total - occupied,
        "occupancy_pct": occupied / total if total > 0 else 0,
    }
