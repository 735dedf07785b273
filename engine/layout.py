"""Fixed building layout: 97 rooms over 10 floors."""

from typing import Dict, List, Tuple
from models.room import Room
from config.defaults import FLOOR_COUNT, STANDARD_ROOMS_PER_FLOOR, TOP_FLOOR_ROOMS


def rooms_per_floor(floor: int) -> int:
    """Number of rooms on a floor; the top floor is shorter."""
    if floor < 1 or floor > FLOOR_COUNT:
        return 0
    return TOP_FLOOR_ROOMS if floor == FLOOR_COUNT else STANDARD_ROOMS_PER_FLOOR


def build_layout() -> Tuple[Room, ...]:
    """Build every room in the hotel, ordered by floor then position."""
    return tuple(
        Room(floor=f, pos=p)
        for f in range(1, FLOOR_COUNT + 1)
        for p in range(rooms_per_floor(f))
    )


def rooms_on_floor(layout: Tuple[Room, ...], floor: int) -> List[Room]:
    return [r for r in layout if r.floor == floor]


def room_index(layout: Tuple[Room, ...]) -> Dict[str, Room]:
    """Map room_id -> Room."""
    return {r.room_id: r for r in layout}
