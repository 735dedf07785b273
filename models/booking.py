from dataclasses import dataclass, field
from datetime import datetime
from typing import List

from models.room import Room


class InsufficientAvailability(Exception):
    """No selection of exactly the requested size can be formed."""

    def __init__(self, requested: int, available_count: int, message: str = ""):
        self.requested = requested
        self.available_count = available_count
        super().__init__(
            message or f"Cannot book {requested} room(s): {available_count} available."
        )


@dataclass
class BookingResult:
    rooms: List[Room]
    strategy: str       # "same_floor", "cross_floor", "proximity_fallback"
    travel_time: int    # diameter of the selected set, in minutes
    explanation_steps: List[str] = field(default_factory=list)

    @property
    def room_numbers(self) -> List[int]:
        return [r.num for r in self.rooms]


@dataclass
class BookingRecord:
    timestamp: datetime
    room_numbers: List[int]
    travel_time: int
    strategy: str
