"""Validation for booking requests coming from the UI."""

from dataclasses import dataclass, field
from typing import List, Optional

from config.defaults import MIN_ROOMS_PER_BOOKING, MAX_ROOMS_PER_BOOKING


@dataclass
class ValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


def clamp_room_count(value) -> int:
    """Coerce raw input to a room count in 1..5; blank or non-numeric input means 1."""
    try:
        count = int(float(value))
    except (TypeError, ValueError, OverflowError):
        count = 0
    count = count or MIN_ROOMS_PER_BOOKING
    return max(MIN_ROOMS_PER_BOOKING, min(MAX_ROOMS_PER_BOOKING, count))


def validate_booking_request(
    n: int,
    available_count: int,
    rule_config: Optional[dict] = None,
) -> ValidationResult:
    cfg = rule_config or {}
    min_rooms = cfg.get("min_rooms_per_booking", MIN_ROOMS_PER_BOOKING)
    max_rooms = cfg.get("max_rooms_per_booking", MAX_ROOMS_PER_BOOKING)

    result = ValidationResult()
    if n < min_rooms or n > max_rooms:
        result.is_valid = False
        result.errors.append(f"Rooms to book must be between {min_rooms} and {max_rooms}.")
        return result

    if available_count < n:
        result.is_valid = False
        result.errors.append("Not enough rooms available to satisfy this booking.")
    elif available_count - n < max_rooms:
        result.warnings.append(
            f"Only {available_count - n} room(s) will remain free after this booking."
        )
    return result
