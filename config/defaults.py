"""Default configuration constants for the Hotel Room Reservation Planner."""

# Building shape: floors 1-9 hold 10 rooms each, the top floor holds 7
FLOOR_COUNT = 10
STANDARD_ROOMS_PER_FLOOR = 10
TOP_FLOOR_ROOMS = 7
ROOM_NUMBER_FLOOR_MULTIPLIER = 100  # 101..110 on floor 1, 1001..1007 on floor 10

# Travel cost (minutes)
HORIZONTAL_COST_PER_ROOM = 1
VERTICAL_COST_PER_FLOOR = 2  # via stairs/lift at the left end of every floor

# Booking request bounds
MIN_ROOMS_PER_BOOKING = 1
MAX_ROOMS_PER_BOOKING = 5

# Cross-floor heuristic
MAX_CENTER_FLOORS = 4  # Floors with the most availability tried as centers

# Exact optimizer (PuLP) is only run while the problem stays small
EXACT_SEARCH_MAX_AVAILABLE = 26
EXACT_SEARCH_TIME_LIMIT = 30  # seconds
EXACT_TIEBREAK_WEIGHT = 0.0001  # prefers lower room numbers among equal diameters

# Demo occupancy generator
DEFAULT_OCCUPANCY_PROBABILITY = 0.35

# Booking strategies
STRATEGY_SAME_FLOOR = "same_floor"
STRATEGY_CROSS_FLOOR = "cross_floor"
STRATEGY_PROXIMITY_FALLBACK = "proximity_fallback"

STRATEGY_LABELS = {
    STRATEGY_SAME_FLOOR: "Same floor",
    STRATEGY_CROSS_FLOOR: "Across floors",
    STRATEGY_PROXIMITY_FALLBACK: "Nearest floors (fallback)",
}

# Grid colours
COLOR_AVAILABLE = "#4A90D9"
COLOR_OCCUPIED = "#B0B7C3"
COLOR_BOOKED = "#E8734A"

LOG_LEVEL = "INFO"
