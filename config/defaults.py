"""Default configuration constants for the Hotel Room Booking app."""

import os

# Building shape: floors 1..9 hold ROOMS_PER_FLOOR rooms, the top floor is smaller
FLOOR_COUNT = 10
ROOMS_PER_FLOOR = 10
TOP_FLOOR_ROOMS = 7

# Room numbers are floor * ROOM_NUMBER_BASE + position (1-based)
ROOM_NUMBER_BASE = 100

# Manual booking request bounds (inclusive)
MIN_ROOMS_PER_REQUEST = 1
MAX_ROOMS_PER_REQUEST = 5

# Random bulk booking draws a target count from this range (inclusive)
RANDOM_MIN_ROOMS = 5
RANDOM_MAX_ROOMS = 30

# Allocation strategies reported back to the caller
STRATEGY_CONTIGUOUS = "contiguous"
STRATEGY_CROSS_FLOOR = "cross_floor"
STRATEGY_RANDOM = "random"

# Room status labels
STATUS_FREE = "free"
STATUS_MANUAL = "manual"
STATUS_RANDOM = "random"

# Grid colours per status
STATUS_COLORS = {
    STATUS_FREE: "#E8EEF4",
    STATUS_MANUAL: "#4A90D9",
    STATUS_RANDOM: "#E8734A",
}

# User-facing messages
MSG_COUNT_OUT_OF_RANGE = (
    f"You can book minimum of {MIN_ROOMS_PER_REQUEST}, "
    f"maximum of {MAX_ROOMS_PER_REQUEST} rooms"
)
MSG_COUNT_NOT_A_NUMBER = "Please enter a whole number of rooms"

# Logging
LOG_LEVEL = os.environ.get("HOTEL_BOOKING_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
