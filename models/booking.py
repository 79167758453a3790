from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional


class BookingType(str, Enum):
    MANUAL = "manual"    # Contiguity-seeking "Book" request
    RANDOM = "random"    # Bulk "Random" request


@dataclass(frozen=True)
class Booking:
    room: int
    booking_type: BookingType


@dataclass
class BookingEvent:
    """One entry of the in-session booking history."""
    timestamp: datetime
    action: str                      # "book", "random", "reset"
    rooms: List[int] = field(default_factory=list)
    requested_count: Optional[int] = None
    outcome: str = ""                # strategy name, "insufficient" or "cleared"
