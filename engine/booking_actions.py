"""Maps the Book / Random / Reset controls onto a BookingSession."""

import random
from typing import Optional, Tuple

from engine.booking_session import BookingSession
from data.validator import parse_room_count
from models.results import Allocated, InvalidCount

ACTION_BOOK = "book"
ACTION_RANDOM = "random"
ACTION_RESET = "reset"


def run_action(
    session: BookingSession,
    action: Optional[str],
    raw_count=None,
    rng: Optional[random.Random] = None,
) -> Optional[Tuple[str, str]]:
    """Apply one user action. Returns (level, message) for display, or None."""
    if action == ACTION_BOOK:
        parsed = parse_room_count(raw_count)
        if isinstance(parsed, InvalidCount):
            return "error", parsed.reason
        result = session.book(parsed.count)
        if isinstance(result, Allocated):
            return "success", f"Booked rooms {', '.join(str(r) for r in result.rooms)}"
        return "warning", result.message

    if action == ACTION_RANDOM:
        result = session.book_random(rng)
        if isinstance(result, Allocated):
            return "success", f"Randomly booked {result.count} rooms"
        return "warning", result.message

    if action == ACTION_RESET:
        session.reset()
        return "info", "All bookings cleared"

    return None
