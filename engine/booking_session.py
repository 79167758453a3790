"""Caller-owned booking state: the BookingSet plus its in-session history."""

import random
from datetime import datetime
from typing import Dict, List, Optional, Set

from models.booking import Booking, BookingEvent, BookingType
from models.layout import HotelLayout
from models.results import Allocated, AllocationResult
from engine.allocator import allocate_contiguous_result, allocate_random_result
from config.defaults import STATUS_FREE
from utils.logger import get_logger

logger = get_logger(__name__)


class BookingError(ValueError):
    """Raised when allocated rooms cannot be merged into the session."""


class DoubleBookingError(BookingError):
    """Raised when a merge would book a room that is already booked."""


class BookingSession:
    """Holds the bookings for one session over an immutable layout.

    The allocators only ever see a snapshot of the booked rooms; results are
    merged here in one step. Rooms are released only by `reset`.
    """

    def __init__(self, layout: HotelLayout):
        self.layout = layout
        self._bookings: Dict[int, Booking] = {}
        self.history: List[BookingEvent] = []

    @property
    def bookings(self) -> Dict[int, Booking]:
        return dict(self._bookings)

    def booked_rooms(self) -> Set[int]:
        return set(self._bookings)

    def available_count(self) -> int:
        return self.layout.total_rooms - len(self._bookings)

    def status_of(self, room: int) -> str:
        booking = self._bookings.get(room)
        if booking is None:
            return STATUS_FREE
        return booking.booking_type.value

    def count_by_type(self, booking_type: BookingType) -> int:
        return sum(1 for b in self._bookings.values() if b.booking_type == booking_type)

    def book(self, count: int) -> AllocationResult:
        """Book `count` rooms, contiguous where possible. `count` must already be valid."""
        result = allocate_contiguous_result(self.layout, self.booked_rooms(), count)
        self._apply(result, BookingType.MANUAL, action="book", requested_count=count)
        return result

    def book_random(self, rng: Optional[random.Random] = None) -> AllocationResult:
        result = allocate_random_result(self.layout, self.booked_rooms(), rng)
        self._apply(result, BookingType.RANDOM, action="random")
        return result

    def reset(self):
        cleared = sorted(self._bookings)
        self._bookings = {}
        self.history.append(BookingEvent(
            timestamp=datetime.now(),
            action="reset",
            rooms=cleared,
            outcome="cleared",
        ))
        logger.info("Reset cleared %d bookings", len(cleared))

    def _apply(
        self,
        result: AllocationResult,
        booking_type: BookingType,
        action: str,
        requested_count: Optional[int] = None,
    ):
        if isinstance(result, Allocated):
            self._merge(result.rooms, booking_type)
            outcome = result.strategy
            rooms = list(result.rooms)
            logger.info("Booked %d rooms (%s): %s", len(rooms), outcome, rooms)
        else:
            outcome = "insufficient"
            rooms = []
            logger.warning("%s request could not be satisfied: %s", action, result.message)

        self.history.append(BookingEvent(
            timestamp=datetime.now(),
            action=action,
            rooms=rooms,
            requested_count=requested_count,
            outcome=outcome,
        ))

    def _merge(self, rooms: List[int], booking_type: BookingType):
        clashes = [r for r in rooms if r in self._bookings]
        if clashes:
            raise DoubleBookingError(f"Rooms already booked: {clashes}")
        unknown = [r for r in rooms if r not in self.layout]
        if unknown:
            raise BookingError(f"Rooms not in layout: {unknown}")

        merged = dict(self._bookings)
        for room in rooms:
            merged[room] = Booking(room, booking_type)
        self._bookings = merged
