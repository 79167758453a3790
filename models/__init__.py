from models.layout import Floor, HotelLayout, floor_of, index_on_floor
from models.booking import Booking, BookingEvent, BookingType
from models.results import (
    Allocated, AllocationResult, CountResult, Insufficient, InvalidCount, ValidCount,
)
