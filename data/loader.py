"""Table conversions: layout DataFrame into HotelLayout, bookings into DataFrames."""

import pandas as pd
from typing import Dict, List

from models.layout import HotelLayout
from models.booking import Booking
from data.validator import validate_layout_table
from config.defaults import STATUS_FREE


class LayoutError(ValueError):
    """Raised when a layout table fails validation."""


def parse_layout(df: pd.DataFrame) -> HotelLayout:
    """Convert a layout DataFrame (Floor Number, Room Number) into a HotelLayout."""
    result = validate_layout_table(df)
    if not result.is_valid:
        raise LayoutError("; ".join(result.errors))

    rows = []
    for _, group in df.sort_values(["Floor Number", "Room Number"]).groupby("Floor Number", sort=True):
        rows.append([int(r) for r in group["Room Number"]])
    return HotelLayout.from_rows(rows)


def bookings_to_df(layout: HotelLayout, bookings: Dict[int, Booking]) -> pd.DataFrame:
    """One row per room in layout order with its current status."""
    rows = []
    for floor in layout.floors:
        for position, room in enumerate(floor.rooms, start=1):
            booking = bookings.get(room)
            rows.append({
                "Floor": floor.floor_number,
                "Position": position,
                "Room": room,
                "Status": booking.booking_type.value if booking else STATUS_FREE,
            })
    return pd.DataFrame(rows, columns=["Floor", "Position", "Room", "Status"])


def floor_occupancy(layout: HotelLayout, bookings: Dict[int, Booking]) -> List[dict]:
    """Per-floor room counts by status."""
    df = bookings_to_df(layout, bookings)
    counts = df.groupby(["Floor", "Status"]).size().unstack(fill_value=0)

    results = []
    for floor in layout.floors:
        row = counts.loc[floor.floor_number] if floor.floor_number in counts.index else {}
        manual = int(row.get("manual", 0))
        random_ = int(row.get("random", 0))
        total = floor.room_count
        results.append({
            "floor_number": floor.floor_number,
            "total_rooms": total,
            "manual_rooms": manual,
            "random_rooms": random_,
            "free_rooms": total - manual - random_,
            "occupancy_pct": (manual + random_) / total if total > 0 else 0,
        })
    return results
