"""Compiled-in building layout, as a table and as a HotelLayout."""

from typing import List

import pandas as pd

from models.layout import HotelLayout
from config.defaults import FLOOR_COUNT, ROOMS_PER_FLOOR, TOP_FLOOR_ROOMS, ROOM_NUMBER_BASE


def default_floor_rows() -> List[List[int]]:
    """Room numbers per floor: floors 1..9 with 10 rooms, the top floor with 7."""
    rows = []
    for floor in range(1, FLOOR_COUNT + 1):
        room_count = TOP_FLOOR_ROOMS if floor == FLOOR_COUNT else ROOMS_PER_FLOOR
        rows.append([floor * ROOM_NUMBER_BASE + pos for pos in range(1, room_count + 1)])
    return rows


def generate_layout_df() -> pd.DataFrame:
    """One row per room with its floor number."""
    rows = []
    for floor_rooms in default_floor_rows():
        for room in floor_rooms:
            rows.append({
                "Floor Number": room // ROOM_NUMBER_BASE,
                "Room Number": room,
            })
    return pd.DataFrame(rows)


def build_default_layout() -> HotelLayout:
    return HotelLayout.from_rows(default_floor_rows())
