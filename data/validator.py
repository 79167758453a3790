"""Validation for layout tables and user-entered room counts."""

from dataclasses import dataclass, field
from numbers import Integral
from typing import List

import pandas as pd

from models.results import CountResult, InvalidCount, ValidCount
from config.defaults import (
    MIN_ROOMS_PER_REQUEST, MAX_ROOMS_PER_REQUEST, ROOM_NUMBER_BASE,
    MSG_COUNT_NOT_A_NUMBER, MSG_COUNT_OUT_OF_RANGE,
)


@dataclass
class ValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


LAYOUT_REQUIRED_COLUMNS = [
    "Floor Number",
    "Room Number",
]


def _check_required_columns(df: pd.DataFrame, required: List[str], file_label: str) -> ValidationResult:
    result = ValidationResult()
    missing = [col for col in required if col not in df.columns]
    if missing:
        result.is_valid = False
        result.errors.append(f"{file_label}: Missing required columns: {', '.join(missing)}")
    if df.empty:
        result.is_valid = False
        result.errors.append(f"{file_label}: File contains no data rows.")
    return result


def validate_layout_table(df: pd.DataFrame) -> ValidationResult:
    result = _check_required_columns(df, LAYOUT_REQUIRED_COLUMNS, "Room Layout")
    if not result.is_valid:
        return result

    dupes = df.duplicated(subset=["Room Number"], keep=False)
    if dupes.any():
        result.is_valid = False
        result.errors.append(
            f"Room Layout: Duplicate room numbers: {sorted(df[dupes]['Room Number'].unique().tolist())}"
        )

    rooms = pd.to_numeric(df["Room Number"], errors="coerce")
    floors = pd.to_numeric(df["Floor Number"], errors="coerce")
    bad_rows = rooms.isna() | floors.isna() | (rooms % 1 != 0) | (floors % 1 != 0)
    if bad_rows.any():
        result.is_valid = False
        result.errors.append(
            f"Room Layout: Non-numeric floor or room values in rows: {df.index[bad_rows].tolist()}"
        )
        return result
    rooms = rooms.astype(int)
    floors = floors.astype(int)

    # Room number must encode its floor in the hundreds
    wrong_floor = rooms // ROOM_NUMBER_BASE != floors
    if wrong_floor.any():
        result.is_valid = False
        result.errors.append(
            f"Room Layout: Rooms on the wrong floor: {sorted(rooms[wrong_floor].tolist())}"
        )

    # ...and its position on the floor in the remainder, with no gaps
    for floor, group in df.assign(_room=rooms).groupby(floors):
        expected = [floor * ROOM_NUMBER_BASE + pos for pos in range(1, len(group) + 1)]
        if sorted(group["_room"].tolist()) != expected:
            result.is_valid = False
            result.errors.append(
                f"Room Layout: Floor {floor} rooms must be numbered "
                f"{expected[0]}..{expected[-1]} without gaps."
            )

    return result


def parse_room_count(raw) -> CountResult:
    """Parse a requested room count into ValidCount or InvalidCount."""
    if isinstance(raw, bool) or raw is None:
        return InvalidCount(MSG_COUNT_NOT_A_NUMBER)

    if isinstance(raw, Integral):
        count = int(raw)
    elif isinstance(raw, str):
        text = raw.strip()
        if text.startswith(("+", "-")):
            sign, digits = text[0], text[1:]
        else:
            sign, digits = "", text
        if not digits.isdecimal():
            return InvalidCount(MSG_COUNT_NOT_A_NUMBER)
        # Too many significant digits to be in range; also keeps int() under its digit limit
        if len(digits.lstrip("0")) > len(str(MAX_ROOMS_PER_REQUEST)):
            return InvalidCount(MSG_COUNT_OUT_OF_RANGE)
        count = int(sign + digits)
    else:
        return InvalidCount(MSG_COUNT_NOT_A_NUMBER)

    if count < MIN_ROOMS_PER_REQUEST or count > MAX_ROOMS_PER_REQUEST:
        return InvalidCount(MSG_COUNT_OUT_OF_RANGE)
    return ValidCount(count)
