"""Tests for room-count parsing and layout table validation."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pandas as pd

from data.layout_data import generate_layout_df
from data.validator import parse_room_count, validate_layout_table
from models.results import InvalidCount, ValidCount
from config.defaults import MSG_COUNT_NOT_A_NUMBER, MSG_COUNT_OUT_OF_RANGE


class TestParseRoomCount:
    def test_valid_values(self):
        assert parse_room_count("1") == ValidCount(1)
        assert parse_room_count(" 5 ") == ValidCount(5)
        assert parse_room_count(3) == ValidCount(3)
        assert parse_room_count("+2") == ValidCount(2)

    def test_out_of_range(self):
        for raw in ("0", "6", "-1", 0, 42):
            assert parse_room_count(raw) == InvalidCount(MSG_COUNT_OUT_OF_RANGE)

    def test_not_a_number(self):
        for raw in ("", "   ", "abc", "2.5", "3 rooms", None, True, 3.0, "-"):
            assert parse_room_count(raw) == InvalidCount(MSG_COUNT_NOT_A_NUMBER)

    def test_very_long_numbers_are_out_of_range(self):
        assert parse_room_count("9" * 5000) == InvalidCount(MSG_COUNT_OUT_OF_RANGE)
        assert parse_room_count("-" + "1" * 5000) == InvalidCount(MSG_COUNT_OUT_OF_RANGE)
        assert parse_room_count("12") == InvalidCount(MSG_COUNT_OUT_OF_RANGE)

    def test_leading_zeros(self):
        assert parse_room_count("0003") == ValidCount(3)
        assert parse_room_count("0" * 5000 + "4") == ValidCount(4)
        assert parse_room_count("000") == InvalidCount(MSG_COUNT_OUT_OF_RANGE)

    def test_range_message_text(self):
        assert MSG_COUNT_OUT_OF_RANGE == "You can book minimum of 1, maximum of 5 rooms"


class TestValidateLayoutTable:
    def test_default_layout_is_valid(self):
        result = validate_layout_table(generate_layout_df())
        assert result.is_valid
        assert result.errors == []

    def test_missing_column(self):
        df = generate_layout_df().drop(columns=["Floor Number"])
        result = validate_layout_table(df)
        assert not result.is_valid
        assert "Floor Number" in result.errors[0]

    def test_empty_table(self):
        df = generate_layout_df().iloc[0:0]
        result = validate_layout_table(df)
        assert not result.is_valid

    def test_duplicate_rooms(self):
        df = generate_layout_df()
        df = pd.concat([df, df.iloc[[0]]], ignore_index=True)
        result = validate_layout_table(df)
        assert not result.is_valid
        assert any("Duplicate" in e for e in result.errors)

    def test_room_on_wrong_floor(self):
        df = generate_layout_df()
        df.loc[df["Room Number"] == 205, "Floor Number"] = 3
        result = validate_layout_table(df)
        assert not result.is_valid
        assert any("wrong floor" in e for e in result.errors)

    def test_gap_in_numbering(self):
        df = generate_layout_df()
        df = df[df["Room Number"] != 105]
        result = validate_layout_table(df)
        assert not result.is_valid
        assert any("Floor 1" in e for e in result.errors)

    def test_non_numeric_cells(self):
        df = generate_layout_df().astype({"Room Number": object})
        df.loc[0, "Room Number"] = "A101"
        result = validate_layout_table(df)
        assert not result.is_valid
        assert any("Non-numeric" in e and "[0]" in e for e in result.errors)

    def test_missing_cells(self):
        df = generate_layout_df().astype({"Floor Number": float})
        df.loc[3, "Floor Number"] = float("nan")
        result = validate_layout_table(df)
        assert not result.is_valid
        assert any("Non-numeric" in e and "[3]" in e for e in result.errors)


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
