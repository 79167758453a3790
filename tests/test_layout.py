"""Tests for the building layout model."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from models.layout import Floor, HotelLayout, floor_of, index_on_floor
from data.layout_data import build_default_layout, default_floor_rows


class TestDefaultLayout:
    def test_room_count(self):
        layout = build_default_layout()
        assert layout.total_rooms == 97
        assert len(layout.all_rooms()) == 97

    def test_floor_order(self):
        layout = build_default_layout()
        assert layout.floor_numbers() == list(range(1, 11))
        rooms = layout.all_rooms()
        assert rooms[:3] == [101, 102, 103]
        assert rooms[-1] == 1007

    def test_top_floor_is_short(self):
        layout = build_default_layout()
        assert layout.rooms_on(10) == (1001, 1002, 1003, 1004, 1005, 1006, 1007)
        assert layout.rooms_on(9)[-1] == 910
        assert layout.max_rooms_per_floor == 10

    def test_numbering_matches_floor_and_position(self):
        layout = build_default_layout()
        for floor in layout.floors:
            for position, room in enumerate(floor.rooms):
                assert layout.floor_of(room) == floor.floor_number
                assert layout.index_on_floor(room) == position

    def test_rows_helper(self):
        rows = default_floor_rows()
        assert len(rows) == 10
        assert rows[0] == list(range(101, 111))


class TestRoomArithmetic:
    def test_floor_of(self):
        assert floor_of(101) == 1
        assert floor_of(305) == 3
        assert floor_of(1007) == 10

    def test_index_on_floor(self):
        assert index_on_floor(101) == 0
        assert index_on_floor(305) == 4
        assert index_on_floor(1007) == 6


class TestHotelLayout:
    def test_from_rows_sorts_floors_and_rooms(self):
        layout = HotelLayout.from_rows([[203, 201, 202], [102, 101]])
        assert layout.floor_numbers() == [1, 2]
        assert layout.all_rooms() == [101, 102, 201, 202, 203]

    def test_membership(self):
        layout = build_default_layout()
        assert 505 in layout
        assert 1008 not in layout
        assert 111 not in layout

    def test_unknown_floor_has_no_rooms(self):
        layout = build_default_layout()
        assert layout.rooms_on(11) == ()

    def test_equality_ignores_construction_route(self):
        direct = HotelLayout((Floor(1, (101, 102)),))
        from_rows = HotelLayout.from_rows([[101, 102]])
        assert direct == from_rows


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
