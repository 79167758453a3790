"""Tests for mapping sidebar actions onto a booking session."""

import sys
import os
import random
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from data.layout_data import build_default_layout
from engine.booking_actions import ACTION_BOOK, ACTION_RANDOM, ACTION_RESET, run_action
from engine.booking_session import BookingSession
from config.defaults import MSG_COUNT_NOT_A_NUMBER, MSG_COUNT_OUT_OF_RANGE


def make_session():
    return BookingSession(build_default_layout())


class TestBookAction:
    def test_valid_count(self):
        session = make_session()
        level, message = run_action(session, ACTION_BOOK, "2")
        assert level == "success"
        assert message == "Booked rooms 101, 102"

    def test_non_numeric_never_calls_allocator(self):
        session = make_session()
        assert run_action(session, ACTION_BOOK, "abc") == ("error", MSG_COUNT_NOT_A_NUMBER)
        assert session.history == []

    def test_out_of_range(self):
        session = make_session()
        assert run_action(session, ACTION_BOOK, "6") == ("error", MSG_COUNT_OUT_OF_RANGE)
        assert session.booked_rooms() == set()

    def test_huge_number_reports_error(self):
        session = make_session()
        assert run_action(session, ACTION_BOOK, "1" * 5000) == ("error", MSG_COUNT_OUT_OF_RANGE)
        assert session.history == []

    def test_insufficient_warns(self):
        session = make_session()
        session.book_random(random.Random(0))
        while session.available_count():
            session.book(1)
        level, _ = run_action(session, ACTION_BOOK, "1")
        assert level == "warning"


class TestOtherActions:
    def test_random(self):
        session = make_session()
        level, message = run_action(session, ACTION_RANDOM, rng=random.Random(4))
        assert level == "success"
        assert message.startswith("Randomly booked")

    def test_reset(self):
        session = make_session()
        run_action(session, ACTION_BOOK, "3")
        assert run_action(session, ACTION_RESET) == ("info", "All bookings cleared")
        assert session.booked_rooms() == set()

    def test_no_action(self):
        assert run_action(make_session(), None) is None


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
