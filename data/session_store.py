"""Typed wrapper around st.session_state for the booking session."""

import streamlit as st

from engine.booking_session import BookingSession
from models.layout import HotelLayout
from data.layout_data import generate_layout_df
from data.loader import parse_layout


@st.cache_resource
def get_layout() -> HotelLayout:
    """Process-wide immutable layout, built once from the compiled-in table."""
    return parse_layout(generate_layout_df())


def initialize_session_state():
    """Initialize all session state keys with defaults."""
    defaults = {
        "booking_session": None,
        "last_message": None,
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default

    if st.session_state["booking_session"] is None:
        st.session_state["booking_session"] = BookingSession(get_layout())


# --- Getters ---

def get_booking_session() -> BookingSession:
    return st.session_state["booking_session"]


def get_last_message():
    return st.session_state.get("last_message")


# --- Setters ---

def set_last_message(level: str, text: str):
    st.session_state["last_message"] = (level, text)


def clear_last_message():
    st.session_state["last_message"] = None
