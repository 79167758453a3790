"""Sidebar booking controls."""

import streamlit as st
from dataclasses import dataclass
from typing import Optional

from engine.booking_actions import ACTION_BOOK, ACTION_RANDOM, ACTION_RESET
from config.defaults import MIN_ROOMS_PER_REQUEST, MAX_ROOMS_PER_REQUEST, STATUS_COLORS


@dataclass
class SidebarState:
    action: Optional[str]
    raw_count: str


def render_sidebar(available_rooms: int, total_rooms: int) -> SidebarState:
    """Render the booking controls and return the clicked action, if any."""
    action = None
    with st.sidebar:
        st.title("Hotel Room Booking")
        st.divider()

        raw_count = st.text_input(
            f"Number of rooms ({MIN_ROOMS_PER_REQUEST}-{MAX_ROOMS_PER_REQUEST})",
            value="",
            max_chars=len(str(MAX_ROOMS_PER_REQUEST)) + 2,
            key="sidebar_room_count",
        )

        col1, col2, col3 = st.columns(3)
        if col1.button("Book", type="primary", key="btn_book"):
            action = ACTION_BOOK
        if col2.button("Random", key="btn_random"):
            action = ACTION_RANDOM
        if col3.button("Reset", key="btn_reset"):
            action = ACTION_RESET

        st.divider()
        st.caption(f"Free rooms: {available_rooms} / {total_rooms}")
        for status, color in STATUS_COLORS.items():
            st.markdown(
                f"<span style='color:{color}'>&#9632;</span> {status.capitalize()}",
                unsafe_allow_html=True,
            )

    return SidebarState(action=action, raw_count=raw_count)
