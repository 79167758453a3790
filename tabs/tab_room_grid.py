"""Tab 1: Room Grid — every room coloured by booking status."""

import streamlit as st

from data.session_store import get_booking_session
from data.loader import bookings_to_df
from components.charts import room_grid


def render(sidebar_state):
    """Render the Room Grid tab."""
    st.header("Room Grid")

    session = get_booking_session()
    grid_df = bookings_to_df(session.layout, session.bookings)

    fig = room_grid(grid_df)
    st.plotly_chart(fig, use_container_width=True)
    st.caption("Rooms are laid out left to right in physical order on each floor.")
