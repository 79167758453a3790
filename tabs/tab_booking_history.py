"""Tab 3: Booking History — actions taken in this session."""

import streamlit as st

from data.session_store import get_booking_session
from data.loader import bookings_to_df
from components.tables import history_to_df, render_history_table
from config.defaults import STATUS_FREE


def render(sidebar_state):
    """Render the Booking History tab."""
    st.header("Booking History")

    session = get_booking_session()
    if not session.history:
        st.info("No bookings yet. Use the sidebar to book rooms.")
    else:
        render_history_table(history_to_df(session.history))

    st.divider()

    booked_df = bookings_to_df(session.layout, session.bookings)
    booked_df = booked_df[booked_df["Status"] != STATUS_FREE]
    st.download_button(
        "Download current bookings (CSV)",
        data=booked_df.to_csv(index=False).encode("utf-8"),
        file_name="bookings.csv",
        mime="text/csv",
        disabled=booked_df.empty,
        key="btn_download_bookings",
    )
