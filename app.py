"""Hotel Room Booking — Streamlit entry point."""

import streamlit as st
import sys
import os

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from components.sidebar import render_sidebar
from components.metrics_cards import render_message
from data.session_store import (
    initialize_session_state, get_booking_session,
    get_last_message, set_last_message, clear_last_message,
)
from engine.booking_actions import run_action
from tabs import (
    tab_room_grid,
    tab_floor_occupancy,
    tab_booking_history,
)
from utils.logger import configure_logging


def main():
    st.set_page_config(
        page_title="Hotel Room Booking",
        page_icon="🏨",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    configure_logging()
    initialize_session_state()
    session = get_booking_session()

    sidebar_state = render_sidebar(session.available_count(), session.layout.total_rooms)

    if sidebar_state.action:
        outcome = run_action(session, sidebar_state.action, sidebar_state.raw_count)
        if outcome:
            set_last_message(*outcome)
        else:
            clear_last_message()
        # Rerun so the sidebar counts reflect the new bookings
        st.rerun()

    message = get_last_message()
    if message:
        render_message(*message)

    tab1, tab2, tab3 = st.tabs([
        "🏨 Room Grid",
        "📊 Floor Occupancy",
        "📜 Booking History",
    ])

    with tab1:
        tab_room_grid.render(sidebar_state)
    with tab2:
        tab_floor_occupancy.render(sidebar_state)
    with tab3:
        tab_booking_history.render(sidebar_state)


if __name__ == "__main__":
    main()
