"""Tab 2: Floor Occupancy — booked and free rooms per floor."""

import streamlit as st
import pandas as pd

from data.session_store import get_booking_session
from data.loader import floor_occupancy
from components.charts import floor_occupancy_bar, occupancy_donut
from components.metrics_cards import render_metric_row
from models.booking import BookingType


def render(sidebar_state):
    """Render the Floor Occupancy tab."""
    st.header("Floor Occupancy")

    session = get_booking_session()
    layout = session.layout
    manual = session.count_by_type(BookingType.MANUAL)
    random_ = session.count_by_type(BookingType.RANDOM)

    render_metric_row([
        {"label": "Total Rooms", "value": layout.total_rooms},
        {"label": "Booked (manual)", "value": manual},
        {"label": "Booked (random)", "value": random_},
        {"label": "Free", "value": session.available_count()},
    ])

    occupancy = floor_occupancy(layout, session.bookings)

    col1, col2 = st.columns([3, 2])
    with col1:
        st.plotly_chart(floor_occupancy_bar(occupancy), use_container_width=True)
    with col2:
        st.plotly_chart(
            occupancy_donut(manual + random_, layout.total_rooms),
            use_container_width=True,
        )

    st.subheader("Floor Detail")
    detail_rows = [{
        "Floor": o["floor_number"],
        "Rooms": o["total_rooms"],
        "Manual": o["manual_rooms"],
        "Random": o["random_rooms"],
        "Free": o["free_rooms"],
        "Occupancy": f"{o['occupancy_pct']:.0%}",
    } for o in occupancy]
    st.dataframe(pd.DataFrame(detail_rows), use_container_width=True, hide_index=True)
