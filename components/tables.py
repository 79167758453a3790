"""Styled dataframe display helpers."""

import streamlit as st
import pandas as pd
from typing import List

from models.booking import BookingEvent


def history_to_df(events: List[BookingEvent]) -> pd.DataFrame:
    """Newest-first table of booking events."""
    rows = [{
        "Time": e.timestamp.strftime("%H:%M:%S"),
        "Action": e.action.capitalize(),
        "Requested": str(e.requested_count) if e.requested_count is not None else "",
        "Rooms": ", ".join(str(r) for r in e.rooms) if e.rooms else "—",
        "Outcome": e.outcome,
    } for e in reversed(events)]
    return pd.DataFrame(rows, columns=["Time", "Action", "Requested", "Rooms", "Outcome"])


def color_outcome(val):
    if val == "insufficient":
        return "background-color: #fff3cd; color: #856404; font-weight: bold"
    elif val == "cleared":
        return "color: #6c757d"
    return ""


def style_history(df: pd.DataFrame, outcome_column: str = "Outcome"):
    """Styler with failed requests highlighted."""
    return df.style.map(color_outcome, subset=[outcome_column])


def render_history_table(df: pd.DataFrame, outcome_column: str = "Outcome"):
    """Render the history table with failed requests highlighted."""
    if outcome_column in df.columns and not df.empty:
        styled = style_history(df, outcome_column)
        st.dataframe(styled, use_container_width=True)
    else:
        st.dataframe(df, use_container_width=True)
