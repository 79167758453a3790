"""KPI metric cards and status messages."""

import streamlit as st


def render_metric_row(metrics: list[dict]):
    """Render a row of metric cards, each a dict with label, value and optional help."""
    cols = st.columns(len(metrics))
    for col, m in zip(cols, metrics):
        with col:
            st.metric(label=m["label"], value=m["value"], help=m.get("help"))


def render_message(level: str, text: str):
    """Show the outcome of the last action."""
    if level == "error":
        st.error(text, icon="🔴")
    elif level == "warning":
        st.warning(text, icon="🟡")
    elif level == "success":
        st.success(text)
    else:
        st.info(text, icon="🔵")
