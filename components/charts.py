"""Plotly chart builders for the room grid and floor occupancy."""

import plotly.express as px
import plotly.graph_objects as go
import pandas as pd
from typing import List

from config.defaults import STATUS_FREE, STATUS_MANUAL, STATUS_RANDOM, STATUS_COLORS

_STATUS_CODES = {STATUS_FREE: 0, STATUS_MANUAL: 1, STATUS_RANDOM: 2}


def room_grid(grid_df: pd.DataFrame) -> go.Figure:
    """Heatmap with one row per floor (top floor on top), one cell per room."""
    floors = sorted(grid_df["Floor"].unique(), reverse=True)
    width = int(grid_df["Position"].max()) if not grid_df.empty else 0

    # Short floors leave trailing cells empty
    z, text = [], []
    for floor in floors:
        floor_rows = grid_df[grid_df["Floor"] == floor].set_index("Position")
        z_row, text_row = [], []
        for pos in range(1, width + 1):
            if pos in floor_rows.index:
                z_row.append(_STATUS_CODES[floor_rows.at[pos, "Status"]])
                text_row.append(str(floor_rows.at[pos, "Room"]))
            else:
                z_row.append(None)
                text_row.append("")
        z.append(z_row)
        text.append(text_row)

    colors = [STATUS_COLORS[STATUS_FREE], STATUS_COLORS[STATUS_MANUAL], STATUS_COLORS[STATUS_RANDOM]]
    fig = go.Figure(data=go.Heatmap(
        z=z,
        x=list(range(1, width + 1)),
        y=[f"Floor {f}" for f in floors],
        text=text,
        texttemplate="%{text}",
        colorscale=[
            [0.0, colors[0]], [0.33, colors[0]],
            [0.33, colors[1]], [0.66, colors[1]],
            [0.66, colors[2]], [1.0, colors[2]],
        ],
        zmin=0,
        zmax=2,
        showscale=False,
        xgap=3,
        ygap=3,
        hovertemplate="Room %{text}<extra></extra>",
    ))
    fig.update_layout(
        title="Room Grid",
        xaxis=dict(showticklabels=False, showgrid=False, zeroline=False),
        yaxis=dict(type="category", showgrid=False),
        height=max(400, len(floors) * 45),
        plot_bgcolor="white",
    )
    return fig


def floor_occupancy_bar(occupancy: List[dict]) -> go.Figure:
    """Stacked bar of manual / random / free rooms per floor."""
    df = pd.DataFrame(occupancy).sort_values("floor_number")
    df["floor"] = df["floor_number"].map(lambda f: f"Floor {f}")
    fig = px.bar(
        df, x="floor", y=["manual_rooms", "random_rooms", "free_rooms"],
        labels={"value": "Rooms", "floor": "Floor", "variable": ""},
        title="Occupancy by Floor",
        color_discrete_map={
            "manual_rooms": STATUS_COLORS[STATUS_MANUAL],
            "random_rooms": STATUS_COLORS[STATUS_RANDOM],
            "free_rooms": STATUS_COLORS[STATUS_FREE],
        },
    )
    fig.update_layout(legend_title_text="", height=400, barmode="stack")
    return fig


def occupancy_donut(booked: int, total: int, title: str = "Overall Occupancy") -> go.Figure:
    """Donut chart of booked vs free rooms."""
    fig = go.Figure(data=[go.Pie(
        labels=["Booked", "Free"],
        values=[booked, total - booked],
        hole=0.6,
        marker_colors=[STATUS_COLORS[STATUS_MANUAL], STATUS_COLORS[STATUS_FREE]],
        textinfo="percent+label",
    )])
    fig.update_layout(
        title=title,
        height=350,
        showlegend=True,
        annotations=[dict(text=f"{booked}/{total}", x=0.5, y=0.5, font_size=16, showarrow=False)],
    )
    return fig
