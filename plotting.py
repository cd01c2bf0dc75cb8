from typing import Mapping, Optional

import pandas as pd
import pandera as pa
import plotly.graph_objects as go
import streamlit as st

from config import CHART_HEIGHT, TWS_LABEL
from logger import get_logger
from schemas import TwsChartSchema

log = get_logger(__name__)


def chart_placeholder_message(series: Optional[Mapping], district_name: Optional[str]) -> Optional[str]:
    """Text shown instead of the chart, or None when there is something to plot."""
    if series:
        return None
    if district_name:
        return f"No TWS data is available for {district_name}."
    return "Click a district on the map to view its water status data."


def build_chart_frame(series: Mapping) -> pd.DataFrame:
    """One row per year in the order the series lists them; nothing is dropped."""
    frame = pd.DataFrame(
        {
            "year": [str(year) for year in series.keys()],
            TWS_LABEL: list(series.values()),
        }
    )
    return TwsChartSchema.validate(frame)


def plot_tws_series(frame: pd.DataFrame, district_name: str) -> go.Figure:
    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=frame["year"],
            y=frame[TWS_LABEL],
            mode="lines+markers",
            name=TWS_LABEL,
            line=dict(color="blue", width=2, shape="linear"),
            marker=dict(size=5, color="blue"),
            hovertemplate="%{y}",
        )
    )
    fig.update_layout(
        title=f"{district_name} Terrestrial Water Storage",
        xaxis=dict(title="Year", type="category", showgrid=True, griddash="dash"),
        yaxis=dict(title=TWS_LABEL, showgrid=True, griddash="dash"),
        hovermode="x unified",
        showlegend=True,
        legend=dict(orientation="h", y=-0.2),
        template="plotly_white",
        font=dict(size=12),
        height=CHART_HEIGHT,
        margin=dict(t=40, r=30, l=0, b=5),
    )
    return fig


def display_district_chart(series: Optional[Mapping], district_name: Optional[str]) -> Optional[pd.DataFrame]:
    """
    Renders the TWS line chart for the selected district, or a one-line
    message when no district is selected or it has no data.

    Returns the plotted frame, or None when nothing was plotted.
    """
    message = chart_placeholder_message(series, district_name)
    if message is not None:
        st.info(message)
        return None

    try:
        frame = build_chart_frame(series)
    except (pa.errors.SchemaError, pa.errors.SchemaErrors) as e:
        log.error(f"TWS series for {district_name} failed validation: {e}")
        st.error(f"The TWS data for {district_name} could not be charted. Error: {e}")
        return None

    fig = plot_tws_series(frame, district_name)
    st.plotly_chart(fig, use_container_width=True)
    return frame
