# -*- coding: utf-8 -*-
import math

import pandas as pd
import pandera as pa
import plotly.graph_objects as go
import pytest

from plotting import build_chart_frame, chart_placeholder_message, plot_tws_series


def test_placeholder_without_selection():
    assert chart_placeholder_message(None, None) == "Click a district on the map to view its water status data."


def test_placeholder_for_missing_or_empty_series():
    expected = "No TWS data is available for Srinagar."
    assert chart_placeholder_message(None, "Srinagar") == expected
    assert chart_placeholder_message({}, "Srinagar") == expected


def test_no_placeholder_when_series_has_entries():
    assert chart_placeholder_message({"2010": 1.2}, "Badgam") is None


def test_build_chart_frame_keeps_entry_order():
    frame = build_chart_frame({"2012": 0.9, 2010: 1, "2011": None})

    assert list(frame.columns) == ["year", "TWS (BCM)"]
    assert frame["year"].tolist() == ["2012", "2010", "2011"]
    assert frame["TWS (BCM)"].iloc[1] == 1.0
    assert math.isnan(frame["TWS (BCM)"].iloc[2])
    assert pd.api.types.is_float_dtype(frame["TWS (BCM)"])


def test_build_chart_frame_rejects_non_numeric_values():
    with pytest.raises((pa.errors.SchemaError, pa.errors.SchemaErrors)):
        build_chart_frame({"2010": "n/a"})


def test_plot_tws_series_badgam_scenario():
    frame = build_chart_frame({"2010": 1.2, "2011": 1.5})
    fig = plot_tws_series(frame, "Badgam")

    assert isinstance(fig, go.Figure)
    assert len(fig.data) == 1
    trace = fig.data[0]
    assert list(trace.x) == ["2010", "2011"]
    assert list(trace.y) == [1.2, 1.5]
    assert trace.name == "TWS (BCM)"
    assert "markers" in trace.mode
    assert fig.layout.showlegend is True
    assert fig.layout.xaxis.type == "category"
    assert fig.layout.xaxis.title.text == "Year"
    assert fig.layout.yaxis.title.text == "TWS (BCM)"


def test_plot_tws_series_hover_shows_exact_values():
    frame = build_chart_frame({"2010": 1.2345, "2011": 1.56789})
    trace = plot_tws_series(frame, "Badgam").data[0]

    assert trace.hovertemplate == "%{y}"
    assert list(trace.y) == [1.2345, 1.56789]
