# -*- coding: utf-8 -*-
import streamlit as st

# --- Custom Modules ---
from data_loader import LoadState, fetch_dashboard_data, lookup_district_series, normalize_district_key
from logger import get_logger
from map_view import render_district_map
from plotting import display_district_chart
from ui import setup_page_config, display_header, display_error, display_download_button

log = get_logger(__name__)


def load_dashboard_state() -> LoadState:
    """Runs the data load once per session; later reruns reuse the stored result."""
    state = st.session_state.get("load_state", LoadState())
    if state.status == "loading":
        with st.spinner("Loading Dashboard..."):
            state = fetch_dashboard_data()
        st.session_state["load_state"] = state
    return state


def main() -> None:
    """Main function to run the Streamlit application."""
    setup_page_config()

    state = load_dashboard_state()
    if state.status == "error":
        display_error(state.error)
        st.stop()

    display_header()
    handle_dashboard_view(state)


def handle_dashboard_view(state: LoadState) -> None:
    """Handles the map pane and the selected district's chart pane."""
    map_col, chart_col = st.columns([3, 2], gap="large")

    with map_col:
        clicked_district = render_district_map(state.boundaries)
    if clicked_district is not None and clicked_district != st.session_state.get("selected_district"):
        st.session_state["selected_district"] = clicked_district
        log_selection(state, clicked_district)

    selected_district = st.session_state.get("selected_district")
    series = lookup_district_series(state.tws, selected_district)

    with chart_col:
        st.subheader(selected_district or "No District Selected")
        frame = display_district_chart(series, selected_district)

    if selected_district:
        display_download_button(frame, selected_district)


def log_selection(state: LoadState, district_name: str) -> None:
    district_key = normalize_district_key(district_name)
    found = district_key in state.tws
    log.info(f'Map clicked on "{district_name}" (lookup key "{district_key}")')
    if not found:
        log.warning(f'No TWS data found for key "{district_key}"')
    log.debug(f"Available keys in TWS data: {sorted(state.tws)}")


if __name__ == "__main__":
    main()
