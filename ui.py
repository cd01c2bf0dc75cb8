# -*- coding: utf-8 -*-
"""
This module contains the UI components for the Streamlit application.
"""
import streamlit as st

from data_loader import normalize_district_key


def setup_page_config():
    """Sets the Streamlit page configuration."""
    st.set_page_config(
        page_title="Jammu & Kashmir - Water Status Dashboard",
        page_icon="💧",
        layout="wide",
    )


def display_header():
    """Displays the main title and the 'About' expander."""
    st.title("Jammu & Kashmir - Water Status Dashboard")
    st.markdown("An interactive map displaying district-wise Terrestrial Water Storage (TWS).")
    with st.expander("About Terrestrial Water Storage"):
        st.markdown(
            """
            - **TWS (Terrestrial Water Storage):** All water held on and below the land surface,
              including soil moisture, groundwater, snow, ice and surface water.
            - Values are yearly figures in **billion cubic meters (BCM)**.
            - Click a district on the map to chart its series.
            """
        )


def display_error(message):
    """Replaces the whole dashboard with the load error."""
    st.error(f"Error: {message}")


def display_download_button(frame, district_name):
    """
    Renders the download button in the sidebar.

    Args:
        frame (pd.DataFrame): The chart frame of the selected district.
        district_name (str): The selected district's display name.
    """
    if frame is not None and not frame.empty:
        st.sidebar.download_button(
            label="Download District Data (CSV)",
            data=frame.to_csv(index=False).encode("utf-8"),
            file_name=f"tws_{normalize_district_key(district_name).replace(' ', '_')}.csv",
            mime="text/csv",
            key="download_button",
        )
