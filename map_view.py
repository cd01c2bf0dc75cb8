import copy
from typing import Any, Dict, Optional

import folium
from folium.features import GeoJson, GeoJsonTooltip
from streamlit_folium import st_folium

from config import (
    DISTRICT_PROPERTY,
    MAP_CENTER,
    MAP_HEIGHT,
    MAP_ZOOM,
    TILE_ATTRIBUTION,
    TILE_URL,
    UNKNOWN_DISTRICT,
)

# --- Constants ---
BOUNDARY_COLOR = "#60a5fa"
HIGHLIGHT_COLOR = "#3b82f6"

# --- Helper Functions ---

def district_label(feature: Dict[str, Any]) -> str:
    """Display name of a boundary feature, or "Unknown" when it carries none."""
    properties = feature.get("properties") or {}
    return str(properties.get(DISTRICT_PROPERTY) or UNKNOWN_DISTRICT)


def label_features(geojson: Dict[str, Any]) -> Dict[str, Any]:
    """
    Returns a copy of the boundary collection in which every feature has a
    DISTRICT property, so the tooltip and click handling never miss a field.
    """
    labelled = copy.deepcopy(geojson)
    for feature in labelled.get("features", []):
        feature["properties"] = dict(feature.get("properties") or {})
        feature["properties"][DISTRICT_PROPERTY] = district_label(feature)
    return labelled


def style_function(feature: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "color": BOUNDARY_COLOR,
        "weight": 1,
        "opacity": 0.8,
        "fillColor": BOUNDARY_COLOR,
        "fillOpacity": 0.2,
    }


def highlight_function(feature: Dict[str, Any]) -> Dict[str, Any]:
    return {"color": HIGHLIGHT_COLOR, "weight": 3}

# --- Main Map Creation Function ---

def create_district_map(geojson: Optional[Dict[str, Any]]) -> folium.Map:
    """
    Builds the base map and, once boundaries are loaded, the district layer.

    Args:
        geojson: The district FeatureCollection, or None if not loaded yet.

    Returns:
        The folium map ready to be handed to st_folium.
    """
    m = folium.Map(
        location=MAP_CENTER,
        zoom_start=MAP_ZOOM,
        tiles=TILE_URL,
        attr=TILE_ATTRIBUTION,
        scrollWheelZoom=False,
    )
    if geojson is None:
        return m

    tooltip = GeoJsonTooltip(
        fields=[DISTRICT_PROPERTY],
        labels=False,
        sticky=False,
        direction="center",
    )
    GeoJson(
        label_features(geojson),
        style_function=style_function,
        highlight_function=highlight_function,
        tooltip=tooltip,
        name="districts",
    ).add_to(m)
    return m


def extract_clicked_district(map_output: Optional[Dict[str, Any]]) -> Optional[str]:
    """Reads the clicked district's name from the st_folium return value."""
    if not map_output:
        return None
    clicked_feature = map_output.get("last_active_drawing")
    if not clicked_feature:
        return None
    return district_label(clicked_feature)


def render_district_map(geojson: Optional[Dict[str, Any]]) -> Optional[str]:
    """Displays the district map and returns the name of the last clicked district."""
    m = create_district_map(geojson)
    map_output = st_folium(
        m,
        use_container_width=True,
        height=MAP_HEIGHT,
        returned_objects=["last_active_drawing"],
        key="district_map",
    )
    return extract_clicked_district(map_output)
