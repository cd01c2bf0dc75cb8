# config.py

"""
Central configuration file for the Jammu & Kashmir Water Status dashboard.
This file stores constants and settings to make the application more maintainable.
"""

import os
from typing import Dict, Final, List

from dotenv import load_dotenv

load_dotenv()

# Base address of the backend serving the TWS series and district boundaries
BACKEND_URL: Final[str] = os.getenv("TWS_BACKEND_URL", "http://localhost:8000").rstrip("/")

API_PATHS: Final[Dict[str, str]] = {
    "tws": "/api/tws",
    "boundaries": "/api/boundaries",
}

REQUEST_TIMEOUT_SECONDS: Final[float] = float(os.getenv("TWS_REQUEST_TIMEOUT", "30"))

# Logging
LOG_LEVEL: Final[str] = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE: Final[str] = os.getenv("LOG_FILE", "")
LOG_FORMAT: Final[str] = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[name]}:{function}:{line} - {message}"

# --- Map ---
MAP_CENTER: Final[List[float]] = [34.0836, 74.7973]
MAP_ZOOM: Final[int] = 7
MAP_HEIGHT: Final[int] = 600
TILE_URL: Final[str] = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
TILE_ATTRIBUTION: Final[str] = (
    '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors'
)
DISTRICT_PROPERTY: Final[str] = "DISTRICT"
UNKNOWN_DISTRICT: Final[str] = "Unknown"

# --- Chart ---
TWS_LABEL: Final[str] = "TWS (BCM)"
CHART_HEIGHT: Final[int] = 600
