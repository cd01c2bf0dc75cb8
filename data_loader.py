from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Dict, Literal, Optional

import geopandas as gpd
import requests

from config import API_PATHS, BACKEND_URL, REQUEST_TIMEOUT_SECONDS
from logger import get_logger

log = get_logger(__name__)

WaterSeries = Dict[str, float]
TwsDataset = Dict[str, WaterSeries]


class DataLoadError(Exception):
    """Raised when either dashboard resource cannot be downloaded or parsed."""


@dataclass(frozen=True)
class LoadState:
    """Outcome of the one-off dashboard data load."""
    status: Literal["loading", "error", "ready"] = "loading"
    tws: TwsDataset = field(default_factory=dict)
    boundaries: Optional[Dict[str, Any]] = None
    error: Optional[str] = None

    @classmethod
    def failed(cls, message: str) -> "LoadState":
        return cls(status="error", error=message)

    @classmethod
    def ready(cls, tws: TwsDataset, boundaries: Dict[str, Any]) -> "LoadState":
        return cls(status="ready", tws=tws, boundaries=boundaries)


def normalize_district_key(name: str) -> str:
    """Reduces a district display name to its lookup key."""
    return name.strip().lower()


def to_tws_lookup(payload: Any) -> TwsDataset:
    """
    Turns the /api/tws body into a district-keyed mapping.

    A mapping is used as-is. The older list form, records shaped like
    {"district": "Badgam", "data": {"2010": 1.2}}, is keyed by the
    normalized district name.
    """
    if isinstance(payload, dict):
        return payload
    if isinstance(payload, list):
        lookup: TwsDataset = {}
        for record in payload:
            try:
                lookup[normalize_district_key(record["district"])] = record["data"]
            except (KeyError, TypeError, AttributeError) as e:
                raise DataLoadError(f"Malformed TWS record: {record!r}") from e
        return lookup
    raise DataLoadError(f"Unexpected TWS payload of type {type(payload).__name__}.")


def validate_boundaries(payload: Any) -> Dict[str, Any]:
    """Checks the /api/boundaries body is a readable FeatureCollection and returns it unchanged."""
    if not isinstance(payload, dict) or payload.get("type") != "FeatureCollection":
        raise DataLoadError("District boundaries are not a GeoJSON FeatureCollection.")
    try:
        gpd.GeoDataFrame.from_features(payload["features"])
    except Exception as e:
        raise DataLoadError(f"District boundaries could not be parsed: {e}") from e
    return payload


def _fetch_json(name: str, url: str, timeout: float) -> Any:
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        return response.json()
    except requests.exceptions.HTTPError as e:
        raise DataLoadError(f"Failed to download {name} data: Server error ({e.response.status_code}).") from e
    except ValueError as e:
        # requests' JSONDecodeError is also a RequestException
        raise DataLoadError(f"Failed to parse {name} data: {e}") from e
    except requests.exceptions.RequestException as e:
        raise DataLoadError(f"Failed to download {name} data: {e}") from e


def fetch_dashboard_data(
    base_url: str = BACKEND_URL,
    timeout: float = REQUEST_TIMEOUT_SECONDS,
) -> LoadState:
    """
    Downloads the TWS series and the district boundaries concurrently.

    Both requests must succeed; any failure yields an error state carrying a
    readable message and nothing else. This function never raises.
    """
    base_url = base_url.rstrip("/")
    log.info(f"Loading dashboard data from {base_url}")

    try:
        with ThreadPoolExecutor(max_workers=len(API_PATHS)) as executor:
            futures = {
                name: executor.submit(_fetch_json, name, base_url + path, timeout)
                for name, path in API_PATHS.items()
            }
            payloads = {name: future.result() for name, future in futures.items()}

        tws = to_tws_lookup(payloads["tws"])
        boundaries = validate_boundaries(payloads["boundaries"])
    except DataLoadError as e:
        log.error(f"Dashboard data load failed: {e}")
        return LoadState.failed(str(e))

    log.info(f"Loaded TWS series for {len(tws)} districts and {len(boundaries['features'])} boundary features")
    return LoadState.ready(tws, boundaries)


def lookup_district_series(tws: TwsDataset, selected_district: Optional[str]) -> Optional[WaterSeries]:
    """Returns the series for the selected district, or None if nothing matches."""
    if not selected_district:
        return None
    return tws.get(normalize_district_key(selected_district))
