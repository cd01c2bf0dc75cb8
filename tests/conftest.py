# -*- coding: utf-8 -*-
from unittest.mock import MagicMock

import pytest
import requests


def make_response(payload, status_code=200):
    mock_response = MagicMock()
    mock_response.status_code = status_code
    mock_response.json.return_value = payload
    if status_code >= 400:
        mock_response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status_code} Error", response=mock_response
        )
    else:
        mock_response.raise_for_status = MagicMock()
    return mock_response


def district_feature(name=None):
    properties = {} if name is None else {"DISTRICT": name}
    return {
        "type": "Feature",
        "properties": properties,
        "geometry": {
            "type": "Polygon",
            "coordinates": [[[74.5, 33.9], [74.9, 33.9], [74.9, 34.2], [74.5, 34.2], [74.5, 33.9]]],
        },
    }


@pytest.fixture
def sample_boundaries():
    return {"type": "FeatureCollection", "features": [district_feature("Badgam")]}


@pytest.fixture
def sample_tws():
    return {"badgam": {"2010": 1.2, "2011": 1.5}}


@pytest.fixture
def mock_backend():
    """Builds a requests.get side effect serving the two dashboard endpoints."""
    def _backend(tws_payload, boundaries_payload, tws_status=200, boundaries_status=200):
        def _get(url, timeout=None):
            if url.endswith("/api/tws"):
                return make_response(tws_payload, tws_status)
            if url.endswith("/api/boundaries"):
                return make_response(boundaries_payload, boundaries_status)
            raise AssertionError(f"Unexpected URL {url}")
        return _get
    return _backend
