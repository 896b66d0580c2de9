"""Shared test fixtures."""

import json
import os
from typing import List, Optional

# Rate limiting needs Redis; keep it off before the app is imported.
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest

from meteo_forecast.weather.coordinates import Coordinates


class StubProvider:
    """ForecastProvider double returning a fixed body or raising."""

    def __init__(self, body: Optional[str] = None, error: Optional[Exception] = None):
        self.body = body
        self.error = error
        self.calls: List[Coordinates] = []

    async def get_forecast_json(self, coordinates: Coordinates) -> str:
        self.calls.append(coordinates)
        if self.error is not None:
            raise self.error
        return self.body


@pytest.fixture
def chicago_payload() -> dict:
    """Open-Meteo response for Chicago, trimmed to the requested fields."""
    return {
        "latitude": 41.875,
        "longitude": -87.625,
        "timezone": "America/Chicago",
        "current": {"time": "2024-05-06T09:45", "interval": 900, "temperature_2m": 7.2},
        "daily": {
            "time": ["2024-05-06", "2024-05-07", "2024-05-08"],
            "temperature_2m_max": [12.8, 17.3, 17.9],
            "temperature_2m_min": [3.3, 3.6, 9.1],
            "weathercode": [3, 53, 0],
        },
    }


@pytest.fixture
def chicago_json(chicago_payload: dict) -> str:
    return json.dumps(chicago_payload)


@pytest.fixture
def chicago() -> Coordinates:
    return Coordinates(latitude=41.8755616, longitude=-87.624421)


@pytest.fixture
def stub_provider(chicago_json: str) -> StubProvider:
    return StubProvider(body=chicago_json)
