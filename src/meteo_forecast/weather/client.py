"""HTTP client for the Open-Meteo forecast API."""

import logging

import httpx

from meteo_forecast.config import (
    OPEN_METEO_BASE_URL, FORECAST_TIMEZONE, REQUEST_TIMEOUT_SECONDS, USER_AGENT
)
from meteo_forecast.weather.coordinates import Coordinates

logger = logging.getLogger(__name__)

CURRENT_FIELDS = "temperature_2m"
DAILY_FIELDS = "temperature_2m_max,temperature_2m_min,weathercode"


def build_forecast_url(
    coordinates: Coordinates,
    base_url: str = OPEN_METEO_BASE_URL,
    timezone: str = FORECAST_TIMEZONE
) -> str:
    """Build the forecast request URL for a coordinate pair.

    Args:
        coordinates: Location to query
        base_url: Forecast endpoint
        timezone: Timezone the provider aligns daily values to

    Returns:
        Full GET URL including query string
    """
    return (
        f"{base_url}?latitude={coordinates.latitude}&longitude={coordinates.longitude}"
        f"&current={CURRENT_FIELDS}&daily={DAILY_FIELDS}&timezone={timezone}"
    )


class OpenMeteoClient:
    """Async client for fetching raw forecasts from Open-Meteo."""

    def __init__(
        self,
        base_url: str = OPEN_METEO_BASE_URL,
        timezone: str = FORECAST_TIMEZONE,
        user_agent: str = USER_AGENT,
        timeout: float = REQUEST_TIMEOUT_SECONDS
    ):
        """Initialize the forecast client.

        Args:
            base_url: Forecast endpoint
            timezone: Timezone passed to the provider
            user_agent: User-Agent header for API requests
            timeout: httpx timeout in seconds
        """
        self.base_url = base_url
        self.timezone = timezone
        self.client = httpx.AsyncClient(
            headers={"User-Agent": user_agent},
            timeout=timeout
        )

    async def get_forecast_json(self, coordinates: Coordinates) -> str:
        """Fetch the raw forecast body for given coordinates.

        Args:
            coordinates: Location to query

        Returns:
            Response body as text

        Raises:
            httpx.HTTPStatusError: If the API answers with a non-2xx status
            httpx.RequestError: If the request cannot be completed
        """
        url = build_forecast_url(coordinates, self.base_url, self.timezone)
        logger.info(f"Fetching forecast for lat={coordinates.latitude}, lon={coordinates.longitude}")

        try:
            response = await self.client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP error from Open-Meteo API: {e.response.status_code} - {e.response.text}")
            raise
        except httpx.RequestError as e:
            logger.error(f"Request error to Open-Meteo API: {e!r}")
            raise

        logger.info(f"Received {len(response.content)} bytes from Open-Meteo API")
        return response.text

    async def aclose(self):
        """Close the async HTTP client."""
        await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
