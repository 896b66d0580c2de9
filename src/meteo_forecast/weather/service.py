"""Weather service orchestrating location parsing, fetching and translation."""

import asyncio
import logging
from typing import Optional, Protocol, Union

import httpx

from meteo_forecast.config import REQUEST_TIMEOUT_SECONDS
from meteo_forecast.weather.client import OpenMeteoClient
from meteo_forecast.weather.coordinates import Coordinates, parse_coordinates
from meteo_forecast.weather.models import WeatherForecast
from meteo_forecast.weather.result import Err, Ok, Result
from meteo_forecast.weather.translator import ForecastParseError, translate

logger = logging.getLogger(__name__)

INVALID_LOCATION_MESSAGE = "Invalid location."
API_ERROR_PREFIX = "Error calling the API: "

ForecastResult = Result[WeatherForecast]


class ForecastProvider(Protocol):
    """Network side of a forecast fetch."""

    async def get_forecast_json(self, coordinates: Coordinates) -> str:
        ...


class WeatherService:
    """Service turning a location into a forecast result."""

    def __init__(
        self,
        client: Optional[ForecastProvider] = None,
        timeout: float = REQUEST_TIMEOUT_SECONDS
    ):
        """Initialize the weather service.

        Args:
            client: Forecast provider (creates an OpenMeteoClient if None)
            timeout: Seconds allowed for the upstream call when no deadline is given
        """
        self.client = client or OpenMeteoClient()
        self.timeout = timeout

    async def get_forecast(
        self,
        location: Union[str, Coordinates],
        deadline: Optional[float] = None
    ) -> ForecastResult:
        """Get the forecast for a raw location string or parsed coordinates.

        Args:
            location: Text containing a ``lat,lon`` pair, or Coordinates
            deadline: Absolute event loop time after which the upstream call is cancelled

        Returns:
            Ok with the forecast, or Err with a client-facing message
        """
        if isinstance(location, Coordinates):
            coordinates = location
        else:
            coordinates = parse_coordinates(location)
            if coordinates is None:
                logger.warning(f"No coordinates found in location '{location}'")
                return Err(INVALID_LOCATION_MESSAGE)

        return await self.fetch_forecast(coordinates, deadline)

    async def fetch_forecast(
        self,
        coordinates: Coordinates,
        deadline: Optional[float] = None
    ) -> ForecastResult:
        """Call the provider once and translate its payload.

        Every failure is returned as Err; there are no retries.
        """
        if deadline is None:
            deadline = asyncio.get_running_loop().time() + self.timeout

        try:
            async with asyncio.timeout_at(deadline):
                payload = await self.client.get_forecast_json(coordinates)
            forecast = translate(payload)

        except TimeoutError:
            logger.error(f"Forecast request for {coordinates} cancelled at deadline")
            return Err(f"{API_ERROR_PREFIX}The request was cancelled after exceeding its deadline.")

        except httpx.HTTPStatusError as e:
            response = e.response
            return Err(f"{API_ERROR_PREFIX}Upstream returned {response.status_code} {response.reason_phrase}.")

        except httpx.HTTPError as e:
            return Err(f"{API_ERROR_PREFIX}{_describe(e)}")

        except ForecastParseError as e:
            logger.error(f"Could not parse forecast for {coordinates}: {e}")
            return Err(f"{API_ERROR_PREFIX}{e}")

        except Exception as e:
            logger.exception(f"Unexpected error getting forecast for {coordinates}")
            return Err(f"{API_ERROR_PREFIX}{_describe(e)}")

        logger.info(f"Translated forecast with {len(forecast.daily_forecast)} days")
        return Ok(forecast)

    async def aclose(self):
        """Close the provider if it holds a connection pool."""
        aclose = getattr(self.client, "aclose", None)
        if aclose is not None:
            try:
                await aclose()
            except Exception as e:
                logger.error(f"Error closing forecast client: {e}")

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()


def _describe(error: Exception) -> str:
    return str(error) or type(error).__name__
