"""API endpoints for the forecast service."""

import asyncio
import logging
from typing import AsyncGenerator, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from meteo_forecast.config import (
    OPEN_METEO_BASE_URL, FORECAST_TIMEZONE, REQUEST_TIMEOUT_SECONDS, SAMPLE_LOCATIONS
)
from meteo_forecast.weather.models import WeatherForecast
from meteo_forecast.weather.result import Err
from meteo_forecast.weather.service import WeatherService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/weatherforecast", tags=["weather"])


async def get_weather_service() -> AsyncGenerator[WeatherService, None]:
    """Dependency providing a per-request weather service."""
    async with WeatherService() as weather_service:
        yield weather_service


@router.get("", response_model=WeatherForecast)
async def get_weather_forecast(
    location: Optional[str] = Query(
        None,
        description="Coordinates as 'lat,lon', e.g. 41.8755616,-87.624421"
    ),
    weather_service: WeatherService = Depends(get_weather_service)
) -> WeatherForecast:
    """Get current temperature and daily forecast for a location.

    Args:
        location: Text containing a latitude/longitude pair

    Returns:
        WeatherForecast in Celsius and Fahrenheit

    Raises:
        HTTPException: 400 if the location is invalid or the upstream call fails
    """
    deadline = asyncio.get_running_loop().time() + REQUEST_TIMEOUT_SECONDS
    result = await weather_service.get_forecast(location or "", deadline=deadline)

    if isinstance(result, Err):
        logger.error(f"Error {result.message} retrieving forecast for {location}")
        raise HTTPException(status_code=400, detail=result.message)

    logger.info(f"Successfully retrieved forecast for {location}")
    return result.value


@router.get("/health")
async def health_check() -> dict:
    """Health check endpoint."""
    return {"status": "healthy", "service": "meteo-forecast"}


@router.get("/info")
async def get_service_info() -> dict:
    """Get service information.

    Returns:
        Upstream source, forecast timezone and sample locations
    """
    return {
        "service": "Open-Meteo Weather Forecast Service",
        "version": "0.1.0",
        "data_source": OPEN_METEO_BASE_URL,
        "timezone": FORECAST_TIMEZONE,
        "request_timeout_seconds": REQUEST_TIMEOUT_SECONDS,
        "sample_locations": SAMPLE_LOCATIONS
    }
