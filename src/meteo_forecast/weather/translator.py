"""Translation of Open-Meteo payloads into forecast models."""

import logging
from datetime import date, datetime
from typing import Dict, List, Union

from pydantic import ValidationError

from meteo_forecast.weather.models import (
    DailyForecast, OpenMeteoDaily, OpenMeteoResponse, WeatherForecast
)

logger = logging.getLogger(__name__)

WEATHER_CODE_SUMMARIES: Dict[int, str] = {
    0: "Clear",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    **dict.fromkeys((45, 48), "Fog"),
    **dict.fromkeys((51, 53, 55), "Drizzle"),
    **dict.fromkeys((56, 57), "Freezing drizzle"),
    **dict.fromkeys((61, 63, 65, 80, 81, 82), "Rain"),
    **dict.fromkeys((66, 67), "Freezing rain"),
    **dict.fromkeys((71, 73, 75, 77, 85, 86), "Snow"),
}


class ForecastParseError(ValueError):
    """Raised when an upstream payload does not have the expected shape."""
    pass


def celsius_to_fahrenheit(celsius: float) -> float:
    return celsius * 9 / 5 + 32


def code_to_summary(code: int) -> str:
    """Map a WMO weather code to a label, empty string when unknown."""
    return WEATHER_CODE_SUMMARIES.get(code, "")


def translate(raw_json: Union[str, bytes]) -> WeatherForecast:
    """Convert a raw Open-Meteo JSON body into a WeatherForecast.

    The daily arrays are zipped by position; they are expected to have
    equal length and any surplus entries are dropped.

    Temperatures are truncated toward zero, after conversion for
    Fahrenheit values.

    Args:
        raw_json: Response body from the forecast endpoint

    Returns:
        WeatherForecast with current temperature and one entry per day

    Raises:
        ForecastParseError: If the body is not JSON of the expected shape
    """
    try:
        payload = OpenMeteoResponse.model_validate_json(raw_json)
    except ValidationError as e:
        logger.error(f"Invalid forecast payload: {e}")
        first_error = e.errors()[0]
        field = ".".join(str(part) for part in first_error["loc"]) or "body"
        raise ForecastParseError(f"Invalid forecast payload at '{field}': {first_error['msg']}") from e

    current_temperature = payload.current.temperature_2m

    return WeatherForecast(
        temperature_current_c=int(current_temperature),
        temperature_current_f=int(celsius_to_fahrenheit(current_temperature)),
        daily_forecast=_daily_forecasts(payload.daily)
    )


def _daily_forecasts(daily: OpenMeteoDaily) -> List[DailyForecast]:
    forecasts = []
    for timestamp, minimum, maximum, code in zip(
        daily.time, daily.temperature_2m_min, daily.temperature_2m_max, daily.weathercode
    ):
        forecasts.append(
            DailyForecast(
                date=_calendar_date(timestamp),
                temperature_min_c=int(minimum),
                temperature_min_f=int(celsius_to_fahrenheit(minimum)),
                temperature_max_c=int(maximum),
                temperature_max_f=int(celsius_to_fahrenheit(maximum)),
                summary=code_to_summary(code)
            )
        )

    logger.debug(f"Translated {len(forecasts)} daily forecasts")
    return forecasts


def _calendar_date(timestamp: str) -> date:
    """Date portion of an ISO date or datetime string."""
    try:
        return datetime.fromisoformat(timestamp).date()
    except ValueError as e:
        raise ForecastParseError(f"Invalid forecast date '{timestamp}'") from e
