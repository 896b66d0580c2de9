"""Data models for the forecast service."""

import datetime
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class DailyForecast(BaseModel):
    """Forecast for a single day."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    date: datetime.date = Field(..., description="Calendar date in the forecast timezone")
    temperature_min_c: int = Field(..., alias="temperatureMinC", description="Minimum temperature in Celsius")
    temperature_min_f: int = Field(..., alias="temperatureMinF", description="Minimum temperature in Fahrenheit")
    temperature_max_c: int = Field(..., alias="temperatureMaxC", description="Maximum temperature in Celsius")
    temperature_max_f: int = Field(..., alias="temperatureMaxF", description="Maximum temperature in Fahrenheit")
    summary: str = Field(..., description="Sky/precipitation summary, empty when unknown")


class WeatherForecast(BaseModel):
    """Weather forecast response model."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    temperature_current_c: int = Field(..., alias="temperatureCurrentC", description="Current temperature in Celsius")
    temperature_current_f: int = Field(..., alias="temperatureCurrentF", description="Current temperature in Fahrenheit")
    daily_forecast: List[DailyForecast] = Field(
        ...,
        alias="dailyForecast",
        description="Daily forecasts in provider order, today first"
    )


class OpenMeteoCurrent(BaseModel):
    """Raw ``current`` block from Open-Meteo."""
    time: Optional[str] = Field(None, description="Local ISO timestamp of the observation")
    temperature_2m: float = Field(..., description="Air temperature at 2m in Celsius")


class OpenMeteoDaily(BaseModel):
    """Raw ``daily`` block from Open-Meteo, parallel arrays indexed by day."""
    time: List[str] = Field(..., description="ISO dates")
    temperature_2m_max: List[float] = Field(..., description="Daily maximum in Celsius")
    temperature_2m_min: List[float] = Field(..., description="Daily minimum in Celsius")
    weathercode: List[int] = Field(
        ...,
        validation_alias=AliasChoices("weathercode", "weather_code"),
        description="WMO weather codes"
    )


class OpenMeteoResponse(BaseModel):
    """Partial response from the Open-Meteo forecast API."""
    current: OpenMeteoCurrent
    daily: OpenMeteoDaily
