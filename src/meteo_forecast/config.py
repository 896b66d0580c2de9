"""Configuration settings for the Open-Meteo forecast service."""

import os
from typing import Dict, Final

from dotenv import load_dotenv

load_dotenv()

# Upstream API
OPEN_METEO_BASE_URL: Final[str] = os.getenv("OPEN_METEO_BASE_URL", "https://api.open-meteo.com/v1/forecast")
FORECAST_TIMEZONE: Final[str] = os.getenv("FORECAST_TIMEZONE", "America/Chicago")
USER_AGENT: Final[str] = "MeteoForecastService/0.1 (user@example.com)"

# Deadline for a single upstream call, in seconds
REQUEST_TIMEOUT_SECONDS: float = float(os.getenv("REQUEST_TIMEOUT_SECONDS", "5"))

# Sample locations (lat,long)
SAMPLE_LOCATIONS: Final[Dict[str, str]] = {
    "New York": "40.741895,-73.989308",
    "Chicago": "41.8755616,-87.624421",
    "Houston": "29.7589382,-95.3676974",
}

# Server configuration
HOST: str = os.getenv("HOST", "0.0.0.0")
PORT: int = int(os.getenv("PORT", "8000"))
DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

# Rate limiting configuration
REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379")
RATE_LIMIT_REQUESTS_PER_SECOND: int = int(os.getenv("RATE_LIMIT_REQUESTS_PER_SECOND", "20"))
RATE_LIMIT_REDIS_KEY_PREFIX: str = os.getenv("RATE_LIMIT_REDIS_KEY_PREFIX", "rate_limit")
RATE_LIMIT_ENABLED: bool = os.getenv("RATE_LIMIT_ENABLED", "true").lower() == "true"
