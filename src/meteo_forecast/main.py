"""Main FastAPI application for the Open-Meteo forecast service."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from meteo_forecast.api.endpoints import router as weather_router
from meteo_forecast.config import (
    HOST, PORT, DEBUG, FORECAST_TIMEZONE, OPEN_METEO_BASE_URL,
    RATE_LIMIT_ENABLED, RATE_LIMIT_REQUESTS_PER_SECOND
)
from meteo_forecast.logging_config import configure_logging
from meteo_forecast.middleware.rate_limit import RateLimitMiddleware

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info(f"Starting Open-Meteo Weather Forecast Service (upstream {OPEN_METEO_BASE_URL}, timezone {FORECAST_TIMEZONE})")
    try:
        yield
    finally:
        logger.info("Shutting down Open-Meteo Weather Forecast Service")


def create_app() -> FastAPI:
    """Create and configure FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="Open-Meteo Weather Forecast Service",
        description="REST API service returning current and daily forecasts in Celsius and Fahrenheit from Open-Meteo",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_middleware(
        RateLimitMiddleware,
        calls=RATE_LIMIT_REQUESTS_PER_SECOND,
        enabled=RATE_LIMIT_ENABLED
    )

    app.include_router(weather_router)

    @app.get("/", tags=["root"])
    async def api_info() -> dict:
        """API information endpoint."""
        return {
            "message": "Open-Meteo Weather Forecast Service",
            "docs": "/docs",
            "redoc": "/redoc",
            "forecast": "/weatherforecast?location=41.8755616,-87.624421",
            "health": "/weatherforecast/health"
        }

    return app


# Create app instance for uvicorn
app = create_app()


def main() -> None:
    """Main entry point for the application."""
    logger.info(f"Starting server on {HOST}:{PORT}")
    uvicorn.run(
        "meteo_forecast.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
        log_level="debug" if DEBUG else "info"
    )


if __name__ == "__main__":
    main()
