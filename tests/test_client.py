"""Tests for the Open-Meteo request builder and HTTP client."""

import httpx
import pytest
import pytest_asyncio
import respx

from meteo_forecast.weather.client import OpenMeteoClient, build_forecast_url
from meteo_forecast.weather.coordinates import Coordinates

BASE_URL = "https://test-meteo.example.com/v1/forecast"


class TestBuildForecastUrl:
    def test_default_endpoint(self, chicago):
        url = build_forecast_url(chicago)

        assert url == (
            "https://api.open-meteo.com/v1/forecast"
            "?latitude=41.8755616&longitude=-87.624421"
            "&current=temperature_2m"
            "&daily=temperature_2m_max,temperature_2m_min,weathercode"
            "&timezone=America/Chicago"
        )

    def test_custom_endpoint_and_timezone(self):
        url = build_forecast_url(
            Coordinates(latitude=-33.86785, longitude=151.20732),
            base_url=BASE_URL,
            timezone="Australia/Sydney"
        )

        params = httpx.URL(url).params
        assert url.startswith(BASE_URL + "?")
        assert params["latitude"] == "-33.86785"
        assert params["longitude"] == "151.20732"
        assert params["timezone"] == "Australia/Sydney"


@pytest_asyncio.fixture
async def meteo():
    async with OpenMeteoClient(base_url=BASE_URL) as client:
        yield client


class TestGetForecastJson:
    @pytest.mark.asyncio
    @respx.mock
    async def test_success(self, meteo, chicago, chicago_json):
        route = respx.get(build_forecast_url(chicago, base_url=BASE_URL)).mock(
            return_value=httpx.Response(200, text=chicago_json)
        )

        body = await meteo.get_forecast_json(chicago)

        assert body == chicago_json
        assert route.call_count == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_query_and_user_agent(self, meteo, chicago, chicago_json):
        route = respx.get(url__startswith=BASE_URL).mock(
            return_value=httpx.Response(200, text=chicago_json)
        )

        await meteo.get_forecast_json(chicago)

        request = route.calls[0].request
        assert request.url.params["current"] == "temperature_2m"
        assert request.url.params["daily"] == "temperature_2m_max,temperature_2m_min,weathercode"
        assert request.url.params["timezone"] == "America/Chicago"
        assert "MeteoForecastService" in request.headers["user-agent"]

    @pytest.mark.asyncio
    @respx.mock
    async def test_error_status_raises(self, meteo, chicago):
        respx.get(url__startswith=BASE_URL).mock(
            return_value=httpx.Response(400, json={"error": True, "reason": "Latitude must be in range"})
        )

        with pytest.raises(httpx.HTTPStatusError):
            await meteo.get_forecast_json(chicago)

    @pytest.mark.asyncio
    @respx.mock
    async def test_timeout_raises(self, meteo, chicago):
        respx.get(url__startswith=BASE_URL).mock(side_effect=httpx.ConnectTimeout("timed out"))

        with pytest.raises(httpx.ConnectTimeout):
            await meteo.get_forecast_json(chicago)
