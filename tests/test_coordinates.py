"""Tests for coordinate extraction."""

import pytest
from pydantic import ValidationError

from meteo_forecast.weather.coordinates import Coordinates, parse_coordinates


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("41.8755616,-87.624421", (41.8755616, -87.624421)),
        ("40.741895,-73.989308", (40.741895, -73.989308)),
        ("-29.75893,-95.36769", (-29.75893, -95.36769)),
        ("123.12345,0.1234567", (123.12345, 0.1234567)),
    ],
)
def test_parses_coordinate_pair(raw, expected):
    coordinates = parse_coordinates(raw)

    assert coordinates == Coordinates(latitude=expected[0], longitude=expected[1])


def test_ignores_surrounding_text():
    coordinates = parse_coordinates("chicago @ 41.8755616,-87.6244210garbage")

    assert coordinates.latitude == 41.8755616
    assert coordinates.longitude == -87.624421


def test_first_pair_wins():
    coordinates = parse_coordinates("1.12345,2.12345 3.12345,4.12345")

    assert (coordinates.latitude, coordinates.longitude) == (1.12345, 2.12345)


def test_out_of_range_values_are_not_rejected():
    coordinates = parse_coordinates("234.56789,512.34567")

    assert (coordinates.latitude, coordinates.longitude) == (234.56789, 512.34567)


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "123",
        "Chicago",
        "41.8755,-87.6244",  # too few decimals
        "41.8755616, -87.624421",  # space after comma
        "41,8755616;-87,624421",
    ],
)
def test_returns_none_without_pair(raw):
    assert parse_coordinates(raw) is None


def test_coordinates_are_immutable(chicago):
    with pytest.raises(ValidationError):
        chicago.latitude = 0.0
