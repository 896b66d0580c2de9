"""Extraction of latitude/longitude pairs from free-text locations."""

import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# Unanchored: the first pair found anywhere in the string wins,
# so leading or trailing text around the pair is ignored.
COORDINATES_PATTERN = re.compile(r"(-?\d{1,3}\.\d{5,7}),(-?\d{1,3}\.\d{5,7})")


class Coordinates(BaseModel):
    """Latitude/longitude pair parsed from a location string.

    Only the textual format is checked during parsing; values outside
    the geographic ranges are accepted.
    """
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., description="Latitude in decimal degrees")
    longitude: float = Field(..., description="Longitude in decimal degrees")


def parse_coordinates(raw: str) -> Optional[Coordinates]:
    """Find the first ``lat,lon`` pair in ``raw``.

    Args:
        raw: Arbitrary location text, e.g. ``"41.8755616,-87.624421"``

    Returns:
        Parsed coordinates, or None when the text holds no pair
    """
    match = COORDINATES_PATTERN.search(raw)
    if match is None:
        return None

    return Coordinates(latitude=float(match.group(1)), longitude=float(match.group(2)))
