"""Resolved, immutable query parameters handed to the computations."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from sunmoon_tools.angle_utils import parse_angle
from sunmoon_tools.constants import DEGREES_PER_CIRCLE, HALF_CIRCLE_DEGREES

logger = logging.getLogger(__name__)


def normalize_longitude(longitude_deg: float) -> float:
    """Map a longitude into [-180, 180) degrees."""
    lng = math.fmod(longitude_deg + HALF_CIRCLE_DEGREES, DEGREES_PER_CIRCLE)
    if lng < 0.0:
        lng += DEGREES_PER_CIRCLE
    return lng - HALF_CIRCLE_DEGREES


@dataclass(frozen=True)
class Observer:
    """Geographic location of the observer.

    Latitude must be within [-90, 90] degrees; longitude is normalized into
    [-180, 180); a negative elevation is clamped to 0 meters.
    """

    latitude_deg: float
    longitude_deg: float
    elevation_m: float = 0.0

    def __post_init__(self) -> None:
        lat = float(self.latitude_deg)
        if math.isnan(lat) or not -90.0 <= lat <= 90.0:
            raise ValueError(f'latitude must be within [-90, 90] degrees, got {self.latitude_deg!r}')
        lng = float(self.longitude_deg)
        if not math.isfinite(lng):
            raise ValueError(f'longitude must be finite, got {self.longitude_deg!r}')
        elevation = float(self.elevation_m)
        if math.isnan(elevation):
            raise ValueError('elevation must be a number')
        if elevation < 0.0:
            logger.warning('Negative elevation %s m clamped to 0', elevation)
            elevation = 0.0
        object.__setattr__(self, 'latitude_deg', lat)
        object.__setattr__(self, 'longitude_deg', normalize_longitude(lng))
        object.__setattr__(self, 'elevation_m', elevation)

    @classmethod
    def parse(cls, latitude: str, longitude: str, elevation_m: float = 0.0) -> Observer:
        """Build an Observer from decimal or "deg min sec" strings.

        Raises:
            ValueError: If either coordinate cannot be parsed or is out of range.
        """
        lat = parse_angle(latitude)
        if lat is None:
            raise ValueError(f'Invalid latitude {latitude!r}')
        lng = parse_angle(longitude)
        if lng is None:
            raise ValueError(f'Invalid longitude {longitude!r}')
        return cls(lat, lng, elevation_m)

    @property
    def latitude_rad(self) -> float:
        return math.radians(self.latitude_deg)

    @property
    def longitude_rad(self) -> float:
        return math.radians(self.longitude_deg)
