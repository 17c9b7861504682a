"""Apparent position of the Sun for an observer."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime

from sunmoon_tools.bodies import SUN
from sunmoon_tools.constants import DEGREES_PER_CIRCLE, HALF_CIRCLE_DEGREES
from sunmoon_tools.params import Observer
from sunmoon_tools.time_utils import JulianDate
from sunmoon_tools.transforms import refraction


@dataclass(frozen=True)
class SunPosition:
    """Sun position in degrees, distance in km.

    Attributes:
        azimuth: Degrees from north, clockwise, in [0, 360).
        altitude: Visible altitude, including atmospheric refraction.
        true_altitude: Topocentric altitude without refraction.
        distance: Distance to the Sun in kilometers.
    """

    azimuth: float
    altitude: float
    true_altitude: float
    distance: float


def compute_sun_position(when: datetime, observer: Observer) -> SunPosition:
    """Compute the Sun's position seen from observer at when.

    Parameters:
        when: Instant (timezone-aware; naive is UTC).
        observer: Observer location.

    Returns:
        SunPosition.
    """
    jd = JulianDate(when)
    pos = SUN.position_topocentric(
        jd, observer.latitude_rad, observer.longitude_rad, observer.elevation_m
    )
    true_altitude = pos.theta
    return SunPosition(
        azimuth=math.fmod(math.degrees(pos.phi) + HALF_CIRCLE_DEGREES, DEGREES_PER_CIRCLE),
        altitude=math.degrees(true_altitude + refraction(true_altitude)),
        true_altitude=math.degrees(true_altitude),
        distance=pos.r,
    )
