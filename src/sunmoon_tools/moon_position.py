"""Apparent position of the Moon for an observer."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime

from sunmoon_tools.bodies import MOON
from sunmoon_tools.constants import DEGREES_PER_CIRCLE, HALF_CIRCLE_DEGREES
from sunmoon_tools.params import Observer
from sunmoon_tools.time_utils import JulianDate
from sunmoon_tools.transforms import equatorial_to_horizontal, parallax, refraction


@dataclass(frozen=True)
class MoonPosition:
    """Moon position in degrees, distance in km.

    Attributes:
        azimuth: Degrees from north, clockwise, in [0, 360).
        altitude: Visible altitude, including atmospheric refraction.
        true_altitude: Topocentric altitude without refraction.
        distance: Distance to the Moon in kilometers.
        parallactic_angle: Angle between the zenith and the celestial pole
            as seen at the Moon's position (degrees).
    """

    azimuth: float
    altitude: float
    true_altitude: float
    distance: float
    parallactic_angle: float


def compute_moon_position(when: datetime, observer: Observer) -> MoonPosition:
    """Compute the Moon's position seen from observer at when.

    Parameters:
        when: Instant (timezone-aware; naive is UTC).
        observer: Observer location; its elevation reduces the parallax.

    Returns:
        MoonPosition.
    """
    jd = JulianDate(when)
    lat = observer.latitude_rad

    mc = MOON.position(jd)
    h = jd.greenwich_mean_sidereal_time + observer.longitude_rad - mc.phi
    horizontal = equatorial_to_horizontal(h, mc.theta, mc.r, lat)
    true_altitude = horizontal.theta - parallax(observer.elevation_m, horizontal.r)

    pa = math.atan2(
        math.sin(h),
        math.tan(lat) * math.cos(mc.theta) - math.sin(mc.theta) * math.cos(h),
    )

    return MoonPosition(
        azimuth=math.fmod(math.degrees(horizontal.phi) + HALF_CIRCLE_DEGREES, DEGREES_PER_CIRCLE),
        altitude=math.degrees(true_altitude + refraction(true_altitude)),
        true_altitude=math.degrees(true_altitude),
        distance=horizontal.r,
        parallactic_angle=math.degrees(pa),
    )
