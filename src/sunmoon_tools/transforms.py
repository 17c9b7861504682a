"""Coordinate transforms and small-angle corrections (refraction, parallax).

Angles are in radians, distances in kilometers unless noted otherwise.
"""

from __future__ import annotations

import math

from sunmoon_tools.constants import APPARENT_REFRACTION, EARTH_MEAN_RADIUS
from sunmoon_tools.time_utils import JulianDate
from sunmoon_tools.vec_math import Matrix, Vector, is_zero


def frac(a: float) -> float:
    """Fractional part of a; same sign as a."""
    return math.fmod(a, 1.0)


def equatorial_to_horizontal(tau: float, dec: float, dist: float, lat: float) -> Vector:
    """Convert equatorial to horizontal coordinates.

    Parameters:
        tau: Hour angle (radians).
        dec: Declination (radians).
        dist: Distance of the object (any unit, passed through).
        lat: Latitude of the observer (radians).

    Returns:
        Vector whose phi is the azimuth (measured from south), theta the
        altitude and r the distance.
    """
    return Matrix.rotate_y(math.pi / 2.0 - lat).multiply(Vector.of_polar(tau, dec, dist))


def mean_obliquity(jd: JulianDate) -> float:
    """Mean obliquity of the ecliptic at jd (radians)."""
    jc = jd.julian_century
    return math.radians(23.43929111 - (46.8150 + (0.00059 - 0.001813 * jc) * jc) * jc / 3600.0)


def equatorial_to_ecliptical(jd: JulianDate) -> Matrix:
    """Rotation matrix from equatorial to ecliptical coordinates at jd."""
    return Matrix.rotate_x(mean_obliquity(jd))


def refraction(h: float) -> float:
    """Atmospheric refraction of an object at true altitude h (radians).

    Only valid for positive altitudes; 0.0 is returned for negative ones.
    """
    if h < 0.0:
        return 0.0
    return 0.000296706 / math.tan(h + 0.00312537 / (h + 0.0890118))


def apparent_refraction(ha: float) -> float:
    """Atmospheric refraction of an object seen at apparent altitude ha (radians).

    Bennett's formula; 0.0 for negative altitudes and APPARENT_REFRACTION
    exactly at the horizon.
    """
    if ha < 0.0:
        return 0.0
    if is_zero(ha):
        return APPARENT_REFRACTION
    ha_deg = math.degrees(ha)
    return math.pi / (math.tan(math.radians(ha_deg + 7.31 / (ha_deg + 4.4))) * 10800.0)


def parallax(elevation: float, distance: float) -> float:
    """Topocentric parallax, reduced by the dip of the horizon.

    Parameters:
        elevation: Observer elevation above sea level (meters).
        distance: Distance of the object (kilometers).

    Returns:
        Parallax correction in radians.
    """
    return math.asin(EARTH_MEAN_RADIUS / distance) - math.acos(
        EARTH_MEAN_RADIUS / (EARTH_MEAN_RADIUS + elevation / 1000.0)
    )
