"""Base body model: frame conversions shared by the Sun and the Moon."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

from sunmoon_tools.time_utils import JulianDate
from sunmoon_tools.transforms import equatorial_to_ecliptical, equatorial_to_horizontal, parallax
from sunmoon_tools.vec_math import Vector


@dataclass(frozen=True)
class Body:
    """A body with a closed-form geocentric position series.

    position_equatorial returns the ecliptic polar vector (longitude,
    latitude, distance in km) referenced to the earth; everything else is
    derived from it by frame rotations.
    """

    name: str
    mean_radius_km: float
    series: Callable[[JulianDate], Vector]

    def position_equatorial(self, jd: JulianDate) -> Vector:
        """Ecliptic longitude, latitude and distance (km) at jd."""
        return self.series(jd)

    def position(self, jd: JulianDate) -> Vector:
        """Geocentric equatorial position (right ascension, declination, distance)."""
        rotation = equatorial_to_ecliptical(jd).transpose()
        return rotation.multiply(self.position_equatorial(jd))

    def position_horizontal(self, jd: JulianDate, lat: float, lng: float) -> Vector:
        """Geocentric horizontal position for an observer at lat/lng (radians).

        Returns:
            Vector of azimuth (from south), altitude and distance.
        """
        mc = self.position(jd)
        h = jd.greenwich_mean_sidereal_time + lng - mc.phi
        return equatorial_to_horizontal(h, mc.theta, mc.r, lat)

    def position_topocentric(self, jd: JulianDate, lat: float, lng: float, elevation: float) -> Vector:
        """Horizontal position with the altitude corrected for parallax.

        Parameters:
            jd: Instant.
            lat: Observer latitude (radians).
            lng: Observer longitude (radians).
            elevation: Observer elevation (meters).
        """
        pos = self.position_horizontal(jd, lat, lng)
        return Vector.of_polar(pos.phi, pos.theta - parallax(elevation, pos.r), pos.r)

    def angular_radius(self, distance: float) -> float:
        """Angular radius (radians) of the body's disc at the given distance (km)."""
        return math.asin(self.mean_radius_km / distance)
