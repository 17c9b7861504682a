"""Sun position series (low precision, about one arc minute)."""

from __future__ import annotations

import math

from sunmoon_tools.bodies.base import Body
from sunmoon_tools.constants import PI2, SUN_DISTANCE, SUN_MEAN_RADIUS
from sunmoon_tools.time_utils import JulianDate
from sunmoon_tools.transforms import frac
from sunmoon_tools.vec_math import Vector


def sun_position_equatorial(jd: JulianDate) -> Vector:
    """Ecliptic longitude and distance (km) of the Sun; latitude is always 0."""
    t = jd.julian_century
    m = PI2 * frac(0.993133 + 99.997361 * t)
    lon = PI2 * frac(
        0.7859453
        + m / PI2
        + (6893.0 * math.sin(m) + 72.0 * math.sin(2.0 * m) + 6191.2 * t) / 1296.0e3
    )
    d = SUN_DISTANCE * (1 - 0.016718 * math.cos(jd.true_anomaly))
    return Vector.of_polar(lon, 0.0, d)


SUN = Body(name='Sun', mean_radius_km=SUN_MEAN_RADIUS, series=sun_position_equatorial)
