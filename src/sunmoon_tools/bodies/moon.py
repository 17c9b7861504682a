"""Moon position series (Montenbruck & Pfleger, Astronomy on the Personal Computer)."""

from __future__ import annotations

import math

from sunmoon_tools.bodies.base import Body
from sunmoon_tools.constants import ARCS, MOON_MEAN_RADIUS, PI2
from sunmoon_tools.time_utils import JulianDate
from sunmoon_tools.transforms import frac
from sunmoon_tools.vec_math import Vector

sin = math.sin
cos = math.cos


def moon_position_equatorial(jd: JulianDate) -> Vector:
    """Ecliptic longitude, latitude and distance (km) of the Moon."""
    t = jd.julian_century
    l0 = frac(0.606433 + 1336.855225 * t)  # mean longitude (revolutions)
    mm = PI2 * frac(0.374897 + 1325.552410 * t)  # mean anomaly of the Moon
    ls = PI2 * frac(0.993133 + 99.997361 * t)  # mean anomaly of the Sun
    d = PI2 * frac(0.827361 + 1236.853086 * t)  # mean elongation
    f = PI2 * frac(0.259086 + 1342.227825 * t)  # argument of latitude
    d2 = 2.0 * d
    mm2 = 2.0 * mm
    f2 = 2.0 * f

    # Perturbations in longitude (arc seconds)
    dl = (
        22640.0 * sin(mm)
        - 4586.0 * sin(mm - d2)
        + 2370.0 * sin(d2)
        + 769.0 * sin(mm2)
        - 668.0 * sin(ls)
        - 412.0 * sin(f2)
        - 212.0 * sin(mm2 - d2)
        - 206.0 * sin(mm + ls - d2)
        + 192.0 * sin(mm + d2)
        - 165.0 * sin(ls - d2)
        - 125.0 * sin(d)
        - 110.0 * sin(mm + ls)
        + 148.0 * sin(mm - ls)
        - 55.0 * sin(f2 - d2)
    )

    # Perturbations in latitude
    s = f + (dl + 412.0 * sin(f2) + 541.0 * sin(ls)) / ARCS
    h = f - d2
    n = (
        -526.0 * sin(h)
        + 44.0 * sin(mm + h)
        - 31.0 * sin(-mm + h)
        - 23.0 * sin(ls + h)
        + 11.0 * sin(-ls + h)
        - 25.0 * sin(-mm2 + f)
        + 21.0 * sin(-mm + f)
    )

    lon = PI2 * frac(l0 + dl / 1296.0e3)
    lat = (18520.0 * sin(s) + n) / ARCS

    dist = (
        385000.5584
        - 20905.3550 * cos(mm)
        - 3699.1109 * cos(d2 - mm)
        - 2955.9676 * cos(d2)
        - 569.9251 * cos(mm2)
    )
    return Vector.of_polar(lon, lat, dist)


MOON = Body(name='Moon', mean_radius_km=MOON_MEAN_RADIUS, series=moon_position_equatorial)
