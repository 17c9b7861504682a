"""Illuminated fraction, phase and crescent geometry of the Moon."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime

from sunmoon_tools.bodies import MOON, SUN
from sunmoon_tools.moon_phase import Phase
from sunmoon_tools.params import Observer
from sunmoon_tools.time_utils import JulianDate


@dataclass(frozen=True)
class MoonIllumination:
    """Moon illumination; all angles in degrees.

    Attributes:
        fraction: Illuminated fraction, 0.0 (new moon) to 1.0 (full moon).
        phase: Phase angle, -180 (new moon) through 0 (full moon) to 180;
            negative while waxing.
        angle: Position angle of the midpoint of the illuminated limb,
            measured eastward from north.
        elongation: Angular separation of Sun and Moon.
        radius: Angular radius of the Moon.
        crescent_width: Width of the visible crescent.
    """

    fraction: float
    phase: float
    angle: float
    elongation: float
    radius: float
    crescent_width: float

    @property
    def closest_phase(self) -> Phase:
        """Named phase closest to the current phase angle."""
        return Phase.to_phase(self.phase + 180.0)


def compute_moon_illumination(when: datetime, observer: Observer | None = None) -> MoonIllumination:
    """Compute the Moon's illumination at when.

    Parameters:
        when: Instant (timezone-aware; naive is UTC).
        observer: If given, elongation and radius are topocentric for this
            location; otherwise geocentric.

    Returns:
        MoonIllumination.
    """
    jd = JulianDate(when)
    s = SUN.position(jd)
    m = MOON.position(jd)

    phi = math.pi - math.acos(max(-1.0, min(1.0, m.dot(s) / (m.r * s.r))))
    z = m.cross(s).z
    sign = math.copysign(1.0, z) if z != 0.0 else 0.0

    angle = math.atan2(
        math.cos(s.theta) * math.sin(s.phi - m.phi),
        math.sin(s.theta) * math.cos(m.theta)
        - math.cos(s.theta) * math.sin(m.theta) * math.cos(s.phi - m.phi),
    )

    if observer is not None:
        lat = observer.latitude_rad
        lng = observer.longitude_rad
        s_topo = SUN.position_topocentric(jd, lat, lng, observer.elevation_m)
        m_topo = MOON.position_topocentric(jd, lat, lng, observer.elevation_m)
    else:
        s_topo = s
        m_topo = m

    elongation = s_topo.angle_to(m_topo)
    radius = MOON.angular_radius(m_topo.r)
    crescent_width = radius * (1.0 - math.cos(elongation))

    return MoonIllumination(
        fraction=(1.0 + math.cos(phi)) / 2.0,
        phase=math.degrees(phi * sign),
        angle=math.degrees(angle),
        elongation=math.degrees(elongation),
        radius=math.degrees(radius),
        crescent_width=math.degrees(crescent_width),
    )
