"""Moon phases: the next instant the Moon reaches a given phase angle."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from sunmoon_tools.bodies import MOON, SUN
from sunmoon_tools.config import get_truncate_unit
from sunmoon_tools.constants import (
    DAYS_PER_CENTURY,
    DEGREES_PER_CIRCLE,
    MICRO_MOON_DISTANCE,
    PI2,
    SUPER_MOON_DISTANCE,
)
from sunmoon_tools.search import find_ascending_root
from sunmoon_tools.time_utils import JulianDate, Unit, parse_unit

logger = logging.getLogger(__name__)

# Light travel time from the Sun (8.32 minutes), in Julian centuries
SUN_LIGHT_TIME_TAU = 8.32 / (1440.0 * DAYS_PER_CENTURY)

# Coarse scan step (one week) and root accuracy (30 seconds), in Julian centuries
PHASE_SCAN_STEP = 7.0 / DAYS_PER_CENTURY
PHASE_ACCURACY = (0.5 / 1440.0) / DAYS_PER_CENTURY


class Phase(Enum):
    """Named moon phases and their Moon-Sun longitude difference in degrees."""

    NEW_MOON = 0.0
    WAXING_CRESCENT = 45.0
    FIRST_QUARTER = 90.0
    WAXING_GIBBOUS = 135.0
    FULL_MOON = 180.0
    WANING_GIBBOUS = 225.0
    LAST_QUARTER = 270.0
    WANING_CRESCENT = 315.0

    @property
    def angle_deg(self) -> float:
        return self.value

    @property
    def angle_rad(self) -> float:
        return math.radians(self.value)

    @classmethod
    def to_phase(cls, angle_deg: float) -> Phase:
        """Return the named phase closest to an angle in degrees (any range)."""
        normalized = math.fmod(angle_deg, DEGREES_PER_CIRCLE)
        if normalized < 0.0:
            normalized += DEGREES_PER_CIRCLE
        members = list(cls)
        index = int(math.floor(normalized / 45.0 + 0.5)) % len(members)
        return members[index]


@dataclass(frozen=True)
class MoonPhase:
    """Instant of a moon phase and the Moon's distance (km) at that instant."""

    time: datetime
    distance: float

    @property
    def is_super_moon(self) -> bool:
        """True if the Moon is closer than 360,000 km (a full moon then is a super moon)."""
        return self.distance < SUPER_MOON_DISTANCE

    @property
    def is_micro_moon(self) -> bool:
        """True if the Moon is farther than 405,000 km."""
        return self.distance > MICRO_MOON_DISTANCE


def phase_difference(jd: JulianDate, jc: float, phase_rad: float) -> float:
    """Moon-Sun ecliptic longitude difference minus phase_rad, wrapped into [-pi, pi).

    Parameters:
        jd: Any instant (carries the time zone).
        jc: Julian century to evaluate at.
        phase_rad: Target phase angle (radians).
    """
    sun = SUN.position_equatorial(jd.at_julian_century(jc - SUN_LIGHT_TIME_TAU))
    moon = MOON.position_equatorial(jd.at_julian_century(jc))
    diff = moon.phi - sun.phi - phase_rad
    while diff < 0.0:
        diff += PI2
    return ((diff + math.pi) % PI2) - math.pi


def compute_moon_phase(
    when: datetime,
    phase: Phase | float = Phase.NEW_MOON,
    *,
    truncate_to: Unit | str | None = None,
) -> MoonPhase:
    """Find the next instant after `when` at which the Moon reaches `phase`.

    Parameters:
        when: Start of the search (timezone-aware; naive is UTC).
        phase: Named phase, or phase angle in degrees (0 new, 180 full moon).
        truncate_to: Granularity of the returned time (configured default if None).

    Returns:
        MoonPhase in the zone of `when`.

    Raises:
        RootFindingError: If the crossing cannot be bracketed or refined.
    """
    phase_rad = phase.angle_rad if isinstance(phase, Phase) else math.radians(phase)
    unit = parse_unit(truncate_to if truncate_to is not None else get_truncate_unit())

    jd = JulianDate(when)
    tphase = find_ascending_root(
        jd.julian_century,
        PHASE_SCAN_STEP,
        PHASE_ACCURACY,
        lambda jc: phase_difference(jd, jc, phase_rad),
    )
    tjd = jd.at_julian_century(tphase)
    distance = MOON.position_equatorial(tjd).r
    logger.debug('Moon phase %.1f deg after %s at %s', math.degrees(phase_rad), jd.instant.isoformat(), tjd.instant.isoformat())
    return MoonPhase(time=tjd.truncated(unit), distance=distance)
