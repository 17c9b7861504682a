"""Sunrise, sunset, solar noon and nadir, and twilight times."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from sunmoon_tools.bodies import SUN
from sunmoon_tools.config import get_search_days, get_truncate_unit
from sunmoon_tools.params import Observer
from sunmoon_tools.search import find_events
from sunmoon_tools.time_utils import JulianDate, Unit, parse_unit, window_hours
from sunmoon_tools.transforms import apparent_refraction, parallax

logger = logging.getLogger(__name__)


class Twilight(Enum):
    """Sun altitude that defines rise and set.

    Each member carries the altitude angle in degrees and, for the visual
    horizons, the part of the solar disc that touches the horizon (1.0 upper
    limb, 0.0 centre, -1.0 lower limb). Members with a disc position are
    corrected for refraction and parallax; the others use the plain angle.
    """

    VISUAL = (0.0, 1.0)
    VISUAL_LOWER = (0.0, -1.0)
    HORIZON = (0.0, None)
    CIVIL = (-6.0, None)
    NAUTICAL = (-12.0, None)
    ASTRONOMICAL = (-18.0, None)
    GOLDEN_HOUR = (6.0, None)
    BLUE_HOUR = (-4.0, None)
    NIGHT_HOURS = (-8.0, None)

    def __init__(self, angle_deg: float, disc_position: float | None) -> None:
        self.angle_deg = angle_deg
        self.disc_position = disc_position

    @property
    def angle_rad(self) -> float:
        return math.radians(self.angle_deg)

    @property
    def is_topocentric(self) -> bool:
        """True if refraction and parallax corrections apply."""
        return self.disc_position is not None


@dataclass(frozen=True)
class SunTimes:
    """Sun event times; None where the event is not within the search window.

    is_always_up / is_always_down refer to the first 24 hours of the window.
    """

    rise: datetime | None
    set: datetime | None
    noon: datetime | None
    nadir: datetime | None
    is_always_up: bool
    is_always_down: bool


def corrected_sun_height(
    jd: JulianDate,
    observer: Observer,
    angle: float,
    disc_position: float | None,
) -> float:
    """Sun altitude above the twilight angle (radians); positive when above.

    Parameters:
        jd: Instant.
        observer: Observer location.
        angle: Twilight angle (radians).
        disc_position: Part of the disc on the horizon, or None for no corrections.
    """
    pos = SUN.position_horizontal(jd, observer.latitude_rad, observer.longitude_rad)
    hc = angle
    if disc_position is not None:
        hc -= apparent_refraction(hc)
        hc += parallax(observer.elevation_m, pos.r)
        hc -= disc_position * SUN.angular_radius(pos.r)
    return pos.theta - hc


def compute_sun_times(
    when: datetime,
    observer: Observer,
    *,
    twilight: Twilight = Twilight.VISUAL,
    angle_deg: float | None = None,
    limit: float | None = None,
    limit_unit: str = 'hour',
    truncate_to: Unit | str | None = None,
) -> SunTimes:
    """Compute sun rise, set, noon and nadir after `when`.

    Parameters:
        when: Start of the search (timezone-aware; naive is UTC).
        observer: Observer location.
        twilight: Twilight definition; ignored when angle_deg is given.
        angle_deg: Custom sun altitude in degrees (no refraction/parallax).
        limit: Search window length in limit_unit (configured default if None).
        limit_unit: Unit of limit: 'sec', 'min', 'hour' or 'day'.
        truncate_to: Granularity of the returned times (configured default if None).

    Returns:
        SunTimes in the zone of `when`.
    """
    if angle_deg is not None:
        angle = math.radians(angle_deg)
        disc_position = None
    else:
        angle = twilight.angle_rad
        disc_position = twilight.disc_position
    if limit is None:
        limit_h = window_hours(get_search_days(), 'day')
    else:
        limit_h = window_hours(limit, limit_unit)
    unit = parse_unit(truncate_to if truncate_to is not None else get_truncate_unit())

    jd = JulianDate(when)
    logger.debug('Sun times for %s at %s, angle=%.3f deg', jd.instant.isoformat(), observer, math.degrees(angle))
    result = find_events(
        jd,
        lambda t: corrected_sun_height(t, observer, angle, disc_position),
        limit_h,
    )

    def to_time(hour: float | None) -> datetime | None:
        if hour is None:
            return None
        return jd.at_hour(hour).truncated(unit)

    return SunTimes(
        rise=to_time(result.rise),
        set=to_time(result.set),
        noon=to_time(result.transit),
        nadir=to_time(result.antitransit),
        is_always_up=result.always_up,
        is_always_down=result.always_down,
    )
