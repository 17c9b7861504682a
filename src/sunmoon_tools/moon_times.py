"""Moonrise, moonset and lunar culminations."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from sunmoon_tools.bodies import MOON
from sunmoon_tools.config import get_search_days, get_truncate_unit
from sunmoon_tools.constants import APPARENT_REFRACTION
from sunmoon_tools.params import Observer
from sunmoon_tools.search import find_events
from sunmoon_tools.time_utils import JulianDate, Unit, parse_unit, window_hours
from sunmoon_tools.transforms import parallax

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoonTimes:
    """Moon event times; None where the event is not within the search window.

    transit / antitransit are the upper and lower culmination. The
    is_always_up / is_always_down flags refer to the first 24 hours.
    """

    rise: datetime | None
    set: datetime | None
    transit: datetime | None
    antitransit: datetime | None
    is_always_up: bool
    is_always_down: bool


def corrected_moon_height(jd: JulianDate, observer: Observer) -> float:
    """Altitude of the Moon's upper limb above the apparent horizon (radians).

    The geocentric altitude is corrected for parallax (reduced by the dip of
    the horizon for the observer's elevation), refraction at the horizon and
    the Moon's angular radius.
    """
    pos = MOON.position_horizontal(jd, observer.latitude_rad, observer.longitude_rad)
    hc = (
        parallax(observer.elevation_m, pos.r)
        - APPARENT_REFRACTION
        - MOON.angular_radius(pos.r)
    )
    return pos.theta - hc


def compute_moon_times(
    when: datetime,
    observer: Observer,
    *,
    limit: float | None = None,
    limit_unit: str = 'hour',
    truncate_to: Unit | str | None = None,
) -> MoonTimes:
    """Compute moon rise, set and culminations after `when`.

    Parameters:
        when: Start of the search (timezone-aware; naive is UTC).
        observer: Observer location.
        limit: Search window length in limit_unit (configured default if None).
        limit_unit: Unit of limit: 'sec', 'min', 'hour' or 'day'.
        truncate_to: Granularity of the returned times (configured default if None).

    Returns:
        MoonTimes in the zone of `when`.
    """
    if limit is None:
        limit_h = window_hours(get_search_days(), 'day')
    else:
        limit_h = window_hours(limit, limit_unit)
    unit = parse_unit(truncate_to if truncate_to is not None else get_truncate_unit())

    jd = JulianDate(when)
    logger.debug('Moon times for %s at %s', jd.instant.isoformat(), observer)
    result = find_events(jd, lambda t: corrected_moon_height(t, observer), limit_h)

    def to_time(hour: float | None) -> datetime | None:
        if hour is None:
            return None
        return jd.at_hour(hour).truncated(unit)

    return MoonTimes(
        rise=to_time(result.rise),
        set=to_time(result.set),
        transit=to_time(result.transit),
        antitransit=to_time(result.antitransit),
        is_always_up=result.always_up,
        is_always_down=result.always_down,
    )
