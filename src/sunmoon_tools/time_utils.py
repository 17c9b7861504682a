"""Time representation: Julian dates on top of rms-julian day numbers.

A JulianDate wraps a timezone-aware datetime together with its Modified
Julian Date. The calendar day is converted through rms-julian (days since
2000-01-01), the time of day is added as a fraction. All arithmetic is done
on the absolute time line, so daylight saving transitions in the caller's
zone never shift results; that zone is kept on the result.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone, tzinfo
from enum import Enum

import julian

from sunmoon_tools.constants import (
    DAYS_PER_ANOMALISTIC_YEAR,
    DAYS_PER_CENTURY,
    MJD_J1970,
    MJD_J2000,
    MJD_J2000_DAY,
    PI2,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)

# Unix time of 2000-01-01T00:00Z (rms-julian day 0)
_UNIX_SECONDS_J2000_DAY = int(round((MJD_J2000_DAY - MJD_J1970) * SECONDS_PER_DAY))


class Unit(Enum):
    """Granularity a result instant is rounded to."""

    SECONDS = 'seconds'
    MINUTES = 'minutes'
    HOURS = 'hours'
    DAYS = 'days'


def to_aware(dt: datetime) -> datetime:
    """Return dt unchanged if it carries a zone, else the same wall time as UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def _add_seconds(dt: datetime, seconds: float) -> datetime:
    """Add seconds on the absolute time line, keeping dt's zone."""
    utc = dt.astimezone(timezone.utc) + timedelta(seconds=seconds)
    return utc.astimezone(dt.tzinfo)


def mjd_from_datetime(dt: datetime) -> float:
    """Convert a datetime to Modified Julian Date (UT).

    Parameters:
        dt: Datetime; naive values are taken as UTC.

    Returns:
        MJD (days since 1858-11-17T00:00Z).
    """
    utc = to_aware(dt).astimezone(timezone.utc)
    day = int(julian.day_from_ymd(utc.year, utc.month, utc.day))
    sec = (
        utc.hour * SECONDS_PER_HOUR
        + utc.minute * SECONDS_PER_MINUTE
        + utc.second
        + utc.microsecond / 1e6
    )
    return MJD_J2000_DAY + day + sec / SECONDS_PER_DAY


def datetime_from_mjd(mjd: float, tz: tzinfo | None = None) -> datetime:
    """Convert MJD to a datetime in zone tz, at whole-second resolution.

    The MJD is rounded to milliseconds first and the millisecond part is then
    dropped, so repeated conversions are stable.

    Parameters:
        mjd: Modified Julian Date.
        tz: Target zone (UTC if None).

    Returns:
        Timezone-aware datetime.
    """
    millis = int(round((mjd - MJD_J1970) * SECONDS_PER_DAY * 1000.0))
    unix_seconds = millis // 1000
    day, sec = divmod(unix_seconds - _UNIX_SECONDS_J2000_DAY, int(SECONDS_PER_DAY))
    y, m, d = julian.ymd_from_day(day)
    utc = datetime(int(y), int(m), int(d), tzinfo=timezone.utc) + timedelta(seconds=sec)
    return utc.astimezone(tz or timezone.utc)


def truncate_datetime(dt: datetime, unit: Unit) -> datetime:
    """Round dt to the given unit (half-up for minutes and hours).

    Minutes round at 30 seconds, hours at 30 minutes, days clear the hour of
    the rounded-to-hour value. Seconds just drop the sub-second part.

    Parameters:
        dt: Timezone-aware datetime.
        unit: Target granularity.

    Returns:
        New datetime in the same zone.
    """
    out = dt.replace(microsecond=0)
    if unit in (Unit.MINUTES, Unit.HOURS, Unit.DAYS):
        out = _add_seconds(out, 30.0).replace(second=0)
    if unit in (Unit.HOURS, Unit.DAYS):
        out = _add_seconds(out, 30.0 * SECONDS_PER_MINUTE).replace(minute=0)
    if unit is Unit.DAYS:
        out = out.replace(hour=0)
    return out


def parse_unit(name: str | Unit) -> Unit:
    """Return the Unit for a name such as 'minutes' (case-insensitive).

    Raises:
        ValueError: If the name is not a known unit.
    """
    if isinstance(name, Unit):
        return name
    key = name.strip().lower()
    for unit in Unit:
        if unit.value == key or unit.value[:-1] == key:
            return unit
    raise ValueError(f'Invalid truncation unit {name!r}; expected one of seconds, minutes, hours, days')


def window_hours(value: float, time_unit: str) -> float:
    """Convert a search window length and unit to hours.

    Parameters:
        value: Window length (must be positive).
        time_unit: One of 'sec', 'min', 'hour', 'day' (case-insensitive, first 4 chars).

    Returns:
        Window length in hours.

    Raises:
        ValueError: On an unknown unit or a non-positive length.
    """
    if not value > 0.0:
        raise ValueError(f'Search window must be positive, got {value!r}')
    u = time_unit.strip().lower()[:4]
    if u in ('sec', 'seco'):
        return value / SECONDS_PER_HOUR
    if u in ('min', 'minu'):
        return value * SECONDS_PER_MINUTE / SECONDS_PER_HOUR
    if u == 'hour':
        return float(value)
    if u == 'day':
        return value * SECONDS_PER_DAY / SECONDS_PER_HOUR
    raise ValueError(f'Invalid time_unit {time_unit!r}; expected one of sec, min, hour, day')


@dataclass(frozen=True)
class JulianDate:
    """An instant on the Julian date scale, remembering its source zone."""

    instant: datetime
    modified_julian_date: float = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        aware = to_aware(self.instant)
        object.__setattr__(self, 'instant', aware)
        object.__setattr__(self, 'modified_julian_date', mjd_from_datetime(aware))

    @classmethod
    def from_datetime(cls, dt: datetime) -> JulianDate:
        return cls(dt)

    def at_hour(self, hour: float) -> JulianDate:
        """Return the instant `hour` hours later (rounded to whole seconds)."""
        return JulianDate(_add_seconds(self.instant, round(hour * SECONDS_PER_HOUR)))

    def at_modified_julian_date(self, mjd: float) -> JulianDate:
        """Return the instant at the given MJD, in this instant's zone."""
        return JulianDate(datetime_from_mjd(mjd, self.instant.tzinfo))

    def at_julian_century(self, jc: float) -> JulianDate:
        """Return the instant at the given Julian century (inverse of julian_century)."""
        return self.at_modified_julian_date(jc * DAYS_PER_CENTURY + MJD_J2000)

    def truncated(self, unit: Unit) -> datetime:
        return truncate_datetime(self.instant, unit)

    @property
    def julian_century(self) -> float:
        """Julian centuries since J2000.0."""
        return (self.modified_julian_date - MJD_J2000) / DAYS_PER_CENTURY

    @property
    def greenwich_mean_sidereal_time(self) -> float:
        """Greenwich mean sidereal time in radians, within [0, 2*pi)."""
        mjd = self.modified_julian_date
        mjd0 = math.floor(mjd)
        ut = (mjd - mjd0) * SECONDS_PER_DAY
        t0 = (mjd0 - MJD_J2000) / DAYS_PER_CENTURY
        t = (mjd - MJD_J2000) / DAYS_PER_CENTURY

        gmst = (
            24110.54841
            + 8640184.812866 * t0
            + 1.0027379093 * ut
            + (0.093104 - 6.2e-6 * t) * t * t
        )
        return (PI2 / SECONDS_PER_DAY) * (gmst % SECONDS_PER_DAY)

    @property
    def true_anomaly(self) -> float:
        """Coarse approximation of the earth's true anomaly (radians), by day of year."""
        day_of_year = self.instant.timetuple().tm_yday - 1
        return PI2 * math.fmod((day_of_year - 4.0) / DAYS_PER_ANOMALISTIC_YEAR, 1.0)

    def __str__(self) -> str:
        mjd = self.modified_julian_date
        return '%dd %02dh %02dm %02ds' % (
            int(mjd),
            int(mjd * 24 % 24),
            int(mjd * 24 * 60 % 60),
            int(mjd * 24 * 60 * 60 % 60),
        )
