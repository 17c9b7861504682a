"""Tests for sunrise, sunset, noon, nadir and twilight times."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from sunmoon_tools.constants import FULL_CYCLE_HOURS, ONE_DAY_HOURS
from sunmoon_tools.params import Observer
from sunmoon_tools.sun_position import compute_sun_position
from sunmoon_tools.sun_times import SunTimes, Twilight, compute_sun_times
from sunmoon_tools.time_utils import Unit

UTC = timezone.utc
COLOGNE = Observer(50.938056, 6.956944)
ALERT = Observer(82.5, -62.316667)
WELLINGTON = Observer(-41.2875, 174.776111)
PUERTO_WILLIAMS = Observer(-54.933333, -67.616667)
SINGAPORE = Observer(1.283333, 103.833333)
MARTINIQUE = Observer(14.640725, -61.0112)
SYDNEY = Observer(-33.744272, 151.231291)
SANTA_MONICA = Observer(34.0, -118.5)

TOLERANCE = timedelta(minutes=2)


@pytest.fixture(autouse=True)
def _default_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv('SUNMOON_SEARCH_DAYS', raising=False)
    monkeypatch.delenv('SUNMOON_TRUNCATE', raising=False)


def _assert_time(actual: datetime | None, expected: str | None) -> None:
    if expected is None:
        assert actual is None
        return
    assert actual is not None
    assert abs(actual - datetime.fromisoformat(expected)) <= TOLERANCE


def _assert_times(
    times: SunTimes,
    rise: str | None,
    set_: str | None,
    noon: str,
    always_up: bool = False,
    always_down: bool = False,
) -> None:
    _assert_time(times.rise, rise)
    _assert_time(times.set, set_)
    _assert_time(times.noon, noon)
    assert times.is_always_up is always_up
    assert times.is_always_down is always_down


COLOGNE_TWILIGHT = {
    Twilight.ASTRONOMICAL: ('2017-08-10T01:44:18+00:00', '2017-08-10T21:28:43+00:00'),
    Twilight.NAUTICAL: ('2017-08-10T02:44:57+00:00', '2017-08-10T20:28:56+00:00'),
    Twilight.NIGHT_HOURS: ('2017-08-10T03:18:22+00:00', '2017-08-10T19:55:35+00:00'),
    Twilight.CIVIL: ('2017-08-10T03:34:01+00:00', '2017-08-10T19:40:13+00:00'),
    Twilight.BLUE_HOUR: ('2017-08-10T03:48:59+00:00', '2017-08-10T19:25:16+00:00'),
    Twilight.VISUAL: ('2017-08-10T04:11:49+00:00', '2017-08-10T19:02:20+00:00'),
    Twilight.VISUAL_LOWER: ('2017-08-10T04:15:33+00:00', '2017-08-10T18:58:39+00:00'),
    Twilight.HORIZON: ('2017-08-10T04:17:44+00:00', '2017-08-10T18:56:30+00:00'),
    Twilight.GOLDEN_HOUR: ('2017-08-10T04:58:33+00:00', '2017-08-10T18:15:49+00:00'),
}


@pytest.mark.parametrize('twilight', list(Twilight))
def test_cologne_twilights(twilight: Twilight) -> None:
    rise, set_ = COLOGNE_TWILIGHT[twilight]
    times = compute_sun_times(datetime(2017, 8, 10, tzinfo=UTC), COLOGNE, twilight=twilight)
    _assert_times(times, rise, set_, '2017-08-10T11:37:22+00:00')
    _assert_time(times.nadir, '2017-08-10T23:37:45+00:00')


def test_twilight_order() -> None:
    """Deeper twilights begin earlier in the morning."""
    start = datetime(2017, 8, 10, tzinfo=UTC)
    rises = [
        compute_sun_times(start, COLOGNE, twilight=t).rise
        for t in (Twilight.ASTRONOMICAL, Twilight.NAUTICAL, Twilight.CIVIL, Twilight.VISUAL, Twilight.GOLDEN_HOUR)
    ]
    assert rises == sorted(rises)


def test_custom_angle_matches_plain_twilight() -> None:
    """A custom angle gets no refraction or parallax, like the plain twilight angles."""
    start = datetime(2017, 8, 10, tzinfo=UTC)
    custom = compute_sun_times(start, COLOGNE, angle_deg=-4.0)
    blue = compute_sun_times(start, COLOGNE, twilight=Twilight.BLUE_HOUR)
    assert custom == blue


def test_horizon_is_plain_geometric_angle() -> None:
    """HORIZON puts the centre of the Sun on the 0 degree horizon without corrections."""
    start = datetime(2017, 8, 10, tzinfo=UTC)
    horizon = compute_sun_times(start, COLOGNE, twilight=Twilight.HORIZON)
    assert horizon == compute_sun_times(start, COLOGNE, angle_deg=0.0)
    assert abs(horizon.rise - datetime(2017, 8, 10, 4, 17, 44, tzinfo=UTC)) <= TOLERANCE
    assert abs(horizon.set - datetime(2017, 8, 10, 18, 56, 30, tzinfo=UTC)) <= TOLERANCE


def test_twilight_members() -> None:
    assert Twilight.VISUAL.is_topocentric
    assert Twilight.HORIZON.disc_position is None
    assert not Twilight.HORIZON.is_topocentric
    assert not Twilight.CIVIL.is_topocentric
    assert Twilight.ASTRONOMICAL.angle_deg == -18.0


def test_alert_polar_day_one_day_window() -> None:
    """Midnight sun: within one day the Sun neither rises nor sets."""
    times = compute_sun_times(datetime(2017, 8, 10, tzinfo=UTC), ALERT, limit=ONE_DAY_HOURS)
    _assert_times(times, None, None, '2017-08-10T16:13:14+00:00', always_up=True)


def test_alert_polar_night_one_day_window() -> None:
    times = compute_sun_times(datetime(2017, 2, 10, tzinfo=UTC), ALERT, limit=ONE_DAY_HOURS)
    _assert_times(times, None, None, '2017-02-10T16:25:09+00:00', always_down=True)


def test_alert_full_cycle_keeps_first_day_classification() -> None:
    """A long window finds the end of the midnight sun; the flags still describe the first day."""
    times = compute_sun_times(datetime(2017, 8, 10, tzinfo=UTC), ALERT, limit=FULL_CYCLE_HOURS)
    _assert_times(
        times,
        '2017-09-06T05:13:15+00:00',
        '2017-09-06T03:06:02+00:00',
        '2017-08-10T16:13:14+00:00',
        always_up=True,
    )


def test_alert_end_of_polar_night() -> None:
    times = compute_sun_times(datetime(2017, 2, 10, tzinfo=UTC), ALERT)
    _assert_times(
        times,
        '2017-02-27T15:24:18+00:00',
        '2017-02-27T17:23:46+00:00',
        '2017-02-10T16:25:09+00:00',
        always_down=True,
    )


def test_alert_equinox() -> None:
    times = compute_sun_times(datetime(2017, 9, 24, tzinfo=UTC), ALERT)
    _assert_times(times, '2017-09-24T09:54:29+00:00', '2017-09-24T22:02:01+00:00', '2017-09-24T15:59:16+00:00')


def test_alert_summer_solstice_noon() -> None:
    """Near the solstice the noon maximum is very flat."""
    times = compute_sun_times(datetime(2020, 6, 20, tzinfo=UTC), ALERT, limit=48.0)
    _assert_times(times, None, None, '2020-06-20T16:11:02+00:00', always_up=True)


@pytest.mark.parametrize(
    ('observer', 'zone', 'day', 'rise', 'set_', 'noon'),
    [
        (WELLINGTON, 'Pacific/Auckland', (2017, 8, 10),
         '2017-08-09T19:18:33+00:00', '2017-08-10T05:34:50+00:00', '2017-08-10T00:26:33+00:00'),
        (PUERTO_WILLIAMS, 'America/Punta_Arenas', (2017, 8, 10),
         '2017-08-10T12:01:51+00:00', '2017-08-10T21:10:36+00:00', '2017-08-10T16:36:07+00:00'),
        (SINGAPORE, 'Asia/Singapore', (2017, 8, 10),
         '2017-08-09T23:05:13+00:00', '2017-08-10T11:14:56+00:00', '2017-08-10T05:10:07+00:00'),
        (MARTINIQUE, 'America/Martinique', (2019, 7, 1),
         '2019-07-01T09:38:35+00:00', '2019-07-01T22:37:23+00:00', '2019-07-01T16:07:57+00:00'),
        (SYDNEY, 'Australia/Sydney', (2019, 7, 3),
         '2019-07-02T21:00:35+00:00', '2019-07-03T06:58:02+00:00', '2019-07-03T01:59:18+00:00'),
    ],
)
def test_local_time_zones(
    observer: Observer, zone: str, day: tuple[int, int, int], rise: str, set_: str, noon: str
) -> None:
    """Searches start at local midnight; results carry the local zone."""
    tz = ZoneInfo(zone)
    times = compute_sun_times(datetime(*day, tzinfo=tz), observer)
    _assert_times(times, rise, set_, noon)
    assert times.rise is not None
    assert times.rise.tzinfo is tz


def test_elevation() -> None:
    """Raised observers see the Sun earlier and longer."""
    skytree = Observer(35.710046, 139.810718, 634.0)
    times = compute_sun_times(datetime(2020, 6, 25, tzinfo=ZoneInfo('Asia/Tokyo')), skytree)
    _assert_times(times, '2020-06-24T19:21:46+00:00', '2020-06-25T10:05:17+00:00', '2020-06-25T02:43:28+00:00')

    airplane = Observer(46.58, -6.3, 11582.4)
    times = compute_sun_times(datetime(2020, 6, 25, tzinfo=UTC), airplane)
    _assert_times(times, '2020-06-25T04:07:33+00:00', '2020-06-25T20:48:32+00:00', '2020-06-25T12:28:00+00:00')


def test_noon_just_before_and_after() -> None:
    """Starting shortly after noon finds the next day's noon."""
    tz = ZoneInfo('America/Los_Angeles')
    noon = compute_sun_times(datetime(2020, 5, 3, tzinfo=tz), SANTA_MONICA).noon
    next_noon = compute_sun_times(datetime(2020, 5, 4, tzinfo=tz), SANTA_MONICA).noon
    assert noon is not None
    assert next_noon is not None
    acceptable = timedelta(seconds=65)

    for minutes in (30, 2):
        before = compute_sun_times(noon - timedelta(minutes=minutes), SANTA_MONICA).noon
        assert before is not None
        assert abs(before - noon) < acceptable

        after = compute_sun_times(noon + timedelta(minutes=minutes), SANTA_MONICA).noon
        assert after is not None
        assert abs(after - next_noon) < acceptable


@pytest.mark.parametrize('start', [datetime(2020, 6, 2, 3, 30), datetime(2020, 6, 16, 4, 11)])
def test_noon_and_nadir_azimuth(start: datetime) -> None:
    """The Sun is due south at noon and due north at nadir."""
    times = compute_sun_times(start.replace(tzinfo=ZoneInfo('America/Los_Angeles')), SANTA_MONICA)
    assert times.noon is not None
    assert times.nadir is not None
    at_noon = compute_sun_position(times.noon, SANTA_MONICA)
    at_nadir = compute_sun_position(times.nadir, SANTA_MONICA)
    assert abs(at_noon.azimuth - 180.0) < 0.1
    assert min(at_nadir.azimuth, 360.0 - at_nadir.azimuth) < 0.1


@pytest.mark.parametrize('start', [(0, 0), (3, 17), (7, 10), (11, 59), (15, 40), (19, 5), (23, 59)])
def test_sequence(start: tuple[int, int]) -> None:
    """Whatever the start time, the next rise and set are found."""
    hour, minute = start
    times = compute_sun_times(datetime(2017, 11, 25, hour, minute, tzinfo=UTC), COLOGNE, limit=FULL_CYCLE_HOURS)
    acceptable = timedelta(seconds=90)
    assert times.rise is not None
    assert times.set is not None

    if (hour, minute) <= (7, 4):
        expected_rise = datetime(2017, 11, 25, 7, 4, tzinfo=UTC)
    else:
        expected_rise = datetime(2017, 11, 26, 7, 6, tzinfo=UTC)
    if (hour, minute) <= (15, 33):
        expected_set = datetime(2017, 11, 25, 15, 33, tzinfo=UTC)
    else:
        expected_set = datetime(2017, 11, 26, 15, 32, tzinfo=UTC)
    assert abs(times.rise - expected_rise) < acceptable
    assert abs(times.set - expected_set) < acceptable


def test_truncation() -> None:
    start = datetime(2017, 8, 10, tzinfo=UTC)
    times = compute_sun_times(start, COLOGNE, truncate_to=Unit.MINUTES)
    assert times.rise is not None
    assert times.rise.second == 0
    _assert_time(times.rise, '2017-08-10T04:12:00+00:00')


def test_truncation_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv('SUNMOON_TRUNCATE', 'hours')
    times = compute_sun_times(datetime(2017, 8, 10, tzinfo=UTC), COLOGNE)
    assert times.rise == datetime(2017, 8, 10, 4, 0, tzinfo=UTC)


def test_repeated_calls_are_identical() -> None:
    start = datetime(2017, 8, 10, tzinfo=UTC)
    assert compute_sun_times(start, COLOGNE) == compute_sun_times(start, COLOGNE)


def test_limit_unit() -> None:
    """A window given in days matches the same window given in hours."""
    start = datetime(2017, 8, 10, tzinfo=UTC)
    in_days = compute_sun_times(start, ALERT, limit=1.0, limit_unit='day')
    assert in_days == compute_sun_times(start, ALERT, limit=ONE_DAY_HOURS)
    assert in_days.is_always_up
    assert in_days.rise is None


def test_limit_rejects_bad_input() -> None:
    start = datetime(2017, 8, 10, tzinfo=UTC)
    with pytest.raises(ValueError, match='Invalid time_unit'):
        compute_sun_times(start, COLOGNE, limit=1.0, limit_unit='weeks')
    with pytest.raises(ValueError, match='must be positive'):
        compute_sun_times(start, COLOGNE, limit=0.0)
