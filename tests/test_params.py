"""Tests for the Observer parameters."""

from __future__ import annotations

import logging
import math

import pytest

from sunmoon_tools.params import Observer, normalize_longitude


def test_observer_defaults() -> None:
    observer = Observer(50.938056, 6.956944)
    assert observer.elevation_m == 0.0
    assert observer.latitude_rad == pytest.approx(math.radians(50.938056))
    assert observer.longitude_rad == pytest.approx(math.radians(6.956944))


@pytest.mark.parametrize('latitude', [90.5, -91.0, float('nan')])
def test_observer_rejects_latitude(latitude: float) -> None:
    with pytest.raises(ValueError, match='latitude'):
        Observer(latitude, 0.0)


def test_observer_rejects_infinite_longitude() -> None:
    with pytest.raises(ValueError, match='longitude'):
        Observer(0.0, float('inf'))


@pytest.mark.parametrize(
    ('longitude', 'expected'),
    [(0.0, 0.0), (190.0, -170.0), (-190.0, 170.0), (180.0, -180.0), (540.0, -180.0), (359.5, -0.5)],
)
def test_normalize_longitude(longitude: float, expected: float) -> None:
    assert normalize_longitude(longitude) == pytest.approx(expected)
    assert Observer(0.0, longitude).longitude_deg == pytest.approx(expected)


def test_negative_elevation_clamped(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger='sunmoon_tools.params'):
        observer = Observer(10.0, 20.0, -50.0)
    assert observer.elevation_m == 0.0
    assert 'clamped' in caplog.text


def test_observer_is_frozen() -> None:
    observer = Observer(10.0, 20.0)
    with pytest.raises(AttributeError):
        observer.latitude_deg = 5.0  # type: ignore[misc]


def test_observer_parse() -> None:
    """Coordinates may be given as 'deg min sec' strings with hemisphere letters."""
    observer = Observer.parse('33 20 0', '44 25 0', 30.0)
    assert observer.latitude_deg == pytest.approx(33.333333, abs=1e-6)
    assert observer.longitude_deg == pytest.approx(44.416667, abs=1e-6)
    assert observer.elevation_m == 30.0

    south_west = Observer.parse('54 56 S', '67 37 W')
    assert south_west.latitude_deg == pytest.approx(-54.933333, abs=1e-6)
    assert south_west.longitude_deg == pytest.approx(-67.616667, abs=1e-6)


def test_observer_parse_rejects_garbage() -> None:
    with pytest.raises(ValueError, match='Invalid latitude'):
        Observer.parse('north', '10')
    with pytest.raises(ValueError, match='Invalid longitude'):
        Observer.parse('10', '1 2 3 4')
