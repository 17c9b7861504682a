"""Tests for degrees/minutes/seconds parsing."""

from __future__ import annotations

import pytest

from sunmoon_tools.angle_utils import parse_angle


@pytest.mark.parametrize(
    ('text', 'expected'),
    [
        ('0', 0.0),
        ('13 27 4.32', 13.4512),
        ('-88 39 8.28', -88.6523),
        ('-0 30', -0.5),
        ('6.956944', 6.956944),
        ('50 56 17 N', 50.938056),
        ('62 19 W', -62.316667),
        ('41 17.25 S', -41.2875),
    ],
)
def test_parse_angle(text: str, expected: float) -> None:
    result = parse_angle(text)
    assert result is not None
    assert result == pytest.approx(expected, abs=1e-6)


@pytest.mark.parametrize('text', ['', '   ', 'N', 'abc', '1 2 3 4', '14 -14 2.4', '66 12 -46.8'])
def test_parse_angle_rejects(text: str) -> None:
    assert parse_angle(text) is None
