"""Angle parsing (degrees, minutes, seconds) for observer coordinates."""

from __future__ import annotations

import re


def parse_angle(string: str) -> float | None:
    """Parse an angle given as degrees, minutes and seconds.

    Accepts three numbers (deg, min, sec), two (deg, min) or one (deg).
    Minutes and seconds must be non-negative. A leading minus makes the
    whole angle negative ("-0 30" is -0.5). A trailing hemisphere letter
    (N/E positive, S/W negative) is also accepted.

    Parameters:
        string: Whitespace-separated numbers (e.g. "50 56 17" or "-6 57.4").

    Returns:
        Angle in degrees, or None on parse failure.
    """
    s = string.strip()
    if len(s) == 0:
        return None
    sign = 1.0
    if s[-1].upper() in 'NSEW':
        if s[-1].upper() in 'SW':
            sign = -1.0
        s = s[:-1].strip()
        if len(s) == 0:
            return None
    parts = re.split(r'\s+', s)
    if len(parts) > 3:
        return None
    try:
        values = [float(p) for p in parts]
    except ValueError:
        return None
    if any(v < 0 for v in values[1:]):
        return None
    angle = abs(values[0])
    if len(values) >= 2:
        angle += values[1] / 60.0
    if len(values) == 3:
        angle += values[2] / 3600.0
    if s[0] == '-':
        angle = -angle
    return sign * angle
