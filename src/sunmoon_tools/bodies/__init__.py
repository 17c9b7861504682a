"""Closed-form position models of the Sun and the Moon."""

from sunmoon_tools.bodies.base import Body
from sunmoon_tools.bodies.moon import MOON, moon_position_equatorial
from sunmoon_tools.bodies.sun import SUN, sun_position_equatorial

__all__ = [
    'MOON',
    'SUN',
    'Body',
    'moon_position_equatorial',
    'sun_position_equatorial',
]
