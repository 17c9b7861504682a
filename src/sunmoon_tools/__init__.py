"""Sun and Moon ephemeris tools.

Closed-form position models of the Sun and the Moon, and the searches built
on them:
- Sun and Moon positions and Moon illumination at an instant
- Sunrise, sunset, noon, nadir and twilight times
- Moonrise, moonset and lunar culminations
- Instants of moon phases

rms-julian is used for calendar day conversions and numpy for the frame
rotation matrices.
"""

from sunmoon_tools.moon_illumination import MoonIllumination, compute_moon_illumination
from sunmoon_tools.moon_phase import MoonPhase, Phase, compute_moon_phase
from sunmoon_tools.moon_position import MoonPosition, compute_moon_position
from sunmoon_tools.moon_times import MoonTimes, compute_moon_times
from sunmoon_tools.params import Observer
from sunmoon_tools.sun_position import SunPosition, compute_sun_position
from sunmoon_tools.sun_times import SunTimes, Twilight, compute_sun_times
from sunmoon_tools.time_utils import JulianDate, Unit

__all__ = [
    'JulianDate',
    'MoonIllumination',
    'MoonPhase',
    'MoonPosition',
    'MoonTimes',
    'Observer',
    'Phase',
    'SunPosition',
    'SunTimes',
    'Twilight',
    'Unit',
    'compute_moon_illumination',
    'compute_moon_phase',
    'compute_moon_position',
    'compute_moon_times',
    'compute_sun_position',
    'compute_sun_times',
]
