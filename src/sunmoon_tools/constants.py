"""Fixed constants: time units, angles, earth and body radii, search limits."""

import math

# Time: seconds per unit (for window conversion and truncation)
SECONDS_PER_MINUTE = 60.0
SECONDS_PER_HOUR = 3600.0
SECONDS_PER_DAY = 86400.0

# Julian dates
MJD_J1970 = 40587.0  # MJD of the Unix epoch 1970-01-01T00:00Z
MJD_J2000_DAY = 51544.0  # MJD of 2000-01-01T00:00Z (rms-julian day 0)
MJD_J2000 = 51544.5  # MJD of J2000.0 (2000-01-01T12:00 TT)
DAYS_PER_CENTURY = 36525.0
DAYS_PER_ANOMALISTIC_YEAR = 365.256363

# Angle
PI2 = 2.0 * math.pi
DEGREES_PER_CIRCLE = 360.0
HALF_CIRCLE_DEGREES = 180.0
ARCS = math.degrees(3600.0)  # arc-seconds per radian

# Apparent refraction at the horizon (radians)
APPARENT_REFRACTION = math.pi / (math.tan(math.radians(7.31 / 4.4)) * 10800.0)

# Radii and distances (kilometers)
EARTH_MEAN_RADIUS = 6371.0
SUN_DISTANCE = 149598000.0
SUN_MEAN_RADIUS = 695700.0
MOON_MEAN_RADIUS = 1737.1

# Moon distance thresholds for super/micro moons (kilometers)
SUPER_MOON_DISTANCE = 360000.0
MICRO_MOON_DISTANCE = 405000.0

# Search windows (hours)
ONE_DAY_HOURS = 24.0
FULL_CYCLE_HOURS = 365.0 * 24.0
DEFAULT_SEARCH_DAYS = FULL_CYCLE_HOURS / ONE_DAY_HOURS

# Refinement of transit/antitransit (hours, bisection depth)
TRANSIT_FRAME_HOURS = 2.0
TRANSIT_REFINE_DEPTH = 14
