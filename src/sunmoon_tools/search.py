"""Event search: rise, set, transit and antitransit of a body, and phase crossings.

The altitude search samples a corrected altitude (altitude minus the
threshold the event is defined by) every hour, fits a parabola through each
triple of samples and reads crossings and extrema from it. The phase search
scans a wrapped angle in coarse steps until it brackets an ascending zero
crossing, then hands the bracket to the Pegasus root finder.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable

from sunmoon_tools.constants import ONE_DAY_HOURS, TRANSIT_FRAME_HOURS, TRANSIT_REFINE_DEPTH
from sunmoon_tools.roots import (
    MaxIterationsExceededError,
    QuadraticInterpolation,
    pegasus,
    readjust_max,
    readjust_min,
)
from sunmoon_tools.time_utils import JulianDate

logger = logging.getLogger(__name__)

# Coarse phase scan gives up after this many steps.
MAX_SCAN_STEPS = 100

AltitudeFunction = Callable[[JulianDate], float]


@dataclass(frozen=True)
class EventSearchResult:
    """Outcome of one altitude search, in hours after the search start.

    A field is None when the event does not happen inside the search window.
    always_up / always_down describe the first day of the window (or the
    whole window if it is shorter than a day): they are set when the body
    neither rises nor sets during that span, even if a longer window finds a
    crossing later on.
    """

    rise: float | None = None
    set: float | None = None
    transit: float | None = None
    antitransit: float | None = None
    always_up: bool = False
    always_down: bool = False


def find_events(
    jd: JulianDate,
    altitude: AltitudeFunction,
    limit_hours: float,
    *,
    with_transits: bool = True,
) -> EventSearchResult:
    """Search rise, set and (optionally) transit and antitransit times.

    Parameters:
        jd: Start of the search window.
        altitude: Corrected altitude at an instant; positive means "up".
        limit_hours: Length of the search window in hours.
        with_transits: Also locate the altitude maximum and minimum.

    Returns:
        EventSearchResult with hour offsets relative to jd.

    Raises:
        ValueError: If limit_hours is not positive.
    """
    if not limit_hours > 0.0:
        raise ValueError(f'Search window must be positive, got {limit_hours!r} hours')

    def y(hour: float) -> float:
        return altitude(jd.at_hour(hour))

    max_hours = int(math.ceil(limit_hours))
    classify_hours = min(limit_hours, ONE_DAY_HOURS)

    rise: float | None = None
    set_: float | None = None
    transit: float | None = None
    antitransit: float | None = None
    always_up = False
    always_down = False
    classified = False

    hour = 0
    y_minus = y(hour - 1.0)
    y_0 = y(hour)
    y_plus = y(hour + 1.0)
    up_at_start = y_0 > 0.0

    def in_window(t: float) -> bool:
        return 0.0 <= t < limit_hours

    while hour <= max_hours:
        qi = QuadraticInterpolation(y_minus, y_0, y_plus)

        if qi.number_of_roots == 1:
            rt = qi.root1 + hour
            # A zero on the left sample was counted by the previous step; its
            # direction comes from the right sample.
            ascending = y_minus < 0.0 or (y_minus == 0.0 and y_plus > 0.0)
            if ascending:
                if rise is None and in_window(rt):
                    rise = rt
            elif set_ is None and in_window(rt):
                set_ = rt
        elif qi.number_of_roots == 2:
            # The sign of the extremum tells which crossing ascends.
            if rise is None:
                rt = hour + (qi.root2 if qi.ye < 0.0 else qi.root1)
                if in_window(rt):
                    rise = rt
            if set_ is None:
                rt = hour + (qi.root1 if qi.ye < 0.0 else qi.root2)
                if in_window(rt):
                    set_ = rt

        if with_transits and abs(qi.xe) <= 1.0:
            xe_hour = qi.xe + hour
            if xe_hour >= 0.0:
                if qi.is_maximum:
                    if transit is None:
                        transit = xe_hour
                elif antitransit is None:
                    antitransit = xe_hour

        if not classified and hour + 1.0 >= classify_hours:
            classified = True
            if rise is None and set_ is None:
                always_up = up_at_start
                always_down = not up_at_start

        if rise is not None and set_ is not None:
            if not with_transits or (transit is not None and antitransit is not None):
                break

        hour += 1
        y_minus = y_0
        y_0 = y_plus
        y_plus = y(hour + 1.0)

    if not classified and rise is None and set_ is None:
        always_up = up_at_start
        always_down = not up_at_start

    if transit is not None:
        transit = readjust_max(transit, TRANSIT_FRAME_HOURS, TRANSIT_REFINE_DEPTH, y)
        if not in_window(transit):
            transit = None
    if antitransit is not None:
        antitransit = readjust_min(antitransit, TRANSIT_FRAME_HOURS, TRANSIT_REFINE_DEPTH, y)
        if not in_window(antitransit):
            antitransit = None

    logger.debug(
        'Event search from %s over %.1f h: rise=%s set=%s transit=%s antitransit=%s up=%s down=%s',
        jd.instant.isoformat(),
        limit_hours,
        rise,
        set_,
        transit,
        antitransit,
        always_up,
        always_down,
    )
    return EventSearchResult(
        rise=rise,
        set=set_,
        transit=transit,
        antitransit=antitransit,
        always_up=always_up,
        always_down=always_down,
    )


def find_ascending_root(
    start: float,
    step: float,
    accuracy: float,
    func: Callable[[float], float],
    *,
    max_steps: int = MAX_SCAN_STEPS,
) -> float:
    """Find the first ascending zero crossing of func after start.

    func is scanned in steps of `step` until two consecutive values bracket a
    root with func increasing; the bracket is then refined with Pegasus.

    Parameters:
        start: Start of the scan.
        step: Scan step (same unit as start).
        accuracy: Accuracy of the refined root.
        func: Continuous function, apart from wrap-around jumps downwards.
        max_steps: Give up after this many scan steps.

    Returns:
        Location of the root.

    Raises:
        MaxIterationsExceededError: No bracket found within max_steps, or the
            refinement did not converge.
    """
    t0 = start
    t1 = t0 + step
    d0 = func(t0)
    d1 = func(t1)
    steps = 1
    while d0 * d1 > 0.0 or d1 < d0:
        if steps >= max_steps:
            raise MaxIterationsExceededError(
                f'No ascending zero crossing within {max_steps} steps of {step!r} after {start!r}'
            )
        t0, d0 = t1, d1
        t1 += step
        d1 = func(t1)
        steps += 1
    logger.debug('Root bracketed in [%r, %r] after %d steps', t0, t1, steps)
    if d0 == 0.0:
        return t0
    if d1 == 0.0:
        return t1
    return pegasus(t0, t1, accuracy, func)
