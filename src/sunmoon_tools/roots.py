"""Scalar root finding and extremum location.

- pegasus: bracketed root finder (false position with the Pegasus modification).
- QuadraticInterpolation: parabola through three equally spaced samples.
- readjust_max / readjust_min: bisection refinement of a local extremum.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable

MAX_ITERATIONS = 30

ScalarFunction = Callable[[float], float]


class RootFindingError(ArithmeticError):
    """Root finder could not produce a root."""


class NoRootInBracketError(RootFindingError):
    """The function has the same sign at both ends of the bracket."""


class MaxIterationsExceededError(RootFindingError):
    """The bracket did not shrink to the requested accuracy in MAX_ITERATIONS steps."""


def pegasus(lower: float, upper: float, accuracy: float, func: ScalarFunction) -> float:
    """Find a root of func within [lower, upper] (Pegasus method).

    Parameters:
        lower: Lower bracket bound.
        upper: Upper bracket bound.
        accuracy: Stop when the bracket is at most this wide.
        func: Function to find the root of.

    Returns:
        The bracket end with the smaller absolute function value.

    Raises:
        NoRootInBracketError: func(lower) and func(upper) do not differ in sign.
        MaxIterationsExceededError: No convergence within MAX_ITERATIONS steps.
    """
    x1 = lower
    x2 = upper
    f1 = func(x1)
    f2 = func(x2)

    if f1 * f2 >= 0.0:
        raise NoRootInBracketError(
            f'No root within the given boundaries [{lower!r}, {upper!r}] '
            f'(f={f1!r}, {f2!r})'
        )

    for _ in range(MAX_ITERATIONS):
        x3 = x2 - f2 / ((f2 - f1) / (x2 - x1))
        f3 = func(x3)

        if f3 * f2 <= 0.0:
            x1, f1 = x2, f2
            x2, f2 = x3, f3
        else:
            f1 = f1 * f2 / (f2 + f3)
            x2, f2 = x3, f3

        if abs(x2 - x1) <= accuracy:
            return x1 if abs(f1) < abs(f2) else x2

    raise MaxIterationsExceededError(
        f'Maximum number of iterations ({MAX_ITERATIONS}) exceeded in [{lower!r}, {upper!r}]'
    )


@dataclass(frozen=True)
class QuadraticInterpolation:
    """Parabola through y(-1) = y_minus, y(0) = y0, y(+1) = y_plus.

    Attributes:
        xe: X of the extremum (NaN if the samples lie on a line).
        ye: Y of the extremum (NaN if the samples lie on a line).
        number_of_roots: Number of roots within [-1, 1] (0, 1 or 2).
        is_maximum: True if the extremum is a maximum.
    """

    y_minus: float
    y0: float
    y_plus: float
    xe: float = field(init=False)
    ye: float = field(init=False)
    number_of_roots: int = field(init=False)
    is_maximum: bool = field(init=False)
    _root1: float = field(init=False, repr=False)
    _root2: float = field(init=False, repr=False)

    def __post_init__(self) -> None:
        a = 0.5 * (self.y_plus + self.y_minus) - self.y0
        b = 0.5 * (self.y_plus - self.y_minus)
        c = self.y0

        xe = ye = root1 = root2 = math.nan
        if a == 0.0:
            # Straight line: no extremum, at most one root.
            if b != 0.0:
                root1 = root2 = -c / b
        else:
            xe = -b / (2.0 * a)
            ye = (a * xe + b) * xe + c
            dis = b * b - 4.0 * a * c
            if dis >= 0.0:
                dx = 0.5 * math.sqrt(dis) / abs(a)
                root1 = xe - dx
                root2 = xe + dx

        if a == 0.0:
            roots = 1 if abs(root1) <= 1.0 else 0
        else:
            roots = int(abs(root1) <= 1.0) + int(abs(root2) <= 1.0)

        object.__setattr__(self, 'xe', xe)
        object.__setattr__(self, 'ye', ye)
        object.__setattr__(self, 'number_of_roots', roots)
        object.__setattr__(self, 'is_maximum', a < 0.0)
        object.__setattr__(self, '_root1', root1)
        object.__setattr__(self, '_root2', root2)

    @property
    def root1(self) -> float:
        """First root; the second one if the first lies left of -1."""
        return self._root2 if self._root1 < -1.0 else self._root1

    @property
    def root2(self) -> float:
        return self._root2


def readjust_max(time: float, frame: float, depth: int, func: ScalarFunction) -> float:
    """Refine the location of a local maximum of func near time.

    Parameters:
        time: Approximate location of the maximum.
        frame: Half width of the search interval around time.
        depth: Number of bisection steps.
        func: Function to maximize.

    Returns:
        Refined location.
    """
    left = time - frame
    right = time + frame
    return _readjust_interval(left, right, func(left), func(right), depth, func, lambda yl, yr: yl < yr)


def readjust_min(time: float, frame: float, depth: int, func: ScalarFunction) -> float:
    """Refine the location of a local minimum of func near time (see readjust_max)."""
    left = time - frame
    right = time + frame
    return _readjust_interval(left, right, func(left), func(right), depth, func, lambda yl, yr: yr < yl)


def _readjust_interval(
    left: float,
    right: float,
    yl: float,
    yr: float,
    depth: int,
    func: ScalarFunction,
    prefer_right: Callable[[float, float], bool],
) -> float:
    while depth > 0:
        middle = (left + right) / 2.0
        ym = func(middle)
        if prefer_right(yl, yr):
            left, yl = middle, ym
        else:
            right, yr = middle, ym
        depth -= 1
    return right if prefer_right(yl, yr) else left
