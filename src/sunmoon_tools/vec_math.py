"""Cartesian/polar 3-vectors and 3x3 rotation matrices."""

from __future__ import annotations

import math
from typing import overload

import numpy as np

from sunmoon_tools.constants import PI2


def is_zero(d: float) -> bool:
    """True for exactly 0.0 or -0.0 (not for 'almost zero' and not for NaN)."""
    return d == 0.0


class Vector:
    """Immutable 3-vector with its polar form (phi, theta, r).

    phi is the azimuthal angle in [0, 2*pi), theta the polar (elevation)
    angle in [-pi/2, pi/2], r the length. The polar form is computed at
    construction; vectors built with of_polar keep the given angles.
    """

    __slots__ = ('_x', '_y', '_z', '_phi', '_theta', '_r')

    def __init__(self, x: float, y: float, z: float) -> None:
        x, y, z = float(x), float(y), float(z)
        rho_sqr = x * x + y * y
        phi = 0.0 if is_zero(x) and is_zero(y) else math.atan2(y, x)
        if phi < 0.0:
            phi += PI2
        if phi >= PI2:
            phi = 0.0
        theta = 0.0 if is_zero(z) and is_zero(rho_sqr) else math.atan2(z, math.sqrt(rho_sqr))
        self._set(x, y, z, phi, theta, math.sqrt(rho_sqr + z * z))

    def _set(self, x: float, y: float, z: float, phi: float, theta: float, r: float) -> None:
        object.__setattr__(self, '_x', x)
        object.__setattr__(self, '_y', y)
        object.__setattr__(self, '_z', z)
        object.__setattr__(self, '_phi', phi)
        object.__setattr__(self, '_theta', theta)
        object.__setattr__(self, '_r', r)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f'{type(self).__name__} is immutable')

    @classmethod
    def of_polar(cls, phi: float, theta: float, r: float = 1.0) -> Vector:
        """Build a vector from azimuth phi, elevation theta and length r (radians)."""
        cos_theta = math.cos(theta)
        vec = cls.__new__(cls)
        wrapped = math.fmod(phi, PI2)
        if wrapped < 0.0:
            wrapped += PI2
        if wrapped >= PI2:
            wrapped = 0.0
        vec._set(
            r * math.cos(phi) * cos_theta,
            r * math.sin(phi) * cos_theta,
            r * math.sin(theta),
            wrapped,
            float(theta),
            float(r),
        )
        return vec

    @classmethod
    def from_array(cls, values: np.ndarray | list[float]) -> Vector:
        """Build a vector from a length-3 sequence."""
        if len(values) != 3:
            raise ValueError(f'invalid vector length {len(values)}')
        return cls(values[0], values[1], values[2])

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def z(self) -> float:
        return self._z

    @property
    def phi(self) -> float:
        return self._phi

    @property
    def theta(self) -> float:
        return self._theta

    @property
    def r(self) -> float:
        return self._r

    def as_array(self) -> np.ndarray:
        return np.array([self._x, self._y, self._z], dtype=np.float64)

    def __add__(self, other: Vector) -> Vector:
        return Vector(self._x + other._x, self._y + other._y, self._z + other._z)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self._x - other._x, self._y - other._y, self._z - other._z)

    def __mul__(self, scalar: float) -> Vector:
        return Vector(self._x * scalar, self._y * scalar, self._z * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vector:
        return Vector(-self._x, -self._y, -self._z)

    def dot(self, other: Vector) -> float:
        return self._x * other._x + self._y * other._y + self._z * other._z

    def cross(self, other: Vector) -> Vector:
        return Vector(
            self._y * other._z - self._z * other._y,
            self._z * other._x - self._x * other._z,
            self._x * other._y - self._y * other._x,
        )

    def norm(self) -> float:
        return math.sqrt(self.dot(self))

    def angle_to(self, other: Vector) -> float:
        """Angular separation between the two directions (radians); 0 if either is zero."""
        denom = self.norm() * other.norm()
        if is_zero(denom):
            return 0.0
        return math.acos(max(-1.0, min(1.0, self.dot(other) / denom)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._x == other._x and self._y == other._y and self._z == other._z

    def __hash__(self) -> int:
        return hash((self._x, self._y, self._z))

    def __repr__(self) -> str:
        return f'Vector(x={self._x!r}, y={self._y!r}, z={self._z!r})'


class Matrix:
    """Immutable 3x3 matrix (row-major numpy array), used as a rotation operator."""

    __slots__ = ('_mx',)

    def __init__(self, rows: np.ndarray | list[list[float]]) -> None:
        mx = np.array(rows, dtype=np.float64)
        if mx.shape != (3, 3):
            raise ValueError(f'Matrix must be 3x3, got shape {mx.shape}')
        mx.setflags(write=False)
        object.__setattr__(self, '_mx', mx)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f'{type(self).__name__} is immutable')

    @classmethod
    def identity(cls) -> Matrix:
        return cls(np.eye(3, dtype=np.float64))

    @classmethod
    def rotate_x(cls, angle: float) -> Matrix:
        """Rotation of the coordinate frame about the x axis."""
        s = math.sin(angle)
        c = math.cos(angle)
        return cls([
            [1.0, 0.0, 0.0],
            [0.0, c, s],
            [0.0, -s, c],
        ])

    @classmethod
    def rotate_y(cls, angle: float) -> Matrix:
        """Rotation of the coordinate frame about the y axis."""
        s = math.sin(angle)
        c = math.cos(angle)
        return cls([
            [c, 0.0, -s],
            [0.0, 1.0, 0.0],
            [s, 0.0, c],
        ])

    @classmethod
    def rotate_z(cls, angle: float) -> Matrix:
        """Rotation of the coordinate frame about the z axis."""
        s = math.sin(angle)
        c = math.cos(angle)
        return cls([
            [c, s, 0.0],
            [-s, c, 0.0],
            [0.0, 0.0, 1.0],
        ])

    @property
    def array(self) -> np.ndarray:
        """Read-only view of the matrix elements."""
        return self._mx

    def transpose(self) -> Matrix:
        return Matrix(self._mx.T)

    def negate(self) -> Matrix:
        return Matrix(-self._mx)

    def __neg__(self) -> Matrix:
        return self.negate()

    def __add__(self, other: Matrix) -> Matrix:
        return Matrix(self._mx + other._mx)

    def __sub__(self, other: Matrix) -> Matrix:
        return Matrix(self._mx - other._mx)

    @overload
    def multiply(self, right: Matrix) -> Matrix: ...

    @overload
    def multiply(self, right: Vector) -> Vector: ...

    @overload
    def multiply(self, right: float) -> Matrix: ...

    def multiply(self, right: Matrix | Vector | float) -> Matrix | Vector:
        """Matrix product with a matrix or vector, or scaling by a number."""
        if isinstance(right, Matrix):
            return Matrix(self._mx @ right._mx)
        if isinstance(right, Vector):
            return Vector.from_array(self._mx @ right.as_array())
        return Matrix(self._mx * float(right))

    def __matmul__(self, right: Matrix | Vector) -> Matrix | Vector:
        return self.multiply(right)

    def __mul__(self, scalar: float) -> Matrix:
        return Matrix(self._mx * float(scalar))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return bool(np.array_equal(self._mx, other._mx))

    def __hash__(self) -> int:
        return hash(self._mx.tobytes())

    def __repr__(self) -> str:
        return f'Matrix({self._mx.tolist()!r})'
