"""Point and tangent value types for curvekit.

Positions and first derivatives share the same three components but are kept
as separate classes so a tangent is never mistaken for a location. Only the
affine combinations that make sense are defined: a point plus a tangent is a
point, the difference of two points is a tangent, and tangents form a vector
space. Adding two points raises ``TypeError``.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass

import numpy as np

ABS_TOL = 1e-9


@dataclass(frozen=True)
class Tangent3:
    x: float
    y: float
    z: float

    # numpy defers to our operators instead of broadcasting over the object
    __array_ufunc__ = None

    def __add__(self, other: "Tangent3") -> "Tangent3":
        if not isinstance(other, Tangent3):
            return NotImplemented
        return Tangent3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Tangent3") -> "Tangent3":
        if not isinstance(other, Tangent3):
            return NotImplemented
        return Tangent3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> "Tangent3":
        if isinstance(scalar, bool) or not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Tangent3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Tangent3":
        if isinstance(scalar, bool) or not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Tangent3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> "Tangent3":
        return Tangent3(-self.x, -self.y, -self.z)

    def dot(self, other: "Tangent3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def norm(self) -> float:
        return math.sqrt(self.dot(self))

    def isclose(self, other: "Tangent3", abs_tol: float = ABS_TOL) -> bool:
        return _isclose3(self, other, abs_tol)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)


@dataclass(frozen=True)
class Point3:
    x: float
    y: float
    z: float

    def __add__(self, other: Tangent3) -> "Point3":
        # translation only; Point3 + Point3 has no meaning
        if not isinstance(other, Tangent3):
            return NotImplemented
        return Point3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        if isinstance(other, Point3):
            return Tangent3(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Tangent3):
            return Point3(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def distance_to(self, other: "Point3") -> float:
        return (self - other).norm()

    def isclose(self, other: "Point3", abs_tol: float = ABS_TOL) -> bool:
        return _isclose3(self, other, abs_tol)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)


def _isclose3(a, b, abs_tol: float) -> bool:
    if type(a) is not type(b):
        return False
    return (
        math.isclose(a.x, b.x, abs_tol=abs_tol)
        and math.isclose(a.y, b.y, abs_tol=abs_tol)
        and math.isclose(a.z, b.z, abs_tol=abs_tol)
    )


ORIGIN = Point3(0.0, 0.0, 0.0)


__all__ = ["ABS_TOL", "ORIGIN", "Point3", "Tangent3"]
