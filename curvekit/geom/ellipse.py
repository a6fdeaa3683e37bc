"""Axis-aligned ellipse in a plane parallel to XY."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import ClassVar

from ..linalg import ORIGIN, Point3, Tangent3
from .curve import Curve, CurveKind


@dataclass(frozen=True)
class Ellipse(Curve):
    center: Point3 = field(default=ORIGIN)
    a: float = 0.0  # semi-axis along X
    b: float = 0.0  # semi-axis along Y

    kind: ClassVar[CurveKind] = CurveKind.ELLIPSE

    def evaluate(self, t: float) -> Point3:
        """x = x0 + a cos t, y = y0 + b sin t, z = z0."""
        c = self.center
        return Point3(c.x + self.a * math.cos(t), c.y + self.b * math.sin(t), c.z)

    def derivative(self, t: float) -> Tangent3:
        return Tangent3(-self.a * math.sin(t), self.b * math.cos(t), 0.0)
