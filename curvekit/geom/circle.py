"""Circle in a plane parallel to XY."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import ClassVar

from ..linalg import ORIGIN, Point3, Tangent3
from .curve import Curve, CurveKind


@dataclass(frozen=True)
class Circle(Curve):
    center: Point3 = field(default=ORIGIN)
    radius: float = 0.0

    kind: ClassVar[CurveKind] = CurveKind.CIRCLE

    def evaluate(self, t: float) -> Point3:
        """x = x0 + r cos t, y = y0 + r sin t, z = z0."""
        c = self.center
        return Point3(
            c.x + self.radius * math.cos(t),
            c.y + self.radius * math.sin(t),
            c.z,
        )

    def derivative(self, t: float) -> Tangent3:
        return Tangent3(-self.radius * math.sin(t), self.radius * math.cos(t), 0.0)
