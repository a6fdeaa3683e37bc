"""Circular helix climbing along +Z."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import ClassVar

from ..linalg import ORIGIN, Point3, Tangent3
from .curve import Curve, CurveKind


@dataclass(frozen=True)
class Helix(Curve):
    """Helix of ``radius`` rising ``pitch`` along Z per full turn.

    Parameters
    ----------
    center:
        Point the helix axis passes through at ``t = 0``.
    radius:
        Radius of the projected circle.
    pitch:
        Height gained when ``t`` advances by ``2π``.
    """

    center: Point3 = field(default=ORIGIN)
    radius: float = 0.0
    pitch: float = 0.0

    kind: ClassVar[CurveKind] = CurveKind.HELIX

    @property
    def rise_per_radian(self) -> float:
        return self.pitch / (2 * math.pi)

    def evaluate(self, t: float) -> Point3:
        c = self.center
        return Point3(
            c.x + self.radius * math.cos(t),
            c.y + self.radius * math.sin(t),
            c.z + t * self.rise_per_radian,
        )

    def derivative(self, t: float) -> Tangent3:
        return Tangent3(
            -self.radius * math.sin(t),
            self.radius * math.cos(t),
            self.rise_per_radian,
        )
