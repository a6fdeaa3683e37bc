from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import ClassVar, Iterable

import numpy as np

from ..linalg import Point3, Tangent3


class CurveKind(str, Enum):
    CIRCLE = "circle"
    ELLIPSE = "ellipse"
    HELIX = "helix"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class Curve(ABC):
    """Abstract parametric curve in 3D.

    ``t`` is an unrestricted real parameter, radians for the angular part.
    Subclasses set ``kind`` so callers can switch on the variant without
    inspecting the concrete class.
    """

    kind: ClassVar[CurveKind]
    center: Point3

    @abstractmethod
    def evaluate(self, t: float) -> Point3:
        """Return the point on the curve at parameter ``t``."""
        raise NotImplementedError

    @abstractmethod
    def derivative(self, t: float) -> Tangent3:
        """Return the first derivative with respect to ``t``."""
        raise NotImplementedError

    def sample(self, t: float) -> tuple[Point3, Tangent3]:
        return self.evaluate(t), self.derivative(t)

    def points(self, ts: Iterable[float]) -> np.ndarray:
        """Evaluate positions for every parameter in ``ts`` as an (N, 3) array."""
        ts = np.asarray(list(ts), dtype=float)
        if ts.size == 0:
            return np.zeros((0, 3))
        return np.array([self.evaluate(float(t)).to_array() for t in ts])


def finite_difference(curve: Curve, t: float, eps: float = 1e-6) -> Tangent3:
    """Central-difference estimate of ``curve.derivative(t)``."""
    return (curve.evaluate(t + eps) - curve.evaluate(t - eps)) / (2.0 * eps)
