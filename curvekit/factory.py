"""Random curve generation."""

from __future__ import annotations

import logging

import numpy as np

from .geom import Circle, Curve, CurveKind, Ellipse, Helix
from .linalg import Point3
from .types import FactoryConfig

log = logging.getLogger("curvekit.factory")

_KINDS = (CurveKind.CIRCLE, CurveKind.ELLIPSE, CurveKind.HELIX)


class CurveFactory:
    """Builds randomly typed, randomly parameterised curves.

    The generator is created once (from ``config.seed`` when ``rng`` is not
    given) and consumed sequentially; it is never reseeded.
    """

    def __init__(self, rng: np.random.Generator | None = None, config: FactoryConfig | None = None):
        self.config = config or FactoryConfig()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)

    def _uniform(self) -> float:
        return float(self.rng.uniform(self.config.low, self.config.high))

    def _shape(self) -> float:
        # shape parameters are folded to be non-negative, offsets stay signed
        return abs(self._uniform())

    def _center(self) -> Point3:
        return Point3(self._uniform(), self._uniform(), self._uniform())

    def generate(self) -> Curve:
        kind = _KINDS[int(self.rng.integers(len(_KINDS)))]
        center = self._center()
        if kind is CurveKind.CIRCLE:
            curve: Curve = Circle(center, self._shape())
        elif kind is CurveKind.ELLIPSE:
            curve = Ellipse(center, self._shape(), self._shape())
        else:
            curve = Helix(center, self._shape(), self._shape())
        log.debug("generated %s", curve)
        return curve

    def generate_many(self, n: int) -> list[Curve]:
        if n < 0:
            raise ValueError("n must be >= 0")
        return [self.generate() for _ in range(n)]


__all__ = ["CurveFactory"]
