from __future__ import annotations

import numbers
from dataclasses import dataclass, field

from . import settings
from .geom import Circle, Curve, CurveKind
from .linalg import Point3, Tangent3


@dataclass(frozen=True)
class FactoryConfig:
    """Random ranges and seed for :class:`curvekit.factory.CurveFactory`."""

    low: float = settings.PARAM_LOW
    high: float = settings.PARAM_HIGH
    seed: int | None = settings.DEFAULT_SEED

    def __post_init__(self) -> None:
        if not float(self.low) < float(self.high):
            raise ValueError("low must be < high")
        if self.seed is not None and self.seed < 0:
            raise ValueError("seed must be >= 0")


@dataclass(frozen=True)
class PipelineConfig:
    """Configuration for one :func:`curvekit.pipeline.run_pipeline` call."""

    count: int = settings.DEFAULT_CURVE_COUNT
    parameter: float = settings.EVAL_PARAMETER
    factory: FactoryConfig = field(default_factory=FactoryConfig)

    def __post_init__(self) -> None:
        if isinstance(self.count, bool) or not isinstance(self.count, numbers.Integral):
            raise ValueError("count must be an integer")
        if self.count < 0:
            raise ValueError("count must be >= 0")


@dataclass(frozen=True)
class CurveSample:
    """Position and tangent of one curve at the report parameter."""

    kind: CurveKind
    t: float
    position: Point3
    tangent: Tangent3


@dataclass
class PipelineReport:
    curves: list[Curve]  # primary sequence, generation order
    samples: list[CurveSample]  # same order as curves
    circles: list[Circle]  # secondary sequence, sorted by radius
    radius_sum: float

    @property
    def radii(self) -> list[float]:
        return [c.radius for c in self.circles]


__all__ = ["FactoryConfig", "PipelineConfig", "CurveSample", "PipelineReport"]
