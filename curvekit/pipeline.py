"""Filter / aggregate / sort pipeline over a mixed collection of curves.

The primary sequence holds every generated curve in generation order. The
secondary sequence holds the very same circle objects (no copies), picked out
by their ``kind`` tag. The radius sum is taken before sorting.
"""

from __future__ import annotations

import logging
from typing import Iterable, Protocol, Sequence

from .factory import CurveFactory
from .geom import Circle, Curve, CurveKind
from .types import CurveSample, PipelineConfig, PipelineReport

log = logging.getLogger("curvekit.pipeline")


class CurveSource(Protocol):
    def generate(self) -> Curve: ...


def populate(source: CurveSource, count: int) -> list[Curve]:
    """Call ``source.generate()`` ``count`` times, keeping generation order."""
    if count < 0:
        raise ValueError("count must be >= 0")
    curves: list[Curve] = []
    for _ in range(count):
        curves.append(source.generate())
    return curves


def evaluate_all(curves: Iterable[Curve], t: float) -> list[CurveSample]:
    return [CurveSample(c.kind, t, c.evaluate(t), c.derivative(t)) for c in curves]


def filter_kind(curves: Iterable[Curve], kind: CurveKind) -> list[Curve]:
    """Stable filter on the variant tag."""
    return [c for c in curves if c.kind is kind]


def filter_circles(curves: Iterable[Curve]) -> list[Circle]:
    return filter_kind(curves, CurveKind.CIRCLE)  # type: ignore[return-value]


def sum_radii(circles: Iterable[Circle]) -> float:
    total = 0.0
    for c in circles:
        total += c.radius
    return total


def _radius(circle: Circle) -> float:
    return circle.radius


def sort_by_radius(circles: list[Circle]) -> None:
    """Sort ``circles`` in place by ascending radius."""
    circles.sort(key=_radius)


def is_sorted_by_radius(circles: Sequence[Circle]) -> bool:
    return all(a.radius <= b.radius for a, b in zip(circles, circles[1:]))


def run_pipeline(
    config: PipelineConfig | None = None, source: CurveSource | None = None
) -> PipelineReport:
    """Populate, evaluate, filter, aggregate and sort in that order."""
    cfg = config or PipelineConfig()
    if source is None:
        source = CurveFactory(config=cfg.factory)

    curves = populate(source, cfg.count)
    log.info("generated %d curves", len(curves))

    samples = evaluate_all(curves, float(cfg.parameter))

    circles = filter_circles(curves)
    radius_sum = sum_radii(circles)
    log.info("%d circles, radius sum %.6g", len(circles), radius_sum)

    sort_by_radius(circles)
    return PipelineReport(curves=curves, samples=samples, circles=circles, radius_sum=radius_sum)


__all__ = [
    "CurveSource",
    "populate",
    "evaluate_all",
    "filter_kind",
    "filter_circles",
    "sum_radii",
    "sort_by_radius",
    "is_sorted_by_radius",
    "run_pipeline",
]
