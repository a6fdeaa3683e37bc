"""Text rendering of a :class:`~curvekit.types.PipelineReport`."""

from __future__ import annotations

import math

from . import settings
from .types import CurveSample, PipelineReport


def _fmt(value: float, precision: int) -> str:
    return f"{value:.{precision}g}"


def _triple(v, precision: int) -> str:
    return " ".join(_fmt(c, precision) for c in (v.x, v.y, v.z))


def _angle(t: float) -> str:
    if math.isclose(t, math.pi / 4):
        return "PI/4"
    return f"{t:g}"


def format_sample(sample: CurveSample, precision: int = settings.DEFAULT_PRECISION) -> list[str]:
    at = _angle(sample.t)
    return [
        f"This is {sample.kind.label}",
        f"Coordinates of point at t = {at}: {_triple(sample.position, precision)}",
        f"Derivative at t = {at}: {_triple(sample.tangent, precision)}",
        "",
    ]


def format_report(report: PipelineReport, precision: int = settings.DEFAULT_PRECISION) -> list[str]:
    lines: list[str] = []
    for sample in report.samples:
        lines.extend(format_sample(sample, precision))
    lines.append("Sorted circle radii:")
    lines.extend(_fmt(r, precision) for r in report.radii)
    lines.append(f"Sum of radii: {_fmt(report.radius_sum, precision)}")
    return lines


__all__ = ["format_sample", "format_report"]
