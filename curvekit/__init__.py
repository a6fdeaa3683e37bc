"""Parametric 3D curves and a filter/aggregate/sort pipeline over them."""

__all__ = [
    "Point3",
    "Tangent3",
    "ORIGIN",
    "Curve",
    "CurveKind",
    "Circle",
    "Ellipse",
    "Helix",
    "finite_difference",
    "CurveFactory",
    "FactoryConfig",
    "PipelineConfig",
    "PipelineReport",
    "CurveSample",
    "run_pipeline",
    "format_report",
]

from .factory import CurveFactory
from .geom import Circle, Curve, CurveKind, Ellipse, Helix, finite_difference
from .linalg import ORIGIN, Point3, Tangent3
from .pipeline import run_pipeline
from .report import format_report
from .types import CurveSample, FactoryConfig, PipelineConfig, PipelineReport
