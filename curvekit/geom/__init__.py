"""Parametric curve variants for curvekit."""

from .circle import Circle
from .curve import Curve, CurveKind, finite_difference
from .ellipse import Ellipse
from .helix import Helix

__all__ = [
    "Curve",
    "CurveKind",
    "Circle",
    "Ellipse",
    "Helix",
    "finite_difference",
]
