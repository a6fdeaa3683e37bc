import math

import pytest

from curvekit.geom import Circle, CurveKind, Ellipse, Helix, finite_difference
from curvekit.linalg import ORIGIN, Point3, Tangent3

SAMPLE_TS = [0.0, math.pi / 4, math.pi / 2, math.pi, 3 * math.pi / 2, -2.5, 7.0]

CURVES = [
    Circle(Point3(1.0, -2.0, 3.0), 2.5),
    Ellipse(Point3(-4.0, 0.5, 1.0), 3.0, 1.25),
    Helix(Point3(0.0, 0.0, -1.0), 1.5, 4.0),
    Circle(),
    Helix(radius=0.0, pitch=2.0),
]


@pytest.mark.parametrize("curve", CURVES, ids=lambda c: type(c).__name__)
@pytest.mark.parametrize("t", SAMPLE_TS)
def test_derivative_matches_finite_difference(curve, t):
    analytic = curve.derivative(t)
    numeric = finite_difference(curve, t)
    assert analytic.isclose(numeric, abs_tol=1e-5)


def test_circle_known_values():
    c = Circle(ORIGIN, 2.0)
    assert c.evaluate(0.0).isclose(Point3(2.0, 0.0, 0.0))
    assert c.evaluate(math.pi / 2).isclose(Point3(0.0, 2.0, 0.0))
    assert c.derivative(0.0).isclose(Tangent3(0.0, 2.0, 0.0))


def test_circle_center_offset():
    c = Circle(Point3(1.0, 1.0, 5.0), 1.0)
    p = c.evaluate(math.pi)
    assert p.isclose(Point3(0.0, 1.0, 5.0))


def test_ellipse_known_values():
    e = Ellipse(ORIGIN, 3.0, 1.0)
    assert e.evaluate(0.0).isclose(Point3(3.0, 0.0, 0.0))
    assert e.evaluate(math.pi / 2).isclose(Point3(0.0, 1.0, 0.0))
    assert e.derivative(math.pi / 2).isclose(Tangent3(-3.0, 0.0, 0.0))


def test_helix_full_turn_advances_by_pitch():
    h = Helix(ORIGIN, 1.0, 2 * math.pi)
    # one turn climbs exactly one pitch
    assert h.evaluate(2 * math.pi).isclose(Point3(1.0, 0.0, 2 * math.pi))
    assert Helix(ORIGIN, 1.0, 1.0).evaluate(2 * math.pi).isclose(Point3(1.0, 0.0, 1.0))
    for t in SAMPLE_TS:
        assert h.derivative(t).z == pytest.approx(1.0)


def test_helix_pitch_is_height_per_turn():
    h = Helix(Point3(0.0, 0.0, 2.0), 3.0, 5.0)
    dz = h.evaluate(1.0 + 2 * math.pi).z - h.evaluate(1.0).z
    assert dz == pytest.approx(5.0)
    assert h.rise_per_radian == pytest.approx(5.0 / (2 * math.pi))


def test_degenerate_curves_do_not_raise():
    assert Circle().evaluate(1.23) == ORIGIN
    assert Ellipse(ORIGIN, 0.0, 0.0).derivative(4.0) == Tangent3(0.0, 0.0, 0.0)
    h = Helix(ORIGIN, 0.0, 1.0)
    assert h.evaluate(math.pi).isclose(Point3(0.0, 0.0, 0.5))


def test_kind_tags():
    assert Circle().kind is CurveKind.CIRCLE
    assert Ellipse().kind is CurveKind.ELLIPSE
    assert Helix().kind is CurveKind.HELIX
    assert CurveKind.HELIX.label == "Helix"


def test_sample_and_points():
    c = Circle(ORIGIN, 1.0)
    p, d = c.sample(0.0)
    assert p.isclose(Point3(1.0, 0.0, 0.0))
    assert d.isclose(Tangent3(0.0, 1.0, 0.0))
    pts = c.points([0.0, math.pi / 2, math.pi])
    assert pts.shape == (3, 3)
    assert pts[2][0] == pytest.approx(-1.0)
    assert c.points([]).shape == (0, 3)


def test_evaluation_returns_fresh_values():
    c = Circle(ORIGIN, 1.0)
    assert c.evaluate(0.5) == c.evaluate(0.5)
    assert c.evaluate(0.5) is not c.evaluate(0.5)
