"""
Tests for the algebra primitives.

Verifies:
- Point2f arithmetic, norms, polar constructors
- Mat2x2f rotations
- Rect2f containment and projection
- linesegs_distance against known layouts and shapely as a reference
"""
import math

import numpy as np
import pytest
from shapely.geometry import LineString

from algebra import Circle2f, Mat2x2f, Point2f, Rect2f, linesegs_distance


EPS = 1e-6


# ══════════════════════════════════════════════════════════════════════════
# Point2f
# ══════════════════════════════════════════════════════════════════════════

class TestPoint2f:

    def test_arithmetic(self):
        p = Point2f.from_floats(1.0, 1.0)
        assert p == Point2f(1.0, 1.0)
        p = p + Point2f(1.0, 1.0)
        assert p == Point2f(2.0, 2.0)
        p = p * 2.0
        assert p == Point2f(4.0, 4.0)
        assert p - Point2f(1.0, 3.0) == Point2f(3.0, 1.0)
        assert p / 4.0 == Point2f(1.0, 1.0)
        assert 3 * Point2f(1.0, 2.0) == Point2f(3.0, 6.0)
        assert -Point2f(1.0, -2.0) == Point2f(-1.0, 2.0)

    def test_componentwise(self):
        assert Point2f(2.0, 3.0) * Point2f(4.0, 5.0) == Point2f(8.0, 15.0)
        assert Point2f(8.0, 15.0) / Point2f(4.0, 5.0) == Point2f(2.0, 3.0)

    def test_unpacking(self):
        x, y = Point2f(1.5, -2.5)
        assert (x, y) == (1.5, -2.5)
        np.testing.assert_allclose(Point2f(1.5, -2.5).as_array(), [1.5, -2.5])

    @pytest.mark.parametrize("x,y", [(3.0, 4.0), (-1.0, 0.0), (1e-3, 2e-3), (123.4, -567.8)])
    def test_normed_has_unit_norm(self, x, y):
        assert Point2f(x, y).normed().norm() == pytest.approx(1.0, abs=EPS)

    def test_normed_zero_vector_raises(self):
        with pytest.raises(ZeroDivisionError):
            Point2f(0.0, 0.0).normed()

    def test_norm(self):
        assert Point2f(3.0, 4.0).norm() == pytest.approx(5.0)

    def test_dot(self):
        assert Point2f(1.0, 2.0).dotx(Point2f(3.0, -4.0)) == pytest.approx(-5.0)

    def test_cross(self):
        p1 = Point2f(1.0, 2.0)
        p2 = Point2f(-2.0, 1.0)
        assert p1.crossx(p2) == pytest.approx(5.0, abs=EPS)

    def test_cross_antisymmetric(self):
        rng = np.random.default_rng(7)
        for _ in range(20):
            a = Point2f(*rng.uniform(-10, 10, size=2))
            b = Point2f(*rng.uniform(-10, 10, size=2))
            assert a.crossx(b) == pytest.approx(-b.crossx(a))

    def test_polar(self):
        p = Point2f.from_polar(2.0, math.pi / 2)
        assert p.x == pytest.approx(0.0, abs=EPS)
        assert p.y == pytest.approx(2.0, abs=EPS)
        q = Point2f.from_theta(math.pi)
        assert q.x == pytest.approx(-1.0, abs=EPS)
        assert q.norm() == pytest.approx(1.0)


class TestCircle2f:

    def test_from_floats(self):
        c = Circle2f.from_floats(1.0, 2.0, 3.0)
        assert c.center == Point2f(1.0, 2.0)
        assert c.r == 3.0


# ══════════════════════════════════════════════════════════════════════════
# Mat2x2f
# ══════════════════════════════════════════════════════════════════════════

class TestMat2x2f:

    def test_quarter_turn_matrix(self):
        m = Mat2x2f.from_theta(math.pi / 2)
        # / 0 -1 \
        # \ 1  0 /
        assert abs(m.x1) < EPS
        assert abs(m.x2 + 1.0) < EPS
        assert abs(m.y1 - 1.0) < EPS
        assert abs(m.y2) < EPS

        p = m * Point2f(3.0, 4.0)
        assert abs(p.x + 4.0) < EPS
        assert abs(p.y - 3.0) < EPS

    @pytest.mark.parametrize("theta", [0.0, math.pi / 2, math.pi, 3 * math.pi / 2])
    def test_quarter_turns_exact(self, theta):
        p = Mat2x2f.from_theta(theta) @ Point2f(1.0, 0.0)
        assert p.x == pytest.approx(math.cos(theta), abs=EPS)
        assert p.y == pytest.approx(math.sin(theta), abs=EPS)

    @pytest.mark.parametrize("theta", [0.1, 1.0, 2.5, -0.7, 10.0])
    def test_arbitrary_rotation(self, theta):
        p = Point2f(2.0, -1.0)
        q = Mat2x2f.from_theta(theta) * p
        assert q.norm() == pytest.approx(p.norm())
        angle = math.atan2(p.y, p.x) + theta
        assert q.x == pytest.approx(p.norm() * math.cos(angle), abs=1e-9)
        assert q.y == pytest.approx(p.norm() * math.sin(angle), abs=1e-9)

    def test_from_normed_vec2f_maps_x_axis(self):
        d = Point2f(0.6, 0.8)
        m = Mat2x2f.from_normed_vec2f(d)
        p = m * Point2f(1.0, 0.0)
        assert p.x == pytest.approx(0.6)
        assert p.y == pytest.approx(0.8)
        r = Mat2x2f.from_theta(math.atan2(0.8, 0.6))
        np.testing.assert_allclose(m.as_array(), r.as_array(), atol=1e-12)

    def test_value_arithmetic(self):
        a = Mat2x2f(1.0, 2.0, 3.0, 4.0)
        b = Mat2x2f.identity()
        assert a + b == Mat2x2f(2.0, 2.0, 3.0, 5.0)
        assert a - b == Mat2x2f(0.0, 2.0, 3.0, 3.0)
        assert a * 2.0 == Mat2x2f(2.0, 4.0, 6.0, 8.0)
        assert 2.0 * a == a * 2.0
        assert a / 2.0 == Mat2x2f(0.5, 1.0, 1.5, 2.0)


# ══════════════════════════════════════════════════════════════════════════
# Rect2f
# ══════════════════════════════════════════════════════════════════════════

class TestRect2f:

    def setup_method(self):
        self.rect = Rect2f.from_floats(1.0, 2.0, 5.0, 4.0)

    def test_size(self):
        assert self.rect.get_size() == Point2f(4.0, 2.0)

    def test_contains_is_strict(self):
        assert self.rect.contains(Point2f(3.0, 3.0))
        assert not self.rect.contains(Point2f(1.0, 3.0))
        assert not self.rect.contains(Point2f(3.0, 4.0))
        assert not self.rect.contains(Point2f(0.0, 0.0))

    def test_nearest(self):
        assert self.rect.nearest(Point2f(3.0, 3.0)) == Point2f(3.0, 3.0)
        assert self.rect.nearest(Point2f(0.0, 0.0)) == Point2f(1.0, 2.0)
        assert self.rect.nearest(Point2f(9.0, 3.0)) == Point2f(5.0, 3.0)
        assert self.rect.nearest(Point2f(2.0, 10.0)) == Point2f(2.0, 4.0)
        # boundary points project onto themselves
        assert self.rect.nearest(Point2f(5.0, 4.0)) == Point2f(5.0, 4.0)


# ══════════════════════════════════════════════════════════════════════════
# linesegs_distance
# ══════════════════════════════════════════════════════════════════════════

class TestLinesegsDistance:

    @pytest.mark.parametrize("coords,expected", [
        ((0, 0, 1, 1, 0, 1, 1, 0), 0.0),           # X
        ((0, -0.1, 0, 1, -0.1, 0, 1, 0), 0.0),     # L, crossing
        ((0, 0.1, 0, 1, 0, 0, 1, 0), 0.1),         # L, not crossing
        ((0, 0, 0, 1, 1, 0, 1, 1), 1.0),           # parallel
        ((0, 0, 0, 1, 0, 1, 0, 2), 0.0),           # collinear, touching
        ((0, 0, 0, 1, 0, 2, 0, 3), 1.0),           # collinear, gap
        ((0, 0, 0, 3, 0, 1, 0, 2), 0.0),           # collinear, overlapping
        ((0, 0, 0, 3, 0.1, 1, 0.1, 2), 0.1),       # parallel, overlapping span
        ((247.0, 249.90126, 247.0, 282.8828, 250.0, 269.59827, 250.0, 268.93863), 3.0),
        ((0, 0, 0, 0, 0, 1, 2, 1), 1.0),           # first segment is a point
        ((1, 3, 3, 3, 2, 0, 2, 0), 3.0),           # second segment is a point
        ((1, 1, 1, 1, 4, 5, 4, 5), 5.0),           # both are points
    ])
    def test_known_layouts(self, coords, expected):
        a, b, c, d = (Point2f(coords[i], coords[i + 1]) for i in range(0, 8, 2))
        assert linesegs_distance(a, b, c, d) == pytest.approx(expected, abs=1e-5)

    def test_symmetric_in_segment_order(self):
        a, b, c, d = Point2f(0, 0), Point2f(2, 1), Point2f(3, 3), Point2f(5, 2)
        assert linesegs_distance(a, b, c, d) == pytest.approx(linesegs_distance(c, d, a, b))

    def test_matches_shapely(self):
        rng = np.random.default_rng(0)
        for _ in range(100):
            pts = rng.uniform(-5, 5, size=(4, 2))
            a, b, c, d = (Point2f(float(x), float(y)) for x, y in pts)
            expected = LineString(pts[:2]).distance(LineString(pts[2:]))
            assert linesegs_distance(a, b, c, d) == pytest.approx(expected, abs=1e-7)
