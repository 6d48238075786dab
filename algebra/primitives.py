from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union
import math
import numpy as np


Scalar = Union[int, float]


@dataclass(frozen=True)
class Point2f:
    """
    2D point, also used as a 2D vector.
    """
    x: float = 0.0
    y: float = 0.0

    # ---- Constructors ----
    @staticmethod
    def from_floats(x: float, y: float) -> "Point2f":
        return Point2f(float(x), float(y))

    @staticmethod
    def from_polar(r: float, theta: float) -> "Point2f":
        return Point2f(r * math.cos(theta), r * math.sin(theta))

    @staticmethod
    def from_theta(theta: float) -> "Point2f":
        return Point2f(math.cos(theta), math.sin(theta))

    # ---- Arithmetic ----
    def __add__(self, other: "Point2f") -> "Point2f":
        return Point2f(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point2f") -> "Point2f":
        return Point2f(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Union["Point2f", Scalar]) -> "Point2f":
        # component-wise for points, uniform for scalars
        if isinstance(other, Point2f):
            return Point2f(self.x * other.x, self.y * other.y)
        return Point2f(self.x * other, self.y * other)

    def __rmul__(self, k: Scalar) -> "Point2f":
        return Point2f(self.x * k, self.y * k)

    def __truediv__(self, other: Union["Point2f", Scalar]) -> "Point2f":
        if isinstance(other, Point2f):
            return Point2f(self.x / other.x, self.y / other.y)
        return Point2f(self.x / other, self.y / other)

    def __neg__(self) -> "Point2f":
        return Point2f(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    # ---- Vector ops ----
    def norm(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normed(self) -> "Point2f":
        """
        Unit vector in the same direction. The zero vector has no direction and
        raises ZeroDivisionError.
        """
        return self / self.norm()

    def dotx(self, other: "Point2f") -> float:
        return self.x * other.x + self.y * other.y

    def crossx(self, other: "Point2f") -> float:
        return self.x * other.y - self.y * other.x

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)


@dataclass(frozen=True)
class Circle2f:
    center: Point2f
    r: float

    @staticmethod
    def from_floats(x: float, y: float, r: float) -> "Circle2f":
        return Circle2f(center=Point2f.from_floats(x, y), r=float(r))


def linesegs_distance(a: Point2f, b: Point2f, c: Point2f, d: Point2f) -> float:
    """
    Minimum distance between segments ab and cd.

    Only a strict crossing (interior of both segments) short-circuits to 0; every
    other configuration takes the smallest of the endpoint distances and the
    perpendicular feet that land inside the opposite segment.
    """
    ab = b - a
    ac = c - a
    ad = d - a
    bc = c - b
    cd = d - c
    if ab.crossx(ac) * ab.crossx(ad) < 0.0 and cd.crossx(ac) * cd.crossx(bc) < 0.0:
        return 0.0

    bd = d - b
    ab_norm = ab.norm()
    cd_norm = cd.norm()
    ac_norm = ac.norm()
    ad_norm = ad.norm()
    bc_norm = bc.norm()
    bd_norm = bd.norm()
    candidates = [ac_norm, ad_norm, bc_norm, bd_norm]

    # a zero-length segment has no interior to project onto; its endpoint
    # distances already decide the result
    # projections of c and d onto ab
    if ab_norm > 0.0:
        tmp = ab.dotx(ac) / ab_norm
        if 0.0 < tmp < ab_norm:
            candidates.append(math.sqrt(max(ac_norm * ac_norm - tmp * tmp, 0.0)))
        tmp = ab.dotx(ad) / ab_norm
        if 0.0 < tmp < ab_norm:
            candidates.append(math.sqrt(max(ad_norm * ad_norm - tmp * tmp, 0.0)))

    # projections of a and b onto cd (measured from c, hence the sign flip)
    if cd_norm > 0.0:
        tmp = cd.dotx(ac) / cd_norm
        if -cd_norm < tmp < 0.0:
            candidates.append(math.sqrt(max(ac_norm * ac_norm - tmp * tmp, 0.0)))
        tmp = cd.dotx(bc) / cd_norm
        if -cd_norm < tmp < 0.0:
            candidates.append(math.sqrt(max(bc_norm * bc_norm - tmp * tmp, 0.0)))

    return float(min(candidates))


@dataclass(frozen=True)
class Mat2x2f:
    """
    Row-major 2x2 matrix:
      / x1 x2 \\
      \\ y1 y2 /
    """
    x1: float = 0.0
    x2: float = 0.0
    y1: float = 0.0
    y2: float = 0.0

    @staticmethod
    def from_theta(theta: float) -> "Mat2x2f":
        s = math.sin(theta)
        c = math.cos(theta)
        return Mat2x2f(x1=c, x2=-s, y1=s, y2=c)

    @staticmethod
    def from_normed_vec2f(direction: Point2f) -> "Mat2x2f":
        # maps the x-axis onto `direction`, which must already be unit length
        return Mat2x2f(x1=direction.x, x2=-direction.y, y1=direction.y, y2=direction.x)

    @staticmethod
    def identity() -> "Mat2x2f":
        return Mat2x2f(x1=1.0, x2=0.0, y1=0.0, y2=1.0)

    def __add__(self, other: "Mat2x2f") -> "Mat2x2f":
        return Mat2x2f(self.x1 + other.x1, self.x2 + other.x2, self.y1 + other.y1, self.y2 + other.y2)

    def __sub__(self, other: "Mat2x2f") -> "Mat2x2f":
        return Mat2x2f(self.x1 - other.x1, self.x2 - other.x2, self.y1 - other.y1, self.y2 - other.y2)

    def __mul__(self, other: Union[Point2f, Scalar]) -> Union[Point2f, "Mat2x2f"]:
        if isinstance(other, Point2f):
            return Point2f(
                self.x1 * other.x + self.x2 * other.y,
                self.y1 * other.x + self.y2 * other.y,
            )
        return Mat2x2f(self.x1 * other, self.x2 * other, self.y1 * other, self.y2 * other)

    def __rmul__(self, k: Scalar) -> "Mat2x2f":
        return Mat2x2f(self.x1 * k, self.x2 * k, self.y1 * k, self.y2 * k)

    def __matmul__(self, p: Point2f) -> Point2f:
        return self * p

    def __truediv__(self, k: Scalar) -> "Mat2x2f":
        return Mat2x2f(self.x1 / k, self.x2 / k, self.y1 / k, self.y2 / k)

    def as_array(self) -> np.ndarray:
        return np.array([[self.x1, self.x2], [self.y1, self.y2]], dtype=float)


@dataclass(frozen=True)
class Rect2f:
    """
    Axis-aligned rectangle in canvas orientation: `lu` is the upper-left corner,
    `rd` the lower-right one (y grows downward). lu < rd is assumed, not checked.
    """
    lu: Point2f
    rd: Point2f

    @staticmethod
    def from_floats(x1: float, y1: float, x2: float, y2: float) -> "Rect2f":
        return Rect2f(lu=Point2f.from_floats(x1, y1), rd=Point2f.from_floats(x2, y2))

    def get_size(self) -> Point2f:
        return Point2f(self.rd.x - self.lu.x, self.rd.y - self.lu.y)

    def contains(self, point: Point2f) -> bool:
        # strictly inside; points on the boundary are excluded
        return self.lu.x < point.x < self.rd.x and self.lu.y < point.y < self.rd.y

    def nearest(self, point: Point2f) -> Point2f:
        x = min(max(point.x, self.lu.x), self.rd.x)
        y = min(max(point.y, self.lu.y), self.rd.y)
        return Point2f(x, y)
