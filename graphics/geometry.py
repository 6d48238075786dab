from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Sequence, Tuple
import numpy as np

from algebra import Mat2x2f, Point2f
from rendering.canvas import Canvas
from rendering.raster import draw_polyline, fill_polygon

from .errors import GraphicParseError


RGBA = Tuple[float, float, float, float]
TRANSPARENT: RGBA = (0.0, 0.0, 0.0, 0.0)


def _as_vertices(vertices) -> np.ndarray:
    if not isinstance(vertices, np.ndarray):
        vertices = [(v.x, v.y) if isinstance(v, Point2f) else v for v in vertices]
    verts = np.array(vertices, dtype=float)
    if verts.size == 0:
        verts = verts.reshape(0, 2)
    if verts.ndim != 2 or verts.shape[1] != 2:
        raise ValueError("vertices must be an array/list of shape (N,2)")
    # read-only, so objects can be shared between collections safely
    verts.flags.writeable = False
    return verts


def _as_rgba(color: Sequence[float]) -> RGBA:
    if len(color) != 4:
        raise ValueError(f"color must be RGBA, got {len(color)} channels")
    return (float(color[0]), float(color[1]), float(color[2]), float(color[3]))


def _pairs(floats: Sequence[float]) -> np.ndarray:
    if len(floats) % 2 != 0:
        raise GraphicParseError(f"odd number of coordinates ({len(floats)})")
    return np.array(floats, dtype=float).reshape(-1, 2)


class GraphicObject:
    """
    A drawable shape. Transforms never mutate: each returns a new object with the
    same colors and mapped vertices.
    """
    vertices: np.ndarray

    def render(self, canvas: Canvas) -> None:
        raise NotImplementedError

    def _map_vertices(self, fn: Callable[[np.ndarray], np.ndarray]) -> "GraphicObject":
        return replace(self, vertices=fn(self.vertices))

    # ---- Transform helpers ----
    def shift(self, dp: Point2f) -> "GraphicObject":
        return self._map_vertices(lambda v: v + np.array([dp.x, dp.y], dtype=float))

    def rotate(self, rotate_mat: Mat2x2f) -> "GraphicObject":
        return self._map_vertices(lambda v: v @ rotate_mat.as_array().T)

    def zoom(self, k: float) -> "GraphicObject":
        """
        Uniform scale about the coordinate origin, not about the shape. Shift the
        pivot to the origin first to scale around another point.
        """
        return self._map_vertices(lambda v: v * k)

    def shear(self, k: float) -> "GraphicObject":
        # (x, y) -> (x + k*y, y)
        return self._map_vertices(lambda v: np.stack([v[:, 0] + k * v[:, 1], v[:, 1]], axis=1))

    def points(self) -> Tuple[Point2f, ...]:
        return tuple(Point2f(float(x), float(y)) for x, y in self.vertices)


@dataclass(frozen=True, eq=False)
class LineSegs(GraphicObject):
    """
    Open polyline with one RGBA color. Repeat the first vertex at the end to close it.
    """
    vertices: np.ndarray
    color: RGBA = (0.0, 0.0, 0.0, 1.0)

    def __post_init__(self):
        object.__setattr__(self, "vertices", _as_vertices(self.vertices))
        object.__setattr__(self, "color", _as_rgba(self.color))

    @staticmethod
    def from_floats(floats: Sequence[float]) -> "LineSegs":
        """
        `r g b a x1 y1 x2 y2 ...`
        """
        if len(floats) < 4:
            raise GraphicParseError("line segments need 4 color values")
        return LineSegs(vertices=_pairs(floats[4:]), color=tuple(floats[:4]))

    def with_color(self, color: Sequence[float]) -> "LineSegs":
        return replace(self, color=_as_rgba(color))

    def render(self, canvas: Canvas) -> None:
        draw_polyline(canvas, self.vertices.tolist(), self.color)


@dataclass(frozen=True, eq=False)
class Polygon(GraphicObject):
    """
    Simple closed polygon with a fill color and an independent border color.

    The closing edge (last -> first vertex) is implicit. A border alpha of 0 means
    no border. Fewer than 3 vertices renders nothing; self-intersecting polygons are
    accepted but their fill is undefined.
    """
    vertices: np.ndarray
    color: RGBA = (0.0, 0.0, 0.0, 1.0)
    border_color: RGBA = TRANSPARENT

    def __post_init__(self):
        object.__setattr__(self, "vertices", _as_vertices(self.vertices))
        object.__setattr__(self, "color", _as_rgba(self.color))
        object.__setattr__(self, "border_color", _as_rgba(self.border_color))

    @staticmethod
    def from_floats(floats: Sequence[float]) -> "Polygon":
        """
        `border_rgba fill_rgba x1 y1 x2 y2 ...`
        """
        if len(floats) < 8:
            raise GraphicParseError("polygon needs 8 color values (border then fill)")
        return Polygon(
            vertices=_pairs(floats[8:]),
            color=tuple(floats[4:8]),
            border_color=tuple(floats[:4]),
        )

    def with_colors(self, border_color: Sequence[float], color: Sequence[float]) -> "Polygon":
        return replace(self, color=_as_rgba(color), border_color=_as_rgba(border_color))

    def border(self) -> LineSegs:
        closed = np.concatenate([self.vertices, self.vertices[:1]], axis=0)
        return LineSegs(vertices=closed, color=self.border_color)

    def render(self, canvas: Canvas) -> None:
        if len(self.vertices) < 3:
            return
        fill_polygon(canvas, self.vertices.tolist(), self.color)
        if self.border_color[3] != 0.0:
            self.border().render(canvas)
