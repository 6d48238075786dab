from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Sequence, Tuple
import logging

from algebra import Mat2x2f, Point2f
from rendering.canvas import Canvas

from .errors import GraphicParseError
from .geometry import TRANSPARENT, GraphicObject, LineSegs, Polygon

logger = logging.getLogger(__name__)


class GraphicObjects:
    """
    Ordered, heterogeneous collection of graphic objects.

    Insertion order is paint order: `render` draws later elements over earlier ones.
    Iterating yields the elements last-appended first.
    """

    def __init__(self, graphic_objects: Optional[Iterable[GraphicObject]] = None):
        self._objects: List[GraphicObject] = list(graphic_objects) if graphic_objects is not None else []

    def __len__(self) -> int:
        return len(self._objects)

    def is_empty(self) -> bool:
        return not self._objects

    def __iter__(self) -> Iterator[GraphicObject]:
        return iter(self._objects[::-1])

    def __add__(self, other: "GraphicObjects") -> "GraphicObjects":
        return GraphicObjects(self._objects + other._objects)

    def __repr__(self) -> str:
        kinds = ", ".join(type(o).__name__ for o in self._objects)
        return f"GraphicObjects([{kinds}])"

    @property
    def objects(self) -> Tuple[GraphicObject, ...]:
        """Elements in insertion order."""
        return tuple(self._objects)

    def append(self, element: GraphicObject) -> None:
        self._objects.append(element)

    def extend(self, other: Iterable[GraphicObject]) -> None:
        if isinstance(other, GraphicObjects):
            self._objects.extend(other._objects)
        else:
            self._objects.extend(other)

    # ---- Batch transforms ----
    def shift(self, dp: Point2f) -> "GraphicObjects":
        return GraphicObjects(o.shift(dp) for o in self._objects)

    def rotate(self, rotate_mat: Mat2x2f) -> "GraphicObjects":
        return GraphicObjects(o.rotate(rotate_mat) for o in self._objects)

    def zoom(self, k: float) -> "GraphicObjects":
        # about the origin, see GraphicObject.zoom
        return GraphicObjects(o.zoom(k) for o in self._objects)

    def shear(self, k: float) -> "GraphicObjects":
        return GraphicObjects(o.shear(k) for o in self._objects)

    def render(self, canvas: Canvas) -> None:
        for o in self._objects:
            o.render(canvas)

    # ---- Text constructors ----
    @staticmethod
    def from_strs(lines: Sequence[str]) -> "GraphicObjects":
        """
        Build a collection from text primitives, one per line:

            l|L r g b a x1 y1 x2 y2 ...              line segments
            p   r g b a x1 y1 ...                    polygon, no border
            P   br bg bb ba r g b a x1 y1 ...        polygon with border

        Any malformed line raises GraphicParseError; nothing is returned partially.
        """
        result = GraphicObjects()
        for line in lines:
            tokens = line.split()
            if not tokens:
                raise GraphicParseError("empty primitive line", line)
            tag, rest = tokens[0], tokens[1:]
            try:
                floats = [float(t) for t in rest]
            except ValueError as exc:
                raise GraphicParseError(f"float parse fail ({exc})", line) from exc
            try:
                if tag in ("l", "L"):
                    result.append(LineSegs.from_floats(floats))
                elif tag == "p":
                    result.append(Polygon.from_floats([0.0] * 4 + floats))
                elif tag == "P":
                    result.append(Polygon.from_floats(floats))
                else:
                    raise GraphicParseError(f"unknown primitive tag {tag!r}", line)
            except GraphicParseError as exc:
                if exc.line is not None:
                    raise
                raise GraphicParseError(str(exc), line) from exc
        logger.debug("parsed %d graphic objects", len(result))
        return result

    @staticmethod
    def from_text(text: str) -> "GraphicObjects":
        # multi-line literal; blank lines and '#' comments are skipped
        lines = [ln for ln in text.splitlines() if ln.strip() and not ln.lstrip().startswith("#")]
        return GraphicObjects.from_strs(lines)


def generate_arc_vertices(center: Point2f, r: float, theta: Tuple[float, float]) -> Iterator[Point2f]:
    """
    Sample a circular arc from theta[0] to theta[1], about one point per unit of
    arc length. Works in both directions; the sign of theta[1]-theta[0] decides.
    """
    theta0, theta1 = theta
    split = max(int(abs(theta1 - theta0) * r), 1)
    d_theta = (theta1 - theta0) / split
    for i in range(split + 1):
        yield Point2f.from_polar(r, theta0 + i * d_theta) + center


def generate_thick_arc(
    center: Point2f,
    r: Tuple[float, float],
    theta: Tuple[float, float],
    border_color: Optional[Sequence[float]] = None,
    fill_color: Optional[Sequence[float]] = None,
) -> GraphicObjects:
    """
    Ring slice between r = (r_inner, r_outer) over the angle range `theta`.

    The outline runs along the outer arc forward and back along the inner arc.
    A fill-only Polygon is emitted when `fill_color` is given, followed by a closed
    LineSegs outline when `border_color` is given.
    """
    r_inner, r_outer = r
    nodes = list(generate_arc_vertices(center, r_outer, theta))
    nodes.extend(generate_arc_vertices(center, r_inner, (theta[1], theta[0])))
    result = GraphicObjects()
    if fill_color is not None:
        result.append(Polygon(vertices=nodes, color=tuple(fill_color), border_color=TRANSPARENT))
    if border_color is not None:
        result.append(LineSegs(vertices=nodes + nodes[:1], color=tuple(border_color)))
    return result
