from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple
import math

from .canvas import Canvas


RGBA = Tuple[float, float, float, float]


def _round_half_away(v: float) -> int:
    # round-half-away-from-zero, unlike the built-in banker's round()
    return int(math.copysign(math.floor(abs(v) + 0.5), v))


def draw_line(canvas: Canvas, x1: float, y1: float, x2: float, y2: float, color: RGBA) -> None:
    """
    Antialiased line between two float endpoints (Wu-style).

    Axis-aligned and exact 45 degree lines are drawn as solid runs including both
    endpoints. Every other slope steps along the major axis, splitting each step's
    coverage between the two pixels straddled on the minor axis.
    """
    ix1 = _round_half_away(x1)
    iy1 = _round_half_away(y1)
    ix2 = _round_half_away(x2)
    iy2 = _round_half_away(y2)
    dx = ix2 - ix1
    dy = iy2 - iy1
    alpha = color[3]
    canvas.set_color(color[:3])
    put = canvas.put_pixel

    if dx == 0:
        for y in range(min(iy1, iy2), max(iy1, iy2) + 1):
            put(ix1, y, alpha)
        return

    if dy == 0:
        for x in range(min(ix1, ix2), max(ix1, ix2) + 1):
            put(x, iy1, alpha)
        return

    if dx == dy:
        if dx < 0:
            ix1, iy1, dx = ix2, iy2, -dx
        for i in range(dx + 1):
            put(ix1 + i, iy1 + i, alpha)
        return

    if dx == -dy:
        if dx < 0:
            ix1, iy1, dx = ix2, iy2, -dx
        for i in range(dx + 1):
            put(ix1 + i, iy1 - i, alpha)
        return

    k = dy / dx
    e = 0.0
    if dx + dy < 0:
        ix1, ix2 = ix2, ix1
        iy1, iy2 = iy2, iy1

    if 0.0 < k < 1.0:
        py = iy1
        for px in range(ix1, ix2):
            put(px, py, alpha * (1.0 - e))
            put(px, py + 1, alpha * e)
            e += k
            if e >= 1.0:
                py += 1
                e -= 1.0
    elif k > 1.0:
        px = ix1
        for py in range(iy1, iy2):
            put(px, py, alpha * (1.0 - e))
            put(px + 1, py, alpha * e)
            e += 1.0 / k
            if e >= 1.0:
                px += 1
                e -= 1.0
    elif -1.0 < k < 0.0:
        # e runs negative here
        py = iy1
        for px in range(ix1, ix2):
            put(px, py, alpha * (1.0 + e))
            put(px, py - 1, alpha * -e)
            e += k
            if e <= -1.0:
                py -= 1
                e += 1.0
    elif k < -1.0:
        # walk upward from the bottom end, x growing
        px = ix2
        for py in range(iy2 - 1, iy1 - 1, -1):
            put(px, py, alpha * (1.0 - e))
            put(px + 1, py, alpha * e)
            e += -1.0 / k
            if e >= 1.0:
                px += 1
                e -= 1.0


def draw_polyline(canvas: Canvas, vertices: Sequence[Sequence[float]], color: RGBA) -> None:
    # N vertices -> N-1 independent segments, no joins
    for (x1, y1), (x2, y2) in zip(vertices[:-1], vertices[1:]):
        draw_line(canvas, float(x1), float(y1), float(x2), float(y2), color)


@dataclass
class _Edge:
    startx: int
    starty: int
    endx: int
    endy: int
    dxy: float
    current_x: float


def _build_edges(vertices: Sequence[Sequence[float]]) -> List[_Edge]:
    edges: List[_Edge] = []
    last = (int(vertices[-1][0]), int(vertices[-1][1]))
    for vx, vy in vertices:
        cur = (int(vx), int(vy))
        if cur[1] != last[1]:
            lo, hi = (last, cur) if cur[1] > last[1] else (cur, last)
            edges.append(_Edge(
                startx=lo[0],
                starty=lo[1],
                endx=hi[0],
                endy=hi[1],
                dxy=(hi[0] - lo[0]) / (hi[1] - lo[1]),
                current_x=float(lo[0]),
            ))
        last = cur
    return edges


def fill_polygon(canvas: Canvas, vertices: Sequence[Sequence[float]], color: RGBA) -> None:
    """
    Scanline fill of a simple polygon with an active edge list.

    Vertices are truncated to integers and the closing edge (last -> first) is
    implicit. On every row the active edges are paired left to right and the pixels
    x in (left_x, right_x] are filled, so two polygons sharing an edge neither
    overlap nor leave a gap. An edge stops contributing on the row equal to its
    end y. Self-intersecting input gives undefined parity and is not detected.
    """
    canvas.set_color(color[:3])
    if len(vertices) < 3:
        return
    alpha = color[3]
    edges = _build_edges(vertices)
    if not edges:
        return

    # largest starty first, so the next edge to activate sits at the tail
    edges.sort(key=lambda e: e.starty, reverse=True)
    active: List[_Edge] = []
    current_y = edges[-1].starty
    while True:
        activated = False
        while edges and edges[-1].starty == current_y:
            active.append(edges.pop())
            activated = True

        active = [e for e in active if e.endy != current_y]
        if not active:
            break

        if activated:
            active.sort(key=lambda e: (e.current_x, e.endx))

        draw_on = False
        first = active[0]
        last_x = int(first.current_x)
        first.current_x += first.dxy
        for edge in active[1:]:
            draw_on = not draw_on
            x = int(edge.current_x)
            if draw_on:
                canvas.put_span(current_y, last_x + 1, x + 1, alpha)
            last_x = x
            edge.current_x += edge.dxy

        current_y += 1
