from __future__ import annotations

import argparse
import logging
import math

from algebra import Mat2x2f, Point2f
from graphics import GraphicObjects, generate_thick_arc
from rendering import Canvas
from rendering.preview import preview_canvas, save_canvas


SHAPES = """
# a bordered square, a translucent triangle and a zig-zag
P 1 1 1 1   0.9 0.2 0.2 1   -1 -1  1 -1  1 1  -1 1
p 0.2 0.45 0.95 0.6         -1.2 0.8  0.3 -1.4  1.4 0.9
l 0.2 0.8 0.5 1             -1.5 1.5  -0.5 0.5  0.5 1.5  1.5 0.5
"""


def build_composition() -> GraphicObjects:
    shapes = GraphicObjects.from_text(SHAPES)
    ring = generate_thick_arc(
        Point2f(0.0, 0.0),
        (40.0, 55.0),
        (0.0, 1.5 * math.pi),
        border_color=(1.0, 1.0, 0.0, 1.0),
        fill_color=(0.3, 0.9, 0.5, 0.8),
    )
    return shapes.zoom(40.0) + ring


def main() -> None:
    p = argparse.ArgumentParser(description="Render a transform showcase.")
    p.add_argument("--size", type=int, nargs=2, default=[640, 480], metavar=("W", "H"), help="canvas size")
    p.add_argument("--out", type=str, default="plots/demo.png", help="output image path")
    p.add_argument("--show", action="store_true", help="open a preview window after rendering")
    p.add_argument("--verbose", action="store_true", help="debug logging")
    args = p.parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    canvas = Canvas((args.size[0], args.size[1]))
    composition = build_composition()
    w, h = canvas.size
    # plain, rotated and sheared copies side by side
    variants = [
        composition.shift(Point2f(w / 6, h / 2)),
        composition.rotate(Mat2x2f.from_theta(math.pi / 6)).shift(Point2f(w / 2, h / 2)),
        composition.shear(0.4).zoom(0.8).shift(Point2f(5 * w / 6, h / 2)),
    ]
    for v in variants:
        v.render(canvas)
    save_canvas(canvas, args.out)
    print(f"Saved: {args.out}")
    if args.show:
        preview_canvas(canvas, title="vectorcanvas demo")


if __name__ == "__main__":
    main()
