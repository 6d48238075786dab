from __future__ import annotations

import argparse
import logging
import os

from vfont import Console, ConsoleConfig
from rendering.preview import preview_canvas, save_canvas


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Render text with the 14-segment vector font.")
    p.add_argument("--cols", type=int, default=80, help="console columns (default: 80)")
    p.add_argument("--rows", type=int, default=24, help="console rows (default: 24)")
    p.add_argument("--cell", type=int, nargs=2, default=[15, 20], metavar=("W", "H"), help="cell size in pixels")
    p.add_argument("--scale", type=float, default=20.0, help="glyph scale factor applied to the unit cell")
    p.add_argument("--text", type=str, default="", help="text to render; the 256-character table when empty")
    p.add_argument("--out", type=str, default="plots/ascii.png", help="output image path")
    p.add_argument("--show", action="store_true", help="open a preview window after rendering")
    p.add_argument("--verbose", action="store_true", help="debug logging")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    cfg = ConsoleConfig(
        columns=args.cols,
        rows=args.rows,
        cell_size=(args.cell[0], args.cell[1]),
        scaler=args.scale,
    )
    console = Console(cfg)
    width, height = cfg.canvas_size
    if args.text:
        print(f"Rendering {len(args.text)} characters on a {cfg.columns}x{cfg.rows} console ({width}x{height}px)")
        console.render_text(args.text.replace("\\n", "\n"))
    else:
        print(f"Rendering character table ({width}x{height}px)")
        console.render_char_table()
    save_canvas(console.canvas, args.out)
    print(f"Saved: {os.path.abspath(args.out)}")
    if args.show:
        preview_canvas(console.canvas, title=args.text or "character table")


if __name__ == "__main__":
    main()
