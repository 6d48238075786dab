from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple
import logging

from algebra import Point2f
from rendering.canvas import Canvas

from .segments import fsd

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConsoleConfig:
    columns: int = 80
    rows: int = 24
    cell_size: Tuple[int, int] = (15, 20)
    scaler: float = 20.0

    def __post_init__(self):
        if self.columns <= 0 or self.rows <= 0:
            raise ValueError("console needs at least one column and one row")

    @property
    def canvas_size(self) -> Tuple[int, int]:
        return self.columns * self.cell_size[0], self.rows * self.cell_size[1]


class Console:
    """
    Character grid drawn with the 14-segment vector font.
    """

    def __init__(self, config: ConsoleConfig = ConsoleConfig()):
        self.config = config
        self.canvas = Canvas(config.canvas_size)

    def cell_origin(self, column: int, row: int) -> Point2f:
        cw, ch = self.config.cell_size
        return Point2f(float(cw * column), float(ch * row))

    def draw_char(self, ch: str, column: int, row: int) -> None:
        glyph = fsd(ch)
        if glyph.is_empty():
            return
        glyph.zoom(self.config.scaler).shift(self.cell_origin(column, row)).render(self.canvas)

    def render_char_table(self) -> None:
        # codes 0..255 on a 16x16 grid, row-major
        self.canvas.flush()
        for y in range(16):
            for x in range(16):
                self.draw_char(chr(y * 16 + x), x, y)
        logger.debug("rendered character table on %dx%d canvas", *self.canvas.size)

    def render_text(self, text: str) -> None:
        """
        Lay text out left to right, wrapping at the last column and on newlines.
        Rows past the bottom of the console are dropped.
        """
        self.canvas.flush()
        cfg = self.config
        column, row = 0, 0
        for ch in text:
            if ch == "\n":
                column, row = 0, row + 1
                continue
            if column >= cfg.columns:
                column, row = 0, row + 1
            if row >= cfg.rows:
                logger.debug("text truncated at row %d", row)
                break
            self.draw_char(ch, column, row)
            column += 1
