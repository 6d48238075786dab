from __future__ import annotations

from typing import Sequence, Tuple
import numpy as np


class Canvas:
    """
    Flat RGB pixel buffer plus the current draw color.

    `data` is a uint8 array of length width*height*3, row-major with a top-left
    origin and channels in R, G, B order. Renderers set the color once per shape and
    then blend pixels into the buffer with a fractional alpha.
    """

    def __init__(self, size: Tuple[int, int]):
        width, height = int(size[0]), int(size[1])
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {size!r}")
        self._size = (width, height)
        self.color = (0.0, 0.0, 0.0)
        self.data = np.zeros(width * height * 3, dtype=np.uint8)

    @property
    def size(self) -> Tuple[int, int]:
        return self._size

    @property
    def width(self) -> int:
        return self._size[0]

    @property
    def height(self) -> int:
        return self._size[1]

    def flush(self) -> None:
        self.data = np.zeros(self.width * self.height * 3, dtype=np.uint8)

    def set_color(self, color: Sequence[float]) -> None:
        if len(color) != 3:
            raise ValueError("draw color must have 3 channels")
        self.color = (float(color[0]), float(color[1]), float(color[2]))

    def put_pixel(self, x: int, y: int, alpha: float) -> None:
        w, h = self._size
        if x < 0 or y < 0 or x >= w or y >= h:
            return
        pos = (y * w + x) * 3
        data = self.data
        for i, c in enumerate(self.color):
            v = int(int(data[pos + i]) * (1.0 - alpha) + c * 255.0 * alpha)
            data[pos + i] = 0 if v < 0 else 255 if v > 255 else v

    def put_span(self, y: int, x_start: int, x_end: int, alpha: float) -> None:
        """
        Blend the half-open run [x_start, x_end) of row y, clipped to the canvas.
        Same formula as put_pixel, applied to the whole run at once.
        """
        w, h = self._size
        if y < 0 or y >= h:
            return
        x0 = max(x_start, 0)
        x1 = min(x_end, w)
        if x0 >= x1:
            return
        row = self.data[(y * w + x0) * 3:(y * w + x1) * 3].reshape(-1, 3)
        blended = row.astype(float) * (1.0 - alpha) + np.asarray(self.color) * 255.0 * alpha
        row[:] = np.clip(np.trunc(blended), 0, 255).astype(np.uint8)

    def pixel(self, x: int, y: int) -> Tuple[int, int, int]:
        w, h = self._size
        if x < 0 or y < 0 or x >= w or y >= h:
            raise IndexError(f"pixel ({x}, {y}) outside {w}x{h} canvas")
        pos = (y * w + x) * 3
        r, g, b = self.data[pos:pos + 3]
        return int(r), int(g), int(b)

    def as_array(self) -> np.ndarray:
        # (height, width, 3) view sharing memory with `data`
        return self.data.reshape(self.height, self.width, 3)
