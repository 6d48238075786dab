from __future__ import annotations

from typing import Optional
import logging
import os
import matplotlib.pyplot as plt
from PIL import Image

from .canvas import Canvas

logger = logging.getLogger(__name__)


def canvas_to_image(canvas: Canvas) -> Image.Image:
    """
    Hand the raw buffer over as a Pillow RGB image (stride width*3).
    """
    width, height = canvas.size
    return Image.frombytes("RGB", (width, height), canvas.data.tobytes())


def save_canvas(canvas: Canvas, out_path: str, format: Optional[str] = None) -> None:
    out_dir = os.path.dirname(out_path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    canvas_to_image(canvas).save(out_path, format=format)
    logger.debug("saved %dx%d canvas -> %s", canvas.width, canvas.height, out_path)


def show_canvas(
    ax,
    canvas: Canvas,
    title: Optional[str] = None,
    interpolation: str = "none",
) -> None:
    ax.imshow(canvas.as_array(), origin="upper", interpolation=interpolation, aspect="equal")
    if title:
        ax.set_title(title)
    ax.axis("off")


def preview_canvas(
    canvas: Canvas,
    title: Optional[str] = None,
    dpi: int = 100,
) -> None:
    # one figure sized to the canvas, blocking until closed
    width, height = canvas.size
    fig, ax = plt.subplots(1, 1, figsize=(width / dpi, height / dpi), dpi=dpi)
    fig.subplots_adjust(left=0, right=1, bottom=0, top=1 if not title else 0.95)
    show_canvas(ax, canvas, title=title)
    plt.show()
    plt.close(fig)
