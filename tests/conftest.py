"""
Shared fixtures for the vectorcanvas tests.
"""
import matplotlib

matplotlib.use("Agg")

import pytest

from rendering import Canvas


WHITE = (1.0, 1.0, 1.0, 1.0)


@pytest.fixture
def canvas():
    return Canvas((20, 20))


def filled_pixels(canvas):
    """Set of (x, y) positions whose pixel is not black."""
    arr = canvas.as_array()
    ys, xs = arr.any(axis=2).nonzero()
    return {(int(x), int(y)) for x, y in zip(xs, ys)}
