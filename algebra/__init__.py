# Re-export core algebra API for convenience
from .primitives import (
    Point2f,
    Mat2x2f,
    Rect2f,
    Circle2f,
    linesegs_distance,
)
