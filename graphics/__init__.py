# Re-export graphic object API for convenience
from .errors import VectorCanvasError, GraphicParseError
from .geometry import (
    GraphicObject,
    LineSegs,
    Polygon,
    TRANSPARENT,
)
from .collection import (
    GraphicObjects,
    generate_arc_vertices,
    generate_thick_arc,
)
