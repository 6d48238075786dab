from .segments import (
    CHAR_SEGMENTS,
    SEGMENT_COORDS,
    segment_table,
    glyph_indices,
    fsd,
)
from .console import (
    ConsoleConfig,
    Console,
)
