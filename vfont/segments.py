from __future__ import annotations

from functools import lru_cache
from typing import Dict, Tuple
import logging

from graphics import GraphicObject, GraphicObjects

logger = logging.getLogger(__name__)


DEFAULT_BORDER_COLOR = "0 1 0 0.7"
DEFAULT_FILL_COLOR = "0 0 1 0.7"

# 14-segment cells in the unit square (y grows downward):
#  0 top, 1 upper right, 2 lower right, 3 bottom, 4 lower left, 5 upper left,
#  6 middle left, 7 middle right, 8-10 upper diagonals/stem, 11-13 lower ones.
SEGMENT_COORDS: Tuple[str, ...] = (
    "0.2 0.1 0.26 0.2 0.74 0.2 0.8 0.1",
    "0.74 0.2 0.8 0.1 0.8 0.5 0.74 0.47",
    "0.74 0.53 0.74 0.8 0.8 0.9 0.8 0.5",
    "0.8 0.9 0.2 0.9 0.26 0.8 0.74 0.8",
    "0.2 0.9 0.26 0.8 0.26 0.53 0.2 0.5",
    "0.26 0.47 0.26 0.2 0.2 0.1 0.2 0.5",
    "0.2 0.5 0.26 0.47 0.47 0.47 0.5 0.5 0.47 0.53 0.26 0.53",
    "0.53 0.53 0.5 0.5 0.53 0.47 0.74 0.47 0.8 0.5 0.74 0.53",
    "0.26 0.2 0.5 0.375 0.5 0.5 0.26 0.325",
    "0.47 0.2 0.53 0.2 0.53 0.47 0.5 0.5 0.47 0.47",
    "0.74 0.2 0.5 0.375 0.5 0.5 0.74 0.325",
    "0.26 0.8 0.26 0.675 0.5 0.5 0.5 0.625",
    "0.47 0.53 0.5 0.5 0.53 0.53 0.53 0.8 0.47 0.8",
    "0.74 0.8 0.74 0.675 0.5 0.5 0.5 0.625",
)

CHAR_SEGMENTS: Dict[str, Tuple[int, ...]] = {
    "!": (3, 9, 11, 13),
    '"': (5, 9),
    "#": (1, 2, 3, 6, 7, 9, 12),
    "$": (0, 2, 3, 5, 6, 7, 9, 12),
    "%": (2, 5, 10, 11),
    "&": (0, 3, 4, 6, 8, 10, 13),
    "'": (9,),
    "(": (10, 13),
    ")": (8, 11),
    "*": (8, 9, 10, 11, 12, 13),
    "+": (6, 7, 9, 12),
    ",": (11,),
    "-": (6, 7),
    ".": (4,),
    "/": (10, 11),
    "0": (0, 1, 2, 3, 4, 5, 10, 11),
    "1": (1, 2, 10),
    "2": (0, 1, 3, 4, 6, 7),
    "3": (0, 1, 2, 3, 7),
    "4": (1, 2, 5, 6, 7),
    "5": (0, 2, 3, 5, 6, 7),
    "6": (0, 2, 3, 4, 5, 6, 7),
    "7": (0, 10, 12),
    "8": (0, 1, 2, 3, 4, 5, 6, 7),
    "9": (0, 1, 2, 5, 6, 7),
    ":": (9, 13),
    ";": (9, 11),
    "<": (6, 10, 13),
    "=": (3, 6, 7),
    ">": (7, 8, 11),
    "?": (0, 5, 10, 12),
    "@": (0, 1, 2, 3, 4, 5, 8, 10, 11, 13),
    "A": (0, 1, 2, 4, 5, 6, 7),
    "B": (0, 1, 2, 3, 7, 9, 12),
    "C": (0, 3, 4, 5),
    "D": (0, 1, 2, 3, 9, 12),
    "E": (0, 3, 4, 5, 6, 7),
    "F": (0, 4, 5, 6, 7),
    "G": (0, 2, 3, 4, 5, 7),
    "H": (1, 2, 4, 5, 6, 7),
    "I": (0, 3, 9, 12),
    "J": (1, 2, 3, 4),
    "K": (4, 5, 6, 10, 13),
    "L": (3, 4, 5),
    "M": (1, 2, 4, 5, 8, 10),
    "N": (1, 2, 4, 5, 8, 13),
    "O": (0, 1, 2, 3, 4, 5),
    "P": (0, 1, 4, 5, 6, 7),
    "Q": (0, 1, 2, 3, 4, 5, 13),
    "R": (0, 1, 4, 5, 6, 7, 13),
    "S": (0, 2, 3, 7, 8),
    "T": (0, 9, 12),
    "U": (1, 2, 3, 4, 5),
    "V": (4, 5, 10, 11),
    "W": (1, 2, 4, 5, 11, 13),
    "X": (0, 3, 8, 10, 11, 13),
    "Y": (0, 8, 10, 12),
    "Z": (0, 3, 10, 11),
    "[": (0, 3, 4, 5, 10, 13),
    "\\": (8, 13),
    "]": (0, 1, 2, 3, 8, 11),
    "^": (8, 10),
    "_": (3,),
    "`": (8,),
    "a": (2, 3, 4, 6, 7, 13),
    "b": (3, 4, 5, 6, 13),
    "c": (3, 4, 6, 7),
    "d": (1, 2, 3, 7, 11),
    "e": (3, 4, 6, 11),
    "f": (3, 6, 7, 10, 12),
    "g": (2, 3, 4, 7, 12),
    "h": (3, 7, 12),
    "i": (3, 6, 12),
    "j": (2, 3, 10),
    "k": (4, 5, 7, 11, 13),
    "l": (4, 5, 11),
    "m": (2, 4, 6, 7, 12),
    "n": (2, 4, 6, 7),
    "o": (2, 3, 4, 6, 7),
    "p": (3, 4, 6, 12),
    "q": (2, 3, 7, 12),
    "r": (4, 6, 7),
    "s": (3, 7, 13),
    "t": (3, 4, 5, 6),
    "u": (2, 3, 4),
    "v": (4, 7, 11),
    "w": (2, 4, 11, 13),
    "x": (6, 7, 11, 13),
    "y": (2, 3, 6, 13),
    "z": (3, 6, 11),
    "{": (0, 3, 6, 8, 11),
    "|": (9, 12),
    "}": (0, 3, 7, 10, 13),
    "~": (0,),
}


@lru_cache(maxsize=None)
def segment_table() -> Tuple[Tuple[GraphicObject, ...], ...]:
    """
    The 14 segment cells, parsed once and shared. Each cell is a tuple of shapes,
    which are themselves frozen, so the table cannot be altered by callers.
    """
    table = tuple(
        GraphicObjects.from_strs([f"P {DEFAULT_BORDER_COLOR} {DEFAULT_FILL_COLOR} {coords}"]).objects
        for coords in SEGMENT_COORDS
    )
    logger.debug("built vector font segment table (%d cells)", len(table))
    return table


def glyph_indices(ch: str) -> Tuple[int, ...]:
    return CHAR_SEGMENTS.get(ch, ())


def fsd(ch: str) -> GraphicObjects:
    """
    Glyph for one character in the unit cell. Unknown characters give an empty
    collection.
    """
    table = segment_table()
    result = GraphicObjects()
    for idx in glyph_indices(ch):
        result.extend(table[idx])
    return result
