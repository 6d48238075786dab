from __future__ import annotations

from typing import Optional


class VectorCanvasError(Exception):
    """Base error of the project."""


class GraphicParseError(VectorCanvasError, ValueError):
    """Malformed text primitive (bad tag, bad number, odd coordinate count)."""

    def __init__(self, message: str, line: Optional[str] = None):
        if line is not None:
            message = f"{message}: {line!r}"
        super().__init__(message)
        self.line = line
