"""Exception taxonomy for rastercanvas.

Safe accessors on a canvas report a missing cell with ``None``; the drawing
algorithms and coordinate arithmetic raise the errors below instead. I/O
failures are never wrapped: callers see the :class:`OSError` unchanged.
"""

from __future__ import annotations

__all__ = ["CanvasError", "CoordinateError", "OutOfBoundsError"]


class CanvasError(Exception):
    """Base class for all rastercanvas errors."""


class CoordinateError(CanvasError, ValueError):
    """A coordinate component would be negative."""


class OutOfBoundsError(CanvasError, IndexError):
    """A drawing footprint reached a cell outside the canvas."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        super().__init__(f"pixel ({x}, {y}) outside {width}x{height} canvas")
