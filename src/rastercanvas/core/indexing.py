"""Helpers mapping between flat buffer indices and coordinates."""

from __future__ import annotations

from .coord import Coord

__all__ = ["coords_to_idx", "idx_to_coords", "storage_index"]


def coords_to_idx(c: Coord, w: int) -> int:
    """Row-major index of *c* with the origin at the top-left."""
    return c.x + w * c.y


def idx_to_coords(i: int, w: int) -> Coord:
    """Inverse of :func:`coords_to_idx`."""
    return Coord(i % w, i // w)


def storage_index(x: int, y: int, width: int, height: int) -> int:
    # Bottom-left origin: y == 0 lives in the last stored row.
    return x + (height - y - 1) * width
