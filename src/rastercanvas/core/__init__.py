"""Geometry primitives used by the canvas."""

from .coord import Coord
from .indexing import coords_to_idx, idx_to_coords, storage_index

__all__ = ["Coord", "coords_to_idx", "idx_to_coords", "storage_index"]
