"""Generic raster canvas and drawing primitives.

A canvas owns a flat list of atoms laid out row-major from the *top* row,
while coordinates use a bottom-left origin with y increasing upward. The
cell for ``(x, y)`` therefore lives at ``x + (height - y - 1) * width``.

Subclasses only choose the atom type and the text encoding; every drawing
algorithm here is written once against the bounds-checked cell index and
works for any atom type.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from math import sqrt
from pathlib import Path
from collections.abc import Sequence
from typing import Generic, Iterator, List, Optional, TypeVar

from rastercanvas.core.coord import Coord
from rastercanvas.core.indexing import storage_index
from rastercanvas.errors import OutOfBoundsError

from .netpbm import write_text

__all__ = ["AtomView", "Canvas", "MutableAtoms", "PixelRef"]

logger = logging.getLogger(__name__)

A = TypeVar("A")


class PixelRef(Generic[A]):
    """Mutable handle to a single canvas cell."""

    __slots__ = ("_atoms", "_index")

    def __init__(self, atoms: List[A], index: int) -> None:
        self._atoms = atoms
        self._index = index

    def get(self) -> A:
        return self._atoms[self._index]

    def set(self, value: A) -> None:
        self._atoms[self._index] = value

    value = property(get, set)

    def __repr__(self) -> str:  # pragma: no cover
        return f"PixelRef({self._atoms[self._index]!r})"


class AtomView(Sequence, Generic[A]):
    """Read-only view of a canvas's atoms in storage order."""

    __slots__ = ("_atoms",)

    def __init__(self, atoms: List[A]) -> None:
        self._atoms = atoms

    def __getitem__(self, index):  # type: ignore[override]
        return self._atoms[index]

    def __len__(self) -> int:
        return len(self._atoms)

    def __iter__(self) -> Iterator[A]:
        return iter(self._atoms)

    def __repr__(self) -> str:  # pragma: no cover
        return f"{type(self).__name__}(len={len(self._atoms)})"


class MutableAtoms(AtomView[A]):
    """Writable view: cells may be replaced one at a time but never resized."""

    __slots__ = ()

    def __setitem__(self, index: int, value: A) -> None:
        if not isinstance(index, int):
            raise TypeError("atoms can only be assigned one index at a time")
        self._atoms[index] = value


class Canvas(ABC, Generic[A]):
    """Fixed-size raster buffer over atoms of type ``A``."""

    def __init__(self, width: int, height: int, background: A) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"canvas size must be >= 0, got {width}x{height}")
        self._width = width
        self._height = height
        self._atoms: List[A] = [background] * (width * height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def atoms(self) -> AtomView[A]:
        """Read-only atoms in storage order (top row first)."""
        return AtomView(self._atoms)

    def atoms_mut(self) -> MutableAtoms[A]:
        """Per-cell writable atoms in storage order; the length is fixed."""
        return MutableAtoms(self._atoms)

    @abstractmethod
    def encode(self) -> str:
        """Return the text encoding of the canvas."""

    # -- pixel access ----------------------------------------------------

    def _index(self, x: int, y: int) -> Optional[int]:
        if x < 0 or y < 0 or x >= self._width or y >= self._height:
            return None
        return storage_index(x, y, self._width, self._height)

    def get(self, x: int, y: int) -> Optional[A]:
        """Atom at ``(x, y)`` or ``None`` when out of bounds."""
        i = self._index(x, y)
        if i is None:
            return None
        return self._atoms[i]

    def get_mut(self, x: int, y: int) -> Optional[PixelRef[A]]:
        """Writable handle to ``(x, y)`` or ``None`` when out of bounds."""
        i = self._index(x, y)
        if i is None:
            return None
        return PixelRef(self._atoms, i)

    def set(self, x: int, y: int, atom: A) -> bool:
        """Write *atom* at ``(x, y)``; returns False when out of bounds."""
        ref = self.get_mut(x, y)
        if ref is None:
            return False
        ref.set(atom)
        return True

    def _put(self, x: int, y: int, atom: A) -> None:
        self._require(x, y)
        self._atoms[storage_index(x, y, self._width, self._height)] = atom

    def _require(self, x: int, y: int) -> None:
        # Drawing algorithms must not silently clip.
        if self._index(x, y) is None:
            raise OutOfBoundsError(x, y, self._width, self._height)

    def _require_box(self, center: Coord, radius: int) -> None:
        # Low side is clamped to zero, so only the far corner can fall outside.
        r = radius // 2
        if r > 0:
            self._require(center.x + r - 1, center.y + r - 1)

    # -- drawing ---------------------------------------------------------
    #
    # Footprints are checked before the first write: an OutOfBoundsError
    # leaves the canvas untouched.

    def draw_circle(self, center: Coord, radius: int, atom: A) -> None:
        """Fill a box of side ``radius`` rounded down to even around *center*.

        Offsets run over ``[-radius // 2, radius // 2)`` on both axes and are
        clamped at zero on the low side. A box reaching past the right or top
        edge raises :class:`OutOfBoundsError`.
        """
        self._require_box(center, radius)
        r = radius // 2
        for dx in range(-r, r):
            for dy in range(-r, r):
                x = max(center.x + dx, 0)
                y = max(center.y + dy, 0)
                self._put(x, y, atom)

    def draw_line(self, a: Coord, b: Coord, atom: A) -> None:
        """Rasterize segment ``a``-``b`` by unit parametric steps."""
        steps = _line_steps(a, b)
        for x, y in steps:
            self._require(x, y)
        self._require(b.x, b.y)
        for x, y in steps:
            self._put(x, y, atom)
        self._put(b.x, b.y, atom)

    def draw_line_with_thickness(
        self, a: Coord, b: Coord, atom: A, thickness: int
    ) -> None:
        """Like :meth:`draw_line` but stamps a ``thickness`` box at each step."""
        centers = [Coord(x, y) for x, y in _line_steps(a, b)]
        for c in centers:
            self._require_box(c, thickness)
        self._require(b.x, b.y)
        for c in centers:
            self.draw_circle(c, thickness, atom)
        self._put(b.x, b.y, atom)

    # -- output ----------------------------------------------------------

    def save_to_file(self, path: str | Path) -> None:
        """Encode the canvas and write it to *path*. OSError propagates."""
        logger.debug(
            "saving %s %dx%d to %s",
            type(self).__name__,
            self._width,
            self._height,
            path,
        )
        write_text(path, self.encode())

    def __str__(self) -> str:
        return self.encode()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Canvas):
            return NotImplemented
        return (
            type(self) is type(other)
            and self._width == other._width
            and self._height == other._height
            and self._atoms == other._atoms
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._width}x{self._height})"


def _line_steps(a: Coord, b: Coord) -> List[tuple[int, int]]:
    """Truncated points ``a + (b - a) * (t / dist)`` for ``t = 0, 1, ... <= dist``.

    A zero-length segment yields just ``a``.
    """
    ax, ay, bx, by = float(a.x), float(a.y), float(b.x), float(b.y)
    dist = sqrt((ax - bx) * (ax - bx) + (ay - by) * (ay - by))
    if dist == 0.0:
        return [(a.x, a.y)]
    steps: List[tuple[int, int]] = []
    t = 0.0
    while t <= dist:
        x = ax + (bx - ax) * (t / dist)
        y = ay + (by - ay) * (t / dist)
        steps.append((int(x), int(y)))
        t += 1.0
    return steps
