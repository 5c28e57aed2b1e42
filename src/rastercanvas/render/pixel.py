"""Pixel atoms stored in a canvas.

Two atom types exist. :class:`Pixel` is a three channel 8-bit color; the
monochrome atom is a plain ``bool`` where ``True`` is foreground ("on") and
``False`` is background. How a bool becomes a ``0``/``1`` digit is decided by
the encoder (see :class:`rastercanvas.render.netpbm.PbmPolarity`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Tuple

__all__ = ["Pixel"]

_CHANNEL_MAX = 255


@dataclass(frozen=True, slots=True)
class Pixel:
    """RGB color atom with channels in ``[0, 255]``."""

    r: int
    g: int
    b: int

    BLACK: ClassVar["Pixel"]
    UNIT: ClassVar["Pixel"]
    WHITE: ClassVar["Pixel"]
    RED: ClassVar["Pixel"]
    GREEN: ClassVar["Pixel"]
    BLUE: ClassVar["Pixel"]
    PURPLE: ClassVar["Pixel"]

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            v = getattr(self, name)
            if not 0 <= v <= _CHANNEL_MAX:
                raise ValueError(f"channel {name}={v} outside [0, {_CHANNEL_MAX}]")

    def __mul__(self, k: int) -> "Pixel":
        """Scale each channel by *k* with 8-bit wraparound (no clamping).

        ``Pixel(200, 1, 0) * 2 == Pixel(144, 2, 0)``.
        """
        if not isinstance(k, int) or isinstance(k, bool):
            return NotImplemented
        if not 0 <= k <= _CHANNEL_MAX:
            raise ValueError(f"scale factor {k} outside [0, {_CHANNEL_MAX}]")
        return Pixel((self.r * k) & 0xFF, (self.g * k) & 0xFF, (self.b * k) & 0xFF)

    __rmul__ = __mul__

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)


Pixel.BLACK = Pixel(0, 0, 0)
Pixel.UNIT = Pixel(1, 1, 1)
Pixel.WHITE = Pixel(255, 255, 255)
Pixel.RED = Pixel(255, 0, 0)
Pixel.GREEN = Pixel(0, 255, 0)
Pixel.BLUE = Pixel(0, 0, 255)
Pixel.PURPLE = Pixel(255, 0, 255)
