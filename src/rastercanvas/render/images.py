"""Concrete canvases for the color (PPM) and monochrome (PBM) formats."""

from __future__ import annotations

from .canvas import Canvas
from .netpbm import PbmPolarity, encode_pbm, encode_ppm
from .pixel import Pixel

__all__ = ["ImagePBM", "ImagePPM"]


class ImagePPM(Canvas[Pixel]):
    """RGB canvas serialized as plain PPM (``P3``)."""

    def __init__(self, width: int, height: int, background: Pixel = Pixel.BLACK):
        super().__init__(width, height, background)

    def encode(self) -> str:
        return encode_ppm(self.width, self.height, self.atoms)


class ImagePBM(Canvas[bool]):
    """Monochrome canvas serialized as plain PBM (``P1``).

    ``False`` is background and ``True`` foreground. *polarity* fixes how
    those map to digits; the default writes foreground as ``1``.
    """

    def __init__(
        self,
        width: int,
        height: int,
        background: bool = False,
        polarity: PbmPolarity = PbmPolarity.ON_IS_ONE,
    ):
        super().__init__(width, height, background)
        self.polarity = PbmPolarity(polarity)

    def encode(self) -> str:
        return encode_pbm(self.width, self.height, self.atoms, self.polarity)
