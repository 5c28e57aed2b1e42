"""Canvas, atom types and Netpbm encoders."""

from .canvas import AtomView, Canvas, MutableAtoms, PixelRef
from .images import ImagePBM, ImagePPM
from .netpbm import PbmPolarity, encode_pbm, encode_ppm, write_text
from .pixel import Pixel

__all__ = [
    "AtomView",
    "Canvas",
    "ImagePBM",
    "ImagePPM",
    "MutableAtoms",
    "PbmPolarity",
    "Pixel",
    "PixelRef",
    "encode_pbm",
    "encode_ppm",
    "write_text",
]
