"""rastercanvas package root.

In-memory raster canvases with simple drawing primitives and plain-text
Netpbm output. The project version is defined here as the single source of
truth; pyproject.toml reads it via
``version = { attr = "rastercanvas.__version__" }``.
"""

from .core.coord import Coord
from .errors import CanvasError, CoordinateError, OutOfBoundsError
from .render.canvas import Canvas, PixelRef
from .render.images import ImagePBM, ImagePPM
from .render.netpbm import PbmPolarity
from .render.pixel import Pixel

__all__ = [
    "__version__",
    "Canvas",
    "CanvasError",
    "Coord",
    "CoordinateError",
    "ImagePBM",
    "ImagePPM",
    "OutOfBoundsError",
    "PbmPolarity",
    "Pixel",
    "PixelRef",
]

__version__ = "0.1.0"
