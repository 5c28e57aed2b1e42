"""Plain-text Netpbm encoders.

Only the ASCII variants are produced:

``P3`` (color)::

    P3
    <width> <height>
    255
    <r> <g> <b>        one line per pixel, each value "%3d"

``P1`` (monochrome)::

    P1
    <width> <height>
    0110...            one digit per pixel, no separators, no final newline

Atoms are emitted in storage order: top row first, left to right.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Iterable, Sequence

from .pixel import Pixel

__all__ = [
    "PPM_MAX_VALUE",
    "PbmPolarity",
    "encode_pbm",
    "encode_ppm",
    "write_text",
]

logger = logging.getLogger(__name__)

PPM_MAX_VALUE = 255


class PbmPolarity(str, Enum):
    """Mapping from monochrome atoms to ``P1`` digits.

    ``ON_IS_ONE`` is canonical: an "on" atom is written as ``1``, which
    Netpbm viewers render as black ink. ``ON_IS_ZERO`` inverts the digits.
    """

    ON_IS_ONE = "on_is_one"
    ON_IS_ZERO = "on_is_zero"

    def digit(self, on: bool) -> str:
        if self is PbmPolarity.ON_IS_ZERO:
            on = not on
        return "1" if on else "0"


def encode_ppm(width: int, height: int, atoms: Iterable[Pixel]) -> str:
    parts = ["P3\n", f"{width} {height}\n", f"{PPM_MAX_VALUE}\n"]
    parts.extend(f"{p.r:3d} {p.g:3d} {p.b:3d}\n" for p in atoms)
    out = "".join(parts)
    logger.debug("encoded %dx%d P3 image (%d chars)", width, height, len(out))
    return out


def encode_pbm(
    width: int,
    height: int,
    atoms: Sequence[bool],
    polarity: PbmPolarity = PbmPolarity.ON_IS_ONE,
) -> str:
    on, off = polarity.digit(True), polarity.digit(False)
    body = "".join(on if a else off for a in atoms)
    out = f"P1\n{width} {height}\n{body}"
    logger.debug("encoded %dx%d P1 image (%s)", width, height, polarity.value)
    return out


def write_text(path: str | Path, text: str) -> None:
    """Create or truncate *path* and write *text* verbatim.

    OSError (missing directory, permissions, full disk) propagates unchanged.
    """
    data = text.encode("ascii")
    with open(path, "wb") as f:
        f.write(data)
    logger.debug("wrote %d bytes to %s", len(data), path)
