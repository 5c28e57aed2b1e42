"""Command-line interface for rastercanvas.

Renders a handful of demo images into an output directory::

    rastercanvas --output-dir out basics bw-square

With no demo names every demo is rendered. Defaults come from the persisted
settings (see :mod:`rastercanvas.settings.store`); flags override them for the
current run, and ``--save-defaults`` writes the effective values back.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Callable, Dict

from rastercanvas import __version__
from rastercanvas.config import RuntimeConfig, make_runtime_config, save_as_defaults
from rastercanvas.core.coord import Coord
from rastercanvas.core.indexing import idx_to_coords
from rastercanvas.errors import CanvasError
from rastercanvas.render.canvas import Canvas
from rastercanvas.render.images import ImagePBM, ImagePPM
from rastercanvas.render.pixel import Pixel
from rastercanvas.settings.store import SettingsStore

logger = logging.getLogger(__name__)


def demo_basics(cfg: RuntimeConfig) -> ImagePPM:
    """3x3 purple canvas with a white border and a black center."""
    img = ImagePPM(3, 3, Pixel.PURPLE)
    for x in range(3):
        for y in range(3):
            img.set(x, y, Pixel.WHITE)
    img.set(1, 1, Pixel.BLACK)
    return img


def demo_color_square(cfg: RuntimeConfig) -> ImagePPM:
    """Red ramps left to right and green top to bottom."""
    n = cfg.demo_size
    img = ImagePPM(n, n, Pixel.BLACK)
    atoms = img.atoms_mut()
    for i in range(len(atoms)):
        x, y = idx_to_coords(i, img.width)
        atoms[i] = Pixel(x & 0xFF, y & 0xFF, 0)
    return img


def demo_bw_square(cfg: RuntimeConfig) -> ImagePBM:
    """Monochrome canvas with a filled radius-30 box at (100, 100)."""
    n = cfg.demo_size
    img = ImagePBM(n, n, False, polarity=cfg.pbm_polarity)
    if n >= 115:
        center, radius = Coord(100, 100), 30
    else:
        center, radius = Coord(n // 2, n // 2), min(30, n)
    img.draw_circle(center, radius, True)
    return img


def demo_lines(cfg: RuntimeConfig) -> ImagePPM:
    """Grey shaded background crossed by a thin and a thick diagonal."""
    n = cfg.demo_size
    img = ImagePPM(n, n, Pixel.BLACK)
    span = max(n - 1, 1)
    for y in range(n):
        shade = Pixel.UNIT * (y * 255 // span)
        for x in range(n):
            img.set(x, y, shade)
    img.draw_line(Coord(0, 0), Coord(n - 1, n - 1), Pixel.RED)
    thickness = n // 32
    m = thickness // 2
    img.draw_line_with_thickness(
        Coord(m, n - 1 - m), Coord(n - 1 - m, m), Pixel.BLUE, thickness
    )
    return img


DEMOS: Dict[str, tuple[str, Callable[[RuntimeConfig], Canvas]]] = {
    "basics": ("basics.ppm", demo_basics),
    "color-square": ("color_square.ppm", demo_color_square),
    "bw-square": ("bw_square.pbm", demo_bw_square),
    "lines": ("lines.ppm", demo_lines),
}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="rastercanvas",
        description="Render demo canvases to plain-text Netpbm files.",
    )
    parser.add_argument(
        "demos",
        nargs="*",
        metavar="demo",
        help="Demos to render: " + ", ".join(sorted(DEMOS)) + " (default: all)",
    )
    parser.add_argument(
        "--output-dir", "-o", default=None, help="Directory for output files"
    )
    parser.add_argument(
        "--size", type=int, default=None, help="Edge length of square demos"
    )
    parser.add_argument(
        "--invert-pbm",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Write PBM foreground pixels as 0 instead of 1 (--no-invert-pbm: as 1)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
    )
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Persist the effective options as the new defaults",
    )
    parser.add_argument("--version", action="store_true", help="Print version")
    args = parser.parse_args(argv)
    unknown = [d for d in args.demos if d not in DEMOS]
    if unknown:
        parser.error("unknown demo(s): " + ", ".join(unknown))
    return args


def main(argv: list[str] | None = None) -> int:
    """Render the requested demos; returns a process exit status."""
    args = parse_args(argv)
    if args.version:
        print(f"rastercanvas {__version__}")
        return 0

    try:
        cfg = make_runtime_config(args=args)
    except ValueError as e:
        logging.basicConfig(level=logging.WARNING)
        logger.error("invalid configuration: %s", e)
        return 1
    logging.basicConfig(
        level=cfg.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    if args.save_defaults:
        try:
            save_as_defaults(cfg)
        except OSError as e:
            logger.error("could not save defaults: %s", e)
            return 1
        logger.info("saved defaults to %s", SettingsStore.settings_path())

    names = args.demos or list(DEMOS)
    try:
        cfg.output_dir.mkdir(parents=True, exist_ok=True)
        for name in names:
            filename, build = DEMOS[name]
            path: Path = cfg.output_dir / filename
            build(cfg).save_to_file(path)
            logger.info("wrote %s -> %s", name, path)
    except (OSError, CanvasError) as e:
        logger.error("rendering failed: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
