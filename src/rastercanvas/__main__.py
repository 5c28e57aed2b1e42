"""Console entrypoint for rastercanvas.

Running ``python -m rastercanvas`` or the installed ``rastercanvas`` console
script executes :func:`rastercanvas.cli.main`.
"""

from __future__ import annotations

import sys

from rastercanvas.cli import main as cli_main


def main() -> None:
    """Application entrypoint (delegates to :func:`rastercanvas.cli.main`)."""
    sys.exit(cli_main())


if __name__ == "__main__":
    main()
