"""Console entrypoint for the rasterkit scene renderer.

This module delegates to :mod:`rasterkit.cli` so that running
``python -m rasterkit`` or the installed ``rasterkit`` console script
executes the same code.
"""

from __future__ import annotations

import sys

from rasterkit.cli import main as cli_main


def main() -> None:
    """Application entrypoint (delegates to :func:`rasterkit.cli.main`)."""
    sys.exit(cli_main())


if __name__ == "__main__":
    main()
