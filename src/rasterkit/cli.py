"""Command-line interface for rasterkit.

Renders a random scene of points, lines, rectangles, triangles, circles,
cubes and pentagons to a PNG. Packaged defaults come from
``settings/values.yml``, user defaults from ``$RASTERKIT_HOME/settings.json``
and flags override both for the current run.
"""

from __future__ import annotations

import argparse
import logging
import random
from pathlib import Path
from typing import Tuple

from pydantic import ValidationError

from rasterkit import __version__
from rasterkit.config import make_scene_config
from rasterkit.core.shapes import ShapeKind
from rasterkit.render.scene import make_backend, random_scene, render_scene
from rasterkit.settings.store import SettingsStore
from rasterkit.settings.values import BACKENDS

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"


def _parse_count(s: str) -> Tuple[str, int]:
    kind, sep, n = s.partition("=")
    kind = kind.strip().lower()
    if not sep or kind not in {k.value for k in ShapeKind}:
        raise argparse.ArgumentTypeError(
            f"expected KIND=N with KIND one of "
            f"{', '.join(k.value for k in ShapeKind)}; got {s!r}"
        )
    try:
        count = int(n)
    except ValueError:
        raise argparse.ArgumentTypeError(f"count must be an integer: {s!r}") from None
    if count < 0:
        raise argparse.ArgumentTypeError(f"count must be >= 0: {s!r}")
    return kind, count


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments.

    When ``argv`` is None the values are read from ``sys.argv`` as usual.
    Accepting an ``argv`` list makes the parser testable programmatically.
    Repeated ``--count`` flags are folded into a ``counts`` dict.
    """
    p = argparse.ArgumentParser(
        prog="rasterkit", description="Render a random shape scene to PNG"
    )
    p.add_argument("--width", type=int, default=None, help="Canvas width in px")
    p.add_argument("--height", type=int, default=None, help="Canvas height in px")
    p.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the scene's random source (default: unseeded)",
    )
    p.add_argument(
        "-o", "--output", type=str, default=None, help="PNG output path"
    )
    p.add_argument("--backend", choices=BACKENDS, default=None, help="Pixel backend")
    p.add_argument(
        "--count",
        dest="count_items",
        metavar="KIND=N",
        type=_parse_count,
        action="append",
        default=[],
        help="Number of random shapes of KIND (repeatable)",
    )
    p.add_argument(
        "--settings",
        type=str,
        default=None,
        help="Settings JSON file (default: $RASTERKIT_HOME/settings.json)",
    )
    p.add_argument(
        "--save-settings",
        dest="save_settings",
        action="store_true",
        help="Persist the merged settings before rendering",
    )
    p.add_argument(
        "--window",
        action="store_true",
        help="Show the result in a window until closed (pygame backend)",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv debug)",
    )
    p.add_argument("--version", action="store_true", help="Print version and exit")
    args = p.parse_args(argv)
    args.counts = dict(args.count_items)
    return args


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format=_LOG_FORMAT, datefmt="%H:%M:%S")


def main(argv: list[str] | None = None) -> int:
    """Synchronous entrypoint for the rasterkit CLI.

    Returns a process exit code: 0 on success, 1 when the PNG cannot be
    written and 2 on invalid configuration or an unusable backend.
    """
    args = parse_args(argv)

    if args.version:
        print(f"rasterkit {__version__}")
        return 0

    _configure_logging(args.verbose)

    try:
        settings = make_scene_config(args=args)
    except ValidationError as e:
        logger.error("invalid configuration: %s", e)
        return 2

    if args.save_settings:
        SettingsStore.save(settings, Path(args.settings) if args.settings else None)

    rng = random.Random(settings.seed)
    try:
        scene = random_scene(settings, rng)
    except ValueError as e:
        logger.error("cannot build scene: %s", e)
        return 2

    try:
        backend = make_backend(settings, create_window=args.window)
    except RuntimeError as e:
        logger.error("cannot open %s backend: %s", settings.backend, e)
        return 2

    render_scene(scene, backend, rng)
    try:
        backend.save_png(settings.output)
    except OSError as e:
        logger.error("cannot write %s: %s", settings.output, e)
        return 1
    print(f"Saved {settings.output} ({len(scene.shapes)} shapes)")

    wait = getattr(backend, "run_until_closed", None)
    if args.window and wait is not None:
        wait()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
