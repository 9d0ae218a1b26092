"""Command-line interface for rastershapes.

Draws either the classic demo picture or a random scene onto a fresh
surface and writes it out as PNG. Settings come from
``$RASTERSHAPES_HOME/settings.json`` (if present) and are overridden by
flags for the current run; ``--save-settings`` persists the merged result.
"""

from __future__ import annotations

import argparse
import logging

from pydantic import ValidationError

from rastershapes import __version__
from rastershapes.config import RuntimeConfig, make_config, merge_args
from rastershapes.core.rng import make_rng
from rastershapes.platform.display.factory import BACKENDS, make_surface
from rastershapes.render.scene import demo_scene, draw_all, random_scene
from rastershapes.settings.store import SettingsStore
from rastershapes.settings.values import SCENES

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments.

    When ``argv`` is None the values are read from ``sys.argv`` as usual.
    Flags left unset are None so persisted settings are not overridden.
    """
    p = argparse.ArgumentParser(description="Rasterize random geometric shapes")
    p.add_argument("--width", type=int, default=None, help="Canvas width in px")
    p.add_argument("--height", type=int, default=None, help="Canvas height in px")
    p.add_argument(
        "--scene",
        choices=SCENES,
        default=None,
        help="demo: the classic picture; random: use the per-primitive counts",
    )
    p.add_argument("--backend", choices=BACKENDS, default=None, help="Surface backend")
    p.add_argument(
        "--seed", type=int, default=None, help="Seed for reproducible output"
    )
    p.add_argument("-o", "--output", default=None, help="Output PNG path")
    for name in ("points", "lines", "rectangles", "triangles", "circles"):
        p.add_argument(
            f"--{name}",
            type=int,
            default=None,
            help=f"Number of random {name} (random scene only)",
        )
    p.add_argument(
        "--save-settings",
        dest="save_settings",
        action="store_true",
        help="Persist the merged settings to settings.json",
    )
    p.add_argument(
        "--log-level",
        dest="log_level",
        default="INFO",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging level (default: INFO)",
    )
    p.add_argument("--version", action="store_true", help="Print version and exit")
    return p.parse_args(argv)


def render(cfg: RuntimeConfig) -> int:
    """Draw the configured scene and save it. Returns the number of writes."""
    rng = make_rng(cfg.seed)
    surface = make_surface(cfg.backend, cfg.width, cfg.height, cfg.background)
    if cfg.scene == "demo":
        drawables = demo_scene(cfg.width, cfg.height, rng)
    else:
        drawables = random_scene(cfg.width, cfg.height, cfg.counts, rng)
    n = draw_all(surface, drawables, rng)
    surface.save_png(cfg.output)
    logger.info(
        "wrote %s (%dx%d, %d shapes, %d pixel writes)",
        cfg.output,
        cfg.width,
        cfg.height,
        n,
        surface.ops,
    )
    return surface.ops


def main(argv: list[str] | None = None) -> int:
    """Synchronous entrypoint. Returns a process exit code."""
    args = parse_args(argv)
    if args.version:
        print(f"rastershapes {__version__}")
        return 0

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        cfg = make_config(args=args)
        if args.save_settings:
            SettingsStore.save(merge_args(SettingsStore.load(), args))
            logger.info("saved settings to %s", SettingsStore.settings_path())
    except ValidationError as e:
        logger.error("invalid configuration:\n%s", e)
        return 2

    try:
        render(cfg)
    except RuntimeError as e:
        logger.error("cannot render with backend %s: %s", cfg.backend, e)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
