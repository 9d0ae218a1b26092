"""Pygame-based Surface with headless (offscreen) support.

It's suitable for deterministic, headless tests by setting the environment
variable SDL_VIDEODRIVER=dummy before importing pygame.

Example:
    import os
    os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
    from rastershapes.platform.display.pygame_backend import PygameSurface

    surface = PygameSurface(320, 480)
    Line(Point(10, 10), Point(310, 10), Color(255, 255, 0)).draw(surface)
    surface.save_png("/tmp/frame.png")
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Tuple

from rastershapes.core.color import BLACK, Color
from rastershapes.render.surface import Surface

pg: Any = None
try:  # pragma: no cover - import guard for environments without SDL
    import pygame as _pg

    pg = _pg
except Exception:  # pragma: no cover
    pg = None


def _pygame_color(c: Color) -> Tuple[int, int, int, int]:
    r, g, b, a = c
    return int(r), int(g), int(b), int(a)


class PygameSurface(Surface):
    """Offscreen ``pygame.Surface`` with per-pixel alpha.

    No display window is ever created. Writes outside the surface are
    ignored.
    """

    def __init__(self, width: int, height: int, background: Color = BLACK) -> None:
        local_pg = pg
        if local_pg is None:
            raise RuntimeError(
                "pygame is not available. "
                "Ensure it is installed and that SDL is configured."
            )
        if width <= 0 or height <= 0:
            raise ValueError(f"surface size must be positive, got {width}x{height}")

        if os.environ.get("SDL_VIDEODRIVER") == "dummy":
            os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

        if not local_pg.get_init():
            local_pg.init()

        self._width, self._height = int(width), int(height)
        self._surface = local_pg.Surface(
            (self._width, self._height), flags=local_pg.SRCALPHA
        )
        self._surface.fill(_pygame_color(background))
        self.ops = 0

    def width(self) -> int:
        return self._width

    def height(self) -> int:
        return self._height

    def size(self) -> Tuple[int, int]:
        return (self._width, self._height)

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        self.ops += 1
        if 0 <= x < self._width and 0 <= y < self._height:
            self._surface.set_at((x, y), _pygame_color(color))

    def get_pixel(self, x: int, y: int) -> Color:
        c = self._surface.get_at((x, y))
        return Color(c.r, c.g, c.b, c.a)

    def clear(self, color: Color = BLACK) -> None:
        self._surface.fill(_pygame_color(color))
        self.ops = 0

    def save_png(self, path: str) -> None:
        local_pg = pg
        if local_pg is None:  # pragma: no cover - should not happen at runtime
            raise RuntimeError("pygame is not available")
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        local_pg.image.save(self._surface, path)
