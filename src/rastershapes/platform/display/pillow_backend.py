"""Pillow-backed Surface.

Wraps an RGBA ``PIL.Image`` and writes single pixels into it. Writes outside
the image are dropped silently so shapes may run off the edges.

Example:
    from rastershapes.core.shapes import Circle, Point
    from rastershapes.platform.display.pillow_backend import PillowSurface

    surface = PillowSurface(320, 240)
    Circle(Point(160, 120), 80).draw(surface)
    surface.save_png("/tmp/circle.png")
"""

from __future__ import annotations

from pathlib import Path
from typing import Tuple

from PIL import Image

from rastershapes.core.color import BLACK, Color
from rastershapes.render.surface import Surface


class PillowSurface(Surface):
    """Pixel surface over a Pillow image, counting writes for diagnostics."""

    def __init__(self, width: int, height: int, background: Color = BLACK) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"surface size must be positive, got {width}x{height}")
        self._width = int(width)
        self._height = int(height)
        self._img = Image.new("RGBA", (self._width, self._height), tuple(background))
        self._pixels = self._img.load()
        self.ops = 0
        self.dropped = 0

    def width(self) -> int:
        return self._width

    def height(self) -> int:
        return self._height

    def size(self) -> Tuple[int, int]:
        return (self._width, self._height)

    @property
    def image(self) -> Image.Image:
        return self._img

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        self.ops += 1
        if 0 <= x < self._width and 0 <= y < self._height:
            r, g, b, a = color
            self._pixels[x, y] = (int(r), int(g), int(b), int(a))
        else:
            self.dropped += 1

    def get_pixel(self, x: int, y: int) -> Color:
        r, g, b, a = self._img.getpixel((x, y))
        return Color(r, g, b, a)

    def clear(self, color: Color = BLACK) -> None:
        self._img.paste(tuple(color), (0, 0, self._width, self._height))
        self.ops = 0
        self.dropped = 0

    def save_png(self, path: str) -> None:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        self._img.save(path, format="PNG")
