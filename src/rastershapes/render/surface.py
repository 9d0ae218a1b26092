"""Framework-agnostic Surface protocol.

Defines the single pixel-level capability the shape rasterizers consume so
different image libraries (pillow, pygame, etc.) can be plugged in. How
coordinates outside ``[0, width) x [0, height)`` are handled is up to the
implementation; the rasterizers never clip.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from rastershapes.core.color import Color


@runtime_checkable
class Surface(Protocol):
    def set_pixel(self, x: int, y: int, color: Color) -> None:
        ...

    def width(self) -> int:
        ...

    def height(self) -> int:
        ...
