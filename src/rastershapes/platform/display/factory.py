"""Select a concrete Surface implementation by name."""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from rastershapes.core.color import BLACK, Color
from rastershapes.platform.display.pillow_backend import PillowSurface

if TYPE_CHECKING:  # pragma: no cover
    from rastershapes.platform.display.pygame_backend import PygameSurface

BACKENDS = ("pillow", "pygame")

AnySurface = Union[PillowSurface, "PygameSurface"]


def make_surface(
    backend: str, width: int, height: int, background: Color = BLACK
) -> AnySurface:
    if backend == "pillow":
        return PillowSurface(width, height, background)
    if backend == "pygame":
        # Deferred so pillow-only runs never initialise SDL.
        from rastershapes.platform.display.pygame_backend import PygameSurface

        return PygameSurface(width, height, background)
    raise ValueError(f"unknown backend {backend!r}; expected one of {BACKENDS}")
