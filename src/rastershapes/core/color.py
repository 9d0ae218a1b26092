"""RGBA colour value type and the shared random colour generator.

Every primitive that picks its own colour goes through :func:`random_color`.
Pure black is never returned so that shapes stay visible on the default
black background.
"""

from __future__ import annotations

import random
from typing import NamedTuple, Optional

from .rng import default_rng

MAX_COLOR_ATTEMPTS = 10_000


class ColorSamplingError(RuntimeError):
    """Raised when the random source keeps producing pure black."""


class Color(NamedTuple):
    """Four unsigned 8-bit channels. Alpha defaults to fully opaque."""

    r: int
    g: int
    b: int
    a: int = 255

    @classmethod
    def of(cls, r: int, g: int, b: int, a: int = 255) -> "Color":
        """Build a colour, validating that every channel is in 0..255."""
        for name, v in (("r", r), ("g", g), ("b", b), ("a", a)):
            if not isinstance(v, int) or not 0 <= v <= 255:
                raise ValueError(f"channel {name} must be an int in 0..255, got {v!r}")
        return cls(r, g, b, a)

    @property
    def is_black(self) -> bool:
        return self.r == 0 and self.g == 0 and self.b == 0


BLACK = Color(0, 0, 0, 255)
WHITE = Color(255, 255, 255, 255)


def random_color(rng: Optional[random.Random] = None) -> Color:
    """Return an opaque colour drawn uniformly from the non-black RGB cube.

    Channels are sampled independently; a pure black triple is rejected and
    resampled, which keeps the distribution uniform over the remaining
    ``256**3 - 1`` triples.
    """
    rng = rng or default_rng()
    for _ in range(MAX_COLOR_ATTEMPTS):
        r = rng.randint(0, 255)
        g = rng.randint(0, 255)
        b = rng.randint(0, 255)
        if r != 0 or g != 0 or b != 0:
            return Color(r, g, b, 255)
    raise ColorSamplingError(
        f"random source produced black {MAX_COLOR_ATTEMPTS} times in a row"
    )


__all__ = [
    "BLACK",
    "Color",
    "ColorSamplingError",
    "MAX_COLOR_ATTEMPTS",
    "WHITE",
    "random_color",
]
