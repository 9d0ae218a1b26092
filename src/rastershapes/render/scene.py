"""Scene builders: lists of drawables drawn in caller order.

There is no retained scene model. A scene is just a list of primitives that
:func:`draw_all` draws one after another onto a surface; later writes win
where shapes overlap.
"""

from __future__ import annotations

import logging
from collections import Counter
from random import Random
from typing import Callable, Dict, Iterable, List, Mapping, Optional

from rastershapes.core.rng import default_rng
from rastershapes.core.shapes import (
    Circle,
    Drawable,
    Line,
    Point,
    Rectangle,
    Triangle,
)
from rastershapes.render.surface import Surface

logger = logging.getLogger(__name__)

DEMO_CIRCLES = 49

# Order here is the draw order used by random_scene.
_RANDOM_FACTORIES: Dict[str, Callable[[int, int, Optional[Random]], Drawable]] = {
    "point": Point.random,
    "line": Line.random,
    "rectangle": Rectangle.random,
    "triangle": Triangle.random,
    "circle": Circle.random,
}

KINDS = tuple(_RANDOM_FACTORIES)


def demo_scene(width: int, height: int, rng: Optional[Random] = None) -> List[Drawable]:
    """The classic picture: a random line and point, a fixed rectangle and
    triangle, then a handful of random circles."""
    rng = rng or default_rng()
    scene: List[Drawable] = [
        Line.random(width, height, rng),
        Point.random(width, height, rng),
        Rectangle(Point(150, 300), Point(50, 60)),
        Triangle(Point(500, 500), Point(250, 700), Point(700, 800)),
    ]
    scene.extend(Circle.random(width, height, rng) for _ in range(DEMO_CIRCLES))
    return scene


def random_scene(
    width: int,
    height: int,
    counts: Mapping[str, int],
    rng: Optional[Random] = None,
) -> List[Drawable]:
    unknown = set(counts) - set(KINDS)
    if unknown:
        raise ValueError(
            f"unknown primitive kind(s) {sorted(unknown)}; expected {list(KINDS)}"
        )
    rng = rng or default_rng()
    scene: List[Drawable] = []
    for kind, factory in _RANDOM_FACTORIES.items():
        n = int(counts.get(kind, 0))
        if n < 0:
            raise ValueError(f"count for {kind} must be >= 0, got {n}")
        scene.extend(factory(width, height, rng) for _ in range(n))
    return scene


def draw_all(
    surface: Surface, drawables: Iterable[Drawable], rng: Optional[Random] = None
) -> int:
    """Draw each primitive in sequence and return how many were drawn."""
    kinds: Counter[str] = Counter()
    for d in drawables:
        d.draw(surface, rng)
        kinds[type(d).__name__] += 1
    logger.debug("drew %s", dict(kinds))
    return sum(kinds.values())


__all__ = ["DEMO_CIRCLES", "KINDS", "demo_scene", "draw_all", "random_scene"]
