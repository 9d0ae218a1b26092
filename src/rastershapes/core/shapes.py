"""Drawable primitives and their scan-conversion algorithms.

Each primitive is a small immutable value. ``draw`` turns it into
``surface.set_pixel`` calls in a single synchronous pass; nothing is
retained between calls and the surface is never queried for its bounds.

Lines use a symmetric DDA walk along the dominant axis. Intermediate
positions are rounded half away from zero (``0.5 -> 1``, ``-0.5 -> -1``),
and Rectangle and Triangle inherit that rule because they are drawn as
Lines. Circles use the midpoint octant walk mirrored eight ways.

Example:
    from rastershapes.core.color import Color
    from rastershapes.core.shapes import Circle, Line, Point
    from rastershapes.platform.display.pillow_backend import PillowSurface

    surface = PillowSurface(200, 200)
    Line(Point(10, 10), Point(190, 40), Color(255, 255, 0)).draw(surface)
    Circle(Point(100, 100), 50).draw(surface)
    surface.save_png("/tmp/shapes.png")
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from random import Random
from typing import Iterator, Optional, Protocol, Tuple, runtime_checkable

from rastershapes.render.surface import Surface

from .color import Color, random_color
from .rng import default_rng

logger = logging.getLogger(__name__)

Pixel = Tuple[int, int]


def round_half_away(v: float) -> int:
    """Round to the nearest integer, ties going away from zero."""
    if v >= 0.0:
        return int(math.floor(v + 0.5))
    return -int(math.floor(-v + 0.5))


@runtime_checkable
class Drawable(Protocol):
    def draw(self, surface: Surface, rng: Optional[Random] = None) -> None:
        ...


@dataclass(frozen=True, slots=True)
class Point:
    x: int
    y: int

    @classmethod
    def random(cls, width: int, height: int, rng: Optional[Random] = None) -> "Point":
        """Return a point with ``x`` in ``[1, width)`` and ``y`` in ``[1, height)``.

        Column/row 0 and the right/bottom edge are never chosen.
        """
        if width <= 1 or height <= 1:
            raise ValueError(
                f"random points need width and height > 1, got {width}x{height}"
            )
        rng = rng or default_rng()
        x = rng.randrange(1, width)
        y = rng.randrange(1, height)
        return cls(x, y)

    def as_tuple(self) -> Pixel:
        return (self.x, self.y)

    def draw(self, surface: Surface, rng: Optional[Random] = None) -> None:
        surface.set_pixel(self.x, self.y, random_color(rng))


@dataclass(frozen=True, slots=True)
class Line:
    start: Point
    end: Point
    color: Color

    @classmethod
    def random(cls, width: int, height: int, rng: Optional[Random] = None) -> "Line":
        p1 = Point.random(width, height, rng)
        p2 = Point.random(width, height, rng)
        return cls(p1, p2, random_color(rng))

    @property
    def steps(self) -> int:
        return max(abs(self.end.x - self.start.x), abs(self.end.y - self.start.y))

    def pixels(self) -> Iterator[Pixel]:
        """Yield the ``steps + 1`` DDA samples from start to end."""
        x1, y1 = self.start.x, self.start.y
        dx = self.end.x - x1
        dy = self.end.y - y1
        steps = max(abs(dx), abs(dy))
        if steps == 0:
            yield (x1, y1)
            return

        x_inc = dx / steps
        y_inc = dy / steps
        x = float(x1)
        y = float(y1)
        for _ in range(steps + 1):
            yield (round_half_away(x), round_half_away(y))
            x += x_inc
            y += y_inc

    def draw(self, surface: Surface, rng: Optional[Random] = None) -> None:
        logger.debug(
            "line %s -> %s steps=%d color=%s",
            self.start.as_tuple(),
            self.end.as_tuple(),
            self.steps,
            tuple(self.color),
        )
        for x, y in self.pixels():
            surface.set_pixel(x, y, self.color)


@dataclass(frozen=True, slots=True)
class Rectangle:
    """Axis-aligned box given by two opposite corners in any order."""

    p1: Point
    p2: Point

    @classmethod
    def random(
        cls, width: int, height: int, rng: Optional[Random] = None
    ) -> "Rectangle":
        return cls(Point.random(width, height, rng), Point.random(width, height, rng))

    def corners(self) -> Tuple[Point, Point, Point, Point]:
        x1, y1 = self.p1.x, self.p1.y
        x2, y2 = self.p2.x, self.p2.y
        return (Point(x1, y1), Point(x1, y2), Point(x2, y2), Point(x2, y1))

    def edges(self, color: Color) -> Tuple[Line, Line, Line, Line]:
        c1, c2, c3, c4 = self.corners()
        # bottom, right, top, left
        return (
            Line(c1, c4, color),
            Line(c4, c3, color),
            Line(c3, c2, color),
            Line(c2, c1, color),
        )

    def draw(self, surface: Surface, rng: Optional[Random] = None) -> None:
        color = random_color(rng)
        logger.debug("rectangle %s color=%s", self, tuple(color))
        for edge in self.edges(color):
            edge.draw(surface)


@dataclass(frozen=True, slots=True)
class Triangle:
    """Three vertices joined in the order given. Collinear input is allowed."""

    v1: Point
    v2: Point
    v3: Point

    @classmethod
    def random(
        cls, width: int, height: int, rng: Optional[Random] = None
    ) -> "Triangle":
        return cls(
            Point.random(width, height, rng),
            Point.random(width, height, rng),
            Point.random(width, height, rng),
        )

    def edges(self, color: Color) -> Tuple[Line, Line, Line]:
        return (
            Line(self.v1, self.v2, color),
            Line(self.v2, self.v3, color),
            Line(self.v3, self.v1, color),
        )

    def draw(self, surface: Surface, rng: Optional[Random] = None) -> None:
        color = random_color(rng)
        logger.debug("triangle %s color=%s", self, tuple(color))
        for edge in self.edges(color):
            edge.draw(surface)


@dataclass(frozen=True, slots=True)
class Circle:
    center: Point
    radius: int

    def __post_init__(self) -> None:
        if self.radius < 0:
            raise ValueError(f"radius must be >= 0, got {self.radius}")

    @classmethod
    def random(cls, width: int, height: int, rng: Optional[Random] = None) -> "Circle":
        """Random center per :meth:`Point.random`, radius in ``[1, height // 2]``."""
        max_radius = height // 2
        if max_radius < 1:
            raise ValueError(f"random circles need height >= 2, got {height}")
        center = Point.random(width, height, rng)
        rng = rng or default_rng()
        return cls(center, rng.randint(1, max_radius))

    def pixels(self) -> Iterator[Pixel]:
        """Yield eight mirrored writes per step of the first-octant walk.

        Points on the octant boundaries are yielded more than once.
        """
        cx, cy = self.center.x, self.center.y
        r_sq = self.radius * self.radius
        x = 0
        y = -self.radius
        while x < -y:
            if x * x + (y + 0.5) * (y + 0.5) > r_sq:
                y += 1
            yield (cx + x, cy + y)
            yield (cx - x, cy + y)
            yield (cx + x, cy - y)
            yield (cx - x, cy - y)
            yield (cx + y, cy + x)
            yield (cx - y, cy + x)
            yield (cx + y, cy - x)
            yield (cx - y, cy - x)
            x += 1

    def draw(self, surface: Surface, rng: Optional[Random] = None) -> None:
        color = random_color(rng)
        for x, y in self.pixels():
            surface.set_pixel(x, y, color)


__all__ = [
    "Circle",
    "Drawable",
    "Line",
    "Pixel",
    "Point",
    "Rectangle",
    "Triangle",
    "round_half_away",
]
