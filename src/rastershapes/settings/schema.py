"""Pydantic model for user settings."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from rastershapes.core.color import Color
from rastershapes.platform.display.factory import BACKENDS

from .values import (
    BACKGROUND,
    CANVAS_DEFAULTS,
    OUTPUT_DEFAULTS,
    RANDOM_COUNTS,
    SCENE_DEFAULT,
    SCENES,
)


class Settings(BaseModel):
    """Rendering settings persisted to disk.

    Parameters
    ----------
    width, height: Canvas size in pixels. Both must be at least 2 so the
        random constructors have a non-empty coordinate range.
    background: RGBA fill used before any shape is drawn.
    output: Destination PNG path.
    backend: ``pillow`` or ``pygame``.
    scene: ``demo`` for the classic picture or ``random`` for ``counts``.
    counts: Per-primitive counts for the random scene.
    seed: Optional seed for reproducible output. ``None`` means fresh entropy.
    """

    width: int = Field(default=int(CANVAS_DEFAULTS["width"]), ge=2)
    height: int = Field(default=int(CANVAS_DEFAULTS["height"]), ge=2)
    background: List[int] = Field(default_factory=lambda: list(BACKGROUND))
    output: str = Field(default=str(OUTPUT_DEFAULTS["path"]))
    backend: str = Field(default=str(OUTPUT_DEFAULTS["backend"]))
    scene: str = Field(default=SCENE_DEFAULT)
    counts: Dict[str, int] = Field(default_factory=lambda: dict(RANDOM_COUNTS))
    seed: Optional[int] = Field(default=None)

    @field_validator("background")
    @classmethod
    def _chk_background(cls, v: List[int]) -> List[int]:
        if len(v) != 4:
            raise ValueError("background must have 4 channels (r, g, b, a)")
        Color.of(*v)
        return v

    @field_validator("backend")
    @classmethod
    def _chk_backend(cls, v: str) -> str:
        if v not in BACKENDS:
            raise ValueError("invalid backend: must be one of " + ", ".join(BACKENDS))
        return v

    @field_validator("scene")
    @classmethod
    def _chk_scene(cls, v: str) -> str:
        if v not in SCENES:
            raise ValueError("invalid scene: must be one of " + ", ".join(SCENES))
        return v

    @field_validator("counts")
    @classmethod
    def _chk_counts(cls, v: Dict[str, int]) -> Dict[str, int]:
        unknown = set(v) - set(RANDOM_COUNTS)
        if unknown:
            raise ValueError(
                "unknown primitive kind(s): " + ", ".join(sorted(unknown))
            )
        if any(n < 0 for n in v.values()):
            raise ValueError("counts must be >= 0")
        return v

    def background_color(self) -> Color:
        return Color(*self.background)
