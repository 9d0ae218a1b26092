"""Centralized default values loaded from YAML.

The master source is ``values.yml`` in this package. On import we load and
parse it; a missing file or malformed entries fall back to the hard-coded
defaults below so the application can still run.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List

import yaml

logger = logging.getLogger(__name__)

_PKG_DIR = Path(__file__).parent
_YAML_PATH = _PKG_DIR / "values.yml"

# --- Fallback literals ---------------------------------------------------
_FALLBACK_CANVAS = {"width": 1000, "height": 1000, "background": [0, 0, 0, 255]}
_FALLBACK_OUTPUT = {"path": "image.png", "backend": "pillow"}
_FALLBACK_SCENE_DEFAULT = "demo"
_FALLBACK_RANDOM_COUNTS = {
    "point": 25,
    "line": 10,
    "rectangle": 3,
    "triangle": 3,
    "circle": 49,
}

SCENES = ("demo", "random")

# --- Load YAML -----------------------------------------------------------
_canvas: Dict[str, Any] = dict(_FALLBACK_CANVAS)
_output: Dict[str, Any] = dict(_FALLBACK_OUTPUT)
_scene_default: str = _FALLBACK_SCENE_DEFAULT
_random_counts: Dict[str, int] = dict(_FALLBACK_RANDOM_COUNTS)


def _as_int(v: Any, default: int) -> int:
    try:
        return int(v)
    except (TypeError, ValueError):
        return default


if _YAML_PATH.exists():  # pragma: no branch - simple path
    try:
        with _YAML_PATH.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning("failed to read %s: %s", _YAML_PATH, e)
        raw = {}
    if not isinstance(raw, dict):
        raw = {}

    canvas = raw.get("canvas", {})
    if isinstance(canvas, dict):
        for key in ("width", "height"):
            if key in canvas:
                _canvas[key] = _as_int(canvas[key], _FALLBACK_CANVAS[key])
        bg = canvas.get("background")
        if isinstance(bg, list) and len(bg) == 4:
            _canvas["background"] = [_as_int(c, 0) for c in bg]

    output = raw.get("output", {})
    if isinstance(output, dict):
        for key in ("path", "backend"):
            if isinstance(output.get(key), str):
                _output[key] = output[key]

    scene = raw.get("scene", {})
    if isinstance(scene, dict):
        default = scene.get("default")
        if default in SCENES:
            _scene_default = default
        counts = scene.get("random_counts")
        if isinstance(counts, dict):
            for kind, n in counts.items():
                if kind in _FALLBACK_RANDOM_COUNTS:
                    _random_counts[kind] = max(0, _as_int(n, 0))


# --- Public constants ----------------------------------------------------
CANVAS_DEFAULTS: Dict[str, Any] = _canvas
OUTPUT_DEFAULTS: Dict[str, Any] = _output
SCENE_DEFAULT: str = _scene_default
RANDOM_COUNTS: Dict[str, int] = _random_counts
BACKGROUND: List[int] = list(_canvas["background"])

__all__ = [
    "BACKGROUND",
    "CANVAS_DEFAULTS",
    "OUTPUT_DEFAULTS",
    "RANDOM_COUNTS",
    "SCENES",
    "SCENE_DEFAULT",
]
