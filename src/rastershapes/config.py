"""Runtime configuration helpers.

Small aggregator that merges the defaults from settings.values, the persisted
Settings store and CLI overrides into the RuntimeConfig used by the CLI.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .core.color import Color
from .settings.schema import Settings
from .settings.store import SettingsStore

# argparse destination -> key in Settings.counts
_COUNT_ARGS = {
    "points": "point",
    "lines": "line",
    "rectangles": "rectangle",
    "triangles": "triangle",
    "circles": "circle",
}


@dataclass(slots=True)
class RuntimeConfig:
    width: int
    height: int
    background: Color
    output: str
    backend: str
    scene: str
    counts: Dict[str, int] = field(default_factory=dict)
    seed: Optional[int] = None


def merge_args(settings: Settings, args: Optional[object] = None) -> Settings:
    """Return a validated copy of *settings* with CLI overrides applied.

    Only attributes present and not None on *args* (argparse.Namespace-like)
    override. Validation errors propagate as pydantic ``ValidationError``.
    """
    data: Dict[str, Any] = settings.model_dump()
    if args is not None:
        for key in ("width", "height", "output", "backend", "scene", "seed"):
            v = getattr(args, key, None)
            if v is not None:
                data[key] = v
        counts = dict(data["counts"])
        for arg_name, kind in _COUNT_ARGS.items():
            v = getattr(args, arg_name, None)
            if v is not None:
                counts[kind] = v
        data["counts"] = counts
    return Settings.model_validate(data)


def make_config(*, args: Optional[object] = None) -> RuntimeConfig:
    """Build a RuntimeConfig from persisted settings and optional CLI *args*.

    Persisted settings (SettingsStore.load()) provide the user's defaults;
    CLI args override for the current run only.
    """
    settings = merge_args(SettingsStore.load(), args)
    return RuntimeConfig(
        width=settings.width,
        height=settings.height,
        background=settings.background_color(),
        output=settings.output,
        backend=settings.backend,
        scene=settings.scene,
        counts=dict(settings.counts),
        seed=settings.seed,
    )
