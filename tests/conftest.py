from __future__ import annotations

from typing import List, Tuple

import pytest

from rastershapes.core.color import Color


class RecordingSurface:
    """Surface double that logs every write and never clips."""

    def __init__(self, width: int = 100, height: int = 100) -> None:
        self._width = width
        self._height = height
        self.writes: List[Tuple[int, int, Color]] = []

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        self.writes.append((x, y, color))

    def width(self) -> int:
        return self._width

    def height(self) -> int:
        return self._height

    @property
    def coords(self) -> List[Tuple[int, int]]:
        return [(x, y) for x, y, _ in self.writes]

    @property
    def colors(self) -> set:
        return {c for _, _, c in self.writes}


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def settings_home(tmp_path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("RASTERSHAPES_HOME", str(tmp_path / "home"))
    return tmp_path / "home"
