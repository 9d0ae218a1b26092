from __future__ import annotations

from collections import Counter

import pytest

from rastershapes.core.color import (
    BLACK,
    MAX_COLOR_ATTEMPTS,
    Color,
    ColorSamplingError,
    random_color,
)
from rastershapes.core.rng import make_rng


class _ScriptedRng:
    """Returns queued values from randint, then repeats the last one."""

    def __init__(self, values: list[int]) -> None:
        self._values = list(values)
        self.calls = 0

    def randint(self, a: int, b: int) -> int:
        self.calls += 1
        if len(self._values) > 1:
            return self._values.pop(0)
        return self._values[0]


def test_color_defaults_to_opaque() -> None:
    c = Color(1, 2, 3)
    assert c.a == 255
    assert tuple(c) == (1, 2, 3, 255)


def test_color_of_validates_channels() -> None:
    assert Color.of(0, 128, 255, 10) == Color(0, 128, 255, 10)
    with pytest.raises(ValueError):
        Color.of(256, 0, 0)
    with pytest.raises(ValueError):
        Color.of(0, -1, 0)


def test_random_color_never_black() -> None:
    rng = make_rng(2024)
    for _ in range(10_000):
        c = random_color(rng)
        assert c != BLACK
        assert not c.is_black
        assert c.a == 255
        assert all(0 <= ch <= 255 for ch in c)


def test_random_color_resamples_black() -> None:
    rng = _ScriptedRng([0, 0, 0, 0, 0, 7])
    c = random_color(rng)  # type: ignore[arg-type]
    assert c == Color(0, 0, 7, 255)
    assert rng.calls == 6


def test_random_color_gives_up_on_degenerate_source() -> None:
    rng = _ScriptedRng([0])
    with pytest.raises(ColorSamplingError):
        random_color(rng)  # type: ignore[arg-type]
    assert rng.calls == 3 * MAX_COLOR_ATTEMPTS


def test_random_color_channels_are_uniform() -> None:
    # 16 buckets of 16 values per channel; each bucket expects n/16 hits.
    rng = make_rng(99)
    n = 32_000
    buckets = [Counter() for _ in range(3)]
    for _ in range(n):
        c = random_color(rng)
        for i, ch in enumerate((c.r, c.g, c.b)):
            buckets[i][ch // 16] += 1
    expected = n / 16
    for counter in buckets:
        assert set(counter) == set(range(16))
        for hits in counter.values():
            assert abs(hits - expected) < 0.15 * expected


def test_random_color_is_reproducible_with_seed() -> None:
    a = [random_color(make_rng(5)) for _ in range(3)]
    b = [random_color(make_rng(5)) for _ in range(3)]
    assert a == b
