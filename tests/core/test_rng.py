from __future__ import annotations

from rastershapes.core import rng as rng_mod
from rastershapes.core.rng import default_rng, make_rng


def test_make_rng_is_seeded() -> None:
    a = make_rng(77)
    b = make_rng(77)
    assert [a.random() for _ in range(5)] == [b.random() for _ in range(5)]


def test_make_rng_returns_fresh_generators() -> None:
    assert make_rng(1) is not make_rng(1)
    assert make_rng(1) is not default_rng()


def test_default_rng_is_shared() -> None:
    assert default_rng() is default_rng()


def test_public_api() -> None:
    assert rng_mod.__all__ == ["default_rng", "make_rng"]
