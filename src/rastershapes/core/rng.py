"""Seedable random sources.

All sampling in the package takes an optional ``random.Random``. Callers that
do not pass one share the process default returned by :func:`default_rng`.
The CLI builds its own seeded generator with :func:`make_rng`.
"""

from __future__ import annotations

import random
from typing import Optional

_DEFAULT = random.Random()


def default_rng() -> random.Random:
    return _DEFAULT


def make_rng(seed: Optional[int] = None) -> random.Random:
    return random.Random(seed)


__all__ = ["default_rng", "make_rng"]
