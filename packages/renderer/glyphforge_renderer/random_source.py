"""Seedable random source shared by palette and glyph painting."""

from __future__ import annotations

import secrets

import numpy as np

from .errors import InvalidConfiguration
from .models import validate_seed


class RandomSource:
    """Single ordered stream of uniform integer draws.

    Backed by numpy's PCG64 bit generator, so a given seed yields the same
    sequence on every platform. Every call advances the stream by one draw.
    """

    def __init__(self, seed: int) -> None:
        validate_seed(seed)
        self.seed = seed
        self._rng = np.random.Generator(np.random.PCG64(seed))

    @classmethod
    def from_entropy(cls) -> "RandomSource":
        return cls(secrets.randbits(64))

    @classmethod
    def from_optional_seed(cls, seed: int | None) -> "RandomSource":
        if seed is None:
            return cls.from_entropy()
        return cls(seed)

    def uniform_index(self, n: int) -> int:
        if n <= 0:
            raise InvalidConfiguration(f"cannot draw an index from an empty range (n={n})")
        return int(self._rng.integers(0, n))

    def uniform_percent(self) -> int:
        return self.uniform_index(100)

    def uniform_byte(self) -> int:
        return self.uniform_index(256)
