"""Random palette generation."""

from __future__ import annotations

from .errors import InvalidConfiguration
from .models import Color, Palette
from .random_source import RandomSource


def generate_palette(source: RandomSource, count: int) -> Palette:
    if count < 0:
        raise InvalidConfiguration(f"palette size must be non-negative, got {count}")
    colors = []
    for _ in range(count):
        r = source.uniform_byte()
        g = source.uniform_byte()
        b = source.uniform_byte()
        colors.append(Color(r, g, b))
    return Palette(tuple(colors))
