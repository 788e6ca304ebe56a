"""Glyph painter: fills one cell region with optionally mirrored random pixels."""

from __future__ import annotations

from .errors import InvalidConfiguration
from .models import Canvas, CellRegion, Palette, validate_color_chance
from .random_source import RandomSource


def _reduced_extent(size: int, mirrored: bool) -> int:
    if not mirrored:
        return size
    # Odd sizes keep the shared center line.
    return size // 2 + size % 2


def paint_glyph(
    canvas: Canvas,
    region: CellRegion,
    palette: Palette,
    color_chance: int,
    mirror_x: bool,
    mirror_y: bool,
    source: RandomSource,
) -> None:
    """Paint one glyph into ``region`` of ``canvas`` in place.

    Only the reduced rectangle (left half with mirror_x, top half with
    mirror_y) is iterated, x outer and y inner. Each activated pixel gets one
    palette color, which is also written to its reflections across the full
    region so that one draw colors up to four symmetric pixels.
    """
    validate_color_chance(color_chance)
    if color_chance > 0 and len(palette) == 0:
        raise InvalidConfiguration("color_chance allows coloring but the palette is empty")
    if not canvas.contains(region):
        raise InvalidConfiguration(f"cell region {region} lies outside the {canvas.width}x{canvas.height} canvas")

    pixels = canvas.pixels
    width = region.width
    height = region.height
    x_end = _reduced_extent(width, mirror_x)
    y_end = _reduced_extent(height, mirror_y)

    for x in range(x_end):
        for y in range(y_end):
            if source.uniform_percent() >= color_chance:
                continue
            color = palette.color(source.uniform_index(len(palette))).as_tuple()
            mx = width - 1 - x
            my = height - 1 - y

            pixels[region.y + y, region.x + x] = color
            if mirror_x:
                pixels[region.y + y, region.x + mx] = color
            if mirror_y:
                pixels[region.y + my, region.x + x] = color
            if mirror_x and mirror_y:
                pixels[region.y + my, region.x + mx] = color
