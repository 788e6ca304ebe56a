"""Typed glyph and canvas models."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .errors import InvalidConfiguration

SEED_MAX = 2**64


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


@dataclass(frozen=True)
class Palette:
    colors: tuple[Color, ...] = ()

    def __len__(self) -> int:
        return len(self.colors)

    def color(self, color_id: int) -> Color:
        if not self.colors:
            raise InvalidConfiguration("color lookup against an empty palette")
        return self.colors[color_id]


@dataclass(frozen=True)
class CellRegion:
    x: int
    y: int
    width: int
    height: int


@dataclass(frozen=True)
class GridGeometry:
    cell_width: int
    cell_height: int
    columns: int
    rows: int
    padding: int

    @property
    def canvas_width(self) -> int:
        return self.columns * self.cell_width + (self.columns + 1) * self.padding

    @property
    def canvas_height(self) -> int:
        return self.rows * self.cell_height + (self.rows + 1) * self.padding

    def cell_region(self, column: int, row: int) -> CellRegion:
        return CellRegion(
            x=self.padding + (self.cell_width + self.padding) * column,
            y=self.padding + (self.cell_height + self.padding) * row,
            width=self.cell_width,
            height=self.cell_height,
        )

    def validate(self) -> None:
        for name in ("cell_width", "cell_height", "columns", "rows", "padding"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise InvalidConfiguration(f"{name} must be a non-negative integer, got {value!r}")
        if self.canvas_width <= 0 or self.canvas_height <= 0:
            raise InvalidConfiguration(
                f"grid produces an empty canvas ({self.canvas_width}x{self.canvas_height})"
            )


@dataclass(frozen=True)
class GlyphConfig:
    """Immutable generation settings.

    color_chance is the percent chance [0-100] that a pixel gets a color;
    0 leaves every cell black and 100 colors every pixel.
    """

    cell_width: int = 10
    cell_height: int = 20
    columns: int = 5
    rows: int = 4
    padding: int = 4
    color_count: int = 3
    color_chance: int = 30
    per_cell_palette: bool = False
    mirror_x: bool = True
    mirror_y: bool = False
    seed: int | None = None

    @property
    def geometry(self) -> GridGeometry:
        return GridGeometry(
            cell_width=self.cell_width,
            cell_height=self.cell_height,
            columns=self.columns,
            rows=self.rows,
            padding=self.padding,
        )

    def validate(self) -> None:
        self.geometry.validate()
        if not isinstance(self.color_count, int) or isinstance(self.color_count, bool) or self.color_count < 0:
            raise InvalidConfiguration(f"color_count must be a non-negative integer, got {self.color_count!r}")
        validate_color_chance(self.color_chance)
        if self.color_count == 0 and self.color_chance > 0:
            raise InvalidConfiguration("color_count is 0 but color_chance allows pixels to be colored")
        for name in ("per_cell_palette", "mirror_x", "mirror_y"):
            if not isinstance(getattr(self, name), bool):
                raise InvalidConfiguration(f"{name} must be true or false, got {getattr(self, name)!r}")
        if self.seed is not None:
            validate_seed(self.seed)


@dataclass
class Canvas:
    """RGB pixel buffer indexed as pixels[y, x, channel]."""

    pixels: np.ndarray

    @classmethod
    def blank(cls, width: int, height: int) -> "Canvas":
        return cls(pixels=np.zeros((height, width, 3), dtype=np.uint8))

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    def pixel(self, x: int, y: int) -> tuple[int, int, int]:
        r, g, b = self.pixels[y, x]
        return (int(r), int(g), int(b))

    def contains(self, region: CellRegion) -> bool:
        return (
            region.x >= 0
            and region.y >= 0
            and region.x + region.width <= self.width
            and region.y + region.height <= self.height
        )

    def to_bytes(self) -> bytes:
        return self.pixels.tobytes()

    def to_image(self):
        from PIL import Image

        return Image.fromarray(self.pixels)


def validate_color_chance(color_chance: int) -> None:
    if not isinstance(color_chance, int) or isinstance(color_chance, bool) or not 0 <= color_chance <= 100:
        raise InvalidConfiguration(f"color_chance must be an integer in [0, 100], got {color_chance!r}")


def validate_seed(seed: int) -> None:
    if not isinstance(seed, int) or isinstance(seed, bool) or not 0 <= seed < SEED_MAX:
        raise InvalidConfiguration(f"seed must be an unsigned 64-bit integer, got {seed!r}")
