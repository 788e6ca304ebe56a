"""Grid compositor: lays glyphs out on a padded canvas."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import ResourceExhausted
from .models import Canvas, GlyphConfig
from .painter import paint_glyph
from .palette import generate_palette
from .random_source import RandomSource
from .resources import check_canvas_budget


@dataclass(frozen=True)
class GenerationResult:
    canvas: Canvas
    seed: int


def _allocate(width: int, height: int) -> Canvas:
    try:
        return Canvas.blank(width, height)
    except MemoryError as exc:
        raise ResourceExhausted(f"could not allocate a {width}x{height} canvas") from exc


def generate_image(config: GlyphConfig, source: RandomSource | None = None) -> Canvas:
    """Render every cell of the grid and return the finished canvas.

    Cells are visited column-major in ascending order. That order fixes how
    the random stream is consumed and is part of the reproducibility
    contract for seeded runs.
    """
    config.validate()
    geometry = config.geometry
    check_canvas_budget(geometry)

    if source is None:
        source = RandomSource.from_optional_seed(config.seed)

    canvas = _allocate(geometry.canvas_width, geometry.canvas_height)
    palette = generate_palette(source, config.color_count)

    for column in range(geometry.columns):
        for row in range(geometry.rows):
            if config.per_cell_palette:
                palette = generate_palette(source, config.color_count)
            paint_glyph(
                canvas,
                geometry.cell_region(column, row),
                palette,
                config.color_chance,
                config.mirror_x,
                config.mirror_y,
                source,
            )

    return canvas


def generate(config: GlyphConfig) -> GenerationResult:
    source = RandomSource.from_optional_seed(config.seed)
    canvas = generate_image(config, source)
    return GenerationResult(canvas=canvas, seed=source.seed)
