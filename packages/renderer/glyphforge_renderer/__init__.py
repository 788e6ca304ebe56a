"""Renderer package for symmetric pixel-art glyph sheets."""

from .compositor import GenerationResult, generate, generate_image
from .errors import InvalidConfiguration, ResourceExhausted
from .export import DEFAULT_OUTPUT_DIR, pick_output_path, save_png
from .models import Canvas, CellRegion, Color, GlyphConfig, GridGeometry, Palette
from .painter import paint_glyph
from .palette import generate_palette
from .random_source import RandomSource
from .resources import CanvasBudget, check_canvas_budget

__all__ = [
    "Canvas",
    "CanvasBudget",
    "CellRegion",
    "Color",
    "DEFAULT_OUTPUT_DIR",
    "GenerationResult",
    "GlyphConfig",
    "GridGeometry",
    "InvalidConfiguration",
    "Palette",
    "RandomSource",
    "ResourceExhausted",
    "check_canvas_budget",
    "generate",
    "generate_image",
    "generate_palette",
    "paint_glyph",
    "pick_output_path",
    "save_png",
]
