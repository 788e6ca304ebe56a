"""PNG export and output path selection."""

from __future__ import annotations

import random
from pathlib import Path

from .models import Canvas

DEFAULT_OUTPUT_DIR = Path("output")

_system_random = random.SystemRandom()


def pick_output_path(output_dir: Path | None = None, attempts: int = 64) -> Path:
    """Return a not-yet-existing ``<u16>.png`` path inside ``output_dir``.

    Names come from system entropy, never from the seeded stream, so seeded
    runs produce distinct files with identical pixels.
    """
    directory = output_dir or DEFAULT_OUTPUT_DIR
    directory.mkdir(parents=True, exist_ok=True)
    for _ in range(attempts):
        candidate = directory / f"{_system_random.randrange(2**16)}.png"
        if not candidate.exists():
            return candidate
    raise FileExistsError(f"no free output filename found in {directory} after {attempts} attempts")


def save_png(canvas: Canvas, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    canvas.to_image().save(path, format="PNG")
    return path
