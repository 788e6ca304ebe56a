"""Canvas memory budgeting."""

from __future__ import annotations

from dataclasses import dataclass

try:
    import psutil
except Exception:  # pragma: no cover
    psutil = None

from .errors import ResourceExhausted
from .models import GridGeometry

BYTES_PER_PIXEL = 3


@dataclass(frozen=True)
class CanvasBudget:
    width: int
    height: int
    required_bytes: int
    available_bytes: int | None


def available_memory() -> int | None:
    if psutil is None:
        return None
    return int(psutil.virtual_memory().available)


def check_canvas_budget(geometry: GridGeometry, available_bytes: int | None = None) -> CanvasBudget:
    width = geometry.canvas_width
    height = geometry.canvas_height
    required = width * height * BYTES_PER_PIXEL
    available = available_memory() if available_bytes is None else available_bytes
    if available is not None and required > available:
        raise ResourceExhausted(
            f"canvas {width}x{height} needs {required} bytes but only {available} are available"
        )
    return CanvasBudget(width=width, height=height, required_bytes=required, available_bytes=available)
