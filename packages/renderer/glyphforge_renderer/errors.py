"""Error kinds raised by glyph generation."""

from __future__ import annotations


class InvalidConfiguration(ValueError):
    """Configuration or call arguments that generation cannot honour."""


class ResourceExhausted(MemoryError):
    """Canvas too large to allocate."""
