"""Persistent app settings schema and load/save helpers."""

from __future__ import annotations

import json
import os
import platform
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

from glyphforge_renderer import GlyphConfig


CONFIG_VERSION = 2

_GLYPH_KEYS = {f.name for f in fields(GlyphConfig)}


@dataclass
class GlyphSettings:
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


@dataclass
class OutputSettings:
    directory: str = "output"


@dataclass
class LoggingSettings:
    keep_log_files: int = 7
    console: bool = False


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    glyph: GlyphSettings = field(default_factory=GlyphSettings)
    output: OutputSettings = field(default_factory=OutputSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    def to_glyph_config(self, **overrides: Any) -> GlyphConfig:
        """Build the immutable generation config, applying non-None overrides."""
        values = asdict(self.glyph)
        for key, value in overrides.items():
            if key not in _GLYPH_KEYS:
                raise TypeError(f"unknown glyph setting: {key}")
            if value is not None:
                values[key] = value
        return GlyphConfig(**values)


def config_root() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "Glyphforge"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "Glyphforge"
    return Path.home() / ".config" / "glyphforge"


def config_path() -> Path:
    return config_root() / "config.json"


def _merge(dataclass_type, raw: Any):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _migrate(raw: dict[str, Any]) -> dict[str, Any]:
    version = int(raw.get("config_version", 1))
    data = dict(raw)

    if version < 2:
        # v1 stored glyph settings flat at the top level.
        glyph = {k: v for k, v in data.items() if k in _GLYPH_KEYS}
        data = {k: v for k, v in data.items() if k not in _GLYPH_KEYS}
        data["glyph"] = glyph
        data.setdefault("output", {})
        data.setdefault("logging", {})
        data["config_version"] = 2

    return data


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return AppConfig()
    if not isinstance(raw, dict):
        return AppConfig()

    try:
        data = _migrate(raw)
        version = int(data.get("config_version", CONFIG_VERSION))
    except (TypeError, ValueError):
        return AppConfig()
    return AppConfig(
        config_version=version,
        glyph=_merge(GlyphSettings, data.get("glyph", {})),
        output=_merge(OutputSettings, data.get("output", {})),
        logging=_merge(LoggingSettings, data.get("logging", {})),
    )


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path
