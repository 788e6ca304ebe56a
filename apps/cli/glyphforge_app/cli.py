"""CLI entrypoints for glyph sheet generation and settings management."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path

from glyphforge_core import (
    AppConfig,
    config_path,
    configure_logging,
    get_logger,
    install_crash_hooks,
    load_config,
    save_config,
)
from glyphforge_renderer import InvalidConfiguration, ResourceExhausted, generate, pick_output_path, save_png


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def _load(args: argparse.Namespace) -> AppConfig:
    path = Path(args.config).expanduser() if getattr(args, "config", None) else None
    return load_config(path)


def _glyph_overrides(args: argparse.Namespace) -> dict[str, object]:
    return {
        "cell_width": args.cell_width,
        "cell_height": args.cell_height,
        "columns": args.columns,
        "rows": args.rows,
        "padding": args.padding,
        "color_count": args.colors,
        "color_chance": args.color_chance,
        "per_cell_palette": args.per_cell_palette,
        "mirror_x": args.mirror_x,
        "mirror_y": args.mirror_y,
        "seed": args.seed,
    }


def cmd_generate(args: argparse.Namespace) -> int:
    logger = get_logger()
    cfg = _load(args)
    glyph = cfg.to_glyph_config(**_glyph_overrides(args))

    logger.info(
        "generation started",
        extra={"event": "generation_started", "seed": glyph.seed, "cells": glyph.columns * glyph.rows},
    )
    try:
        result = generate(glyph)
        logger.info(
            "generation finished",
            extra={
                "event": "generation_finished",
                "seed": result.seed,
                "width": result.canvas.width,
                "height": result.canvas.height,
            },
        )
        if args.output:
            out_path = Path(args.output).expanduser()
        else:
            out_dir = Path(args.output_dir or cfg.output.directory).expanduser()
            out_path = pick_output_path(out_dir)
        print(f"Saving to: {out_path}")
        save_png(result.canvas, out_path)
    except InvalidConfiguration as exc:
        logger.error(f"invalid configuration: {exc}", extra={"event": "generation_failed"})
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except (ResourceExhausted, OSError) as exc:
        logger.error(f"generation failed: {exc}", exc_info=True, extra={"event": "generation_failed"})
        print(f"error: {exc}", file=sys.stderr)
        return 1

    logger.info("image saved", extra={"event": "image_saved", "seed": result.seed, "path": str(out_path)})
    _print_json(
        {
            "path": str(out_path),
            "seed": result.seed,
            "width": result.canvas.width,
            "height": result.canvas.height,
            "config": asdict(glyph),
        }
    )
    return 0


def cmd_show_config(args: argparse.Namespace) -> int:
    cfg = _load(args)
    payload = asdict(cfg)
    payload["path"] = str(Path(args.config).expanduser() if args.config else config_path())
    _print_json(payload)
    return 0


def cmd_init_config(args: argparse.Namespace) -> int:
    path = Path(args.config).expanduser() if args.config else config_path()
    if path.exists() and not args.force:
        print(f"error: {path} already exists (use --force to overwrite)", file=sys.stderr)
        return 1
    written = save_config(AppConfig(), path)
    _print_json({"path": str(written)})
    return 0


def _add_generate_args(cmd: argparse.ArgumentParser) -> None:
    cmd.add_argument("--cell-width", type=int, default=None, help="Glyph width in pixels")
    cmd.add_argument("--cell-height", type=int, default=None, help="Glyph height in pixels")
    cmd.add_argument("--columns", type=int, default=None)
    cmd.add_argument("--rows", type=int, default=None)
    cmd.add_argument("--padding", type=int, default=None, help="Empty border between cells and around the sheet")
    cmd.add_argument("--colors", type=int, default=None, help="Palette size")
    cmd.add_argument("--color-chance", type=int, default=None, help="Percent chance [0-100] that a pixel is colored")
    cmd.add_argument(
        "--per-cell-palette",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Draw a fresh palette for every cell",
    )
    cmd.add_argument("--mirror-x", action=argparse.BooleanOptionalAction, default=None, help="Mirror glyphs left/right")
    cmd.add_argument("--mirror-y", action=argparse.BooleanOptionalAction, default=None, help="Mirror glyphs top/bottom")
    cmd.add_argument("--seed", type=int, default=None, help="Unsigned 64-bit seed for a reproducible sheet")
    cmd.add_argument("--output-dir", default=None, help="Directory for auto-named output files")
    cmd.add_argument("--output", default=None, help="Explicit output PNG path")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="glyphforge", description="Procedural pixel-art glyph sheet generator")
    parser.add_argument("--config", default=None, help="Path to settings JSON (default: per-user config)")
    sub = parser.add_subparsers(dest="command", required=True)

    gen_cmd = sub.add_parser("generate", help="Generate a glyph sheet PNG")
    gen_cmd.add_argument("--config", default=argparse.SUPPRESS, help="Path to settings JSON")
    _add_generate_args(gen_cmd)
    gen_cmd.set_defaults(func=cmd_generate)

    show_cmd = sub.add_parser("show-config", help="Print effective settings")
    show_cmd.set_defaults(func=cmd_show_config)

    init_cmd = sub.add_parser("init-config", help="Write default settings file")
    init_cmd.add_argument("--force", action="store_true", help="Overwrite an existing settings file")
    init_cmd.set_defaults(func=cmd_init_config)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    cfg = _load(args)
    configure_logging(keep_files=cfg.logging.keep_log_files, console=cfg.logging.console)
    install_crash_hooks()
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
