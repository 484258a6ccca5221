"""
Build one spritesheet + Lua lookup table per icon style.

Input:  <src>/<style>/*.svg          (default: Font Awesome free SVGs in node_modules)
Output: <out>/<style>/sheet.png      64x64 cells, 32 per row, white on transparent
        <out>/<style>/sheet.lua      return{["name"]={x=col,y=row},...}  (1-based)

Usage: python3 -m iconsheet [--src DIR] [--out DIR] [--only STYLE ...]
"""

from __future__ import annotations

import argparse
import os
import shutil
import sys
import tempfile
from dataclasses import dataclass
from pathlib import Path

from .collect import find_icons, rasterize_all
from .composite import composite
from .config import BuildConfig
from .errors import SpritesheetError
from .grid import pack
from .lua import lookup_table, to_lua
from .progress import ProgressTracker, timed

SHEET_NAME = "sheet.png"
TABLE_NAME = "sheet.lua"


@dataclass(frozen=True)
class StyleResult:
    style: str
    icon_count: int
    rows: int
    sheet_path: Path
    table_path: Path


def build_style(style: str, config: BuildConfig, out=None) -> StyleResult:
    out = out if out is not None else sys.stdout
    paths = find_icons(Path(config.src_root) / style)

    print(f"\nProcessing {style} icons:", file=out)

    print("\n1. Converting SVG to PNG...", file=out)
    convert_progress = ProgressTracker(len(paths), "Progress", out)
    icons = rasterize_all(paths, config.cell_size, config.fill, convert_progress)
    convert_progress.finish()

    grid = pack(len(icons), config.cell_size, config.cells_per_row)

    print("\n2. Creating spritesheet...", file=out)
    composite_progress = ProgressTracker(len(icons), "Compositing", out)
    sheet = composite(icons, grid, composite_progress)
    composite_progress.finish()
    table = to_lua(lookup_table(icons, grid))

    out_root = Path(config.out_root)
    out_root.mkdir(parents=True, exist_ok=True)
    style_dir = out_root / style

    print("\n3. Saving files...", file=out)
    # Both files go to a staging dir first so a failed style never leaves a
    # new sheet.png next to an old sheet.lua.
    staging = Path(tempfile.mkdtemp(prefix=f".{style}-", dir=out_root))
    try:
        with timed("Saving PNG file", out):
            sheet.save(staging / SHEET_NAME, "PNG")
        with timed("Saving Lua file", out):
            (staging / TABLE_NAME).write_text(table, encoding="utf-8")
        style_dir.mkdir(parents=True, exist_ok=True)
        os.replace(staging / SHEET_NAME, style_dir / SHEET_NAME)
        os.replace(staging / TABLE_NAME, style_dir / TABLE_NAME)
    finally:
        shutil.rmtree(staging, ignore_errors=True)

    return StyleResult(
        style=style,
        icon_count=len(icons),
        rows=grid.rows,
        sheet_path=style_dir / SHEET_NAME,
        table_path=style_dir / TABLE_NAME,
    )


def build_all(config: BuildConfig, out=None) -> list[StyleResult]:
    """Build every enabled style in order; the first failure aborts the run."""
    config.validate()
    Path(config.out_root).mkdir(parents=True, exist_ok=True)
    return [build_style(style, config, out) for style in config.enabled_styles()]


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Pack SVG icon styles into spritesheets with Lua lookup tables.")
    parser.add_argument("--src", type=Path, default=BuildConfig.src_root,
                        help="directory holding one sub-directory of SVGs per style")
    parser.add_argument("--out", type=Path, default=BuildConfig.out_root,
                        help="output directory (one sub-directory per style)")
    parser.add_argument("--only", action="append", metavar="STYLE",
                        help="build only this style (repeatable)")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        config = BuildConfig(src_root=args.src, out_root=args.out)
        if args.only:
            config = config.with_only(args.only)
        build_all(config)
    except (SpritesheetError, OSError) as e:
        print(f"\nerror: {e}", file=sys.stderr)
        return 1
    print("\nAll done!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
