from __future__ import annotations

from PIL import Image

from .grid import Grid


def composite(icons, grid: Grid, progress=None) -> Image.Image:
    """Paste each icon into its grid cell on a fresh transparent canvas."""
    if len(icons) != grid.count:
        raise ValueError(f"grid was packed for {grid.count} icons, got {len(icons)}")
    sheet = Image.new("RGBA", (grid.width, grid.height), (0, 0, 0, 0))
    for i, icon in enumerate(icons):
        # Cells never overlap, so a plain paste (no mask) copies the icon exactly.
        sheet.paste(icon.image, grid.offset(i))
        if progress is not None:
            progress.increment()
    return sheet
