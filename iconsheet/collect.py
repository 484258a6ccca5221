from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from PIL import Image

from .rasterize import WHITE, rasterize


@dataclass(frozen=True)
class Icon:
    name: str
    image: Image.Image


def find_icons(style_dir) -> list[Path]:
    """All *.svg files of a style, sorted by icon name.

    Sorting keeps cell positions independent of directory listing order.
    """
    style_dir = Path(style_dir)
    if not style_dir.is_dir():
        raise FileNotFoundError(f"icon directory not found: {style_dir}")
    return sorted(style_dir.glob("*.svg"), key=lambda p: (p.stem, p.name))


def rasterize_all(paths, size: int, fill=WHITE, progress=None) -> list[Icon]:
    icons = []
    for path in paths:
        path = Path(path)
        icons.append(Icon(name=path.stem, image=rasterize(path, size, fill)))
        if progress is not None:
            progress.increment()
    return icons


def collect(style_dir, size: int, fill=WHITE, progress=None) -> list[Icon]:
    return rasterize_all(find_icons(style_dir), size, fill, progress)
