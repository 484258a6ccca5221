"""
SVG -> fixed-size RGBA icon.

The SVG is rendered with cairosvg, fitted inside a size x size square without
cropping (the shorter axis is padded with transparency, centred) and then
recoloured: every pixel takes the fill colour, only the rendered alpha is kept.
That makes the result a single-colour mask regardless of the fills, strokes
or gradients used in the source file.
"""

from __future__ import annotations

import math
from io import BytesIO
from pathlib import Path

import cairosvg
from PIL import Image, ImageOps

from .errors import MalformedInputError

WHITE = (255, 255, 255, 255)


def _render(data: bytes, source: str, scale: float = 1) -> Image.Image:
    try:
        png = cairosvg.svg2png(bytestring=data, scale=scale)
        img = Image.open(BytesIO(png))
        img.load()
    except Exception as exc:
        raise MalformedInputError(source, exc) from exc
    if img.width == 0 or img.height == 0:
        raise MalformedInputError(source, "drawing has no area")
    return img.convert("RGBA")


def recolor(img: Image.Image, fill=WHITE) -> Image.Image:
    """Keep img's alpha, replace every pixel's colour with fill."""
    alpha = img.getchannel("A")
    if fill[3] < 255:
        alpha = alpha.point(lambda a: a * fill[3] // 255)
    out = Image.new("RGBA", img.size, tuple(fill[:3]) + (0,))
    out.putalpha(alpha)
    return out


def fit(img: Image.Image, size: int) -> Image.Image:
    """Scale img to fit inside size x size and centre it on a transparent square."""
    if img.size != (size, size):
        img = ImageOps.contain(img, (size, size), method=Image.Resampling.LANCZOS)
    cell = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    cell.paste(img, ((size - img.width) // 2, (size - img.height) // 2))
    return cell


def rasterize_bytes(data: bytes, size: int, fill=WHITE, source: str = "<bytes>") -> Image.Image:
    img = _render(data, source)
    longest = max(img.size)
    if longest < size:
        # Re-render larger instead of upscaling the bitmap.
        img = _render(data, source, scale=math.ceil(size / longest))
    return recolor(fit(img, size), fill)


def rasterize(source, size: int, fill=WHITE) -> Image.Image:
    """Rasterize the SVG file at source into a size x size RGBA icon."""
    path = Path(source)
    return rasterize_bytes(path.read_bytes(), size, fill, source=str(path))
