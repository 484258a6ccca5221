from pathlib import Path

import pytest

SVG_NS = "http://www.w3.org/2000/svg"


def svg(width, height, body=None):
    """A small SVG document; by default one rect covering the whole viewport."""
    if body is None:
        body = f'<rect width="{width}" height="{height}" fill="red"/>'
    return f'<svg xmlns="{SVG_NS}" width="{width}" height="{height}">{body}</svg>'


def write_icons(style_dir: Path, names, width=32, height=32):
    style_dir.mkdir(parents=True, exist_ok=True)
    for name in names:
        (style_dir / f"{name}.svg").write_text(svg(width, height), encoding="utf-8")
    return style_dir


@pytest.fixture
def src_root(tmp_path):
    root = tmp_path / "svgs"
    root.mkdir()
    return root


@pytest.fixture
def out_root(tmp_path):
    return tmp_path / "dist"
