"""
Lua lookup table for a spritesheet.

Output is a single line, entries sorted by icon name:

  return{["address-book"]={x=1,y=1},["address-card"]={x=2,y=1}}

x/y are 1-based cell coordinates (column, row).
"""

from __future__ import annotations

from .grid import Grid, Placement

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\0": "\\0",
}


def lookup_table(icons, grid: Grid) -> dict[str, Placement]:
    if len(icons) != grid.count:
        raise ValueError(f"grid was packed for {grid.count} icons, got {len(icons)}")
    return {icon.name: grid.placement(i) for i, icon in enumerate(icons)}


def lua_string(s: str) -> str:
    return '"' + "".join(_ESCAPES.get(ch, ch) for ch in s) + '"'


def to_lua(table: dict[str, Placement]) -> str:
    parts = [f"[{lua_string(name)}]={{x={p.x},y={p.y}}}" for name, p in sorted(table.items())]
    return "return{" + ",".join(parts) + "}"
