"""
Grid layout for spritesheets.

Icons fill the sheet left to right, top to bottom, one cell each:

  index i  ->  row = i // cells_per_row, col = i % cells_per_row

Rows and columns are 0-based here. The Lua lookup table uses 1-based
coordinates (x = col + 1, y = row + 1), see Placement.x / Placement.y.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidConfigurationError


@dataclass(frozen=True)
class Placement:
    row: int
    col: int

    @property
    def x(self) -> int:
        return self.col + 1

    @property
    def y(self) -> int:
        return self.row + 1


@dataclass(frozen=True)
class Grid:
    count: int
    cell_size: int
    cells_per_row: int

    @property
    def rows(self) -> int:
        return -(-self.count // self.cells_per_row)

    @property
    def width(self) -> int:
        return self.cells_per_row * self.cell_size

    @property
    def height(self) -> int:
        # An empty sheet keeps one transparent row so it still encodes as a PNG.
        return max(self.rows, 1) * self.cell_size

    def placement(self, i: int) -> Placement:
        if not 0 <= i < self.count:
            raise IndexError(f"cell index {i} out of range for {self.count} icons")
        return Placement(row=i // self.cells_per_row, col=i % self.cells_per_row)

    def offset(self, i: int) -> tuple[int, int]:
        """Pixel position of the top-left corner of cell i."""
        p = self.placement(i)
        return (p.col * self.cell_size, p.row * self.cell_size)

    def placements(self) -> list[Placement]:
        return [self.placement(i) for i in range(self.count)]


def pack(count: int, cell_size: int, cells_per_row: int) -> Grid:
    if cell_size < 1:
        raise InvalidConfigurationError(f"cell size must be at least 1, got {cell_size}")
    if cells_per_row < 1:
        raise InvalidConfigurationError(f"cells per row must be at least 1, got {cells_per_row}")
    if count < 0:
        raise InvalidConfigurationError(f"icon count cannot be negative, got {count}")
    return Grid(count=count, cell_size=cell_size, cells_per_row=cells_per_row)
