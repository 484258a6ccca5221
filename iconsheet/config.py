from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path

from .errors import InvalidConfigurationError

ICON_SIZE = 64  # pixel size of each icon cell
ICONS_PER_ROW = 32
WHITE = (255, 255, 255, 255)
SRC_ROOT = Path("node_modules") / "@fortawesome" / "fontawesome-free" / "svgs"
OUT_ROOT = Path("dist")


def default_styles() -> dict[str, bool]:
    return {"brands": True, "regular": True, "solid": True}


@dataclass(frozen=True)
class BuildConfig:
    """Everything the driver needs; styles maps name -> enabled, in build order."""

    src_root: Path = SRC_ROOT
    out_root: Path = OUT_ROOT
    cell_size: int = ICON_SIZE
    cells_per_row: int = ICONS_PER_ROW
    fill: tuple[int, int, int, int] = WHITE
    styles: dict[str, bool] = field(default_factory=default_styles)

    def validate(self) -> None:
        if not isinstance(self.cell_size, int) or self.cell_size < 1:
            raise InvalidConfigurationError(f"cell size must be a positive int, got {self.cell_size!r}")
        if not isinstance(self.cells_per_row, int) or self.cells_per_row < 1:
            raise InvalidConfigurationError(
                f"cells per row must be a positive int, got {self.cells_per_row!r}"
            )
        if not isinstance(self.fill, tuple) or len(self.fill) != 4 or not all(isinstance(c, int) and 0 <= c <= 255 for c in self.fill):
            raise InvalidConfigurationError(f"fill must be four 0-255 ints (RGBA), got {self.fill!r}")
        for name in self.styles:
            if not name or "/" in name or "\\" in name or name in (".", ".."):
                raise InvalidConfigurationError(f"bad style name {name!r}")

    def enabled_styles(self) -> list[str]:
        return [name for name, enabled in self.styles.items() if enabled]

    def with_only(self, names) -> BuildConfig:
        """Copy of this config with only the given styles enabled."""
        names = list(names)
        unknown = [n for n in names if n not in self.styles]
        if unknown:
            raise InvalidConfigurationError(
                f"unknown style(s): {', '.join(unknown)} (known: {', '.join(self.styles)})"
            )
        return replace(self, styles={name: name in names for name in self.styles})
