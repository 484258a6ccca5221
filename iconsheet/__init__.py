"""Pack directories of SVG icons into grid spritesheets with Lua lookup tables."""

from .config import BuildConfig
from .errors import InvalidConfigurationError, MalformedInputError, SpritesheetError
from .grid import Grid, Placement, pack

__all__ = [
    "BuildConfig",
    "Grid",
    "InvalidConfigurationError",
    "MalformedInputError",
    "Placement",
    "SpritesheetError",
    "pack",
]
