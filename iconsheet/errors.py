"""Errors raised while building spritesheets.

I/O problems (missing input directory, unwritable output) are left as the
built-in OSError subclasses.
"""

from __future__ import annotations


class SpritesheetError(Exception):
    """Base class for build failures."""


class InvalidConfigurationError(SpritesheetError):
    """Cell size, row width or style settings are unusable."""


class MalformedInputError(SpritesheetError):
    """An icon file could not be rasterized."""

    def __init__(self, source, reason):
        self.source = str(source)
        self.reason = str(reason)
        super().__init__(f"{self.source}: {self.reason}")
