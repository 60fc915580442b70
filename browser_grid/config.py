"""Display configuration for the status grid."""

from pydantic import Field

from browser_grid.models.base import Model

# Muted gray used for the platform row of every cell.
PLATFORM_COLOR = 90


class SymbolMap(Model):
    """Symbol drawn next to a target's label for each display status."""

    ok: str = "✓"
    error: str = "✖"
    none: str = " "


class ColorMap(Model):
    """ANSI foreground color code for each display status."""

    ok: int = 32
    error: int = 31
    none: int = 0


class GridStyle(Model):
    """Symbols and colors used when drawing the grid.

    Only the ``ok``, ``error`` and ``none`` keys are recognized; overriding a
    subset keeps the defaults for the rest.
    """

    symbols: SymbolMap = Field(default_factory=SymbolMap)
    colors: ColorMap = Field(default_factory=ColorMap)
