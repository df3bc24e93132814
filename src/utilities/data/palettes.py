"""
Color Palette Utilities

Colors for the Moody chart. Reference curves cycle through a quiet set of
greys and blues so that the solution markers and coupling lines, drawn in
the accent color, stand out against them.

Palettes:
    - ReferencePalette: Cycled colors for the roughness curves.
    - MoodyPalette: Fixed roles (laminar line, rough boundary, solution accent)
      on top of the reference cycle.
"""

from itertools import cycle

REFERENCE_COLORS = [
    "#1D1D1D",  # Ink Black
    "#4A4A4A",  # Dark Gray
    "#1F4E79",  # Deep Steel Blue
    "#1E77B4",  # Azure Cerulean
]

ACCENT_COLOR = "#D6282A"  # Imperial Vermilion
LAMINAR_COLOR = "#1D1D1D"  # Ink Black
ROUGH_BOUNDARY_COLOR = "#2E8B57"  # Celadon Green
HIGHLIGHT_COLOR = "#E09F3E"  # Golden Amber


class Palette:
    """
    Cycles through a fixed list of hex colors.

    Attributes:
        COLORS (list[str]): Hex color codes, overridden by subclasses.
    """

    COLORS: list[str] = []

    def __init__(self):
        if not self.COLORS:
            raise ValueError("Palette subclass must define a non-empty COLORS list.")
        self._cycler = cycle(self.COLORS)

    def next(self) -> str:
        return next(self._cycler)


class ReferencePalette(Palette):
    COLORS = REFERENCE_COLORS


class MoodyPalette(ReferencePalette):
    """Reference cycle plus the fixed chart roles."""

    accent = ACCENT_COLOR
    laminar = LAMINAR_COLOR
    rough_boundary = ROUGH_BOUNDARY_COLOR
    highlight = HIGHLIGHT_COLOR
