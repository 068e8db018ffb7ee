"""
Built-in bitmap font for the Pixoo client library.

Each glyph is stored as a flat, row-major sequence of 0/1 cells, three
columns wide and five rows tall. Cells set to 1 are drawn in the requested
color; cells set to 0 are left untouched.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping, Tuple

FONT_WIDTH = 3
FONT_HEIGHT = 5


@dataclass(frozen=True)
class Glyph:
    """A monochrome bitmap for a single character."""

    width: int
    height: int
    cells: Tuple[int, ...]

    def __post_init__(self):
        if len(self.cells) != self.width * self.height:
            raise ValueError(
                f"Glyph expects {self.width * self.height} cells, got {len(self.cells)}"
            )

    def lit_cells(self) -> Iterator[Tuple[int, int]]:
        """Yield the (column, row) of every cell set to 1."""
        for i, value in enumerate(self.cells):
            if value == 1:
                yield i % self.width, i // self.width


FONT_3X5 = {
    "0": (
        1, 1, 1,
        1, 0, 1,
        1, 0, 1,
        1, 0, 1,
        1, 1, 1,
    ),
    "1": (
        0, 1, 0,
        1, 1, 0,
        0, 1, 0,
        0, 1, 0,
        1, 1, 1,
    ),
    "2": (
        1, 1, 1,
        0, 0, 1,
        1, 1, 1,
        1, 0, 0,
        1, 1, 1,
    ),
    "3": (
        1, 1, 1,
        0, 0, 1,
        1, 1, 1,
        0, 0, 1,
        1, 1, 1,
    ),
    "4": (
        1, 0, 1,
        1, 0, 1,
        1, 1, 1,
        0, 0, 1,
        0, 0, 1,
    ),
    "5": (
        1, 1, 1,
        1, 0, 0,
        1, 1, 1,
        0, 0, 1,
        1, 1, 1,
    ),
    "6": (
        1, 1, 1,
        1, 0, 0,
        1, 1, 1,
        1, 0, 1,
        1, 1, 1,
    ),
    "7": (
        1, 1, 1,
        0, 0, 1,
        0, 0, 1,
        0, 0, 1,
        0, 0, 1,
    ),
    "8": (
        1, 1, 1,
        1, 0, 1,
        1, 1, 1,
        1, 0, 1,
        1, 1, 1,
    ),
    "9": (
        1, 1, 1,
        1, 0, 1,
        1, 1, 1,
        0, 0, 1,
        1, 1, 1,
    ),
    "A": (
        0, 1, 0,
        1, 0, 1,
        1, 1, 1,
        1, 0, 1,
        1, 0, 1,
    ),
    "B": (
        1, 1, 0,
        1, 0, 1,
        1, 1, 0,
        1, 0, 1,
        1, 1, 0,
    ),
    "C": (
        0, 1, 1,
        1, 0, 0,
        1, 0, 0,
        1, 0, 0,
        0, 1, 1,
    ),
    "D": (
        1, 1, 0,
        1, 0, 1,
        1, 0, 1,
        1, 0, 1,
        1, 1, 0,
    ),
    "E": (
        1, 1, 1,
        1, 0, 0,
        1, 1, 0,
        1, 0, 0,
        1, 1, 1,
    ),
    "F": (
        1, 1, 1,
        1, 0, 0,
        1, 1, 0,
        1, 0, 0,
        1, 0, 0,
    ),
    "G": (
        0, 1, 1,
        1, 0, 0,
        1, 0, 1,
        1, 0, 1,
        0, 1, 1,
    ),
    "H": (
        1, 0, 1,
        1, 0, 1,
        1, 1, 1,
        1, 0, 1,
        1, 0, 1,
    ),
    "I": (
        1, 1, 1,
        0, 1, 0,
        0, 1, 0,
        0, 1, 0,
        1, 1, 1,
    ),
    "J": (
        0, 0, 1,
        0, 0, 1,
        0, 0, 1,
        1, 0, 1,
        0, 1, 0,
    ),
    "K": (
        1, 0, 1,
        1, 0, 1,
        1, 1, 0,
        1, 0, 1,
        1, 0, 1,
    ),
    "L": (
        1, 0, 0,
        1, 0, 0,
        1, 0, 0,
        1, 0, 0,
        1, 1, 1,
    ),
    "M": (
        1, 0, 1,
        1, 1, 1,
        1, 1, 1,
        1, 0, 1,
        1, 0, 1,
    ),
    "N": (
        1, 1, 0,
        1, 0, 1,
        1, 0, 1,
        1, 0, 1,
        1, 0, 1,
    ),
    "O": (
        0, 1, 0,
        1, 0, 1,
        1, 0, 1,
        1, 0, 1,
        0, 1, 0,
    ),
    "P": (
        1, 1, 0,
        1, 0, 1,
        1, 1, 0,
        1, 0, 0,
        1, 0, 0,
    ),
    "Q": (
        0, 1, 0,
        1, 0, 1,
        1, 0, 1,
        1, 1, 0,
        0, 1, 1,
    ),
    "R": (
        1, 1, 0,
        1, 0, 1,
        1, 1, 0,
        1, 0, 1,
        1, 0, 1,
    ),
    "S": (
        0, 1, 1,
        1, 0, 0,
        0, 1, 0,
        0, 0, 1,
        1, 1, 0,
    ),
    "T": (
        1, 1, 1,
        0, 1, 0,
        0, 1, 0,
        0, 1, 0,
        0, 1, 0,
    ),
    "U": (
        1, 0, 1,
        1, 0, 1,
        1, 0, 1,
        1, 0, 1,
        1, 1, 1,
    ),
    "V": (
        1, 0, 1,
        1, 0, 1,
        1, 0, 1,
        1, 0, 1,
        0, 1, 0,
    ),
    "W": (
        1, 0, 1,
        1, 0, 1,
        1, 1, 1,
        1, 1, 1,
        1, 0, 1,
    ),
    "X": (
        1, 0, 1,
        1, 0, 1,
        0, 1, 0,
        1, 0, 1,
        1, 0, 1,
    ),
    "Y": (
        1, 0, 1,
        1, 0, 1,
        0, 1, 0,
        0, 1, 0,
        0, 1, 0,
    ),
    "Z": (
        1, 1, 1,
        0, 0, 1,
        0, 1, 0,
        1, 0, 0,
        1, 1, 1,
    ),
    " ": (
        0, 0, 0,
        0, 0, 0,
        0, 0, 0,
        0, 0, 0,
        0, 0, 0,
    ),
    ".": (
        0, 0, 0,
        0, 0, 0,
        0, 0, 0,
        0, 0, 0,
        0, 1, 0,
    ),
    ",": (
        0, 0, 0,
        0, 0, 0,
        0, 0, 0,
        0, 1, 0,
        1, 0, 0,
    ),
    ":": (
        0, 0, 0,
        0, 1, 0,
        0, 0, 0,
        0, 1, 0,
        0, 0, 0,
    ),
    "!": (
        0, 1, 0,
        0, 1, 0,
        0, 1, 0,
        0, 0, 0,
        0, 1, 0,
    ),
    "?": (
        1, 1, 1,
        0, 0, 1,
        0, 1, 0,
        0, 0, 0,
        0, 1, 0,
    ),
    "-": (
        0, 0, 0,
        0, 0, 0,
        1, 1, 1,
        0, 0, 0,
        0, 0, 0,
    ),
    "+": (
        0, 0, 0,
        0, 1, 0,
        1, 1, 1,
        0, 1, 0,
        0, 0, 0,
    ),
    "=": (
        0, 0, 0,
        1, 1, 1,
        0, 0, 0,
        1, 1, 1,
        0, 0, 0,
    ),
    "/": (
        0, 0, 1,
        0, 0, 1,
        0, 1, 0,
        1, 0, 0,
        1, 0, 0,
    ),
    "%": (
        1, 0, 1,
        0, 0, 1,
        0, 1, 0,
        1, 0, 0,
        1, 0, 1,
    ),
    "'": (
        0, 1, 0,
        0, 1, 0,
        0, 0, 0,
        0, 0, 0,
        0, 0, 0,
    ),
    "(": (
        0, 0, 1,
        0, 1, 0,
        0, 1, 0,
        0, 1, 0,
        0, 0, 1,
    ),
    ")": (
        1, 0, 0,
        0, 1, 0,
        0, 1, 0,
        0, 1, 0,
        1, 0, 0,
    ),
}

GLYPHS: Mapping[str, Glyph] = MappingProxyType(
    {
        char: Glyph(width=FONT_WIDTH, height=FONT_HEIGHT, cells=cells)
        for char, cells in FONT_3X5.items()
    }
)
