"""
In-memory frame buffer for the Pixoo client library.
"""

from typing import List, Mapping, Optional, Tuple

from .exceptions import OutOfBoundsError, UnknownGlyphError
from .fonts import GLYPHS, Glyph
from .utils import encode_pixel_data, pack_channels

CHANNELS = 3


class FrameBuffer:
    """Flat RGB buffer for a square display.

    Pixel ``(x, y)`` lives at ``(x + y * size) * 3`` and occupies three
    consecutive entries holding red, green and blue. Values are stored as
    plain ints and narrowed to bytes only when the buffer is encoded.
    """

    def __init__(self, size: int, glyphs: Optional[Mapping[str, Glyph]] = None):
        """Initialize a zeroed buffer.

        Args:
            size: Side length of the display in pixels
            glyphs: Glyph table used for text (default: built-in 3x5 font)
        """
        if not isinstance(size, int) or size <= 0:
            raise ValueError(f"Invalid display size: {size}")

        self.size = size
        self.glyphs = GLYPHS if glyphs is None else glyphs
        self.data: List[int] = [0] * (CHANNELS * size * size)

    def __len__(self) -> int:
        return len(self.data)

    @property
    def pixel_count(self) -> int:
        return self.size * self.size

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(
                f"Pixel ({x}, {y}) is outside the {self.size}x{self.size} display"
            )

    def index(self, x: int, y: int) -> int:
        """Get the offset of the first channel of a pixel.

        Args:
            x: Column, 0 <= x < size
            y: Row, 0 <= y < size

        Returns:
            Offset of the red channel; green and blue follow it

        Raises:
            OutOfBoundsError: If the coordinate is outside the display
        """
        self._check_bounds(x, y)
        return (x + y * self.size) * CHANNELS

    def set_pixel(self, x: int, y: int, red: int, green: int, blue: int) -> None:
        """Set the color of a single pixel.

        Channel values are stored as given. Anything outside 0-255 wraps
        modulo 256 when the buffer is encoded.

        Raises:
            OutOfBoundsError: If the coordinate is outside the display
            TypeError: If a channel value is not an int
        """
        for value in (red, green, blue):
            if not isinstance(value, int):
                raise TypeError(
                    f"Channel values must be ints, got {type(value).__name__} {value!r}"
                )

        offset = self.index(x, y)
        self.data[offset] = red
        self.data[offset + 1] = green
        self.data[offset + 2] = blue

    def get_pixel(self, x: int, y: int) -> Tuple[int, int, int]:
        offset = self.index(x, y)
        return (self.data[offset], self.data[offset + 1], self.data[offset + 2])

    def fill(self, red: int, green: int, blue: int) -> None:
        """Set every pixel to the same color."""
        for x in range(self.size):
            for y in range(self.size):
                self.set_pixel(x, y, red, green, blue)

    def clear(self) -> None:
        self.fill(0, 0, 0)

    def get_glyph(self, char: str) -> Glyph:
        """Look up the bitmap for a character.

        Raises:
            UnknownGlyphError: If the font has no glyph for the character
        """
        try:
            return self.glyphs[char]
        except KeyError:
            raise UnknownGlyphError(char) from None

    def _glyph_pixels(self, glyph: Glyph, x: int, y: int) -> List[Tuple[int, int]]:
        pixels = [(x + local_x, y + local_y) for local_x, local_y in glyph.lit_cells()]
        for px, py in pixels:
            self._check_bounds(px, py)
        return pixels

    def draw_character(
        self, char: str, x: int, y: int, red: int, green: int, blue: int
    ) -> None:
        """Draw a character with its top-left corner at (x, y).

        Only the lit cells of the glyph are written, so whatever is already
        in the buffer shows through the unlit ones. The glyph is looked up
        and its footprint checked against the display before anything is
        written.

        Args:
            char: Character to draw
            x: Column of the glyph's left edge
            y: Row of the glyph's top edge
            red: Red channel value
            green: Green channel value
            blue: Blue channel value

        Raises:
            UnknownGlyphError: If the font has no glyph for the character
            OutOfBoundsError: If a lit cell would land outside the display
        """
        glyph = self.get_glyph(char)
        for px, py in self._glyph_pixels(glyph, x, y):
            self.set_pixel(px, py, red, green, blue)

    def draw_text(
        self,
        text: str,
        x: int,
        y: int,
        red: int,
        green: int,
        blue: int,
        spacing: int = 1,
    ) -> int:
        """Draw a string left to right starting at (x, y).

        Every character is resolved and bounds checked first, so a failure
        leaves the buffer unchanged.

        Args:
            text: Text to draw
            x: Column of the first glyph's left edge
            y: Row of the glyphs' top edge
            red: Red channel value
            green: Green channel value
            blue: Blue channel value
            spacing: Blank columns between glyphs

        Returns:
            Column just past the last glyph and its trailing spacing

        Raises:
            UnknownGlyphError: If any character has no glyph
            OutOfBoundsError: If any lit cell would land outside the display
        """
        pixels = []
        cursor = x
        for char in text:
            glyph = self.get_glyph(char)
            pixels.extend(self._glyph_pixels(glyph, cursor, y))
            cursor += glyph.width + spacing

        for px, py in pixels:
            self.set_pixel(px, py, red, green, blue)

        return cursor

    def to_bytes(self) -> bytes:
        """Pack the buffer into bytes, wrapping each value modulo 256."""
        return pack_channels(self.data)

    def encode(self) -> str:
        """Encode the buffer as base64 pixel data for the device."""
        return encode_pixel_data(self.data)
