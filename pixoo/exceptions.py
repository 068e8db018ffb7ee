"""
Exception classes for the Pixoo client library.
"""


class PixooError(Exception):
    """Base exception for Pixoo errors."""

    pass


class UnknownGlyphError(PixooError, KeyError):
    """Raised when a character has no bitmap in the glyph table."""

    def __init__(self, char: str):
        super().__init__(char)
        self.char = char

    def __str__(self) -> str:
        return f"No glyph for character {self.char!r}"


class OutOfBoundsError(PixooError, IndexError):
    """Raised when a coordinate falls outside the display."""

    pass


class EncodingError(PixooError):
    """Raised when a command cannot be serialized for the device."""

    pass


class TransmissionError(PixooError):
    """Raised when a command could not be delivered to the device."""

    pass


class ConfigError(PixooError):
    """Raised when required configuration is missing or malformed."""

    pass
