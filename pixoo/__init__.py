"""
Pixoo Client Library
====================

A Python library for drawing on Divoom Pixoo pixel displays over their local
HTTP API.

This library allows you to:
- Paint individual pixels and fill the whole display
- Render text with a built-in 3x5 bitmap font
- Push the frame buffer to the device as a single-frame image
- Control brightness and screen power
"""

__version__ = "0.1.0"

# Export public API
from .client import PixooClient
from .buffer import FrameBuffer
from .config import PixooConfig, load_config
from .exceptions import (
    PixooError,
    UnknownGlyphError,
    OutOfBoundsError,
    EncodingError,
    TransmissionError,
    ConfigError,
)
from .fonts import GLYPHS, Glyph
from .transport import HttpTransport

__all__ = [
    "PixooClient",
    "FrameBuffer",
    "PixooConfig",
    "load_config",
    "PixooError",
    "UnknownGlyphError",
    "OutOfBoundsError",
    "EncodingError",
    "TransmissionError",
    "ConfigError",
    "GLYPHS",
    "Glyph",
    "HttpTransport",
]
