"""
Main PixooClient for the Pixoo client library.
"""

import logging
import threading
from typing import Any, Dict, Optional, Tuple

from .buffer import FrameBuffer
from .config import PixooConfig
from .transport import HttpTransport

logger = logging.getLogger("pixoo")

PIC_NUM = 1
PIC_OFFSET = 0
PIC_SPEED = 1000
MAX_BRIGHTNESS = 100


class PixooClient:
    """Client for drawing on and pushing frames to a Pixoo device.

    Drawing calls only touch the local frame buffer. ``push`` sends the whole
    buffer to the device as a single-frame image tagged with a frame id that
    goes up by one on every push, whether or not the send succeeds. A retried
    push therefore never reuses an id the device may already have seen.
    """

    def __init__(
        self,
        address: str,
        size: int,
        transport: Optional[Any] = None,
        timeout: float = 5.0,
        max_retries: int = 3,
    ):
        """Initialize the client with a zeroed buffer.

        Args:
            address: IP address (or host:port) of the device
            size: Side length of the display, e.g. 16, 32 or 64
            transport: Object with a send(command) method (default: HttpTransport)
            timeout: Request timeout in seconds for the default transport
            max_retries: Connection retries for the default transport
        """
        self.address = address
        self.size = size
        self.buffer = FrameBuffer(size)
        self.frame_counter = 1
        if transport is None:
            transport = HttpTransport(address, timeout=timeout, max_retries=max_retries)
        self.transport = transport
        self._lock = threading.RLock()

    @classmethod
    def from_config(
        cls, config: PixooConfig, transport: Optional[Any] = None
    ) -> "PixooClient":
        """Create a client from loaded configuration."""
        return cls(
            config.address,
            config.size,
            transport=transport,
            timeout=config.timeout,
            max_retries=config.max_retries,
        )

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def close(self) -> None:
        """Release the transport's resources, if it holds any."""
        close = getattr(self.transport, "close", None)
        if close is not None:
            close()

    # Drawing

    @property
    def pixel_count(self) -> int:
        """Number of pixels on the display."""
        return self.buffer.pixel_count

    def index(self, x: int, y: int) -> int:
        """Offset of a pixel's red channel in the buffer."""
        return self.buffer.index(x, y)

    def set_pixel(self, x: int, y: int, red: int, green: int, blue: int) -> None:
        """Set the color of a pixel at a given coordinate.

        Raises:
            OutOfBoundsError: If the coordinate is outside the display
        """
        with self._lock:
            self.buffer.set_pixel(x, y, red, green, blue)

    def get_pixel(self, x: int, y: int) -> Tuple[int, int, int]:
        with self._lock:
            return self.buffer.get_pixel(x, y)

    def fill(self, red: int, green: int, blue: int) -> None:
        """Fill the entire display with the given color."""
        with self._lock:
            self.buffer.fill(red, green, blue)

    def clear(self) -> None:
        with self._lock:
            self.buffer.clear()

    def draw_character(
        self, char: str, x: int, y: int, red: int, green: int, blue: int
    ) -> None:
        """Draw a character at the given position.

        Raises:
            UnknownGlyphError: If the font has no glyph for the character
            OutOfBoundsError: If the glyph would extend past the display
        """
        with self._lock:
            self.buffer.draw_character(char, x, y, red, green, blue)

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
        """Draw a string at the given position.

        Returns:
            Column just past the drawn text
        """
        with self._lock:
            return self.buffer.draw_text(text, x, y, red, green, blue, spacing)

    # Device commands

    def build_frame_command(self) -> Dict[str, Any]:
        """Build the command that displays the current buffer.

        Uses the current frame id without advancing it.
        """
        with self._lock:
            return {
                "Command": "Draw/SendHttpGif",
                "PicNum": PIC_NUM,
                "PicWidth": self.size,
                "PicOffset": PIC_OFFSET,
                "PicID": self.frame_counter,
                "PicSpeed": PIC_SPEED,
                "PicData": self.buffer.encode(),
            }

    def push(self) -> Dict[str, Any]:
        """Send the buffer to the device.

        The frame id is advanced before sending and is not rolled back if
        the send fails.

        Returns:
            The command that was sent

        Raises:
            EncodingError: If the command cannot be serialized
            TransmissionError: If the device could not be reached
        """
        with self._lock:
            command = self.build_frame_command()
            self.frame_counter += 1
            logger.debug(f"Pushing frame {command['PicID']} to {self.address}")
            self.transport.send(command)
            return command

    def _send(self, command: Dict[str, Any]) -> None:
        logger.info(f"{command['Command']} -> {self.address}")
        self.transport.send(command)

    def set_brightness(self, brightness: int) -> None:
        """Change the brightness of the display.

        Args:
            brightness: Level from 0 to 100

        Raises:
            ValueError: If the level is out of range
        """
        if not 0 <= brightness <= MAX_BRIGHTNESS:
            raise ValueError(
                f"Brightness must be between 0 and {MAX_BRIGHTNESS}, got {brightness}"
            )

        self._send({"Command": "Channel/SetBrightness", "Brightness": brightness})

    def set_power(self, on: bool) -> None:
        """Turn the screen on (True) or off (False)."""
        self._send({"Command": "Channel/OnOffScreen", "OnOff": 1 if on else 0})

    def turn_on(self) -> None:
        self.set_power(True)

    def turn_off(self) -> None:
        self.set_power(False)

    def reset(self) -> None:
        """Reset the device's image id tracking and clear what it is showing.

        The local frame counter keeps counting from where it was.
        """
        self._send({"Command": "Draw/ResetHttpGifId"})
