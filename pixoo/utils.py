"""
Utility functions for the Pixoo client library.
"""

import base64
from typing import Iterable

import requests
from urllib3.util.retry import Retry
from requests.adapters import HTTPAdapter


def narrow_to_byte(value: int) -> int:
    """Narrow an integer to a single byte.

    Values outside 0-255 wrap around (256 -> 0, -1 -> 255) the same way an
    integer truncated to 8 bits does. The device expects exactly this, so
    out-of-range channel values are not clamped.

    Args:
        value: Channel value of any size

    Returns:
        The value modulo 256
    """
    return value % 256


def pack_channels(values: Iterable[int]) -> bytes:
    """Narrow every channel value and pack them in order."""
    return bytes(narrow_to_byte(value) for value in values)


def encode_pixel_data(values: Iterable[int]) -> str:
    """Encode channel values as the base64 text the device expects.

    Args:
        values: Flat sequence of channel values (r, g, b, r, g, b, ...)

    Returns:
        Standard base64 with padding and no line breaks
    """
    return base64.b64encode(pack_channels(values)).decode("ascii")


class RequestsRetrySession:
    """Creates a requests session with retry capabilities."""

    @staticmethod
    def create(retries: int = 3, backoff_factor: float = 0.3) -> requests.Session:
        """Create a requests session with retry configuration.

        Only failures to connect are retried. Every device command is a
        POST, so once the request body has gone out it is never replayed,
        whatever status the device answers with.

        Args:
            retries: Number of retry attempts
            backoff_factor: Backoff factor between retries

        Returns:
            Configured requests.Session object
        """
        session = requests.Session()
        retry = Retry(
            total=retries,
            read=0,
            connect=retries,
            status=0,
            backoff_factor=backoff_factor,
        )
        adapter = HTTPAdapter(max_retries=retry)
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        return session
