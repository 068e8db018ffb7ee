"""
Configuration loading for the Pixoo client library.

Settings come from the environment, optionally seeded from a ``.env`` file:

    PIXOO_ADDRESS=192.168.1.50
    PIXOO_SIZE=64
    PIXOO_TIMEOUT=5
    PIXOO_MAX_RETRIES=3
"""

import os
from dataclasses import dataclass
from typing import Callable, Optional, TypeVar

from dotenv import find_dotenv, load_dotenv

from .exceptions import ConfigError

SUPPORTED_SIZES = (16, 32, 64)

T = TypeVar("T")


@dataclass
class PixooConfig:
    """Connection settings for a single device."""

    address: str
    size: int = 64
    timeout: float = 5.0
    max_retries: int = 3

    def validate(self) -> None:
        """Validate the settings."""
        if not self.address:
            raise ConfigError("Device address is required")

        if self.size not in SUPPORTED_SIZES:
            raise ConfigError(
                f"Unsupported display size {self.size}, expected one of {SUPPORTED_SIZES}"
            )

        if self.timeout <= 0:
            raise ConfigError(f"Timeout must be positive, got {self.timeout}")

        if self.max_retries < 0:
            raise ConfigError(
                f"Max retries cannot be negative, got {self.max_retries}"
            )


def _read(name: str, convert: Callable[[str], T], default: T) -> T:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default

    try:
        return convert(raw.strip())
    except ValueError as e:
        raise ConfigError(f"Invalid value for {name}: {raw!r}") from e


def load_config(dotenv_path: Optional[str] = None) -> PixooConfig:
    """Load device settings from the environment.

    Args:
        dotenv_path: Optional path to a .env file (default: search upwards
            from the working directory)

    Returns:
        Validated PixooConfig

    Raises:
        ConfigError: If PIXOO_ADDRESS is missing or a value is malformed
    """
    load_dotenv(dotenv_path or find_dotenv(usecwd=True))

    address = os.getenv("PIXOO_ADDRESS", "").strip()
    if not address:
        raise ConfigError("PIXOO_ADDRESS must be set in the environment or .env file")

    config = PixooConfig(
        address=address,
        size=_read("PIXOO_SIZE", int, 64),
        timeout=_read("PIXOO_TIMEOUT", float, 5.0),
        max_retries=_read("PIXOO_MAX_RETRIES", int, 3),
    )
    config.validate()
    return config
