"""
HTTP transport for sending JSON commands to a Pixoo device.
"""

import json
import logging
from typing import Any, Dict, Optional

import requests

from .exceptions import EncodingError, TransmissionError
from .utils import RequestsRetrySession

logger = logging.getLogger("pixoo.transport")


class HttpTransport:
    """Posts JSON command objects to a device's ``/post`` endpoint."""

    def __init__(
        self,
        address: str,
        timeout: float = 5.0,
        max_retries: int = 3,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the transport.

        Args:
            address: Host (optionally host:port) of the device
            timeout: Seconds to wait for the device to answer
            max_retries: Connection retries for the underlying session
            session: Pre-configured session to use instead of creating one
        """
        self.address = address
        self.url = f"http://{address}/post"
        self.timeout = timeout
        self.headers = {"Content-Type": "application/json"}
        self.session = session or RequestsRetrySession.create(retries=max_retries)

    def serialize(self, command: Dict[str, Any]) -> str:
        """Serialize a command object to JSON.

        Raises:
            EncodingError: If the command contains values JSON cannot represent
        """
        try:
            return json.dumps(command, allow_nan=False)
        except (TypeError, ValueError) as e:
            raise EncodingError(f"Failed to serialize command: {str(e)}") from e

    def send(self, command: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Send a command to the device.

        Args:
            command: Flat mapping with a "Command" field and its arguments

        Returns:
            Decoded JSON response, or None if the body is not JSON

        Raises:
            EncodingError: If the command cannot be serialized; nothing is sent
            TransmissionError: If the request fails or the device answers
                with an error status
        """
        payload = self.serialize(command)
        name = command.get("Command")
        logger.debug(f"Sending {name} to {self.address} ({len(payload)} bytes)")

        try:
            response = self.session.post(
                self.url, data=payload, headers=self.headers, timeout=self.timeout
            )
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Failed to send {name} to {self.address}: {str(e)}")
            raise TransmissionError(f"Failed to send {name}: {str(e)}") from e

        try:
            return response.json()
        except ValueError:
            return None

    def close(self) -> None:
        self.session.close()
