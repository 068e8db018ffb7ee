"""Shared fixtures for the Pixoo client tests."""

import pytest

from pixoo import PixooClient, TransmissionError


class RecordingTransport:
    """Stands in for HttpTransport and keeps every command it is given."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.commands = []
        self.closed = False

    def send(self, command):
        self.commands.append(command)
        if self.fail:
            raise TransmissionError("device unreachable")
        return {"error_code": 0}

    def close(self):
        self.closed = True


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def failing_transport():
    return RecordingTransport(fail=True)


@pytest.fixture
def client(transport):
    """Create a 16x16 client wired to a recording transport."""
    return PixooClient("10.0.0.5", 16, transport=transport)
