"""Tests for the HTTP transport and retrying session."""

import json
from unittest import mock

import pytest
import requests

from pixoo.exceptions import EncodingError, TransmissionError
from pixoo.transport import HttpTransport
from pixoo.utils import RequestsRetrySession, encode_pixel_data, narrow_to_byte


def make_response(status=200, body=b'{"error_code": 0}'):
    response = requests.Response()
    response.status_code = status
    response._content = body
    response.url = "http://10.0.0.5/post"
    return response


@pytest.fixture
def http():
    return HttpTransport("10.0.0.5", timeout=3.0)


def test_send_posts_json(http):
    command = {"Command": "Channel/SetBrightness", "Brightness": 50}

    with mock.patch.object(http.session, "post", return_value=make_response()) as post:
        result = http.send(command)

    assert result == {"error_code": 0}
    post.assert_called_once()
    args, kwargs = post.call_args
    assert args == ("http://10.0.0.5/post",)
    assert json.loads(kwargs["data"]) == command
    assert kwargs["headers"]["Content-Type"] == "application/json"
    assert kwargs["timeout"] == 3.0


def test_send_returns_none_for_non_json_body(http):
    with mock.patch.object(
        http.session, "post", return_value=make_response(body=b"OK")
    ):
        assert http.send({"Command": "Draw/ResetHttpGifId"}) is None


def test_connection_error_becomes_transmission_error(http):
    with mock.patch.object(
        http.session, "post", side_effect=requests.ConnectionError("refused")
    ):
        with pytest.raises(TransmissionError) as excinfo:
            http.send({"Command": "Draw/ResetHttpGifId"})

    assert isinstance(excinfo.value.__cause__, requests.ConnectionError)


def test_error_status_becomes_transmission_error(http):
    with mock.patch.object(
        http.session, "post", return_value=make_response(status=500, body=b"")
    ):
        with pytest.raises(TransmissionError):
            http.send({"Command": "Draw/ResetHttpGifId"})


@pytest.mark.parametrize("bad_value", [object(), float("nan"), b"bytes"])
def test_unserializable_command_is_not_sent(http, bad_value):
    with mock.patch.object(http.session, "post") as post:
        with pytest.raises(EncodingError):
            http.send({"Command": "Channel/SetBrightness", "Brightness": bad_value})

    post.assert_not_called()


def test_close_closes_session(http):
    with mock.patch.object(http.session, "close") as close:
        http.close()
    close.assert_called_once()


def test_injected_session_is_used():
    session = requests.Session()
    http = HttpTransport("10.0.0.5:8080", session=session)

    assert http.session is session
    assert http.url == "http://10.0.0.5:8080/post"


def test_retry_session_does_not_replay_reads():
    session = RequestsRetrySession.create(retries=2)
    retry = session.get_adapter("http://10.0.0.5/post").max_retries

    assert retry.connect == 2
    assert retry.read == 0
    assert retry.status == 0
    assert not retry.status_forcelist


@pytest.mark.parametrize(
    "value,expected", [(0, 0), (1, 1), (255, 255), (256, 0), (-1, 255), (511, 255)]
)
def test_narrow_to_byte(value, expected):
    assert narrow_to_byte(value) == expected


def test_encode_pixel_data_is_standard_base64():
    assert encode_pixel_data([255, 255, 255, 0]) == "////AA=="
    assert "\n" not in encode_pixel_data([7] * 3 * 64 * 64)
