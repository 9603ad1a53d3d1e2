import logging
import uuid

import pytest
import requests


@pytest.fixture
def test_log(caplog) -> logging.Logger:
    """A propagating logger, so that `caplog` sees what the server logs."""
    name = f"test_file_server_{uuid.uuid4().hex[:8]}"
    caplog.set_level(logging.DEBUG, logger=name)
    return logging.getLogger(name)


@pytest.fixture
def text_file(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_bytes(b"first line\nsecond line\n")
    return path


@pytest.fixture
def make_response():
    """Factory for real `requests.Response` objects, as returned by `requests.get`."""

    def _make(status_code: int, body: bytes = b"", reason: str = "OK") -> requests.Response:
        response = requests.Response()
        response.status_code = status_code
        response.reason = reason
        response._content = body
        response.encoding = "utf-8"
        return response

    return _make
