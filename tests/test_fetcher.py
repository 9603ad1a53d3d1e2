from unittest.mock import patch

import requests

import fetcher


def test_success_returns_body_verbatim(make_response):
    with patch("requests.get", return_value=make_response(200, b"hello\nworld")) as mock_get:
        status, message = fetcher.fetch_file_content("http://files.test/")

    assert status is True
    assert message == "hello\nworld"
    mock_get.assert_called_once_with("http://files.test/api/file", timeout=None)


def test_error_status_reports_code_and_reason(make_response):
    with patch("requests.get", return_value=make_response(404, b'{"error": "File not found."}', "Not Found")):
        status, message = fetcher.fetch_file_content("http://files.test")

    assert status is False
    assert message == "Failed to load file: 404 Not Found"


def test_server_error_status(make_response):
    with patch("requests.get", return_value=make_response(500, reason="Internal Server Error")):
        status, message = fetcher.fetch_file_content("http://files.test")

    assert status is False
    assert "500" in message


def test_network_exception_is_reported():
    with patch("requests.get", side_effect=requests.ConnectionError("connection refused")):
        status, message = fetcher.fetch_file_content("http://files.test")

    assert status is False
    assert message == "connection refused"


def test_store_success_sets_content_and_clears_error():
    state = {"content": None, "error": "old"}

    fetcher.store_fetch_result(state, True, "hello\nworld")
    assert state == {"content": "hello\nworld", "error": None}


def test_store_failure_keeps_content():
    state = {"content": "previous", "error": None}

    fetcher.store_fetch_result(state, False, "Failed to load file: 404 Not Found")
    assert state == {"content": "previous", "error": "Failed to load file: 404 Not Found"}


def test_store_writes_only_viewer_keys():
    state = {"initialized": True}

    fetcher.store_fetch_result(state, True, "text")
    assert set(state) == {"initialized", "content", "error"}
