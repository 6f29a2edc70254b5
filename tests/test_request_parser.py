"""Unit tests for raw request parsing."""

import pytest

from minihttp.request_parser import (
    EmptyRequestError,
    HTTPParseError,
    InvalidRequestLineError,
    RequestParser,
)


def test_parse_request_line_and_headers() -> None:
    """Method, path and lowercased headers are extracted."""

    raw = b"GET /echo/abc HTTP/1.1\r\nHost: localhost:4221\r\nUser-Agent:  curl/8.0 \r\n\r\n"
    request = RequestParser.parse(raw)
    assert request.method == "GET"
    assert request.path == "/echo/abc"
    assert request.headers == {"host": "localhost:4221", "user-agent": "curl/8.0"}
    assert request.body is None


def test_header_value_split_on_first_colon_only() -> None:
    request = RequestParser.parse(b"GET / HTTP/1.1\r\nHost: example.com:8080\r\n\r\n")
    assert request.headers["host"] == "example.com:8080"


def test_header_on_second_line_is_parsed() -> None:
    """The first line after the request line is a header like any other."""

    request = RequestParser.parse(b"GET /user-agent HTTP/1.1\r\nUser-Agent: foo/1\r\n\r\n")
    assert request.headers["user-agent"] == "foo/1"


def test_last_duplicate_header_wins() -> None:
    raw = b"GET / HTTP/1.1\r\nX-Token: one\r\nx-token: two\r\n\r\n"
    assert RequestParser.parse(raw).headers["x-token"] == "two"


def test_lines_without_colon_are_ignored() -> None:
    raw = b"GET / HTTP/1.1\r\nnot-a-header\r\nAccept: */*\r\n\r\n"
    assert RequestParser.parse(raw).headers == {"accept": "*/*"}


def test_body_lines_are_not_headers() -> None:
    raw = b"POST /files/a.txt HTTP/1.1\r\nContent-Length: 8\r\n\r\nkey: val"
    request = RequestParser.parse(raw)
    assert "key" not in request.headers
    assert request.body == "key: val"


def test_post_body_is_last_line() -> None:
    raw = b"POST /files/a.txt HTTP/1.1\r\nContent-Length: 5\r\n\r\nhello"
    assert RequestParser.parse(raw).body == "hello"


def test_multi_line_body_keeps_only_last_line() -> None:
    raw = b"POST /files/a.txt HTTP/1.1\r\n\r\nfirst\r\nsecond"
    assert RequestParser.parse(raw).body == "second"


def test_trailing_null_padding_is_stripped() -> None:
    raw = b"POST /files/a.txt HTTP/1.1\r\n\r\nhello" + b"\0" * 32
    assert RequestParser.parse(raw).body == "hello"


def test_query_string_is_kept_in_path() -> None:
    assert RequestParser.parse(b"GET /echo/hi?x=1 HTTP/1.1\r\n\r\n").path == "/echo/hi?x=1"


def test_truncated_multibyte_character_does_not_fail() -> None:
    raw = "POST /files/a.txt HTTP/1.1\r\n\r\nhé".encode()[:-1]
    request = RequestParser.parse(raw)
    assert request.body.startswith("h")


def test_empty_request_raises() -> None:
    with pytest.raises(EmptyRequestError):
        RequestParser.parse(b"")


@pytest.mark.parametrize("raw", [b"GARBAGE\r\n\r\n", b" /\r\n\r\n", b"GET \r\n\r\n"])
def test_malformed_request_line_raises(raw: bytes) -> None:
    with pytest.raises(InvalidRequestLineError):
        RequestParser.parse(raw)


def test_parse_errors_share_base_class() -> None:
    assert issubclass(EmptyRequestError, HTTPParseError)
    assert issubclass(InvalidRequestLineError, HTTPParseError)
