import io

import pytest

from tcphttp.headers import HeaderError
from tcphttp.request import (
    IncompleteRequestError,
    ParserState,
    Request,
    RequestError,
    RequestLine,
    parse_request_line,
    request_from_reader,
)

STANDARD = "GET / HTTP/1.1\r\nHost: localhost:42069\r\nUser-Agent: curl/7.81.0\r\nAccept: */*\r\n\r\n"


class ChunkReader:
    """Hands out the data a few bytes at a time, like a slow connection."""

    def __init__(self, data, per_read):
        self._data = data.encode()
        self._per_read = per_read
        self._pos = 0

    def read(self, size):
        chunk = self._data[self._pos:self._pos + min(size, self._per_read)]
        self._pos += len(chunk)
        return chunk


def _read(data, per_read):
    return request_from_reader(ChunkReader(data, per_read))


def test_good_get_request_line():
    r = _read(STANDARD, 1)
    assert r.request_line == RequestLine("GET", "/", "1.1")


def test_good_get_request_line_with_path():
    r = _read(
        "GET /coffee HTTP/1.1\r\nHost: localhost:42069\r\nUser-Agent: curl/7.81.0\r\nAccept: */*\r\n\r\n",
        1024,
    )
    assert r.request_line.method == "GET"
    assert r.request_line.request_target == "/coffee"
    assert r.request_line.http_version == "1.1"


@pytest.mark.parametrize(
    ("data", "per_read"),
    [
        ("/coffee HTTP/1.1\r\nHost: localhost:42069\r\nUser-Agent: curl/7.81.0\r\nAccept: */*\r\n\r\n", 1024),
        ("GET /coffee HTTP/1.1 POST\r\nHost: localhost:42069\r\nUser-Agent: curl/7.81.0\r\nAccept: */*\r\n\r\n", 1024),
        ("/coffee HTTP/1.1 GET\r\nHost: localhost:42069\r\nUser-Agent: curl/7.81.0\r\nAccept: */*\r\n\r\n", 1024),
        ("GET /coffee HTTP/2.0\r\nHost: localhost:42069\r\nUser-Agent: curl/7.81.0\r\nAccept: */*\r\n\r\n", 40),
    ],
)
def test_bad_request_lines(data, per_read):
    with pytest.raises(RequestError):
        _read(data, per_read)


def test_good_get_request_line_with_larger_read_size():
    r = _read(STANDARD, 8)
    assert r.request_line == RequestLine("GET", "/", "1.1")


@pytest.mark.parametrize("per_read", [1024, 1])
def test_standard_headers(per_read):
    r = _read(STANDARD, per_read)
    assert r.headers["host"] == "localhost:42069"
    assert r.headers["user-agent"] == "curl/7.81.0"
    assert r.headers["accept"] == "*/*"


def test_empty_headers():
    r = _read("GET / HTTP/1.1\r\n\r\n", 8)
    assert r.request_line is not None
    assert r.headers == {}
    assert r.state is ParserState.DONE


def test_malformed_headers():
    with pytest.raises(HeaderError):
        _read(
            "GET / HTTP/1.1\r\nHost: localhost:42068\r\nUser-Agent : curl/7.81.0\r\nAccept: */*\r\n\r\n",
            1,
        )


def test_duplicate_headers():
    r = _read("GET / HTTP/1.1\r\nHost: localhost:42069\r\nHost: anotherHost:8080\r\nAccept: */*\r\n\r\n", 8)
    assert r.headers["host"] == "localhost:42069, anotherHost:8080"
    assert r.headers["accept"] == "*/*"


def test_case_insensitive_headers():
    r = _read("GET / HTTP/1.1\r\nSet-Person: eli\r\nset-PeRsoN: vika\r\naCcEpT: */*\r\n\r\n", 8)
    assert r.headers["set-person"] == "eli, vika"
    assert r.headers["accept"] == "*/*"


def test_missing_crlf_at_end_of_headers():
    with pytest.raises(IncompleteRequestError) as excinfo:
        _read("GET / HTTP/1.1\r\nSet-Person: eli\r\nset-PeRsoN: vika\r\naCcEpT: */*\r\n", 8)
    assert str(excinfo.value) == "incomplete request"


def test_standard_body():
    r = _read(
        "POST /submit HTTP/1.1\r\nHost: localhost:42069\r\nContent-Length: 13\r\n\r\nhello world!\n",
        3,
    )
    assert r.body == b"hello world!\n"


@pytest.mark.parametrize(
    "data",
    [
        "POST /submit HTTP/1.1\r\nHost: localhost:42069\r\nContent-Length: 20\r\n\r\npartial content",
        "POST /submit HTTP/1.1\r\nHost: localhost:42069\r\nContent-Length: 10\r\n\r\nshort",
    ],
)
def test_body_shorter_than_content_length(data):
    with pytest.raises(IncompleteRequestError):
        _read(data, 3)


def test_empty_body_with_zero_content_length():
    r = _read("POST /submit HTTP/1.1\r\nHost: localhost:42069\r\nContent-Length: 0\r\n\r\n", 3)
    assert r.body == b""


def test_empty_body_without_content_length():
    r = _read("POST /submit HTTP/1.1\r\nHost: localhost:42069\r\n\r\n", 3)
    assert r.body == b""


def test_body_longer_than_content_length():
    with pytest.raises(RequestError) as excinfo:
        _read(
            "POST /submit HTTP/1.1\r\nHost: localhost:42069\r\nContent-Length: 10\r\n\r\n"
            "way longer body than reported\n",
            3,
        )
    assert str(excinfo.value) == "request body size exceeds content length"


def test_body_without_content_length_is_ignored():
    r = _read(
        "POST /submit HTTP/1.1\r\nHost: localhost:42069\r\n\r\nway longer body than reported\n",
        3,
    )
    assert r.body == b""


def test_malformed_content_length():
    with pytest.raises(RequestError) as excinfo:
        _read("POST / HTTP/1.1\r\nContent-Length: ten\r\n\r\n", 64)
    assert str(excinfo.value) == "malformed content-length header"


def test_reads_from_bytesio():
    r = request_from_reader(io.BytesIO(STANDARD.encode()))
    assert r.headers["accept"] == "*/*"


def test_parse_request_line_incomplete():
    assert parse_request_line(b"GET / HTTP/1.1") == (None, 0)


def test_parse_request_line_consumes_line():
    line, n = parse_request_line(b"GET /coffee HTTP/1.1\r\nHost: x\r\n")
    assert line == RequestLine("GET", "/coffee", "1.1")
    assert n == len(b"GET /coffee HTTP/1.1\r\n")


def test_parse_request_line_lowercase_method():
    with pytest.raises(RequestError) as excinfo:
        parse_request_line(b"get / HTTP/1.1\r\n")
    assert str(excinfo.value) == "invalid method"


def test_feed_incrementally():
    request = Request()
    assert request.feed(b"GET / HT") == 0
    assert request.state is ParserState.INITIALIZED
    assert request.feed(b"GET / HTTP/1.1\r\nHost: a\r\n") == len(b"GET / HTTP/1.1\r\nHost: a\r\n")
    assert request.state is ParserState.PARSING_HEADERS
    assert request.feed(b"\r\n") == 2
    assert request.done is True
    assert request.feed(b"more") == 0