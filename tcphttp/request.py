"""Incremental parsing of HTTP/1.1 requests from a byte stream."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field
from typing import Protocol

from .headers import Headers

CRLF = b"\r\n"
INITIAL_BUFFER_SIZE = 8

_CONTENT_LENGTH = re.compile(r"[+-]?[0-9]+")


class RequestError(ValueError):
    """Raised when a request is malformed."""


class IncompleteRequestError(RequestError):
    """Raised when the stream ends before the request is complete."""


class ParserState(enum.Enum):
    INITIALIZED = enum.auto()
    PARSING_HEADERS = enum.auto()
    PARSING_BODY = enum.auto()
    DONE = enum.auto()


@dataclass(frozen=True)
class RequestLine:
    method: str
    request_target: str
    http_version: str


class _Reader(Protocol):
    def read(self, size: int) -> bytes: ...


def parse_request_line(data: bytes) -> tuple[RequestLine | None, int]:
    """Parse the request line at the start of *data*.

    Returns the request line and the bytes consumed, or ``(None, 0)`` when
    no complete line is available yet.
    """
    data = bytes(data)
    end = data.find(CRLF)
    if end == -1:
        return None, 0

    parts = data[:end].decode("utf-8", "replace").split(" ")
    if len(parts) != 3:
        raise RequestError("bad request line")
    method, target, version = parts
    if not _is_upper(method):
        raise RequestError("invalid method")
    if version != "HTTP/1.1":
        raise RequestError("invalid http version")

    return RequestLine(method=method, request_target=target, http_version="1.1"), end + len(CRLF)


def _is_upper(text: str) -> bool:
    return not any(ch.isalpha() and not ch.isupper() for ch in text)


def _content_length(raw: str) -> int:
    if not _CONTENT_LENGTH.fullmatch(raw):
        raise RequestError("malformed content-length header")
    return int(raw)


@dataclass
class Request:
    """An HTTP request, filled in as bytes are fed to it."""

    request_line: RequestLine | None = None
    headers: Headers = field(default_factory=Headers)
    state: ParserState = ParserState.INITIALIZED
    body: bytes = b""

    @property
    def done(self) -> bool:
        """Whether the whole request has been parsed."""
        return self.state is ParserState.DONE

    def feed(self, data: bytes) -> int:
        """Parse as much of *data* as possible and return the bytes consumed."""
        data = bytes(data)
        consumed = 0
        while not self.done:
            n = self._parse_single(data[consumed:])
            consumed += n
            if n == 0:
                break
        return consumed

    def _parse_single(self, data: bytes) -> int:
        if self.state is ParserState.INITIALIZED:
            line, n = parse_request_line(data)
            if line is None:
                return 0
            self.request_line = line
            self.state = ParserState.PARSING_HEADERS
            return n

        if self.state is ParserState.PARSING_HEADERS:
            n, finished = self.headers.parse(data)
            if finished:
                self.state = ParserState.PARSING_BODY
            return n

        if self.state is ParserState.PARSING_BODY:
            raw = self.headers.get("Content-Length")
            if raw is None:
                self.state = ParserState.DONE
                return 0
            length = _content_length(raw)
            self.body += data
            if len(self.body) > length:
                raise RequestError("request body size exceeds content length")
            if len(self.body) == length:
                self.state = ParserState.DONE
            return len(data)

        raise RequestError("trying to read data in a done state")


def request_from_reader(reader: _Reader) -> Request:
    """Read and parse one request from *reader*.

    *reader* has a ``read(size)`` method returning at most *size* bytes and
    an empty result at end of stream.
    """
    request = Request()
    pending = bytearray()
    capacity = INITIAL_BUFFER_SIZE
    while not request.done:
        if len(pending) >= capacity:
            capacity *= 2
        chunk = reader.read(capacity - len(pending))
        if not chunk:
            raise IncompleteRequestError("incomplete request")
        pending += chunk
        consumed = request.feed(pending)
        del pending[:consumed]
    return request